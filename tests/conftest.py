"""
Shared fixtures. The `catalog` fixture builds a small emoji catalog in the
test database; `make_emoji` builds unsaved records for the pure text
generators.
"""
import pytest
from django.core.cache import cache

from catalog.models import Emoji


@pytest.fixture(autouse=True)
def clear_ratelimit_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_emoji():
    def _make(emoji, name, keywords='', description=None, category='Smileys & Emotion'):
        return Emoji(
            emoji=emoji,
            name=name,
            slug=name.lower().replace(' ', '-'),
            category=category,
            keywords=keywords,
            description=description,
        )
    return _make


CATALOG_ROWS = [
    # emoji, name, slug, category, keywords, description
    ('🔥', 'Fire', 'fire', 'Travel & Places', 'hot, flame, lit', 'Something hot or lit.'),
    ('❤️', 'Red Heart', 'red-heart', 'Smileys & Emotion', 'love, heart, romance', 'The classic symbol of love.'),
    ('💖', 'Sparkling Heart', 'sparkling-heart', 'Smileys & Emotion', 'love, heart, sparkle', None),
    ('😢', 'Crying Face', 'crying-face', 'Smileys & Emotion', 'cry, sad, tear', 'A single tear.'),
    ('😂', 'Joy', 'joy', 'Smileys & Emotion', '', 'Tears of joy.'),
    ('🐶', 'Dog Face', 'dog-face', 'Animals & Nature', 'puppy, pet', 'A cute puppy face.'),
]


@pytest.fixture
def catalog(db):
    emojis = []
    for emoji, name, slug, category, keywords, description in CATALOG_ROWS:
        emojis.append(Emoji.objects.create(
            emoji=emoji,
            name=name,
            slug=slug,
            category=category,
            keywords=keywords,
            description=description,
        ))
    return emojis


@pytest.fixture
def fake_search():
    """
    A search callable backed by a dict of term -> results that records the
    terms it was asked for.
    """
    class FakeSearch:
        def __init__(self):
            self.results = {}
            self.calls = []

        def __call__(self, term):
            self.calls.append(term)
            return list(self.results.get(term, []))

    return FakeSearch()
