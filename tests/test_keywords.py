import pytest

from seo.keywords import (
    STOP_WORDS, SYNONYMS, clean_search_term, meaningful_words,
    slugify_keyword, strip_emoji_word, title_case,
)


@pytest.mark.parametrize('keyword, slug', [
    ('Happy Face!!', 'happy-face'),
    ('happy face', 'happy-face'),
    ('  crying emoji  ', 'crying-emoji'),
    ('fire emoji 100 times', 'fire-emoji-100-times'),
    ("I'm so happy :)", 'i-m-so-happy'),
    ('--love--', 'love'),
])
def test_slugify_keyword(keyword, slug):
    assert slugify_keyword(keyword) == slug


def test_slugify_keyword_without_letters_or_digits_is_empty():
    assert slugify_keyword('😂😂') == ''
    assert slugify_keyword('!!!') == ''


def test_title_case_only_touches_first_letters():
    assert title_case('fire emoji') == 'Fire Emoji'
    assert title_case('i miss you emoji') == 'I Miss You Emoji'
    assert title_case('iPhone heart emoji') == 'IPhone Heart Emoji'


@pytest.mark.parametrize('keyword, term', [
    ('fire emoji', 'fire'),
    ('Fire Emoji', 'Fire'),
    ('heart emojis', 'heart'),
    ('love emoji 5 times', 'love'),
    ('fire emoji 1 time', 'fire'),
    ('laugh emoji 100 TIMES', 'laugh'),
    ('100 heart emojis', '100 heart'),
    ('emoji', ''),
    ('broken heart', 'broken heart'),
    ('heartemoji', 'heart'),
    ('fireemoji 3 times', 'fire'),
])
def test_clean_search_term(keyword, term):
    assert clean_search_term(keyword) == term


def test_strip_emoji_word_keeps_other_words():
    assert strip_emoji_word('i love you emoji') == 'i love you'
    assert strip_emoji_word('redheartemojis') == 'redheart'


def test_meaningful_words_drops_stop_words_case_insensitively():
    assert meaningful_words('I miss you so Much') == ['miss', 'Much']


def test_tables_are_normalized():
    assert all(word == word.lower() for word in STOP_WORDS)
    assert all(word == word.lower() for word in SYNONYMS)
    assert SYNONYMS['laugh'] == ('laugh', 'lol', 'funny', 'joy')
