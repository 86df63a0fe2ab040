import pytest

from seo.generation import (
    add_keywords, build_page_fields, delete_all_pages, generate_catalog_pages,
    generate_page, generate_pending_pages,
)
from seo.models import EmojiPage

pytestmark = pytest.mark.django_db


def test_build_page_fields_for_fire_emoji(catalog):
    fields = build_page_fields('fire emoji')

    assert fields['related_emojis'] == ['🔥']
    assert fields['title'] == '🔥 Fire Emoji - Copy & Paste 🔥'
    assert fields['meta_description'].startswith('🔥 Copy and paste fire emoji instantly!')
    assert fields['meta_description'].endswith('and more. 🔥')
    assert fields['copyable_text'] == '🔥'
    assert '## Popular Fire Emojis' in fields['content']
    assert fields['is_generated'] is True


def test_title_uses_first_three_related(catalog):
    fields = build_page_fields('love emoji')
    assert fields['title'].startswith('❤️💖 Love Emoji')


def test_generate_page_creates_generated_page(catalog):
    page, created = generate_page('laugh emoji 3 times')

    assert created is True
    assert page.slug == 'laugh-emoji-3-times'
    assert page.keyword == 'laugh emoji 3 times'
    assert page.is_generated is True
    assert page.related_emojis == ['😂']
    assert page.copyable_text == '😂 😂 😂'


def test_generate_page_without_matches(catalog):
    page, created = generate_page('xyzzy123')

    assert created is True
    assert page.related_emojis == []
    assert page.copyable_text is None
    assert page.title == 'Xyzzy123 - Copy & Paste'
    assert 'Related emojis include' not in page.content
    assert page.content.startswith('# Xyzzy123 - Copy & Paste')


def test_generate_page_is_idempotent(catalog):
    first, created = generate_page('Happy Face!!')
    second, created_again = generate_page('happy face')

    assert created is True
    assert created_again is False
    assert first.pk == second.pk
    assert second.slug == 'happy-face'
    assert second.title == first.title
    assert second.related_emojis == first.related_emojis
    assert EmojiPage.objects.count() == 1


def test_generated_page_without_copyable_text_is_not_regenerated(catalog):
    page, _ = generate_page('xyzzy123')
    EmojiPage.objects.filter(pk=page.pk).update(content='edited by hand')

    again, created = generate_page('xyzzy123')

    assert created is False
    assert again.content == 'edited by hand'


def test_force_regenerates(catalog):
    page, _ = generate_page('fire emoji')
    EmojiPage.objects.filter(pk=page.pk).update(title='old title')

    again, created = generate_page('fire emoji', force=True)

    assert created is False
    assert again.pk == page.pk
    assert again.title == '🔥 Fire Emoji - Copy & Paste 🔥'


def test_generate_page_fills_pending_stub(catalog):
    add_keywords(['fire emoji'])
    stub = EmojiPage.objects.get(slug='fire-emoji')
    assert stub.is_generated is False

    page, created = generate_page('fire emoji')

    assert created is False
    assert page.pk == stub.pk
    assert page.is_generated is True


def test_generate_page_rejects_keyword_without_slug(catalog):
    with pytest.raises(ValueError):
        generate_page('😂😂😂')


def test_add_keywords_dedupes(catalog):
    generate_page('fire emoji')

    summary = add_keywords(['  heart emoji ', 'Heart Emoji!', '', 'fire emoji', '!!!', 'cry emoji'])

    assert summary == {'added': 2, 'skipped': 3, 'total': 5}
    heart = EmojiPage.objects.get(slug='heart-emoji')
    assert heart.keyword == 'heart emoji'
    assert heart.title == 'Heart Emoji'
    assert heart.is_generated is False
    assert EmojiPage.objects.pending().count() == 2


def test_generate_pending_pages_in_batches(catalog):
    add_keywords([f'heart emoji {i} times' for i in range(1, 8)])

    assert generate_pending_pages(5) == 5
    assert generate_pending_pages(5) == 2
    assert generate_pending_pages(5) == 0

    page = EmojiPage.objects.get(slug='heart-emoji-2-times')
    assert page.is_generated is True
    assert page.copyable_text == '❤️ ❤️'


def test_generate_pending_pages_default_batch_size(catalog, settings):
    settings.SEO_BATCH_SIZE = 3
    add_keywords(['fire emoji', 'heart emoji', 'cry emoji', 'dog emoji'])

    assert generate_pending_pages() == 3
    assert EmojiPage.objects.pending().count() == 1


def test_generate_catalog_pages(catalog):
    add_keywords(['fire emoji'])
    generate_page('red heart emoji')

    summary = generate_catalog_pages()

    assert summary == {'created': 4, 'updated': 1, 'skipped': 1, 'total': 6}
    assert EmojiPage.objects.filter(is_generated=True).count() == 6
    dog = EmojiPage.objects.get(slug='dog-face-emoji')
    assert dog.keyword == 'dog face emoji'
    assert dog.related_emojis == ['🐶']

    assert generate_catalog_pages() == {'created': 0, 'updated': 0, 'skipped': 6, 'total': 6}


def test_delete_all_pages(catalog):
    add_keywords(['fire emoji', 'heart emoji'])
    assert delete_all_pages() == 2
    assert EmojiPage.objects.count() == 0
