import pytest
from django.urls import reverse

from seo.generation import generate_page
from seo.models import EmojiPage

pytestmark = pytest.mark.django_db


def run_regenerate(admin_client, *pages):
    return admin_client.post(reverse('admin:seo_emojipage_changelist'), {
        'action': 'regenerate_pages',
        '_selected_action': [page.pk for page in pages],
    })


def test_regenerate_action_rebuilds_selected_page(admin_client, catalog):
    page, _ = generate_page('fire emoji')
    EmojiPage.objects.filter(pk=page.pk).update(title='stale', content='edited')

    response = run_regenerate(admin_client, page)

    assert response.status_code == 302
    page.refresh_from_db()
    assert page.title == '🔥 Fire Emoji - Copy & Paste 🔥'
    assert page.content.startswith('# Fire Emoji')
    assert EmojiPage.objects.count() == 1


def test_regenerate_action_keeps_slug_when_keyword_drifted(admin_client, catalog):
    page, _ = generate_page('fire emoji')
    EmojiPage.objects.filter(pk=page.pk).update(keyword='dog face emoji')

    run_regenerate(admin_client, page)

    page.refresh_from_db()
    assert EmojiPage.objects.count() == 1
    assert page.slug == 'fire-emoji'
    assert page.related_emojis == ['🐶']


def test_keyword_is_read_only_on_existing_page(admin_client, catalog):
    page, _ = generate_page('fire emoji')

    response = admin_client.get(reverse('admin:seo_emojipage_change', args=[page.pk]))

    assert response.status_code == 200
    body = response.content.decode()
    assert 'name="keyword"' not in body
    assert 'name="slug"' not in body
    assert 'name="title"' in body


def test_keyword_is_editable_when_adding(admin_client, db):
    response = admin_client.get(reverse('admin:seo_emojipage_add'))
    assert 'name="keyword"' in response.content.decode()
