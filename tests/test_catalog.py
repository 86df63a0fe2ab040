import pytest

from catalog.importing import CatalogImportError, import_catalog, load_dataset
from catalog.models import Emoji

pytestmark = pytest.mark.django_db


class TestEmojiQuerySet:

    def test_search_is_case_insensitive_across_fields(self, catalog):
        assert [e.slug for e in Emoji.objects.search('HEART')] == ['red-heart', 'sparkling-heart']
        assert [e.slug for e in Emoji.objects.search('tear')] == ['crying-face']
        assert [e.slug for e in Emoji.objects.search('nature')] == ['dog-face']

    def test_empty_term_returns_catalog_in_order(self, catalog):
        assert list(Emoji.objects.search('')) == catalog
        assert list(Emoji.objects.search(None)) == catalog

    def test_category_is_exact(self, catalog):
        assert list(Emoji.objects.search(category='Travel & Places')) == [catalog[0]]
        assert list(Emoji.objects.search(category='travel')) == []

    def test_categories_are_distinct_and_sorted(self, catalog):
        assert Emoji.objects.categories() == ['Animals & Nature', 'Smileys & Emotion', 'Travel & Places']

    def test_trending_orders_by_copy_count(self, catalog):
        fire, red_heart, _, _, _, dog = catalog
        for _ in range(3):
            dog.increment_copy_count()
        fire.increment_copy_count()

        trending = list(Emoji.objects.trending(limit=3))

        assert trending == [dog, fire, red_heart]


def test_keyword_list(catalog):
    assert catalog[0].keyword_list == ['hot', 'flame', 'lit']
    assert catalog[4].keyword_list == []


def test_increment_copy_count_returns_new_value(catalog):
    fire = catalog[0]
    assert fire.increment_copy_count() == 1
    assert fire.increment_copy_count() == 2
    assert Emoji.objects.get(pk=fire.pk).copy_count == 2


def test_load_dataset_strips_bom():
    raw = '\ufeffslug,emoji,name,category\nfire,🔥,Fire,Travel & Places\n'.encode('utf-8')
    dataset = load_dataset(raw, 'emojis.csv')
    assert dataset.headers[0] == 'slug'
    assert len(dataset) == 1


def test_import_catalog_rejects_whole_file_on_error(db):
    raw = (
        'slug,emoji,name,category,subcategory,keywords,description\n'
        'rocket,🚀,Rocket,Travel & Places,,rocket,\n'
        'broken,,,,,,\n'
    ).encode('utf-8')

    with pytest.raises(CatalogImportError):
        import_catalog(load_dataset(raw, 'emojis.csv'))

    assert Emoji.objects.count() == 0
