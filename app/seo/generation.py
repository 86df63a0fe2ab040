# emojicopypaster/app/seo/generation.py
"""
Page generation: runs keyword matching, copyable text and content generation
for a keyword and stores the result as an EmojiPage.

Store errors are not caught here; callers (views, commands, admin actions)
decide how to report them.
"""
import logging

from django.conf import settings

from catalog.models import Emoji
from .content import generate_seo_content
from .copyable import generate_copyable_text
from .keywords import slugify_keyword, title_case
from .matching import find_related_emojis
from .models import EmojiPage

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = EmojiPage._meta.get_field('title').max_length


def build_page_fields(keyword, search=None):
    """
    Generates every derived field of a page for `keyword` without touching
    the database (beyond the catalog search).
    """
    related = find_related_emojis(keyword, search)
    max_related = getattr(settings, 'SEO_MAX_RELATED', 20)
    related_chars = [emoji.emoji for emoji in related[:max_related]]
    top_three = ''.join(related_chars[:3])

    title = f"{top_three} {title_case(keyword)} - Copy & Paste {top_three}".strip()
    meta_description = (
        f"{top_three} Copy and paste {keyword} instantly! Find the best {keyword} "
        f"for messages, social media, and more. {top_three}"
    ).strip()

    return {
        'title': title[:TITLE_MAX_LENGTH],
        'meta_description': meta_description,
        'content': generate_seo_content(keyword, related),
        'copyable_text': generate_copyable_text(keyword, related),
        'related_emojis': related_chars,
        'is_generated': True,
    }


def _save_page(slug, keyword, fields):
    # update_or_create retries the lookup if a concurrent request inserted the slug first.
    return EmojiPage.objects.update_or_create(
        slug=slug,
        defaults={'keyword': keyword, **fields},
    )


def generate_page(keyword, force=False):
    """
    Generates (or regenerates with `force`) the page for `keyword`.
    An already generated page is returned untouched unless forced.
    Returns (page, created).
    """
    slug = slugify_keyword(keyword)
    if not slug:
        raise ValueError(f"Keyword '{keyword}' does not produce a usable slug.")

    existing = EmojiPage.objects.filter(slug=slug).first()
    if existing and existing.is_generated and not force:
        logger.info(f"[generate_page] '{slug}' already generated, returning existing page.")
        return existing, False

    fields = build_page_fields(keyword)
    page, created = _save_page(slug, keyword, fields)
    logger.info(f"[generate_page] {'Created' if created else 'Updated'} page '{slug}' with {len(page.related_emojis)} related emoji.")
    return page, created


def regenerate_page(page):
    """
    Rebuilds the generated fields of an existing page in place, from its
    stored keyword. The slug never changes.
    """
    fields = build_page_fields(page.keyword)
    for name, value in fields.items():
        setattr(page, name, value)
    page.save(update_fields=list(fields))
    return page


def generate_pending_pages(batch_size=None):
    """
    Generates up to `batch_size` pending stub pages, oldest first, and returns
    how many were generated. Callers repeat until it returns 0.
    """
    if batch_size is None:
        batch_size = getattr(settings, 'SEO_BATCH_SIZE', 5)

    generated = 0
    for page in EmojiPage.objects.pending()[:batch_size]:
        regenerate_page(page)
        generated += 1

    logger.info(f"[generate_pending_pages] Generated {generated} page(s).")
    return generated


def generate_catalog_pages():
    """
    One '<name> emoji' page per catalog emoji. Pages that are already
    generated are skipped; pending stubs are filled in.
    """
    emojis = list(Emoji.objects.all())
    created = updated = skipped = 0

    for emoji in emojis:
        keyword = f"{emoji.name.lower()} emoji"
        slug = slugify_keyword(keyword)

        existing = EmojiPage.objects.filter(slug=slug).first()
        if existing and existing.is_generated:
            skipped += 1
            continue

        _, was_created = _save_page(slug, keyword, build_page_fields(keyword))
        if was_created:
            created += 1
        else:
            updated += 1

    summary = {'created': created, 'updated': updated, 'skipped': skipped, 'total': len(emojis)}
    logger.info(f"[generate_catalog_pages] {summary}")
    return summary


def add_keywords(keywords):
    """
    Creates pending stub pages for new keywords. Blank entries are ignored;
    keywords whose slug already exists (or is empty) are skipped.
    """
    existing_slugs = set(EmojiPage.objects.values_list('slug', flat=True))
    added = skipped = 0

    for raw_keyword in keywords:
        keyword = str(raw_keyword).strip()
        if not keyword:
            continue

        slug = slugify_keyword(keyword)
        if not slug or slug in existing_slugs:
            skipped += 1
            continue

        _, created = EmojiPage.objects.get_or_create(
            slug=slug,
            defaults={'keyword': keyword, 'title': title_case(keyword), 'is_generated': False},
        )
        existing_slugs.add(slug)
        if created:
            added += 1
        else:
            skipped += 1

    logger.info(f"[add_keywords] Added {added}, skipped {skipped}.")
    return {'added': added, 'skipped': skipped, 'total': added + skipped}


def delete_all_pages():
    deleted, _ = EmojiPage.objects.all().delete()
    logger.info(f"[delete_all_pages] Deleted {deleted} page(s).")
    return deleted
