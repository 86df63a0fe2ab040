# emojicopypaster/app/seo/matching.py
import logging

from catalog.models import Emoji
from .keywords import SYNONYMS, clean_search_term, meaningful_words

logger = logging.getLogger(__name__)


def catalog_search(term):
    return list(Emoji.objects.search(term))


def synonym_search(term, search=catalog_search):
    """
    Word-by-word fallback used when the whole term finds nothing. For each
    non-stop-word, its synonyms are tried in table order, then the bare word.
    The first non-empty result wins.
    """
    for word in meaningful_words(term):
        for synonym in SYNONYMS.get(word.lower(), ()):
            results = search(synonym)
            if results:
                logger.debug(f"[synonym_search] '{word}' matched via synonym '{synonym}'")
                return results

        results = search(word)
        if results:
            return results
    return []


def find_related_emojis(keyword, search=None):
    """
    Returns the catalog emoji relevant to a free-text keyword, in catalog
    order. `search` takes a term and returns a list of emoji; it defaults to
    the catalog's substring search.
    """
    search = search or catalog_search
    term = clean_search_term(keyword)

    # An empty term (keyword was just "emoji") matches the whole catalog.
    results = search(term)
    if not results:
        results = synonym_search(term, search)

    logger.info(f"[find_related_emojis] '{keyword}' (term '{term}') -> {len(results)} emoji")
    return results
