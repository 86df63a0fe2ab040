# emojicopypaster/app/seo/copyable.py
"""
Builds the one-click "copy" text for a keyword page.

Keywords are tested against an ordered list of (pattern, handler) pairs. A
handler returns the text, or None to let the next pattern try. When nothing
produces text the related emoji are listed, and a keyword with no related
emoji has no copyable text at all.
"""
import re

from django.conf import settings

from .keywords import STOP_WORDS, strip_emoji_word

# "<phrase> N times" / "<phrase> N time"
REPEAT_PHRASE_RE = re.compile(r'(.+?)\s+(\d+)\s*times?', re.IGNORECASE)
# "N <phrase>", "N <phrase> emoji", "N <phrase>s"
LEADING_COUNT_RE = re.compile(r'(\d+)\s+(.+?)(?:\s+emoji)?s?', re.IGNORECASE)


def _max_repeat():
    return getattr(settings, 'SEO_MAX_REPEAT', 10000)


def _max_related():
    return getattr(settings, 'SEO_MAX_RELATED', 20)


def _repeat(text, count):
    return ' '.join([text] * count)


def best_matching_emoji(phrase, related):
    """
    First related emoji whose name or keywords overlap the phrase, or any
    non-stop-word of it.
    """
    phrase = phrase.lower()
    phrase_words = [word for word in phrase.split() if word not in STOP_WORDS]

    for emoji in related:
        name = (emoji.name or '').lower()
        keywords = [kw.lower() for kw in emoji.keyword_list]
        if phrase in name or name in phrase:
            return emoji
        if any(kw in phrase for kw in keywords):
            return emoji
        if any(word in name or word in keywords for word in phrase_words):
            return emoji
    return None


def repeat_phrase(match, related):
    phrase = match.group(1).strip()
    count = min(int(match.group(2)), _max_repeat())

    if 'emoji' in phrase.lower():
        emoji = best_matching_emoji(strip_emoji_word(phrase), related)
        if emoji is None and related:
            emoji = related[0]
        if emoji is not None:
            return _repeat(emoji.emoji, count)

    return _repeat(phrase, count)


def cycle_related(match, related):
    count = min(int(match.group(1)), _max_repeat())
    chars = [emoji.emoji for emoji in related[:count]]
    if not chars:
        return None
    return ''.join(chars[i % len(chars)] for i in range(count))


COPYABLE_PATTERNS = (
    (REPEAT_PHRASE_RE, repeat_phrase),
    (LEADING_COUNT_RE, cycle_related),
)


def generate_copyable_text(keyword, related):
    """
    Returns the copy text for `keyword`, or None when there is nothing to copy.
    """
    keyword = keyword.strip()
    for pattern, handler in COPYABLE_PATTERNS:
        match = pattern.fullmatch(keyword)
        if match:
            text = handler(match, related)
            if text is not None:
                return text

    if related:
        return ' '.join(emoji.emoji for emoji in related[:_max_related()])
    return None
