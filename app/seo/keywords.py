# emojicopypaster/app/seo/keywords.py
"""
Keyword helpers shared by the matcher, the text generators and the page
orchestrator: slug and title derivation, search-term cleanup, and the static
stop-word and synonym tables.
"""
import re

STOP_WORDS = frozenset([
    'i', 'a', 'an', 'the', 'to', 'in', 'on', 'at', 'it', 'is', 'am', 'are', 'was',
    'be', 'my', 'me', 'we', 'us', 'he', 'she', 'his', 'her', 'you', 'your', 'of',
    'for', 'and', 'or', 'but', 'not', 'no', 'so', 'if', 'do', 'up', 'out', 'all',
    'just', 'get', 'got', 'has', 'had', 'can', 'will', 'one', 'two', 'with',
    'this', 'that', 'from', 'by', 'as',
])

# Normalized word -> related search terms, tried in order.
SYNONYMS = {
    'hate': ('angry', 'mad', 'rage'),
    'love': ('heart', 'love'),
    'sad': ('cry', 'sad', 'tear'),
    'laugh': ('laugh', 'lol', 'funny', 'joy'),
    'cry': ('cry', 'sad', 'tear'),
    'cool': ('cool', 'sunglasses'),
    'kiss': ('kiss', 'love'),
    'hug': ('hug', 'love'),
    'think': ('think', 'hmm'),
    'sleep': ('sleep', 'zzz', 'tired'),
    'sick': ('sick', 'ill', 'nauseated'),
    'scared': ('scared', 'fear', 'scream'),
    'surprise': ('surprise', 'wow', 'shock'),
    'celebrate': ('party', 'celebrate', 'tada'),
    'pray': ('pray', 'hope', 'please'),
    'clap': ('clap', 'applause'),
    'wave': ('wave', 'hello', 'bye'),
    'thank': ('pray', 'thanks', 'grateful'),
    'sorry': ('sad', 'sorry', 'apologize'),
    'miss': ('sad', 'cry', 'heart'),
    'happy': ('happy', 'smile', 'joy'),
    'angry': ('angry', 'mad', 'rage'),
    'wink': ('wink', 'flirt'),
    'poop': ('poop', 'poo'),
    'money': ('money', 'dollar', 'rich'),
    'star': ('star', 'sparkle'),
    'sun': ('sun', 'sunny'),
    'rain': ('rain', 'umbrella'),
    'snow': ('snow', 'cold'),
    'hot': ('fire', 'hot'),
    'cold': ('cold', 'freeze', 'snow'),
    'dead': ('skull', 'dead'),
    'death': ('skull', 'dead'),
    'evil': ('devil', 'evil', 'angry'),
    'devil': ('devil', 'evil'),
    'ghost': ('ghost', 'spooky'),
    'alien': ('alien', 'ufo'),
    'robot': ('robot', 'mechanical'),
    'cat': ('cat', 'kitten'),
    'dog': ('dog', 'puppy'),
    'pig': ('pig', 'oink'),
    'monkey': ('monkey', 'ape'),
    'chicken': ('chicken', 'bird'),
    'bear': ('bear', 'teddy'),
    'broken': ('broken', 'heart'),
    'peace': ('peace', 'victory'),
    'okay': ('ok', 'thumbs'),
    'thumbs': ('thumbs', 'like'),
    'rock': ('rock', 'metal'),
    'strong': ('muscle', 'strong', 'flex'),
    'muscle': ('muscle', 'flex', 'strong'),
    'eye': ('eye', 'eyes', 'look'),
    'nose': ('nose', 'sniff'),
    'tongue': ('tongue', 'taste'),
    'ear': ('ear', 'listen'),
    'brain': ('brain', 'think'),
    'hand': ('hand', 'wave'),
    'fist': ('fist', 'punch'),
    'finger': ('finger', 'point'),
}

# Stub pages created by `seed_emojis`.
TOP_KEYWORDS = [
    'heart emoji',
    'love emoji',
    'fire emoji',
    'crying emoji',
    'laughing emoji',
    'skull emoji',
    'sad emoji',
    'happy emoji',
    'angry emoji',
    'cool emoji',
    'kiss emoji',
    'thumbs up emoji',
    'pray emoji',
    'clap emoji',
    'party emoji',
    'star emoji',
    'sparkles emoji',
    'money emoji',
    'ghost emoji',
    'poop emoji',
    'cat emoji',
    'dog emoji',
    'sun emoji',
    'snow emoji',
    'rainbow emoji',
    'broken heart emoji',
    'thinking emoji',
    'sleeping emoji',
    'eyes emoji',
    'muscle emoji',
    'heart emoji 100 times',
    'fire emoji 100 times',
    'love emoji 5 times',
    '100 heart emojis',
    'i miss you emoji',
]

_SLUG_RE = re.compile(r'[^a-z0-9]+')
_EMOJI_WORD_RE = re.compile(r'\s*emojis?\s*', re.IGNORECASE)
_TIMES_RE = re.compile(r'\s*\d+\s*times?\b\s*', re.IGNORECASE)
_WHITESPACE_RE = re.compile(r'\s+')


def slugify_keyword(keyword):
    """
    'Happy Face!!' -> 'happy-face'. Runs of anything outside [a-z0-9] become a
    single dash; dashes at either end are dropped. May return ''.
    """
    return _SLUG_RE.sub('-', keyword.lower()).strip('-')


def title_case(keyword):
    """Upper-cases the first letter of each space-separated word, leaving the rest as typed."""
    return ' '.join(word[:1].upper() + word[1:] for word in keyword.split(' '))


def strip_emoji_word(text):
    return _WHITESPACE_RE.sub(' ', _EMOJI_WORD_RE.sub(' ', text)).strip()


def clean_search_term(keyword):
    """
    Removes the word 'emoji' and any '<N> times' fragment, leaving the part of
    the keyword worth searching the catalog for.
    """
    term = _EMOJI_WORD_RE.sub(' ', keyword)
    term = _TIMES_RE.sub(' ', term)
    return _WHITESPACE_RE.sub(' ', term).strip()


def meaningful_words(text):
    return [word for word in text.split() if word.lower() not in STOP_WORDS]
