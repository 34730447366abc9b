"""
Ingredient Normalizer

Strips quantities, units and descriptive adjectives from a free-text
ingredient phrase, leaving the canonical phrase and its significant words.
"""

import re
from collections import namedtuple
from functools import lru_cache

from constants import DESCRIPTORS, UNIT_TOKENS, UNICODE_FRACTIONS


NormalizedPhrase = namedtuple('NormalizedPhrase', ['cleaned', 'words'])

EMPTY_PHRASE = NormalizedPhrase('', ())

_FRACTIONS = ''.join(UNICODE_FRACTIONS)

# 2, 2.5, 1/2, 1 1/2, 1½, ½
_NUMBER = r'(?:\d+(?:[.,/]\d+)*(?:\s+\d+/\d+)?[{f}]?|[{f}])'.format(f=_FRACTIONS)

# 2-3
_QUANTITY = r'{n}(?:\s*-\s*{n})?'.format(n=_NUMBER)

_UNIT = '|'.join(sorted(UNIT_TOKENS, key=len, reverse=True))

# Bullets/dashes, then a quantity, then at most one unit token
LEADING_QUANTITY_RE = re.compile(
    r'^[^\w]*' + _QUANTITY + r'\s*(?:(?:' + _UNIT + r')\b)?\s*'
)

# A quantity glued to a unit anywhere else ("chicken 2 cups rice")
INLINE_QUANTITY_RE = re.compile(r'\b' + _QUANTITY + r'\s*(?:' + _UNIT + r')\b')

DESCRIPTOR_RE = re.compile(
    r'\b(?:' + '|'.join(sorted(DESCRIPTORS, key=len, reverse=True)) + r')\b'
)

# Punctuation other than in-word hyphens and apostrophes
PUNCTUATION_RE = re.compile(r"[^\w\s'-]|(?<!\w)['-]|['-](?!\w)")

WHITESPACE_RE = re.compile(r'\s+')


def _collapse(text):
    """Replace stray punctuation with spaces, collapse runs and trim."""
    text = PUNCTUATION_RE.sub(' ', text)
    return WHITESPACE_RE.sub(' ', text).strip()


def _clean_once(text):
    text = text.lower()
    text = LEADING_QUANTITY_RE.sub('', text, count=1)
    text = INLINE_QUANTITY_RE.sub(' ', text)
    text = _collapse(text)
    text = DESCRIPTOR_RE.sub(' ', text)
    return _collapse(text)


@lru_cache(maxsize=4096)
def _normalize(phrase):
    cleaned = _clean_once(phrase)
    # Removing a descriptor can expose a new leading quantity
    # ("large 2 eggs"), so keep going until nothing changes.
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            break
        cleaned = again

    if not cleaned:
        return EMPTY_PHRASE

    words = tuple(w for w in cleaned.split(' ') if len(w) > 2)
    return NormalizedPhrase(cleaned, words)


def normalize(phrase):
    """
    Normalize an ingredient phrase for matching.

    "2 tbsp finely chopped fresh garlic" -> NormalizedPhrase('garlic', ('garlic',))

    Args:
        phrase: Raw ingredient text (anything that is not a string is
            treated as empty)

    Returns:
        NormalizedPhrase(cleaned, words) where words are the tokens of
        cleaned longer than two characters
    """
    if not isinstance(phrase, str) or not phrase.strip():
        return EMPTY_PHRASE
    return _normalize(phrase)


def normalize_ingredient_name(name):
    """Return only the cleaned phrase."""
    return normalize(name).cleaned
