"""
Fuzzy String Comparison

Edit-distance and token-overlap similarity used for typo tolerance in
ingredient matching and receipt reconciliation.
"""

import re

from rapidfuzz.distance import Levenshtein

# Default similarity needed for two terms to count as the same ingredient
FUZZY_THRESHOLD = 0.8

# Terms shorter than this are only compared by exact equality
MIN_FUZZY_LENGTH = 4

_NON_ALNUM_RE = re.compile(r'[^a-z0-9\s]')


def levenshtein_distance(a, b):
    """Edit distance where insertion, deletion and substitution each cost 1."""
    return Levenshtein.distance(a, b)


def levenshtein_similarity(a, b):
    """Similarity on a 0-1 scale (1 - distance / longer length), 1 meaning identical."""
    if not a and not b:
        return 1.0
    return Levenshtein.normalized_similarity(a, b)


def is_similar(a, b, threshold=FUZZY_THRESHOLD):
    """True when the two strings are within the similarity threshold."""
    if a == b:
        return True
    return levenshtein_similarity(a, b) >= threshold


def tokenize(text):
    """Lowercase alphanumeric tokens longer than one character, as a set."""
    cleaned = _NON_ALNUM_RE.sub('', text.lower())
    return {w for w in cleaned.split() if len(w) > 1}


def jaccard_similarity(a, b):
    """Size of the intersection over size of the union (0 for two empty sets)."""
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)
