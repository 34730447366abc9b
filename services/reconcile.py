"""
Receipt Reconciliation Service

Scores receipt line items (already cleaned of prices and codes) against the
names of known items so a scanned receipt can be folded into the inventory.
"""

import logging
import re

from constants import RECEIPT_ABBREVIATIONS
from .fuzzy import (
    FUZZY_THRESHOLD, MIN_FUZZY_LENGTH, jaccard_similarity, levenshtein_similarity, tokenize,
)
from .matching import has_ingredient, prepare_inventory

logger = logging.getLogger(__name__)

# Scores at or below this are not considered a match
MIN_SCORE = 0.3

# Scores at or above this are reported as high confidence
HIGH_CONFIDENCE_SCORE = 0.6

_NON_ALNUM_RE = re.compile(r'[^a-z0-9\s]')
_WHITESPACE_RE = re.compile(r'\s+')


def normalize_item_name(name):
    """Lowercase, turn punctuation into spaces and collapse whitespace."""
    if not isinstance(name, str):
        return ''
    name = _NON_ALNUM_RE.sub(' ', name.lower())
    return _WHITESPACE_RE.sub(' ', name).strip()


def expand_abbreviations(text):
    """Replace receipt abbreviations (CHKN BRST) with full words."""
    expanded = []
    for word in text.lower().split():
        expanded.extend(RECEIPT_ABBREVIATIONS.get(word, (word,)))
    return ' '.join(expanded)


def _blend(a, b):
    # Token overlap weighs more since receipt names are often truncated
    return 0.4 * levenshtein_similarity(a, b) + 0.6 * jaccard_similarity(tokenize(a), tokenize(b))


def calculate_match_score(receipt_item, item_name):
    """
    Score a receipt item against a known item name (0-1, 1 is a perfect match).

    Both the raw and the abbreviation-expanded forms are scored and the
    better of the two is kept.
    """
    receipt = normalize_item_name(receipt_item)
    item = normalize_item_name(item_name)

    raw_score = _blend(receipt, item)
    expanded_score = _blend(expand_abbreviations(receipt), expand_abbreviations(item))
    return max(raw_score, expanded_score)


def _confidence(score, high_confidence):
    return 'high' if score >= high_confidence else 'low'


def find_all_matches(receipt_item, candidates, min_score=MIN_SCORE,
                     high_confidence=HIGH_CONFIDENCE_SCORE):
    """
    All candidates scoring above min_score, best first.

    Candidates are dicts with at least 'name'. Each match is
    {'candidate': ..., 'score': float, 'confidence': 'high' | 'low'}.
    """
    matches = []
    for candidate in candidates:
        score = calculate_match_score(receipt_item, candidate.get('name'))
        if score > min_score:
            matches.append({
                'candidate': candidate,
                'score': score,
                'confidence': _confidence(score, high_confidence),
            })
    matches.sort(key=lambda m: m['score'], reverse=True)
    return matches


def find_best_match(receipt_item, candidates, min_score=MIN_SCORE,
                    high_confidence=HIGH_CONFIDENCE_SCORE):
    """Highest scoring candidate above min_score, or None. Ties keep the earlier candidate."""
    best = None
    best_score = min_score
    for candidate in candidates:
        score = calculate_match_score(receipt_item, candidate.get('name'))
        if score > best_score:
            best_score = score
            best = {
                'candidate': candidate,
                'score': score,
                'confidence': _confidence(score, high_confidence),
            }
    return best


def reconcile_receipt(items, candidates, owned=(), min_score=MIN_SCORE,
                      high_confidence=HIGH_CONFIDENCE_SCORE,
                      threshold=FUZZY_THRESHOLD, min_length=MIN_FUZZY_LENGTH):
    """
    Match each receipt item to a known item and flag what is already stocked.

    Args:
        items: Cleaned receipt item names
        candidates: Known items as dicts (id, name, optional source ids),
            in priority order
        owned: Ingredient texts currently in the inventory
        threshold, min_length: Fuzzy settings for the already-stocked check

    Returns:
        list of {'name', 'match', 'already_stocked'} in receipt order
    """
    inventory = prepare_inventory(owned)
    results = []
    for name in items:
        match = find_best_match(name, candidates, min_score, high_confidence)
        if match is None:
            logger.debug("No known item for receipt line %r", name)
        results.append({
            'name': name,
            'match': match,
            'already_stocked': has_ingredient(name, inventory, threshold, min_length),
        })
    return results
