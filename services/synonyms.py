"""
Synonym Resolution

Maps normalized ingredient phrases to canonical ingredient names.
"""

from constants import SYNONYMS
from .normalizer import normalize


def resolve_core(phrase):
    """
    Best-guess canonical identity of a phrase.

    Looks up the last word of the cleaned phrase (the head noun), then the
    whole cleaned phrase, and falls back to the last word unchanged.
    """
    cleaned = normalize(phrase).cleaned
    last_word = cleaned.rsplit(' ', 1)[-1]
    return SYNONYMS.get(last_word) or SYNONYMS.get(cleaned) or last_word


def resolve_terms(phrase):
    """
    Every term a phrase can be matched on.

    Returns a frozenset of the cleaned phrase, its significant words and the
    synonyms of both. Empty phrases give an empty set.
    """
    cleaned, words = normalize(phrase)
    if not cleaned:
        return frozenset()

    terms = {cleaned}
    terms.update(words)
    for term in (cleaned,) + words:
        canonical = SYNONYMS.get(term)
        if canonical:
            terms.add(canonical)
    return frozenset(terms)
