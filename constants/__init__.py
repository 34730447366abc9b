"""
Constants Package

Immutable vocabularies shared by the matching engine and the API.
"""

from .units import UNIT_TOKENS, UNICODE_FRACTIONS, UNIT_MAPPINGS
from .ingredients import (
    DESCRIPTORS,
    SYNONYMS,
    STAPLES,
    RECEIPT_ABBREVIATIONS,
    NOTE_KEYWORDS,
)
from .validation import (
    MAX_LENGTHS,
    MAX_LIST_ITEMS,
    CANDIDATE_FIELDS,
    VALID_CANDIDATE_SOURCES,
)

__all__ = [
    # Units
    'UNIT_TOKENS',
    'UNICODE_FRACTIONS',
    'UNIT_MAPPINGS',
    # Ingredients
    'DESCRIPTORS',
    'SYNONYMS',
    'STAPLES',
    'RECEIPT_ABBREVIATIONS',
    'NOTE_KEYWORDS',
    # Validation
    'MAX_LENGTHS',
    'MAX_LIST_ITEMS',
    'CANDIDATE_FIELDS',
    'VALID_CANDIDATE_SOURCES',
]
