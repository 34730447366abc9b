"""
Services Package

Ingredient matching engine plus the receipt, recipe-text and
recipe-suggestion flows built on it.
"""

from .normalizer import (
    NormalizedPhrase,
    normalize,
    normalize_ingredient_name,
)

from .synonyms import (
    resolve_core,
    resolve_terms,
)

from .staples import is_always_available

from .fuzzy import (
    FUZZY_THRESHOLD,
    MIN_FUZZY_LENGTH,
    levenshtein_distance,
    levenshtein_similarity,
    is_similar,
    tokenize,
    jaccard_similarity,
)

from .matching import (
    PreparedIngredient,
    prepare_ingredient,
    prepare_inventory,
    has_ingredient,
    match_percentage,
    compute_recipe_match,
)

from .reconcile import (
    normalize_item_name,
    expand_abbreviations,
    calculate_match_score,
    find_best_match,
    find_all_matches,
    reconcile_receipt,
)

from .catalog import (
    CatalogError,
    MealDBClient,
    extract_meal_ingredients,
)

from .parsing import (
    ParsedIngredient,
    ParsedRecipe,
    parse_amount,
    parse_ingredient_line,
    parse_recipe_text,
    recipe_ingredients,
)

from .suggest import (
    build_recipe,
    rank_recipes,
    suggest_recipes,
)

__all__ = [
    # Normalizer
    'NormalizedPhrase',
    'normalize',
    'normalize_ingredient_name',
    # Synonyms
    'resolve_core',
    'resolve_terms',
    # Staples
    'is_always_available',
    # Fuzzy
    'FUZZY_THRESHOLD',
    'MIN_FUZZY_LENGTH',
    'levenshtein_distance',
    'levenshtein_similarity',
    'is_similar',
    'tokenize',
    'jaccard_similarity',
    # Matching
    'PreparedIngredient',
    'prepare_ingredient',
    'prepare_inventory',
    'has_ingredient',
    'match_percentage',
    'compute_recipe_match',
    # Receipts
    'normalize_item_name',
    'expand_abbreviations',
    'calculate_match_score',
    'find_best_match',
    'find_all_matches',
    'reconcile_receipt',
    # Catalog
    'CatalogError',
    'MealDBClient',
    'extract_meal_ingredients',
    # Recipe text
    'ParsedIngredient',
    'ParsedRecipe',
    'parse_amount',
    'parse_ingredient_line',
    'parse_recipe_text',
    'recipe_ingredients',
    # Suggestions
    'build_recipe',
    'rank_recipes',
    'suggest_recipes',
]
