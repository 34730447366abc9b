"""
Ingredient Matching Service

Decides whether a user's inventory satisfies a recipe ingredient and
aggregates those decisions into recipe match statistics.
"""

import logging
from collections import namedtuple

from .fuzzy import FUZZY_THRESHOLD, MIN_FUZZY_LENGTH, is_similar
from .staples import is_always_available
from .synonyms import resolve_core, resolve_terms

logger = logging.getLogger(__name__)


PreparedIngredient = namedtuple('PreparedIngredient', ['text', 'core', 'terms'])


def prepare_ingredient(text):
    """Resolve the core and term set of one owned ingredient."""
    return PreparedIngredient(text, resolve_core(text), resolve_terms(text))


def prepare_inventory(owned):
    """
    Resolve every owned ingredient once so repeated has_ingredient calls
    (one per recipe ingredient) don't redo the normalization.
    """
    if not owned:
        return ()
    if isinstance(owned, str):
        owned = (owned,)
    return tuple(
        entry if isinstance(entry, PreparedIngredient) else prepare_ingredient(entry)
        for entry in owned
    )


def _terms_match(recipe_terms, user_terms, threshold, min_length):
    for recipe_term in recipe_terms:
        for user_term in user_terms:
            if recipe_term == user_term:
                return True
            if len(recipe_term) >= min_length and len(user_term) >= min_length:
                if (is_similar(recipe_term, user_term, threshold)
                        or recipe_term in user_term
                        or user_term in recipe_term):
                    return True
    return False


def has_ingredient(recipe_ingredient, owned, threshold=FUZZY_THRESHOLD,
                   min_length=MIN_FUZZY_LENGTH):
    """
    Check whether any owned ingredient satisfies a recipe ingredient.

    Order of checks, stopping at the first hit:
    1. Staples (salt, water, oil, pepper) are always satisfied
    2. Core ingredients equal or fuzzy-similar
    3. Any pair of terms equal, or (both long enough) fuzzy-similar or
       one containing the other

    Args:
        recipe_ingredient: Ingredient text from the recipe
        owned: Owned ingredient texts, or the result of prepare_inventory()
        threshold: Similarity needed for a fuzzy match
        min_length: Shortest term that is fuzzy/substring compared

    Returns:
        bool
    """
    if is_always_available(recipe_ingredient):
        logger.debug("Staple ingredient %r is always available", recipe_ingredient)
        return True

    recipe_core = resolve_core(recipe_ingredient)
    recipe_terms = resolve_terms(recipe_ingredient)

    for user in prepare_inventory(owned):
        if len(recipe_core) > 2 and len(user.core) > 2:
            if recipe_core == user.core or is_similar(recipe_core, user.core, threshold):
                logger.debug("%r matched %r on core %r", recipe_ingredient, user.text, user.core)
                return True

        if _terms_match(recipe_terms, user.terms, threshold, min_length):
            logger.debug("%r matched %r on terms", recipe_ingredient, user.text)
            return True

    return False


def match_percentage(matched_count, total_ingredients):
    """Percentage of matched ingredients, rounded half up (0 for an empty recipe)."""
    if total_ingredients <= 0:
        return 0
    return int(100 * matched_count / total_ingredients + 0.5)


def _split_ingredient(entry):
    """Accept either "2 eggs" or {'name': 'eggs', 'measure': '2'}."""
    if isinstance(entry, dict):
        name = entry.get('name')
        measure = entry.get('measure')
    else:
        name, measure = entry, None
    if not isinstance(name, str):
        name = ''
    if not isinstance(measure, str):
        measure = ''
    return name, measure


def compute_recipe_match(ingredients, owned, threshold=FUZZY_THRESHOLD,
                         min_length=MIN_FUZZY_LENGTH):
    """
    Match every ingredient of a recipe against the inventory.

    Args:
        ingredients: Recipe ingredients, as strings or dicts with 'name'
            and optional 'measure'
        owned: Owned ingredient texts (or a prepared inventory)

    Returns:
        dict with matched_count, total_ingredients, match_percentage and
        per_ingredient (list of {name, measure, in_stock} in input order)
    """
    inventory = prepare_inventory(owned)

    per_ingredient = []
    matched_count = 0
    for entry in ingredients or ():
        name, measure = _split_ingredient(entry)
        in_stock = has_ingredient(name, inventory, threshold, min_length)
        if in_stock:
            matched_count += 1
        per_ingredient.append({
            'name': name,
            'measure': measure,
            'in_stock': in_stock,
        })

    total = len(per_ingredient)
    return {
        'matched_count': matched_count,
        'total_ingredients': total,
        'match_percentage': match_percentage(matched_count, total),
        'per_ingredient': per_ingredient,
    }
