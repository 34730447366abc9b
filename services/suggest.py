"""
Recipe Suggestion Service

Finds catalog recipes for the ingredients a user owns and ranks them by how
much of each recipe the inventory already covers.
"""

import logging
import random

from .catalog import CatalogError, extract_meal_ingredients
from .fuzzy import FUZZY_THRESHOLD, MIN_FUZZY_LENGTH
from .matching import compute_recipe_match, prepare_inventory

logger = logging.getLogger(__name__)


def rank_recipes(recipes):
    """Sort recipe dicts by match_percentage, best first (stable)."""
    return sorted(recipes, key=lambda r: r['match_percentage'], reverse=True)


def build_recipe(meal, inventory, threshold=FUZZY_THRESHOLD, min_length=MIN_FUZZY_LENGTH):
    """Turn a catalog meal record into a recipe dict with match statistics."""
    match = compute_recipe_match(extract_meal_ingredients(meal), inventory,
                                 threshold, min_length)
    meal_id = meal.get('idMeal')
    return {
        'id': meal_id,
        'title': meal.get('strMeal') or '',
        'image': meal.get('strMealThumb') or '',
        'url': meal.get('strSource') or f"https://www.themealdb.com/meal/{meal_id}",
        'youtube_url': meal.get('strYoutube') or None,
        'category': meal.get('strCategory') or '',
        'area': meal.get('strArea') or '',
        'instructions': meal.get('strInstructions') or '',
        'ingredients': match['per_ingredient'],
        'matched_count': match['matched_count'],
        'total_ingredients': match['total_ingredients'],
        'match_percentage': match['match_percentage'],
    }


def suggest_recipes(owned, client, search_ingredients=6, meals_per_ingredient=4,
                    max_candidates=10, limit=8, rng=None,
                    threshold=FUZZY_THRESHOLD, min_length=MIN_FUZZY_LENGTH):
    """
    Suggest catalog recipes for an inventory.

    A random sample of owned ingredients seeds the catalog search so repeat
    requests see different recipes. Seeds or meals the catalog fails on are
    skipped.

    Args:
        owned: Owned ingredient texts
        client: Catalog client with filter_by_ingredient() and lookup()
        search_ingredients: How many owned ingredients to search with
        meals_per_ingredient: Catalog hits inspected per seed
        max_candidates: Stop searching once this many recipes are collected
        limit: Number of recipes returned
        rng: random.Random used for the shuffle

    Returns:
        list of recipe dicts (see build_recipe), best match first
    """
    owned = [o for o in owned or () if isinstance(o, str) and o.strip()]
    if not owned:
        return []

    rng = rng or random.Random()
    seeds = list(owned)
    rng.shuffle(seeds)

    inventory = prepare_inventory(owned)
    recipes = []
    seen_ids = set()

    for seed in seeds[:search_ingredients]:
        try:
            meals = client.filter_by_ingredient(seed)
        except CatalogError as e:
            logger.warning("Catalog search for %r failed: %s", seed, e)
            continue

        for stub in meals[:meals_per_ingredient]:
            meal_id = stub.get('idMeal')
            if not meal_id or meal_id in seen_ids:
                continue
            seen_ids.add(meal_id)

            try:
                meal = client.lookup(meal_id)
            except CatalogError as e:
                logger.warning("Catalog lookup for meal %s failed: %s", meal_id, e)
                continue
            if not meal:
                continue

            recipes.append(build_recipe(meal, inventory, threshold, min_length))

        if len(recipes) >= max_candidates:
            break

    logger.info("Matched %d catalog recipes for %d owned ingredients", len(recipes), len(owned))
    return rank_recipes(recipes)[:limit]
