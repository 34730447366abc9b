"""
Recipe Catalog Client

Thin wrapper around TheMealDB's free JSON API (no key required).
"""

import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://www.themealdb.com/api/json/v1/1'

# TheMealDB stores up to 20 ingredient/measure pairs per meal
MAX_MEAL_INGREDIENTS = 20


class CatalogError(Exception):
    """Raised when the recipe catalog can't be reached or returns garbage."""
    pass


class MealDBClient:
    """Fetch meals from TheMealDB."""

    def __init__(self, base_url=DEFAULT_BASE_URL, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, endpoint, params):
        url = f"{self.base_url}/{endpoint}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise CatalogError(f"Request to {endpoint} failed: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Invalid JSON from {endpoint}") from e

    def filter_by_ingredient(self, ingredient):
        """Meal stubs (idMeal, strMeal, strMealThumb) that use an ingredient."""
        data = self._get('filter.php', {'i': ingredient})
        return (data or {}).get('meals') or []

    def lookup(self, meal_id):
        """Full meal record, or None if the id is unknown."""
        data = self._get('lookup.php', {'i': meal_id})
        meals = (data or {}).get('meals') or []
        return meals[0] if meals else None


def extract_meal_ingredients(meal):
    """
    Pull the strIngredientN/strMeasureN pairs out of a meal record.

    Returns:
        list of {'name', 'measure'}, skipping blank ingredient slots
    """
    ingredients = []
    for i in range(1, MAX_MEAL_INGREDIENTS + 1):
        name = (meal.get(f'strIngredient{i}') or '').strip()
        if not name:
            continue
        measure = (meal.get(f'strMeasure{i}') or '').strip()
        ingredients.append({'name': name, 'measure': measure})
    return ingredients
