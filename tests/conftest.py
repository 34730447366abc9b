import sys
import os

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services import CatalogError  # noqa: E402


MEALS = {
    '1': {
        'idMeal': '1',
        'strMeal': 'Salted Chicken',
        'strMealThumb': 'https://example.com/1.jpg',
        'strSource': 'https://example.com/salted-chicken',
        'strYoutube': '',
        'strCategory': 'Chicken',
        'strArea': 'British',
        'strInstructions': 'Salt the chicken. Roast it.',
        'strIngredient1': 'Chicken',
        'strMeasure1': '1 whole',
        'strIngredient2': 'Salt',
        'strMeasure2': 'pinch',
        'strIngredient3': '',
        'strMeasure3': ' ',
    },
    '2': {
        'idMeal': '2',
        'strMeal': 'Chicken Paella',
        'strMealThumb': 'https://example.com/2.jpg',
        'strSource': None,
        'strYoutube': 'https://youtube.com/watch?v=2',
        'strCategory': 'Chicken',
        'strArea': 'Spanish',
        'strInstructions': 'Cook everything in one pan.',
        'strIngredient1': 'Rice',
        'strMeasure1': '2 cups',
        'strIngredient2': 'Saffron',
        'strMeasure2': '1 pinch',
        'strIngredient3': 'Chicken',
        'strMeasure3': '500g',
    },
    '3': {
        'idMeal': '3',
        'strMeal': 'Tofu Rice Bowl',
        'strMealThumb': 'https://example.com/3.jpg',
        'strSource': '',
        'strYoutube': None,
        'strCategory': 'Vegetarian',
        'strArea': 'Japanese',
        'strInstructions': 'Fry the tofu, serve on rice.',
        'strIngredient1': 'Rice',
        'strMeasure1': '1 cup',
        'strIngredient2': 'Tofu',
        'strMeasure2': '200g',
        'strIngredient3': 'Ginger',
        'strMeasure3': '1 tsp',
        'strIngredient4': 'Soy Sauce',
        'strMeasure4': '2 tbsp',
    },
}

SEARCH_RESULTS = {
    'chicken': [{'idMeal': '1'}, {'idMeal': '2'}],
    'rice': [{'idMeal': '2'}, {'idMeal': '3'}],
}


class FakeCatalog:
    """In-memory stand-in for MealDBClient."""

    def __init__(self, meals=None, search_results=None, failing_seeds=(), failing_meals=()):
        self.meals = MEALS if meals is None else meals
        self.search_results = SEARCH_RESULTS if search_results is None else search_results
        self.failing_seeds = set(failing_seeds)
        self.failing_meals = set(failing_meals)
        self.lookups = []

    def filter_by_ingredient(self, ingredient):
        if ingredient in self.failing_seeds:
            raise CatalogError(f"search failed for {ingredient}")
        return list(self.search_results.get(ingredient.lower(), []))

    def lookup(self, meal_id):
        self.lookups.append(meal_id)
        if meal_id in self.failing_meals:
            raise CatalogError(f"lookup failed for {meal_id}")
        return self.meals.get(meal_id)


@pytest.fixture
def fake_catalog():
    return FakeCatalog()


@pytest.fixture
def client(fake_catalog):
    from app import app
    app.config['TESTING'] = True
    original = app.extensions['recipe_catalog']
    app.extensions['recipe_catalog'] = fake_catalog
    with app.test_client() as test_client:
        yield test_client
    app.extensions['recipe_catalog'] = original
