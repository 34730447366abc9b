import pytest

from services import parse_amount, parse_ingredient_line, parse_recipe_text, recipe_ingredients


PANCAKES = """Pancakes

Ingredients:
- 1 1/2 cups flour, sifted
- 2 eggs
- 1 cup milk

Instructions:
1. Whisk the flour and eggs.
2. Add the milk and cook.
"""


def test_parse_amount():
    assert parse_amount("2") == 2.0
    assert parse_amount("1 1/2") == pytest.approx(1.5)
    assert parse_amount("3/4") == pytest.approx(0.75)
    assert parse_amount("1½") == pytest.approx(1.5)
    assert parse_amount("¾") == pytest.approx(0.75)
    assert parse_amount("2-3") == 2.0


def test_parse_amount_unreadable():
    assert parse_amount(None) is None
    assert parse_amount("") is None
    assert parse_amount("1/0") is None


def test_quantity_unit_and_note():
    parsed = parse_ingredient_line("1 1/2 cups flour, sifted")
    assert parsed.name == "flour"
    assert parsed.quantity == "1 1/2"
    assert parsed.amount == pytest.approx(1.5)
    assert parsed.unit == "cup"
    assert parsed.notes == "sifted"


def test_quantity_without_unit():
    parsed = parse_ingredient_line("- 2 large eggs")
    assert parsed.name == "large eggs"
    assert parsed.quantity == "2"
    assert parsed.unit is None
    assert parsed.notes is None


def test_unicode_and_glued_units():
    assert parse_ingredient_line("½ tsp salt")[:4] == ("salt", "½", 0.5, "tsp")
    assert parse_ingredient_line("1½ cups milk").amount == pytest.approx(1.5)
    assert parse_ingredient_line("200g flour")[:4] == ("flour", "200", 200.0, "g")
    assert parse_ingredient_line("1 cup sugar").unit == "cup"


def test_ranges_and_parentheses():
    parsed = parse_ingredient_line("2-3 cloves garlic (minced)")
    assert parsed.name == "garlic"
    assert parsed.quantity == "2-3"
    assert parsed.unit == "clove"
    assert parsed.notes == "minced"

    parsed = parse_ingredient_line("1 (14 oz) can diced tomatoes")
    assert parsed.name == "diced tomatoes"
    assert parsed.unit == "can"
    assert parsed.notes == "14 oz"


def test_comma_kept_when_not_a_note():
    assert parse_ingredient_line("chicken thighs, boneless").name == "chicken thighs, boneless"


def test_name_only_and_blank_lines():
    parsed = parse_ingredient_line("Salt")
    assert parsed.name == "Salt"
    assert parsed.quantity is None
    assert parsed.amount is None
    assert parse_ingredient_line("") is None
    assert parse_ingredient_line("  - ") is None
    assert parse_ingredient_line(None) is None


def test_recipe_with_sections():
    recipe = parse_recipe_text(PANCAKES)
    assert recipe.title == "Pancakes"
    assert [i.name for i in recipe.ingredients] == ["flour", "eggs", "milk"]
    assert recipe.instructions == "Whisk the flour and eggs.\n\nAdd the milk and cook."


def test_recipe_without_headers():
    recipe = parse_recipe_text(
        "Tomato Soup\n"
        "2 cups tomatoes\n"
        "1 onion\n"
        "Heat the oil and cook the onion until soft.\n"
        "Serve hot."
    )
    assert recipe.title == "Tomato Soup"
    assert [i.name for i in recipe.ingredients] == ["tomatoes", "onion"]
    assert recipe.instructions == "Heat the oil and cook the onion until soft.\n\nServe hot."


def test_recipe_without_title_or_steps():
    recipe = parse_recipe_text("2 eggs")
    assert recipe.title == "Untitled Recipe"
    assert [i.name for i in recipe.ingredients] == ["eggs"]
    assert recipe.instructions == "2 eggs"

    recipe = parse_recipe_text("")
    assert recipe.title == "Untitled Recipe"
    assert recipe.ingredients == []


def test_recipe_ingredients_for_matching():
    recipe = parse_recipe_text(PANCAKES)
    assert recipe_ingredients(recipe.ingredients) == [
        {'name': 'flour', 'measure': '1 1/2 cup'},
        {'name': 'eggs', 'measure': '2'},
        {'name': 'milk', 'measure': '1 cup'},
    ]
