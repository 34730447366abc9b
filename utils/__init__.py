# Utility modules for the pantry matcher API
from .sanitizer import sanitize_ingredient_text, sanitize_recipe_text
from .payload import (
    PayloadError, require_object, get_text, get_text_list,
    get_recipe_ingredients, get_candidates
)
