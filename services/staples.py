"""
Pantry Staples

Ingredients assumed to be in every kitchen (salt, water, cooking oil,
pepper). Recipes treat them as in stock whatever the inventory says.
"""

from constants import STAPLES


def is_always_available(ingredient, staples=STAPLES):
    """True if the ingredient equals, contains or is contained by a staple."""
    if not isinstance(ingredient, str):
        return False
    name = ingredient.lower().strip()
    if not name:
        return False
    return any(name == s or s in name or name in s for s in staples)
