"""
Unit Constants

Unit vocabulary and fraction characters used when stripping quantities
from ingredient phrases and when parsing pasted recipe text.
"""

from types import MappingProxyType

# Unit tokens recognized after a quantity. Longest spellings come first so
# the regex alternation never stops early ("tablespoons" must not leave "s").
UNIT_TOKENS = (
    'tablespoons', 'tablespoon', 'teaspoons', 'teaspoon',
    'pounds', 'pound', 'ounces', 'ounce',
    'cups', 'cup', 'tbsp', 'tsp', 'lbs', 'lb',
    'kg', 'ml', 'oz', 'g', 'l',
)

# Unicode fraction characters and their values
UNICODE_FRACTIONS = MappingProxyType({
    '½': 0.5,    # ½
    '⅓': 1/3,    # ⅓
    '⅔': 2/3,    # ⅔
    '¼': 0.25,   # ¼
    '¾': 0.75,   # ¾
    '⅕': 0.2,    # ⅕
    '⅖': 0.4,    # ⅖
    '⅗': 0.6,    # ⅗
    '⅘': 0.8,    # ⅘
    '⅙': 1/6,    # ⅙
    '⅚': 5/6,    # ⅚
    '⅛': 0.125,  # ⅛
    '⅜': 0.375,  # ⅜
    '⅝': 0.625,  # ⅝
    '⅞': 0.875,  # ⅞
})

# Unit spellings accepted by the recipe text parser -> canonical unit
UNIT_MAPPINGS = MappingProxyType({
    'pound': 'lb', 'pounds': 'lb', 'lb': 'lb', 'lbs': 'lb',
    'ounce': 'oz', 'ounces': 'oz', 'oz': 'oz',
    'cup': 'cup', 'cups': 'cup', 'c': 'cup',
    'tablespoon': 'tbsp', 'tablespoons': 'tbsp', 'tbsp': 'tbsp', 'tbs': 'tbsp',
    'teaspoon': 'tsp', 'teaspoons': 'tsp', 'tsp': 'tsp',
    'gram': 'g', 'grams': 'g', 'g': 'g',
    'kilogram': 'kg', 'kilograms': 'kg', 'kg': 'kg',
    'milliliter': 'ml', 'milliliters': 'ml', 'ml': 'ml',
    'liter': 'l', 'liters': 'l', 'l': 'l',
    'clove': 'clove', 'cloves': 'clove',
    'head': 'head', 'heads': 'head',
    'slice': 'slice', 'slices': 'slice',
    'piece': 'piece', 'pieces': 'piece',
    'can': 'can', 'cans': 'can',
    'package': 'package', 'packages': 'package', 'pkg': 'package', 'pkgs': 'package',
    'bunch': 'bunch', 'bunches': 'bunch',
    'stalk': 'stalk', 'stalks': 'stalk',
    'sprig': 'sprig', 'sprigs': 'sprig',
    'pinch': 'pinch', 'pinches': 'pinch',
    'dash': 'dash', 'dashes': 'dash',
})
