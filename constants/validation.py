"""
Validation Constants

Limits applied to JSON request bodies before they reach the matching
engine.
"""

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_text': 500,
    'receipt_item': 200,
    'candidate_name': 200,
    'recipe_text': 10000,
}

# Maximum number of entries accepted in any list field
MAX_LIST_ITEMS = 1000

# Keys copied through from receipt match candidates
CANDIDATE_FIELDS = ('id', 'name', 'source', 'shoppingListId', 'inventoryId', 'shelfId')

# Valid candidate sources for receipt matching
VALID_CANDIDATE_SOURCES = {'shopping_list', 'inventory', 'items'}
