"""
Ingredient Constants

Descriptor vocabulary, synonym table, pantry staples, recipe note keywords and receipt
abbreviations. Everything here is read-only for the life of the process.
"""

from types import MappingProxyType

# Whole words removed from ingredient phrases before matching
# (size, preparation, doneness, color, texture, ...)
DESCRIPTORS = frozenset({
    # Size
    'large', 'small', 'medium', 'big', 'tiny', 'thin', 'thick',
    # Cut / preparation
    'chopped', 'minced', 'diced', 'sliced', 'cubed', 'julienned', 'shredded',
    'grated', 'crushed', 'mashed', 'pureed', 'ground', 'whole', 'halved',
    'quartered', 'cut', 'torn', 'crumbled', 'flaked',
    # State / cooking
    'fresh', 'dried', 'frozen', 'canned', 'raw', 'cooked', 'roasted', 'grilled',
    'baked', 'fried', 'steamed', 'boiled', 'blanched', 'sauteed', 'braised',
    'organic', 'ripe', 'unripe', 'young', 'mature', 'aged',
    # Color
    'red', 'green', 'yellow', 'white', 'black', 'brown', 'purple',
    'golden', 'dark', 'light',
    # Temperature
    'hot', 'cold', 'warm', 'chilled',
    # Texture
    'soft', 'hard', 'crispy', 'crunchy', 'tender', 'firm',
    # Trimming
    'boneless', 'skinless', 'seedless', 'pitted', 'peeled', 'trimmed',
    # Adverbs
    'finely', 'roughly', 'coarsely', 'freshly', 'lightly',
})

# Ingredient name variants (normalized phrase or word -> canonical name)
SYNONYMS = MappingProxyType({
    # Peppers
    'peppers': 'pepper',
    'bell pepper': 'pepper',
    'bell peppers': 'pepper',
    'capsicum': 'pepper',
    'sweet pepper': 'pepper',
    'sweet peppers': 'pepper',
    # Onions
    'onions': 'onion',
    'shallot': 'onion',
    'shallots': 'onion',
    'scallion': 'onion',
    'scallions': 'onion',
    'green onion': 'onion',
    'spring onion': 'onion',
    'spring onions': 'onion',
    # Tomatoes
    'tomatoes': 'tomato',
    'cherry tomato': 'tomato',
    'cherry tomatoes': 'tomato',
    'roma tomato': 'tomato',
    'roma tomatoes': 'tomato',
    # Potatoes
    'potatoes': 'potato',
    'spud': 'potato',
    'spuds': 'potato',
    'carrots': 'carrot',
    # Garlic
    'garlic clove': 'garlic',
    'garlic cloves': 'garlic',
    'clove garlic': 'garlic',
    # Meat
    'chicken breast': 'chicken',
    'chicken breasts': 'chicken',
    'chicken thigh': 'chicken',
    'chicken thighs': 'chicken',
    'ground beef': 'beef',
    'beef steak': 'beef',
    'steak': 'beef',
    'prawns': 'shrimp',
    'prawn': 'shrimp',
    # Mushrooms
    'mushrooms': 'mushroom',
    'cremini': 'mushroom',
    'portobello': 'mushroom',
    # Eggs
    'eggs': 'egg',
    'whole egg': 'egg',
    # Citrus
    'lemons': 'lemon',
    'lemon juice': 'lemon',
    'limes': 'lime',
    'lime juice': 'lime',
    # Herbs
    'cilantro': 'coriander',
    'coriander leaves': 'coriander',
    # Stock
    'broth': 'stock',
    'chicken stock': 'stock',
    'beef stock': 'stock',
    'chicken broth': 'stock',
    'vegetable stock': 'stock',
    'vegetable broth': 'stock',
    # Vegetables with regional names
    'aubergine': 'eggplant',
    'aubergines': 'eggplant',
    'courgette': 'zucchini',
    'courgettes': 'zucchini',
    'garbanzo beans': 'chickpea',
    'chickpeas': 'chickpea',
    # Dairy
    'heavy cream': 'cream',
    'whipping cream': 'cream',
    'heavy whipping cream': 'cream',
    'parmigiano': 'parmesan',
    'parmigiano reggiano': 'parmesan',
    # Baking
    'all-purpose flour': 'flour',
    'all purpose flour': 'flour',
    'plain flour': 'flour',
    'granulated sugar': 'sugar',
    'caster sugar': 'sugar',
})

# Ingredients every kitchen is assumed to have. Qualified forms ("olive oil",
# "sea salt") contain one of these, so only the bare names are listed.
STAPLES = frozenset({'water', 'salt', 'pepper', 'oil'})

# Receipt abbreviations mapped to the words they stand for
RECEIPT_ABBREVIATIONS = MappingProxyType({
    'org': ('organic',),
    'bnls': ('boneless',),
    'sklss': ('skinless',),
    'chkn': ('chicken',),
    'brst': ('breast',),
    'thgh': ('thigh',),
    'whl': ('whole',),
    'whlmlk': ('whole', 'milk'),
    'ff': ('fat', 'free'),
    'lf': ('low', 'fat'),
    'rf': ('reduced', 'fat'),
    'gal': ('gallon',),
    'gln': ('gallon',),
    'qt': ('quart',),
    'pt': ('pint',),
    'oz': ('ounce',),
    'lb': ('pound',),
    'lbs': ('pounds',),
    'pk': ('pack',),
    'ct': ('count',),
    'lg': ('large',),
    'sm': ('small',),
    'md': ('medium',),
    'med': ('medium',),
    'frz': ('frozen',),
    'frzn': ('frozen',),
    'frsh': ('fresh',),
    'grn': ('green',),
    'rd': ('red',),
    'wht': ('white',),
    'brn': ('brown',),
    'yel': ('yellow',),
    'veg': ('vegetable',),
    'vegs': ('vegetables',),
    'frt': ('fruit',),
    'jce': ('juice',),
    'brd': ('bread',),
    'cer': ('cereal',),
    'yog': ('yogurt',),
    'ygrt': ('yogurt',),
    'chz': ('cheese',),
    'chs': ('cheese',),
    'btr': ('butter',),
    'egg': ('eggs',),
    'mlk': ('milk',),
    'crm': ('cream',),
    'icrm': ('ice', 'cream'),
    'cof': ('coffee',),
    'cffe': ('coffee',),
    'sda': ('soda',),
    'wtr': ('water',),
    'spk': ('sparkling',),
    'sprk': ('sparkling',),
    'nat': ('natural',),
    'ntrl': ('natural',),
    'prem': ('premium',),
    'val': ('value',),
    'sav': ('savings',),
    'dsc': ('discount',),
    'sel': ('select',),
    'chc': ('choice',),
    'prm': ('prime',),
})

# Comma clauses containing one of these are preparation notes, not part of
# the name ("onion, finely chopped" vs "chicken, boneless")
NOTE_KEYWORDS = frozenset({
    'optional', 'divided', 'or more', 'or less', 'to taste',
    'for serving', 'for garnish', 'at room temp', 'softened',
    'melted', 'chopped', 'diced', 'minced', 'sliced', 'cubed',
    'sifted', 'packed', 'beaten', 'room temperature', 'thawed',
    'drained', 'rinsed', 'peeled', 'seeded', 'cored', 'trimmed',
    'cut into', 'plus more', 'as needed', 'torn', 'shredded',
})
