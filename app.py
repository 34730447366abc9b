import logging

from flask import Flask, request, jsonify

from config import get_config
from services import (
    normalize, resolve_core, resolve_terms, is_always_available,
    has_ingredient, compute_recipe_match, reconcile_receipt,
    suggest_recipes, MealDBClient, parse_recipe_text, recipe_ingredients,
)
from utils import (
    PayloadError, require_object, get_text, get_text_list,
    get_recipe_ingredients, get_candidates,
)
from constants import MAX_LENGTHS

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

# Recipe catalog used by the suggestion route (swapped for a fake in tests)
app.extensions['recipe_catalog'] = MealDBClient(
    base_url=app.config['MEALDB_BASE_URL'],
    timeout=app.config['MEALDB_TIMEOUT'],
)


def match_options():
    """Matching parameters from the app config."""
    return {
        'threshold': app.config['MATCH_FUZZY_THRESHOLD'],
        'min_length': app.config['MATCH_MIN_FUZZY_LENGTH'],
    }


def json_body():
    return require_object(request.get_json(silent=True))


# ============================================
# JSON SERIALIZATION
# ============================================

def ingredient_json(entry):
    return {
        'name': entry['name'],
        'measure': entry['measure'],
        'inStock': entry['in_stock'],
    }


def match_json(result):
    """MatchResult with the field names the frontend expects."""
    return {
        'matchedCount': result['matched_count'],
        'totalIngredients': result['total_ingredients'],
        'matchPercentage': result['match_percentage'],
        'perIngredient': [ingredient_json(i) for i in result['per_ingredient']],
    }


def recipe_json(recipe):
    return {
        'id': recipe['id'],
        'title': recipe['title'],
        'image': recipe['image'],
        'url': recipe['url'],
        'youtubeUrl': recipe['youtube_url'],
        'category': recipe['category'],
        'area': recipe['area'],
        'instructions': recipe['instructions'],
        'ingredients': [ingredient_json(i) for i in recipe['ingredients']],
        'matchedCount': recipe['matched_count'],
        'totalIngredients': recipe['total_ingredients'],
        'matchPercentage': recipe['match_percentage'],
    }


def parsed_recipe_json(recipe):
    return {
        'title': recipe.title,
        'ingredients': [dict(i._asdict()) for i in recipe.ingredients],
        'instructions': recipe.instructions,
    }


def receipt_item_json(item):
    match = item['match']
    if match:
        candidate = match['candidate']
        match = {
            'itemId': candidate['id'],
            'itemName': candidate['name'],
            'score': round(match['score'], 4),
            'confidence': match['confidence'],
            'source': candidate.get('source'),
            'shoppingListId': candidate.get('shoppingListId'),
            'inventoryId': candidate.get('inventoryId'),
            'shelfId': candidate.get('shelfId'),
        }
    return {
        'name': item['name'],
        'match': match,
        'alreadyStocked': item['already_stocked'],
    }


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(PayloadError)
def handle_payload_error(e):
    return jsonify({'error': str(e)}), 400


# ============================================
# ROUTES - HEALTH
# ============================================

@app.route('/health')
def health():
    return jsonify({'ok': True})


# ============================================
# ROUTES - INGREDIENTS
# ============================================

@app.route('/api/ingredients/normalize', methods=['POST'])
def ingredient_normalize():
    """Show how the engine sees one ingredient phrase."""
    text = get_text(json_body(), 'ingredient')
    cleaned, words = normalize(text)
    return jsonify({
        'ingredient': text,
        'cleaned': cleaned,
        'words': list(words),
        'core': resolve_core(text),
        'terms': sorted(resolve_terms(text)),
        'alwaysAvailable': is_always_available(text),
    })


@app.route('/api/ingredients/check', methods=['POST'])
def ingredient_check():
    payload = json_body()
    text = get_text(payload, 'ingredient')
    owned = get_text_list(payload, 'owned')
    return jsonify({
        'ingredient': text,
        'inStock': has_ingredient(text, owned, **match_options()),
    })


# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/api/recipes/match', methods=['POST'])
def recipe_match():
    """Match statistics for one recipe against the caller's inventory."""
    payload = json_body()
    ingredients = get_recipe_ingredients(payload)
    owned = get_text_list(payload, 'owned')
    result = compute_recipe_match(ingredients, owned, **match_options())
    return jsonify(match_json(result))


@app.route('/api/recipes/suggest', methods=['POST'])
def recipe_suggest():
    """Catalog recipes ranked by how much of them the inventory covers."""
    payload = request.get_json(silent=True)
    ingredients = payload.get('ingredients') if isinstance(payload, dict) else None
    if not ingredients or not isinstance(ingredients, list):
        return jsonify({'recipes': []})

    owned = get_text_list(payload, 'ingredients')
    try:
        recipes = suggest_recipes(
            owned,
            app.extensions['recipe_catalog'],
            search_ingredients=app.config['SUGGEST_SEARCH_INGREDIENTS'],
            meals_per_ingredient=app.config['SUGGEST_MEALS_PER_INGREDIENT'],
            max_candidates=app.config['SUGGEST_MAX_CANDIDATES'],
            limit=app.config['SUGGEST_LIMIT'],
            **match_options()
        )
    except Exception:
        app.logger.exception("Recipe suggestion failed")
        return jsonify({'error': 'Failed to fetch recipes'}), 500

    return jsonify({
        'recipes': [recipe_json(r) for r in recipes],
        'searchedIngredients': owned,
    })


@app.route('/api/recipes/parse', methods=['POST'])
def recipe_parse():
    """
    Structure pasted recipe text. With an 'owned' list the parsed
    ingredients are also matched against it.
    """
    payload = json_body()
    text = get_text(payload, 'text', max_length=MAX_LENGTHS['recipe_text'], multiline=True)
    if not text:
        raise PayloadError('No text provided')

    recipe = parse_recipe_text(text)
    result = parsed_recipe_json(recipe)
    if 'owned' in payload:
        owned = get_text_list(payload, 'owned')
        match = compute_recipe_match(recipe_ingredients(recipe.ingredients), owned, **match_options())
        result['match'] = match_json(match)
    return jsonify(result)


# ============================================
# ROUTES - RECEIPTS
# ============================================

@app.route('/api/receipts/match', methods=['POST'])
def receipt_match():
    """Match cleaned receipt items to known items and the current inventory."""
    payload = json_body()
    items = get_text_list(payload, 'items', max_length=MAX_LENGTHS['receipt_item'])
    candidates = get_candidates(payload)
    owned = get_text_list(payload, 'owned', required=False)

    results = reconcile_receipt(
        items, candidates, owned,
        min_score=app.config['RECEIPT_MIN_SCORE'],
        high_confidence=app.config['RECEIPT_HIGH_CONFIDENCE'],
        **match_options()
    )
    return jsonify({'items': [receipt_item_json(r) for r in results]})


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
