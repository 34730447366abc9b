"""
Request Payload Validation

Pulls typed fields out of JSON request bodies, raising PayloadError for
anything the API should answer with a 400.
"""

from constants import MAX_LENGTHS, MAX_LIST_ITEMS, CANDIDATE_FIELDS, VALID_CANDIDATE_SOURCES
from .sanitizer import sanitize_ingredient_text, sanitize_recipe_text


class PayloadError(Exception):
    """Raised when a request body is missing or malformed."""
    pass


def require_object(payload):
    """The decoded JSON body must be an object."""
    if not isinstance(payload, dict):
        raise PayloadError("Request body must be a JSON object")
    return payload


def get_text(payload, key, required=True, max_length=MAX_LENGTHS['ingredient_text'],
             multiline=False):
    """A sanitized string field (multiline keeps line breaks)."""
    value = payload.get(key)
    if value is None and not required:
        return ''
    if not isinstance(value, str):
        raise PayloadError(f"'{key}' must be a string")
    if multiline:
        return sanitize_recipe_text(value, max_length)
    return sanitize_ingredient_text(value, max_length)


def get_text_list(payload, key, required=True, max_length=MAX_LENGTHS['ingredient_text']):
    """A list of sanitized strings; blank entries are dropped."""
    value = payload.get(key)
    if value is None and not required:
        return []
    if not isinstance(value, list):
        raise PayloadError(f"'{key}' must be a list of strings")
    if len(value) > MAX_LIST_ITEMS:
        raise PayloadError(f"'{key}' has more than {MAX_LIST_ITEMS} entries")

    texts = []
    for item in value:
        if not isinstance(item, str):
            raise PayloadError(f"'{key}' must be a list of strings")
        text = sanitize_ingredient_text(item, max_length)
        if text:
            texts.append(text)
    return texts


def get_recipe_ingredients(payload, key='ingredients'):
    """Recipe ingredients given as strings or {name, measure} objects."""
    value = payload.get(key)
    if not isinstance(value, list):
        raise PayloadError(f"'{key}' must be a list")
    if len(value) > MAX_LIST_ITEMS:
        raise PayloadError(f"'{key}' has more than {MAX_LIST_ITEMS} entries")

    ingredients = []
    for item in value:
        if isinstance(item, str):
            ingredients.append({'name': sanitize_ingredient_text(item), 'measure': ''})
        elif isinstance(item, dict) and isinstance(item.get('name'), str):
            measure = item.get('measure')
            ingredients.append({
                'name': sanitize_ingredient_text(item['name']),
                'measure': sanitize_ingredient_text(measure) if isinstance(measure, str) else '',
            })
        else:
            raise PayloadError(f"Each of '{key}' must be a string or an object with a 'name'")
    return ingredients


def get_candidates(payload, key='candidates'):
    """Receipt match candidates: objects with an 'id' and a 'name'."""
    value = payload.get(key)
    if not isinstance(value, list):
        raise PayloadError(f"'{key}' must be a list")
    if len(value) > MAX_LIST_ITEMS:
        raise PayloadError(f"'{key}' has more than {MAX_LIST_ITEMS} entries")

    candidates = []
    for item in value:
        if not isinstance(item, dict) or item.get('id') is None or not isinstance(item.get('name'), str):
            raise PayloadError(f"Each of '{key}' must be an object with 'id' and 'name'")
        source = item.get('source', 'items')
        if source not in VALID_CANDIDATE_SOURCES:
            raise PayloadError(f"Invalid candidate source: {source}")
        candidate = {field: item[field] for field in CANDIDATE_FIELDS if item.get(field) is not None}
        candidate['name'] = sanitize_ingredient_text(item['name'], MAX_LENGTHS['candidate_name'])
        candidate['source'] = source
        candidates.append(candidate)
    return candidates
