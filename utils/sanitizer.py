"""
Input Sanitization Module

Cleans ingredient and recipe text arriving in API requests before it is
matched or parsed.
Text is not HTML-escaped here: escaping would change what gets matched
("mac & cheese"), and JSON responses are encoded by Flask.
"""

import re

_CONTROL_CHARS_RE = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_ingredient_text(text, max_length=500):
    """
    Sanitize a single ingredient line.

    Args:
        text: Single ingredient line
        max_length: Maximum length (default 500)

    Returns:
        Sanitized ingredient text ('' for None or non-text values)
    """
    if not text or not isinstance(text, str):
        return ''

    # Remove control characters
    text = _CONTROL_CHARS_RE.sub(' ', text)

    # Strip whitespace
    text = text.strip()

    # Truncate
    if len(text) > max_length:
        text = text[:max_length]

    return text


_CONTROL_CHARS_KEEP_LINES_RE = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_recipe_text(text, max_length=10000):
    """Like sanitize_ingredient_text, but keeps line breaks and tabs."""
    if not text or not isinstance(text, str):
        return ''

    text = _CONTROL_CHARS_KEEP_LINES_RE.sub(' ', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text
