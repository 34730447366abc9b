"""
Recipe Text Parsing

Turns pasted recipe text into a title, structured ingredient lines and the
instructions, so user-authored recipes can be matched against the inventory
the same way catalog recipes are.
"""

import logging
import re
from collections import namedtuple

from constants import NOTE_KEYWORDS, UNICODE_FRACTIONS, UNIT_MAPPINGS

logger = logging.getLogger(__name__)


ParsedIngredient = namedtuple('ParsedIngredient', ['name', 'quantity', 'amount', 'unit', 'notes'])

ParsedRecipe = namedtuple('ParsedRecipe', ['title', 'ingredients', 'instructions'])

UNTITLED = 'Untitled Recipe'

# Lines at least this long are taken as instructions when there are no headers
LONG_LINE = 50

# Header-less lines starting with a number are ingredients only below this length
MAX_INGREDIENT_LINE = 80

_FRACTIONS = ''.join(UNICODE_FRACTIONS)

_AMOUNT = (
    r'(?:\d+\s+\d+\s*/\s*\d+'       # 1 1/2
    r'|\d+\s*[{f}]'                 # 1½, 1 ½
    r'|\d+(?:\s*/\s*\d+|\.\d+)?'    # 1/2, 1.5, 2
    r'|[{f}])'                      # ½
).format(f=_FRACTIONS)

# Quantity (or range) followed by whitespace or a glued unit ("200g")
QUANTITY_RE = re.compile(
    r'^(' + _AMOUNT + r'(?:\s*-\s*' + _AMOUNT + r')?)(?:\s+|(?=[a-z]))(.+)$',
    re.IGNORECASE,
)

# Bullets and list numbering, but not a quantity like "1.5"
BULLET_RE = re.compile(r'^(?:[-*•·]+|\d+[.)](?=\s))\s*')

STEP_NUMBER_RE = re.compile(r'^\d+[.)]\s*')

PARENTHETICAL_RE = re.compile(r'\s*\(([^)]*)\)')

INGREDIENTS_HEADER_RE = re.compile(r'^ingredients?:?$', re.IGNORECASE)

INSTRUCTIONS_HEADER_RE = re.compile(
    r'^(?:instructions?|directions?|method|steps?|preparation|how to make):?$',
    re.IGNORECASE,
)

INSTRUCTION_VERB_RE = re.compile(
    r'\b(?:add|mix|stir|cook|bake|heat|pour|combine|whisk|fold|preheat|place|remove|let|serve)\b',
    re.IGNORECASE,
)

_STARTS_WITH_AMOUNT_RE = re.compile(r'^(?!\d+[.)]\s)[\d/{f}]'.format(f=_FRACTIONS))

# Includes non-breaking and zero-width spaces pasted from web pages
_WHITESPACE_RE = re.compile(r'[\s\u00a0\u2000-\u200b]+')


def parse_amount(quantity):
    """
    Numeric value of a quantity string.

    "1 1/2" -> 1.5, "1½" -> 1.5, "½" -> 0.5, "2-3" -> 2.0 (low end of a range).
    Returns None when the string can't be read as a number.
    """
    if not quantity or not quantity.strip():
        return None

    low = re.split(r'\s*-\s*', quantity.strip(), maxsplit=1)[0]
    low = ''.join(f' {UNICODE_FRACTIONS[c]} ' if c in UNICODE_FRACTIONS else c for c in low)
    low = re.sub(r'\s*/\s*', '/', low)

    total = 0.0
    for part in low.split():
        try:
            if '/' in part:
                num, _, den = part.partition('/')
                total += float(num) / float(den)
            else:
                total += float(part)
        except (ValueError, ZeroDivisionError):
            return None
    return total


def looks_like_ingredient(line):
    """True if the line starts with an amount (but not "1." step numbering)."""
    return bool(_STARTS_WITH_AMOUNT_RE.match(line))


def parse_ingredient_line(line):
    """
    Parse one ingredient line like "1 1/2 cups flour, sifted".

    Parenthesized text and comma clauses that read as preparation notes
    ("chopped", "to taste") go to notes. A leading quantity is kept as
    written and also read as a number; the word after it becomes the unit
    when it is a known unit spelling.

    Returns:
        ParsedIngredient, or None when nothing is left to name
    """
    if not isinstance(line, str):
        return None
    text = _WHITESPACE_RE.sub(' ', line).strip()
    text = BULLET_RE.sub('', text, count=1).strip()
    if not text:
        return None

    notes = [n.strip() for n in PARENTHETICAL_RE.findall(text) if n.strip()]
    text = PARENTHETICAL_RE.sub('', text).strip()

    head, comma, tail = text.partition(',')
    if comma and any(keyword in tail.lower() for keyword in NOTE_KEYWORDS):
        text = head.strip()
        notes.append(tail.strip())

    quantity = unit = None
    match = QUANTITY_RE.match(text)
    if match:
        quantity, text = match.group(1).strip(), match.group(2).strip()
        first, _, rest = text.partition(' ')
        first = first.lower().rstrip('.')
        if first in UNIT_MAPPINGS and rest:
            unit = UNIT_MAPPINGS[first]
            text = rest.strip()

    name = text.strip(' ,')
    if not name:
        return None

    return ParsedIngredient(
        name=name,
        quantity=quantity,
        amount=parse_amount(quantity),
        unit=unit,
        notes='; '.join(notes) or None,
    )


def _auto_detect(lines, title):
    """Split header-less text into ingredients and steps by how lines look."""
    ingredients = []
    steps = []
    for line in lines:
        if line == title or INGREDIENTS_HEADER_RE.match(line) or INSTRUCTIONS_HEADER_RE.match(line):
            continue

        if looks_like_ingredient(line) and len(line) < MAX_INGREDIENT_LINE:
            parsed = parse_ingredient_line(line)
            if parsed:
                ingredients.append(parsed)
                continue

        if len(line) > LONG_LINE or INSTRUCTION_VERB_RE.search(line):
            steps.append(STEP_NUMBER_RE.sub('', line))
            continue

        if not title and not ingredients and not steps:
            title = line
        elif ingredients and not steps:
            parsed = parse_ingredient_line(line)
            if parsed:
                ingredients.append(parsed)
        else:
            steps.append(line)

    return title, ingredients, steps


def parse_recipe_text(text):
    """
    Parse pasted recipe text.

    "Ingredients" and "Instructions"/"Directions"/"Method"/... header lines
    split the text into sections; the first non-ingredient line before any
    header is the title. Text without headers is split by heuristics:
    lines starting with an amount are ingredients, long lines or lines with
    cooking verbs are steps.

    Returns:
        ParsedRecipe(title, ingredients, instructions). Steps are joined by
        blank lines; when no steps are found the whole text is returned as
        the instructions.
    """
    if not isinstance(text, str):
        text = ''
    lines = [_WHITESPACE_RE.sub(' ', line).strip() for line in text.splitlines()]
    lines = [line for line in lines if len(line) >= 2]

    title = ''
    ingredients = []
    steps = []
    section = None

    for line in lines:
        if INGREDIENTS_HEADER_RE.match(line):
            section = 'ingredients'
            continue
        if INSTRUCTIONS_HEADER_RE.match(line):
            section = 'instructions'
            continue

        if section is None:
            if not title and not looks_like_ingredient(line):
                title = line
        elif section == 'ingredients':
            parsed = parse_ingredient_line(line)
            if parsed:
                ingredients.append(parsed)
        else:
            step = STEP_NUMBER_RE.sub('', line)
            if step:
                steps.append(step)

    if not ingredients and not steps:
        title, ingredients, steps = _auto_detect(lines, title)

    logger.debug("Parsed recipe %r: %d ingredients, %d steps", title, len(ingredients), len(steps))
    return ParsedRecipe(
        title=title or UNTITLED,
        ingredients=ingredients,
        instructions='\n\n'.join(steps) if steps else text.strip(),
    )


def recipe_ingredients(parsed):
    """ParsedIngredients as the {name, measure} entries compute_recipe_match takes."""
    return [
        {'name': p.name, 'measure': ' '.join(part for part in (p.quantity, p.unit) if part)}
        for p in parsed
    ]
