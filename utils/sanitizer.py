"""
Input Sanitization Module

Cleans recipe and ingredient text before it is stored. HTML escaping is
left to Jinja's autoescaping at render time so that stored text (and the
quantities parsed from it) stays exactly as typed.
"""

import re

from constants import MAX_LENGTHS

# C0/C1 control characters and null bytes
_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')

# Control characters other than newline and tab
_CONTROL_CHARS_KEEP_LINES = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')

# Any run of whitespace, including non-breaking and zero-width spaces
_WHITESPACE = re.compile(r'[\s\u00a0\u2000-\u200b]+')


def _to_str(value):
    if value is None:
        return ''
    if not isinstance(value, str):
        value = str(value)
    return value


def sanitize_line(text, max_length):
    """
    Clean a single-line field: drop control characters, collapse
    whitespace and truncate.

    Args:
        text: The text to clean (can be None)
        max_length: Maximum allowed length

    Returns:
        Cleaned string, '' for empty input
    """
    text = _to_str(text)

    # Whitespace first so tabs/newlines become spaces instead of vanishing
    text = _WHITESPACE.sub(' ', text)
    text = _CONTROL_CHARS.sub('', text)
    text = text.strip()

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_recipe_name(name, max_length=MAX_LENGTHS['recipe_name']):
    """Sanitize a recipe name. Returns '' when nothing is left."""
    return sanitize_line(name, max_length)


def sanitize_instructions(instructions, max_length=MAX_LENGTHS['instructions']):
    """
    Sanitize recipe instructions.

    Preserves newlines for formatting.

    Args:
        instructions: The instructions text
        max_length: Maximum allowed length (default 50000)

    Returns:
        Sanitized instructions
    """
    instructions = _to_str(instructions)
    instructions = _CONTROL_CHARS_KEEP_LINES.sub('', instructions).strip()

    if len(instructions) > max_length:
        instructions = instructions[:max_length] + '\n...(truncated)'

    return instructions


def sanitize_ingredient_fields(name, amount='', unit=''):
    """
    Sanitize the three free-text fields of an ingredient line.

    Fraction glyphs and slashes pass through untouched; only control
    characters and odd whitespace are removed.

    Returns:
        (name, amount, unit) tuple
    """
    return (
        sanitize_line(name, MAX_LENGTHS['ingredient_name']),
        sanitize_line(amount, MAX_LENGTHS['ingredient_amount']),
        sanitize_line(unit, MAX_LENGTHS['ingredient_unit']),
    )
