"""
Parsing Service

Functions for reading numeric quantities out of free-form ingredient text.
"""

import logging
import math
import re
from dataclasses import dataclass

from constants import FRACTION_GLYPHS
from .fractions import glyph_to_decimal

log = logging.getLogger('app.parsing')

# A fraction glyph, or an integer slash fraction not glued to a preceding number
_FRACTION_TOKEN = re.compile(
    r'(?P<glyph>[' + FRACTION_GLYPHS + r'])'
    r'|(?<![\d.])(?P<num>\d+)/(?P<den>\d+)'
)

# Numeric prefix of a whitespace-delimited token ("2cups" -> "2")
_LEADING_NUMBER = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')

# Characters that may make up a quantity at the start of an ingredient name
_LEADING_QUANTITY = re.compile(r'[\d\s/.' + FRACTION_GLYPHS + r']+')


@dataclass(frozen=True)
class ExplicitQuantity:
    """Quantity lives in the dedicated amount field."""
    amount: str
    unit: str
    name: str


@dataclass(frozen=True)
class EmbeddedQuantity:
    """No amount field; the quantity (if any) leads the name."""
    raw_name: str


@dataclass(frozen=True)
class Extraction:
    extracted_text: str
    remainder_name: str
    quantity: float


def _fraction_value(match):
    glyph = match.group('glyph')
    if glyph:
        return glyph_to_decimal(glyph)
    # Oversized digit runs are as unparseable as a zero denominator
    try:
        denominator = int(match.group('den'))
        if denominator == 0:
            return None
        return int(match.group('num')) / denominator
    except (ValueError, OverflowError):
        return None


def _lex(text):
    """
    First pass: split text into resolved fraction values and raw text chunks.

    Yields floats for glyphs and slash fractions (None for a zero or
    oversized denominator) and strings for everything in between.
    """
    pos = 0
    for match in _FRACTION_TOKEN.finditer(text):
        yield text[pos:match.start()]
        yield _fraction_value(match)
        pos = match.end()
    yield text[pos:]


def parse_amount(text):
    """
    Parse quantity text like '2', '1/2', '1 1/2', '¾' or '1½' into a float.

    Second pass sums the resolved fractions and the numeric prefix of every
    whitespace-delimited token in the raw chunks, which is what turns a
    mixed number into a single value. Returns None when nothing numeric
    was found.

    A parsed 0 is returned as 0.0; callers treat it the same as None and
    leave the ingredient as written.
    """
    if text is None:
        return None
    text = str(text)
    if not text.strip():
        return None

    total = 0.0
    found = False
    for lexeme in _lex(text):
        if lexeme is None:
            continue
        if not isinstance(lexeme, str):
            total += lexeme
            found = True
            continue
        for token in lexeme.split():
            match = _LEADING_NUMBER.match(token)
            if match:
                total += float(match.group())
                found = True

    if not found or not math.isfinite(total):
        return None
    return total


def extract_quantity(name):
    """
    Pull a leading quantity off an ingredient name like '2 cups flour'.

    Returns an Extraction, or None when the name does not start with
    something parseable. A name whose leading digits are not a quantity
    ('100% whole wheat flour') is still extracted.
    """
    if not name:
        return None
    match = _LEADING_QUANTITY.match(name)
    if not match:
        return None

    prefix = match.group()
    quantity = parse_amount(prefix)
    if quantity is None:
        log.debug("No quantity in leading text %r of %r", prefix, name)
        return None

    return Extraction(
        extracted_text=prefix.strip(),
        remainder_name=name[match.end():].strip(),
        quantity=quantity,
    )


def resolve_quantity_source(ingredient):
    """Decide once whether the quantity comes from the amount field or the name."""
    if ingredient.amount and ingredient.amount.strip():
        return ExplicitQuantity(
            amount=ingredient.amount,
            unit=ingredient.unit,
            name=ingredient.name,
        )
    return EmbeddedQuantity(raw_name=ingredient.name)
