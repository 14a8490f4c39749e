"""
Formatting Service

Render numeric quantities for display, snapping to fraction glyphs.
"""

import math

from .fractions import nearest_glyph

# Float noise allowed when checking for an exact glyph or two-place value
_EPSILON = 1e-9


def _exact_at_two_places(value):
    return abs(round(value, 2) - value) < _EPSILON


def format_amount(value):
    """
    Convert a float to a display string: 1.5 -> '1 ½', 0.25 -> '¼',
    2 -> '2', 2.33 -> '2.33'.

    A remainder that is exactly a table value is always shown as a glyph.
    Otherwise it snaps to the nearest glyph within the snap tolerance,
    unless it already prints exactly at two decimals (so typed values like
    0.33 stay as written while 1/3 of a cup still shows as ⅓).
    """
    if value is None or not math.isfinite(value):
        return ''

    whole = math.floor(value)
    remainder = value - whole

    glyph = nearest_glyph(remainder, tolerance=_EPSILON)
    if glyph is None and not _exact_at_two_places(remainder):
        glyph = nearest_glyph(remainder)
    if glyph:
        if whole == 0:
            return glyph
        return f"{whole} {glyph}"

    if value == int(value):
        return str(int(value))
    return f"{value:.2f}".rstrip('0').rstrip('.')
