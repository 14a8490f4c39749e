"""
Fraction Lookup Service

Glyph <-> decimal lookups over the fraction table.
"""

from constants import FRACTION_TABLE, SNAP_TOLERANCE

_GLYPH_VALUES = {glyph: value for value, glyph in FRACTION_TABLE}


def glyph_to_decimal(glyph):
    """Return the decimal value of a fraction glyph, or None if unknown."""
    return _GLYPH_VALUES.get(glyph)


def nearest_glyph(fraction, tolerance=SNAP_TOLERANCE):
    """
    Find the glyph whose value is closest to `fraction`.

    Returns None when no entry is within `tolerance`. Ties go to the
    smaller table entry since the table is walked in ascending order.
    """
    best_glyph = None
    best_diff = None
    for value, glyph in FRACTION_TABLE:
        diff = abs(fraction - value)
        if diff > tolerance:
            continue
        if best_diff is None or diff < best_diff:
            best_glyph = glyph
            best_diff = diff
    return best_glyph
