"""
Constants Package

Static lookup tables and validation limits.
"""

from .fractions import FRACTION_TABLE, FRACTION_GLYPHS, SNAP_TOLERANCE
from .validation import MIN_SERVINGS, MAX_SERVINGS, DEFAULT_SERVINGS, MAX_LENGTHS

__all__ = [
    'FRACTION_TABLE',
    'FRACTION_GLYPHS',
    'SNAP_TOLERANCE',
    'MIN_SERVINGS',
    'MAX_SERVINGS',
    'DEFAULT_SERVINGS',
    'MAX_LENGTHS',
]
