"""
Services Package

Ingredient quantity parsing, scaling and display formatting.
"""

from .ingredient import Ingredient

from .fractions import (
    glyph_to_decimal,
    nearest_glyph,
)

from .parsing import (
    ExplicitQuantity,
    EmbeddedQuantity,
    Extraction,
    parse_amount,
    extract_quantity,
    resolve_quantity_source,
)

from .formatting import format_amount

from .scaling import (
    SOURCE_AMOUNT,
    SOURCE_NAME,
    SOURCE_NONE,
    ScaleContext,
    scale_quantity,
    reconstruct_ingredient,
    scale_ingredient,
    scale_ingredients,
    increment_servings,
    decrement_servings,
    reset_servings,
)

__all__ = [
    'Ingredient',
    # Fractions
    'glyph_to_decimal',
    'nearest_glyph',
    # Parsing
    'ExplicitQuantity',
    'EmbeddedQuantity',
    'Extraction',
    'parse_amount',
    'extract_quantity',
    'resolve_quantity_source',
    # Formatting
    'format_amount',
    # Scaling
    'SOURCE_AMOUNT',
    'SOURCE_NAME',
    'SOURCE_NONE',
    'ScaleContext',
    'scale_quantity',
    'reconstruct_ingredient',
    'scale_ingredient',
    'scale_ingredients',
    'increment_servings',
    'decrement_servings',
    'reset_servings',
]
