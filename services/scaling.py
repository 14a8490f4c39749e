"""
Scaling Service

Scales ingredient quantities from a recipe's servings to a display target.
Scaled ingredients are display values only; nothing here touches the
database.
"""

import logging
import math
from dataclasses import dataclass, replace

from constants import MIN_SERVINGS
from .formatting import format_amount
from .parsing import ExplicitQuantity, extract_quantity, parse_amount, resolve_quantity_source

log = logging.getLogger('app.scaling')

# Where a scaled quantity is written back to
SOURCE_AMOUNT = 'amount'
SOURCE_NAME = 'name'
SOURCE_NONE = 'none'


@dataclass(frozen=True)
class ScaleContext:
    base_servings: int
    target_servings: int

    @property
    def is_noop(self):
        return (not self.base_servings or not self.target_servings
                or self.target_servings == self.base_servings)

    @property
    def ratio(self):
        if self.is_noop:
            return 1.0
        return self.target_servings / self.base_servings


def scale_quantity(quantity, ctx):
    """
    Multiply a parsed quantity by the serving ratio.

    Returns None when there is nothing to do (no base servings, target
    equals base, or no quantity); the caller then keeps the ingredient
    as it was. No rounding happens here.
    """
    if quantity is None or ctx.is_noop:
        return None
    return quantity * ctx.ratio


def reconstruct_ingredient(original, formatted, source, remainder_name=None):
    """Write a formatted quantity back into the field it was read from."""
    if source == SOURCE_NONE:
        return original
    if source == SOURCE_AMOUNT:
        return replace(original, amount=formatted)
    if source == SOURCE_NAME:
        if not remainder_name:
            return replace(original, name=formatted)
        return replace(original, name=f"{formatted} {remainder_name}")
    raise ValueError(f"Unknown quantity source: {source!r}")


def scale_ingredient(ingredient, ctx):
    """
    Scale one ingredient for display.

    Anything that cannot be parsed is returned unchanged rather than
    raising, so one odd line never breaks the rest of the list.
    """
    if ctx.is_noop:
        return ingredient

    source = resolve_quantity_source(ingredient)
    remainder_name = None
    if isinstance(source, ExplicitQuantity):
        quantity = parse_amount(source.amount)
        target_field = SOURCE_AMOUNT
    else:
        extraction = extract_quantity(source.raw_name)
        quantity = extraction.quantity if extraction else None
        remainder_name = extraction.remainder_name if extraction else None
        target_field = SOURCE_NAME

    # Zero and unparseable quantities are both left as written
    if not quantity:
        log.debug("Leaving ingredient unscaled: %r", ingredient)
        return reconstruct_ingredient(ingredient, None, SOURCE_NONE)

    scaled = scale_quantity(quantity, ctx)
    if not math.isfinite(scaled):
        log.debug("Scaled quantity out of range, leaving unscaled: %r", ingredient)
        return reconstruct_ingredient(ingredient, None, SOURCE_NONE)
    return reconstruct_ingredient(ingredient, format_amount(scaled), target_field, remainder_name)


def scale_ingredients(ingredients, ctx):
    """Scale every ingredient in a list; the result has the same order and length."""
    return [scale_ingredient(ingredient, ctx) for ingredient in ingredients]


def increment_servings(target):
    return target + 1


def decrement_servings(target):
    return max(MIN_SERVINGS, target - 1)


def reset_servings(recipe_servings):
    return recipe_servings

