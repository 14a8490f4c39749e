"""
Ingredient Value

Immutable ingredient line handed to the scaling pipeline.
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Ingredient:
    """An ingredient line as displayed. All fields are free text."""
    name: str
    amount: str = ''
    unit: str = ''

    def to_dict(self):
        return asdict(self)
