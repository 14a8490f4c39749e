"""
Validation Constants

Limits applied to recipe and ingredient input before it is stored.
"""

# Stored recipe servings (the adjusted display target is not capped above)
MIN_SERVINGS = 1
MAX_SERVINGS = 100
DEFAULT_SERVINGS = 4

# Maximum field lengths
MAX_LENGTHS = {
    'recipe_name': 200,
    'instructions': 50000,
    'ingredient_name': 200,
    'ingredient_amount': 50,
    'ingredient_unit': 50,
}
