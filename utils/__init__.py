# Utility modules for the recipe scaler
from .sanitizer import (
    sanitize_line, sanitize_recipe_name,
    sanitize_instructions, sanitize_ingredient_fields
)
