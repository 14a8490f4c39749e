"""
Recipe Models

Contains the Recipe and RecipeIngredient models. Ingredient fields are
stored exactly as entered; scaling never writes back here.
"""

from services import Ingredient
from .base import db


class Recipe(db.Model):
    """Recipe with its base serving count and ordered ingredient lines."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), unique=True, nullable=False, index=True)
    # None means the recipe does not say; scaling is disabled then
    servings = db.Column(db.Integer, nullable=True, default=4)
    instructions = db.Column(db.Text, default='')
    ingredients = db.relationship(
        'RecipeIngredient', backref='recipe', lazy=True,
        cascade='all, delete-orphan', order_by='RecipeIngredient.position',
    )


class RecipeIngredient(db.Model):
    """One ingredient line. name/amount/unit are untyped free text."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    name = db.Column(db.String(200), nullable=False)
    amount = db.Column(db.String(50), default='')
    unit = db.Column(db.String(50), default='')

    def as_ingredient(self):
        return Ingredient(name=self.name, amount=self.amount or '', unit=self.unit or '')
