"""
Data models
"""

from .wprm import Ingredient, WprmRecipe

__all__ = ['Ingredient', 'WprmRecipe']
