"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from filed_recipes.domain.models.enums import RecipeReadStatus
from filed_recipes.domain.models.recipe import Ingredient, Recipe
from filed_recipes.domain.models.settings import RecipeSettings

__all__ = [
    # Enums
    "RecipeReadStatus",
    # Recipes
    "Ingredient",
    "Recipe",
    # Settings
    "RecipeSettings",
]
