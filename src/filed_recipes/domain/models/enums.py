"""Enumerations used by the recipe domain."""

from __future__ import annotations

from enum import Enum


class RecipeReadStatus(str, Enum):
    """How the next non-marker line of a recipe file is interpreted."""

    INDEFINITE = "indefinite"
    EXPECTING_NAME = "expecting_name"
    READING_INGREDIENTS = "reading_ingredients"
    READING_INSTRUCTIONS = "reading_instructions"
