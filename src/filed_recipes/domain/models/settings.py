"""User preferences model for Filed Recipes.

This module defines the ``RecipeSettings`` Pydantic model that captures
where the recipe file lives and how the repository reports errors and
lays out the file it writes.
"""

from __future__ import annotations

from pathlib import Path

import platformdirs
from pydantic import BaseModel, Field

APP_NAME = "filed_recipes"
RECIPES_FILENAME = "recipes.txt"


def default_recipes_file() -> Path:
    """Return ``<user data dir>/recipes.txt`` for the current platform."""
    return Path(platformdirs.user_data_dir(APP_NAME)) / RECIPES_FILENAME


class RecipeSettings(BaseModel):
    """Root user preferences — persisted to ``settings.json``."""

    recipes_file: Path = Field(
        default_factory=default_recipes_file,
        description="Recipe file used when no path is given explicitly.",
    )
    raise_errors: bool = Field(
        default=False,
        description=(
            "Re-raise load/save failures instead of logging and swallowing them."
        ),
    )
    blank_line_between_recipes: bool = Field(
        default=True,
        description="Separate recipes with an empty line when saving.",
    )
