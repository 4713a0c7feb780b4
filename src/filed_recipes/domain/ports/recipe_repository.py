"""Port: Recipe repository — load/save/query a recipe collection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from filed_recipes.domain.events import RecipesChangedEvent
from filed_recipes.domain.models.recipe import Recipe


class RecipeRepositoryPort(ABC):
    """Contract for holding a recipe collection backed by a file."""

    recipes_changed: RecipesChangedEvent

    @abstractmethod
    def load(self, path: str | Path | None = None) -> None:
        """Replace the collection with the recipes read from *path*."""
        ...

    @abstractmethod
    def save(self, path: str | Path | None = None) -> None:
        """Write the collection to *path*, replacing the file."""
        ...

    @abstractmethod
    def get_all(self) -> list[Recipe]:
        """Return independent copies of all recipes, in stored order."""
        ...

    @abstractmethod
    def get_at(self, index: int) -> Recipe:
        """Return an independent copy of the recipe at *index*."""
        ...

    @abstractmethod
    def delete(self, recipe: Recipe) -> None:
        """Remove *recipe* (or the first recipe equal to it)."""
        ...

    @abstractmethod
    def delete_at(self, index: int) -> None:
        """Remove the recipe at *index*."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of recipes."""
        ...

    @property
    @abstractmethod
    def path(self) -> Path:
        """The recipe file used when no path is passed."""
        ...

    @property
    @abstractmethod
    def is_modified(self) -> bool:
        """True when the collection changed since it was last loaded or saved."""
        ...
