"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. The CLI refers to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from filed_recipes.domain.models.settings import RecipeSettings
from filed_recipes.domain.ports.recipe_repository import RecipeRepositoryPort
from filed_recipes.infrastructure.config.settings_manager import SettingsManager
from filed_recipes.infrastructure.persistence.text_repository import (
    TextRecipeRepository,
)


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container(recipes_file="recipes.txt")
        repo = container.repository
        repo.load()
    """

    def __init__(
        self,
        recipes_file: str | Path | None = None,
        *,
        config_dir: Path | None = None,
        raise_errors: bool | None = None,
    ) -> None:
        self._settings_manager = SettingsManager(config_dir)
        settings = self._settings_manager.load()
        if raise_errors is not None:
            settings = settings.model_copy(update={"raise_errors": raise_errors})
        self._settings = settings
        self._repository = TextRecipeRepository(recipes_file, settings=settings)

    # -- Port accessors ------------------------------------------------------

    @property
    def settings_manager(self) -> SettingsManager:
        return self._settings_manager

    @property
    def settings(self) -> RecipeSettings:
        return self._settings

    @property
    def repository(self) -> RecipeRepositoryPort:
        return self._repository
