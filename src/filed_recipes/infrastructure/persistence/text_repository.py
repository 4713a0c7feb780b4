"""Text repository — implements RecipeRepositoryPort on a sectioned text file.

The repository owns the recipe list. Callers only ever see deep copies, so
they can change what they get back without touching the stored recipes.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from filed_recipes.domain.errors import RecipeFormatError, RecipeIndexError
from filed_recipes.domain.events import RecipesChangedEvent
from filed_recipes.domain.models.recipe import Recipe
from filed_recipes.domain.models.settings import RecipeSettings
from filed_recipes.domain.ports.recipe_repository import RecipeRepositoryPort
from filed_recipes.infrastructure.persistence.recipe_format import (
    parse_lines,
    serialize_recipes,
)

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# Accepts files saved with a UTF-8 byte-order mark.
READ_ENCODING = "utf-8-sig"


class TextRecipeRepository(RecipeRepositoryPort):
    """Holder for recipes read from and written to a text file.

    Parameters
    ----------
    path : str | Path | None
        Default recipe file for :meth:`load` and :meth:`save`. Falls back to
        ``settings.recipes_file``.
    settings : RecipeSettings | None
        Error-reporting and layout preferences.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        settings: RecipeSettings | None = None,
    ) -> None:
        self._settings = settings or RecipeSettings()
        self._path = Path(path) if path is not None else self._settings.recipes_file
        self._recipes: list[Recipe] = []
        self._is_modified = False
        self.recipes_changed = RecipesChangedEvent()

    # -- Properties ----------------------------------------------------------

    @property
    def path(self) -> Path:
        """The default recipe file."""
        return self._path

    @property
    def is_modified(self) -> bool:
        """True when recipes were deleted since the last load or save."""
        return self._is_modified

    def __len__(self) -> int:
        return len(self._recipes)

    # -- Persistence ---------------------------------------------------------

    def load(self, path: str | Path | None = None) -> None:
        """Read recipes from *path* and replace the current collection.

        Format and I/O errors are logged and swallowed unless
        ``raise_errors`` is set; either way the current collection is left
        as it was.
        """
        path = self._resolve(path)
        try:
            with path.open("r", encoding=READ_ENCODING) as fh:
                recipes = parse_lines(fh)
        except (RecipeFormatError, OSError, UnicodeDecodeError) as exc:
            if self._settings.raise_errors:
                logger.debug("Failed to load recipes from %s: %s", path, exc)
                raise
            logger.error("Failed to load recipes from %s: %s", path, exc)
            return

        self._recipes = recipes
        self._is_modified = False
        logger.info("Loaded %d recipe(s) from %s", len(recipes), path)
        self._on_recipes_changed()

    def save(self, path: str | Path | None = None) -> None:
        """Write all recipes to *path*, replacing any existing file.

        The file is written to a temporary file first and then renamed over
        the target.
        """
        path = self._resolve(path)
        try:
            lines = serialize_recipes(
                self._recipes,
                blank_line_between=self._settings.blank_line_between_recipes,
            )
            self._write_lines(path, lines)
        except (RecipeFormatError, OSError) as exc:
            if self._settings.raise_errors:
                logger.debug("Failed to save recipes to %s: %s", path, exc)
                raise
            logger.error("Failed to save recipes to %s: %s", path, exc)
            return

        self._is_modified = False
        logger.info("Saved %d recipe(s) to %s", len(self._recipes), path)

    @staticmethod
    def _write_lines(path: Path, lines: list[str]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with open(tmp_fd, "w", encoding=ENCODING, newline="\n") as fh:
                fh.writelines(f"{line}\n" for line in lines)
            Path(tmp_path).replace(path)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    # -- Queries -------------------------------------------------------------

    def get_all(self) -> list[Recipe]:
        """Return a deep copy of every recipe, in stored order."""
        return [recipe.clone() for recipe in self._recipes]

    def get_at(self, index: int) -> Recipe:
        """Return a deep copy of the recipe at *index*."""
        return self._recipes[self._check_index(index)].clone()

    # -- Mutations -----------------------------------------------------------

    def delete(self, recipe: Recipe) -> None:
        """Delete *recipe*.

        *recipe* is usually a copy handed out by :meth:`get_all` or
        :meth:`get_at`, so after the identity check the first stored recipe
        equal to it is removed instead. Nothing is removed when no recipe
        matches.
        """
        position = self._find(recipe)
        if position is None:
            logger.warning("Recipe %r not found; nothing deleted", recipe.name)
            return

        del self._recipes[position]
        self._is_modified = True
        logger.debug("Deleted recipe %r", recipe.name)
        self._on_recipes_changed()

    def delete_at(self, index: int) -> None:
        """Delete the recipe at *index*."""
        self.delete(self._recipes[self._check_index(index)])

    # -- Helpers -------------------------------------------------------------

    def _resolve(self, path: str | Path | None) -> Path:
        return Path(path) if path is not None else self._path

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._recipes):
            raise RecipeIndexError(
                f"No recipe at index {index} (collection has {len(self._recipes)})."
            )
        return index

    def _find(self, recipe: Recipe) -> int | None:
        for i, owned in enumerate(self._recipes):
            if owned is recipe:
                return i
        for i, owned in enumerate(self._recipes):
            if owned == recipe:
                return i
        return None

    def _on_recipes_changed(self) -> None:
        """Raise the ``recipes_changed`` event."""
        self.recipes_changed.emit(self)
