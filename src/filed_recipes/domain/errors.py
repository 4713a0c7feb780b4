"""Domain errors — custom exceptions for Filed Recipes.

These exceptions are raised by the recipe file format and the repository and
caught by the presentation layer. They carry no infrastructure dependencies.
"""

from __future__ import annotations


class FiledRecipesError(Exception):
    """Base exception for all Filed Recipes errors."""


class RecipeFormatError(FiledRecipesError):
    """Raised when recipe text does not follow the section/field grammar."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        if line is not None:
            message = f"{message} ({line!r})"
        super().__init__(message)


class RecipeIndexError(FiledRecipesError, IndexError):
    """Raised when a recipe index lies outside the collection."""


class ConfigurationError(FiledRecipesError):
    """Raised when configuration is invalid or missing."""
