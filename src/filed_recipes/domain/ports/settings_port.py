"""Port (ABC) for user settings persistence.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from filed_recipes.domain.models.settings import RecipeSettings


class SettingsPort(ABC):
    """Abstract interface for loading / saving user preferences."""

    @abstractmethod
    def load(self) -> RecipeSettings:
        """Load persisted settings (or defaults if none exist)."""

    @abstractmethod
    def save(self, settings: RecipeSettings) -> None:
        """Persist the given settings."""

    @abstractmethod
    def reset_to_defaults(self) -> RecipeSettings:
        """Delete persisted settings and return factory defaults."""
