"""Infrastructure layer — file and configuration adapters."""

from filed_recipes.infrastructure.config.settings_manager import SettingsManager
from filed_recipes.infrastructure.persistence.text_repository import TextRecipeRepository

__all__ = [
    "SettingsManager",
    "TextRecipeRepository",
]
