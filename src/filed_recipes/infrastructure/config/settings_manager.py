"""Settings manager — loads/saves RecipeSettings to OS-appropriate config dir.

Implements ``SettingsPort`` and persists user preferences as JSON to
``~/.config/filed_recipes/settings.json`` (Linux) or the equivalent
platform directory via ``platformdirs``.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path

import platformdirs
from pydantic import ValidationError

from filed_recipes.domain.errors import ConfigurationError
from filed_recipes.domain.models.settings import APP_NAME, RecipeSettings
from filed_recipes.domain.ports.settings_port import SettingsPort

logger = logging.getLogger(__name__)

_SETTINGS_FILENAME = "settings.json"


class SettingsManager(SettingsPort):
    """Concrete implementation of :class:`SettingsPort`.

    Parameters
    ----------
    config_dir : Path | None
        Override the default config directory (useful for testing).
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(APP_NAME))
        self._settings_path = self._config_dir / _SETTINGS_FILENAME

    # -- Public API ----------------------------------------------------------

    def load(self) -> RecipeSettings:
        """Load settings from disk, falling back to defaults."""
        try:
            return self.validate()
        except ConfigurationError as exc:
            # Corrupted file → return safe defaults
            logger.warning("Ignoring settings file: %s", exc)
            return RecipeSettings()

    def validate(self) -> RecipeSettings:
        """Load settings from disk, raising on a corrupt file.

        Raises:
            ConfigurationError: If the file is not valid JSON or does not
                match the settings schema.
        """
        if not self._settings_path.exists():
            return RecipeSettings()

        try:
            raw = json.loads(self._settings_path.read_text(encoding="utf-8"))
            return RecipeSettings.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            raise ConfigurationError(
                f"Invalid settings file {self._settings_path}: {exc}"
            ) from exc

    def save(self, settings: RecipeSettings) -> None:
        """Persist settings atomically (write to temp, then rename)."""
        self._config_dir.mkdir(parents=True, exist_ok=True)

        data = settings.model_dump(mode="json")
        tmp_fd, tmp_path = tempfile.mkstemp(
            dir=self._config_dir,
            suffix=".tmp",
        )
        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, ensure_ascii=False)
            Path(tmp_path).replace(self._settings_path)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def reset_to_defaults(self) -> RecipeSettings:
        """Delete the persisted file and return factory defaults."""
        self._settings_path.unlink(missing_ok=True)
        return RecipeSettings()

    @property
    def settings_path(self) -> Path:
        """Absolute path to the settings JSON file."""
        return self._settings_path
