"""Settings Manager - Handles lazy-loading and layout configuration."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class ReaderSettings:
    """Tunables for the chapter view.

    Attributes:
        lookahead_margin: Pixels below the visible area at which pages start loading.
        visibility_threshold: Fraction of a page that must enter that area.
        placeholder_height: Height in pixels reserved for a page not yet loaded.
    """

    lookahead_margin: int = 300
    visibility_threshold: float = 0.01
    placeholder_height: int = 1000


class SettingsManager:
    """
    Manages reader settings.

    Values come from environment variables, optionally provided by a .env
    file in the project root. Missing values fall back to ReaderSettings
    defaults.
    """

    LOOKAHEAD_VAR = "CBZ_READER_LOOKAHEAD_PX"
    THRESHOLD_VAR = "CBZ_READER_VISIBILITY_THRESHOLD"
    PLACEHOLDER_VAR = "CBZ_READER_PLACEHOLDER_HEIGHT"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_settings(self) -> ReaderSettings:
        """Build ReaderSettings from the environment.

        Raises:
            ValueError: if a variable is set to an invalid value.
        """
        defaults = ReaderSettings()
        lookahead = self._read_int(self.LOOKAHEAD_VAR, defaults.lookahead_margin)
        threshold = self._read_float(self.THRESHOLD_VAR, defaults.visibility_threshold)
        placeholder = self._read_int(self.PLACEHOLDER_VAR, defaults.placeholder_height)

        if lookahead < 0:
            raise ValueError(f"{self.LOOKAHEAD_VAR} must not be negative, got {lookahead}")
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"{self.THRESHOLD_VAR} must be between 0 and 1, got {threshold}")
        if placeholder <= 0:
            raise ValueError(f"{self.PLACEHOLDER_VAR} must be positive, got {placeholder}")

        return ReaderSettings(
            lookahead_margin=lookahead,
            visibility_threshold=threshold,
            placeholder_height=placeholder,
        )

    @staticmethod
    def _raw(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _read_int(self, name: str, default: int) -> int:
        raw = self._raw(name)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError as e:
            raise ValueError(f"{name} must be an integer, got {raw!r}") from e

    def _read_float(self, name: str, default: float) -> float:
        raw = self._raw(name)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError as e:
            raise ValueError(f"{name} must be a number, got {raw!r}") from e
