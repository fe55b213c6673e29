"""
Desktop configuration read from environment variables.

Values may also come from a .env file in the working directory.
"""
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.data_models import ColorScheme, Orientation
from .base import BaseConfiguration, ConfigurationError

DEFAULT_ASSETS_ROOT = Path(__file__).resolve().parent.parent / "desktop_ui" / "assets"


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _parse_orientation(raw: str) -> Optional[Orientation]:
    value = raw.strip().lower()
    if value in ("", "auto"):
        return None
    try:
        return Orientation(value)
    except ValueError as e:
        raise ConfigurationError(f"STARTER_ORIENTATION must be auto, portrait or landscape, got {raw!r}") from e


def _parse_color_scheme(raw: str) -> Optional[ColorScheme]:
    value = raw.strip().lower()
    if value in ("", "system"):
        return None
    try:
        return ColorScheme(value)
    except ValueError as e:
        raise ConfigurationError(f"STARTER_COLOR_SCHEME must be system, light or dark, got {raw!r}") from e


class DesktopConfiguration(BaseConfiguration):
    """Configuration for the PySide6 desktop shell."""

    def __init__(
        self,
        window_width: int = 480,
        window_height: int = 800,
        orientation_override: Optional[Orientation] = None,
        color_scheme_override: Optional[ColorScheme] = None,
        assets_root: Path = DEFAULT_ASSETS_ROOT,
        log_level: str = "INFO",
    ) -> None:
        self._window_width = window_width
        self._window_height = window_height
        self._orientation_override = orientation_override
        self._color_scheme_override = color_scheme_override
        self._assets_root = Path(assets_root)
        self._log_level = log_level.upper()

    @classmethod
    def from_environment(cls, env: Optional[Mapping[str, str]] = None) -> "DesktopConfiguration":
        """
        Build configuration from environment variables.

        Args:
            env: Mapping to read instead of os.environ (.env is then skipped)

        Returns:
            Validated DesktopConfiguration

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        if env is None:
            load_dotenv()
            env = os.environ

        config = cls(
            window_width=_parse_int(env, "STARTER_WINDOW_WIDTH", 480),
            window_height=_parse_int(env, "STARTER_WINDOW_HEIGHT", 800),
            orientation_override=_parse_orientation(env.get("STARTER_ORIENTATION", "auto")),
            color_scheme_override=_parse_color_scheme(env.get("STARTER_COLOR_SCHEME", "system")),
            assets_root=Path(env.get("STARTER_ASSETS_DIR") or DEFAULT_ASSETS_ROOT),
            log_level=env.get("STARTER_LOG_LEVEL", "INFO"),
        )
        config.validate()
        return config

    @property
    def window_width(self) -> int:
        return self._window_width

    @property
    def window_height(self) -> int:
        return self._window_height

    @property
    def orientation_override(self) -> Optional[Orientation]:
        return self._orientation_override

    @property
    def color_scheme_override(self) -> Optional[ColorScheme]:
        return self._color_scheme_override

    @property
    def assets_root(self) -> Path:
        return self._assets_root

    @property
    def log_level(self) -> str:
        return self._log_level
