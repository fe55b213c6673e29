"""
Abstract configuration interface.

Defines the settings every platform must supply and validates them in one
place. Platform modules only decide where the values come from.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from core.data_models import ColorScheme, Orientation

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration values are missing or invalid."""


class BaseConfiguration(ABC):
    """Settings for the host shell around the starter screen."""

    @property
    @abstractmethod
    def window_width(self) -> int:
        """Initial window width in pixels."""

    @property
    @abstractmethod
    def window_height(self) -> int:
        """Initial window height in pixels."""

    @property
    @abstractmethod
    def orientation_override(self) -> Optional[Orientation]:
        """Forced orientation, or None to derive it from the window."""

    @property
    @abstractmethod
    def color_scheme_override(self) -> Optional[ColorScheme]:
        """Forced color scheme, or None to follow the system."""

    @property
    @abstractmethod
    def assets_root(self) -> Path:
        """Directory holding <image handle>.png files."""

    @property
    @abstractmethod
    def log_level(self) -> str:
        """Logging level name."""

    def validate(self) -> None:
        """
        Check that configuration values are usable.

        Raises:
            ConfigurationError: If any value is out of range
        """
        if self.window_width <= 0 or self.window_height <= 0:
            raise ConfigurationError(
                f"Window size must be positive, got {self.window_width}x{self.window_height}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if not self.assets_root.is_dir():
            logger.warning("Assets directory %s not found; images will be blank", self.assets_root)

    def to_dict(self) -> dict[str, str | int]:
        """Flatten settings for logging."""
        return {
            'window_width': self.window_width,
            'window_height': self.window_height,
            'orientation': self.orientation_override.value if self.orientation_override else "auto",
            'color_scheme': self.color_scheme_override.value if self.color_scheme_override else "system",
            'assets_root': str(self.assets_root),
            'log_level': self.log_level,
        }
