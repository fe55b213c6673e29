"""Core data structures for the starter selection screen.

Contains the fundamental data models used across different UI implementations.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Starter:
    """A selectable starter creature: display name plus an image handle."""
    name: str
    image: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Starter name must not be empty")

    def __str__(self) -> str:
        return f"Starter('{self.name}')"


STARTERS: Tuple[Starter, ...] = (
    Starter("Bulbasaur", "bulbasaur"),
    Starter("Charmander", "charmander"),
    Starter("Squirtle", "squirtle"),
)

# Fixed image handles
LOGO_IMAGE = "logo_pokemon"
SELECTED_MARKER = "pokeball_selected"
UNSELECTED_MARKER = "pokeball_unselected"


class Orientation(Enum):
    """Host display orientation, read fresh on every render."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class ColorScheme(Enum):
    """Host display color scheme."""
    LIGHT = "light"
    DARK = "dark"
