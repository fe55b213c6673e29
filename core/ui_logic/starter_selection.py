"""
Selection state management for the starter screen.

Hold the currently selected starter, notify subscribers when it changes,
and keep a minimal (name, image) copy in a recovery slot so the selection
survives the screen being torn down and rebuilt within the same process.
No UI framework dependencies.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..data_models import STARTERS, Starter

logger = logging.getLogger(__name__)

# Minimal serialized form of a Starter
SavedStarter = Tuple[str, str]

SELECTION_KEY = "starter_selection"


class SelectionStateError(Exception):
    """Raised when a saved selection cannot be turned back into a Starter."""


@dataclass
class SelectionEvent:
    """Represents a selection change event."""
    selected: Starter
    previous: Starter

    def __str__(self) -> str:
        return f"SelectionEvent({self.previous.name} -> {self.selected.name})"


# Type alias for selection event callbacks
SelectionCallback = Callable[[SelectionEvent], None]


def save_starter(starter: Starter) -> SavedStarter:
    """Serialize a starter to its (name, image) tuple."""
    return (starter.name, starter.image)


def restore_starter(saved: Any) -> Starter:
    """
    Rebuild a Starter from a previously saved (name, image) tuple.

    The saved form is private to this program, so anything malformed is a
    programming error and is raised rather than recovered from.

    Args:
        saved: Value produced by save_starter

    Returns:
        Starter equal by value to the one that was saved

    Raises:
        SelectionStateError: If the value has the wrong shape or types
    """
    if not isinstance(saved, (tuple, list)) or len(saved) != 2:
        raise SelectionStateError(f"Saved selection must be a (name, image) pair, got {saved!r}")

    name, image = saved
    if not isinstance(name, str) or not isinstance(image, str):
        raise SelectionStateError(f"Saved selection fields must be strings, got {saved!r}")

    try:
        return Starter(name=name, image=image)
    except ValueError as e:
        raise SelectionStateError(str(e)) from e


class SavedStateRegistry:
    """
    In-process recovery slots keyed by name.

    Outlives any single screen instance but not the process; nothing is
    written to disk.
    """

    def __init__(self) -> None:
        self._slots: Dict[str, SavedStarter] = {}

    def save(self, key: str, value: SavedStarter) -> None:
        self._slots[key] = value

    def load(self, key: str) -> Optional[SavedStarter]:
        """Return the saved value for key, or None if nothing was saved."""
        return self._slots.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._slots


class StarterSelection:
    """
    Observable cell holding exactly one selected starter.

    The selection is always a catalog member and is replaced wholesale on
    every change. When a registry is given, every change is also written to
    its recovery slot.
    """

    def __init__(
        self,
        catalog: Sequence[Starter] = STARTERS,
        initial: Optional[Starter] = None,
        registry: Optional[SavedStateRegistry] = None,
        key: str = SELECTION_KEY,
    ) -> None:
        """
        Initialize selection cell.

        Args:
            catalog: Starters the selection is drawn from
            initial: Starting selection, defaults to the first catalog entry
            registry: Optional recovery slot registry kept in sync
            key: Slot name inside the registry
        """
        self.catalog = tuple(catalog)
        assert self.catalog, "catalog must not be empty"

        self._current = initial if initial is not None else self.catalog[0]
        assert self._current in self.catalog, f"{self._current} is not in the catalog"

        self._callbacks: List[SelectionCallback] = []
        self._registry = registry
        self._key = key
        self._save()

    @classmethod
    def restore(
        cls,
        registry: SavedStateRegistry,
        catalog: Sequence[Starter] = STARTERS,
        key: str = SELECTION_KEY,
    ) -> "StarterSelection":
        """
        Build a selection cell from the registry's recovery slot.

        Falls back to the catalog default when the slot is empty.

        Args:
            registry: Registry holding the recovery slot
            catalog: Starters the selection is drawn from
            key: Slot name inside the registry

        Returns:
            StarterSelection bound to the registry

        Raises:
            SelectionStateError: If the slot holds a malformed value or a
                starter outside the catalog
        """
        saved = registry.load(key)
        initial = None
        if saved is not None:
            initial = restore_starter(saved)
            if initial not in catalog:
                raise SelectionStateError(f"Saved selection {saved!r} is not in the catalog")
            logger.debug("Restored selection %s from slot '%s'", initial.name, key)
        return cls(catalog, initial=initial, registry=registry, key=key)

    def register_callback(self, callback: SelectionCallback) -> None:
        """
        Register callback for selection change events.

        Args:
            callback: Function to call when selection changes
        """
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister_callback(self, callback: SelectionCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def current(self) -> Starter:
        """Return the presently selected starter."""
        return self._current

    def select(self, starter: Starter) -> bool:
        """
        Replace the current selection.

        Callers are trusted to pass catalog members only.

        Args:
            starter: Starter to select

        Returns:
            True if selection changed
        """
        assert starter in self.catalog, f"{starter} is not in the catalog"

        previous = self._current
        if starter == previous:
            return False

        self._current = starter
        self._save()
        logger.info("Selected %s (was %s)", starter.name, previous.name)
        self._notify_selection_change(SelectionEvent(selected=starter, previous=previous))
        return True

    def is_selected(self, starter: Starter) -> bool:
        """Value comparison against the current selection."""
        return starter == self._current

    def _save(self) -> None:
        if self._registry is not None:
            self._registry.save(self._key, save_starter(self._current))

    def _notify_selection_change(self, event: SelectionEvent) -> None:
        for callback in list(self._callbacks):
            try:
                callback(event)
            except Exception:
                # Log error but don't let callback failures break selection
                logger.exception("Selection callback error for %s", event)

    def get_state_summary(self) -> dict[str, str | int]:
        """
        Get summary of current selection state for debugging.

        Returns:
            Dictionary with selection state information
        """
        return {
            'selected': self._current.name,
            'catalog_size': len(self.catalog),
            'callback_count': len(self._callbacks),
            'slot': self._key if self._registry is not None else "None",
        }
