"""
Render coordination for the starter screen.

Owns the selection cell, reads the host environment on every pass,
composes the view tree and hands it to a UI backend. The ScreenHost keeps
the recovery slots alive across forced teardown so a recreated screen
resumes the previous selection. No UI framework dependencies.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..data_models import STARTERS, ColorScheme, Orientation, Starter
from .components import ViewNode, find_nodes
from .screen_layout import compose_screen
from .starter_selection import SavedStateRegistry, SelectionEvent, StarterSelection

logger = logging.getLogger(__name__)


class DisplayEnvironment(ABC):
    """Read-only host display conditions. Implementations must not cache."""

    @abstractmethod
    def orientation(self) -> Orientation:
        """Current display orientation."""

    @abstractmethod
    def color_scheme(self) -> ColorScheme:
        """Current display color scheme."""


class UIBackend(ABC):
    """Abstract interface for whatever draws the view tree."""

    @abstractmethod
    def render(self, tree: ViewNode) -> None:
        """Replace what is on screen with tree."""


class ScreenController:
    """
    One live instance of the starter screen.

    Every selection change re-renders synchronously, so the backend holds
    the new tree before the next user input is processed.
    """

    def __init__(
        self,
        selection: StarterSelection,
        environment: DisplayEnvironment,
        backend: UIBackend,
    ) -> None:
        self.selection = selection
        self.environment = environment
        self.backend = backend
        self._last_tree: Optional[ViewNode] = None
        self._disposed = False

        self.selection.register_callback(self._on_selection_change)

    @property
    def catalog(self) -> Sequence[Starter]:
        return self.selection.catalog

    @property
    def last_tree(self) -> Optional[ViewNode]:
        """Tree produced by the most recent render pass."""
        return self._last_tree

    def compose(self) -> ViewNode:
        """Build a tree from fresh environment reads and the current selection."""
        return compose_screen(
            orientation=self.environment.orientation(),
            catalog=self.catalog,
            selected=self.selection.current(),
            on_selected=self.activate,
            color_scheme=self.environment.color_scheme(),
        )

    def render(self) -> ViewNode:
        """Compose and push one render pass to the backend."""
        tree = self.compose()
        self._last_tree = tree
        logger.debug(
            "Render pass: arrangement=%s selected=%s",
            tree.props.get('arrangement'),
            self.selection.current().name,
        )
        self.backend.render(tree)
        return tree

    def activate(self, starter: Starter) -> None:
        """Entry point for a user activating an option."""
        if self._disposed:
            logger.warning("Ignoring activation of %s on a disposed screen", starter.name)
            return
        self.selection.select(starter)

    def activate_index(self, index: int) -> bool:
        """
        Activate the option at index in the last rendered tree.

        Args:
            index: Zero-based option position

        Returns:
            True if an option was activated
        """
        if self._last_tree is None:
            return False
        options = find_nodes(self._last_tree, "option")
        if 0 <= index < len(options):
            options[index].click()
            return True
        return False

    def dispose(self) -> None:
        """Tear this screen down; the recovery slot outlives it."""
        self.selection.unregister_callback(self._on_selection_change)
        self._disposed = True

    def _on_selection_change(self, event: SelectionEvent) -> None:
        self.render()


class ScreenHost:
    """
    Creates screens and rebuilds them after forced teardown.

    The registry lives here, not in the screen, so it survives recreation
    for the lifetime of the process.
    """

    def __init__(
        self,
        environment: DisplayEnvironment,
        backend: UIBackend,
        catalog: Sequence[Starter] = STARTERS,
        registry: Optional[SavedStateRegistry] = None,
    ) -> None:
        self.environment = environment
        self.backend = backend
        self.catalog = tuple(catalog)
        self.registry = registry if registry is not None else SavedStateRegistry()
        self._screen: Optional[ScreenController] = None
        self.recreate_count = 0

    @property
    def screen(self) -> Optional[ScreenController]:
        return self._screen

    def create(self) -> ScreenController:
        """
        Build a screen and run its first render pass.

        The selection comes from the recovery slot when one exists,
        otherwise from the first catalog entry.

        Returns:
            The new live screen
        """
        if self._screen is not None:
            raise RuntimeError("Screen already created; use recreate()")

        selection = StarterSelection.restore(self.registry, self.catalog)
        self._screen = ScreenController(selection, self.environment, self.backend)
        self._screen.render()
        logger.debug("Screen created with %s", selection.current().name)
        return self._screen

    def recreate(self) -> ScreenController:
        """Forced teardown: dispose the live screen and build a new one."""
        if self._screen is not None:
            logger.info("Tearing down screen (selected=%s)", self._screen.selection.current().name)
            self._screen.dispose()
            self._screen = None
        self.recreate_count += 1
        return self.create()

    def destroy(self) -> None:
        if self._screen is not None:
            self._screen.dispose()
            self._screen = None
