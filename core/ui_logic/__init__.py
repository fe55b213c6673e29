"""
UI logic package - portable across platforms.

Selection state, orientation-driven arrangement, stateless presentation
components and render coordination. No UI framework dependencies.
"""
from .starter_selection import (
    SavedStateRegistry,
    SelectionEvent,
    SelectionStateError,
    StarterSelection,
    restore_starter,
    save_starter,
)
from .components import ViewNode, find_nodes, iter_nodes
from .screen_layout import Arrangement, compose_screen, select_arrangement
from .screen_controller import DisplayEnvironment, ScreenController, ScreenHost, UIBackend

__all__ = [
    'SavedStateRegistry',
    'SelectionEvent',
    'SelectionStateError',
    'StarterSelection',
    'restore_starter',
    'save_starter',
    'ViewNode',
    'find_nodes',
    'iter_nodes',
    'Arrangement',
    'compose_screen',
    'select_arrangement',
    'DisplayEnvironment',
    'ScreenController',
    'ScreenHost',
    'UIBackend'
]
