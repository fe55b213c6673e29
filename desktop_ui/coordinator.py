"""
Qt bridge for the starter screen.

Implements the host environment and UI backend contracts on top of Qt,
turns each rendered view tree into QML-bindable properties and the option
list model, and treats a window aspect flip as a forced teardown.
"""
import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Property, QUrl, Qt, Signal, Slot
from PySide6.QtGui import QGuiApplication, QWindow

from config.base import BaseConfiguration
from core.data_models import LOGO_IMAGE, ColorScheme, Orientation
from core.ui_logic.components import ViewNode, find_nodes
from core.ui_logic.screen_controller import DisplayEnvironment, ScreenHost, UIBackend
from core.ui_logic.screen_layout import Arrangement, select_arrangement
from .qt_models.starter_model import StarterModel

logger = logging.getLogger(__name__)


class QtDisplayEnvironment(DisplayEnvironment):
    """Reads orientation and color scheme from Qt on every call."""

    def __init__(self, config: BaseConfiguration) -> None:
        self.config = config
        self.window: Optional[QWindow] = None

    def attach_window(self, window: QWindow) -> None:
        self.window = window

    def orientation(self) -> Orientation:
        if self.config.orientation_override is not None:
            return self.config.orientation_override

        if self.window is not None:
            width, height = self.window.width(), self.window.height()
        else:
            width, height = self.config.window_width, self.config.window_height

        return Orientation.LANDSCAPE if width > height else Orientation.PORTRAIT

    def color_scheme(self) -> ColorScheme:
        if self.config.color_scheme_override is not None:
            return self.config.color_scheme_override

        if not isinstance(QGuiApplication.instance(), QGuiApplication):
            return ColorScheme.LIGHT
        if QGuiApplication.styleHints().colorScheme() == Qt.ColorScheme.Dark:
            return ColorScheme.DARK
        return ColorScheme.LIGHT


class QtUIBackend(UIBackend):
    """Forwards every rendered tree to a Qt-side handler."""

    def __init__(self, on_render: Callable[[ViewNode], None]) -> None:
        self._on_render = on_render

    def render(self, tree: ViewNode) -> None:
        self._on_render(tree)


class StarterCoordinator(QObject):
    """
    Coordinates between the portable screen logic and QML.

    Owns the ScreenHost, so the recovery slot lives as long as the
    coordinator while individual screens come and go.
    """

    # Qt signals for property changes
    screenChanged = Signal()
    arrangementChanged = Signal()

    def __init__(self, config: BaseConfiguration) -> None:
        super().__init__()
        self.config = config
        self.environment = QtDisplayEnvironment(config)
        self.starter_model = StarterModel(self.image_url)

        self._tree: Optional[ViewNode] = None
        self._arrangement = Arrangement.STACKED

        self.host = ScreenHost(self.environment, QtUIBackend(self._on_render))
        logger.info("Creating StarterCoordinator instance")
        self.host.create()

        app = QGuiApplication.instance()
        if isinstance(app, QGuiApplication):
            app.styleHints().colorSchemeChanged.connect(self.handleColorSchemeChanged)

    def attach_window(self, window: QWindow) -> None:
        """Read orientation from window from now on."""
        self.environment.attach_window(window)
        self.handleWindowResized()

    def image_url(self, handle: str) -> str:
        """File URL for an image handle, or empty if the asset is missing."""
        path = self.config.assets_root / f"{handle}.png"
        if path.exists():
            return QUrl.fromLocalFile(str(path)).toString()
        logger.debug("No asset for image handle %s", handle)
        return ""

    def _on_render(self, tree: ViewNode) -> None:
        self._tree = tree
        self.starter_model.set_options(find_nodes(tree, "option"))

        arrangement = tree.props['arrangement']
        if arrangement != self._arrangement:
            self._arrangement = arrangement
            self.arrangementChanged.emit()
        self.screenChanged.emit()

    def _preview_text(self, index: int) -> Optional[ViewNode]:
        if self._tree is None:
            return None
        cards = find_nodes(self._tree, "preview_card")
        return cards[0].children[index] if cards else None

    # Qt Properties for QML binding
    @Property(str, notify=arrangementChanged)
    def arrangement(self) -> str:
        """stacked or paired"""
        return self._arrangement.value

    @Property(str, notify=screenChanged)
    def previewName(self) -> str:
        node = self._preview_text(1)
        return node.props['text'] if node else ""

    @Property(str, notify=screenChanged)
    def previewImagePath(self) -> str:
        node = self._preview_text(0)
        return self.image_url(node.props['image']) if node else ""

    @Property(str, notify=screenChanged)
    def headerLabel(self) -> str:
        if self._tree is None:
            return ""
        for node in find_nodes(self._tree, "text"):
            if node.props.get('bold'):
                return node.props['text']
        return ""

    @Property(str, constant=True)
    def logoPath(self) -> str:
        return self.image_url(LOGO_IMAGE)

    @Slot(int)
    def selectStarter(self, index: int) -> None:
        """Option tapped in QML."""
        screen = self.host.screen
        if screen is None or not screen.activate_index(index):
            logger.warning("Ignoring selection of unknown option %d", index)

    @Slot()
    def handleWindowResized(self) -> None:
        """Rebuild the screen when the window flips between portrait and landscape."""
        wanted = select_arrangement(self.environment.orientation())
        if wanted != self._arrangement:
            logger.info("Orientation changed to %s, recreating screen", wanted.value)
            self.host.recreate()

    @Slot()
    def handleColorSchemeChanged(self) -> None:
        """Re-tint markers when the system switches between light and dark."""
        screen = self.host.screen
        if screen is not None:
            logger.info("Color scheme changed to %s", self.environment.color_scheme().value)
            screen.render()

    def cleanup(self) -> None:
        """Clean shutdown of coordinator"""
        logger.info("Cleaning up StarterCoordinator")
        self.host.destroy()
        self.starter_model.clear()
        self._tree = None
