import sys
import os
import logging
from pathlib import Path
from PySide6.QtGui import QGuiApplication
from PySide6.QtQml import QQmlApplicationEngine
from config.base import ConfigurationError
from config.desktop import DesktopConfiguration
from desktop_ui.coordinator import StarterCoordinator

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # Configure default console logging if not already configured
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=getattr(logging, level, logging.INFO),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def main() -> int:
    # Set Qt Quick Controls style to Basic to allow background customization
    os.environ["QT_QUICK_CONTROLS_STYLE"] = "Basic"

    try:
        config = DesktopConfiguration.from_environment()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1

    configure_logging(config.log_level)
    logger.info("Starting with configuration %s", config.to_dict())

    app = QGuiApplication(sys.argv)
    engine = QQmlApplicationEngine()

    coordinator = StarterCoordinator(config)

    engine.rootContext().setContextProperty("coordinator", coordinator)
    engine.rootContext().setContextProperty("starterModel", coordinator.starter_model)

    qml_file = Path(__file__).parent / "qml" / "MainWindow.qml"
    engine.load(str(qml_file))

    if not engine.rootObjects():
        logger.error("Failed to load QML from %s", qml_file)
        coordinator.cleanup()
        return 1

    window = engine.rootObjects()[0]
    window.resize(config.window_width, config.window_height)
    coordinator.attach_window(window)

    try:
        return app.exec()
    finally:
        coordinator.cleanup()
