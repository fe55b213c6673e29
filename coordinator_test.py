"""
Test coordinator properties and Qt signal integration
"""
import sys

import pytest
from PySide6.QtCore import QCoreApplication

from config.desktop import DesktopConfiguration
from core.data_models import ColorScheme, Orientation
from desktop_ui.coordinator import StarterCoordinator
from desktop_ui.qt_models.starter_model import StarterModel


@pytest.fixture(scope="module")
def app():
    return QCoreApplication.instance() or QCoreApplication(sys.argv)


@pytest.fixture
def assets(tmp_path):
    (tmp_path / "bulbasaur.png").write_bytes(b"")
    return tmp_path


@pytest.fixture
def coordinator(app, assets):
    config = DesktopConfiguration(
        orientation_override=Orientation.PORTRAIT,
        color_scheme_override=ColorScheme.DARK,
        assets_root=assets,
    )
    coordinator = StarterCoordinator(config)
    yield coordinator
    coordinator.cleanup()


def column(model, role):
    return [model.data(model.index(row, 0), role) for row in range(model.rowCount())]


def test_initial_properties(coordinator):
    assert coordinator.arrangement == "stacked"
    assert coordinator.previewName == "BULBASAUR"
    assert coordinator.headerLabel == "Escolha seu Pokémon Inicial"
    assert coordinator.previewImagePath.startswith("file://")
    assert coordinator.logoPath == ""

    model = coordinator.starter_model
    assert model.rowCount() == 3
    assert column(model, StarterModel.NameRole) == ["Bulbasaur", "Charmander", "Squirtle"]
    assert column(model, StarterModel.SelectedRole) == [True, False, False]
    assert column(model, StarterModel.MarkerTintRole) == ["", "#FFFFFF", "#FFFFFF"]


def test_select_starter_updates_properties_and_signals(coordinator):
    received = []
    coordinator.screenChanged.connect(lambda: received.append("screen"))

    coordinator.selectStarter(1)

    assert received == ["screen"]
    assert coordinator.previewName == "CHARMANDER"
    assert coordinator.previewImagePath == ""
    assert column(coordinator.starter_model, StarterModel.SelectedRole) == [False, True, False]


def test_unknown_option_is_ignored(coordinator):
    coordinator.selectStarter(7)
    assert coordinator.previewName == "BULBASAUR"


def test_orientation_flip_recreates_screen_and_keeps_selection(coordinator):
    coordinator.selectStarter(2)
    first_screen = coordinator.host.screen

    arrangement_changes = []
    coordinator.arrangementChanged.connect(lambda: arrangement_changes.append(coordinator.arrangement))

    coordinator.environment.config = DesktopConfiguration(
        orientation_override=Orientation.LANDSCAPE,
        color_scheme_override=ColorScheme.DARK,
    )
    coordinator.handleWindowResized()

    assert arrangement_changes == ["paired"]
    assert coordinator.host.recreate_count == 1
    assert coordinator.host.screen is not first_screen
    assert coordinator.previewName == "SQUIRTLE"

    # Same orientation again: nothing to rebuild
    coordinator.handleWindowResized()
    assert coordinator.host.recreate_count == 1


def test_color_scheme_switch_retints_markers_and_keeps_selection(coordinator):
    coordinator.selectStarter(1)
    model = coordinator.starter_model
    assert column(model, StarterModel.MarkerTintRole) == ["#FFFFFF", "", "#FFFFFF"]

    coordinator.environment.config = DesktopConfiguration(
        orientation_override=Orientation.PORTRAIT,
        color_scheme_override=ColorScheme.LIGHT,
    )
    coordinator.handleColorSchemeChanged()

    assert column(model, StarterModel.MarkerTintRole) == ["", "", ""]
    assert column(model, StarterModel.SelectedRole) == [False, True, False]
    assert coordinator.previewName == "CHARMANDER"


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-v"]))
