"""
Render loop tests: re-render on select, orientation switches, forced teardown
"""
import pytest

from core.data_models import SELECTED_MARKER, STARTERS, UNSELECTED_MARKER, ColorScheme, Orientation
from core.ui_logic.components import find_nodes
from core.ui_logic.screen_controller import DisplayEnvironment, ScreenHost, UIBackend
from core.ui_logic.screen_layout import Arrangement

BULBASAUR, CHARMANDER, SQUIRTLE = STARTERS


class FakeEnvironment(DisplayEnvironment):
    def __init__(self, orientation=Orientation.PORTRAIT, color_scheme=ColorScheme.LIGHT):
        self.current_orientation = orientation
        self.current_color_scheme = color_scheme
        self.orientation_reads = 0

    def orientation(self):
        self.orientation_reads += 1
        return self.current_orientation

    def color_scheme(self):
        return self.current_color_scheme


class RecordingBackend(UIBackend):
    def __init__(self):
        self.trees = []

    def render(self, tree):
        self.trees.append(tree)

    @property
    def last(self):
        return self.trees[-1]


def preview_name(tree):
    return find_nodes(tree, "preview_card")[0].children[1].props['text']


def markers(tree):
    return {
        o.props['starter'].name: o.children[0].props['image']
        for o in find_nodes(tree, "option")
    }


@pytest.fixture
def env():
    return FakeEnvironment()


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def host(env, backend):
    return ScreenHost(env, backend)


def test_first_render_shows_default(host, backend):
    screen = host.create()

    assert len(backend.trees) == 1
    assert screen.selection.current() == BULBASAUR
    assert preview_name(backend.last) == "BULBASAUR"
    assert markers(backend.last) == {
        "Bulbasaur": SELECTED_MARKER,
        "Charmander": UNSELECTED_MARKER,
        "Squirtle": UNSELECTED_MARKER,
    }


def test_activating_option_rerenders_synchronously(host, backend):
    screen = host.create()

    charmander_option = find_nodes(backend.last, "option")[1]
    charmander_option.click()

    assert screen.selection.current() == CHARMANDER
    assert len(backend.trees) == 2
    assert preview_name(backend.last) == "CHARMANDER"
    assert markers(backend.last) == {
        "Bulbasaur": UNSELECTED_MARKER,
        "Charmander": SELECTED_MARKER,
        "Squirtle": UNSELECTED_MARKER,
    }


def test_exactly_one_option_selected_after_each_change(host, backend):
    screen = host.create()
    for index in (2, 0, 1, 1):
        assert screen.activate_index(index)
        selected = [o for o in find_nodes(backend.last, "option") if o.props['selected']]
        assert len(selected) == 1
        assert selected[0].props['starter'] == screen.selection.current()


def test_orientation_change_alters_layout_not_state(host, env, backend):
    screen = host.create()
    screen.activate(SQUIRTLE)
    assert backend.last.props['arrangement'] is Arrangement.STACKED

    env.current_orientation = Orientation.LANDSCAPE
    screen.render()

    assert backend.last.props['arrangement'] is Arrangement.PAIRED
    assert screen.selection.current() == SQUIRTLE
    assert preview_name(backend.last) == "SQUIRTLE"


def test_environment_read_on_every_pass(host, env):
    screen = host.create()
    reads = env.orientation_reads
    screen.render()
    screen.activate(CHARMANDER)
    assert env.orientation_reads == reads + 2


def test_dark_scheme_tints_unselected_markers(host, env, backend):
    env.current_color_scheme = ColorScheme.DARK
    host.create()
    tints = [o.children[0].props['tint'] for o in find_nodes(backend.last, "option")]
    assert tints == [None, "#FFFFFF", "#FFFFFF"]


def test_forced_teardown_restores_selection(host, env, backend):
    first = host.create()
    first.activate(SQUIRTLE)

    env.current_orientation = Orientation.LANDSCAPE
    second = host.recreate()

    assert second is not first
    assert host.recreate_count == 1
    assert second.selection.current() == SQUIRTLE
    assert preview_name(backend.last) == "SQUIRTLE"
    assert backend.last.props['arrangement'] is Arrangement.PAIRED


def test_disposed_screen_ignores_activation(host, backend):
    first = host.create()
    second = host.recreate()
    rendered = len(backend.trees)

    first.activate(CHARMANDER)

    assert second.selection.current() == BULBASAUR
    assert len(backend.trees) == rendered


def test_activate_index_out_of_range(host):
    screen = host.create()
    assert not screen.activate_index(3)
    assert not screen.activate_index(-1)
    assert screen.selection.current() == BULBASAUR


def test_create_twice_is_an_error(host):
    host.create()
    with pytest.raises(RuntimeError):
        host.create()


def test_destroy_then_create_resumes(host):
    host.create().activate(CHARMANDER)
    host.destroy()
    assert host.screen is None
    assert host.create().selection.current() == CHARMANDER


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-v"]))
