"""
Orientation-driven arrangement of the starter screen.

Pick the stacked or paired arrangement from the current orientation and
compose the full view tree. Both arrangements receive the same catalog,
selection and callback; only the spatial layout differs.
"""
from enum import Enum
from typing import Sequence

from ..data_models import ColorScheme, Orientation, Starter
from .components import (
    OnSelected,
    ViewNode,
    header,
    option_list,
    poke_logo,
    preview_card,
    spacer,
)

SCREEN_PADDING = 16
SCREEN_SPACING = 16
PAIRED_HEADER_GAP = 32


class Arrangement(Enum):
    STACKED = "stacked"
    PAIRED = "paired"


def select_arrangement(orientation: Orientation) -> Arrangement:
    """Portrait stacks everything in one column; landscape splits into two panes."""
    if orientation is Orientation.PORTRAIT:
        return Arrangement.STACKED
    return Arrangement.PAIRED


def compose_screen(
    orientation: Orientation,
    catalog: Sequence[Starter],
    selected: Starter,
    on_selected: OnSelected,
    color_scheme: ColorScheme = ColorScheme.LIGHT,
) -> ViewNode:
    """
    Build the whole screen for one render pass.

    Args:
        orientation: Orientation read from the host for this pass
        catalog: Starters to offer
        selected: Current selection
        on_selected: Selection-change callback shared by every option
        color_scheme: Display color scheme for marker tinting

    Returns:
        Root node, tagged with the arrangement it used
    """
    arrangement = select_arrangement(orientation)
    options = option_list(catalog, selected, on_selected, color_scheme)

    if arrangement is Arrangement.STACKED:
        return ViewNode(
            "column",
            {
                'arrangement': arrangement,
                'padding': SCREEN_PADDING,
                'spacing': SCREEN_SPACING,
                'align': "center_horizontal",
                'fill': True,
            },
            children=[
                poke_logo(),
                header(),
                spacer(weight=1),
                preview_card(selected),
                spacer(weight=1),
                options,
            ],
        )

    left = ViewNode("pane", {'weight': 1, 'align': "center"}, children=[
        ViewNode("column", {'align': "center_horizontal"}, children=[
            poke_logo(),
            preview_card(selected),
        ]),
    ])
    right = ViewNode("pane", {'weight': 1, 'align': "center"}, children=[
        ViewNode("column", {'align': "center_horizontal"}, children=[
            header(),
            spacer(height=PAIRED_HEADER_GAP),
            options,
        ]),
    ])
    return ViewNode(
        "row",
        {
            'arrangement': arrangement,
            'padding': SCREEN_PADDING,
            'spacing': SCREEN_SPACING,
            'align': "center_vertical",
            'fill': True,
        },
        children=[left, right],
    )
