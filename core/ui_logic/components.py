"""
Stateless presentation components.

Each component is a plain function of its inputs that returns a ViewNode
tree. Nothing here holds state; selection changes flow out through the
on_selected callback threaded into every option.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

from ..data_models import (
    LOGO_IMAGE,
    SELECTED_MARKER,
    UNSELECTED_MARKER,
    ColorScheme,
    Starter,
)

HEADER_LABEL = "Escolha seu Pokémon Inicial"
LOGO_DESCRIPTION = "Pokelogo"
MARKER_DARK_TINT = "#FFFFFF"

# Type alias for selection-change callbacks
OnSelected = Callable[[Starter], None]


@dataclass
class ViewNode:
    """One element of a rendered view tree."""
    kind: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: List["ViewNode"] = field(default_factory=list)
    on_click: Optional[Callable[[], None]] = None

    def click(self) -> None:
        """Activate this node, as a tap would."""
        if self.on_click is None:
            raise ValueError(f"{self.kind} node is not clickable")
        self.on_click()

    def __str__(self) -> str:
        return f"ViewNode({self.kind}, children={len(self.children)})"


def iter_nodes(node: ViewNode) -> Iterator[ViewNode]:
    """Walk a tree depth-first, parents before children."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)


def find_nodes(node: ViewNode, kind: str) -> List[ViewNode]:
    return [n for n in iter_nodes(node) if n.kind == kind]


def spacer(weight: Optional[float] = None, width: int = 0, height: int = 0) -> ViewNode:
    return ViewNode("spacer", {'weight': weight, 'width': width, 'height': height})


def poke_logo(image: str = LOGO_IMAGE, description: str = LOGO_DESCRIPTION) -> ViewNode:
    return ViewNode("image", {
        'image': image,
        'description': description,
        'height': 100,
        'fill_width': True,
    })


def header(label: str = HEADER_LABEL) -> ViewNode:
    """Fixed, centered title."""
    return ViewNode("text", {
        'text': label,
        'font_size': 22,
        'bold': True,
        'align': "center",
        'fill_width': True,
    })


def preview_card(starter: Starter) -> ViewNode:
    """Large image of the starter with its name in upper case."""
    return ViewNode("preview_card", {'starter': starter}, children=[
        ViewNode("image", {
            'image': starter.image,
            'description': starter.name,
            'size': 250,
        }),
        ViewNode("text", {
            'text': starter.name.upper(),
            'font_size': 20,
            'weight': "semibold",
        }),
    ])


def marker_tint(selected: bool, color_scheme: ColorScheme) -> Optional[str]:
    """Only an unselected marker on a dark display gets tinted."""
    if not selected and color_scheme is ColorScheme.DARK:
        return MARKER_DARK_TINT
    return None


def starter_option(
    starter: Starter,
    selected: bool,
    on_selected: OnSelected,
    color_scheme: ColorScheme = ColorScheme.LIGHT,
) -> ViewNode:
    """
    Small selectable control for one starter.

    Args:
        starter: Starter this option stands for
        selected: True if starter equals the current selection
        on_selected: Called with this option's starter when activated
        color_scheme: Display color scheme, affects marker tint only

    Returns:
        Clickable option node
    """
    return ViewNode(
        "option",
        {'starter': starter, 'selected': selected, 'padding': 8},
        children=[
            ViewNode("image", {
                'image': SELECTED_MARKER if selected else UNSELECTED_MARKER,
                'description': starter.name,
                'size': 40,
                'tint': marker_tint(selected, color_scheme),
            }),
            spacer(width=8),
            ViewNode("text", {'text': starter.name, 'font_size': 18}),
        ],
        on_click=lambda: on_selected(starter),
    )


def option_list(
    options: Sequence[Starter],
    selected: Starter,
    on_selected: OnSelected,
    color_scheme: ColorScheme = ColorScheme.LIGHT,
) -> ViewNode:
    """Row of options in catalog order sharing one selection callback."""
    return ViewNode("row", {'spacing': 8}, children=[
        starter_option(
            starter,
            selected=starter == selected,
            on_selected=on_selected,
            color_scheme=color_scheme,
        )
        for starter in options
    ])
