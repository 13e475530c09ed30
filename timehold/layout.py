"""The widget tree of the timeline window and the systems that keep it current."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import NamedTuple

from timehold.chronosphere import ChronoSphere
from timehold.geometry import (
    CONTAINER_PADDING_PX,
    DIAL_WIDTH_PX,
    HOURS_PADDING_PX,
    TIMELINE_WIDTH_PX,
    dial_left_px,
)
from timehold.hours import Hour

log = logging.getLogger(__name__)

FONT_BOLD = "fonts/FiraSans-Bold.ttf"
FONT_MEDIUM = "fonts/FiraMono-Medium.ttf"

ICON_APP = "icons/app_icon_48px.png"
ICON_CLOSE = "icons/close_24dp_000000_FILL0_wght400_GRAD0_opsz24.png"
ICON_COLLAPSE = "icons/collapse_content_24dp_000000_FILL0_wght400_GRAD0_opsz24.png"
ICON_EXPAND = "icons/expand_content_24dp_000000_FILL0_wght400_GRAD0_opsz24.png"
ICON_FORT = "icons/fort_24dp_000000_FILL1_wght400_GRAD0_opsz24.png"

SPECTRUM_BG = "SpectrumBg.png"

APP_TITLE = "Timehold"


class Color(NamedTuple):
    """An sRGB colour with alpha, each channel 0-255."""

    r: int
    g: int
    b: int
    a: int = 255


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
TRANSPARENT = Color(0, 0, 0, 0)
HEADER_BG = Color(25, 32, 42)
DIAL_COLOR = Color(255, 255, 255, 120)
SIDE_PANEL_BG = Color(180, 180, 210, 75)
BUTTON_BORDER = Color(90, 90, 90, 25)


@dataclass(frozen=True)
class Length:
    """A layout length: pixels, percent, flex fraction or auto."""

    unit: str
    value: float = 0.0


def px(value: float) -> Length:
    return Length("px", float(value))


def percent(value: float) -> Length:
    return Length("%", float(value))


def fr(value: float) -> Length:
    return Length("fr", float(value))


AUTO = Length("auto")


def _edges(
    all: float | None = None,
    *,
    left: float = 0.0,
    right: float = 0.0,
    top: float = 0.0,
    bottom: float = 0.0,
) -> dict[str, Length]:
    if all is not None:
        left = right = top = bottom = all
    return {"left": px(left), "right": px(right), "top": px(top), "bottom": px(bottom)}


def _radius(
    top_left: float, top_right: float, bottom_right: float, bottom_left: float
) -> tuple[float, float, float, float]:
    return (top_left, top_right, bottom_right, bottom_left)


class Kind(Enum):
    NODE = auto()
    TEXT = auto()
    IMAGE = auto()
    BUTTON = auto()


class Tag(Enum):
    """Markers that let systems find specific nodes in the tree."""

    RESOLUTION_TEXT = auto()
    CURRENT_TIME_TEXT = auto()
    DIAL = auto()
    HOUR = auto()
    ACTIVE = auto()
    WINDOW_DECORATIONS_TOGGLER = auto()


@dataclass
class Node:
    """One element of the UI tree, with its style and children."""

    kind: Kind = Kind.NODE
    style: dict[str, object] = field(default_factory=dict)
    background: Color = TRANSPARENT
    border_color: Color = TRANSPARENT
    border_radius: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    z_index: int = 0
    text: str | None = None
    font: str | None = None
    font_size: float | None = None
    color: Color | None = None
    image: str | None = None
    hour: Hour | None = None
    tags: set[Tag] = field(default_factory=set)
    children: list[Node] = field(default_factory=list)

    def walk(self) -> Iterator[Node]:
        """This node and all its descendants, depth first, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, tag: Tag) -> Node:
        """The first node in the tree carrying the tag."""
        for node in self.walk():
            if tag in node.tags:
                return node
        raise LookupError(f"no node tagged {tag.name}")


def create_text(text: str, font: str, font_size: float, color: Color) -> Node:
    """A single-section text node."""
    return Node(kind=Kind.TEXT, text=text, font=font, font_size=font_size, color=color)


def _image(texture: str, width: float, height: float) -> Node:
    return Node(
        kind=Kind.IMAGE,
        image=texture,
        style={"width": px(width), "height": px(height)},
        background=WHITE,
    )


# Grid layout of the whole window.

def create_app_grid() -> Node:
    """The root grid: the main app column and a side panel column."""
    return Node(
        style={
            "display": "grid",
            "width": percent(100),
            "height": percent(100),
            "grid_template_columns": [px(600), AUTO],
            "grid_template_rows": [fr(1), px(28), px(32), px(180)],
        },
        background=WHITE,
        border_radius=_radius(0, 16, 0, 16),
    )


def _grid_area(
    columns: tuple[int, int],
    rows: tuple[int, int],
    background: Color,
    *,
    display: str = "grid",
    border_radius: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0),
) -> Node:
    return Node(
        style={"display": display, "grid_column": columns, "grid_row": rows},
        background=background,
        border_radius=border_radius,
    )


def _empty_grid_area() -> Node:
    return _grid_area((1, 2), (1, 2), WHITE)


def _topbar_grid_area() -> Node:
    return _grid_area((1, 2), (2, 3), WHITE)


def _timeline_header_grid_area() -> Node:
    return _grid_area((1, 2), (3, 4), HEADER_BG)


def _timeline_body_grid_area() -> Node:
    return _grid_area((1, 2), (4, 5), WHITE, border_radius=_radius(0, 0, 0, 16))


def _side_panel_grid_area() -> Node:
    return _grid_area((2, 3), (1, 5), SIDE_PANEL_BG, display="none")


# Top bar.

def _topbar_row() -> Node:
    return Node(
        style={
            "display": "flex",
            "flex_direction": "row",
            "align_items": "center",
            "justify_content": "space-between",
            "width": percent(100),
            "height": px(28),
            "padding": _edges(top=2, bottom=5),
        },
        background=WHITE,
        border_radius=_radius(0, 0, 0, 16),
    )


def _topbar_left() -> Node:
    return Node(
        style={
            "display": "flex",
            "flex_direction": "row",
            "align_items": "baseline",
            "justify_content": "space-between",
            "width": percent(18),
            "height": px(28),
            "padding": _edges(top=2, bottom=2, left=2),
        },
        border_radius=_radius(0, 0, 0, 16),
    )


def _topbar_right() -> Node:
    return Node(
        style={
            "display": "flex",
            "flex_direction": "row",
            "align_items": "end",
            "justify_content": "end",
            "width": percent(82),
            "padding": _edges(right=5),
        },
        border_radius=_radius(0, 0, 0, 16),
    )


def _icon_button(texture: str, *tags: Tag) -> Node:
    return Node(
        kind=Kind.BUTTON,
        style={
            "width": px(26),
            "height": px(26),
            "border": _edges(1),
            "justify_content": "center",
            "align_items": "center",
        },
        border_color=BUTTON_BORDER,
        background=TRANSPARENT,
        tags=set(tags),
        children=[_image(texture, 24, 24)],
    )


def create_topbar_contents() -> Node:
    """App icon and title on the left, icon buttons on the right."""
    left = _topbar_left()
    left.children = [_image(ICON_APP, 24, 24), create_text(APP_TITLE, FONT_BOLD, 21.0, BLACK)]
    right = _topbar_right()
    right.children = [
        _icon_button(ICON_COLLAPSE, Tag.WINDOW_DECORATIONS_TOGGLER),
        _icon_button(ICON_CLOSE),
    ]
    row = _topbar_row()
    row.children = [left, right]
    return row


# Timeline header.

def create_header_contents() -> Node:
    """A row holding the text that shows the current time."""
    heading = create_text("", FONT_MEDIUM, 18.0, WHITE)
    heading.tags.add(Tag.CURRENT_TIME_TEXT)
    return Node(
        style={
            "display": "flex",
            "flex_direction": "row",
            "align_items": "start",
            "justify_content": "space-between",
            "width": percent(100),
            "height": px(75),
            "padding": _edges(5),
        },
        children=[heading],
    )


# Timeline body.

def _body_column() -> Node:
    return Node(
        style={
            "position_type": "relative",
            "display": "flex",
            "flex_direction": "column",
            "align_items": "center",
            "justify_content": "center",
            "width": px(TIMELINE_WIDTH_PX + CONTAINER_PADDING_PX * 2.0),
            "height": percent(100),
            "padding": _edges(CONTAINER_PADDING_PX),
        },
        background=BLACK,
        border_radius=_radius(0, 0, 0, 16),
    )


def _hours_row() -> Node:
    return Node(
        style={
            "display": "flex",
            "flex_direction": "row",
            "height": px(28),
            "width": px(TIMELINE_WIDTH_PX),
            "column_gap": px(HOURS_PADDING_PX),
        },
        background=BLACK,
        border_radius=_radius(0, 0, 0, 16),
    )


def _hour_box(hour: Hour) -> Node:
    inner = Node(
        style={
            "display": "flex",
            "align_items": "center",
            "justify_content": "center",
            "width": percent(100),
            "height": px(22),
            "padding": _edges(top=4),
        },
        background=BLACK,
        hour=hour,
        tags={Tag.HOUR},
        children=[create_text(str(hour), FONT_MEDIUM, 18.0, WHITE)],
    )
    return Node(
        style={
            "display": "block",
            "width": percent(3),
            "height": px(24),
            "padding": _edges(top=2, bottom=0),
        },
        background=WHITE,
        children=[inner],
    )


def _dial(hours: float, minutes: float) -> Node:
    return Node(
        style={
            "display": "block",
            "position_type": "absolute",
            "top": px(18),
            "left": px(dial_left_px(hours, minutes)),
            "width": px(DIAL_WIDTH_PX),
            "height": px(130),
        },
        z_index=1,
        background=DIAL_COLOR,
        tags={Tag.DIAL},
    )


def create_timeline_body_contents(chrono: ChronoSphere) -> Node:
    """Spectrum background, the row of hour boxes and the dial at the current time."""
    background = _image(SPECTRUM_BG, TIMELINE_WIDTH_PX, 140)
    hours = _hours_row()
    hours.children = [_hour_box(hour) for hour in Hour]
    body = _body_column()
    body.children = [background, hours, _dial(chrono.hour(), chrono.minutes())]
    return body


def build_ui(chrono: ChronoSphere) -> Node:
    """The complete widget tree of the window."""
    topbar = _topbar_grid_area()
    topbar.children.append(create_topbar_contents())
    header = _timeline_header_grid_area()
    header.children.append(create_header_contents())
    body = _timeline_body_grid_area()
    body.children.append(create_timeline_body_contents(chrono))

    root = create_app_grid()
    root.children = [_empty_grid_area(), topbar, header, body, _side_panel_grid_area()]
    return root


def refresh_heading(root: Node, chrono: ChronoSphere) -> str:
    """Write the current time into the header text and return it."""
    node = root.find(Tag.CURRENT_TIME_TEXT)
    node.text = chrono.heading()
    return node.text


def update_dial_position(root: Node, chrono: ChronoSphere) -> float:
    """Move the dial to the clock's time and return its new left offset."""
    left = dial_left_px(chrono.hour(), chrono.minutes())
    root.find(Tag.DIAL).style["left"] = px(left)
    return left


def active_hours(root: Node, chrono: ChronoSphere) -> list[Hour]:
    """Hours in the tree that match the hour the clock shows."""
    found = [
        node.hour
        for node in root.walk()
        if Tag.HOUR in node.tags and node.hour is not None and node.hour.matches(chrono)
    ]
    for _ in found:
        log.info("Now is %s:%s", chrono.formatted_hh(), chrono.formatted_mm())
    return found