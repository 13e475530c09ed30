from datetime import datetime

import pytest

from timehold.chronosphere import ChronoSphere
from timehold.geometry import DIAL_WIDTH_PX, TIMELINE_WIDTH_PX, dial_left_px
from timehold.hours import Hour
from timehold.layout import (
    FONT_BOLD,
    FONT_MEDIUM,
    ICON_CLOSE,
    ICON_COLLAPSE,
    SPECTRUM_BG,
    Kind,
    Node,
    Tag,
    WHITE,
    BLACK,
    active_hours,
    build_ui,
    create_app_grid,
    create_header_contents,
    create_text,
    create_timeline_body_contents,
    create_topbar_contents,
    px,
    refresh_heading,
    update_dial_position,
)


@pytest.fixture
def chrono():
    return ChronoSphere(datetime(2024, 1, 2, 13, 45))


@pytest.fixture
def root(chrono):
    return build_ui(chrono)


def test_create_text_keeps_arguments():
    node = create_text("hello", FONT_MEDIUM, 18.0, WHITE)
    assert node.kind is Kind.TEXT
    assert (node.text, node.font, node.font_size, node.color) == (
        "hello",
        FONT_MEDIUM,
        18.0,
        WHITE,
    )


def test_walk_yields_parent_before_children():
    leaf = Node(text="leaf")
    middle = Node(text="middle", children=[leaf])
    top = Node(text="top", children=[middle, Node(text="other")])
    assert [n.text for n in top.walk()] == ["top", "middle", "leaf", "other"]


def test_find_missing_tag_raises(root):
    with pytest.raises(LookupError):
        root.find(Tag.RESOLUTION_TEXT)


def test_app_grid_columns_and_rows():
    grid = create_app_grid()
    assert grid.style["grid_template_columns"][0] == px(600)
    assert grid.style["grid_template_rows"][1:] == [px(28), px(32), px(180)]


def test_build_ui_has_five_areas(root):
    assert [c.style["grid_row"] for c in root.children] == [
        (1, 2),
        (2, 3),
        (3, 4),
        (4, 5),
        (1, 5),
    ]
    assert root.children[-1].style["display"] == "none"


def test_topbar_title_and_buttons():
    topbar = create_topbar_contents()
    texts = [n.text for n in topbar.walk() if n.kind is Kind.TEXT]
    assert texts == ["Timehold"]
    title = next(n for n in topbar.walk() if n.kind is Kind.TEXT)
    assert title.font == FONT_BOLD and title.color == BLACK
    buttons = [n for n in topbar.walk() if n.kind is Kind.BUTTON]
    assert [b.children[0].image for b in buttons] == [ICON_COLLAPSE, ICON_CLOSE]
    assert topbar.find(Tag.WINDOW_DECORATIONS_TOGGLER) is buttons[0]


def test_header_starts_empty():
    header = create_header_contents()
    assert header.find(Tag.CURRENT_TIME_TEXT).text == ""


def test_timeline_body_hours_in_order(chrono):
    body = create_timeline_body_contents(chrono)
    hour_nodes = [n for n in body.walk() if Tag.HOUR in n.tags]
    assert [n.hour for n in hour_nodes] == list(Hour)
    assert [n.children[0].text for n in hour_nodes] == [str(h) for h in Hour]


def test_timeline_body_background_image(chrono):
    body = create_timeline_body_contents(chrono)
    background = body.children[0]
    assert background.image == SPECTRUM_BG
    assert background.style["width"] == px(TIMELINE_WIDTH_PX)


def test_dial_placed_at_clock_time(root, chrono):
    dial = root.find(Tag.DIAL)
    assert dial.style["left"] == px(dial_left_px(chrono.hour(), chrono.minutes()))
    assert dial.style["width"] == px(DIAL_WIDTH_PX)


def test_refresh_heading_writes_clock_text(root, chrono):
    text = refresh_heading(root, chrono)
    assert text == chrono.heading()
    assert root.find(Tag.CURRENT_TIME_TEXT).text == chrono.heading()


def test_update_dial_position_follows_clock(root, chrono):
    chrono.now = datetime(2024, 1, 2, 6, 10)
    left = update_dial_position(root, chrono)
    assert left == dial_left_px(6.0, 10.0)
    assert root.find(Tag.DIAL).style["left"] == px(left)


def test_active_hours_matches_current_hour(root, chrono):
    assert active_hours(root, chrono) == [Hour.THIRTEEN]


@pytest.mark.parametrize("hour", [0, 9, 23])
def test_active_hours_for_each_time(root, hour):
    clock = ChronoSphere(datetime(2024, 5, 6, hour, 0))
    assert active_hours(root, clock) == [Hour(hour)]


def test_active_hours_empty_tree(chrono):
    assert active_hours(create_app_grid(), chrono) == []