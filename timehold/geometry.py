"""Pixel geometry of the timeline: hour slots, the time cursor and the dial."""

from __future__ import annotations

from dataclasses import dataclass

CONTAINER_PADDING_PX = 10.0
TIMELINE_WIDTH_PX = 580.0
HOURS_PADDING_PX = 7.0
DIAL_WIDTH_PX = 2.0

PADDING = CONTAINER_PADDING_PX
GAP = 5.0
HOUR_SLOT_HEIGHT = 30.0
CURSOR_WIDTH = 1.5
CURSOR_HEIGHT = 130.0


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    min: Point
    max: Point

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y


def rect_with_offset(start: Point, end: Point, offset: Point) -> Rect:
    """The rectangle from start to end, shifted by offset."""
    return Rect(
        Point(offset.x + start.x, offset.y + start.y),
        Point(offset.x + end.x, offset.y + end.y),
    )


def dial_left_px(hours: float, minutes: float) -> float:
    """Left position of the dial in the timeline body for a time of day."""
    hour_width_px = (TIMELINE_WIDTH_PX - 23.0 * HOURS_PADDING_PX) / 24.0
    cumulative_padding_px = CONTAINER_PADDING_PX + hours * HOURS_PADDING_PX
    return (
        hours * hour_width_px
        + cumulative_padding_px
        + hour_width_px / 60.0 * minutes
        - DIAL_WIDTH_PX
    )


def hour_slot_rects(canvas: Rect) -> list[Rect]:
    """Rectangles of the 24 hour slots laid out below the canvas."""
    slot_width = canvas.width() / 24.0 - GAP
    return [
        rect_with_offset(
            Point(slot_width * hour, 0.0),
            Point(slot_width * (hour + 1), HOUR_SLOT_HEIGHT),
            Point(PADDING + GAP * hour, canvas.max.y),
        )
        for hour in range(24)
    ]


def cursor_canvas(canvas: Rect, hour: int) -> Rect:
    """Column of the canvas above the slot of the given hour."""
    if not 0 <= hour < 24:
        raise ValueError(f"hour out of range: {hour}")
    slot = hour_slot_rects(canvas)[hour]
    return Rect(Point(slot.min.x, canvas.min.y), Point(slot.max.x, canvas.max.y))


def cursor_line(
    canvas: Rect,
    minutes: float,
    height: float = CURSOR_HEIGHT,
) -> tuple[Point, Point]:
    """End points of the vertical cursor line for the minute within its column."""
    x = canvas.width() / 60.0 * minutes + canvas.min.x
    top = canvas.min.y + PADDING
    return Point(x, top), Point(x, top + height)