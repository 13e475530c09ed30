import pytest

from timehold.geometry import (
    CONTAINER_PADDING_PX,
    CURSOR_HEIGHT,
    DIAL_WIDTH_PX,
    GAP,
    HOURS_PADDING_PX,
    HOUR_SLOT_HEIGHT,
    PADDING,
    TIMELINE_WIDTH_PX,
    Point,
    Rect,
    cursor_canvas,
    cursor_line,
    dial_left_px,
    hour_slot_rects,
    rect_with_offset,
)

CANVAS = Rect(Point(PADDING, 40.0), Point(PADDING + TIMELINE_WIDTH_PX, 180.0))


def test_rect_with_offset_shifts_both_corners():
    rect = rect_with_offset(Point(1.0, 2.0), Point(3.0, 5.0), Point(10.0, 20.0))
    assert rect == Rect(Point(11.0, 22.0), Point(13.0, 25.0))


def test_rect_size():
    rect = Rect(Point(2.0, 3.0), Point(7.0, 11.0))
    assert rect.width() == pytest.approx(5.0)
    assert rect.height() == pytest.approx(8.0)


def test_rect_with_offset_keeps_size():
    start, end = Point(4.0, 6.0), Point(9.0, 10.0)
    plain = Rect(start, end)
    moved = rect_with_offset(start, end, Point(-3.0, 100.0))
    assert moved.width() == pytest.approx(plain.width())
    assert moved.height() == pytest.approx(plain.height())


def test_dial_at_midnight():
    assert dial_left_px(0, 0) == pytest.approx(CONTAINER_PADDING_PX - DIAL_WIDTH_PX)


def test_dial_moves_forward_through_the_day():
    positions = [dial_left_px(h, m) for h in range(24) for m in range(0, 60, 15)]
    assert positions == sorted(positions)
    assert len(set(positions)) == len(positions)


@pytest.mark.parametrize("h", range(23))
def test_dial_jumps_gap_between_hours(h):
    assert dial_left_px(h + 1, 0) - dial_left_px(h, 60) == pytest.approx(
        HOURS_PADDING_PX
    )


def test_dial_end_of_day_within_timeline():
    right = dial_left_px(23, 60) + DIAL_WIDTH_PX
    assert right == pytest.approx(CONTAINER_PADDING_PX + TIMELINE_WIDTH_PX)


def test_hour_slots_layout():
    slots = hour_slot_rects(CANVAS)
    assert len(slots) == 24
    expected_width = CANVAS.width() / 24 - GAP
    for slot in slots:
        assert slot.width() == pytest.approx(expected_width)
        assert slot.height() == pytest.approx(HOUR_SLOT_HEIGHT)
        assert slot.min.y == pytest.approx(CANVAS.max.y)
    assert slots[0].min.x == pytest.approx(PADDING)
    for left, right in zip(slots, slots[1:]):
        assert right.min.x - left.max.x == pytest.approx(GAP)


@pytest.mark.parametrize("hour", [0, 7, 23])
def test_cursor_canvas_spans_canvas_above_slot(hour):
    column = cursor_canvas(CANVAS, hour)
    slot = hour_slot_rects(CANVAS)[hour]
    assert column.min.x == pytest.approx(slot.min.x)
    assert column.max.x == pytest.approx(slot.max.x)
    assert column.min.y == pytest.approx(CANVAS.min.y)
    assert column.max.y == pytest.approx(CANVAS.max.y)


@pytest.mark.parametrize("hour", [-1, 24])
def test_cursor_canvas_rejects_bad_hour(hour):
    with pytest.raises(ValueError):
        cursor_canvas(CANVAS, hour)


def test_cursor_line_endpoints():
    column = cursor_canvas(CANVAS, 5)
    start, end = cursor_line(column, 0)
    assert start.x == pytest.approx(column.min.x)
    assert end.x == pytest.approx(start.x)
    assert start.y == pytest.approx(column.min.y + PADDING)
    assert end.y - start.y == pytest.approx(CURSOR_HEIGHT)
    full_start, _ = cursor_line(column, 60)
    assert full_start.x == pytest.approx(column.max.x)


def test_cursor_line_custom_height():
    column = cursor_canvas(CANVAS, 12)
    start, end = cursor_line(column, 30, 50.0)
    assert start.y == pytest.approx(column.min.y + PADDING)
    assert end.y - start.y == pytest.approx(50.0)
    assert start.x == pytest.approx((column.min.x + column.max.x) / 2)