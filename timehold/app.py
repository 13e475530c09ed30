"""The timeline window: its state, its update cycle and a terminal front end."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass, field
from datetime import datetime

from timehold.chronosphere import ChronoSphere
from timehold.geometry import PADDING, TIMELINE_WIDTH_PX
from timehold.hours import Hour
from timehold.layout import (
    APP_TITLE,
    Node,
    Tag,
    active_hours,
    build_ui,
    refresh_heading,
    update_dial_position,
)

WINDOW_TITLE = APP_TITLE
WINDOW_NAME = "timehold"
WINDOW_RESOLUTION = (600.0, 240.0)
REPAINT_INTERVAL_SECONDS = 240.0

TOOLBAR_HEIGHT = 40.0
HEADER_HEIGHT = 140.0
SPECTRUM_BG_HEIGHT = 140.0
SPECTRUM_BG_WIDTH = TIMELINE_WIDTH_PX
HOURS_HEIGHT = 30.0
FOOTER_HEIGHT = 30.0

TOP_FRAME_HEIGHT = TOOLBAR_HEIGHT
CENTRAL_FRAME_HEIGHT_NORMAL = (
    HEADER_HEIGHT + SPECTRUM_BG_HEIGHT + HOURS_HEIGHT + PADDING + FOOTER_HEIGHT
)
CENTRAL_FRAME_HEIGHT_COMPACT = SPECTRUM_BG_HEIGHT + HOURS_HEIGHT
MAX_WINDOW_HEIGHT = TOP_FRAME_HEIGHT + CENTRAL_FRAME_HEIGHT_NORMAL
MIN_WINDOW_HEIGHT = TOP_FRAME_HEIGHT + CENTRAL_FRAME_HEIGHT_COMPACT

MAX_WINDOW_SIZE = (700.0, MAX_WINDOW_HEIGHT)
MIN_WINDOW_SIZE = (SPECTRUM_BG_WIDTH + PADDING * 2.0, MIN_WINDOW_HEIGHT)

EXPAND_LABEL = "🔼"
COLLAPSE_LABEL = "🔽"
LOCKED_LABEL = "🔒"
UNLOCKED_LABEL = "🔓"
ON_TOP_LABEL = "⏺"
PIN_LABEL = "📌"


@dataclass
class WindowState:
    """Compact mode, decorations and stacking of the window."""

    compact_mode: bool = True
    always_on_top: bool = False
    decorations: bool = True
    max_size: tuple[float, float] = field(default=MAX_WINDOW_SIZE)
    min_size: tuple[float, float] = field(default=MIN_WINDOW_SIZE)

    def size(self) -> tuple[float, float]:
        """The window size for the current mode."""
        return self.min_size if self.compact_mode else self.max_size

    def toggle_compact(self) -> tuple[float, float]:
        """Switch between compact and full mode; return the new window size."""
        self.compact_mode = not self.compact_mode
        return self.size()

    def toggle_decorations(self) -> tuple[float, float]:
        """Show or hide decorations; return the size the window keeps."""
        self.decorations = not self.decorations
        return self.size()

    def toggle_always_on_top(self) -> bool:
        """Flip whether the window stays above others; return the new setting."""
        self.always_on_top = not self.always_on_top
        return self.always_on_top

    def _button_labels(self) -> tuple[str, str, str]:
        return (
            EXPAND_LABEL if self.compact_mode else COLLAPSE_LABEL,
            LOCKED_LABEL if self.decorations else UNLOCKED_LABEL,
            ON_TOP_LABEL if self.always_on_top else PIN_LABEL,
        )


class TimeholdApp:
    """Ties the clock to the widget tree and draws it as text."""

    def __init__(self, root: Node | None = None, chrono: ChronoSphere | None = None) -> None:
        self.chrono = chrono if chrono is not None else ChronoSphere()
        self.root = root if root is not None else build_ui(self.chrono)
        self.window = WindowState()
        self._refresh()

    def _refresh(self) -> list[Hour]:
        refresh_heading(self.root, self.chrono)
        update_dial_position(self.root, self.chrono)
        return active_hours(self.root, self.chrono)

    def tick(self) -> list[Hour]:
        """Advance the clock to now, refresh the tree and return the active hours."""
        self.chrono.update()
        return self._refresh()

    def render(self) -> str:
        """The window drawn as lines of text."""
        expand, lock, pin = self.window._button_labels()
        lines = [f"{expand} {WINDOW_TITLE}  {lock} {pin}"]
        if not self.window.compact_mode:
            lines.append(self.root.find(Tag.CURRENT_TIME_TEXT).text or "")
        hours = [node.hour for node in self.root.walk() if Tag.HOUR in node.tags and node.hour is not None]
        lines.append(" ".join(str(hour) for hour in hours))
        current = int(self.chrono.hour())
        cursor = "^"
        for position, hour in enumerate(hours):
            if hour == current:
                offset = position * 3 + (1 if self.chrono.minutes() >= 30 else 0)
                cursor = " " * offset + "^"
                break
        lines.append(cursor)
        return "\n".join(lines)


def _parse_time(text: str) -> datetime:
    return datetime.fromisoformat(text)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog=WINDOW_NAME, description="Show the hours of the day on a timeline.")
    parser.add_argument("--at", help="show this ISO time instead of the current one")
    parser.add_argument("--once", action="store_true", help="draw a single frame and exit")
    parser.add_argument("--expanded", action="store_true", help="start in full mode with the header")
    parser.add_argument(
        "--interval",
        type=float,
        default=REPAINT_INTERVAL_SECONDS,
        help="seconds between redraws",
    )
    args = parser.parse_args(argv)
    if args.interval <= 0:
        parser.error("--interval must be positive")

    chrono = None
    if args.at is not None:
        try:
            chrono = ChronoSphere(_parse_time(args.at))
        except ValueError:
            parser.error(f"invalid time: {args.at}")

    app = TimeholdApp(chrono=chrono)
    if args.expanded:
        app.window.toggle_compact()

    print(app.render())
    if args.once or chrono is not None:
        return 0
    try:
        while True:
            time.sleep(args.interval)
            app.tick()
            print(app.render())
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())