"""Shared clock state: the current local time and its formatted pieces."""

from __future__ import annotations

from datetime import datetime

_WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class ChronoSphere:
    """Holds the moment the clock shows and formats it for display."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now if now is not None else _local_now()

    def update(self) -> None:
        """Move the clock to the current local time."""
        self.now = _local_now()

    def hour(self) -> float:
        return float(self.now.hour)

    def minutes(self) -> float:
        return float(self.now.minute)

    def formatted_hh(self) -> str:
        """Hour of the day, zero padded to two digits."""
        return f"{self.now.hour:02d}"

    def formatted_mm(self) -> str:
        """Minute of the hour, zero padded to two digits."""
        return f"{self.now.minute:02d}"

    def weekday(self) -> str:
        """Full English name of the day of the week."""
        return _WEEKDAY_NAMES[self.now.weekday()]

    def heading(self) -> str:
        """Text shown in the timeline header."""
        return (
            f"{self.weekday()} | {self.formatted_hh()}:{self.formatted_mm()}"
            f"        ¬ {self.now.isoformat()}"
        )