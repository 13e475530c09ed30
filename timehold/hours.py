"""The twenty-four hour slots shown on the timeline."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timehold.chronosphere import ChronoSphere


class Hour(IntEnum):
    """An hour of the day, labelled with two digits."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11
    TWELVE = 12
    THIRTEEN = 13
    FOURTEEN = 14
    FIFTEEN = 15
    SIXTEEN = 16
    SEVENTEEN = 17
    EIGHTEEN = 18
    NINETEEN = 19
    TWENTY = 20
    TWENTY_ONE = 21
    TWENTY_TWO = 22
    TWENTY_THREE = 23

    def __str__(self) -> str:
        return f"{self.value:02d}"

    def matches(self, chrono: ChronoSphere) -> bool:
        """True when this slot is the hour the clock currently shows."""
        return chrono.formatted_hh() == str(self)