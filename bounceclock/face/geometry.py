# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""
Layout of the clock face.

Everything is derived from the side length of the square the face is drawn
in. Positions are given in a frame centred on the face with 12 o'clock
straight up; each tick is drawn at the top of that frame after rotating it
clockwise by the tick's angle.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple

from ..angles import MINUTE_DIVISIONS
from ..errors import InvalidInputError
from .surfaces.base import Point, StrokeCap

VALID_DIVISIONS = (12, 24)


@dataclass(frozen=True)
class TickMark:
    """One mark on the face."""
    index: int
    angle: float  # clockwise from 12 o'clock
    label: Optional[str] = None


@dataclass(frozen=True)
class HandStyle:
    """Length and stroke of one hand."""
    length: float
    width: float
    cap: StrokeCap


@dataclass(frozen=True)
class FaceGeometry:
    """Sizes and positions for a face drawn in a square of the given side."""
    side: float

    # (width, height) of the tick rectangles, in pixels
    MINUTE_TICK_SIZE: ClassVar[Tuple[float, float]] = (1.3, 8.3)
    HOUR_TICK_SIZE: ClassVar[Tuple[float, float]] = (3.1, 4.2)
    # Distance from the rim to the top of the numerals
    NUMERAL_INSET: ClassVar[float] = 9.6

    @property
    def radius(self) -> float:
        return self.side / 2

    @property
    def center(self) -> Point:
        return (self.side / 2, self.side / 2)

    def tick_center(self, height: float) -> Point:
        """Centre of a tick of the given height sitting against the rim at 12 o'clock."""
        return (0.0, (-self.side + height) / 2)

    @property
    def numeral_top(self) -> float:
        return -self.radius + self.NUMERAL_INSET

    @property
    def hour_hand(self) -> HandStyle:
        return HandStyle(length=self.side / 3.1, width=13.7, cap=StrokeCap.BUTT)

    @property
    def minute_hand(self) -> HandStyle:
        return HandStyle(length=self.side / 2.3, width=8.4, cap=StrokeCap.SQUARE)

    @property
    def second_hand(self) -> HandStyle:
        return HandStyle(length=self.side / 2.1, width=3.0, cap=StrokeCap.ROUND)


def check_divisions(divisions: int) -> None:
    """Raise InvalidInputError unless divisions is 12 or 24."""
    if divisions not in VALID_DIVISIONS:
        raise InvalidInputError(f"hour divisions must be 12 or 24, got {divisions!r}")


def minute_ticks(divisions: int) -> List[TickMark]:
    """
    Minute/second ticks that do not coincide with an hour tick.

    Args:
        divisions: Number of hour ticks on the face (12 or 24).

    Returns:
        TickMark per remaining minute position, in clockwise order.
    """
    check_divisions(divisions)
    step = math.pi * 2 / MINUTE_DIVISIONS
    hour_spacing = MINUTE_DIVISIONS / divisions
    return [
        TickMark(index=n, angle=n * step)
        for n in range(MINUTE_DIVISIONS)
        # Do not draw small ticks where large ones will be drawn anyway.
        if n % hour_spacing != 0
    ]


def hour_ticks(divisions: int) -> List[TickMark]:
    """
    Hour ticks with their numerals, 1 to divisions, increasing clockwise.

    The numeral equal to divisions (12 or 24) sits at the top.
    """
    check_divisions(divisions)
    step = math.pi * 2 / divisions
    return [
        TickMark(index=n, angle=(n % divisions) * step, label=str(n))
        for n in range(1, divisions + 1)
    ]
