# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""
Hand angle calculation.

Angles are in radians. Zero points right (3 o'clock) and angles increase
clockwise on screen, so -pi/2 is straight up.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from .errors import InvalidInputError

MINUTE_DIVISIONS = 60

# Angle zero starts on the right side and not on the top.
_TOP = -math.pi / 2


@dataclass(frozen=True)
class ClockReading:
    """Wall-clock time sampled for one frame."""
    hour: int
    minute: int
    second: int

    def __post_init__(self):
        for name, upper in (('hour', 23), ('minute', 59), ('second', 59)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInputError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= upper:
                raise InvalidInputError(f"{name} must be between 0 and {upper}, got {value}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> "ClockReading":
        """Take the hour, minute and second of a datetime."""
        return cls(hour=dt.hour, minute=dt.minute, second=dt.second)


@dataclass(frozen=True)
class HandAngles:
    """Angles of the three hands for one frame."""
    second: float
    minute: float
    hour: float


def hour_divisions(is_24_hour: bool) -> int:
    """Number of hour marks on the face: 24 in 24-hour mode, 12 otherwise."""
    return 24 if is_24_hour else 12


def compute_hand_angles(reading: ClockReading, is_24_hour: bool,
                        bounce_value: float) -> HandAngles:
    """
    Compute the angles of the second, minute and hour hands.

    The second hand is offset by the bounce on every second. The minute hand
    only bounces when the minute changes (second == 0). The hour hand never
    bounces.

    Args:
        reading: Current wall-clock time.
        is_24_hour: True to lay the hour hand out over 24 divisions.
        bounce_value: Output of curves.bounce(); 1 is the rest position.

    Returns:
        HandAngles for the frame.

    Raises:
        InvalidInputError: If bounce_value is not finite.
    """
    if not math.isfinite(bounce_value):
        raise InvalidInputError(f"bounce value must be finite, got {bounce_value}")

    step = math.pi * 2 / MINUTE_DIVISIONS
    bounce_offset = step * (bounce_value - 1)

    second_angle = _TOP + step * reading.second + bounce_offset
    minute_angle = (
        _TOP
        + step * reading.minute
        + (0 if reading.second != 0 else bounce_offset)
    )

    divisions = hour_divisions(is_24_hour)
    hour_value = reading.hour if is_24_hour else reading.hour % 12
    hour_step = math.pi * 2 / divisions
    hour_angle = (
        _TOP
        + hour_step * hour_value
        + hour_step / 60 * reading.minute
        + hour_step / 60 / 60 * reading.second
    )

    return HandAngles(second=second_angle, minute=minute_angle, hour=hour_angle)
