# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""
Per-frame pipeline: sample the time, ease the bounce, compute the angles.
"""

from dataclasses import dataclass
from datetime import datetime

from .angles import ClockReading, HandAngles, compute_hand_angles, hour_divisions
from .curves import HAND_BOUNCE_DURATION_MS, bounce
from .errors import InvalidInputError


@dataclass(frozen=True)
class ClockFrame:
    """Everything the face renderer needs for one frame."""
    reading: ClockReading
    progress: float
    bounce_value: float
    angles: HandAngles
    divisions: int


def bounce_progress(now: datetime, duration_ms: float = HAND_BOUNCE_DURATION_MS) -> float:
    """
    Linear progress through the bounce that follows each second tick.

    The bounce starts on the second and lasts duration_ms; after that the
    progress holds at 1 until the next second.

    Args:
        now: Current time.
        duration_ms: Length of the bounce, up to one second.

    Returns:
        Progress in [0, 1].
    """
    if not 0 < duration_ms <= 1000:
        raise InvalidInputError(f"bounce duration must be in (0, 1000] ms, got {duration_ms}")
    elapsed_ms = now.microsecond / 1000
    return min(elapsed_ms / duration_ms, 1.0)


def build_frame(now: datetime, is_24_hour: bool,
                duration_ms: float = HAND_BOUNCE_DURATION_MS) -> ClockFrame:
    """Compute the hand angles for the given moment.

    Once the bounce is over the hands rest exactly on their marks.
    """
    reading = ClockReading.from_datetime(now)
    progress = bounce_progress(now, duration_ms)
    bounce_value = bounce(progress) if progress < 1.0 else 1.0
    return ClockFrame(
        reading=reading,
        progress=progress,
        bounce_value=bounce_value,
        angles=compute_hand_angles(reading, is_24_hour, bounce_value),
        divisions=hour_divisions(is_24_hour),
    )
