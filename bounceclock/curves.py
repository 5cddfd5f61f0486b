# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""
Easing curve for the bouncing motion of the clock hands.

An elastic-out curve overshoots the destination well, but the swing back
before the destination is too weak to look like a real hand. This curve
keeps the exponential envelope of elastic-out and shifts the phase of the
oscillation so the first overshoot is smaller and the second is more
pronounced, which matches slow motion footage of a watch more closely.
"""

import math

# Oscillation period of the curve, in units of t.
BOUNCE_PERIOD = 0.4

# How long one bounce lasts after each second tick.
HAND_BOUNCE_DURATION_MS = 274

# Largest exponent 2.0 ** x accepts without OverflowError.
_MAX_EXPONENT = 1023


def bounce(t: float) -> float:
    """
    Map linear progress through a bounce to the eased hand position.

    The result starts at 0, overshoots past 1, swings back below it and
    settles at 1. Values of t outside [0, 1] are not clamped.

    Args:
        t: Linear progress, normally in [0, 1].

    Returns:
        Eased value, roughly in [-0.1, 1.1] for t in [0, 1].
    """
    if not math.isfinite(t):
        return math.nan

    b = BOUNCE_PERIOD
    exponent = -10 * t
    envelope = 2.0 ** exponent if exponent <= _MAX_EXPONENT else math.inf
    return 1 + envelope * math.sin(((t - b / 4) * math.pi * 2) / b)
