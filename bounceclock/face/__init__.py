# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""Clock face layout and painting."""

from .geometry import FaceGeometry, HandStyle, TickMark, hour_ticks, minute_ticks
from .renderer import BACKGROUND_COLOR, INK_COLOR, FaceRenderer
from .surfaces import SURFACES, DrawingSurface, StrokeCap, TextStyle

__all__ = [
    'FaceGeometry',
    'HandStyle',
    'TickMark',
    'hour_ticks',
    'minute_ticks',
    'FaceRenderer',
    'BACKGROUND_COLOR',
    'INK_COLOR',
    'DrawingSurface',
    'StrokeCap',
    'TextStyle',
    'SURFACES',
]
