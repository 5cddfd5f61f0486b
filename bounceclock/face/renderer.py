# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""Clock face painter."""

import logging
import math
from typing import Optional

from ..angles import HandAngles
from ..errors import InvalidInputError
from .geometry import FaceGeometry, HandStyle, check_divisions, hour_ticks, minute_ticks
from .surfaces.base import Color, DrawingSurface, TextStyle

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (0xff, 0xd3, 0x45)
INK_COLOR = (0x00, 0x00, 0x00)


class FaceRenderer:
    """Paints the clock face: disc, ticks, numerals and hands.

    The face fills the whole drawing surface, which must be square. Every call
    to paint() redraws everything; the only state kept between frames is the
    geometry for the last surface size.
    """

    def __init__(self, background_color: Color = BACKGROUND_COLOR, ink_color: Color = INK_COLOR):
        """
        Initialize the renderer.

        Args:
            background_color: Fill of the face disc.
            ink_color: Colour of ticks and hands.
        """
        self.background_color = tuple(background_color)
        self.ink_color = tuple(ink_color)
        self._geometry: Optional[FaceGeometry] = None

    def layout(self, side: float) -> FaceGeometry:
        """Return the geometry for a square of the given side, reusing the last one if unchanged."""
        if self._geometry is None or self._geometry.side != side:
            self._geometry = FaceGeometry(side)
            logger.debug(f"Face layout recomputed for side {side}")
        return self._geometry

    def paint(self, surface: DrawingSurface, angles: HandAngles, divisions: int,
              text_style: TextStyle) -> None:
        """
        Paint one frame of the clock face.

        Args:
            surface: Square drawing surface the face fills.
            angles: Hand angles for the frame.
            divisions: Number of hour ticks and numerals (12 or 24).
            text_style: Style of the numerals.

        Raises:
            InvalidInputError: If the surface is not square, divisions is not
                12 or 24, the text style is missing or an angle is not finite.
        """
        if text_style is None:
            raise InvalidInputError("text style is required")
        check_divisions(divisions)
        for name in ('second', 'minute', 'hour'):
            if not math.isfinite(getattr(angles, name)):
                raise InvalidInputError(f"{name} hand angle must be finite")

        width, height = surface.size
        if width <= 0 or height <= 0:
            # Transient empty layout while resizing
            logger.debug(f"Skipping paint of empty {width}x{height} region")
            return
        if width != height:
            raise InvalidInputError(f"clock face region must be square, got {width}x{height}")

        geometry = self.layout(width)

        surface.clear()
        with surface.transform(translate=geometry.center):
            surface.fill_circle((0, 0), geometry.radius, self.background_color)
            self._paint_minute_ticks(surface, geometry, divisions)
            self._paint_hour_ticks(surface, geometry, divisions, text_style)

            self._paint_hand(surface, geometry.hour_hand, angles.hour)
            self._paint_hand(surface, geometry.minute_hand, angles.minute)
            self._paint_hand(surface, geometry.second_hand, angles.second)

    def _paint_minute_ticks(self, surface: DrawingSurface, geometry: FaceGeometry,
                            divisions: int) -> None:
        """Ticks indicating minutes and seconds."""
        width, height = geometry.MINUTE_TICK_SIZE
        center = geometry.tick_center(height)
        for tick in minute_ticks(divisions):
            with surface.transform(rotate=tick.angle):
                surface.fill_rect(center, width, height, self.ink_color, darken=True)

    def _paint_hour_ticks(self, surface: DrawingSurface, geometry: FaceGeometry,
                          divisions: int, text_style: TextStyle) -> None:
        """Ticks and numerals indicating hours."""
        width, height = geometry.HOUR_TICK_SIZE
        center = geometry.tick_center(height)
        for tick in hour_ticks(divisions):
            with surface.transform(rotate=tick.angle):
                surface.fill_rect(center, width, height, self.ink_color, darken=True)
                surface.draw_text(tick.label, (0, geometry.numeral_top), text_style)

    def _paint_hand(self, surface: DrawingSurface, hand: HandStyle, angle: float) -> None:
        end = (hand.length * math.cos(angle), hand.length * math.sin(angle))
        surface.draw_line((0, 0), end, hand.width, hand.cap, self.ink_color)
