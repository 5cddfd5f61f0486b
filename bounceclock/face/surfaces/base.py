# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""Base class for drawing surface backends."""

import math
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

Color = Tuple[int, ...]
Point = Tuple[float, float]

# Affine matrix (a, b, c, d, e, f): x' = a*x + c*y + e, y' = b*x + d*y + f
_IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


class StrokeCap(Enum):
    """How the ends of a line are finished."""
    BUTT = "butt"
    SQUARE = "square"
    ROUND = "round"


@dataclass(frozen=True)
class TextStyle:
    """Font and colour used for the hour numerals."""
    font_name: Optional[str] = None
    font_size: int = 24
    color: Color = (0, 0, 0)


class DrawingSurface(ABC):
    """Immediate-mode drawing surface with a rotate/translate transform stack.

    Shapes are given in local coordinates and mapped to device pixels through
    the current transform. Positive rotation turns clockwise on screen, since
    the y axis points down. Backends only implement the device-space
    primitives; everything else is built on top of them here.
    """

    # Surface metadata - subclasses should override
    name: str = "base"

    def __init__(self):
        self._matrix = _IDENTITY
        self._stack: List[tuple] = []

    # Transform stack

    def save(self) -> None:
        """Push the current transform."""
        self._stack.append(self._matrix)

    def restore(self) -> None:
        """Pop the transform pushed by the matching save()."""
        if not self._stack:
            raise RuntimeError("restore() called without matching save()")
        self._matrix = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        a, b, c, d, e, f = self._matrix
        self._matrix = (a, b, c, d, a * dx + c * dy + e, b * dx + d * dy + f)

    def rotate(self, theta: float) -> None:
        """Rotate the local frame by theta radians (clockwise on screen)."""
        a, b, c, d, e, f = self._matrix
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        self._matrix = (
            a * cos_t + c * sin_t,
            b * cos_t + d * sin_t,
            -a * sin_t + c * cos_t,
            -b * sin_t + d * cos_t,
            e,
            f,
        )

    @contextmanager
    def transform(self, translate: Point = (0.0, 0.0), rotate: float = 0.0):
        """Apply a translation followed by a rotation for the duration of the block."""
        self.save()
        try:
            self.translate(*translate)
            self.rotate(rotate)
            yield self
        finally:
            self.restore()

    @property
    def rotation(self) -> float:
        """Total rotation of the current transform in radians."""
        a, b = self._matrix[0], self._matrix[1]
        return math.atan2(b, a)

    def to_device(self, point: Point) -> Point:
        """Map a point in local coordinates to device pixels."""
        a, b, c, d, e, f = self._matrix
        x, y = point
        return (a * x + c * y + e, b * x + d * y + f)

    # Shapes in local coordinates

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        self.fill_device_circle(self.to_device(center), radius, color)

    def fill_rect(self, center: Point, width: float, height: float, color: Color,
                  darken: bool = False) -> None:
        """Fill a rectangle centred on a local point, rotated with the frame.

        With darken, each channel keeps the darker of the colour and the pixel
        underneath instead of being overwritten.
        """
        cx, cy = center
        hw, hh = width / 2, height / 2
        corners = [(cx - hw, cy - hh), (cx + hw, cy - hh), (cx + hw, cy + hh), (cx - hw, cy + hh)]
        self.fill_device_polygon([self.to_device(p) for p in corners], color, darken)

    def draw_line(self, start: Point, end: Point, width: float,
                  cap: StrokeCap, color: Color) -> None:
        """Stroke a straight line with the given width and end cap."""
        (x0, y0), (x1, y1) = start, end
        length = math.hypot(x1 - x0, y1 - y0)
        half = width / 2

        if length == 0:
            if cap is StrokeCap.ROUND:
                self.fill_circle(start, half, color)
            elif cap is StrokeCap.SQUARE:
                self.fill_rect(start, width, width, color)
            return

        ux, uy = (x1 - x0) / length, (y1 - y0) / length
        nx, ny = -uy * half, ux * half

        if cap is StrokeCap.SQUARE:
            x0, y0 = x0 - ux * half, y0 - uy * half
            x1, y1 = x1 + ux * half, y1 + uy * half

        outline = [(x0 + nx, y0 + ny), (x1 + nx, y1 + ny), (x1 - nx, y1 - ny), (x0 - nx, y0 - ny)]
        self.fill_device_polygon([self.to_device(p) for p in outline], color)

        if cap is StrokeCap.ROUND:
            self.fill_circle(start, half, color)
            self.fill_circle(end, half, color)

    def draw_text(self, text: str, top_center: Point, style: TextStyle) -> None:
        """Draw text horizontally centred below a local point, rotated with the frame."""
        _, height = self.measure_text(text, style)
        x, y = top_center
        center = self.to_device((x, y + height / 2))
        self.blit_text(text, style, center, self.rotation)

    # Device primitives implemented by each backend

    @property
    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Width and height of the surface in pixels."""

    @abstractmethod
    def clear(self) -> None:
        """Reset every pixel of the surface to the clear colour."""

    @abstractmethod
    def fill_device_polygon(self, points: Sequence[Point], color: Color,
                            darken: bool = False) -> None:
        pass

    @abstractmethod
    def fill_device_circle(self, center: Point, radius: float, color: Color) -> None:
        pass

    @abstractmethod
    def measure_text(self, text: str, style: TextStyle) -> Tuple[float, float]:
        """Return the width and height text occupies when drawn unrotated."""

    @abstractmethod
    def blit_text(self, text: str, style: TextStyle, center: Point, angle: float) -> None:
        """
        Draw text centred on a device point.

        Args:
            text: Text to draw.
            style: Font and colour.
            center: Device pixel the middle of the text lands on.
            angle: Clockwise rotation of the text in radians.
        """

    @abstractmethod
    def save_image(self, path: str) -> None:
        """Write the surface to an image file; the format follows the extension."""


def device_bounds(points: Sequence[Point], size: Tuple[int, int]) -> Optional[Tuple[int, int, int, int]]:
    """Pixel box (left, top, right, bottom) covering a polygon, clipped to the surface, or None."""
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    left = max(0, math.floor(min(xs)))
    top = max(0, math.floor(min(ys)))
    right = min(size[0], math.ceil(max(xs)) + 1)
    bottom = min(size[1], math.ceil(max(ys)) + 1)
    if left >= right or top >= bottom:
        return None
    return left, top, right, bottom
