# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""Drawing surface backed by a pygame Surface."""

import logging
import math
from typing import Dict, Optional, Sequence, Tuple

import pygame

from .base import Color, DrawingSurface, Point, TextStyle, device_bounds

logger = logging.getLogger(__name__)


class PygameSurface(DrawingSurface):
    """Draws onto a pygame.Surface, such as the display surface of a window."""

    name = "pygame"

    def __init__(self, surface: pygame.Surface, clear_color: Color = (0, 0, 0, 0),
                 font_cache: Optional[Dict[tuple, pygame.font.Font]] = None):
        """
        Initialize the backend.

        Args:
            surface: Target surface. Use pygame.SRCALPHA for a transparent clear.
            clear_color: Colour every pixel is reset to by clear().
            font_cache: Dict to keep fonts in, shared between frames by the caller.
        """
        super().__init__()
        self._surface = surface
        self._clear_color = clear_color
        self._font_cache = font_cache if font_cache is not None else {}

    @classmethod
    def create(cls, width: int, height: int, clear_color: Color = (0, 0, 0, 0)) -> "PygameSurface":
        """Create a backend over a new off-screen surface with alpha."""
        return cls(pygame.Surface((width, height), pygame.SRCALPHA), clear_color)

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def size(self) -> Tuple[int, int]:
        return self._surface.get_size()

    def get_font(self, style: TextStyle) -> pygame.font.Font:
        """Get a cached pygame font for a text style."""
        cache_key = (style.font_name, style.font_size)
        if cache_key not in self._font_cache:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_cache[cache_key] = pygame.font.SysFont(style.font_name, style.font_size)
            logger.debug(f"Loaded font {style.font_name or 'default'} at {style.font_size}px")
        return self._font_cache[cache_key]

    def clear(self) -> None:
        self._surface.fill(self._clear_color)

    def fill_device_polygon(self, points: Sequence[Point], color: Color,
                            darken: bool = False) -> None:
        if not darken:
            pygame.draw.polygon(self._surface, color, list(points))
            return

        box = device_bounds(points, self.size)
        if box is None:
            return
        left, top, right, bottom = box
        # White leaves the destination unchanged under a channel-wise minimum
        ink = pygame.Surface((right - left, bottom - top))
        ink.fill((255, 255, 255))
        pygame.draw.polygon(ink, color[:3], [(x - left, y - top) for x, y in points])
        self._surface.blit(ink, (left, top), special_flags=pygame.BLEND_RGB_MIN)

    def fill_device_circle(self, center: Point, radius: float, color: Color) -> None:
        pygame.draw.circle(self._surface, color, center, radius)

    def measure_text(self, text: str, style: TextStyle) -> Tuple[float, float]:
        return self.get_font(style).size(text)

    def blit_text(self, text: str, style: TextStyle, center: Point, angle: float) -> None:
        rendered = self.get_font(style).render(text, True, style.color)
        if angle:
            # pygame rotates counter-clockwise
            rendered = pygame.transform.rotozoom(rendered, -math.degrees(angle), 1)
        rect = rendered.get_rect(center=(round(center[0]), round(center[1])))
        self._surface.blit(rendered, rect)

    def save_image(self, path: str) -> None:
        pygame.image.save(self._surface, path)
