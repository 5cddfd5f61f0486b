# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""Drawing surface backed by a Pillow image, for headless rendering."""

import logging
import math
from typing import Dict, Sequence, Tuple

from PIL import Image, ImageChops, ImageDraw, ImageFont

from .base import Color, DrawingSurface, Point, TextStyle, device_bounds

logger = logging.getLogger(__name__)

# Font files tried when a style names no font (tried in order)
DEFAULT_FONT_FILES = ['DejaVuSans.ttf', 'LiberationSans-Regular.ttf', 'FreeSans.ttf', 'Arial.ttf']


class PilSurface(DrawingSurface):
    """Draws onto a Pillow RGBA image."""

    name = "pil"

    def __init__(self, image: Image.Image, clear_color: Color = (0, 0, 0, 0)):
        """
        Initialize the backend.

        Args:
            image: Target image, converted to RGBA if needed.
            clear_color: Colour every pixel is reset to by clear().
        """
        super().__init__()
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        self._image = image
        self._draw = ImageDraw.Draw(image)
        self._clear_color = clear_color
        self._font_cache: Dict[tuple, ImageFont.ImageFont] = {}

    @classmethod
    def create(cls, width: int, height: int, clear_color: Color = (0, 0, 0, 0)) -> "PilSurface":
        """Create a backend over a new transparent image."""
        return cls(Image.new('RGBA', (width, height), clear_color), clear_color)

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    def get_font(self, style: TextStyle):
        """Get a cached Pillow font for a text style, falling back to the bundled font."""
        cache_key = (style.font_name, style.font_size)
        if cache_key not in self._font_cache:
            candidates = [style.font_name] if style.font_name else DEFAULT_FONT_FILES
            font = None
            for font_name in candidates:
                try:
                    font = ImageFont.truetype(font_name, style.font_size)
                    break
                except OSError:
                    continue
            if font is None:
                logger.debug(f"No TrueType font found for {candidates}, using Pillow default")
                font = ImageFont.load_default(size=style.font_size)
            self._font_cache[cache_key] = font
        return self._font_cache[cache_key]

    def clear(self) -> None:
        self._draw.rectangle([(0, 0), self._image.size], fill=self._clear_color)

    def fill_device_polygon(self, points: Sequence[Point], color: Color,
                            darken: bool = False) -> None:
        if not darken:
            self._draw.polygon(list(points), fill=color)
            return

        box = device_bounds(points, self._image.size)
        if box is None:
            return
        left, top = box[0], box[1]
        region = self._image.crop(box)
        mask = Image.new('L', region.size, 0)
        ImageDraw.Draw(mask).polygon([(x - left, y - top) for x, y in points], fill=255)
        ink = Image.new('RGBA', region.size, tuple(color[:3]) + (255,))
        self._image.paste(ImageChops.darker(region, ink), (left, top), mask)

    def fill_device_circle(self, center: Point, radius: float, color: Color) -> None:
        x, y = center
        self._draw.ellipse([(x - radius, y - radius), (x + radius, y + radius)], fill=color)

    def measure_text(self, text: str, style: TextStyle) -> Tuple[float, float]:
        left, top, right, bottom = self._draw.textbbox((0, 0), text, font=self.get_font(style))
        return right - left, bottom - top

    def blit_text(self, text: str, style: TextStyle, center: Point, angle: float) -> None:
        font = self.get_font(style)
        left, top, right, bottom = self._draw.textbbox((0, 0), text, font=font)
        label = Image.new('RGBA', (max(1, math.ceil(right - left)), max(1, math.ceil(bottom - top))), (0, 0, 0, 0))
        ImageDraw.Draw(label).text((-left, -top), text, font=font, fill=style.color)
        if angle:
            # Pillow rotates counter-clockwise
            label = label.rotate(-math.degrees(angle), resample=Image.BICUBIC, expand=True)
        x = round(center[0] - label.width / 2)
        y = round(center[1] - label.height / 2)
        self._image.paste(label, (x, y), label)

    def save_image(self, path: str) -> None:
        self._image.save(path)
