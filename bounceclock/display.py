# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""
Window that shows the clock face.
Drives the per-frame pipeline and repaints the face with pygame.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

import pygame

from .config import ClockConfig
from .face import FaceRenderer, TextStyle
from .face.surfaces import PygameSurface
from .frame import ClockFrame, build_frame

logger = logging.getLogger(__name__)


def text_style_from_config(config: ClockConfig) -> TextStyle:
    """Build the numeral text style from the text section of the config."""
    return TextStyle(
        font_name=config.text.font_name,
        font_size=config.text.font_size,
        color=tuple(config.text.color),
    )


def face_rect(width: int, height: int) -> Tuple[int, int, int, int]:
    """Largest square centred in a window of the given size, as (x, y, side, side)."""
    side = max(0, min(width, height))
    return ((width - side) // 2, (height - side) // 2, side, side)


class ClockWindow:
    """
    Resizable pygame window running the clock animation.

    Each frame samples the time, computes the hand angles and repaints the
    face in the largest square that fits the window.
    """

    def __init__(self, config: ClockConfig, now_fn: Callable[[], datetime] = datetime.now):
        """
        Initialize the window.

        Args:
            config: Clock configuration.
            now_fn: Source of the current time.
        """
        self.config = config
        self._now = now_fn

        pygame.init()
        pygame.display.set_caption("BounceClock")
        size = config.face.size
        self.screen = pygame.display.set_mode((size, size), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        self._renderer = FaceRenderer(
            background_color=config.face.background_color,
            ink_color=config.face.ink_color,
        )
        self._text_style = text_style_from_config(config)
        self._window_color = tuple(config.face.window_color)
        self._font_cache: dict = {}

        logger.info(f"Clock window opened at {size}x{size}, "
                    f"{config.hour_format}, {config.animation.fps} fps")

    def handle_events(self) -> list:
        """Process pygame events."""
        events = []

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events.append("quit")
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                events.append("quit")
            elif event.type == pygame.VIDEORESIZE:
                logger.debug(f"Window resized to {event.w}x{event.h}")
                events.append("resize")

        return events

    def render(self, frame: ClockFrame) -> None:
        """Repaint the whole window for one frame."""
        self.screen.fill(self._window_color)
        rect = face_rect(*self.screen.get_size())
        surface = PygameSurface(self.screen.subsurface(rect), clear_color=self._window_color,
                                font_cache=self._font_cache)
        self._renderer.paint(surface, frame.angles, frame.divisions, self._text_style)

    def update(self) -> bool:
        """
        Update the display for the current frame.

        Returns:
            True to continue running, False to quit.
        """
        events = self.handle_events()
        if "quit" in events:
            return False

        frame = build_frame(
            self._now(),
            self.config.is_24_hour,
            self.config.animation.bounce_duration_ms,
        )
        self.render(frame)
        pygame.display.flip()
        self.clock.tick(self.config.animation.fps)
        return True

    def run(self, max_frames: Optional[int] = None) -> None:
        """Run the animation loop until the window is closed."""
        frames = 0
        try:
            while self.update():
                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break
        finally:
            self.cleanup()
        logger.info(f"Clock window closed after {frames} frames")

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
