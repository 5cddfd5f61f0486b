# Copyright (c) 2025-2026 Luc Vincent. All Rights Reserved.
"""
Pytest configuration and shared fixtures for BounceClock tests.
"""

import math
import tempfile
from pathlib import Path

import pytest

from bounceclock.face.surfaces.base import DrawingSurface


class RecordingSurface(DrawingSurface):
    """Drawing surface that records every call in device coordinates."""

    name = "recording"

    def __init__(self, width=200, height=200):
        super().__init__()
        self._size = (width, height)
        self.calls = []
        self.darkened = []

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]

    # High-level shapes, recorded before being broken into primitives

    def fill_rect(self, center, width, height, color, darken=False):
        self.calls.append(('rect', self.to_device(center), width, height, self.rotation, color))
        super().fill_rect(center, width, height, color, darken)

    def draw_line(self, start, end, width, cap, color):
        self.calls.append(('line', self.to_device(start), self.to_device(end), width, cap, color))
        super().draw_line(start, end, width, cap, color)

    # Device primitives

    @property
    def size(self):
        return self._size

    def clear(self):
        self.calls.append(('clear',))

    def fill_device_polygon(self, points, color, darken=False):
        self.calls.append(('polygon', list(points), color))
        if darken:
            self.darkened.append(list(points))

    def fill_device_circle(self, center, radius, color):
        self.calls.append(('circle', center, radius, color))

    def measure_text(self, text, style):
        return (6 * len(text), 10)

    def blit_text(self, text, style, center, angle):
        self.calls.append(('text', text, center, angle))

    def save_image(self, path):
        self.calls.append(('save_image', path))


def polygon_area(points):
    """Shoelace area of a polygon."""
    area = 0.0
    for (x0, y0), (x1, y1) in zip(points, points[1:] + points[:1]):
        area += x0 * y1 - x1 * y0
    return abs(area) / 2


def clockwise_from_top(point, center):
    """Clockwise angle of a device point around a centre, 0 at 12 o'clock, in [0, 2pi)."""
    dx, dy = point[0] - center[0], point[1] - center[1]
    return (math.atan2(dy, dx) + math.pi / 2) % (math.pi * 2)


@pytest.fixture
def recording_surface():
    """A 200x200 recording surface."""
    return RecordingSurface(200, 200)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_dict():
    """Return a minimal valid config dictionary."""
    return {
        "hour_format": "24h",
        "face": {
            "size": 320,
            "background_color": [255, 211, 69],
            "ink_color": [0, 0, 0],
            "window_color": [20, 20, 20]
        },
        "text": {
            "font_name": None,
            "font_size": 18,
            "color": [0, 0, 0]
        },
        "animation": {
            "fps": 30,
            "bounce_duration_ms": 274
        }
    }


@pytest.fixture
def sample_config_yaml(temp_dir, sample_config_dict):
    """Create a temporary config.yaml file."""
    import yaml
    config_path = temp_dir / "config.yaml"
    with open(config_path, 'w') as f:
        yaml.dump(sample_config_dict, f)
    return config_path
