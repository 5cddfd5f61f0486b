# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""Drawing surface backends."""

from .base import DrawingSurface, StrokeCap, TextStyle
from .pil_surface import PilSurface
from .pygame_surface import PygameSurface

# Registry of available drawing backends
SURFACES = {
    'pil': PilSurface,
    'pygame': PygameSurface,
}

__all__ = [
    'DrawingSurface',
    'StrokeCap',
    'TextStyle',
    'PilSurface',
    'PygameSurface',
    'SURFACES',
]
