#!/usr/bin/env python3
# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""Debug script to visualize one bounce of the hands as a strip of frames."""

import argparse
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from PIL import Image, ImageDraw

from bounceclock.face import FaceRenderer, TextStyle
from bounceclock.face.surfaces import PilSurface
from bounceclock.frame import build_frame


def render_strip(start: datetime, frames: int, step_ms: int, size: int,
                 is_24_hour: bool, output_path: str) -> str:
    """
    Render consecutive frames side by side, each labelled with its progress.

    Args:
        start: Time of the first frame.
        frames: Number of frames.
        step_ms: Time between frames in milliseconds.
        size: Side of each frame in pixels.
        is_24_hour: Use the 24-hour face.
        output_path: Where to save the strip.
    """
    label_height = 20
    strip = Image.new('RGBA', (size * frames, size + label_height), (255, 255, 255, 255))
    draw = ImageDraw.Draw(strip)
    renderer = FaceRenderer()
    style = TextStyle(font_size=max(8, size // 12))

    for i in range(frames):
        now = start + timedelta(milliseconds=i * step_ms)
        frame = build_frame(now, is_24_hour)

        surface = PilSurface.create(size, size)
        renderer.paint(surface, frame.angles, frame.divisions, style)
        strip.paste(surface.image, (i * size, 0), surface.image)

        label = f"t={frame.progress:.2f} b={frame.bounce_value:+.3f}"
        draw.text((i * size + 4, size + 4), label, fill='black')
        print(f"Frame {i}: {now.strftime('%H:%M:%S.%f')[:-3]} progress={frame.progress:.3f} "
              f"bounce={frame.bounce_value:.4f} second_angle={frame.angles.second:.4f}")

    strip.save(output_path)
    print(f"\nSaved strip to: {output_path}")
    return output_path


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('output', nargs='?', default='bounce_strip.png')
    parser.add_argument('--frames', type=int, default=10)
    parser.add_argument('--step-ms', type=int, default=30)
    parser.add_argument('--size', type=int, default=160)
    parser.add_argument('--24h', dest='is_24_hour', action='store_true')
    args = parser.parse_args()

    # Start on a minute boundary so both the minute and second hands bounce
    start = datetime.now().replace(second=0, microsecond=0)
    render_strip(start, args.frames, args.step_ms, args.size, args.is_24_hour, args.output)
