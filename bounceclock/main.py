#!/usr/bin/env python3
# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""
BounceClock - Main Application.
Opens the clock window, or renders a single frame to an image file.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Initialize logging early
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)


def setup_file_logging(log_dir: str) -> None:
    """Set up file logging in addition to console."""
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_path / 'bounceclock.log')
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    logging.getLogger().addHandler(file_handler)


def parse_time(value: str) -> datetime:
    """Parse HH:MM:SS or HH:MM:SS.ffffff into a datetime for today."""
    for fmt in ("%H:%M:%S.%f", "%H:%M:%S"):
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return datetime.combine(datetime.now().date(), parsed.time())
    raise argparse.ArgumentTypeError(f"Invalid time '{value}', expected HH:MM:SS[.ffffff]")


def render_snapshot(config, now: datetime, output_path: str, backend: str = 'pil') -> str:
    """
    Render one frame off-screen and save it.

    Args:
        config: Clock configuration.
        now: Moment to draw.
        output_path: Image file to write; the format follows the extension.
        backend: Name of the drawing backend in SURFACES.

    Returns:
        Path the image was written to.
    """
    from .display import text_style_from_config
    from .face import FaceRenderer
    from .face.surfaces import SURFACES
    from .frame import build_frame

    surface_class = SURFACES.get(backend)
    if surface_class is None:
        logger.warning(f"Unknown drawing backend '{backend}', using pil")
        surface_class = SURFACES['pil']

    frame = build_frame(now, config.is_24_hour, config.animation.bounce_duration_ms)
    surface = surface_class.create(config.face.size, config.face.size)
    renderer = FaceRenderer(
        background_color=config.face.background_color,
        ink_color=config.face.ink_color,
    )
    renderer.paint(surface, frame.angles, frame.divisions, text_style_from_config(config))
    surface.save_image(output_path)
    logger.info(f"Saved {now.strftime('%H:%M:%S.%f')} snapshot to {output_path} ({surface_class.name})")
    return output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="BounceClock - analog clock with bouncing hands",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '-c', '--config',
        help='Path to configuration file'
    )

    hour_format = parser.add_mutually_exclusive_group()
    hour_format.add_argument(
        '--24h',
        dest='hour_format',
        action='store_const',
        const='24h',
        help='Lay the face out over 24 hours'
    )
    hour_format.add_argument(
        '--12h',
        dest='hour_format',
        action='store_const',
        const='12h',
        help='Lay the face out over 12 hours'
    )

    parser.add_argument(
        '--size',
        type=int,
        help='Side of the clock face in pixels'
    )

    parser.add_argument(
        '--snapshot',
        metavar='PATH',
        help='Render a single frame to an image file and exit'
    )

    parser.add_argument(
        '--time',
        type=parse_time,
        help='Time to draw in the snapshot (HH:MM:SS[.ffffff], default now)'
    )

    parser.add_argument(
        '--backend',
        default='pil',
        help='Drawing backend used for the snapshot (pil or pygame)'
    )

    parser.add_argument(
        '--write-config',
        metavar='PATH',
        help='Save the effective configuration to a YAML file and exit'
    )

    parser.add_argument(
        '--log-dir',
        help='Also write logs to this directory'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--version',
        action='store_true',
        help='Show version and exit'
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        from . import __version__
        print(f"BounceClock {__version__}")
        return 0

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.log_dir:
        setup_file_logging(args.log_dir)

    from .config import load_config, save_config, validate_config

    config = load_config(args.config)
    if args.hour_format:
        config.hour_format = args.hour_format
    if args.size is not None:
        config.face.size = args.size

    errors = validate_config(config)
    if errors:
        for error in errors:
            logger.error(f"Config error: {error}")
        return 1

    if args.write_config:
        save_config(config, args.write_config)
        return 0

    if args.snapshot:
        render_snapshot(config, args.time or datetime.now(), args.snapshot, args.backend)
        return 0

    if args.time:
        logger.warning("--time only applies to --snapshot, ignoring it")

    from .display import ClockWindow

    ClockWindow(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
