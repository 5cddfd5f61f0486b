# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""
Configuration management for BounceClock.
Handles loading, validation, and defaults for all settings.
"""

import os
import yaml
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
import logging

from .curves import HAND_BOUNCE_DURATION_MS

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_CONFIG_PATHS = [
    os.path.expanduser("~/.config/bounceclock/config.yaml"),
    "./config.yaml",
]

VALID_HOUR_FORMATS = ['12h', '24h']


@dataclass
class FaceConfig:
    """Clock face settings."""
    size: int = 480  # side of the square window, in pixels
    background_color: List[int] = field(default_factory=lambda: [255, 211, 69])
    ink_color: List[int] = field(default_factory=lambda: [0, 0, 0])
    # Colour around the disc [R, G, B]
    window_color: List[int] = field(default_factory=lambda: [0, 0, 0])


@dataclass
class TextConfig:
    """Numeral text style."""
    font_name: Optional[str] = None  # None for the system default
    font_size: int = 24
    color: List[int] = field(default_factory=lambda: [0, 0, 0])


@dataclass
class AnimationConfig:
    """Animation settings."""
    fps: int = 60
    bounce_duration_ms: int = HAND_BOUNCE_DURATION_MS


@dataclass
class ClockConfig:
    """Main configuration class."""
    hour_format: str = "12h"  # 12h, 24h
    face: FaceConfig = field(default_factory=FaceConfig)
    text: TextConfig = field(default_factory=TextConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)

    # Runtime state (not persisted)
    config_path: Optional[str] = None

    @property
    def is_24_hour(self) -> bool:
        return self.hour_format == '24h'


def _dict_to_dataclass(data: Dict[str, Any], cls: type) -> Any:
    """Convert a dictionary to a dataclass instance, handling nested dataclasses."""
    if data is None:
        return cls()

    field_types = {f.name: f.type for f in cls.__dataclass_fields__.values()}
    kwargs = {}

    for key, value in data.items():
        if key not in field_types:
            logger.debug(f"Ignoring unknown config key '{key}' for {cls.__name__}")
            continue

        field_type = field_types[key]

        # Handle nested dataclasses
        if hasattr(field_type, '__dataclass_fields__'):
            kwargs[key] = _dict_to_dataclass(value, field_type)
        else:
            kwargs[key] = value

    return cls(**kwargs)


def load_config(config_path: Optional[str] = None) -> ClockConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file. If None, searches default locations.

    Returns:
        ClockConfig instance with loaded or default values.
    """
    # Find config file
    if config_path:
        paths_to_try = [config_path]
    else:
        paths_to_try = DEFAULT_CONFIG_PATHS

    config_data = {}
    found_path = None

    for path in paths_to_try:
        expanded_path = os.path.expanduser(path)
        if os.path.exists(expanded_path):
            try:
                with open(expanded_path, 'r') as f:
                    config_data = yaml.safe_load(f) or {}
                found_path = expanded_path
                logger.info(f"Loaded config from {expanded_path}")
                break
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {expanded_path}: {e}")

    if not found_path:
        logger.info("No config file found, using defaults")

    return ClockConfig(
        hour_format=str(config_data.get('hour_format', '12h')),
        face=_dict_to_dataclass(config_data.get('face'), FaceConfig),
        text=_dict_to_dataclass(config_data.get('text'), TextConfig),
        animation=_dict_to_dataclass(config_data.get('animation'), AnimationConfig),
        config_path=found_path,
    )


def save_config(config: ClockConfig, config_path: Optional[str] = None) -> str:
    """
    Save configuration to a YAML file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.

    Returns:
        Path where config was saved.
    """
    if config_path is None:
        config_path = config.config_path or DEFAULT_CONFIG_PATHS[0]

    config_path = os.path.expanduser(config_path)

    # Ensure directory exists
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    data = config_to_dict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved config to {config_path}")
    return config_path


def config_to_dict(config: ClockConfig) -> Dict[str, Any]:
    """Convert config to dictionary for serialization."""
    def dataclass_to_dict(obj: Any) -> Any:
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                if field_name == 'config_path':
                    continue  # Skip runtime state
                value = getattr(obj, field_name)
                result[field_name] = dataclass_to_dict(value)
            return result
        elif isinstance(obj, list):
            return [dataclass_to_dict(item) for item in obj]
        else:
            return obj

    return dataclass_to_dict(config)


def _is_color(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) in (3, 4)
        and all(isinstance(c, int) and 0 <= c <= 255 for c in value)
    )


def validate_config(config: ClockConfig) -> List[str]:
    """
    Validate configuration and return list of errors.

    Returns:
        List of error messages. Empty if valid.
    """
    errors = []

    if config.hour_format not in VALID_HOUR_FORMATS:
        errors.append(f"Hour format must be one of: {VALID_HOUR_FORMATS}")

    # Check face settings
    if config.face.size < 1:
        errors.append("Face size must be at least 1 pixel")

    for name in ('background_color', 'ink_color', 'window_color'):
        if not _is_color(getattr(config.face, name)):
            errors.append(f"Face {name} must be [R, G, B] or [R, G, B, A] with values 0-255")

    # Check text settings
    if config.text.font_size < 1:
        errors.append("Text font_size must be at least 1")

    if not _is_color(config.text.color):
        errors.append("Text color must be [R, G, B] or [R, G, B, A] with values 0-255")

    # Check animation settings
    if not (1 <= config.animation.fps <= 240):
        errors.append("Animation fps must be between 1 and 240")

    if not (0 < config.animation.bounce_duration_ms <= 1000):
        errors.append("Animation bounce_duration_ms must be between 1 and 1000")

    return errors
