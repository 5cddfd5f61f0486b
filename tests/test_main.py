# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""
Tests for the command-line entry point.
"""

import argparse
import logging

import pytest
import yaml
from PIL import Image

from bounceclock import __version__
from bounceclock.config import load_config
from bounceclock.main import build_parser, main, parse_time, render_snapshot, setup_file_logging


@pytest.fixture(autouse=True)
def no_default_config(monkeypatch):
    """Keep config files on the test machine out of the way."""
    monkeypatch.setattr("bounceclock.config.DEFAULT_CONFIG_PATHS", [])


class TestParseTime:
    def test_whole_seconds(self):
        parsed = parse_time("03:04:05")
        assert (parsed.hour, parsed.minute, parsed.second, parsed.microsecond) == (3, 4, 5, 0)

    def test_fraction(self):
        parsed = parse_time("23:59:58.137")
        assert (parsed.hour, parsed.second, parsed.microsecond) == (23, 58, 137000)

    @pytest.mark.parametrize("value", ["3pm", "25:00:00", "12:00"])
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_time(value)


class TestArguments:
    def test_hour_format_flags(self):
        parser = build_parser()
        assert parser.parse_args(['--24h']).hour_format == '24h'
        assert parser.parse_args(['--12h']).hour_format == '12h'
        assert parser.parse_args([]).hour_format is None

    def test_hour_formats_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--24h', '--12h'])


class TestMain:
    """Test the entry point end to end."""

    def test_version(self, capsys):
        assert main(['--version']) == 0
        assert __version__ in capsys.readouterr().out

    def test_snapshot(self, temp_dir):
        """--snapshot writes a square image of the configured size."""
        output = temp_dir / "face.png"

        assert main(['--snapshot', str(output), '--time', '03:00:00.900', '--size', '160']) == 0

        with Image.open(output) as image:
            assert image.size == (160, 160)
            # Hour hand points right at three o'clock
            assert image.getpixel((110, 80))[:3] == (0, 0, 0)

    def test_snapshot_uses_config(self, temp_dir):
        """Colours and size come from the config file."""
        config_path = temp_dir / "config.yaml"
        with open(config_path, 'w') as f:
            yaml.dump({"hour_format": "24h", "face": {"size": 100, "background_color": [0, 128, 0]}}, f)
        output = temp_dir / "face.png"

        assert main(['-c', str(config_path), '--snapshot', str(output), '--time', '06:00:00.900']) == 0

        with Image.open(output) as image:
            assert image.size == (100, 100)
            assert image.getpixel((50, 70))[:3] == (0, 128, 0)

    def test_snapshot_pygame_backend(self, temp_dir):
        """The pygame backend renders the same face off-screen."""
        output = temp_dir / "face.png"

        assert main(['--snapshot', str(output), '--backend', 'pygame',
                     '--time', '03:00:00.900', '--size', '160']) == 0

        with Image.open(output) as image:
            assert image.size == (160, 160)
            assert image.getpixel((110, 80))[:3] == (0, 0, 0)
            assert image.getpixel((80, 110))[:3] == (0xff, 0xd3, 0x45)

    def test_unknown_backend_falls_back(self, temp_dir, caplog):
        """An unknown backend name is logged and the Pillow backend is used."""
        output = temp_dir / "face.png"
        config = load_config(None)
        config.face.size = 64

        with caplog.at_level(logging.WARNING):
            render_snapshot(config, parse_time("03:00:00.900"), str(output), backend="svg")

        assert "Unknown drawing backend 'svg'" in caplog.text
        with Image.open(output) as image:
            assert image.size == (64, 64)

    def test_write_config(self, temp_dir):
        """--write-config saves the settings after command-line overrides."""
        output = temp_dir / "conf" / "config.yaml"

        assert main(['--24h', '--size', '300', '--write-config', str(output)]) == 0

        with open(output) as f:
            data = yaml.safe_load(f)
        assert data["hour_format"] == "24h"
        assert data["face"]["size"] == 300
        assert "config_path" not in data

        reloaded = load_config(str(output))
        assert reloaded.is_24_hour
        assert reloaded.face.size == 300

    def test_write_config_rejects_invalid(self, temp_dir):
        """Invalid settings are not written."""
        output = temp_dir / "config.yaml"
        assert main(['--size', '-5', '--write-config', str(output)]) == 1
        assert not output.exists()

    def test_invalid_config_fails(self, temp_dir):
        """Invalid settings are reported and exit with status 1."""
        assert main(['--size', '0', '--snapshot', str(temp_dir / "x.png")]) == 1
        assert not (temp_dir / "x.png").exists()

    def test_file_logging(self, temp_dir):
        root = logging.getLogger()
        handlers = list(root.handlers)
        try:
            setup_file_logging(str(temp_dir / "logs"))
            assert (temp_dir / "logs" / "bounceclock.log").exists()
        finally:
            for handler in root.handlers[len(handlers):]:
                handler.close()
                root.removeHandler(handler)
