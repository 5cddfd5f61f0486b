# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
# BounceClock - Analog Clock Face with Bouncing Hands
"""
BounceClock renders an analog clock face whose hands overshoot and settle
on every tick, like the hands of a mechanical watch.
"""

__version__ = "1.0.0"
__author__ = "BounceClock"
