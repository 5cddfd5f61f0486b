# Copyright (c) 2025 Luc Vincent. All Rights Reserved.
"""Exceptions raised by BounceClock."""


class InvalidInputError(ValueError):
    """Raised when a caller passes a time, region or style the clock cannot draw."""
