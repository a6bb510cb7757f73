"""
Utility functions for the decoder wheel.
"""

from utils.device import (
    get_device,
    get_device_name,
    to_numpy,
    parse_device,
    reset_device,
    DEVICE_ENV_VAR
)
from utils.logging_setup import configure_logging

__all__ = [
    "get_device",
    "get_device_name",
    "to_numpy",
    "parse_device",
    "reset_device",
    "DEVICE_ENV_VAR",
    "configure_logging",
]
