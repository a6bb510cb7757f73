"""
Pytest configuration for the decoder wheel.

Pins batched decoding to the CPU so tests behave the same on machines with
and without a GPU. After each test, forgets the resolved device and removes
the CLI's log handler.
"""

import logging
import os

import pytest

# Must be set before utils.device is imported.
os.environ.setdefault("DECODER_WHEEL_DEVICE", "cpu")


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    yield
    from utils.device import reset_device
    from utils.logging_setup import HANDLER_MARKER

    reset_device()

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, HANDLER_MARKER, False):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
