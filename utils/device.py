"""
Device management utilities for PyTorch.

Picks the device batched decoding runs on: the DECODER_WHEEL_DEVICE
environment variable if set, otherwise CUDA (NVIDIA), then MPS (Apple
Silicon), then CPU.
"""

import logging
import os
from typing import Optional

import numpy as np
import torch

logger = logging.getLogger(__name__)

DEVICE_ENV_VAR = "DECODER_WHEEL_DEVICE"


# (device, name) once resolved; see get_device()
_detected: Optional[tuple[torch.device, str]] = None


def parse_device(name: str) -> torch.device:
    """
    Turn a device string into a torch.device.

    Args:
        name: Device string (e.g., "cpu", "cuda:0", "mps")

    Returns:
        torch.device

    Raises:
        ValueError: If torch does not recognize the string
    """
    try:
        return torch.device(name)
    except RuntimeError as exc:
        raise ValueError(f"Invalid device {name!r}: {exc}") from exc


def _detect_device() -> tuple[torch.device, str]:
    """Resolve the default device and a human-readable name for it."""
    forced = os.environ.get(DEVICE_ENV_VAR)
    if forced:
        try:
            device = torch.device(forced)
        except RuntimeError as exc:
            raise ValueError(f"Invalid {DEVICE_ENV_VAR}: {forced!r}") from exc
        return device, device.type.upper()

    if torch.cuda.is_available():
        return torch.device("cuda"), "CUDA"
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return torch.device("mps"), "MPS (Apple Silicon)"
    return torch.device("cpu"), "CPU"


def get_device() -> torch.device:
    """
    Get the default compute device, resolving it on first use.

    Returns:
        torch.device: DECODER_WHEEL_DEVICE if set, else best available (CUDA > MPS > CPU)

    Raises:
        ValueError: If DECODER_WHEEL_DEVICE is not a valid device string
    """
    global _detected
    if _detected is None:
        _detected = _detect_device()
        logger.debug("Using device %s", _detected[1])
    return _detected[0]


def get_device_name() -> str:
    """
    Get human-readable device name.

    Returns:
        str: Device name (e.g., "CUDA", "MPS (Apple Silicon)", "CPU")
    """
    get_device()
    return _detected[1]


def reset_device() -> None:
    """Forget the resolved device so the next get_device() looks again."""
    global _detected
    _detected = None


def to_numpy(tensor: torch.Tensor) -> np.ndarray:
    """
    Convert PyTorch tensor to NumPy array.

    Handles device transfers (GPU -> CPU) automatically.

    Args:
        tensor: PyTorch tensor

    Returns:
        NumPy array
    """
    return tensor.detach().cpu().numpy()

