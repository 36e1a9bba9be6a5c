"""
Temperature domain constants and argument checks shared by the converters.
"""
import warnings
from typing import Tuple

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp

# Curve fits are only meaningful (and their log arguments positive) in here.
MIN_KELVIN = 1000
MAX_KELVIN = 40000

# Hard fit: every forward converter returns pure white here.
WHITE_POINT_KELVIN = 6500
WHITE_RGB: Tuple[int, int, int] = (255, 255, 255)

# The lookup tables stop at 30000K, so the fast converter never reaches it.
FAST_MAX_KELVIN = 29999

# Bracket width at which the inverse search stops.
INVERSE_TOLERANCE = 0.4


class KelvinRangeWarning(UserWarning):
    """Emitted when a temperature outside the supported range is clamped."""


def as_kelvin(kelvin) -> int:
    """Return ``kelvin`` as a plain int, rejecting non-integer input."""
    if isinstance(kelvin, bool) or not isinstance(kelvin, (int, np.integer)):
        raise TypeError(f"kelvin must be an integer, got {type(kelvin).__name__}")
    return int(kelvin)


def as_channel(value, name: str) -> int:
    """Return an 8-bit channel value as a plain int."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in [0, 255], got {value}")
    return int(value)


def clamp_kelvin(kelvin: int, lower: int = MIN_KELVIN, upper: int = MAX_KELVIN, warn: bool = True) -> int:
    """
    Clamp a temperature into ``[lower, upper]``.

    Args:
        kelvin: Temperature in Kelvin
        lower: Smallest accepted temperature
        upper: Largest accepted temperature
        warn: Emit a KelvinRangeWarning when the value had to be clamped

    Returns:
        The clamped temperature
    """
    clamped = int(clamp(kelvin, lower, upper))
    if warn and clamped != kelvin:
        warnings.warn(
            f"{kelvin}K is outside [{lower}K, {upper}K], clamped to {clamped}K",
            KelvinRangeWarning,
            stacklevel=3,
        )
    return clamped


def np_clamp_kelvin(
    kelvin: np.ndarray,
    lower: int = MIN_KELVIN,
    upper: int = MAX_KELVIN,
    warn: bool = True,
) -> np.ndarray:
    """Vectorized :func:`clamp_kelvin`; warns once per call."""
    kelvin = np.asarray(kelvin)
    if kelvin.dtype.kind not in "iu":
        raise TypeError(f"kelvin array must have an integer dtype, got {kelvin.dtype}")
    kelvin = kelvin.astype(np.int64)
    np_clamp = bound_type_to_np_function[BoundType.CLAMP]
    clamped = np.asarray(np_clamp(kelvin, lower, upper)).astype(np.int64)
    if warn and np.any(clamped != kelvin):
        count = int(np.count_nonzero(clamped != kelvin))
        warnings.warn(
            f"{count} temperature(s) outside [{lower}K, {upper}K] were clamped",
            KelvinRangeWarning,
            stacklevel=3,
        )
    return clamped
