"""
Quantization of continuous channel intensities and temperatures.

Both helpers round with ``ceil(x + 0.5)``, which biases results upward by
half a step compared to ordinary rounding. Reference outputs depend on it.
"""
import math

import numpy as np


def float_to_uint8(x: float) -> int:
    """Map a real value to an 8-bit channel intensity."""
    if x >= 254.4:
        return 255
    if x <= 0.0 or math.isnan(x):
        return 0
    return int(math.ceil(x + 0.5))


def float_to_uint16(x: float) -> int:
    """Map a real value to a 16-bit unsigned integer (used for Kelvin)."""
    if x >= 65534.4:
        return 65535
    if x <= 0.0 or math.isnan(x):
        return 0
    return int(math.ceil(x + 0.5))


def _np_quantize(x: np.ndarray, upper: float, maxval: int, dtype) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    rounded = np.ceil(np.clip(x, 0.0, upper) + 0.5)
    rounded = np.where(x >= upper, maxval, rounded)
    rounded = np.where((x <= 0.0) | np.isnan(x), 0, rounded)
    return rounded.astype(dtype)


def np_float_to_uint8(x: np.ndarray) -> np.ndarray:
    """Vectorized :func:`float_to_uint8`."""
    return _np_quantize(x, 254.4, 255, np.uint8)


def np_float_to_uint16(x: np.ndarray) -> np.ndarray:
    """Vectorized :func:`float_to_uint16`."""
    return _np_quantize(x, 65534.4, 65535, np.uint16)
