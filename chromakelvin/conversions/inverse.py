"""
RGB to Kelvin by bisection over the curve fit.

The blue/red ratio produced by :func:`kelvin_to_rgb` never decreases as the
temperature rises, so the temperature whose ratio first reaches the input's
can be bracketed. Green does not take part in the comparison.
"""
import numpy as np

from ..types.color_types import colors_to_array
from .curve_fit import kelvin_to_rgb, np_kelvin_to_rgb
from .domain import INVERSE_TOLERANCE, MAX_KELVIN, MIN_KELVIN, as_channel, clamp_kelvin, np_clamp_kelvin
from .quantize import float_to_uint16, np_float_to_uint16


def rgb_to_kelvin(r: int, g: int, b: int) -> int:
    """
    Return the color temperature closest to an RGB color.

    The search narrows [1000K, 40000K] until the bracket is at most 0.4K
    wide, which takes 17 steps. A color without red has no defined
    blue/red ratio and saturates to 40000K.

    Args:
        r: Red channel in [0, 255]
        g: Green channel in [0, 255], validated but unused
        b: Blue channel in [0, 255]

    Returns:
        Temperature in Kelvin
    """
    r = as_channel(r, "r")
    as_channel(g, "g")
    b = as_channel(b, "b")
    if r == 0:
        return MAX_KELVIN

    target = np.float32(b) / np.float32(r)
    lower, upper = float(MIN_KELVIN), float(MAX_KELVIN)
    temperature = 0.0
    while upper - lower > INVERSE_TOLERANCE:
        temperature = (upper + lower) * 0.5
        # Rounding up can step one past 40000K near the top of the range.
        red, _, blue = kelvin_to_rgb(clamp_kelvin(float_to_uint16(temperature), warn=False))
        if np.float32(blue) / np.float32(red) >= target:
            upper = temperature
        else:
            lower = temperature
    return float_to_uint16(temperature)


def np_rgb_to_kelvin(colors) -> np.ndarray:
    """
    Vectorized :func:`rgb_to_kelvin`.

    Args:
        colors: Integer array of shape (..., 3)

    Returns:
        uint16 array of shape ``colors.shape[:-1]``
    """
    colors = colors_to_array(colors, dtype=None)
    if colors.dtype.kind not in "iu":
        raise TypeError(f"colors must have an integer dtype, got {colors.dtype}")
    colors = colors.astype(np.int64)
    if np.any((colors < 0) | (colors > 255)):
        raise ValueError("Color channels must be in [0, 255]")
    red = colors[..., 0].astype(np.float32)
    blue = colors[..., 2].astype(np.float32)
    no_red = red == 0
    target = blue / np.where(no_red, np.float32(1), red)

    shape = colors.shape[:-1]
    lower = np.full(shape, float(MIN_KELVIN))
    upper = np.full(shape, float(MAX_KELVIN))
    temperature = np.zeros(shape)
    active = upper - lower > INVERSE_TOLERANCE
    while np.any(active):
        temperature = np.where(active, (upper + lower) * 0.5, temperature)
        produced = np_kelvin_to_rgb(np_clamp_kelvin(np_float_to_uint16(temperature), warn=False))
        ratio = produced[..., 2].astype(np.float32) / produced[..., 0].astype(np.float32)
        above = ratio >= target
        upper = np.where(active & above, temperature, upper)
        lower = np.where(active & ~above, temperature, lower)
        active = upper - lower > INVERSE_TOLERANCE

    kelvin = np_float_to_uint16(temperature)
    kelvin[no_red] = MAX_KELVIN
    return kelvin
