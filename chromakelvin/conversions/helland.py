"""
Kelvin to RGB using Tanner Helland's original algorithm.

http://www.tannerhelland.com/4435/convert-temperature-rgb-algorithm-code/

It is slower than the curve fit in :mod:`.curve_fit` and less accurate near
the reference table; it is kept for comparison.
"""
import math

import numpy as np

from ..types.color_types import RGBTuple, KelvinLike, KelvinArray
from .domain import WHITE_POINT_KELVIN, WHITE_RGB, as_kelvin, clamp_kelvin, np_clamp_kelvin
from .quantize import float_to_uint8, np_float_to_uint8

BLUE_CUTOFF_KELVIN = 1900


def kelvin_to_rgb_helland(kelvin: KelvinLike) -> RGBTuple:
    """Return the RGB representation of a color temperature (Helland fit)."""
    kelvin = as_kelvin(kelvin)
    if kelvin == WHITE_POINT_KELVIN:
        return WHITE_RGB
    kelvin = clamp_kelvin(kelvin)
    temperature = kelvin * 0.01

    if kelvin < WHITE_POINT_KELVIN:
        green = float_to_uint8(99.4708025861 * math.log(temperature) - 161.1195681661)
        blue = 0
        if kelvin > BLUE_CUTOFF_KELVIN:
            blue = float_to_uint8(138.5177312231 * math.log(temperature - 10) - 305.0447927307)
        return 255, green, blue

    red = float_to_uint8(329.698727446 * math.pow(temperature - 60.0, -0.1332047592))
    green = float_to_uint8(288.1221695283 * math.pow(temperature - 60.0, -0.0755148492))
    return red, green, 255


def np_kelvin_to_rgb_helland(kelvin: KelvinArray) -> np.ndarray:
    """Vectorized :func:`kelvin_to_rgb_helland`."""
    original = np.asarray(kelvin)
    white = original == WHITE_POINT_KELVIN
    kelvin = np_clamp_kelvin(original)
    temperature = kelvin * 0.01
    warm = kelvin < WHITE_POINT_KELVIN
    has_blue = warm & (kelvin > BLUE_CUTOFF_KELVIN)

    hot_x = np.where(warm, 1.0, temperature - 60.0)
    blue_x = np.where(has_blue, temperature - 10.0, 1.0)

    red = np.where(warm, 255, np_float_to_uint8(329.698727446 * np.power(hot_x, -0.1332047592)))
    green = np.where(
        warm,
        np_float_to_uint8(99.4708025861 * np.log(temperature) - 161.1195681661),
        np_float_to_uint8(288.1221695283 * np.power(hot_x, -0.0755148492)),
    )
    blue = np.where(
        warm,
        np.where(has_blue, np_float_to_uint8(138.5177312231 * np.log(blue_x) - 305.0447927307), 0),
        255,
    )

    rgb = np.stack([red, green, blue], axis=-1).astype(np.uint8)
    rgb[white] = WHITE_RGB
    return rgb
