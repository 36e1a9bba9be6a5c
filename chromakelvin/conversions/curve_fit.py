"""
Kelvin to RGB using Neil Bartlett's curve fit.

Each channel is a regression of the form ``a + b*x + c*ln(x)`` fitted on a
sparse set of black-body samples, with a separate fit below and above the
6500K white point. The fits are suitable for photo manipulation and other
non-critical uses, and are most accurate between 1000K and 30000K.
"""
import math

import numpy as np

from ..types.color_types import RGBTuple, KelvinLike, KelvinArray
from .domain import WHITE_POINT_KELVIN, WHITE_RGB, as_kelvin, clamp_kelvin, np_clamp_kelvin
from .quantize import float_to_uint8, np_float_to_uint8

# (a, b, c, offset) for a + b*x + c*ln(x), x = kelvin/100 - offset
RED_HOT = (351.97690566805693, 0.114206453784165, -40.25366309332127, 55.0)
GREEN_WARM = (-155.25485562709179, -0.44596950469579133, 104.49216199393888, 2.0)
GREEN_HOT = (325.4494125711974, 0.07943456536662342, -28.0852963507957, 50.0)
BLUE_WARM = (-254.76935184120902, 0.8274096064007395, 115.67994401066147, 10.0)

# Below this the blue channel is off.
BLUE_CUTOFF_KELVIN = 2000


def _fit(coeffs, temperature: float) -> float:
    a, b, c, offset = coeffs
    x = temperature - offset
    return a + b * x + c * math.log(x)


def _np_fit(coeffs, temperature: np.ndarray, mask: np.ndarray) -> np.ndarray:
    # Unused lanes get x = 1 so the log stays finite.
    a, b, c, offset = coeffs
    x = np.where(mask, temperature - offset, 1.0)
    return a + b * x + c * np.log(x)


def kelvin_to_rgb(kelvin: KelvinLike) -> RGBTuple:
    """
    Return the RGB representation of a color temperature.

    Temperatures outside [1000K, 40000K] are clamped and a
    KelvinRangeWarning is emitted.

    Args:
        kelvin: Temperature in Kelvin

    Returns:
        (red, green, blue) with 8-bit channels
    """
    kelvin = as_kelvin(kelvin)
    if kelvin == WHITE_POINT_KELVIN:
        return WHITE_RGB
    kelvin = clamp_kelvin(kelvin)
    temperature = kelvin / 100.0

    if kelvin < WHITE_POINT_KELVIN:
        green = float_to_uint8(_fit(GREEN_WARM, temperature))
        blue = 0
        if kelvin > BLUE_CUTOFF_KELVIN:
            blue = float_to_uint8(_fit(BLUE_WARM, temperature))
        return 255, green, blue

    red = float_to_uint8(_fit(RED_HOT, temperature))
    green = float_to_uint8(_fit(GREEN_HOT, temperature))
    return red, green, 255


def np_kelvin_to_rgb(kelvin: KelvinArray) -> np.ndarray:
    """
    Vectorized :func:`kelvin_to_rgb`.

    Args:
        kelvin: Integer array of temperatures, any shape

    Returns:
        uint8 array of shape ``kelvin.shape + (3,)``
    """
    original = np.asarray(kelvin)
    white = original == WHITE_POINT_KELVIN
    kelvin = np_clamp_kelvin(original)
    temperature = kelvin / 100.0
    warm = kelvin < WHITE_POINT_KELVIN
    hot = ~warm
    has_blue = warm & (kelvin > BLUE_CUTOFF_KELVIN)

    red = np.where(warm, 255, np_float_to_uint8(_np_fit(RED_HOT, temperature, hot)))
    green = np.where(
        warm,
        np_float_to_uint8(_np_fit(GREEN_WARM, temperature, warm)),
        np_float_to_uint8(_np_fit(GREEN_HOT, temperature, hot)),
    )
    blue = np.where(
        hot,
        255,
        np.where(has_blue, np_float_to_uint8(_np_fit(BLUE_WARM, temperature, has_blue)), 0),
    )

    rgb = np.stack([red, green, blue], axis=-1).astype(np.uint8)
    rgb[white] = WHITE_RGB
    return rgb
