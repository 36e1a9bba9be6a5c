"""
Kelvin to RGB using lookup tables and integer linear interpolation.

The tables sample the black-body reference (vendian.org, D65) every 200K.
Conversion uses integer arithmetic only, trading accuracy for speed. The
supported range is [1000K, 29999K]; temperatures outside it are clamped.
"""
import numpy as np

from ..types.color_types import RGBTuple, KelvinLike, KelvinArray
from .domain import (
    FAST_MAX_KELVIN,
    MIN_KELVIN,
    WHITE_POINT_KELVIN,
    WHITE_RGB,
    as_kelvin,
    clamp_kelvin,
    np_clamp_kelvin,
)

LOOKUP_STEP = 200

LOOKUP_RED_START = 6400

LOOKUP_RED = (
    0xFF,  # 6400K
    0xFE,  # 6600K
    0xF9,  # 6800K
    0xF5,  # 7000K
    0xF0,  # 7200K
    0xED,  # 7400K
    0xE9,  # 7600K
    0xE6,  # 7800K
    0xE3,  # 8000K
    0xE0,  # 8200K
    0xDD,  # 8400K
    0xDA,  # 8600K
    0xD8,  # 8800K
    0xD6,  # 9000K
    0xD3,  # 9200K
    0xD1,  # 9400K
    0xCF,  # 9600K
    0xCE,  # 9800K
    0xCC,  # 10000K
    0xCA,  # 10200K
    0xC9,  # 10400K
    0xC7,  # 10600K
    0xC6,  # 10800K
    0xC4,  # 11000K
    0xC3,  # 11200K
    0xC2,  # 11400K
    0xC1,  # 11600K
    0xC0,  # 11800K
    0xBF,  # 12000K
    0xBE,  # 12200K
    0xBD,  # 12400K
    0xBC,  # 12600K
    0xBB,  # 12800K
    0xBA,  # 13000K
    0xB9,  # 13200K
    0xB8,  # 13400K
    0xB7,  # 13600K
    0xB7,  # 13800K
    0xB6,  # 14000K
    0xB5,  # 14200K
    0xB5,  # 14400K
    0xB4,  # 14600K
    0xB3,  # 14800K
    0xB3,  # 15000K
    0xB2,  # 15200K
    0xB2,  # 15400K
    0xB1,  # 15600K
    0xB1,  # 15800K
    0xB0,  # 16000K
    0xAF,  # 16200K
    0xAF,  # 16400K
    0xAF,  # 16600K
    0xAE,  # 16800K
    0xAE,  # 17000K
    0xAD,  # 17200K
    0xAD,  # 17400K
    0xAC,  # 17600K
    0xAC,  # 17800K
    0xAC,  # 18000K
    0xAB,  # 18200K
    0xAB,  # 18400K
    0xAA,  # 18600K
    0xAA,  # 18800K
    0xAA,  # 19000K
    0xA9,  # 19200K
    0xA9,  # 19400K
    0xA9,  # 19600K
    0xA9,  # 19800K
    0xA8,  # 20000K
    0xA8,  # 20200K
    0xA8,  # 20400K
    0xA7,  # 20600K
    0xA7,  # 20800K
    0xA7,  # 21000K
    0xA7,  # 21200K
    0xA6,  # 21400K
    0xA6,  # 21600K
    0xA6,  # 21800K
    0xA6,  # 22000K
    0xA5,  # 22200K
    0xA5,  # 22400K
    0xA5,  # 22600K
    0xA5,  # 22800K
    0xA4,  # 23000K
    0xA4,  # 23200K
    0xA4,  # 23400K
    0xA4,  # 23600K
    0xA4,  # 23800K
    0xA3,  # 24000K
    0xA3,  # 24200K
    0xA3,  # 24400K
    0xA3,  # 24600K
    0xA3,  # 24800K
    0xA3,  # 25000K
    0xA2,  # 25200K
    0xA2,  # 25400K
    0xA2,  # 25600K
    0xA2,  # 25800K
    0xA2,  # 26000K
    0xA2,  # 26200K
    0xA1,  # 26400K
    0xA1,  # 26600K
    0xA1,  # 26800K
    0xA1,  # 27000K
    0xA1,  # 27200K
    0xA1,  # 27400K
    0xA1,  # 27600K
    0xA0,  # 27800K
    0xA0,  # 28000K
    0xA0,  # 28200K
    0xA0,  # 28400K
    0xA0,  # 28600K
    0xA0,  # 28800K
    0xA0,  # 29000K
    0xA0,  # 29200K
    0x9F,  # 29400K
    0x9F,  # 29600K
    0x9F,  # 29800K
    0x9F,  # 30000K
)

LOOKUP_GREEN_START = 1000

LOOKUP_GREEN = (
    0x38,  # 1000K
    0x53,  # 1200K
    0x65,  # 1400K
    0x73,  # 1600K
    0x7E,  # 1800K
    0x89,  # 2000K
    0x93,  # 2200K
    0x9D,  # 2400K
    0xA5,  # 2600K
    0xAD,  # 2800K
    0xB4,  # 3000K
    0xBB,  # 3200K
    0xC1,  # 3400K
    0xC7,  # 3600K
    0xCC,  # 3800K
    0xD1,  # 4000K
    0xD5,  # 4200K
    0xD9,  # 4400K
    0xDD,  # 4600K
    0xE1,  # 4800K
    0xE4,  # 5000K
    0xE8,  # 5200K
    0xEB,  # 5400K
    0xEE,  # 5600K
    0xF0,  # 5800K
    0xF3,  # 6000K
    0xF5,  # 6200K
    0xF8,  # 6400K
    0xF9,  # 6600K
    0xF6,  # 6800K
    0xF3,  # 7000K
    0xF1,  # 7200K
    0xEF,  # 7400K
    0xED,  # 7600K
    0xEB,  # 7800K
    0xE9,  # 8000K
    0xE7,  # 8200K
    0xE6,  # 8400K
    0xE4,  # 8600K
    0xE3,  # 8800K
    0xE1,  # 9000K
    0xE0,  # 9200K
    0xDF,  # 9400K
    0xDD,  # 9600K
    0xDC,  # 9800K
    0xDB,  # 10000K
    0xDA,  # 10200K
    0xD9,  # 10400K
    0xD8,  # 10600K
    0xD8,  # 10800K
    0xD7,  # 11000K
    0xD6,  # 11200K
    0xD5,  # 11400K
    0xD4,  # 11600K
    0xD4,  # 11800K
    0xD3,  # 12000K
    0xD2,  # 12200K
    0xD2,  # 12400K
    0xD1,  # 12600K
    0xD1,  # 12800K
    0xD0,  # 13000K
    0xD0,  # 13200K
    0xCF,  # 13400K
    0xCF,  # 13600K
    0xCE,  # 13800K
    0xCE,  # 14000K
    0xCD,  # 14200K
    0xCD,  # 14400K
    0xCC,  # 14600K
    0xCC,  # 14800K
    0xCC,  # 15000K
    0xCB,  # 15200K
    0xCB,  # 15400K
    0xCA,  # 15600K
    0xCA,  # 15800K
    0xCA,  # 16000K
    0xC9,  # 16200K
    0xC9,  # 16400K
    0xC9,  # 16600K
    0xC9,  # 16800K
    0xC8,  # 17000K
    0xC8,  # 17200K
    0xC8,  # 17400K
    0xC7,  # 17600K
    0xC7,  # 17800K
    0xC7,  # 18000K
    0xC7,  # 18200K
    0xC6,  # 18400K
    0xC6,  # 18600K
    0xC6,  # 18800K
    0xC6,  # 19000K
    0xC6,  # 19200K
    0xC5,  # 19400K
    0xC5,  # 19600K
    0xC5,  # 19800K
    0xC5,  # 20000K
    0xC5,  # 20200K
    0xC4,  # 20400K
    0xC4,  # 20600K
    0xC4,  # 20800K
    0xC4,  # 21000K
    0xC4,  # 21200K
    0xC3,  # 21400K
    0xC3,  # 21600K
    0xC3,  # 21800K
    0xC3,  # 22000K
    0xC3,  # 22200K
    0xC3,  # 22400K
    0xC3,  # 22600K
    0xC2,  # 22800K
    0xC2,  # 23000K
    0xC2,  # 23200K
    0xC2,  # 23400K
    0xC2,  # 23600K
    0xC2,  # 23800K
    0xC2,  # 24000K
    0xC1,  # 24200K
    0xC1,  # 24400K
    0xC1,  # 24600K
    0xC1,  # 24800K
    0xC1,  # 25000K
    0xC1,  # 25200K
    0xC1,  # 25400K
    0xC1,  # 25600K
    0xC1,  # 25800K
    0xC0,  # 26000K
    0xC0,  # 26200K
    0xC0,  # 26400K
    0xC0,  # 26600K
    0xC0,  # 26800K
    0xC0,  # 27000K
    0xC0,  # 27200K
    0xC0,  # 27400K
    0xC0,  # 27600K
    0xC0,  # 27800K
    0xBF,  # 28000K
    0xBF,  # 28200K
    0xBF,  # 28400K
    0xBF,  # 28600K
    0xBF,  # 28800K
    0xBF,  # 29000K
    0xBF,  # 29200K
    0xBF,  # 29400K
    0xBF,  # 29600K
    0xBF,  # 29800K
    0xBF,  # 30000K
)

LOOKUP_BLUE_START = 1000

LOOKUP_BLUE = (
    0x00,  # 1000K
    0x00,  # 1200K
    0x00,  # 1400K
    0x00,  # 1600K
    0x00,  # 1800K
    0x12,  # 2000K
    0x2C,  # 2200K
    0x3F,  # 2400K
    0x4F,  # 2600K
    0x5E,  # 2800K
    0x6B,  # 3000K
    0x78,  # 3200K
    0x84,  # 3400K
    0x8F,  # 3600K
    0x99,  # 3800K
    0xA3,  # 4000K
    0xAD,  # 4200K
    0xB6,  # 4400K
    0xBE,  # 4600K
    0xC6,  # 4800K
    0xCE,  # 5000K
    0xD5,  # 5200K
    0xDC,  # 5400K
    0xE3,  # 5600K
    0xE9,  # 5800K
    0xEF,  # 6000K
    0xF5,  # 6200K
    0xFB,  # 6400K
    0xFF,  # 6600K
)


def _interpolate(table, start: int, kelvin: int) -> int:
    offset = kelvin - start
    index = offset // LOOKUP_STEP
    ratio = (offset % LOOKUP_STEP) * 255 // LOOKUP_STEP
    return (ratio * table[index + 1] + (255 - ratio) * table[index]) // 255


def _np_interpolate(table: np.ndarray, start: int, kelvin: np.ndarray) -> np.ndarray:
    # Lanes outside the table's range are pinned to its ends; callers discard them.
    offset = np.clip(kelvin - start, 0, (len(table) - 1) * LOOKUP_STEP - 1)
    index = offset // LOOKUP_STEP
    ratio = (offset % LOOKUP_STEP) * 255 // LOOKUP_STEP
    return (ratio * table[index + 1] + (255 - ratio) * table[index]) // 255


def kelvin_to_rgb_fast(kelvin: KelvinLike) -> RGBTuple:
    """
    Return the RGB representation of a color temperature using the lookup
    tables.

    At multiples of 200K the table value is returned unchanged; in between,
    neighbouring samples are blended with integer weights out of 255.

    Args:
        kelvin: Temperature in Kelvin, clamped into [1000, 29999]

    Returns:
        (red, green, blue) with 8-bit channels
    """
    kelvin = as_kelvin(kelvin)
    if kelvin == WHITE_POINT_KELVIN:
        return WHITE_RGB
    kelvin = clamp_kelvin(kelvin, MIN_KELVIN, FAST_MAX_KELVIN, warn=False)

    green = _interpolate(LOOKUP_GREEN, LOOKUP_GREEN_START, kelvin)
    if kelvin < WHITE_POINT_KELVIN:
        return 255, green, _interpolate(LOOKUP_BLUE, LOOKUP_BLUE_START, kelvin)
    return _interpolate(LOOKUP_RED, LOOKUP_RED_START, kelvin), green, 255


_RED = np.array(LOOKUP_RED, dtype=np.int64)
_GREEN = np.array(LOOKUP_GREEN, dtype=np.int64)
_BLUE = np.array(LOOKUP_BLUE, dtype=np.int64)


def np_kelvin_to_rgb_fast(kelvin: KelvinArray) -> np.ndarray:
    """
    Vectorized :func:`kelvin_to_rgb_fast`.

    Args:
        kelvin: Integer array of temperatures, any shape

    Returns:
        uint8 array of shape ``kelvin.shape + (3,)``
    """
    original = np.asarray(kelvin)
    white = original == WHITE_POINT_KELVIN
    kelvin = np_clamp_kelvin(original, MIN_KELVIN, FAST_MAX_KELVIN, warn=False)
    warm = kelvin < WHITE_POINT_KELVIN

    red = np.where(warm, 255, _np_interpolate(_RED, LOOKUP_RED_START, kelvin))
    green = _np_interpolate(_GREEN, LOOKUP_GREEN_START, kelvin)
    blue = np.where(warm, _np_interpolate(_BLUE, LOOKUP_BLUE_START, kelvin), 255)

    rgb = np.stack([red, green, blue], axis=-1).astype(np.uint8)
    rgb[white] = WHITE_RGB
    return rgb
