"""Chromakelvin: color temperature to RGB conversions and back."""

from .conversions import (
    kelvin_to_rgb,
    kelvin_to_rgb_fast,
    kelvin_to_rgb_helland,
    rgb_to_kelvin,
    np_kelvin_to_rgb,
    np_kelvin_to_rgb_fast,
    np_kelvin_to_rgb_helland,
    np_rgb_to_kelvin,
    float_to_uint8,
    float_to_uint16,
    np_float_to_uint8,
    np_float_to_uint16,
    convert,
    np_convert,
    to_kelvin,
    np_to_kelvin,
    KelvinRangeWarning,
    MIN_KELVIN,
    MAX_KELVIN,
    FAST_MAX_KELVIN,
    WHITE_POINT_KELVIN,
)
from .types.format_type import FormatType
from .utils.color_utils import pack_rgb, unpack_rgb, rgb_to_hex, hex_to_rgb, channel_delta
from .samples.blackbody import BLACKBODY_REFERENCE, reference_rgb, reference_deltas

# Friendly aliases for the three core operations
forward_convert = kelvin_to_rgb
fast_forward_convert = kelvin_to_rgb_fast
inverse_convert = rgb_to_kelvin

__version__ = "1.0.0"

__all__ = [
    # forward conversions
    "kelvin_to_rgb",
    "kelvin_to_rgb_fast",
    "kelvin_to_rgb_helland",
    "np_kelvin_to_rgb",
    "np_kelvin_to_rgb_fast",
    "np_kelvin_to_rgb_helland",
    "forward_convert",
    "fast_forward_convert",
    # inverse conversion
    "rgb_to_kelvin",
    "np_rgb_to_kelvin",
    "inverse_convert",
    # quantization
    "float_to_uint8",
    "float_to_uint16",
    "np_float_to_uint8",
    "np_float_to_uint16",
    # high-level API
    "convert",
    "np_convert",
    "to_kelvin",
    "np_to_kelvin",
    "FormatType",
    # domain
    "KelvinRangeWarning",
    "MIN_KELVIN",
    "MAX_KELVIN",
    "FAST_MAX_KELVIN",
    "WHITE_POINT_KELVIN",
    # hex helpers and reference data
    "pack_rgb",
    "unpack_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
    "channel_delta",
    "BLACKBODY_REFERENCE",
    "reference_rgb",
    "reference_deltas",
    # version
    "__version__",
]
