import numpy as np
from typing import Callable

from ..types.color_types import RGBTuple
from ..utils.color_utils import channel_delta, unpack_rgb

# Black-body colors from http://www.vendian.org/mncharity/dir3/blackbody/
# (D65 white point), packed as 0xRRGGBB.
BLACKBODY_START = 1000
BLACKBODY_STEP = 200

BLACKBODY_REFERENCE = (
    0xFF3800,  # 1000K
    0xFF5300,  # 1200K
    0xFF6500,  # 1400K
    0xFF7300,  # 1600K
    0xFF7E00,  # 1800K
    0xFF8912,  # 2000K
    0xFF932C,  # 2200K
    0xFF9D3F,  # 2400K
    0xFFA54F,  # 2600K
    0xFFAD5E,  # 2800K
    0xFFB46B,  # 3000K
    0xFFBB78,  # 3200K
    0xFFC184,  # 3400K
    0xFFC78F,  # 3600K
    0xFFCC99,  # 3800K
    0xFFD1A3,  # 4000K
    0xFFD5AD,  # 4200K
    0xFFD9B6,  # 4400K
    0xFFDDBE,  # 4600K
    0xFFE1C6,  # 4800K
    0xFFE4CE,  # 5000K
    0xFFE8D5,  # 5200K
    0xFFEBDC,  # 5400K
    0xFFEEE3,  # 5600K
    0xFFF0E9,  # 5800K
    0xFFF3EF,  # 6000K
    0xFFF5F5,  # 6200K
    0xFFF8FB,  # 6400K
    0xFEF9FF,  # 6600K
    0xF9F6FF,  # 6800K
    0xF5F3FF,  # 7000K
    0xF0F1FF,  # 7200K
    0xEDEFFF,  # 7400K
    0xE9EDFF,  # 7600K
    0xE6EBFF,  # 7800K
    0xE3E9FF,  # 8000K
    0xE0E7FF,  # 8200K
    0xDDE6FF,  # 8400K
    0xDAE4FF,  # 8600K
    0xD8E3FF,  # 8800K
    0xD6E1FF,  # 9000K
    0xD3E0FF,  # 9200K
    0xD1DFFF,  # 9400K
    0xCFDDFF,  # 9600K
    0xCEDCFF,  # 9800K
    0xCCDBFF,  # 10000K
    0xCADAFF,  # 10200K
    0xC9D9FF,  # 10400K
    0xC7D8FF,  # 10600K
    0xC6D8FF,  # 10800K
    0xC4D7FF,  # 11000K
    0xC3D6FF,  # 11200K
    0xC2D5FF,  # 11400K
    0xC1D4FF,  # 11600K
    0xC0D4FF,  # 11800K
    0xBFD3FF,  # 12000K
    0xBED2FF,  # 12200K
    0xBDD2FF,  # 12400K
    0xBCD1FF,  # 12600K
    0xBBD1FF,  # 12800K
    0xBAD0FF,  # 13000K
    0xB9D0FF,  # 13200K
    0xB8CFFF,  # 13400K
    0xB7CFFF,  # 13600K
    0xB7CEFF,  # 13800K
    0xB6CEFF,  # 14000K
    0xB5CDFF,  # 14200K
    0xB5CDFF,  # 14400K
    0xB4CCFF,  # 14600K
    0xB3CCFF,  # 14800K
    0xB3CCFF,  # 15000K
    0xB2CBFF,  # 15200K
    0xB2CBFF,  # 15400K
    0xB1CAFF,  # 15600K
    0xB1CAFF,  # 15800K
    0xB0CAFF,  # 16000K
    0xAFC9FF,  # 16200K
    0xAFC9FF,  # 16400K
    0xAFC9FF,  # 16600K
    0xAEC9FF,  # 16800K
    0xAEC8FF,  # 17000K
    0xADC8FF,  # 17200K
    0xADC8FF,  # 17400K
    0xACC7FF,  # 17600K
    0xACC7FF,  # 17800K
    0xACC7FF,  # 18000K
    0xABC7FF,  # 18200K
    0xABC6FF,  # 18400K
    0xAAC6FF,  # 18600K
    0xAAC6FF,  # 18800K
    0xAAC6FF,  # 19000K
    0xA9C6FF,  # 19200K
    0xA9C5FF,  # 19400K
    0xA9C5FF,  # 19600K
    0xA9C5FF,  # 19800K
    0xA8C5FF,  # 20000K
    0xA8C5FF,  # 20200K
    0xA8C4FF,  # 20400K
    0xA7C4FF,  # 20600K
    0xA7C4FF,  # 20800K
    0xA7C4FF,  # 21000K
    0xA7C4FF,  # 21200K
    0xA6C3FF,  # 21400K
    0xA6C3FF,  # 21600K
    0xA6C3FF,  # 21800K
    0xA6C3FF,  # 22000K
    0xA5C3FF,  # 22200K
    0xA5C3FF,  # 22400K
    0xA5C3FF,  # 22600K
    0xA5C2FF,  # 22800K
    0xA4C2FF,  # 23000K
    0xA4C2FF,  # 23200K
    0xA4C2FF,  # 23400K
    0xA4C2FF,  # 23600K
    0xA4C2FF,  # 23800K
    0xA3C2FF,  # 24000K
    0xA3C1FF,  # 24200K
    0xA3C1FF,  # 24400K
    0xA3C1FF,  # 24600K
    0xA3C1FF,  # 24800K
    0xA3C1FF,  # 25000K
    0xA2C1FF,  # 25200K
    0xA2C1FF,  # 25400K
    0xA2C1FF,  # 25600K
    0xA2C1FF,  # 25800K
    0xA2C0FF,  # 26000K
    0xA2C0FF,  # 26200K
    0xA1C0FF,  # 26400K
    0xA1C0FF,  # 26600K
    0xA1C0FF,  # 26800K
    0xA1C0FF,  # 27000K
    0xA1C0FF,  # 27200K
    0xA1C0FF,  # 27400K
    0xA1C0FF,  # 27600K
    0xA0C0FF,  # 27800K
    0xA0BFFF,  # 28000K
    0xA0BFFF,  # 28200K
    0xA0BFFF,  # 28400K
    0xA0BFFF,  # 28600K
    0xA0BFFF,  # 28800K
    0xA0BFFF,  # 29000K
    0xA0BFFF,  # 29200K
    0x9FBFFF,  # 29400K
    0x9FBFFF,  # 29600K
    0x9FBFFF,  # 29800K
)

BLACKBODY_STOP = BLACKBODY_START + BLACKBODY_STEP * (len(BLACKBODY_REFERENCE) - 1)

# Worst per-channel delta each converter is allowed against the table.
CONFORMANCE_TOLERANCE = {
    "curve": 18,
    "fast": 27,
    "helland": 13,
}


def reference_kelvins() -> range:
    """Temperatures covered by the reference table."""
    return range(BLACKBODY_START, BLACKBODY_STOP + 1, BLACKBODY_STEP)


def reference_rgb(kelvin: int) -> RGBTuple:
    """Return the reference color at a temperature on the 200K grid."""
    offset = kelvin - BLACKBODY_START
    if offset % BLACKBODY_STEP or not BLACKBODY_START <= kelvin <= BLACKBODY_STOP:
        raise ValueError(
            f"{kelvin}K is not a reference temperature "
            f"({BLACKBODY_START}K to {BLACKBODY_STOP}K every {BLACKBODY_STEP}K)"
        )
    return unpack_rgb(BLACKBODY_REFERENCE[offset // BLACKBODY_STEP])


def reference_deltas(converter: Callable[[int], RGBTuple]) -> np.ndarray:
    """
    Compare a Kelvin to RGB converter with the reference table.

    Args:
        converter: Function mapping a temperature to an (r, g, b) triple

    Returns:
        Array with the worst per-channel absolute delta at each reference
        temperature, in table order
    """
    return np.array(
        [channel_delta(converter(k), reference_rgb(k)) for k in reference_kelvins()],
        dtype=np.int64,
    )
