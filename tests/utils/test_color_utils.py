from chromakelvin.utils.color_utils import pack_rgb, unpack_rgb, rgb_to_hex, hex_to_rgb, channel_delta
import pytest


def test_pack_and_unpack():
    assert pack_rgb(0xFF, 0x8C, 0x00) == 0xFF8C00
    assert unpack_rgb(0xD6E2FF) == (0xD6, 0xE2, 0xFF)
    assert unpack_rgb(0) == (0, 0, 0)


def test_hex_formatting():
    assert rgb_to_hex(255, 140, 0) == "FF8C00"
    assert rgb_to_hex(0, 0, 0) == "000000"
    assert hex_to_rgb("FF8C00") == (255, 140, 0)
    assert hex_to_rgb("#d6e2ff") == (214, 226, 255)


def test_invalid_values():
    with pytest.raises(ValueError):
        pack_rgb(256, 0, 0)
    with pytest.raises(ValueError):
        unpack_rgb(0x1000000)
    for bad in ("FF8C0", "#FF8C0G", "+F8C00", "FF8C00FF"):
        with pytest.raises(ValueError):
            hex_to_rgb(bad)


def test_channel_delta():
    assert channel_delta((255, 140, 0), (255, 140, 0)) == 0
    assert channel_delta((255, 59, 0), (255, 56, 0)) == 3
    assert channel_delta((0, 0, 0), (255, 1, 2)) == 255
    with pytest.raises(ValueError):
        channel_delta((0, 0), (0, 0, 0))
