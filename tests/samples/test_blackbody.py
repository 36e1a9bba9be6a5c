from chromakelvin.samples.blackbody import (
    BLACKBODY_REFERENCE,
    BLACKBODY_START,
    BLACKBODY_STOP,
    CONFORMANCE_TOLERANCE,
    reference_kelvins,
    reference_rgb,
    reference_deltas,
)
from chromakelvin.conversions import kelvin_to_rgb, kelvin_to_rgb_fast, kelvin_to_rgb_helland
import numpy as np
import pytest


def test_reference_table_layout():
    assert len(BLACKBODY_REFERENCE) == 145
    assert BLACKBODY_START == 1000
    assert BLACKBODY_STOP == 29800
    assert list(reference_kelvins())[:3] == [1000, 1200, 1400]
    assert list(reference_kelvins())[-1] == 29800


def test_reference_rgb():
    assert reference_rgb(1000) == (0xFF, 0x38, 0x00)
    assert reference_rgb(6600) == (0xFE, 0xF9, 0xFF)
    assert reference_rgb(29800) == (0x9F, 0xBF, 0xFF)


def test_reference_rgb_off_grid():
    for kelvin in (999, 1100, 800, 30000, 6500):
        with pytest.raises(ValueError):
            reference_rgb(kelvin)


def test_curve_fit_conformance():
    deltas = reference_deltas(kelvin_to_rgb)
    assert deltas.shape == (145,)
    assert deltas.max() <= CONFORMANCE_TOLERANCE["curve"] == 18


def test_fast_conformance():
    deltas = reference_deltas(kelvin_to_rgb_fast)
    assert deltas.max() <= CONFORMANCE_TOLERANCE["fast"] == 27
    # The tables are sampled from the reference on the same grid.
    assert np.all(deltas == 0)


def test_helland_conformance():
    deltas = reference_deltas(kelvin_to_rgb_helland)
    assert deltas.max() <= CONFORMANCE_TOLERANCE["helland"] == 13


def test_literal_reference_scenarios():
    assert kelvin_to_rgb(1000) == (0xFF, 0x3B, 0x00)
    assert kelvin_to_rgb(2000) == (0xFF, 0x8C, 0x00)
    assert kelvin_to_rgb(6500) == (0xFF, 0xFF, 0xFF)
    assert kelvin_to_rgb(9000) == (0xD6, 0xE2, 0xFF)
