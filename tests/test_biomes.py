import numpy as np
import pytest

from hexworld.biomes import (
    MAX_ELEVATION_BAND, Biome, BiomeThresholds, biome_rules, classify_biome, classify_elevation,
)


@pytest.mark.parametrize("height, humidity, expected", [
    (-0.5, 3.0, Biome.WATER_DEEP),
    (-0.1, 3.0, Biome.WATER_SHALLOW),
    (0.01, -5.0, Biome.DESERT),       # beach wins over dry stone
    (3.0, 5.0, Biome.SNOW),
    (3.0, -0.9, Biome.SNOW),          # snow is tested before stone
    (2.0, 0.5, Biome.STONE),
    (1.0, -0.9, Biome.STONE),
    (1.0, -0.6, Biome.DESERT),
    (1.0, -0.1, Biome.WARM),
    (1.0, 0.2, Biome.TEMPERATE),
    (1.0, 0.5, Biome.BOREAL),
    (1.0, 0.9, Biome.SWAMP),
])
def test_cascade(height, humidity, expected):
    assert classify_biome(height, humidity) == expected


def test_rules_are_ordered_and_total():
    rules = biome_rules()
    assert [b for _, b in rules] == [
        Biome.WATER_DEEP, Biome.WATER_SHALLOW, Biome.DESERT, Biome.SNOW, Biome.STONE,
        Biome.DESERT, Biome.WARM, Biome.TEMPERATE, Biome.BOREAL, Biome.SWAMP,
    ]
    for h in np.linspace(-2, 4, 25):
        for hu in np.linspace(-2, 2, 25):
            assert isinstance(classify_biome(float(h), float(hu)), Biome)


def test_shifted_thresholds_keep_order():
    wetter = BiomeThresholds(boreal=1.0)
    assert classify_biome(1.0, 0.9, wetter) == Biome.BOREAL
    # moving thresholds never lets a later rule override an earlier one
    odd = BiomeThresholds(snow_line=0.5, stone_height=0.2)
    assert classify_biome(1.0, 0.3, odd) == Biome.SNOW
    assert classify_biome(0.3, 0.3, odd) == Biome.STONE


def test_classify_deterministic():
    assert all(classify_biome(0.7, 0.33) == classify_biome(0.7, 0.33) for _ in range(5))


def test_elevation_bands():
    assert classify_elevation(0.0) == 0
    assert classify_elevation(0.55) == 0
    assert classify_elevation(0.65) == 1
    assert classify_elevation(1.7) == 2
    assert classify_elevation(-3.0) == 0
    assert classify_elevation(50.0) == MAX_ELEVATION_BAND
    assert classify_elevation(0.55, bias=0.5) == 1


def test_elevation_monotonic():
    bands = [classify_elevation(float(h)) for h in np.linspace(-2, 6, 500)]
    assert all(b0 <= b1 for b0, b1 in zip(bands, bands[1:]))
    assert set(bands) == {0, 1, 2, 3, 4}
