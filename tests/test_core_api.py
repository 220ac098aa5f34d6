"""Tests for the public API re-exported from tw_matcher.core."""

import pytest
from tw_matcher.core import (
    EmptyPalette,
    InvalidColourFormat,
    build_palette,
    ciede2000,
    classify_difference,
    colour_hex,
    compare_colours,
    find_closest_colour_name,
    hex_to_rgb,
    rgb_to_lab,
)


class TestPublicApi:
    def test_hex_round_trip_extremes(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)
        assert hex_to_rgb('#FFFFFF') == (255, 255, 255)

    def test_end_to_end(self):
        palette = build_palette({'brand': {'primary': '#3b82f6', 'danger': '#ef4444'}})
        name, distance = find_closest_colour_name('#3a80f5', palette)
        assert name == 'brand-primary'
        assert classify_difference(distance) == 'not perceptible by human eyes'

    def test_distance_of_lab_values(self):
        lab = rgb_to_lab(hex_to_rgb('#ef4444'))
        assert ciede2000(lab, lab) == 0.0

    def test_colour_hex_default_palette(self):
        assert colour_hex('blue-500') == '#3b82f6'

    def test_colour_hex_custom_palette(self):
        assert colour_hex('ink', build_palette({'ink': '#111'})) == '#111'

    def test_colour_hex_unknown_has_no_fallback(self):
        with pytest.raises(KeyError):
            colour_hex('no-such-colour')

    def test_compare_colours_exported(self):
        assert compare_colours('#fff', '#ffffff').delta_e == 0.0

    def test_errors_exported(self):
        with pytest.raises(InvalidColourFormat):
            hex_to_rgb('nope')
        with pytest.raises(EmptyPalette):
            find_closest_colour_name('#fff', build_palette({}))
