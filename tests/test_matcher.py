"""Tests for tw_matcher.core.matcher — nearest palette colour by CIEDE2000."""

import numpy as np
import pytest
from tw_matcher.core.errors import EmptyPalette, InvalidColourFormat
from tw_matcher.core.matcher import MatchResult, find_closest, find_closest_colour_name, nearest_many
from tw_matcher.core.palette import build_palette, default_index

RGB_PALETTE = {'red': '#ff0000', 'green': '#00ff00', 'blue': '#0000ff'}


@pytest.fixture(scope='module')
def tailwind():
    return default_index().palette


class TestFindClosest:
    @pytest.mark.parametrize(
        ('hex_str', 'name'),
        [
            ('#3b82f6', 'blue-500'),
            ('#000000', 'black'),
            ('#ffffff', 'white'),
            ('#f8fafc', 'slate-50'),
            ('#E11D48', 'rose-600'),
        ],
    )
    def test_exact_palette_colour(self, tailwind, hex_str, name):
        match = find_closest(hex_str, tailwind)
        assert match.name == name
        assert match.distance == 0.0

    def test_accepts_rgb_tuple(self, tailwind):
        assert find_closest((59, 130, 246), tailwind).name == 'blue-500'

    def test_result_fields(self, tailwind):
        match = find_closest('#2563eb', tailwind)
        assert isinstance(match, MatchResult)
        assert match.hex == '#2563eb'
        assert match.entry.rgb == (37, 99, 235)

    def test_near_colour(self):
        palette = build_palette(RGB_PALETTE)
        match = find_closest('#fe0101', palette)
        assert match.name == 'red'
        assert 0 < match.distance < 2

    def test_every_tailwind_colour_matches_itself(self, tailwind):
        for entry in tailwind:
            match = find_closest(entry.rgb, tailwind)
            assert match.distance == 0.0
            assert match.entry.rgb == entry.rgb

    def test_tie_goes_to_first_name(self, tailwind):
        # neutral-50 and zinc-50 are both #fafafa
        match = find_closest('#fafafa', tailwind)
        assert match.name == 'neutral-50'
        assert match.distance == 0.0

    def test_tie_order_is_lexicographic_not_insertion(self):
        palette = build_palette({'zzz': '#808080', 'aaa': '#808080'})
        assert find_closest('#808080', palette).name == 'aaa'

    def test_empty_palette(self):
        with pytest.raises(EmptyPalette):
            find_closest('#ffffff', build_palette({}))

    def test_single_entry_palette(self):
        palette = build_palette({'only': '#00ff00'})
        match = find_closest('#ff00ff', palette)
        assert match.name == 'only'
        assert match.distance > 50

    def test_invalid_query(self, tailwind):
        with pytest.raises(InvalidColourFormat):
            find_closest('#nothex', tailwind)
        with pytest.raises(InvalidColourFormat):
            find_closest((0, 0, 256), tailwind)
        with pytest.raises(InvalidColourFormat):
            find_closest((0, 0), tailwind)


class TestFindClosestColourName:
    def test_returns_name_and_distance(self, tailwind):
        assert find_closest_colour_name('#3b82f6', tailwind) == ('blue-500', 0.0)

    def test_empty_palette(self):
        with pytest.raises(EmptyPalette):
            find_closest_colour_name('#3b82f6', build_palette({}))


class TestNearestMany:
    def test_agrees_with_find_closest(self):
        palette = build_palette(RGB_PALETTE)
        pixels = np.array([[250, 0, 0], [0, 0, 250], [10, 200, 10], [200, 30, 40]], dtype=np.uint8)
        got = nearest_many(pixels, palette)
        for px, (name, dist) in zip(pixels, got):
            expected = find_closest(tuple(int(v) for v in px), palette)
            assert name == expected.name
            assert dist == pytest.approx(expected.distance, abs=1e-9)

    def test_agrees_on_tailwind_sample(self, tailwind):
        rng = np.random.default_rng(3)
        pixels = rng.integers(0, 256, size=(40, 3), dtype=np.uint8)
        got = nearest_many(pixels, tailwind)
        for px, (name, _dist) in zip(pixels, got):
            assert name == find_closest(tuple(int(v) for v in px), tailwind).name

    def test_keeps_input_order_with_duplicates(self):
        palette = build_palette(RGB_PALETTE)
        pixels = np.array([[0, 0, 255], [255, 0, 0], [0, 0, 255]])
        assert [n for n, _ in nearest_many(pixels, palette)] == ['blue', 'red', 'blue']

    def test_threshold(self):
        palette = build_palette(RGB_PALETTE)
        pixels = np.array([[255, 0, 0], [128, 128, 128]])
        names = [n for n, _ in nearest_many(pixels, palette, threshold=5.0)]
        assert names == ['red', None]

    def test_tie_matches_scalar_rule(self, tailwind):
        [(name, dist)] = nearest_many(np.array([[250, 250, 250]]), tailwind)
        assert name == 'neutral-50'
        assert dist == pytest.approx(0.0, abs=1e-6)

    def test_empty_palette(self):
        with pytest.raises(EmptyPalette):
            nearest_many(np.array([[0, 0, 0]]), build_palette({}))
