"""Tests for tw_matcher.core.ciede2000 against published reference data.

All 34 pairs and expected ΔE00 values are from Sharma, Wu & Dalal (2005),
"The CIEDE2000 Color-Difference Formula: Implementation Notes,
Supplementary Test Data, and Mathematical Observations".
"""

import itertools

import numpy as np
import pytest
from tw_matcher.core.ciede2000 import ciede2000, ciede2000_array

SHARMA_PAIRS = [
    ((50.0000, 2.6772, -79.7751), (50.0000, 0.0000, -82.7485), 2.0425),
    ((50.0000, 3.1571, -77.2803), (50.0000, 0.0000, -82.7485), 2.8615),
    ((50.0000, 2.8361, -74.0200), (50.0000, 0.0000, -82.7485), 3.4412),
    ((50.0000, -1.3802, -84.2814), (50.0000, 0.0000, -82.7485), 1.0000),
    ((50.0000, -1.1848, -84.8006), (50.0000, 0.0000, -82.7485), 1.0000),
    ((50.0000, -0.9009, -85.5211), (50.0000, 0.0000, -82.7485), 1.0000),
    ((50.0000, 0.0000, 0.0000), (50.0000, -1.0000, 2.0000), 2.3669),
    ((50.0000, -1.0000, 2.0000), (50.0000, 0.0000, 0.0000), 2.3669),
    ((50.0000, 2.4900, -0.0010), (50.0000, -2.4900, 0.0009), 7.1792),
    ((50.0000, 2.4900, -0.0010), (50.0000, -2.4900, 0.0010), 7.1792),
    ((50.0000, 2.4900, -0.0010), (50.0000, -2.4900, 0.0011), 7.2195),
    ((50.0000, 2.4900, -0.0010), (50.0000, -2.4900, 0.0012), 7.2195),
    ((50.0000, -0.0010, 2.4900), (50.0000, 0.0009, -2.4900), 4.8045),
    ((50.0000, -0.0010, 2.4900), (50.0000, 0.0010, -2.4900), 4.8045),
    ((50.0000, -0.0010, 2.4900), (50.0000, 0.0011, -2.4900), 4.7461),
    ((50.0000, 2.5000, 0.0000), (50.0000, 0.0000, -2.5000), 4.3065),
    ((50.0000, 2.5000, 0.0000), (73.0000, 25.0000, -18.0000), 27.1492),
    ((50.0000, 2.5000, 0.0000), (61.0000, -5.0000, 29.0000), 22.8977),
    ((50.0000, 2.5000, 0.0000), (56.0000, -27.0000, -3.0000), 31.9030),
    ((50.0000, 2.5000, 0.0000), (58.0000, 24.0000, 15.0000), 19.4535),
    ((50.0000, 2.5000, 0.0000), (50.0000, 3.1736, 0.5854), 1.0000),
    ((50.0000, 2.5000, 0.0000), (50.0000, 3.2972, 0.0000), 1.0000),
    ((50.0000, 2.5000, 0.0000), (50.0000, 1.8634, 0.5757), 1.0000),
    ((50.0000, 2.5000, 0.0000), (50.0000, 3.2592, 0.3350), 1.0000),
    ((60.2574, -34.0099, 36.2677), (60.4626, -34.1751, 39.4387), 1.2644),
    ((63.0109, -31.0961, -5.8663), (62.8187, -29.7946, -4.0864), 1.2630),
    ((61.2901, 3.7196, -5.3901), (61.4292, 2.2480, -4.9620), 1.8731),
    ((35.0831, -44.1164, 3.7933), (35.0232, -40.0716, 1.5901), 1.8645),
    ((22.7233, 20.0904, -46.6940), (23.0331, 14.9730, -42.5619), 2.0373),
    ((36.4612, 47.8580, 18.3852), (36.2715, 50.5065, 21.2231), 1.4146),
    ((90.8027, -2.0831, 1.4410), (91.1528, -1.6435, 0.0447), 1.4441),
    ((90.9257, -0.5406, -0.9208), (88.6381, -0.8985, -0.7239), 1.5381),
    ((6.7747, -0.2908, -2.4247), (5.8714, -0.0985, -2.2286), 0.6377),
    ((2.0776, 0.0795, -1.1350), (0.9033, -0.0636, -0.5514), 0.9082),
]

SAMPLE_LABS = [
    (0.0, 0.0, 0.0),
    (100.0, 0.0, 0.0),
    (50.0, 0.0, 0.0),
    (53.2408, 80.0925, 67.2032),
    (32.2970, 79.1875, -107.8602),
    (87.7347, -86.1827, 83.1793),
    (50.0, 2.49, -0.001),
    (50.0, -2.49, 0.0009),
    (63.0109, -31.0961, -5.8663),
    (35.0831, -44.1164, 3.7933),
]


class TestReferenceValues:
    @pytest.mark.parametrize(('lab1', 'lab2', 'expected'), SHARMA_PAIRS)
    def test_sharma_pair(self, lab1, lab2, expected):
        assert ciede2000(lab1, lab2) == pytest.approx(expected, abs=1e-4)

    @pytest.mark.parametrize(('lab1', 'lab2', 'expected'), SHARMA_PAIRS)
    def test_sharma_pair_reversed(self, lab1, lab2, expected):
        assert ciede2000(lab2, lab1) == pytest.approx(expected, abs=1e-4)


class TestProperties:
    @pytest.mark.parametrize('lab', SAMPLE_LABS)
    def test_identity_is_zero(self, lab):
        assert ciede2000(lab, lab) == 0.0

    def test_symmetric(self):
        for a, b in itertools.combinations(SAMPLE_LABS, 2):
            assert abs(ciede2000(a, b) - ciede2000(b, a)) < 1e-9

    def test_non_negative(self):
        for a, b in itertools.product(SAMPLE_LABS, repeat=2):
            assert ciede2000(a, b) >= 0.0

    def test_neutral_pair_has_no_hue_term(self):
        # Both greys: only the lightness term contributes, and nothing is NaN
        d = ciede2000((40.0, 0.0, 0.0), (60.0, 0.0, 0.0))
        assert not np.isnan(d)
        sl = 1 + 0.015 * 0.0 / np.sqrt(20)
        assert d == pytest.approx(20.0 / sl)

    def test_neutral_against_chromatic(self):
        assert ciede2000((50.0, 0.0, 0.0), (50.0, -1.0, 2.0)) == pytest.approx(2.3669, abs=1e-3)

    def test_black_white(self):
        assert ciede2000((0.0, 0.0, 0.0), (100.0, 0.0, 0.0)) == pytest.approx(100.0)

    def test_weights_scale_lightness(self):
        base = ciede2000((40.0, 0.0, 0.0), (60.0, 0.0, 0.0))
        assert ciede2000((40.0, 0.0, 0.0), (60.0, 0.0, 0.0), kl=2.0) == pytest.approx(base / 2)


class TestArrayVersion:
    def test_matches_sharma(self):
        for lab1, lab2, expected in SHARMA_PAIRS:
            got = ciede2000_array(lab1, np.array([lab2]))
            assert got.shape == (1,)
            assert got[0] == pytest.approx(expected, abs=1e-4)

    def test_matches_scalar(self):
        labs = np.array(SAMPLE_LABS)
        for lab in SAMPLE_LABS:
            expected = [ciede2000(lab, other) for other in SAMPLE_LABS]
            assert ciede2000_array(lab, labs) == pytest.approx(expected, abs=1e-9)

    def test_identity_row_is_zero(self):
        labs = np.array(SAMPLE_LABS)
        for i, lab in enumerate(SAMPLE_LABS):
            assert ciede2000_array(lab, labs)[i] == 0.0
