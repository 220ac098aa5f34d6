"""Human-readable buckets for a CIEDE2000 distance."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tw_matcher.core.ciede2000 import ciede2000
from tw_matcher.core.convert import hex_to_rgb, rgb_to_lab

NOT_PERCEPTIBLE = 'not perceptible by human eyes'
CLOSE_OBSERVATION = 'perceptible through close observation'
AT_A_GLANCE = 'perceptible at a glance'
MORE_SIMILAR = 'colors are more similar than opposite'
EXACT_OPPOSITE = 'colors are exact opposite'
LARGE_DIFFERENCE = 'large, obvious difference'


@dataclass(frozen=True)
class Comparison:
    delta_e: float  # rounded to 2 dp
    description: str


def classify_difference(distance: float) -> str:
    if math.isnan(distance) or distance < 0:
        raise ValueError(f'Distance must be a non-negative number, got {distance!r}')
    if distance < 1:
        return NOT_PERCEPTIBLE
    if distance < 2:
        return CLOSE_OBSERVATION
    if distance < 10:
        return AT_A_GLANCE
    if distance < 49:
        return MORE_SIMILAR
    # Exact equality only, not a range
    if distance == 100:
        return EXACT_OPPOSITE
    return LARGE_DIFFERENCE


def compare_colours(hex1: str, hex2: str) -> Comparison:
    """ΔE00 between two hex colours, with its description.

    The description is taken from the unrounded distance.
    """
    delta_e = ciede2000(rgb_to_lab(hex_to_rgb(hex1)), rgb_to_lab(hex_to_rgb(hex2)))
    return Comparison(delta_e=round(delta_e, 2), description=classify_difference(delta_e))
