"""Nearest palette colour by CIEDE2000.

find_closest() is a plain linear scan in palette order. The palette is
small (a few hundred entries) so no spatial index is needed. Ties keep the
first entry seen, i.e. the lexicographically smallest name.

nearest_many() answers the same question for a batch of pixels with the
vectorised distance, for the image commands.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from tw_matcher.core.ciede2000 import ciede2000, ciede2000_array
from tw_matcher.core.convert import RGB, as_rgb, rgb_array_to_lab, rgb_to_lab
from tw_matcher.core.errors import EmptyPalette
from tw_matcher.core.palette import Palette, PaletteEntry


@dataclass(frozen=True)
class MatchResult:
    entry: PaletteEntry
    distance: float

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def hex(self) -> str:
        return self.entry.hex


def find_closest(query: RGB | tuple[int, int, int] | str, palette: Palette) -> MatchResult:
    """Return the palette entry perceptually closest to query."""
    entries = palette.entries()
    if not entries:
        raise EmptyPalette('Cannot match against an empty palette')

    query_lab = rgb_to_lab(as_rgb(query))
    best = entries[0]
    best_dist = ciede2000(query_lab, best.lab)
    for entry in entries[1:]:
        dist = ciede2000(query_lab, entry.lab)
        if dist < best_dist:
            best, best_dist = entry, dist
    return MatchResult(entry=best, distance=best_dist)


def find_closest_colour_name(query: RGB | tuple[int, int, int] | str, palette: Palette) -> tuple[str, float]:
    """(name, distance) of the closest palette colour."""
    match = find_closest(query, palette)
    return match.name, match.distance


def nearest_many(
    pixels: np.ndarray,
    palette: Palette,
    threshold: float | None = None,
) -> list[tuple[str | None, float]]:
    """Nearest palette name and distance for each row of an (n, 3) RGB array.

    Names are None where the best distance exceeds threshold.
    Identical pixels are only compared once.
    """
    if len(palette) == 0:
        raise EmptyPalette('Cannot match against an empty palette')

    rows = np.asarray(pixels).reshape(-1, 3)
    unique, inverse = np.unique(rows, axis=0, return_inverse=True)
    labs = rgb_array_to_lab(unique)
    names = palette.names()

    answers: list[tuple[str | None, float]] = []
    for lab in labs:
        dists = ciede2000_array(lab, palette.lab_array)
        # argmin returns the first minimum, matching find_closest's tie rule
        i = int(np.argmin(dists))
        dist = float(dists[i])
        name = names[i] if threshold is None or dist <= threshold else None
        answers.append((name, dist))
    return [answers[i] for i in inverse.reshape(-1)]
