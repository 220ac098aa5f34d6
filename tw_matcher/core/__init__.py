"""tw_matcher.core — Foundation layer.

Colour conversion, CIEDE2000, the palette index, matching and
classification. This module has NO dependencies on tw_matcher.commands or
tw_matcher.registry. Only stdlib and numpy are allowed here.
"""

from tw_matcher.core.ciede2000 import ciede2000
from tw_matcher.core.classify import Comparison, classify_difference, compare_colours
from tw_matcher.core.convert import RGB, Lab, hex_to_rgb, make_rgb, rgb_to_hex, rgb_to_lab
from tw_matcher.core.errors import ColourMatchError, EmptyPalette, InvalidColourFormat, InvalidPaletteEntry
from tw_matcher.core.matcher import MatchResult, find_closest, find_closest_colour_name
from tw_matcher.core.palette import Group, Leaf, Palette, PaletteEntry, PaletteIndex, build_palette, default_index


def colour_hex(name: str, palette: Palette | None = None) -> str:
    """Hex for a palette colour name. Raises KeyError if unknown."""
    if palette is None:
        palette = default_index().palette
    return palette.hex_for(name)


__all__ = [
    'RGB',
    'ColourMatchError',
    'Comparison',
    'EmptyPalette',
    'Group',
    'InvalidColourFormat',
    'InvalidPaletteEntry',
    'Lab',
    'Leaf',
    'MatchResult',
    'Palette',
    'PaletteEntry',
    'PaletteIndex',
    'build_palette',
    'ciede2000',
    'classify_difference',
    'colour_hex',
    'compare_colours',
    'default_index',
    'find_closest',
    'find_closest_colour_name',
    'hex_to_rgb',
    'make_rgb',
    'rgb_to_hex',
    'rgb_to_lab',
]
