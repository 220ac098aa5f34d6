"""Colour space conversions: hex ↔ RGB, sRGB → CIE Lab (D65).

The Lab pipeline is the standard one:

  sRGB [0,255] → companded [0,1] → linear RGB → XYZ (IEC 61966-2-1 matrix)
  → normalise by the D65 white point → CIE f(t) → L*, a*, b*

Scalar functions use plain floats; rgb_array_to_lab() runs the same pipeline
over numpy arrays for whole images. Both must agree to floating-point noise.
"""

from __future__ import annotations

import re
from typing import NamedTuple

import numpy as np

from tw_matcher.core.errors import InvalidColourFormat


class RGB(NamedTuple):
    """An sRGB colour, components in [0, 255]."""

    r: int
    g: int
    b: int


class Lab(NamedTuple):
    """A CIE L*a*b* colour (D65)."""

    L: float
    a: float
    b: float


# Reference white, D65 / 2° observer
D65_WHITE = (0.95047, 1.0, 1.08883)

# sRGB → XYZ, rows are X, Y, Z
SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# CIE constants, exact rational forms
LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27

_HEX_RE = re.compile(r'#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})')


def make_rgb(r: int, g: int, b: int) -> RGB:
    """Build an RGB, rejecting anything that is not an int in [0, 255]."""
    for channel, value in zip('rgb', (r, g, b)):
        # bool is an int subclass but never a colour channel
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidColourFormat(f'{channel} channel must be an integer, got {value!r}')
        if not 0 <= value <= 255:
            raise InvalidColourFormat(f'{channel} channel out of range [0, 255]: {value}')
    return RGB(int(r), int(g), int(b))


def as_rgb(colour: RGB | tuple[int, int, int] | str) -> RGB:
    """Coerce a hex string or 3-tuple into a validated RGB."""
    if isinstance(colour, str):
        return hex_to_rgb(colour)
    try:
        r, g, b = colour
    except (TypeError, ValueError):
        raise InvalidColourFormat(f'Expected a hex string or (r, g, b) triplet, got {colour!r}') from None
    return make_rgb(r, g, b)


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse '#rrggbb', '#rgb' or '#rrggbbaa' (alpha dropped). '#' optional.

    Raises InvalidColourFormat for anything else.
    """
    if not isinstance(hex_str, str):
        raise InvalidColourFormat(f'Hex colour must be a string, got {hex_str!r}')
    m = _HEX_RE.fullmatch(hex_str.strip())
    if not m:
        raise InvalidColourFormat(f'Not a hex colour: {hex_str!r}')
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB | tuple[int, int, int]) -> str:
    r, g, b = as_rgb(rgb)
    return f'#{r:02x}{g:02x}{b:02x}'


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return (LAB_KAPPA * t + 16) / 116


def rgb_to_lab(rgb: RGB | tuple[int, int, int]) -> Lab:
    """Convert an sRGB colour to CIE Lab under D65."""
    r, g, b = as_rgb(rgb)
    lin = [_srgb_to_linear(c / 255) for c in (r, g, b)]
    x, y, z = (sum(m * c for m, c in zip(row, lin)) for row in SRGB_TO_XYZ)

    fx = _lab_f(x / D65_WHITE[0])
    fy = _lab_f(y / D65_WHITE[1])
    fz = _lab_f(z / D65_WHITE[2])
    return Lab(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def rgb_array_to_lab(pixels: np.ndarray) -> np.ndarray:
    """Convert an (..., 3) array of sRGB values in [0, 255] to Lab.

    Returns a float64 array of the same shape.
    """
    arr = np.asarray(pixels)
    if arr.shape[-1:] != (3,):
        raise InvalidColourFormat(f'Expected an (..., 3) array of RGB values, got shape {arr.shape}')
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise InvalidColourFormat('RGB array values must be in [0, 255]')

    c = arr.astype(np.float64) / 255
    lin = np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    xyz = lin @ np.array(SRGB_TO_XYZ).T
    t = xyz / np.array(D65_WHITE)
    f = np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)

    lab = np.empty_like(f)
    lab[..., 0] = 116 * f[..., 1] - 16
    lab[..., 1] = 500 * (f[..., 0] - f[..., 1])
    lab[..., 2] = 200 * (f[..., 1] - f[..., 2])
    return lab
