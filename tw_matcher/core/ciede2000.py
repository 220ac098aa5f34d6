"""CIEDE2000 colour difference (ΔE00).

Implements the formula as published in CIE 142-2001 and checked against the
test data of Sharma, Wu & Dalal (2005). All hue arithmetic is in degrees; the
embedded constants (30°, 6°, 63°, 275°) are degree values and only the
trigonometric calls convert to radians.

Neutral colours (a* = b* = 0) have no defined hue. Their hue is taken as 0,
their hue difference contributes 0, and the mean hue is the plain sum, exactly
as in the reference formula.

ciede2000() works on a single pair with math; ciede2000_array() compares one
colour against an (n, 3) array with numpy and must produce the same values.
"""

from __future__ import annotations

import math

import numpy as np

POW25_7 = 25**7


def ciede2000(
    lab1: tuple[float, float, float],
    lab2: tuple[float, float, float],
    kl: float = 1.0,
    kc: float = 1.0,
    kh: float = 1.0,
) -> float:
    """Return the CIEDE2000 distance between two Lab colours."""
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    # Chroma and the G correction on a*
    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    c_bar7 = ((c1 + c2) / 2) ** 7
    g = 0.5 * (1 - math.sqrt(c_bar7 / (c_bar7 + POW25_7)))

    a1p = a1 * (1 + g)
    a2p = a2 * (1 + g)
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)
    h1p = _hue(a1p, b1)
    h2p = _hue(a2p, b2)

    # Differences
    dLp = L2 - L1
    dCp = c2p - c1p
    cp_product = c1p * c2p
    if cp_product == 0:
        dhp = 0.0
    else:
        dhp = h2p - h1p
        if dhp > 180:
            dhp -= 360
        elif dhp < -180:
            dhp += 360
    dHp = 2 * math.sqrt(cp_product) * math.sin(math.radians(dhp / 2))

    # Means
    Lp_bar = (L1 + L2) / 2
    Cp_bar = (c1p + c2p) / 2
    hp_bar = _mean_hue(h1p, h2p, cp_product)

    # Weighting functions
    t = (
        1
        - 0.17 * math.cos(math.radians(hp_bar - 30))
        + 0.24 * math.cos(math.radians(2 * hp_bar))
        + 0.32 * math.cos(math.radians(3 * hp_bar + 6))
        - 0.20 * math.cos(math.radians(4 * hp_bar - 63))
    )
    l50 = (Lp_bar - 50) ** 2
    sl = 1 + 0.015 * l50 / math.sqrt(20 + l50)
    sc = 1 + 0.045 * Cp_bar
    sh = 1 + 0.015 * Cp_bar * t

    # Rotation term for the blue region
    d_theta = 30 * math.exp(-(((hp_bar - 275) / 25) ** 2))
    cp_bar7 = Cp_bar**7
    rc = 2 * math.sqrt(cp_bar7 / (cp_bar7 + POW25_7))
    rt = -math.sin(math.radians(2 * d_theta)) * rc

    tl = dLp / (kl * sl)
    tc = dCp / (kc * sc)
    th = dHp / (kh * sh)
    return math.sqrt(tl * tl + tc * tc + th * th + rt * tc * th)


def _hue(ap: float, b: float) -> float:
    """Hue angle in [0, 360). Zero for a neutral colour."""
    if ap == 0 and b == 0:
        return 0.0
    h = math.degrees(math.atan2(b, ap))
    return h + 360 if h < 0 else h


def _mean_hue(h1p: float, h2p: float, cp_product: float) -> float:
    if cp_product == 0:
        return h1p + h2p
    if abs(h1p - h2p) <= 180:
        return (h1p + h2p) / 2
    if h1p + h2p < 360:
        return (h1p + h2p + 360) / 2
    return (h1p + h2p - 360) / 2


def ciede2000_array(
    lab: tuple[float, float, float],
    labs: np.ndarray,
    kl: float = 1.0,
    kc: float = 1.0,
    kh: float = 1.0,
) -> np.ndarray:
    """CIEDE2000 from one Lab colour to each row of an (n, 3) Lab array."""
    labs = np.asarray(labs, dtype=np.float64).reshape(-1, 3)
    L1, a1, b1 = (float(v) for v in lab)
    L2, a2, b2 = labs[:, 0], labs[:, 1], labs[:, 2]

    c1 = math.hypot(a1, b1)
    c2 = np.hypot(a2, b2)
    c_bar7 = ((c1 + c2) / 2) ** 7
    g = 0.5 * (1 - np.sqrt(c_bar7 / (c_bar7 + POW25_7)))

    a1p = a1 * (1 + g)
    a2p = a2 * (1 + g)
    c1p = np.hypot(a1p, b1)
    c2p = np.hypot(a2p, b2)
    h1p = np.where((a1p == 0) & (b1 == 0), 0.0, np.degrees(np.arctan2(b1, a1p)) % 360)
    h2p = np.where((a2p == 0) & (b2 == 0), 0.0, np.degrees(np.arctan2(b2, a2p)) % 360)

    dLp = L2 - L1
    dCp = c2p - c1p
    cp_product = c1p * c2p
    raw = h2p - h1p
    dhp = np.where(raw > 180, raw - 360, np.where(raw < -180, raw + 360, raw))
    dhp = np.where(cp_product == 0, 0.0, dhp)
    dHp = 2 * np.sqrt(cp_product) * np.sin(np.radians(dhp / 2))

    Lp_bar = (L1 + L2) / 2
    Cp_bar = (c1p + c2p) / 2
    h_sum = h1p + h2p
    hp_bar = np.where(
        cp_product == 0,
        h_sum,
        np.where(
            np.abs(h1p - h2p) <= 180,
            h_sum / 2,
            np.where(h_sum < 360, (h_sum + 360) / 2, (h_sum - 360) / 2),
        ),
    )

    t = (
        1
        - 0.17 * np.cos(np.radians(hp_bar - 30))
        + 0.24 * np.cos(np.radians(2 * hp_bar))
        + 0.32 * np.cos(np.radians(3 * hp_bar + 6))
        - 0.20 * np.cos(np.radians(4 * hp_bar - 63))
    )
    l50 = (Lp_bar - 50) ** 2
    sl = 1 + 0.015 * l50 / np.sqrt(20 + l50)
    sc = 1 + 0.045 * Cp_bar
    sh = 1 + 0.015 * Cp_bar * t

    d_theta = 30 * np.exp(-(((hp_bar - 275) / 25) ** 2))
    cp_bar7 = Cp_bar**7
    rc = 2 * np.sqrt(cp_bar7 / (cp_bar7 + POW25_7))
    rt = -np.sin(np.radians(2 * d_theta)) * rc

    tl = dLp / (kl * sl)
    tc = dCp / (kc * sc)
    th = dHp / (kh * sh)
    # Clip float noise below zero before the root
    return np.sqrt(np.maximum(tl * tl + tc * tc + th * th + rt * tc * th, 0.0))
