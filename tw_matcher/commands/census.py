"""Map sampled image pixels to their nearest palette colour. Output percentages.

Samples up to --samples pixels (default 10,000, fixed seed). Each pixel is
mapped to the nearest palette colour by CIEDE2000; pixels further than
--threshold ΔE00 (default 10) from every palette colour are counted as
'(other)'. Identical pixels are matched once, so flat UI screenshots are
fast.

Output: top 10 named colours with percentages.

Example:
    uv run tw-matcher census screenshot.png
    uv run tw-matcher census screenshot.png --threshold 5 --json
"""

import numpy as np
from PIL import Image

from tw_matcher.core.matcher import nearest_many
from tw_matcher.core.palette import Palette
from tw_matcher.core.types import Command, Context, Report

command = Command(
    name='census',
    help='Map sampled pixels of an image to nearest palette colours. Output percentages.',
)

SAMPLE_SIZE = 10000
OTHER = '(other)'


def sample_pixels(image: Image.Image, n_samples: int = SAMPLE_SIZE) -> np.ndarray:
    """(n, 3) uint8 array of up to n_samples pixels, reproducibly sampled."""
    pixels = np.array(image.convert('RGB')).reshape(-1, 3)
    if len(pixels) > n_samples:
        indices = np.random.default_rng(42).choice(len(pixels), n_samples, replace=False)
        pixels = pixels[indices]
    return pixels


def census(pixels: np.ndarray, palette: Palette, threshold: float | None = 10.0) -> dict[str, float]:
    """Percentage of pixels per nearest palette name, largest first."""
    counts: dict[str, int] = {}
    for name, _dist in nearest_many(pixels, palette, threshold=threshold):
        key = name if name else OTHER
        counts[key] = counts.get(key, 0) + 1

    total = sum(counts.values())
    return {k: round(v / total * 100, 1) for k, v in sorted(counts.items(), key=lambda x: (-x[1], x[0]))}


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to PNG/JPG')
    parser.add_argument('-t', '--threshold', type=float, default=10.0, help='Max ΔE00 counted as a match (default 10)')
    parser.add_argument('-n', '--samples', type=int, default=SAMPLE_SIZE, help='Pixels to sample (default 10000)')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    with Image.open(args.image) as img:
        pixels = sample_pixels(img, args.samples)
    shares = census(pixels, ctx.palette, threshold=args.threshold)
    top = [{'name': n, 'pct': pct} for n, pct in list(shares.items())[:10]]
    report.add(args.image, {'top': top, 'samples': len(pixels)})
