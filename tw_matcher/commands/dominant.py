"""Dominant colours of an image via k-means, each matched to the palette.

Samples up to 5000 pixels, runs KMeans (default 5 clusters, n_init=3,
random_state=42) in RGB. Each cluster centre is rounded to an RGB colour
and matched to its closest palette colour by CIEDE2000.

Clusters are reported largest first with their share of the sample.

Example:
    uv run tw-matcher dominant screenshot.png
    uv run tw-matcher dominant photo.jpg --clusters 8 --json
"""

import numpy as np
from PIL import Image

from tw_matcher.commands.census import sample_pixels
from tw_matcher.core.classify import classify_difference
from tw_matcher.core.convert import make_rgb, rgb_to_hex
from tw_matcher.core.matcher import find_closest
from tw_matcher.core.palette import Palette
from tw_matcher.core.types import Command, Context, Report

command = Command(
    name='dominant',
    help='Dominant colours (k-means) of an image, matched to the palette.',
)

N_SAMPLES = 5000


def extract_dominant(
    image: Image.Image,
    palette: Palette,
    n_clusters: int = 5,
    n_samples: int = N_SAMPLES,
) -> list[dict]:
    from sklearn.cluster import KMeans

    pixels = sample_pixels(image, n_samples)
    # KMeans needs at least as many distinct points as clusters
    n_distinct = len(np.unique(pixels, axis=0))
    km = KMeans(n_clusters=max(1, min(n_clusters, n_distinct)), n_init=3, random_state=42)
    km.fit(pixels.astype(np.float64))
    centres = np.clip(np.rint(km.cluster_centers_), 0, 255).astype(int)
    counts = np.bincount(km.labels_, minlength=len(centres))
    total = counts.sum()

    results = []
    for centre, count in zip(centres, counts):
        rgb = make_rgb(int(centre[0]), int(centre[1]), int(centre[2]))
        match = find_closest(rgb, palette)
        results.append(
            {
                'hex': rgb_to_hex(rgb),
                'pct': round(float(count) / float(total) * 100.0, 1),
                'closest': match.name,
                'closest_hex': match.hex,
                'distance': round(match.distance, 2),
                'description': classify_difference(match.distance),
            }
        )

    results.sort(key=lambda x: -x['pct'])
    return results


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to PNG/JPG')
    parser.add_argument('-k', '--clusters', type=int, default=5, help='Number of clusters (default 5)')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    with Image.open(args.image) as img:
        dominant = extract_dominant(img, ctx.palette, n_clusters=args.clusters)
    report.add(args.image, {'dominant': dominant})
