"""Render a side-by-side preview of a colour and its closest palette match.

Left half: the input colour. Right half: the matched palette colour.
A caption strip under each half gives the hex/name and rgb() values.
Saves a PNG to --output (default ./swatch_<hex>.png).

Example:
    uv run tw-matcher swatch '#4f7cac' -o preview.png
"""

import os

from PIL import Image, ImageDraw

from tw_matcher.core.classify import classify_difference
from tw_matcher.core.convert import RGB, hex_to_rgb, rgb_to_hex
from tw_matcher.core.matcher import find_closest
from tw_matcher.core.types import Command, Context, Report

command = Command(
    name='swatch',
    help='Save a PNG comparing a colour with its closest palette colour.',
)

SWATCH_WIDTH = 240
SWATCH_HEIGHT = 120
CAPTION_HEIGHT = 44


def _caption_colour(rgb: RGB) -> tuple[int, int, int]:
    return (0, 0, 0) if sum(rgb) > 382 else (255, 255, 255)


def render_swatch(left: RGB, right: RGB, left_label: str, right_label: str) -> Image.Image:
    """Two colour blocks with captions. Returns an RGB image."""
    img = Image.new('RGB', (SWATCH_WIDTH * 2, SWATCH_HEIGHT + CAPTION_HEIGHT), (255, 255, 255))
    draw = ImageDraw.Draw(img)
    for i, (rgb, label) in enumerate(((left, left_label), (right, right_label))):
        x0 = i * SWATCH_WIDTH
        draw.rectangle((x0, 0, x0 + SWATCH_WIDTH - 1, SWATCH_HEIGHT - 1), fill=tuple(rgb))
        draw.text((x0 + 8, SWATCH_HEIGHT - 18), label, fill=_caption_colour(rgb))
        draw.text((x0 + 8, SWATCH_HEIGHT + 6), label, fill=(17, 24, 39))
        draw.text((x0 + 8, SWATCH_HEIGHT + 24), f'rgb({rgb.r}, {rgb.g}, {rgb.b})', fill=(107, 114, 128))
    return img


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colour', metavar='COLOUR')
    parser.add_argument('-o', '--output', default=None, help='PNG path (default: ./swatch_<hex>.png)')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    rgb = hex_to_rgb(args.colour)
    match = find_closest(rgb, ctx.palette)
    hex_str = rgb_to_hex(rgb)

    path = args.output or f'swatch_{hex_str[1:]}.png'
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_swatch(rgb, match.entry.rgb, hex_str, match.name).save(path)

    report.add(
        args.colour,
        {
            'closest': match.name,
            'closest_hex': match.hex,
            'distance': round(match.distance, 2),
            'description': classify_difference(match.distance),
            'file': path,
        },
    )
