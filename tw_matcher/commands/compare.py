"""ΔE00 between two hex colours, with a description of the difference.

Descriptions, by distance:
  < 1        not perceptible by human eyes
  1 – 2      perceptible through close observation
  2 – 10     perceptible at a glance
  10 – 49    colors are more similar than opposite
  100        colors are exact opposite
  otherwise  large, obvious difference

Either colour may also be a palette name (e.g. blue-500).

Example:
    uv run tw-matcher compare '#3b82f6' '#2563eb'
    uv run tw-matcher compare slate-50 white
"""

from tw_matcher.core.classify import compare_colours
from tw_matcher.core.palette import Palette
from tw_matcher.core.types import Command, Context, Report

command = Command(
    name='compare',
    help='ΔE00 between two colours (hex or palette names) and what it means.',
)


def _resolve(value: str, palette: Palette) -> str:
    return palette.hex_for(value) if value in palette else value


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('first', metavar='COLOUR1')
    parser.add_argument('second', metavar='COLOUR2')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    first = _resolve(args.first, ctx.palette)
    second = _resolve(args.second, ctx.palette)
    result = compare_colours(first, second)
    report.add(
        f'{args.first} vs {args.second}',
        {
            'first': first,
            'second': second,
            'distance': result.delta_e,
            'description': result.description,
        },
    )
