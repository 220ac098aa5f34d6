"""Find the closest palette colour for one or more hex colours.

Each colour is converted to CIE Lab and compared against every palette
colour with CIEDE2000. The closest name, its hex, the ΔE00 distance and a
plain-English description of the difference are reported.

With --fail-above N the command exits 1 if any colour's closest match is
further than N (CI gating for design tokens that drifted off-palette).

Example:
    uv run tw-matcher match '#3b82f6' '#123456'
    uv run tw-matcher --json match ff0000
    uv run tw-matcher match '#7a8b9c' --fail-above 2
"""

from tw_matcher.core.classify import classify_difference
from tw_matcher.core.convert import hex_to_rgb
from tw_matcher.core.matcher import find_closest
from tw_matcher.core.types import Command, Context, Report

command = Command(
    name='match',
    help='Closest palette colour (CIEDE2000) for each hex colour.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colours', nargs='+', metavar='COLOUR', help='Hex colour, e.g. #3b82f6 or 3b82f6')
    parser.add_argument(
        '-f',
        '--fail-above',
        type=float,
        default=None,
        metavar='N',
        help='Record a failure for any colour whose best ΔE00 exceeds N',
    )


@command.run
def run(ctx: Context, report: Report, args) -> None:
    threshold = getattr(args, 'fail_above', None)
    for colour in args.colours:
        rgb = hex_to_rgb(colour)
        match = find_closest(rgb, ctx.palette)
        data = {
            'rgb': list(rgb),
            'closest': match.name,
            'closest_hex': match.hex,
            'distance': round(match.distance, 2),
            'description': classify_difference(match.distance),
        }
        if threshold is not None:
            passed = match.distance <= threshold
            data['pass'] = passed
            if passed:
                report.record_pass(colour)
            else:
                report.record_fail(colour)
        report.add(colour, data)
