"""Print the hex value of a palette colour name.

Unknown names are an error (exit 1); there is no fallback colour.

Example:
    uv run tw-matcher lookup sky-400
"""

from tw_matcher.core.types import Command, Context, Report

command = Command(
    name='lookup',
    help='Hex value for a palette colour name.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('names', nargs='+', metavar='NAME')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    for name in args.names:
        entry = ctx.palette[name]
        report.add(name, {'hex': entry.hex, 'rgb': list(entry.rgb)})
