"""List the flattened palette: name, hex and Lab for every colour.

Names are the palette's nested keys joined with '-' (slate-50, blue-500).
Use --family to restrict output to one colour family.

Example:
    uv run tw-matcher palette --family rose
    TW_MATCHER_PALETTE_FILE=brand.json uv run tw-matcher palette
"""

from tw_matcher.core.types import Command, Context, Report

command = Command(
    name='palette',
    help='List every palette colour (optionally one family).',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-F', '--family', default=None, help='Only names equal to or starting with FAMILY-')


@command.run
def run(ctx: Context, report: Report, args) -> None:
    family = getattr(args, 'family', None)
    for entry in ctx.palette:
        if family and entry.name != family and not entry.name.startswith(f'{family}-'):
            continue
        report.add(
            entry.name,
            {
                'hex': entry.hex,
                'lab': [round(v, 2) for v in entry.lab],
            },
        )
