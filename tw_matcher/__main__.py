"""tw-matcher — match any colour to the nearest Tailwind palette colour (CIEDE2000).

Usage: uv run tw-matcher <command> [args] [options]

Commands are auto-discovered from tw_matcher/commands/.
Each command module's docstring is its documentation.
Run `tw-matcher help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, tw-matcher looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  TW_MATCHER_PALETTE_FILE  JSON palette to match against instead of Tailwind
  TW_MATCHER_LOG_LEVEL     DEBUG, INFO, WARNING (default), ERROR
"""

import argparse
import importlib
import logging
import sys

from tw_matcher import registry
from tw_matcher.core.env import Settings, load_env
from tw_matcher.core.errors import ColourMatchError
from tw_matcher.core.logging_config import configure_logging
from tw_matcher.core.palette import PaletteIndex, default_index, load_palette_file
from tw_matcher.core.report import format_json, format_text
from tw_matcher.core.types import Context, Report

logger = logging.getLogger(__name__)


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'tw_matcher.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  tw-matcher match '#3b82f6' '#123456'\n"
        "  tw-matcher match '#7a8b9c' --fail-above 2\n"
        '  tw-matcher compare slate-50 white\n'
        '  tw-matcher lookup sky-400\n'
        '  tw-matcher palette --family rose\n'
        "  tw-matcher swatch '#4f7cac' -o preview.png\n"
        '  tw-matcher census screenshot.png --json\n'
        '  tw-matcher dominant photo.jpg --clusters 8\n'
        '  tw-matcher help match\n'
    )
    parser = argparse.ArgumentParser(
        prog='tw-matcher',
        description='Match colours to the nearest Tailwind palette colour using CIEDE2000.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument(
        '--palette-file',
        metavar='PATH',
        default=None,
        help='JSON palette (name → hex or nested groups). Overrides TW_MATCHER_PALETTE_FILE',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        # SUPPRESS keeps a global --json from being reset by the subparser default
        p.add_argument(
            '-j', '--json', action='store_true', default=argparse.SUPPRESS, help='Output JSON instead of text'
        )
        cmd.configure(p)

    # `help` subcommand: prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: tw-matcher help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _palette_index(palette_file: str | None) -> tuple[PaletteIndex, str]:
    """Index over the configured palette file, or the shared Tailwind index."""
    if palette_file:
        return PaletteIndex(load_palette_file(palette_file)), palette_file
    return default_index(), 'tailwind'


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    settings = Settings.from_env()
    try:
        configure_logging('DEBUG' if args.verbose else settings.log_level)
    except ValueError as e:
        parser.error(str(e))
    if env_path:
        print(f'tw-matcher: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    cmd = registry.get(args.command)
    try:
        index, source = _palette_index(args.palette_file or settings.palette_file)
        ctx = Context(palette=index.palette, palette_source=source)
        report = Report(palette_source=source, palette_size=len(ctx.palette))
        cmd.execute(ctx, report, args)
    except (ColourMatchError, KeyError, OSError) as e:
        # KeyError str() wraps the message in quotes
        msg = e.args[0] if isinstance(e, KeyError) and e.args else e
        logger.debug('%s failed', args.command, exc_info=True)
        print(f'tw-matcher: error: {msg}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate, after output so the report is visible even on failure
    if report.fail_count:
        sys.exit(1)


if __name__ == '__main__':
    main()
