"""Shared types for tw-matcher: Command, Context, Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from tw_matcher.core.palette import Palette


@dataclass
class Context:
    """What every command gets besides its parsed arguments."""

    palette: Palette
    palette_source: str = 'tailwind'  # 'tailwind' or the palette file path


@dataclass
class Report:
    """Accumulates per-item results from a command for text/JSON output."""

    command: str = ''
    palette_source: str = 'tailwind'
    palette_size: int = 0
    items: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, key: str, data: dict[str, Any]) -> None:
        """Add (or merge into) the result for one item."""
        self.items.setdefault(key, {}).update(data)

    def record_pass(self, key: str) -> None:
        self.pass_count += 1

    def record_fail(self, key: str) -> None:
        self.fail_count += 1


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='match', help='Closest palette colour')

        @command.arguments
        def arguments(parser):
            parser.add_argument('colours', nargs='+')

        @command.run
        def run(ctx, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable[[argparse.ArgumentParser], None] | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable[[argparse.ArgumentParser], None]) -> Callable[[argparse.ArgumentParser], None]:
        """Decorator to register a function adding this command's arguments."""
        self._args_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, ctx: Context, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        report.command = self.name
        self._run_fn(ctx, report, args)
