"""Error types raised by the colour-matching core.

Every failure is a deterministic function of the input. Nothing here is
retried and nothing falls back to a default colour.
"""


class ColourMatchError(Exception):
    """Base class for all tw-matcher errors."""


class InvalidColourFormat(ColourMatchError, ValueError):
    """A hex string or RGB triplet could not be interpreted as a colour."""


class InvalidPaletteEntry(ColourMatchError, ValueError):
    """A palette source contains a malformed entry. Fatal at build time."""

    def __init__(self, name: str, reason: str):
        super().__init__(f'Invalid palette entry {name!r}: {reason}')
        self.name = name
        self.reason = reason


class EmptyPalette(ColourMatchError, LookupError):
    """Matching was attempted against a palette with no entries."""
