"""Named colour palettes: source tree, flattening, and the Lab-cached index.

A palette source is a tree. Leaves hold a hex string; groups map names to
further nodes, to any depth. Flattening joins the path with '-', so
{'slate': {50: '#f8fafc'}} becomes {'slate-50': '#f8fafc'}.

build_palette() converts every entry to RGB and Lab exactly once. A
PaletteIndex owns one built Palette and creates it lazily on first use;
after that the palette is read-only and shared freely between threads.

Entries iterate in lexicographic name order. Matching relies on that order
to break ties deterministically.
"""

from __future__ import annotations

import functools
import json
import logging
import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import numpy as np

from tw_matcher.core.convert import RGB, Lab, hex_to_rgb, rgb_to_lab
from tw_matcher.core.errors import InvalidColourFormat, InvalidPaletteEntry
from tw_matcher.core.tailwind import TAILWIND_COLOURS

logger = logging.getLogger(__name__)

SEPARATOR = '-'


@dataclass(frozen=True)
class Leaf:
    """A single hex colour."""

    hex: str


@dataclass(frozen=True)
class Group:
    """Named children, each a Leaf or a nested Group."""

    children: Mapping[str, PaletteNode] = field(default_factory=dict)


PaletteNode = Union[Leaf, Group]


def node_from_mapping(raw: Mapping[Any, Any]) -> Group:
    """Turn a provider mapping (name → hex | nested mapping) into a Group."""
    children: dict[str, PaletteNode] = {}
    for key, value in raw.items():
        name = str(key)
        if name in children:
            raise InvalidPaletteEntry(name, 'duplicate name after flattening')
        if isinstance(value, str):
            children[name] = Leaf(value)
        elif isinstance(value, Mapping):
            children[name] = node_from_mapping(value)
        elif isinstance(value, (Leaf, Group)):
            children[name] = value
        else:
            raise InvalidPaletteEntry(name, f'expected a hex string or mapping, got {type(value).__name__}')
    return Group(children)


def flatten(node: PaletteNode, prefix: str = '') -> dict[str, str]:
    """Flatten a palette tree into {composed-name: hex}."""
    if isinstance(node, Leaf):
        if not prefix:
            raise InvalidPaletteEntry('', 'a bare leaf has no name')
        return {prefix: node.hex}

    result: dict[str, str] = {}
    for key, child in node.children.items():
        name = f'{prefix}{SEPARATOR}{key}' if prefix else key
        for flat_name, hex_str in flatten(child, name).items():
            if flat_name in result:
                raise InvalidPaletteEntry(flat_name, 'duplicate name after flattening')
            result[flat_name] = hex_str
    return result


@dataclass(frozen=True)
class PaletteEntry:
    name: str
    hex: str
    rgb: RGB
    lab: Lab


class Palette:
    """Read-only set of named colours with their Lab values precomputed."""

    def __init__(self, entries: list[PaletteEntry]):
        ordered = sorted(entries, key=lambda e: e.name)
        self._entries: dict[str, PaletteEntry] = {e.name: e for e in ordered}
        if len(self._entries) != len(ordered):
            raise ValueError('Palette entry names must be unique')
        self._lab_array = np.array([e.lab for e in ordered], dtype=np.float64).reshape(-1, 3)
        self._lab_array.setflags(write=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __getitem__(self, name: str) -> PaletteEntry:
        try:
            return self._entries[name]
        except KeyError:
            raise KeyError(f'Unknown colour: {name!r} ({len(self._entries)} colours in palette)') from None

    def __repr__(self) -> str:
        return f'Palette({len(self)} entries)'

    def names(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> list[PaletteEntry]:
        return list(self._entries.values())

    def hex_for(self, name: str) -> str:
        """Hex value of a palette colour. KeyError for unknown names."""
        return self[name].hex

    @property
    def lab_array(self) -> np.ndarray:
        """(n, 3) Lab values, rows aligned with iteration order."""
        return self._lab_array


def build_palette(source: PaletteNode | Mapping[Any, Any]) -> Palette:
    """Flatten a palette source and convert each colour to RGB and Lab.

    Raises InvalidPaletteEntry on the first malformed colour.
    """
    node = source if isinstance(source, (Leaf, Group)) else node_from_mapping(source)
    entries = []
    for name, hex_str in flatten(node).items():
        try:
            rgb = hex_to_rgb(hex_str)
        except InvalidColourFormat as e:
            raise InvalidPaletteEntry(name, str(e)) from e
        entries.append(PaletteEntry(name=name, hex=hex_str, rgb=rgb, lab=rgb_to_lab(rgb)))
    palette = Palette(entries)
    logger.debug('Built palette with %d colours', len(palette))
    return palette


class PaletteIndex:
    """Owns a palette source and its built, Lab-cached Palette.

    The palette is built on first access to .palette and never rebuilt.
    Concurrent first accesses block on a lock so only one build happens.
    """

    def __init__(self, source: PaletteNode | Mapping[Any, Any]):
        self._source = source
        self._palette: Palette | None = None
        self._lock = threading.Lock()

    @property
    def built(self) -> bool:
        return self._palette is not None

    @property
    def palette(self) -> Palette:
        if self._palette is None:
            with self._lock:
                if self._palette is None:
                    self._palette = build_palette(self._source)
        return self._palette


@functools.lru_cache(maxsize=None)
def default_index() -> PaletteIndex:
    """Process-wide index over the Tailwind palette."""
    return PaletteIndex(TAILWIND_COLOURS)


def load_palette_file(path: str | Path) -> Group:
    """Read a JSON palette file in the provider shape."""
    path = Path(path)
    with open(path, encoding='utf-8') as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidPaletteEntry(str(path), f'not valid JSON ({e})') from e
    if not isinstance(raw, Mapping):
        raise InvalidPaletteEntry(str(path), 'palette file must contain a JSON object')
    logger.info('Loaded palette file %s', path)
    return node_from_mapping(raw)
