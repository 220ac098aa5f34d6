"""Configuration from the environment and .env files.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  TW_MATCHER_PALETTE_FILE  JSON palette used instead of Tailwind's
  TW_MATCHER_LOG_LEVEL     logging level name (default WARNING)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'TW_MATCHER_'
PALETTE_FILE_VAR = f'{ENV_PREFIX}PALETTE_FILE'
LOG_LEVEL_VAR = f'{ENV_PREFIX}LOG_LEVEL'


@dataclass(frozen=True)
class Settings:
    palette_file: str | None = None
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            palette_file=env.get(PALETTE_FILE_VAR) or None,
            log_level=(env.get(LOG_LEVEL_VAR) or 'WARNING').upper(),
        )


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(text: str) -> dict[str, str]:
    """KEY=value lines; quotes around values are dropped, # lines skipped."""
    values: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ where unset. Returns the file used."""
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in parse_dotenv(path.read_text(encoding='utf-8')).items():
        os.environ.setdefault(key, value)
    return path
