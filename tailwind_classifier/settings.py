from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv


DEFAULT_EXTENSIONS = ('.js', '.jsx', '.ts', '.tsx', '.mjs', '.cjs')


@dataclass(frozen=True)
class Settings:
    attribute: str = 'className'
    helper: str = 'clsx'
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    backup: bool = False


def _parse_extensions(raw: str) -> Tuple[str, ...]:
    exts = []
    for s in raw.split(','):
        s = s.strip().lower()
        if not s:
            continue
        exts.append(s if s.startswith('.') else '.' + s)
    return tuple(exts) or DEFAULT_EXTENSIONS


def load_settings() -> Settings:
    """Read TWC_* values from the environment (and .env if present)."""
    load_dotenv()
    return Settings(
        attribute=os.getenv('TWC_ATTRIBUTE', 'className') or 'className',
        helper=os.getenv('TWC_MERGE_HELPER', 'clsx') or 'clsx',
        extensions=_parse_extensions(os.getenv('TWC_EXTENSIONS', ','.join(DEFAULT_EXTENSIONS))),
        backup=os.getenv('TWC_BACKUP', 'false').lower() == 'true',
    )
