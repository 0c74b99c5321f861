"""
Rewrite className="..." attributes in JS/TS source with grouped classes.

  className="flex p-2 text-sm"
    -> className={clsx("p-2", "text-sm", "flex")}

A value that groups into a single category keeps the plain attribute form.
Whitespace-only values produce no groups and are left untouched, as are
attributes that are already grouped (whitespace included).
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .group_classes import group_classes, split_classes


class ClassifierError(Exception):
    pass


class LineRangeError(ClassifierError, ValueError):
    """Raised when a line range does not select any line of the document."""


class UnsupportedLanguageError(ClassifierError):
    """Raised for file kinds the rewriter does not handle; nothing is modified."""

    def __init__(self, path, extensions: Iterable[str]):
        self.path = str(path)
        self.extensions = tuple(extensions)
        super().__init__(
            f"{self.path}: only JavaScript, TypeScript, or React files are supported "
            f"({', '.join(self.extensions)})"
        )


def class_attr_re(attribute: str = 'className') -> re.Pattern:
    return re.compile(rf'{re.escape(attribute)}\s*=\s*"([^"]+)"')


def format_class_attr(classes: str, attribute: str = 'className', helper: str = 'clsx') -> Optional[str]:
    groups = group_classes(classes.strip())
    if not groups:
        return None
    if len(groups) == 1:
        return f'{attribute}="{groups[0]}"'
    args = ', '.join(f'"{g}"' for g in groups)
    return f'{attribute}={{{helper}({args})}}'


def format_code(text: str, attribute: str = 'className', helper: str = 'clsx') -> Tuple[str, int]:
    """Single find-and-replace pass; returns (new_text, changed_attribute_count)."""
    changed = 0

    def repl(m: re.Match) -> str:
        nonlocal changed
        new = format_class_attr(m.group(1), attribute, helper)
        # already grouped; differs at most in whitespace
        if new is None or new == f'{attribute}="{" ".join(split_classes(m.group(1)))}"':
            return m.group(0)
        changed += 1
        return new

    out = class_attr_re(attribute).sub(repl, text)
    return out, changed


def rewrite_document(
    text: str,
    selection: Optional[Tuple[int, int]] = None,
    attribute: str = 'className',
    helper: str = 'clsx',
) -> Tuple[str, int]:
    # empty selection means the whole document
    if selection is None or selection[0] >= selection[1]:
        return format_code(text, attribute, helper)
    start, end = selection
    start = max(0, start)
    end = min(len(text), end)
    middle, changed = format_code(text[start:end], attribute, helper)
    return text[:start] + middle + text[end:], changed


def line_selection(text: str, first: int, last: int) -> Tuple[int, int]:
    """Character range covering 1-based lines first..last (inclusive)."""
    if first < 1 or last < first:
        raise LineRangeError(f"invalid line range {first}-{last}")
    lines = text.splitlines(keepends=True)
    if first > len(lines):
        raise LineRangeError(f"line range {first}-{last} starts past the last line ({len(lines)})")
    start = sum(len(ln) for ln in lines[:first - 1])
    end = sum(len(ln) for ln in lines[:last])
    return start, end


def check_language(path, extensions: Iterable[str]) -> None:
    exts = tuple(e.lower() for e in extensions)
    if Path(path).suffix.lower() not in exts:
        raise UnsupportedLanguageError(path, exts)
