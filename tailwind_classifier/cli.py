#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .group_classes import group_classes
from .rewrite import ClassifierError, check_language, line_selection, rewrite_document
from .settings import load_settings


def parse_line_range(raw: str) -> Tuple[int, int]:
    first, sep, last = raw.partition('-')
    try:
        a = int(first)
        b = int(last) if sep else a
    except ValueError:
        raise SystemExit(f"--lines expects N or N-M, got {raw!r}")
    if a < 1 or b < a:
        raise SystemExit(f"--lines expects N or N-M with 1 <= N <= M, got {raw!r}")
    return a, b


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='tailwind-classifier',
        description='Group Tailwind classes in className attributes by category',
    )
    ap.add_argument('paths', nargs='*', help='JS/TS/JSX/TSX files to rewrite in place')
    ap.add_argument('--classes', help='Print the groups for a class string (one per line) and exit')
    ap.add_argument('--stdin', action='store_true', help='Read source from stdin and write the result to stdout')
    ap.add_argument('--language-path', default='stdin.tsx', help='File name used for the language check with --stdin')
    ap.add_argument('--lines', help='Only rewrite this 1-based line range (e.g. 10-24)')
    ap.add_argument('--attribute', help='Attribute name to rewrite (default: className or TWC_ATTRIBUTE)')
    ap.add_argument('--helper', help='Merge helper for multi-group output (default: clsx or TWC_MERGE_HELPER)')
    ap.add_argument('--backup', action='store_true', help='Write <file>.twc.bak before the first modification')
    ap.add_argument('--dry-run', action='store_true', help='Report only, do not write files')
    return ap


def rewrite_file(path: Path, args, settings) -> int:
    check_language(path, settings.extensions)
    src = path.read_text(encoding='utf-8')
    selection = None
    if args.lines:
        selection = line_selection(src, *parse_line_range(args.lines))
    out, changed = rewrite_document(src, selection, args.attribute, args.helper)
    if args.dry_run:
        print(f"[DRY-RUN] {path} would change {changed} attributes")
        return changed
    if changed:
        bak = path.with_suffix(path.suffix + '.twc.bak')
        if (args.backup or settings.backup) and not bak.exists():
            bak.write_text(src, encoding='utf-8')
        path.write_text(out, encoding='utf-8')
    print(f"[GROUP] {path} changed={changed}")
    return changed


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    settings = load_settings()
    args.attribute = args.attribute or settings.attribute
    args.helper = args.helper or settings.helper

    if args.classes is not None:
        if args.paths or args.stdin:
            ap.error('--classes cannot be combined with files or --stdin')
        for g in group_classes(args.classes):
            print(g)
        return 0

    if args.stdin:
        try:
            check_language(args.language_path, settings.extensions)
            src = sys.stdin.read()
            selection = line_selection(src, *parse_line_range(args.lines)) if args.lines else None
        except ClassifierError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return 1
        out, _ = rewrite_document(src, selection, args.attribute, args.helper)
        sys.stdout.write(out)
        return 0

    if not args.paths:
        ap.error('nothing to do: pass files, --stdin or --classes')

    failed = 0
    total = 0
    for raw in args.paths:
        path = Path(raw)
        try:
            total += rewrite_file(path, args, settings)
        except (ClassifierError, OSError, UnicodeDecodeError) as e:
            failed += 1
            print(f"[ERROR] {e}", file=sys.stderr)
    print(f"[GROUP] files={len(args.paths)} skipped={failed} changed={total}")
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
