"""Command-line front door for keylaunch.

Builds the application index, runs one query through the enabled matchers,
and prints the ranked candidates grouped by category.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from .render import dim, render_label_ansi
from .runtime.config import CATEGORIES, load_launcher_settings, save_enabled_categories
from .search import Launcher

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Match a launcher query against applications, files and shell commands."
    )
    parser.add_argument("query", help="Query text, e.g. 'fire', '~/Doc' or 'echo hi'.")
    parser.add_argument(
        "--category",
        action="append",
        choices=CATEGORIES,
        default=None,
        help="Only show this category (repeatable). Defaults to the configured categories.",
    )
    parser.add_argument(
        "--save-categories",
        action="store_true",
        help="Persist the --category selection as the default for later runs.",
    )
    parser.add_argument("--limit", type=_positive_int, default=None, help="Maximum results per category.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries and directories.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, run the query and print results.

    Returns ``0`` when at least one candidate was printed and ``1`` otherwise.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    settings = load_launcher_settings()
    if args.category:
        settings = replace(settings, enabled_categories=frozenset(args.category))
        if args.save_categories:
            save_enabled_categories({category: category in args.category for category in CATEGORIES})

    launcher = Launcher(settings)
    if settings.is_enabled("apps"):
        launcher.reindex()

    no_color = args.no_color or not _stdout_is_tty()
    results = launcher.search(args.query)
    printed = 0
    for category, entries in results.by_category():
        if args.limit is not None:
            entries = entries[: args.limit]
        for entry in entries:
            tag = dim(f"[{category}]", no_color)
            label = render_label_ansi(entry.label, no_color)
            sys.stdout.write(f"{tag} {label}  {dim(entry.command, no_color)}\n")
            printed += 1
    return 0 if printed else 1


if __name__ == "__main__":
    raise SystemExit(main())
