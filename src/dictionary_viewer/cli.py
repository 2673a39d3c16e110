"""
Command-line interface for browsing and searching the dictionary.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .browser import DictionaryBrowser
from .exceptions import DictionaryViewerError
from .loader import check_sources, default_data_dir, find_session_sources
from .models import Entry, HighlightFragment, ValidationResult, ValidationSeverity
from .store import EntryStore

DATA_DIR_ENV = "DICTIONARY_VIEWER_DATA"

_BOLD = "\033[1m"
_RESET = "\033[0m"


def main(argv: Optional[list] = None) -> int:
    """Main entry point for dictionary-viewer CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dictionary-viewer",
        description="Browse and search a session-based dictionary",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help=(
            f"Directory of session files (default: ${DATA_DIR_ENV} "
            "or the bundled sample sessions)"
        ),
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Search words, definitions and examples",
    )
    search_parser.add_argument(
        "query",
        help="Text to look for (case-insensitive)",
    )
    search_parser.add_argument(
        "--session", "-s",
        type=int,
        help="Restrict the search to one session",
    )
    search_parser.add_argument(
        "--color",
        action="store_true",
        help="Emphasize matches with ANSI bold instead of [brackets]",
    )
    search_parser.set_defaults(func=cmd_search)

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="List entries",
    )
    list_parser.add_argument(
        "--session", "-s",
        type=int,
        help="Only list entries of this session",
    )
    list_parser.set_defaults(func=cmd_list)

    # sessions command
    sessions_parser = subparsers.add_parser(
        "sessions",
        help="List sessions and their entry counts",
    )
    sessions_parser.set_defaults(func=cmd_sessions)

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check session files for errors",
    )
    validate_parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Session files to check (default: every file in the data directory)",
    )
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def resolve_data_dir(args: argparse.Namespace) -> Path:
    """Data directory from --data-dir, the environment, or the package."""
    if args.data_dir is not None:
        return args.data_dir
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return default_data_dir()


def _open_store(args: argparse.Namespace) -> Optional[EntryStore]:
    data_dir = resolve_data_dir(args)
    try:
        return EntryStore.from_directory(data_dir)
    except (DictionaryViewerError, FileNotFoundError) as e:
        print(f"\n  [ERROR] {e}")
        return None


def cmd_search(args: argparse.Namespace) -> int:
    """Handle search command."""
    store = _open_store(args)
    if store is None:
        return 1

    browser = DictionaryBrowser(store)
    if args.session is not None:
        browser.select_session(args.session)
    browser.set_query(args.query)

    _print_summary(browser)
    if not browser.results:
        print(f"\nNo entries found for \"{args.query}\"")
        print("Try searching with different keywords")
        return 1

    for entry in browser.results:
        _print_highlighted(browser, entry, color=args.color)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Handle list command."""
    store = _open_store(args)
    if store is None:
        return 1

    browser = DictionaryBrowser(store)
    if args.session is not None:
        browser.select_session(args.session)

    _print_summary(browser)
    for entry in browser.results:
        _print_entry(entry)
    return 0


def cmd_sessions(args: argparse.Namespace) -> int:
    """Handle sessions command."""
    store = _open_store(args)
    if store is None:
        return 1

    sessions = store.get_available_sessions()
    print(f"\n{'No.':<6} {'Name':<30} {'Entries'}")
    print("-" * 46)
    for info in sessions:
        print(f"{info.number:<6} {info.name:<30} {info.entry_count}")
    print(f"\nAll sessions: {store.get_total_entry_count()} entries")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle validate command."""
    files = args.files
    if not files:
        data_dir = resolve_data_dir(args)
        try:
            files = find_session_sources(data_dir)
        except (DictionaryViewerError, FileNotFoundError) as e:
            print(f"\n  [ERROR] {e}")
            return 1

    print(f"\nValidating {len(files)} session file(s)...")
    results = check_sources(files)
    _print_validation_results(results)

    errors = sum(1 for r in results if r.severity == ValidationSeverity.ERROR)
    warnings = len(results) - errors
    if errors == 0:
        print("\nValidation passed!")
        if warnings:
            print(f"  ({warnings} warning(s))")
        return 0
    print(f"\nFound {errors} error(s), {warnings} warning(s)")
    return 1


def render_fragments(fragments: list[HighlightFragment], color: bool = False) -> str:
    """Join fragments, emphasizing matches."""
    parts = []
    for fragment in fragments:
        if not fragment.is_match:
            parts.append(fragment.text)
        elif color:
            parts.append(f"{_BOLD}{fragment.text}{_RESET}")
        else:
            parts.append(f"[{fragment.text}]")
    return "".join(parts)


def _print_summary(browser: DictionaryBrowser) -> None:
    line = browser.summary()
    if browser.selected_session is not None:
        line += f" (session {browser.selected_session})"
    print(f"\n{line}")


def _print_entry(entry: Entry) -> None:
    print(f"\n{entry.word}")
    print(f"  Definition: {entry.definition}")
    if entry.example:
        print(f"  Example:    {entry.example}")


def _print_highlighted(browser: DictionaryBrowser, entry: Entry, color: bool) -> None:
    h = browser.highlighted(entry)
    print(f"\n{render_fragments(h.word, color)}")
    print(f"  Definition: {render_fragments(h.definition, color)}")
    if h.example is not None:
        print(f"  Example:    {render_fragments(h.example, color)}")


def _print_validation_results(results: list[ValidationResult]) -> None:
    """Print validation errors and warnings."""
    for r in results:
        tag = "[ERROR]" if r.severity == ValidationSeverity.ERROR else "[WARN] "
        where = f"session {r.session}" if r.session is not None else "source"
        if r.index is not None:
            where += f", record #{r.index + 1}"
        print(f"  {tag} {r.rule_id} ({where}): {r.message}")


if __name__ == "__main__":
    sys.exit(main())
