#!/usr/bin/env python3
import argparse
import asyncio
import sys
from typing import List, Optional

from config import resolve_options
from errors import ReindentError
from file_utils import match_files
from reindent_worker import run_files
from schemas_common import RunSummary
from time_utils import elapsed_ms, now_monotonic

EXIT_OK = 0
EXIT_FAILED_FILES = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabby",
        description="Rewrite leading whitespace of text files to a consistent indentation.",
    )
    parser.add_argument("files", nargs="+", help="File or files to match (glob patterns).")
    parser.add_argument(
        "-r", "--recursive", action=argparse.BooleanOptionalAction, default=None,
        help="Match in every subdirectory of the home directory too.",
    )
    parser.add_argument(
        "-t", "--tab-size", type=int, default=None,
        help="Set the tab size. Defaults to 4, or 1 with --smart.",
    )
    parser.add_argument(
        "-s", "--smart", action=argparse.BooleanOptionalAction, default=None,
        help="Infer indentation levels instead of keeping the existing widths.",
    )
    parser.add_argument(
        "-d", "--home-directory", default=None,
        help="Starting directory for matching (default: '.').",
    )
    parser.add_argument(
        "-v", "--verbose", action=argparse.BooleanOptionalAction, default=None,
        help="Print per-file progress.",
    )
    return parser


def run(argv: Optional[List[str]] = None) -> RunSummary:
    args = build_parser().parse_args(argv)
    started = now_monotonic()

    options = resolve_options(
        smart=args.smart,
        tab_size=args.tab_size,
        recursive=args.recursive,
        verbose=args.verbose,
        home_directory=args.home_directory,
    )
    paths = match_files(args.files, options.home_directory, recursive=options.recursive)
    if options.verbose:
        print(f"[tabby] matched={len(paths)}")

    results = asyncio.run(run_files(paths, options))
    return RunSummary.from_results(results, elapsed_ms(started))


def main(argv: Optional[List[str]] = None) -> int:
    try:
        summary = run(argv)
    except ReindentError as e:
        print(f"[tabby] error stage={e.stage} error={e.error}", file=sys.stderr)
        return EXIT_CONFIG

    print(summary.line())
    for f in summary.failed:
        print(f"[tabby] failed path={f.path} stage={f.stage} error={f.error}", file=sys.stderr)
    return EXIT_FAILED_FILES if summary.failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
