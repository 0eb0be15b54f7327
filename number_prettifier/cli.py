"""Command-line shell: read numbers and print their prettified form."""

from __future__ import annotations

import argparse
import re
import sys
import time
from typing import Optional, Sequence, Union

from .logging_utils import configure_console_logging, get_logger
from .preferences import (
    CliPreferences,
    PreferencesError,
    apply_overrides,
    load_preferences,
    normalize_log_level,
)
from .prettifier import prettify
from .version import PACKAGE_VERSION, display_version


_log = get_logger("cli")

PROMPT = "Enter a number (i.e. 591444894 or 45000.6) to prettify: "

EXIT_OK = 0
EXIT_OUT_OF_RANGE = 1
EXIT_USAGE = 2

_INTEGER_RE = re.compile(r"^[+-]?\d+(?:_\d+)*$")


def parse_number(text: str) -> Union[int, float]:
    """Parse user input as an int when it has no fraction, else as a float.

    Raises ``ValueError`` for anything that is not a number.
    """

    cleaned = text.strip()
    if _INTEGER_RE.match(cleaned):
        return int(cleaned)
    return float(cleaned)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prettify",
        description="Print numbers in compact short-scale form (e.g., 1123456 -> 1.1M).",
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        help="Number(s) to prettify. Prompts on stdin when omitted.",
    )
    parser.add_argument(
        "--timing",
        action="store_true",
        default=None,
        help="Also print how long each conversion took.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=None,
        help="Print only the prettified values.",
    )
    parser.add_argument(
        "--placeholder",
        default=None,
        help="Text printed for values outside the supported range (default: '--').",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON preferences file.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING).")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {display_version(PACKAGE_VERSION)}",
    )
    return parser


def _merge_arguments(prefs: CliPreferences, args: argparse.Namespace) -> CliPreferences:
    overrides = {}
    if args.placeholder is not None:
        overrides["placeholder"] = args.placeholder
    if args.timing is not None:
        overrides["show_timing"] = args.timing
    if args.quiet is not None:
        overrides["quiet"] = args.quiet
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    apply_overrides(prefs, overrides)
    return prefs


def _read_input() -> Optional[str]:
    print(PROMPT, end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        print()
        return None
    return line


def _prettify_one(raw: str, prefs: CliPreferences) -> int:
    try:
        number = parse_number(raw)
    except ValueError:
        print(f"error: invalid format: {raw.strip()!r}", file=sys.stderr)
        return EXIT_USAGE

    start = time.perf_counter()
    result = prettify(number)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    status = EXIT_OK
    if result is None:
        _log.info("Value %r is outside the supported range", number)
        result = prefs.placeholder
        status = EXIT_OUT_OF_RANGE

    if prefs.quiet:
        print(result)
    else:
        print(f"Prettified version of {raw.strip()} is: {result}")
    if prefs.show_timing:
        print(f"Running time: {elapsed_ms:.3f} ms")
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # Console output first so preference-loading warnings are visible.
    configure_console_logging(normalize_log_level(args.log_level))

    try:
        prefs = load_preferences(args.config)
    except PreferencesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    prefs = _merge_arguments(prefs, args)
    configure_console_logging(prefs.log_level)

    inputs = list(args.numbers)
    if not inputs:
        line = _read_input()
        if line is None:
            print("error: no input provided", file=sys.stderr)
            return EXIT_USAGE
        inputs = [line]

    status = EXIT_OK
    for raw in inputs:
        status = max(status, _prettify_one(raw, prefs))
    return status


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
