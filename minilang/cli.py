#!/usr/bin/env python3
"""
Command-line driver for the minilang recognizer.

Reads one or more programs (files, ``-e`` strings, or the built-in sample),
scans and recognizes each of them and prints the verdict. The exit status is
0 only when every input is accepted.
"""

import argparse
import sys
from typing import List, Optional, Tuple

from minilang.api.batch import results_frame
from minilang.parser.config import ParserConfig
from minilang.parser.recognizer import check_source
from minilang.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

SAMPLE_PROGRAM = """
x = 3 + 5
if (x > 2) {
  y = 3
}else {
  y = 5
} """


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang-check",
        description="Check whether programs belong to the minilang grammar."
    )
    parser.add_argument("files", nargs="*", help="Source files to check (default: built-in sample)")
    parser.add_argument("-e", "--expr", action="append", default=[], metavar="TEXT",
                        help="Check TEXT directly; may be repeated")
    parser.add_argument("--tokens", action="store_true", help="Print the scanned tokens")
    parser.add_argument("--summary", action="store_true",
                        help="Print a table of verdicts for all inputs")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    strictness = parser.add_mutually_exclusive_group()
    strictness.add_argument("--strict", dest="strict", action="store_true", default=True,
                            help="Require the delimiters of if/else (default)")
    strictness.add_argument("--lenient", dest="strict", action="store_false",
                            help="Skip missing if/else delimiters silently")
    return parser


def _collect_inputs(args: argparse.Namespace) -> List[Tuple[str, str]]:
    inputs = []
    for path in args.files:
        with open(path, "r", encoding="utf-8") as f:
            inputs.append((path, f.read()))
    for i, text in enumerate(args.expr, 1):
        inputs.append((f"<expr {i}>", text))
    if not inputs:
        inputs.append(("<sample>", SAMPLE_PROGRAM))
    return inputs


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(log_level=args.log_level)
    config = ParserConfig(strict_delimiters=args.strict)

    try:
        inputs = _collect_inputs(args)
    except OSError as e:
        print(f"Cannot read input: {e}", file=sys.stderr)
        return 2

    all_ok = True
    results = []
    for name, text in inputs:
        logger.debug("Checking %s", name)
        result = check_source(text, config)
        results.append(result)
        if len(inputs) > 1:
            print(f"== {name}")
        if args.tokens:
            print("Tokens:", "[" + " ".join(str(t) for t in result.tokens) + "]")
        if result.ok:
            print("Parsing successful.")
        else:
            print("Parsing failed:", result.error)
            all_ok = False

    if args.summary:
        df = results_frame([text for _, text in inputs], results)
        df.insert(0, 'name', [name for name, _ in inputs])
        print(df.drop(columns=['source']).to_string(index=False))

    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
