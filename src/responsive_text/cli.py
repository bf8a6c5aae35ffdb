"""
Command-line interface for Responsive Text.

Usage:
    responsive-text CSV WORDCOL SCORECOL [OUTFILE] [LEVELS] [MINWIDTH] [MAXWIDTH] [IGNORECOL]

    responsive-text aliceout.csv token llrank responsive.html 10 200 800 vtoken
    responsive-text aliceout.csv token llrank --clamp-tiers
    responsive-text aliceout.csv token llrank --output-json
"""

import argparse
import csv
import sys
from typing import List, Optional

from pydantic import ValidationError

from responsive_text.analysis.range_scanner import (
    InsufficientRangeError,
    UnboundedRangeError,
)
from responsive_text.config import get_config
from responsive_text.ingestion.csv_reader import MissingColumnError
from responsive_text.logging_config import setup_logging
from responsive_text.pipeline import run_conversion


PARAMETER_HELP = """\
Parameters
----------
 CSV        : The CSV file to use as input
 WORDCOL    : The column header holding content to output
 SCORECOL   : The column header for the (numeric) salience score
 OUTFILE    : Name of the output HTML file.
 LEVELS     : Number of levels to use (granularity)
 MINWIDTH   : Width to show almost nothing (in px)
 MAXWIDTH   : Width to show everything (in px)
 IGNORECOL  : If this column is ""/false, will not bother to process
              that token (but will still output it).  Used for formatting.
"""


class UsageError(Exception):
    """Fewer than the three required positional arguments were given."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="responsive-text",
        description="Convert a salience-scored CSV into a width-responsive HTML page",
        epilog=PARAMETER_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Positionals, in the order of the original tool
    parser.add_argument("csv", nargs="?", metavar="CSV")
    parser.add_argument("word_col", nargs="?", metavar="WORDCOL")
    parser.add_argument("score_col", nargs="?", metavar="SCORECOL")
    parser.add_argument("outfile", nargs="?", metavar="OUTFILE")
    parser.add_argument("levels", nargs="?", type=int, metavar="LEVELS")
    parser.add_argument("min_width", nargs="?", type=int, metavar="MINWIDTH")
    parser.add_argument("max_width", nargs="?", type=int, metavar="MAXWIDTH")
    parser.add_argument("ignore_col", nargs="?", metavar="IGNORECOL")

    parser.add_argument(
        "--clamp-tiers",
        action="store_true",
        default=None,
        help="Put rows at the maximum score in the top tier instead of one past it",
    )
    parser.add_argument(
        "--no-escape-html",
        dest="escape_html",
        action="store_false",
        default=None,
        help="Copy content into the page without escaping markup",
    )
    parser.add_argument(
        "--no-fix-newlines",
        dest="fix_newlines",
        action="store_false",
        default=None,
        help="Keep embedded newlines instead of converting them to <br>",
    )
    parser.add_argument(
        "--min-sensitivity",
        type=float,
        default=None,
        help="Smallest score range that can be sliced into tiers (default: 0.001)",
    )
    parser.add_argument("--title", default=None, help="Page title")
    parser.add_argument("--delimiter", default=None, help="CSV field delimiter")
    parser.add_argument(
        "--output-json",
        action="store_true",
        default=False,
        help="Output the run summary as JSON (for CI/automation)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Log progress details to stderr",
    )
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")

    return parser


def _check_required(args: argparse.Namespace) -> None:
    if args.csv is None or args.word_col is None or args.score_col is None:
        raise UsageError("CSV, WORDCOL and SCORECOL are required")


def _run(args: argparse.Namespace) -> None:
    _check_required(args)

    try:
        config = get_config(
            output_path=args.outfile,
            levels=args.levels,
            min_width=args.min_width,
            max_width=args.max_width,
            clamp_tiers=args.clamp_tiers,
            escape_html=args.escape_html,
            fix_newlines=args.fix_newlines,
            minimum_sensitivity=args.min_sensitivity,
            page_title=args.title,
            csv_delimiter=args.delimiter,
            log_level="INFO" if args.verbose else None,
            log_file=args.log_file,
        )
    except ValidationError as exc:
        print(f"ERROR: Invalid configuration:\n{exc}")
        sys.exit(1)

    setup_logging(config.log_level, config.log_file)

    if not args.output_json:
        ignore_label = args.ignore_col if args.ignore_col else "<not specified>"
        print(
            f"Reading CSV (tokens: {args.word_col}, salience: {args.score_col}, "
            f"ignore: {ignore_label})"
        )

    try:
        result = run_conversion(
            args.csv,
            args.word_col,
            args.score_col,
            ignore_column=args.ignore_col,
            config=config,
        )
    except InsufficientRangeError as exc:
        print(str(exc))
        print("Perhaps try transforming them or something?")
        sys.exit(1)
    except UnboundedRangeError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    except MissingColumnError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    # JSON output mode (for CI/automation)
    if args.output_json:
        print(result.to_json())
        sys.exit(0)

    score_range = result.score_range
    print(f"Read {result.row_count} rows.")
    print(
        f"Range for salience: {round(score_range.span, 2)} "
        f"({round(score_range.min, 2)}, {round(score_range.max, 2)})"
    )
    print(f"Wrote output to {result.output_path}")
    print("Done.")


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    # Flags may sit between or after the positionals
    args = parser.parse_intermixed_args(argv)

    try:
        _run(args)
    except UsageError:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
