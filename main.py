# main.py

"""Entry point for the smart_cart command-line tools."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging

logger = logging.getLogger("smart_cart.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="smart_cart",
        description="Grocery price comparison across stores.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser(
        "compare",
        help="Compare one item's listings from a JSON file.",
    )
    compare.add_argument(
        "listings",
        help="Path to a JSON array of product records.",
    )
    compare.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )

    subparsers.add_parser(
        "stores",
        help="List the configured stores.",
    )
    return parser


def main() -> None:
    """Dispatch to the selected sub-command and exit with its status."""
    log_file = setup_logging()
    logger.info("smart_cart starting, log file: %s", log_file)

    args = _build_parser().parse_args()

    from src.cli.runner import run_compare, run_list_stores

    if args.command == "compare":
        exit_code = run_compare(args.listings, args.output_format)
    else:
        exit_code = run_list_stores()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
