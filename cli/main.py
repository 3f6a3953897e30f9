"""invb: view transactions needed to rebalance an investment portfolio.

Usage:
    invb [-a <alloc>...] -c <current>... [-d <delta>]
"""
from __future__ import annotations

import argparse
import sys
from typing import Mapping, Optional, Sequence

from common.config_loader import ALLOC_ENV_VAR, load_config
from common.logging_setup import configure_logging, get_logger
from engine.rebalance_engine import rebalance
from parsing.errors import InputError
from parsing.resolver import parse_groups, parse_help
from reporting.summary import rebalance_table

log = get_logger(__name__)

NOTES = f"""\
Notes:
  * Numbers may be provided with comma thousands separators.
  * <alloc> and <current> must have an equal number of components.
  * <alloc> and <current> components must be specified in the same order.
  * <alloc> components must sum to 100.
  * <alloc> defaults to what's stored in the environment variable '{ALLOC_ENV_VAR}'.
  * <delta> defaults to 0.
"""


def build_help_parser() -> argparse.ArgumentParser:
    """Parser used only to render help; groups are scanned by ``parsing.groups``."""
    p = argparse.ArgumentParser(
        prog="invb",
        usage="%(prog)s [-a <alloc>...] -c <current>... [-d <delta>]",
        description="View transactions needed to rebalance an investment portfolio.",
        epilog=NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    p.add_argument(
        "-a",
        metavar="<alloc>",
        nargs="*",
        help="Ideal component allocations in percentages.",
    )
    p.add_argument(
        "-c",
        metavar="<current>",
        nargs="+",
        help="Current market value of components.",
    )
    p.add_argument(
        "-d",
        metavar="<delta>",
        help="Net change of portfolio value after transactions.",
    )
    p.add_argument("-h", "--help", action="store_true", help="Show this help message.")
    return p


def print_error(message: str) -> None:
    print(f"error:\n  {message}")


def run(argv: Sequence[str], environ: Optional[Mapping[str, str]] = None) -> int:
    """Run the calculator on ``argv`` (program name first) and return the exit code."""
    if parse_help(argv):
        build_help_parser().print_help(sys.stdout)
        return 0

    cfg = load_config(environ)

    try:
        alloc, current, delta = parse_groups(argv, default_alloc=cfg.default_alloc)
    except InputError as e:
        log.info("input.rejected", error_type=type(e).__name__)
        print_error(str(e))
        return 1

    result = rebalance(alloc, current, delta)

    try:
        table = rebalance_table(result)
    except OverflowError as e:
        print_error(str(e))
        return 1

    print(table.draw(), end="")
    return 0


def main():
    """Main entry point."""
    configure_logging()
    raise SystemExit(run(sys.argv))


if __name__ == "__main__":
    main()
