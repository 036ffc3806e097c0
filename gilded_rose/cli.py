"""
CLI interface for the Gilded Rose inventory.

  simulate: Stock the sample (or a generated) inventory, advance it day by
            day and print each day's items plus the final inventory hash.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from gilded_rose.engine import DayReport


def _setup_logging(verbose: bool = False) -> None:
    """Configure structured logging."""
    level = logging.DEBUG if verbose else logging.INFO
    fmt = "%(asctime)s [%(levelname)-7s] %(name)s — %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _print_text(reports: List[DayReport]) -> None:
    for report in reports:
        print(f"-------- day {report.day} --------")
        print("name, sellIn, quality")
        for item in report.items:
            print(f"{item.name}, {item.sell_in}, {item.quality}")
        print()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="gilded_rose",
        description="Gilded Rose inventory simulation",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug-level logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sim_p = sub.add_parser("simulate", help="Advance an inventory day by day")
    sim_p.add_argument(
        "--days", type=_non_negative, default=2, help="Days to simulate (default 2)"
    )
    sim_p.add_argument(
        "--count", type=_non_negative, default=None,
        help="Generate this many random items instead of the sample stock",
    )
    sim_p.add_argument(
        "--seed", type=int, default=42, help="Random seed for --count (default 42)"
    )
    sim_p.add_argument(
        "--json", action="store_true", help="Print reports as JSON lines"
    )

    args = parser.parse_args(argv)
    _setup_logging(verbose=args.verbose)

    logger = logging.getLogger("gilded_rose.cli")

    if args.command == "simulate":
        from gilded_rose.engine import run_simulation
        from gilded_rose.fixtures import generate_items, sample_inventory

        try:
            if args.count is None:
                items = sample_inventory()
            else:
                items = generate_items(args.count, args.seed)
            reports = run_simulation(items, args.days)
            if args.json:
                for report in reports:
                    print(json.dumps(report.to_dict(), sort_keys=True))
            else:
                _print_text(reports)
                print(f"SIMULATE OK — Final inventory hash: {reports[-1].inventory_hash}")
        except Exception as exc:
            logger.exception("Simulation failed")
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
