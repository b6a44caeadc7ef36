"""Command-line interface: enumerate the problem described in a YAML file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Hashable
from itertools import islice
from pathlib import Path

import yaml

from collectionkit.core.errors import CollectionKitError

from . import parser

logger = logging.getLogger(__name__)


def _dump(values) -> str:
    return json.dumps(list(values), default=str)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="collectionkit",
        description="Enumerate the combinations or subsets described in a YAML problem file",
    )
    ap.add_argument("problem", help="Path to problem YAML")
    ap.add_argument("--count", action="store_true", help="Only print the amount of possible values")
    ap.add_argument("--limit", type=int, default=None, help="Print at most this many values")
    ap.add_argument("--check", nargs="+", metavar="VALUE",
                    help="Tell whether these values form a possible combination (or subset)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)
    if args.limit is not None and args.limit < 0:
        ap.error("--limit must not be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        problem = parser.load_problem(Path(args.problem))
        enumerator = problem.enumerator()
    except (CollectionKitError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if problem.is_power_set:
        total = enumerator.amount_of_possible_subsets()
        print(f"Loaded set of {len(enumerator.elements)} elements: {total} possible subsets.")
    else:
        total = enumerator.amount_of_possible_combinations()
        print(f"Loaded {len(enumerator.domains)} slots: {total} possible combinations.")

    if args.check is not None:
        candidate = [yaml.safe_load(token) for token in args.check]
        if problem.is_power_set:
            possible = (
                all(isinstance(value, Hashable) for value in candidate)
                and enumerator.is_possible_subset(set(candidate))
            )
        else:
            possible = enumerator.is_possible_combination(candidate)
        print(f"{_dump(candidate)} is {'' if possible else 'not '}possible")
        return 0 if possible else 2

    if args.count:
        return 0

    if problem.is_power_set:
        values = enumerator.ordered_subsets()
    else:
        values = enumerator
    for value in islice(values, args.limit):
        print(_dump(value))
    logger.debug("printed %d of %d", enumerator.amount_generated_so_far(), total)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
