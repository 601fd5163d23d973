"""Command line entry point for algoblocks."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import pandas as pd

from .graph import INFINITY, floyd_warshall
from .numeric import gcd, sieve
from .pipeline import ComponentsConfig, PrefixSumConfig
from .runner import components_file, prefix_sums_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic algorithmic building blocks.")
    commands = parser.add_subparsers(dest="command", required=True)

    components = commands.add_parser("components", help="Group an edge list into connected components")
    components.add_argument("input", type=Path, help="CSV or Excel file with one edge per row")
    components.add_argument("output", type=Path, help="Path where the labelled nodes will be written")
    components.add_argument(
        "--left-column",
        default=os.getenv("ALGOBLOCKS_LEFT_COLUMN", "source"),
        help="Column holding the first endpoint (default: source)",
    )
    components.add_argument(
        "--right-column",
        default=os.getenv("ALGOBLOCKS_RIGHT_COLUMN", "target"),
        help="Column holding the second endpoint (default: target)",
    )
    components.add_argument("--raw-labels", action="store_true", help="Use labels exactly as read")
    components.add_argument("--disable-tqdm", action="store_true", help="Disable progress bars")
    components.add_argument("--quiet", action="store_true", help="Suppress progress messages")

    prefix = commands.add_parser("prefix-sums", help="Append running totals of a numeric column")
    prefix.add_argument("input", type=Path, help="CSV or Excel input file")
    prefix.add_argument("output", type=Path, help="Path where the annotated rows will be written")
    prefix.add_argument(
        "--value-column",
        default=os.getenv("ALGOBLOCKS_VALUE_COLUMN", "value"),
        help="Column to accumulate (default: value)",
    )
    prefix.add_argument("--output-column", default="prefix_sum", help="Name of the added column")
    prefix.add_argument("--quiet", action="store_true", help="Suppress progress messages")

    primes = commands.add_parser("primes", help="List the primes up to N")
    primes.add_argument("n", type=int)

    divisor = commands.add_parser("gcd", help="Greatest common divisor of A and B")
    divisor.add_argument("a", type=int)
    divisor.add_argument("b", type=int)

    paths = commands.add_parser("shortest-paths", help="All-pairs shortest paths of an adjacency matrix")
    paths.add_argument("matrix", type=Path, help="Headerless CSV adjacency matrix, 0 meaning no edge")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    if args.command == "components":
        config = ComponentsConfig(
            left_column=args.left_column,
            right_column=args.right_column,
            normalize_labels=not args.raw_labels,
            use_tqdm=not args.disable_tqdm,
            verbose=not args.quiet,
        )
        return 0 if components_file(args.input, args.output, config) is not None else 1

    if args.command == "prefix-sums":
        config = PrefixSumConfig(
            value_column=args.value_column,
            output_column=args.output_column,
            verbose=not args.quiet,
        )
        return 0 if prefix_sums_file(args.input, args.output, config) is not None else 1

    try:
        if args.command == "primes":
            print(" ".join(str(p) for p in sieve(args.n)))
        elif args.command == "gcd":
            print(gcd(args.a, args.b))
        elif args.command == "shortest-paths":
            adjacency = pd.read_csv(args.matrix, header=None).to_numpy()
            for row in floyd_warshall(adjacency):
                print(" ".join("inf" if d == INFINITY else str(d) for d in row))
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{args.matrix}'.")
        return 1
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
