#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Command line front end

    tabreg describe data.csv
    tabreg counts data.csv --column brand
    tabreg train data.csv --features size,rooms --target price --seed 42
"""

import argparse
import json
import logging
import sys
from collections import defaultdict
from typing import Dict, List, Optional

import pandas as pd

from . import summary
from .errors import TabregError
from .pipeline import TrainingConfig, apply_replacements, train_and_evaluate
from .tabular import unique_values, value_counts

logger = logging.getLogger(__name__)


def load_rows(path: str) -> List[dict]:
    return pd.read_csv(path).to_dict("records")


def parse_replacements(specs: List[str]) -> Dict[str, Dict[str, float]]:
    """``["color:red=1", "color:blue=2"]`` -> ``{"color": {"red": 1.0, "blue": 2.0}}``"""
    maps: Dict[str, Dict[str, float]] = defaultdict(dict)
    for spec in specs:
        try:
            column, rest = spec.split(":", 1)
            original, new = rest.rsplit("=", 1)
            maps[column][original] = float(new)
        except ValueError:
            raise argparse.ArgumentTypeError(
                f"bad replacement {spec!r}, expected COLUMN:VALUE=NUMBER"
            )
    return dict(maps)


def cmd_describe(args) -> int:
    rows = load_rows(args.csv)
    print(f"shape: ({len(rows)}, {len(summary.info(rows))})\n")
    print(summary.head(rows, args.rows).to_markdown())
    print()
    print(summary.info(rows).to_markdown())
    print()
    print(summary.describe(rows).to_markdown(floatfmt=".2f"))
    print()
    print(summary.null_counts(rows).to_markdown())
    return 0


def cmd_counts(args) -> int:
    rows = load_rows(args.csv)
    if args.unique:
        for value in unique_values(rows, args.column):
            print(value)
        return 0
    table = pd.DataFrame(
        [(vc.value, vc.count) for vc in value_counts(rows, args.column)],
        columns=["value", "count"],
    )
    print(table.to_markdown(index=False))
    return 0


def cmd_train(args) -> int:
    rows = load_rows(args.csv)
    for column, mapping in parse_replacements(args.replace).items():
        rows = apply_replacements(rows, column, mapping)

    config = TrainingConfig.from_strings(
        args.features, args.target, args.test_size, args.seed
    )
    report = train_and_evaluate(rows, config)
    results = report.to_dict()

    params = pd.DataFrame(
        {
            "term": ["intercept", *config.features],
            "estimate": [report.model.intercept, *report.model.coefficients],
        }
    )
    print(params.to_markdown(index=False, floatfmt=".6f"))
    print()
    print(
        pd.Series(results["metrics"], name="test").to_markdown(floatfmt=".6f")
    )

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        logger.info(f"wrote results to {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabreg", description="Explore a CSV and fit a linear regression"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("describe", help="head, info, describe and null counts")
    p.add_argument("csv")
    p.add_argument("--rows", type=int, default=5)
    p.set_defaults(func=cmd_describe)

    p = sub.add_parser("counts", help="value counts of one column")
    p.add_argument("csv")
    p.add_argument("--column", required=True)
    p.add_argument("--unique", action="store_true", help="list distinct values")
    p.set_defaults(func=cmd_counts)

    p = sub.add_parser("train", help="split, fit and evaluate")
    p.add_argument("csv")
    p.add_argument("--features", required=True, help="comma separated columns")
    p.add_argument("--target", required=True)
    p.add_argument("--test-size", type=float, default=0.2)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument(
        "--replace",
        action="append",
        default=[],
        metavar="COLUMN:VALUE=NUMBER",
        help="map a categorical value to a number (repeatable)",
    )
    p.add_argument("--output", help="write results JSON here")
    p.set_defaults(func=cmd_train)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except TabregError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
