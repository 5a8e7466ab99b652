# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Quick-look summaries of a Dataset, in the spirit of pandas'
``head()``, ``info()``, ``describe()`` and ``isnull().sum()``.
"""

import math
from typing import List

import numpy as np
import pandas as pd

from .cells import is_missing, to_number
from .tabular import Dataset, columns

DESCRIBE_STATS = ["count", "mean", "std", "min", "25%", "50%", "75%", "max"]


def head(dataset: Dataset, n: int = 5) -> pd.DataFrame:
    return pd.DataFrame(list(dataset[:n]), columns=columns(dataset))


def _first_present(dataset: Dataset, column: str):
    for row in dataset:
        value = row.get(column)
        if not is_missing(value):
            return value
    return None


def numeric_columns(dataset: Dataset) -> List[str]:
    """Columns whose first non-missing cell reads as a number."""
    return [
        col
        for col in columns(dataset)
        if to_number(_first_present(dataset, col)) is not None
    ]


def info(dataset: Dataset) -> pd.DataFrame:
    numeric = set(numeric_columns(dataset))
    cols = columns(dataset)
    return pd.DataFrame(
        {
            "dtype": ["float64" if c in numeric else "object" for c in cols],
            "non_null": [
                sum(not is_missing(row.get(c)) for row in dataset) for c in cols
            ],
        },
        index=pd.Index(cols, name="column"),
    )


def null_counts(dataset: Dataset) -> pd.Series:
    cols = columns(dataset)
    return pd.Series(
        [sum(is_missing(row.get(c)) for row in dataset) for c in cols],
        index=cols,
        dtype=int,
        name="nulls",
    )


def quantile_floor(sorted_values: np.ndarray, q: float) -> float:
    """
    Element at ``floor(len * q)`` of an ascending array.

    No interpolation: the 50% of [1, 2, 3, 4] is 3, not 2.5.
    """
    return float(sorted_values[math.floor(len(sorted_values) * q)])


def describe(dataset: Dataset) -> pd.DataFrame:
    """
    Count, mean, population std, min, quartiles and max of every
    numeric column. Cells that do not read as numbers are skipped.
    """
    stats = {}
    for col in numeric_columns(dataset):
        values = [to_number(row.get(col)) for row in dataset]
        v = np.sort(np.array([x for x in values if x is not None], dtype=float))
        if v.size == 0:
            continue
        stats[col] = [
            float(v.size),
            float(v.mean()),
            float(v.std()),
            float(v[0]),
            quantile_floor(v, 0.25),
            quantile_floor(v, 0.5),
            quantile_floor(v, 0.75),
            float(v[-1]),
        ]
    return pd.DataFrame(stats, index=DESCRIBE_STATS)
