# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Column utilities over a Dataset (a sequence of row mappings).
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

import numpy as np

from .cells import cell_text, is_real, to_number
from .errors import InsufficientData, InvalidColumn

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]
Dataset = Sequence[Row]
Scalar = Union[str, float, int]


@dataclass(frozen=True)
class ValueCount:
    value: str
    count: int


def columns(dataset: Dataset) -> List[str]:
    """Column names, taken from the first row."""
    if not dataset:
        return []
    return list(dataset[0].keys())


def _is_countable(value: Any) -> bool:
    if isinstance(value, str):
        return True
    return is_real(value) and not math.isnan(value)


def unique_values(dataset: Dataset, column: str) -> List[Scalar]:
    """
    Distinct string or numeric values of ``column``.

    Numbers sort ascending, strings lexicographically; a column holding
    both sorts by string form. ``1`` and ``"1"`` are different values.
    """
    seen: Dict[Tuple[bool, Any], Scalar] = {}
    for row in dataset:
        value = row.get(column)
        if not _is_countable(value):
            continue
        key = (isinstance(value, str), value)
        seen.setdefault(key, value)

    values = list(seen.values())
    if all(isinstance(v, str) for v in values):
        return sorted(values)
    if not any(isinstance(v, str) for v in values):
        return sorted(values, key=float)
    return sorted(values, key=cell_text)


def value_counts(dataset: Dataset, column: str) -> List[ValueCount]:
    """
    Occurrences of each value's string form, most frequent first.

    Ties keep the order in which the values were first met.
    """
    counts: Dict[str, int] = {}
    for row in dataset:
        key = cell_text(row.get(column))
        counts[key] = counts.get(key, 0) + 1
    ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [ValueCount(value, count) for value, count in ordered]


def replace_values(
    dataset: Dataset, column: str, mapping: Mapping[Any, float]
) -> List[Dict[str, Any]]:
    """
    Return a new dataset with ``column`` cells substituted through ``mapping``.

    Keys are matched against each cell's string form; unmapped cells and rows
    without the column are copied unchanged. The input is never modified.
    """
    lookup = {k if isinstance(k, str) else cell_text(k): v for k, v in mapping.items()}
    out: List[Dict[str, Any]] = []
    for row in dataset:
        new_row = dict(row)
        if column in new_row:
            key = cell_text(new_row[column])
            if key in lookup:
                new_row[column] = lookup[key]
        out.append(new_row)
    return out


def extract_features(
    dataset: Dataset,
    feature_columns: Sequence[str],
    target_column: str,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the feature matrix X and target vector y.

    Parameters
    ----------
    dataset : sequence of row mappings
    feature_columns : list[str]
        Columns forming X, in order.
    target_column : str
        Column forming y.

    Returns
    -------
    X : (n, p) ndarray
        Non-numeric feature cells are read as 0.
    y : (n,) ndarray
        Rows whose target is not numeric are dropped from X and y alike.

    Raises
    ------
    InsufficientData : if the dataset has no rows.
    InvalidColumn : if no feature is given or a column is unknown.
    """
    if not dataset:
        raise InsufficientData("dataset is empty")
    feature_columns = list(feature_columns)
    if not feature_columns:
        raise InvalidColumn([], "Please specify at least one feature column")

    known = set(columns(dataset))
    missing = [c for c in feature_columns if c not in known]
    if target_column not in known:
        missing.append(target_column)
    if missing:
        raise InvalidColumn(missing)

    X_rows: List[List[float]] = []
    y_vals: List[float] = []
    for row in dataset:
        target = to_number(row.get(target_column))
        if target is None:
            continue
        features = []
        for col in feature_columns:
            x = to_number(row.get(col))
            features.append(0.0 if x is None else x)
        X_rows.append(features)
        y_vals.append(target)

    dropped = len(dataset) - len(y_vals)
    if dropped:
        logger.debug(f"dropped {dropped} rows with a non-numeric {target_column!r}")

    X = np.asarray(X_rows, dtype=float).reshape(len(X_rows), len(feature_columns))
    y = np.asarray(y_vals, dtype=float)
    return X, y
