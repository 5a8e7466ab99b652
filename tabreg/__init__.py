# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
tabreg
======

A small linear-regression workbench for tabular data: preprocess
categorical columns, split, fit ordinary least squares and score the fit.

Public API
~~~~~~~~~~
- Column utilities
    - `unique_values`, `value_counts`, `replace_values`, `extract_features`
- Linear systems
    - `gaussian_solve`
- Regression
    - `fit_least_squares`, `LinearModel`
- Splitting
    - `train_test_split`, `SeededRandom`, `Split`
- Metrics
    - `evaluate`, `r2_score`, `mean_squared_error`, `mean_absolute_error`
- Workflow
    - `TrainingConfig`, `train_and_evaluate`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import tabreg
>>> rows = [{"x": i, "y": 3 + 2 * i} for i in range(10)]
>>> X, y = tabreg.extract_features(rows, ["x"], "y")
>>> model = tabreg.fit_least_squares(X, y)
>>> round(model.intercept, 6), round(model.coefficients[0], 6)
(3.0, 2.0)
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

from .elimination import back_substitute, forward_eliminate, gaussian_solve
from .errors import (
    EmptyInput,
    InsufficientData,
    InvalidColumn,
    LengthMismatch,
    SingularSystem,
    TabregError,
)
from .least_squares import fit_least_squares, simple_linear_regression
from .metrics import (
    Metrics,
    evaluate,
    mean_absolute_error,
    mean_squared_error,
    r2_score,
)
from .model import LinearModel
from .pipeline import TrainingConfig, TrainingReport, train_and_evaluate
from .split import SeededRandom, Split, train_test_split
from .tabular import (
    ValueCount,
    extract_features,
    replace_values,
    unique_values,
    value_counts,
)

__all__ = [
    "unique_values",
    "value_counts",
    "replace_values",
    "extract_features",
    "ValueCount",
    "forward_eliminate",
    "back_substitute",
    "gaussian_solve",
    "fit_least_squares",
    "simple_linear_regression",
    "LinearModel",
    "train_test_split",
    "SeededRandom",
    "Split",
    "evaluate",
    "r2_score",
    "mean_squared_error",
    "mean_absolute_error",
    "Metrics",
    "TrainingConfig",
    "TrainingReport",
    "train_and_evaluate",
    "TabregError",
    "InvalidColumn",
    "InsufficientData",
    "SingularSystem",
    "LengthMismatch",
    "EmptyInput",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show tabreg", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except PackageNotFoundError:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Lightweight default logging config so users see messages
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
