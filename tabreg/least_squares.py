# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Ordinary least squares
======================

One feature uses the closed form slope = cov(x, y) / var(x).
Anything else goes through the normal equations

    Dᵀ D β = Dᵀ y,   D = [1 | X]

solved by Gaussian elimination. β[0] is the intercept.
"""

import logging
from typing import Tuple

import numpy as np

from .elimination import gaussian_solve
from .errors import InsufficientData, SingularSystem
from .metrics import r2_score
from .model import LinearModel
from .utils import EPS, as_matrix, as_vector, check_same_length

logger = logging.getLogger(__name__)


def design_matrix(X: np.ndarray) -> np.ndarray:
    """Prepend the all-ones intercept column to X."""
    return np.column_stack([np.ones(X.shape[0]), X])


def normal_equations(D: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return (DᵀD, Dᵀy)."""
    Dt = D.T
    return Dt @ D, Dt @ y


def simple_linear_regression(x, y) -> Tuple[float, float]:
    """
    Closed-form fit of y = a + b x.

    Returns
    -------
    intercept, slope : float

    Raises
    ------
    SingularSystem : if x is constant.
    """
    x = as_vector(x, "x")
    y = as_vector(y, "y")
    check_same_length(x, y)
    if x.size == 0:
        raise InsufficientData()

    x_mean = x.mean()
    y_mean = y.mean()
    dx = x - x_mean
    sxx = float(dx @ dx)
    if sxx <= EPS * float(x @ x):
        raise SingularSystem()
    slope = float(dx @ (y - y_mean)) / sxx
    return float(y_mean - slope * x_mean), slope


def fit_least_squares(X, y) -> LinearModel:
    """
    Fit y ≈ intercept + X @ coefficients.

    Parameters
    ----------
    X : (n, p) array-like
    y : (n,) array-like

    Returns
    -------
    LinearModel
        With fit_score set to the training R².

    Raises
    ------
    InsufficientData : n == 0.
    LengthMismatch : X and y disagree on n.
    SingularSystem : collinear features or too few rows.
    """
    X = as_matrix(X)
    y = as_vector(y)
    check_same_length(X, y)
    n = X.shape[0]
    if n == 0:
        raise InsufficientData()
    p = X.shape[1]

    if p == 1:
        intercept, slope = simple_linear_regression(X[:, 0], y)
        coefficients = (slope,)
    else:
        D = design_matrix(X)
        DtD, Dty = normal_equations(D, y)
        # equilibrate so features of very different scale share one tolerance
        d = np.sqrt(np.diag(DtD))
        if np.any(d == 0.0):
            raise SingularSystem()
        beta = gaussian_solve(DtD / np.outer(d, d), Dty / d) / d
        intercept = float(beta[0])
        coefficients = tuple(float(b) for b in beta[1:])

    fitted = intercept + X @ np.asarray(coefficients, dtype=float)
    score = r2_score(y, fitted)
    logger.debug(f"fitted n={n} p={p} intercept={intercept:.6g} R²={score:.6g}")
    return LinearModel(intercept=intercept, coefficients=coefficients, fit_score=score)
