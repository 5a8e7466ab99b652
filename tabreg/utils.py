# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .errors import LengthMismatch

EPS: float = 1e-12


def column_tol(A: np.ndarray) -> np.ndarray:
    """
    Absolute tolerance per column, scaled to that column's magnitude.

    An all-zero column gets a tolerance of 0, so it always counts as zero.
    """
    if A.size == 0:
        return np.zeros(A.shape[-1])
    return EPS * np.abs(A).max(axis=0)


def as_matrix(X, name: str = "X") -> np.ndarray:
    """
    Coerce a sequence of rows into an (n, p) float array.

    An empty sequence becomes a (0, 0) array; ragged rows raise ValueError.
    """
    if isinstance(X, np.ndarray):
        M = X.astype(float, copy=False)
    else:
        rows = [list(r) for r in X]
        if not rows:
            return np.zeros((0, 0), dtype=float)
        widths = {len(r) for r in rows}
        if len(widths) != 1:
            raise ValueError(f"{name} rows must all have the same length")
        M = np.asarray(rows, dtype=float)
    if M.ndim == 1 and M.size == 0:
        return M.reshape(0, 0)
    if M.ndim != 2:
        raise ValueError(f"{name} must be 2-dimensional")
    return M


def as_vector(y, name: str = "y") -> np.ndarray:
    """Coerce a sequence of numbers into a 1-d float array."""
    v = np.asarray(y, dtype=float)
    if v.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional")
    return v


def check_same_length(a, b) -> None:
    if len(a) != len(b):
        raise LengthMismatch(len(a), len(b))
