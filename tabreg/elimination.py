# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Tuple

import numpy as np

from .errors import SingularSystem
from .utils import EPS, column_tol

logger = logging.getLogger(__name__)


def forward_eliminate(
    A: np.ndarray,
    b: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, List[int]]:
    """
    Reduce a square system A x = b to upper-triangular form with
    partial pivoting.

    Parameters
    ----------
    A : np.ndarray               (n, n)
        Coefficient matrix (MUST be ndarray).
    b : np.ndarray               (n,)
        Right-hand side; same row swaps & updates applied.

    Returns
    -------
    U      : np.ndarray          (n, n)
        Upper-triangular form of A.
    c      : np.ndarray          (n,)
        b after identical row ops.
    perm   : list[int]
        Final row order: row i of U comes from original row perm[i].

    Raises
    ------
    SingularSystem : if a column has no usable pivot.
    """
    if not isinstance(A, np.ndarray):
        raise TypeError("A must be a NumPy ndarray")
    if not isinstance(b, np.ndarray):
        raise TypeError("b must be a NumPy ndarray")

    U = A.astype(float, copy=True)
    c = b.astype(float, copy=True)
    n = U.shape[0]

    pivot_tol = column_tol(U)
    perm = list(range(n))

    for col in range(n):
        # Largest magnitude at or below the diagonal becomes the pivot.
        col_slice = np.abs(U[col:, col])
        max_idx = int(col_slice.argmax())
        max_val = col_slice[max_idx]

        if max_val <= pivot_tol[col]:  # zero relative to its own column
            logger.debug(f"no pivot in column {col} (|max| = {max_val:.3e})")
            raise SingularSystem()

        pivot_row = col + max_idx

        # If the pivot row is not our current row, record
        # the permutation, the same operation must be applied
        # to b as well
        if pivot_row != col:
            U[[col, pivot_row]] = U[[pivot_row, col]]
            c[[col, pivot_row]] = c[[pivot_row, col]]
            perm[col], perm[pivot_row] = perm[pivot_row], perm[col]

        # Eliminate entries below the pivot
        factors = U[col + 1 :, col] / U[col, col]
        U[col + 1 :, col:] -= factors[:, None] * U[col, col:]
        c[col + 1 :] -= factors * c[col]

    return U, c, perm


def back_substitute(U: np.ndarray, c: np.ndarray) -> np.ndarray:
    """
    Parameters
    ----------
    U : (n, n) ndarray
        Upper-triangular matrix (output of forward_eliminate).
    c : (n,) ndarray
        RHS after identical row operations.
    Returns
    -------
    x : (n,) ndarray
        Solution of Ux = c.
    Raises
    ------
    SingularSystem : if a diagonal entry is numerically zero.
    """
    U = np.asarray(U, dtype=float)
    c = np.asarray(c, dtype=float)

    n = c.shape[0]
    x = np.zeros(n, dtype=float)

    for i in reversed(range(n)):
        pivot = U[i, i]
        if abs(pivot) <= EPS * np.abs(U[i, i:]).max():
            raise SingularSystem()

        s = c[i] - U[i, i + 1 :] @ x[i + 1 :]
        x[i] = s / pivot

    return x


def gaussian_solve(A, b) -> np.ndarray:
    """
    Solve the square system A x = b.

    Raises ValueError on a shape problem and SingularSystem when A has
    no stable pivot; never returns NaN for either.
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"A must be square, got shape {A.shape}")
    if b.shape != (A.shape[0],):
        raise ValueError(f"b must have shape ({A.shape[0]},), got {b.shape}")

    U, c, _perm = forward_eliminate(A, b)
    return back_substitute(U, c)
