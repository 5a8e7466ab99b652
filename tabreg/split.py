# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Train/test splitting.

Shuffling draws from a generator owned by the call: either one built
from ``seed`` or the ``rng`` the caller passes in. The global ``random``
and ``numpy.random`` states are never read or written.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .utils import as_matrix, as_vector, check_same_length

logger = logging.getLogger(__name__)

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


class SeededRandom:
    """
    Linear-congruential stream in [0, 1).

        state <- (state * 9301 + 49297) mod 233280
        random() = state / 233280

    Two instances built from the same seed yield the same sequence.
    """

    def __init__(self, seed: int):
        self.state = int(seed) % LCG_MODULUS

    def random(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def __repr__(self):
        return f"{self.__class__.__name__}(state={self.state})"


@dataclass(frozen=True, eq=False)
class Split:
    x_train: np.ndarray
    x_test: np.ndarray
    y_train: np.ndarray
    y_test: np.ndarray
    train_indices: np.ndarray
    test_indices: np.ndarray

    @property
    def train_size(self) -> int:
        return len(self.y_train)

    @property
    def test_size(self) -> int:
        return len(self.y_test)


def permutation(n: int, rng) -> List[int]:
    """Fisher–Yates shuffle of 0..n-1, walking down from the last index."""
    indices = list(range(n))
    for i in range(n - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        indices[i], indices[j] = indices[j], indices[i]
    return indices


def train_test_split(
    X,
    y,
    test_fraction: float = 0.2,
    seed: Optional[int] = None,
    rng=None,
) -> Split:
    """
    Partition (X, y) into disjoint train and test parts.

    Parameters
    ----------
    X : (n, p) array-like
    y : (n,) array-like
    test_fraction : float
        Share of rows sent to the test part, floor(n * test_fraction).
        May leave the test part empty for small n.
    seed : int | None
        Seeds a fresh ``SeededRandom``; ignored when ``rng`` is given.
    rng : object with ``random()`` | None
        Explicit generator. Without it and without a seed the shuffle
        is non-deterministic.

    Returns
    -------
    Split
    """
    X = as_matrix(X)
    y = as_vector(y)
    check_same_length(X, y)
    if not 0.0 <= test_fraction <= 1.0:
        raise ValueError(f"test_fraction must be within [0, 1], got {test_fraction}")

    if rng is None:
        rng = SeededRandom(seed) if seed is not None else np.random.default_rng()

    n = len(y)
    order = np.asarray(permutation(n, rng), dtype=int)
    test_count = math.floor(n * test_fraction)
    train_count = n - test_count

    train_idx = order[:train_count]
    test_idx = order[train_count:]
    logger.debug(f"split n={n} into train={train_count} test={test_count}")

    return Split(
        x_train=X[train_idx],
        x_test=X[test_idx],
        y_train=y[train_idx],
        y_test=y[test_idx],
        train_indices=train_idx,
        test_indices=test_idx,
    )
