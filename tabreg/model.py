# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np

from .utils import as_matrix


@dataclass(frozen=True)
class LinearModel:
    """
    A fitted linear regression, y = intercept + coefficients · x.

    Instances are produced by ``tabreg.least_squares.fit_least_squares``
    and never change afterwards; refitting yields a new model.

    Attributes
    ----------
    intercept : float
    coefficients : tuple[float, ...]
        One weight per feature, in feature order.
    fit_score : float
        R² on the training data at fit time (NaN if the target was constant).
    """

    intercept: float
    coefficients: Tuple[float, ...]
    fit_score: float

    @property
    def n_features(self) -> int:
        return len(self.coefficients)

    def predict(self, rows) -> np.ndarray:
        """Predicted target for each row of an (m, p) feature matrix."""
        X = as_matrix(rows)
        if X.shape[0] == 0:
            return np.zeros(0, dtype=float)
        if X.shape[1] != self.n_features:
            raise ValueError(
                f"expected {self.n_features} features per row, got {X.shape[1]}"
            )
        return self.intercept + X @ np.asarray(self.coefficients, dtype=float)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "intercept": self.intercept,
            "coefficients": list(self.coefficients),
            "fit_score": None if math.isnan(self.fit_score) else self.fit_score,
        }

    def __repr__(self):
        return (
            f"LinearModel(intercept={self.intercept:.4g}, "
            f"coefficients={list(self.coefficients)}, R²={self.fit_score:.3f})"
        )
