# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Goodness-of-fit measures between true and predicted targets.
"""

import logging
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import EmptyInput
from .utils import as_vector, check_same_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Metrics:
    r2: float
    mse: float
    mae: float

    @property
    def rmse(self) -> float:
        return math.sqrt(self.mse)


def _pair(y_true, y_pred) -> Tuple[np.ndarray, np.ndarray]:
    t = as_vector(y_true, "y_true")
    p = as_vector(y_pred, "y_pred")
    check_same_length(t, p)
    if t.size == 0:
        raise EmptyInput()
    return t, p


def r2_score(y_true, y_pred) -> float:
    """
    Coefficient of determination, 1 - SS_res / SS_tot.

    Returns NaN when y_true is constant (SS_tot = 0), where R² is undefined.
    """
    t, p = _pair(y_true, y_pred)
    if np.all(t == t[0]):
        logger.warning("R² is undefined for a constant target; returning NaN")
        return math.nan
    ss_res = float(np.sum((t - p) ** 2))
    ss_tot = float(np.sum((t - t.mean()) ** 2))
    return 1.0 - ss_res / ss_tot


def mean_squared_error(y_true, y_pred) -> float:
    t, p = _pair(y_true, y_pred)
    return float(np.mean((t - p) ** 2))


def mean_absolute_error(y_true, y_pred) -> float:
    t, p = _pair(y_true, y_pred)
    return float(np.mean(np.abs(t - p)))


def evaluate(y_true, y_pred) -> Metrics:
    return Metrics(
        r2=r2_score(y_true, y_pred),
        mse=mean_squared_error(y_true, y_pred),
        mae=mean_absolute_error(y_true, y_pred),
    )
