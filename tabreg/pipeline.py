# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
End-to-end workflow: extract -> split -> fit -> predict -> evaluate.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np

from .errors import InsufficientData
from .least_squares import fit_least_squares
from .metrics import Metrics, evaluate
from .model import LinearModel
from .split import Split, train_test_split
from .tabular import Dataset, extract_features, replace_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingConfig:
    features: Tuple[str, ...]
    target: str
    test_fraction: float = 0.2
    seed: Optional[int] = None

    @classmethod
    def from_strings(
        cls,
        features: str,
        target: str,
        test_fraction: float = 0.2,
        seed: Optional[int] = None,
    ) -> "TrainingConfig":
        """Build a config from a comma separated feature list."""
        names = tuple(f.strip() for f in features.split(",") if f.strip())
        return cls(names, target.strip(), test_fraction, seed)


@dataclass(frozen=True, eq=False)
class TrainingReport:
    config: TrainingConfig
    split: Split
    model: LinearModel
    predictions: np.ndarray
    metrics: Metrics

    def to_dict(self, sample: int = 10) -> Dict[str, Any]:
        """Plain-data results, suitable for ``json.dump``."""

        def _num(x: float) -> Optional[float]:
            return None if math.isnan(x) else float(x)

        return {
            "model_info": {
                "features": list(self.config.features),
                "target": self.config.target,
                "training_samples": self.split.train_size,
                "testing_samples": self.split.test_size,
            },
            "metrics": {
                "r2_score": _num(self.metrics.r2),
                "mean_squared_error": _num(self.metrics.mse),
                "mean_absolute_error": _num(self.metrics.mae),
            },
            "model_parameters": {
                "intercept": self.model.intercept,
                "coefficients": list(self.model.coefficients),
            },
            "predictions": [float(p) for p in self.predictions[:sample]],
        }


def apply_replacements(
    dataset: Dataset, column: str, mapping: Mapping[Any, float]
):
    updated = replace_values(dataset, column, mapping)
    logger.info(f"Applied {len(mapping)} replacements to column {column!r}")
    return updated


def prepare_split(dataset: Dataset, config: TrainingConfig) -> Split:
    X, y = extract_features(dataset, config.features, config.target)
    if len(y) == 0:
        raise InsufficientData()
    split = train_test_split(X, y, config.test_fraction, seed=config.seed)
    logger.info(
        f"Training: {split.train_size} samples, Testing: {split.test_size} samples"
    )
    return split


def train_and_evaluate(dataset: Dataset, config: TrainingConfig) -> TrainingReport:
    """
    Run the whole workflow on ``dataset``.

    Raises
    ------
    InvalidColumn, InsufficientData, SingularSystem
    """
    split = prepare_split(dataset, config)
    if split.train_size == 0:
        raise InsufficientData("training split is empty; lower the test fraction")
    if split.test_size == 0:
        raise InsufficientData("test split is empty; raise the test fraction")
    model = fit_least_squares(split.x_train, split.y_train)
    logger.info(f"Model trained, R² score: {model.fit_score:.4f}")

    predictions = model.predict(split.x_test)
    metrics = evaluate(split.y_test, predictions)
    return TrainingReport(config, split, model, predictions, metrics)
