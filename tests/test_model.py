# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import dataclasses
import math

import numpy as np
import pytest

from tabreg.model import LinearModel


def test_predict():
    model = LinearModel(intercept=3.0, coefficients=(2.0, -1.0), fit_score=1.0)
    pred = model.predict([[1, 1], [0, 0], [2, 5]])
    np.testing.assert_allclose(pred, [4.0, 3.0, 2.0])


def test_predict_is_pure():
    model = LinearModel(1.0, (0.5,), 0.9)
    X = np.array([[2.0], [4.0]])
    first = model.predict(X)
    second = model.predict(X)
    np.testing.assert_array_equal(first, second)
    np.testing.assert_array_equal(X, [[2.0], [4.0]])


def test_predict_empty():
    model = LinearModel(1.0, (0.5,), 0.9)
    assert model.predict([]).shape == (0,)


def test_predict_wrong_width():
    model = LinearModel(1.0, (0.5, 2.0), 0.9)
    with pytest.raises(ValueError):
        model.predict([[1.0, 2.0, 3.0]])


def test_model_is_frozen():
    model = LinearModel(1.0, (0.5,), 0.9)
    with pytest.raises(dataclasses.FrozenInstanceError):
        model.intercept = 2.0


def test_to_dict():
    d = LinearModel(1.0, (0.5, 2.0), math.nan).to_dict()
    assert d == {"intercept": 1.0, "coefficients": [0.5, 2.0], "fit_score": None}
