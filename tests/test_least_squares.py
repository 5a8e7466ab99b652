# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from tabreg.errors import InsufficientData, LengthMismatch, SingularSystem
from tabreg.least_squares import (
    design_matrix,
    fit_least_squares,
    normal_equations,
    simple_linear_regression,
)
from tabreg.model import LinearModel


def test_recovers_two_feature_plane():
    """y = 3 + 2 x1 - x2 with no noise."""
    rng = np.random.default_rng(0)
    X = rng.uniform(-10, 10, size=(40, 2))
    y = 3 + 2 * X[:, 0] - X[:, 1]

    model = fit_least_squares(X, y)
    assert isinstance(model, LinearModel)
    assert math.isclose(model.intercept, 3.0, abs_tol=1e-8)
    np.testing.assert_allclose(model.coefficients, [2.0, -1.0], atol=1e-8)
    assert math.isclose(model.fit_score, 1.0, abs_tol=1e-10)


def test_matches_numpy_lstsq_with_noise():
    rng = np.random.default_rng(1)
    X = rng.normal(size=(200, 4))
    y = 1.5 + X @ np.array([0.5, -2.0, 0.0, 3.0]) + rng.normal(scale=0.3, size=200)

    model = fit_least_squares(X, y)
    beta_np, *_ = np.linalg.lstsq(design_matrix(X), y, rcond=None)
    np.testing.assert_allclose(
        [model.intercept, *model.coefficients], beta_np, rtol=1e-8, atol=1e-10
    )
    assert 0.9 < model.fit_score < 1.0


def test_single_feature_closed_form():
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    y = np.array([2.0, 4.1, 5.9, 8.2, 9.8])
    model = fit_least_squares(x[:, None], y)

    slope = np.cov(x, y, bias=True)[0, 1] / np.var(x)
    intercept = y.mean() - slope * x.mean()
    assert model.coefficients == pytest.approx((slope,))
    assert model.intercept == pytest.approx(intercept)
    assert len(model.coefficients) == 1


def test_single_feature_agrees_with_normal_equations():
    rng = np.random.default_rng(2)
    x = rng.normal(size=30)
    y = -4 + 0.7 * x + rng.normal(scale=0.1, size=30)
    intercept, slope = simple_linear_regression(x, y)

    D = design_matrix(x[:, None])
    DtD, Dty = normal_equations(D, y)
    beta = np.linalg.solve(DtD, Dty)
    np.testing.assert_allclose([intercept, slope], beta, rtol=1e-10)


def test_normal_equations_shapes():
    X = np.arange(12, dtype=float).reshape(4, 3)
    D = design_matrix(X)
    assert D.shape == (4, 4)
    np.testing.assert_array_equal(D[:, 0], 1.0)
    DtD, Dty = normal_equations(D, np.ones(4))
    assert DtD.shape == (4, 4)
    assert Dty.shape == (4,)
    np.testing.assert_allclose(DtD, DtD.T)


def test_collinear_features_raise():
    X = [[1, 2], [2, 4], [3, 6]]
    with pytest.raises(SingularSystem):
        fit_least_squares(X, [1, 2, 3])


def test_constant_single_feature_raises():
    with pytest.raises(SingularSystem):
        fit_least_squares([[2.0], [2.0], [2.0]], [1.0, 2.0, 3.0])


def test_too_few_rows_raise():
    # three unknowns, two equations
    with pytest.raises(SingularSystem):
        fit_least_squares([[1, 2], [3, 5]], [1, 2])


def test_empty_input_raises():
    with pytest.raises(InsufficientData):
        fit_least_squares([], [])


def test_length_mismatch_raises():
    with pytest.raises(LengthMismatch):
        fit_least_squares([[1, 2], [3, 4], [5, 7]], [1, 2])


def test_constant_target_score_is_nan():
    X = [[1.0, 0.0], [2.0, 1.0], [3.0, 5.0], [4.0, 2.0]]
    model = fit_least_squares(X, [7.0, 7.0, 7.0, 7.0])
    assert math.isnan(model.fit_score)
    assert model.intercept == pytest.approx(7.0)
    np.testing.assert_allclose(model.coefficients, [0.0, 0.0], atol=1e-10)


def test_refit_returns_new_model():
    X = [[0.0], [1.0], [2.0]]
    first = fit_least_squares(X, [1.0, 3.0, 5.0])
    second = fit_least_squares(X, [0.0, 1.0, 2.0])
    assert first is not second
    assert first.coefficients == pytest.approx((2.0,))
    assert second.coefficients == pytest.approx((1.0,))


def test_mixed_scale_features():
    """A 0/1 flag next to a feature around 1e6 is still well determined."""
    rng = np.random.default_rng(5)
    n = 1000
    x1 = rng.uniform(0, 1e6, size=n)
    flag = rng.integers(0, 2, size=n).astype(float)
    X = np.column_stack([x1, flag])
    y = 5 + 2e-6 * x1 + 3 * flag

    model = fit_least_squares(X, y)
    assert model.intercept == pytest.approx(5.0, abs=1e-6)
    np.testing.assert_allclose(model.coefficients, [2e-6, 3.0], rtol=1e-6)
    assert model.fit_score == pytest.approx(1.0)


def test_all_zero_feature_raises():
    X = [[1.0, 0.0], [2.0, 0.0], [3.0, 0.0]]
    with pytest.raises(SingularSystem):
        fit_least_squares(X, [1.0, 2.0, 3.0])


@pytest.mark.parametrize(
    "X",
    [
        [[1.0], [2.0], [3.0], [4.0]],
        [[1.0, 0.0], [2.0, 1.0], [3.0, 5.0], [4.0, 2.0]],
    ],
)
def test_constant_fractional_target_score_is_nan(X):
    model = fit_least_squares(X, [0.1, 0.1, 0.1, 0.1])
    assert math.isnan(model.fit_score)
    assert model.intercept == pytest.approx(0.1)
