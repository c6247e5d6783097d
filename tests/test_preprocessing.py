import numpy as np
import pytest

from gd_regression import DegenerateDataError, FeatureScaler, ScalerState, ShapeError


def test_first_call_fits_and_prepends_intercept():
    scaler = FeatureScaler()
    assert scaler.state is ScalerState.UNFITTED
    assert not scaler.is_fitted

    X = scaler.process([[1.0, 10.0], [2.0, 20.0], [3.0, 60.0]])

    assert scaler.state is ScalerState.FITTED
    assert X.shape == (3, 3)
    assert np.all(X[:, 0] == 1.0)
    assert np.allclose(X[:, 1:].mean(axis=0), 0.0)
    assert np.allclose(X[:, 1:].std(axis=0), 1.0)


def test_statistics_are_frozen_after_first_call():
    scaler = FeatureScaler()
    scaler.process([[1], [2], [3], [4]])
    mean, variance = scaler.mean_.copy(), scaler.variance_.copy()

    out = scaler.process([[100], [200]])

    assert np.array_equal(scaler.mean_, mean)
    assert np.array_equal(scaler.variance_, variance)
    # mean 2.5, population variance 1.25
    assert abs(out[0, 1] - (100 - 2.5) / np.sqrt(1.25)) < 1e-9


def test_process_is_idempotent_once_fitted():
    scaler = FeatureScaler()
    raw = [[3.0, 1.0], [5.0, 4.0], [9.0, 2.0]]
    scaler.process(raw)

    first = scaler.process(raw)
    second = scaler.process(raw)

    assert np.array_equal(first, second)


def test_zero_variance_column_raises():
    scaler = FeatureScaler()
    with pytest.raises(DegenerateDataError, match=r"\[1\]"):
        scaler.process([[1.0, 7.0], [2.0, 7.0], [3.0, 7.0]])
    assert scaler.state is ScalerState.UNFITTED


def test_column_count_mismatch_raises():
    scaler = FeatureScaler()
    scaler.process([[1.0, 2.0], [3.0, 5.0]])
    with pytest.raises(ShapeError):
        scaler.process([[1.0], [2.0]])


def test_one_dimensional_input_rejected():
    with pytest.raises(ShapeError):
        FeatureScaler().process([1.0, 2.0, 3.0])
