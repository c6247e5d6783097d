from __future__ import annotations

"""
Feature standardization with statistics frozen after the first call, plus the
intercept column that turns raw features into a design matrix.
"""

from enum import Enum

import numpy as np

from .errors import DegenerateDataError, ShapeError


class ScalerState(Enum):
    UNFITTED = "unfitted"
    FITTED = "fitted"


def as_matrix(values, name: str) -> np.ndarray:
    """Coerce lists / frames / arrays to a 2-D float matrix."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 2:
        raise ShapeError(f"{name} must be 2-D (rows x columns), got shape {arr.shape}")
    return arr


def add_bias(X: np.ndarray) -> np.ndarray:
    return np.hstack([np.ones((X.shape[0], 1)), X])


class FeatureScaler:
    """
    Standardizes features as (x - mean) / sqrt(variance) and prepends a column
    of ones.

    The first call to process() fits mean and (population) variance and moves
    the scaler to FITTED; every later call reuses those statistics, so test
    data and new observations are scaled with the training distribution.
    """

    def __init__(self):
        self.state = ScalerState.UNFITTED
        self.mean_: np.ndarray | None = None
        self.variance_: np.ndarray | None = None

    @property
    def is_fitted(self) -> bool:
        return self.state is ScalerState.FITTED

    @property
    def n_features(self) -> int | None:
        return None if self.mean_ is None else int(self.mean_.shape[0])

    def _fit(self, X: np.ndarray):
        variance = X.var(axis=0)
        zero_var_cols = np.flatnonzero(variance == 0).tolist()
        if zero_var_cols:
            raise DegenerateDataError(
                f"features have zero variance in columns {zero_var_cols}; "
                "standardization would divide by zero"
            )
        self.mean_ = X.mean(axis=0)
        self.variance_ = variance
        self.state = ScalerState.FITTED

    def process(self, features) -> np.ndarray:
        """Return the design matrix for `features` (fitting on first use)."""
        X = as_matrix(features, "features")

        if self.state is ScalerState.UNFITTED:
            self._fit(X)
        elif X.shape[1] != self.n_features:
            raise ShapeError(
                f"features have {X.shape[1]} columns, scaler was fitted on {self.n_features}"
            )

        X_scaled = (X - self.mean_) / np.sqrt(self.variance_)
        return add_bias(X_scaled)
