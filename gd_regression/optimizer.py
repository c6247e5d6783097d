from __future__ import annotations

import numpy as np


def gradient_step(
    features: np.ndarray,
    labels: np.ndarray,
    weights: np.ndarray,
    learning_rate: float,
    strategy,
) -> np.ndarray:
    """
    One gradient descent update on a batch; returns the new weights.

    MSE on the identity link and cross-entropy on the sigmoid link share the
    gradient X^T (activate(Xw) - y) / n, so the same step serves every variant.
    """
    preds = strategy.activate(features @ weights)
    error = preds - labels
    grad = (features.T @ error) / features.shape[0]
    return weights - learning_rate * grad
