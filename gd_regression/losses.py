from __future__ import annotations

"""
Activation + loss pairings. The trainer is generic over these; each one
provides activate(), loss() and score().
"""

import numpy as np

from .constants import CROSS_ENTROPY_EPS, DEFAULT_DECISION_BOUNDARY, SIGMOID_CLIP
from .errors import ConfigurationError
from .metrics import accuracy, r_squared


def sigmoid(z: np.ndarray) -> np.ndarray:
    z = np.clip(z, -SIGMOID_CLIP, SIGMOID_CLIP)
    return 1.0 / (1.0 + np.exp(-z))


class LinearLoss:
    """Identity link, mean squared error, scored with R^2."""

    name = "linear"

    def activate(self, z: np.ndarray) -> np.ndarray:
        return z

    def loss(self, predictions: np.ndarray, labels: np.ndarray) -> float:
        return float(np.mean((predictions - labels) ** 2))

    def score(self, predictions: np.ndarray, labels: np.ndarray) -> float:
        return r_squared(labels, predictions)


class LogisticLoss:
    """
    Sigmoid link with mean cross-entropy, scored with accuracy.

    Multiple label columns get one independent sigmoid each (no softmax), so a
    one-hot multinomial target is fit as k binary problems sharing the loop.
    """

    name = "logistic"

    def __init__(self, decision_boundary: float = DEFAULT_DECISION_BOUNDARY):
        if not 0.0 <= decision_boundary <= 1.0:
            raise ConfigurationError(
                f"decision_boundary must be in [0, 1], got {decision_boundary}"
            )
        self.decision_boundary = decision_boundary

    def activate(self, z: np.ndarray) -> np.ndarray:
        return sigmoid(z)

    def loss(self, predictions: np.ndarray, labels: np.ndarray) -> float:
        p = np.clip(predictions, CROSS_ENTROPY_EPS, 1 - CROSS_ENTROPY_EPS)
        return float(-np.mean(labels * np.log(p) + (1 - labels) * np.log(1 - p)))

    def classify(self, predictions: np.ndarray) -> np.ndarray:
        """Threshold a single column, or one-hot the argmax of several."""
        if predictions.shape[1] == 1:
            return (predictions >= self.decision_boundary).astype(int)
        onehot = np.zeros_like(predictions, dtype=int)
        onehot[np.arange(predictions.shape[0]), predictions.argmax(axis=1)] = 1
        return onehot

    def score(self, predictions: np.ndarray, labels: np.ndarray) -> float:
        return accuracy(labels, predictions, threshold=self.decision_boundary)
