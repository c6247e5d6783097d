from __future__ import annotations

"""
Mini-batch gradient descent trainer shared by linear and logistic regression,
with a loss-driven learning-rate controller.
"""

import numpy as np

from .constants import (
    DEFAULT_DECISION_BOUNDARY,
    DEFAULT_ITERATIONS,
    DEFAULT_LEARNING_RATE,
    LOG_EVERY,
    RATE_DECAY,
    RATE_GROWTH,
)
from .errors import ConfigurationError, DivergenceError, ShapeError
from .losses import LinearLoss, LogisticLoss
from .optimizer import gradient_step
from .preprocessing import FeatureScaler


def _as_labels(labels, name: str = "labels") -> np.ndarray:
    y = np.asarray(labels, dtype=float)
    if y.ndim == 1:
        y = y.reshape(-1, 1)
    if y.ndim != 2:
        raise ShapeError(f"{name} must be 1-D or 2-D, got shape {y.shape}")
    return y


class GradientDescentTrainer:
    """
    Regression trained with mini-batch gradient descent on standardized features.

    The strategy (LinearLoss or LogisticLoss) supplies the link, the loss and the
    test score; everything else is shared. Features are standardized with
    statistics from the training data and an intercept column is prepended, so
    weights have shape (n_features + 1, n_label_columns).

    After every epoch the loss over the full training set is pushed to the front
    of `loss_history`; the learning rate is halved if it went up and grown by 5%
    otherwise.
    """

    def __init__(
        self,
        features,
        labels,
        strategy,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        iterations: int = DEFAULT_ITERATIONS,
        batch_size: int | None = None,
        verbose: bool = False,
    ):
        if not learning_rate > 0:
            raise ConfigurationError(f"learning_rate must be > 0, got {learning_rate}")
        if int(iterations) != iterations or iterations <= 0:
            raise ConfigurationError(f"iterations must be a positive integer, got {iterations}")
        if batch_size is not None and (int(batch_size) != batch_size or batch_size <= 0):
            raise ConfigurationError(f"batch_size must be a positive integer, got {batch_size}")

        self.strategy = strategy
        self.learning_rate = float(learning_rate)
        self.iterations = int(iterations)
        self.batch_size = None if batch_size is None else int(batch_size)
        self.verbose = verbose

        self.scaler = FeatureScaler()
        self.features = self.scaler.process(features)
        self.labels = _as_labels(labels)
        if self.labels.shape[0] != self.features.shape[0]:
            raise ShapeError(
                f"features have {self.features.shape[0]} rows but labels have "
                f"{self.labels.shape[0]}"
            )

        self.weights = np.zeros((self.features.shape[1], self.labels.shape[1]))
        self.loss_history: list[float] = []

    def train(self):
        """Run `iterations` epochs over contiguous batches; the remainder is dropped."""
        if self.batch_size is None:
            raise ConfigurationError("batch_size is required to train")
        n_samples = self.features.shape[0]
        batch_quantity = n_samples // self.batch_size
        if batch_quantity == 0:
            raise ConfigurationError(
                f"batch_size {self.batch_size} exceeds the {n_samples} training rows"
            )

        for epoch in range(1, self.iterations + 1):
            for j in range(batch_quantity):
                start = j * self.batch_size
                stop = start + self.batch_size
                self.weights = gradient_step(
                    self.features[start:stop],
                    self.labels[start:stop],
                    self.weights,
                    self.learning_rate,
                    self.strategy,
                )

            loss = self.record_loss()
            if not np.isfinite(loss):
                raise DivergenceError(
                    f"loss became {loss} at epoch {epoch} "
                    f"(learning_rate={self.learning_rate:g})"
                )
            if self.verbose and (epoch % LOG_EVERY == 0 or epoch == self.iterations):
                print(f"[GD] epoch={epoch}, loss={loss:.4f}, lr={self.learning_rate:.4g}")
            self.update_learning_rate()

    def record_loss(self) -> float:
        preds = self.strategy.activate(self.features @ self.weights)
        loss = self.strategy.loss(preds, self.labels)
        self.loss_history.insert(0, loss)
        return loss

    def update_learning_rate(self):
        if len(self.loss_history) < 2:
            return

        if self.loss_history[0] > self.loss_history[1]:
            self.learning_rate *= RATE_DECAY
        else:
            self.learning_rate *= RATE_GROWTH

    def predict(self, observations) -> np.ndarray:
        """Linear: fitted values. Logistic: probabilities per label column."""
        return self.strategy.activate(self.scaler.process(observations) @ self.weights)

    def classify(self, observations) -> np.ndarray:
        if not hasattr(self.strategy, "classify"):
            raise RuntimeError(f"{self.strategy.name} regression does not produce classes")
        return self.strategy.classify(self.predict(observations))

    def test(self, test_features, test_labels) -> float:
        """R^2 for linear regression, accuracy for logistic."""
        preds = self.predict(test_features)
        y = _as_labels(test_labels, "test labels")
        if y.shape[0] != preds.shape[0]:
            raise ShapeError(
                f"test features have {preds.shape[0]} rows but test labels have {y.shape[0]}"
            )
        if y.shape[1] != self.weights.shape[1]:
            raise ShapeError(
                f"test labels have {y.shape[1]} columns, model was trained on "
                f"{self.weights.shape[1]}"
            )
        return self.strategy.score(preds, y)


def linear_regression(features, labels, **options) -> GradientDescentTrainer:
    return GradientDescentTrainer(features, labels, LinearLoss(), **options)


def logistic_regression(
    features,
    labels,
    decision_boundary: float = DEFAULT_DECISION_BOUNDARY,
    **options,
) -> GradientDescentTrainer:
    """Binary (one label column) or multinomial (one-hot label columns)."""
    return GradientDescentTrainer(
        features, labels, LogisticLoss(decision_boundary), **options
    )
