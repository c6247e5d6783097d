"""
Linear and logistic regression trained with mini-batch gradient descent.

This package contains the shared trainer and its loss strategies, feature
standardization, scoring helpers, and the CSV loading / plotting utilities used
by main.py.
"""

from .data_prep import Dataset, load_csv, one_hot_bins, to_binary
from .errors import (
    ConfigurationError,
    DegenerateDataError,
    DivergenceError,
    RegressionError,
    ShapeError,
)
from .losses import LinearLoss, LogisticLoss
from .metrics import accuracy, compute_classification_metrics, r_squared, summarize_coefficients
from .optimizer import gradient_step
from .preprocessing import FeatureScaler, ScalerState
from .trainer import GradientDescentTrainer, linear_regression, logistic_regression

__all__ = [
    "Dataset",
    "load_csv",
    "one_hot_bins",
    "to_binary",
    "ConfigurationError",
    "DegenerateDataError",
    "DivergenceError",
    "RegressionError",
    "ShapeError",
    "LinearLoss",
    "LogisticLoss",
    "accuracy",
    "compute_classification_metrics",
    "r_squared",
    "summarize_coefficients",
    "gradient_step",
    "FeatureScaler",
    "ScalerState",
    "GradientDescentTrainer",
    "linear_regression",
    "logistic_regression",
]
