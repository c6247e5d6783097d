from __future__ import annotations

"""
Scores for the trainers (R^2, accuracy) and the reporting helpers used by main.py.
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .errors import DegenerateDataError, ShapeError


def r_squared(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Coefficient of determination, 1 - SS_res / SS_tot.

    Constant labels make SS_tot zero; that raises instead of returning nan.
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    if y_true.shape != y_pred.shape:
        raise ShapeError(f"labels {y_true.shape} and predictions {y_pred.shape} differ")

    ss_res = float(np.sum((y_true - y_pred) ** 2))
    ss_tot = float(np.sum((y_true - y_true.mean()) ** 2))
    if ss_tot == 0:
        raise DegenerateDataError("test labels have zero variance; R^2 is undefined")
    return 1 - ss_res / ss_tot


def accuracy(y_true: np.ndarray, probs: np.ndarray, threshold: float = 0.5) -> float:
    """
    Fraction of correct predictions. One column: probs >= threshold vs. the
    0/1 label. Several columns: argmax of probs vs. argmax of the one-hot label.
    """
    y_true = np.asarray(y_true, dtype=float)
    probs = np.asarray(probs, dtype=float)
    if y_true.ndim == 1:
        y_true = y_true.reshape(-1, 1)
    if probs.ndim == 1:
        probs = probs.reshape(-1, 1)
    if y_true.shape != probs.shape:
        raise ShapeError(f"labels {y_true.shape} and predictions {probs.shape} differ")

    if y_true.shape[1] == 1:
        truth = y_true[:, 0].astype(int)
        preds = (probs[:, 0] >= threshold).astype(int)
    else:
        truth = y_true.argmax(axis=1)
        preds = probs.argmax(axis=1)
    return float(metrics.accuracy_score(truth, preds))


def compute_classification_metrics(
    y_true: np.ndarray | pd.Series, probs: np.ndarray, threshold: float = 0.5
):
    """
    Report for a single-column logistic model at its decision boundary.

    `log_loss` is sklearn's cross-entropy on the raw probabilities, so it is
    comparable with the trainer's loss history; ROC-AUC is nan when the test
    labels hold one class only.
    """
    y_true = np.asarray(y_true).ravel().astype(int)
    probs = np.asarray(probs, dtype=float).ravel()
    if y_true.shape != probs.shape:
        raise ShapeError(f"labels {y_true.shape} and probabilities {probs.shape} differ")

    preds = (probs >= threshold).astype(int)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_true, preds, average="binary", zero_division=0
    )
    single_class = np.unique(y_true).size < 2
    roc_auc = float("nan") if single_class else metrics.roc_auc_score(y_true, probs)

    return {
        "threshold": threshold,
        "accuracy": metrics.accuracy_score(y_true, preds),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "roc_auc": roc_auc,
        "log_loss": metrics.log_loss(y_true, probs, labels=[0, 1]),
        "confusion_matrix": metrics.confusion_matrix(y_true, preds, labels=[0, 1]),
    }


def majority_baseline(y_train: np.ndarray, y_test: np.ndarray, threshold: float = 0.5):
    """
    Predicts the positive rate learned from the training set for every test row.
    """
    prob = float(np.mean(y_train))
    probs = np.full(np.asarray(y_test).ravel().shape, prob, dtype=float)
    return compute_classification_metrics(y_test, probs, threshold=threshold)


def summarize_coefficients(weights: np.ndarray, feature_names: list[str]) -> pd.DataFrame:
    """
    Weights per feature (intercept row dropped), one column per label column.
    Values are in standardized feature units.
    """
    coef = np.asarray(weights, dtype=float)[1:].reshape(len(feature_names), -1)
    columns = [f"w{j}" for j in range(coef.shape[1])]
    return pd.DataFrame(coef, index=feature_names, columns=columns)
