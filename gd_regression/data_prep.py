from __future__ import annotations

"""
CSV loading and label encoding for the regression experiments.
"""

from pathlib import Path
from typing import Callable, NamedTuple, Sequence

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split


class Dataset(NamedTuple):
    features: np.ndarray
    labels: np.ndarray
    test_features: np.ndarray
    test_labels: np.ndarray
    feature_names: list[str]
    label_names: list[str]


def to_binary(values: pd.Series, truthy: str = "TRUE") -> pd.Series:
    """Map a string flag column to 1/0."""
    return (values.astype(str).str.strip().str.upper() == truthy.upper()).astype(int)


def one_hot_bins(values: pd.Series, edges: Sequence[float], prefix: str = "class") -> pd.DataFrame:
    """
    Bucket a numeric column into one-hot classes. With edges [15, 30] the
    classes are < 15, [15, 30) and >= 30.
    """
    numeric = pd.to_numeric(values, errors="raise")
    bins = [-np.inf, *edges, np.inf]
    codes = pd.cut(numeric, bins=bins, right=False, labels=False)
    onehot = np.zeros((len(numeric), len(bins) - 1), dtype=int)
    onehot[np.arange(len(numeric)), codes.to_numpy(dtype=int)] = 1
    columns = [f"{prefix}_{i}" for i in range(onehot.shape[1])]
    return pd.DataFrame(onehot, index=values.index, columns=columns)


def _convert_columns(df: pd.DataFrame, columns: Sequence[str], converters: dict) -> pd.DataFrame:
    """Apply converters column by column; a converter may expand one column into several."""
    parts = []
    for col in columns:
        converted = converters[col](df[col]) if col in converters else df[col]
        if isinstance(converted, pd.Series):
            converted = converted.to_frame(col)
        parts.append(converted)
    return pd.concat(parts, axis=1).apply(pd.to_numeric, errors="raise")


def load_csv(
    csv_path: Path,
    data_columns: Sequence[str],
    label_columns: Sequence[str],
    converters: dict[str, Callable[[pd.Series], pd.Series | pd.DataFrame]] | None = None,
    shuffle: bool = False,
    split_test: int | float | None = None,
    random_state: int | None = 42,
) -> Dataset:
    """
    Read a CSV and return feature / label matrices, optionally split into train
    and test parts.

    `converters` map a column name to a function applied to the whole column; a
    function may return a DataFrame to expand one column into several (one-hot
    labels). `split_test` is a row count (int) or a fraction (float).
    """
    df = pd.read_csv(csv_path)

    missing = [c for c in [*data_columns, *label_columns] if c not in df.columns]
    if missing:
        raise KeyError(f"Columns not found in {csv_path}: {missing}")

    converters = converters or {}
    unused = [c for c in converters if c not in data_columns and c not in label_columns]
    if unused:
        raise KeyError(f"Converters given for columns that are not loaded: {unused}")

    features = _convert_columns(df, data_columns, converters)
    labels = _convert_columns(df, label_columns, converters)

    feature_names = list(features.columns)
    label_names = list(labels.columns)

    if not split_test:
        if shuffle:
            order = np.random.default_rng(random_state).permutation(len(df))
            features, labels = features.iloc[order], labels.iloc[order]
        empty_x = np.empty((0, len(feature_names)))
        empty_y = np.empty((0, len(label_names)))
        return Dataset(
            features.to_numpy(dtype=float),
            labels.to_numpy(dtype=float),
            empty_x,
            empty_y,
            feature_names,
            label_names,
        )

    X_train, X_test, y_train, y_test = train_test_split(
        features,
        labels,
        test_size=split_test,
        shuffle=shuffle,
        random_state=random_state if shuffle else None,
    )
    return Dataset(
        X_train.to_numpy(dtype=float),
        y_train.to_numpy(dtype=float),
        X_test.to_numpy(dtype=float),
        y_test.to_numpy(dtype=float),
        feature_names,
        label_names,
    )
