import numpy as np
import pandas as pd
import pytest

from gd_regression import load_csv, one_hot_bins, to_binary


@pytest.fixture
def cars_csv(tmp_path):
    df = pd.DataFrame(
        {
            "horsepower": [130, 165, 150, 140, 198, 220, 95, 88, 70, 65],
            "displacement": [307, 350, 318, 302, 429, 454, 120, 97, 85, 90],
            "weight": [1.75, 1.85, 1.72, 1.72, 2.17, 2.2, 1.19, 1.06, 0.99, 1.0],
            "mpg": [18, 15, 18, 17, 14, 13, 24, 27, 33, 36],
            "passedemissions": ["FALSE", "FALSE", "FALSE", "FALSE", "FALSE", "FALSE", "TRUE", "TRUE", "TRUE", "TRUE"],
        }
    )
    path = tmp_path / "cars.csv"
    df.to_csv(path, index=False)
    return path


def test_to_binary():
    assert to_binary(pd.Series(["TRUE", "false", " true ", "x"])).tolist() == [1, 0, 1, 0]


def test_one_hot_bins():
    out = one_hot_bins(pd.Series([10, 15, 29.9, 30, 40]), [15, 30], prefix="mpg")
    assert list(out.columns) == ["mpg_0", "mpg_1", "mpg_2"]
    assert out.to_numpy().tolist() == [
        [1, 0, 0],
        [0, 1, 0],
        [0, 1, 0],
        [0, 0, 1],
        [0, 0, 1],
    ]


def test_load_without_split(cars_csv):
    data = load_csv(cars_csv, ["horsepower", "weight"], ["mpg"])
    assert data.features.shape == (10, 2)
    assert data.labels.shape == (10, 1)
    assert data.test_features.shape == (0, 2)
    assert data.feature_names == ["horsepower", "weight"]
    assert data.features[0].tolist() == [130, 1.75]


def test_load_with_row_count_split_keeps_order(cars_csv):
    data = load_csv(cars_csv, ["horsepower"], ["mpg"], split_test=3)
    assert data.features.shape == (7, 1)
    assert data.test_features.shape == (3, 1)
    assert data.test_labels.ravel().tolist() == [27, 33, 36]


def test_shuffle_is_reproducible(cars_csv):
    a = load_csv(cars_csv, ["horsepower"], ["mpg"], shuffle=True, split_test=0.3, random_state=1)
    b = load_csv(cars_csv, ["horsepower"], ["mpg"], shuffle=True, split_test=0.3, random_state=1)
    assert np.array_equal(a.features, b.features)
    assert np.array_equal(a.test_labels, b.test_labels)
    assert len(a.features) + len(a.test_features) == 10


def test_converters_expand_labels(cars_csv):
    data = load_csv(
        cars_csv,
        ["horsepower", "displacement", "weight"],
        ["mpg"],
        converters={"mpg": lambda s: one_hot_bins(s, [15, 30], prefix="mpg")},
    )
    assert data.labels.shape == (10, 3)
    assert data.label_names == ["mpg_0", "mpg_1", "mpg_2"]
    assert np.all(data.labels.sum(axis=1) == 1)


def test_binary_converter(cars_csv):
    data = load_csv(cars_csv, ["weight"], ["passedemissions"], converters={"passedemissions": to_binary})
    assert data.labels.ravel().tolist() == [0, 0, 0, 0, 0, 0, 1, 1, 1, 1]


def test_missing_column(cars_csv):
    with pytest.raises(KeyError, match="cylinders"):
        load_csv(cars_csv, ["cylinders"], ["mpg"])


def test_converters_apply_to_data_columns(cars_csv):
    data = load_csv(cars_csv, ["weight"], ["mpg"], converters={"weight": lambda s: s * 1000})
    assert data.features[:2].ravel().tolist() == [1750.0, 1850.0]
    assert data.labels[:2].ravel().tolist() == [18, 15]


def test_converter_for_unloaded_column(cars_csv):
    with pytest.raises(KeyError, match="passedemissions"):
        load_csv(cars_csv, ["weight"], ["mpg"], converters={"passedemissions": to_binary})
