import numpy as np
import pandas as pd
import pytest

import main


@pytest.fixture
def cars_csv(tmp_path):
    rng = np.random.default_rng(3)
    n = 80
    horsepower = rng.uniform(60, 230, n)
    weight = horsepower / 100 + rng.uniform(0.2, 0.8, n)
    displacement = horsepower * 2 + rng.normal(0, 20, n)
    mpg = 45 - 0.12 * horsepower - 4 * weight + rng.normal(0, 1.5, n)
    df = pd.DataFrame(
        {
            "horsepower": horsepower,
            "displacement": displacement,
            "weight": weight,
            "mpg": mpg,
            "passedemissions": np.where(horsepower < 140, "TRUE", "FALSE"),
        }
    )
    path = tmp_path / "cars.csv"
    df.to_csv(path, index=False)
    return path


def run(argv):
    main.main(main.build_arg_parser().parse_args(argv))


def test_linear_experiment(cars_csv, tmp_path, capsys):
    plot = tmp_path / "mse.png"
    run(["--csv-path", str(cars_csv), "--experiment", "linear", "--split-test", "20",
         "--iterations", "20", "--plot-path", str(plot)])
    out = capsys.readouterr().out
    assert "Train size: 60, Test size: 20" in out
    assert "R^2 on test set" in out
    assert plot.exists()


def test_logistic_experiment(cars_csv, capsys):
    run(["--csv-path", str(cars_csv), "--experiment", "logistic", "--split-test", "20",
         "--batch-size", "20"])
    out = capsys.readouterr().out
    assert "Accuracy on test set" in out
    assert "[GD logistic]" in out
    assert "[Majority baseline]" in out
    assert "log-loss=" in out


def test_multinomial_experiment(cars_csv, capsys):
    run(["--csv-path", str(cars_csv), "--experiment", "multinomial", "--split-test", "20",
         "--batch-size", "20", "--iterations", "30"])
    out = capsys.readouterr().out
    assert "Class probabilities" in out
    assert "w2" in out


def test_missing_csv(tmp_path):
    with pytest.raises(SystemExit, match="CSV not found"):
        run(["--csv-path", str(tmp_path / "nope.csv")])
