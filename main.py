from __future__ import annotations

"""
CLI entrypoint for the cars experiments. Pick one via --experiment:
linear (mpg from engine specs), logistic (passed emissions),
multinomial (mpg bucketed into three classes).
"""

import argparse
from pathlib import Path

import numpy as np

from gd_regression import (
    compute_classification_metrics,
    linear_regression,
    load_csv,
    logistic_regression,
    one_hot_bins,
    summarize_coefficients,
    to_binary,
)
from gd_regression.metrics import majority_baseline

FEATURE_COLUMNS = ["horsepower", "displacement", "weight"]
MPG_EDGES = [15, 30]


def describe_dataset(data):
    """Print sizes and column names of the loaded split."""
    print(f"Features: {data.feature_names} -> labels: {data.label_names}")
    print(f"Train size: {len(data.features)}, Test size: {len(data.test_features)}")


def print_metrics(label: str, report: dict):
    """One line of scores at the decision boundary, then the confusion matrix."""
    print(
        f"[{label}] boundary {report['threshold']:.2f}: "
        f"acc={report['accuracy']:.3f} prec={report['precision']:.3f} "
        f"rec={report['recall']:.3f} f1={report['f1']:.3f} "
        f"auc={report['roc_auc']:.3f} log-loss={report['log_loss']:.4f}"
    )
    (tn, fp), (fn, tp) = report["confusion_matrix"].tolist()
    print(f"    TN={tn} FP={fp} FN={fn} TP={tp}")


def build_arg_parser():
    """CLI parser with knobs for the split, trainer options, and experiment choice."""
    parser = argparse.ArgumentParser(
        description="Fit linear / logistic regression on the cars dataset with gradient descent."
    )
    parser.add_argument("--csv-path", type=Path, default=Path("data/cars.csv"))
    parser.add_argument(
        "--experiment",
        choices=["linear", "logistic", "multinomial"],
        default="linear",
        help="linear: predict mpg; logistic: passedemissions; multinomial: mpg class.",
    )
    parser.add_argument("--learning-rate", type=float, default=None)
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--batch-size", type=int, default=None)
    parser.add_argument(
        "--decision-boundary",
        type=float,
        default=None,
        help="Probability threshold for a positive class (logistic experiments).",
    )
    parser.add_argument(
        "--split-test",
        type=int,
        default=50,
        help="Number of rows held out for testing.",
    )
    parser.add_argument("--no-shuffle", action="store_true", help="Keep CSV row order.")
    parser.add_argument("--random-state", type=int, default=42)
    parser.add_argument(
        "--plot-path",
        type=Path,
        default=None,
        help="Save the loss curve to this PNG.",
    )
    parser.add_argument("--verbose", action="store_true", help="Print loss every 100 epochs.")
    return parser


def trainer_options(args: argparse.Namespace, defaults: dict) -> dict:
    """Experiment defaults overridden by whatever was given on the command line."""
    options = dict(defaults)
    for key in ("learning_rate", "iterations", "batch_size"):
        value = getattr(args, key)
        if value is not None:
            options[key] = value
    options["verbose"] = args.verbose
    return options


def load(args: argparse.Namespace, label_columns, converters=None, data_columns=None):
    if not args.csv_path.is_file():
        raise SystemExit(f"CSV not found: {args.csv_path}")
    return load_csv(
        args.csv_path,
        data_columns=data_columns or FEATURE_COLUMNS,
        label_columns=label_columns,
        converters=converters,
        shuffle=not args.no_shuffle,
        split_test=args.split_test,
        random_state=args.random_state,
    )


def maybe_plot(args: argparse.Namespace, model, title: str):
    if args.plot_path is None:
        return
    from gd_regression.plotting import plot_loss_history

    out = plot_loss_history(model.loss_history, args.plot_path, title=title)
    print(f"Saved loss curve to {out}")


def run_linear(args: argparse.Namespace):
    """Predict mpg from horsepower, weight and displacement."""
    data = load(args, ["mpg"], data_columns=["horsepower", "weight", "displacement"])
    describe_dataset(data)

    model = linear_regression(
        data.features,
        data.labels,
        **trainer_options(
            args, {"learning_rate": 0.1, "iterations": 100, "batch_size": 10}
        ),
    )
    model.train()

    r2 = model.test(data.test_features, data.test_labels)
    print(f"R^2 on test set: {r2:.4f}")
    print(f"Final learning rate: {model.learning_rate:.4g}")
    print("\nWeights (standardized units):")
    print(summarize_coefficients(model.weights, data.feature_names))
    print(f"Intercept: {model.weights[0, 0]:.4f}")
    maybe_plot(args, model, "MSE per epoch")


def run_logistic(args: argparse.Namespace):
    """Predict whether a car passed emissions."""
    data = load(
        args,
        ["passedemissions"],
        converters={"passedemissions": to_binary},
    )
    describe_dataset(data)

    boundary = 0.6 if args.decision_boundary is None else args.decision_boundary
    model = logistic_regression(
        data.features,
        data.labels,
        decision_boundary=boundary,
        **trainer_options(
            args, {"learning_rate": 0.5, "iterations": 100, "batch_size": 40}
        ),
    )
    model.train()

    print(f"Accuracy on test set: {model.test(data.test_features, data.test_labels):.4f}")
    print_metrics(
        "Majority baseline", majority_baseline(data.labels, data.test_labels, boundary)
    )
    probs = model.predict(data.test_features)
    print_metrics(
        "GD logistic", compute_classification_metrics(data.test_labels, probs, boundary)
    )
    print("\nWeights (standardized units):")
    print(summarize_coefficients(model.weights, data.feature_names))
    maybe_plot(args, model, "Cross-entropy per epoch")


def run_multinomial(args: argparse.Namespace):
    """Classify mpg as low (< 15), medium (< 30) or high."""
    data = load(
        args,
        ["mpg"],
        converters={"mpg": lambda s: one_hot_bins(s, MPG_EDGES, prefix="mpg")},
    )
    describe_dataset(data)

    boundary = 0.6 if args.decision_boundary is None else args.decision_boundary
    model = logistic_regression(
        data.features,
        data.labels,
        decision_boundary=boundary,
        **trainer_options(
            args, {"learning_rate": 0.5, "iterations": 100, "batch_size": 40}
        ),
    )
    model.train()

    print(f"Accuracy on test set: {model.test(data.test_features, data.test_labels):.4f}")
    sample = np.array([[215, 440, 2.16]])
    print(f"Class probabilities for {sample.tolist()}: {model.predict(sample).round(3).tolist()}")
    print("\nWeights (standardized units):")
    print(summarize_coefficients(model.weights, data.feature_names))
    maybe_plot(args, model, "Cross-entropy per epoch")


def main(args: argparse.Namespace | None = None):
    """Dispatch to the selected experiment."""
    args = args or build_arg_parser().parse_args()

    if args.experiment == "linear":
        run_linear(args)
    elif args.experiment == "logistic":
        run_logistic(args)
    else:
        run_multinomial(args)


if __name__ == "__main__":
    main()
