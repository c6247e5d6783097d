from gd_regression.plotting import plot_loss_history


def test_plot_writes_png(tmp_path):
    out = plot_loss_history([0.5, 1.0, 4.0], tmp_path / "plots" / "loss.png", title="MSE")
    assert out.exists()
    assert out.stat().st_size > 0
