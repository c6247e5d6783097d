from __future__ import annotations

"""
Loss-curve plotting for trained models.
"""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


def plot_loss_history(history: list[float], path: Path, title: str = "Training loss") -> Path:
    """
    Save a loss-per-epoch curve. `history` is most-recent-first (as kept by the
    trainer), so it is reversed to plot in chronological order.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    losses = list(reversed(history))

    plt.figure(figsize=(8, 5))
    plt.plot(range(1, len(losses) + 1), losses, color="darkorange", lw=2)
    plt.xlabel("Epoch")
    plt.ylabel("Loss")
    plt.title(title)
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(path)
    plt.close()
    return path
