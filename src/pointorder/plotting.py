from __future__ import annotations

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns

from .geometry import as_points

# ─── STYLING ────────────────────────────────────────────────────────────────
sns.set_style("whitegrid")


def plot_path_3d(points, order, pdf_path, *, title: str = "", labels: Optional[np.ndarray] = None):
    """
    Draw the travel path through `points` in `order` and save it to `pdf_path`.

    Points are colored by `labels` (e.g. cluster or slice ids) when given,
    otherwise by visiting rank. The first point is marked with a star.
    """
    pts = as_points(points)
    order = np.asarray(order, dtype=int)
    path = pts[order]

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(projection="3d")

    if len(path):
        ax.plot(path[:, 0], path[:, 1], path[:, 2], color="dimgray", linewidth=0.8, alpha=0.7)
        if labels is not None:
            lab = np.asarray(labels)[order]
            ids = sorted(np.unique(lab).tolist())
            palette = sns.color_palette("hls", len(ids))
            colors = [palette[ids.index(v)] for v in lab]
        else:
            colors = sns.color_palette("viridis", as_cmap=True)(np.linspace(0.0, 1.0, len(path)))
        ax.scatter(path[:, 0], path[:, 1], path[:, 2], s=18, c=colors, edgecolor="k", linewidth=0.3)
        ax.scatter(*path[0], s=120, marker="*", color="indianred", edgecolor="k")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title(title, pad=12)
    plt.tight_layout()
    plt.savefig(pdf_path, dpi=300, pad_inches=0.05)
    plt.close(fig)
