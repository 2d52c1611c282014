# faces/plot.py
from io import BytesIO

import matplotlib.pyplot as plt

from faces.config import PARAMS

HIGHLIGHT = (0.0, 1.0, 1.0)


def _rgb01(color):
    return tuple(c / 255.0 for c in color)


def plot_preview(G, faces, highlight=None, point=None, title=None,
                 show_indices=True, lw=None):
    """
    Draws the graph with every face filled in its display colour and
    labelled with its id at the vertex centroid; returns PNG bytes.
      highlight - face id drawn in cyan instead of its own colour
      point     - query point, drawn as a red cross
    """
    lw = PARAMS["PREVIEW_LW"] if lw is None else lw
    size = PARAMS["PREVIEW_SIZE"]
    fig, ax = plt.subplots(figsize=(size, size))

    for f in faces:
        color = HIGHLIGHT if f.id == highlight else _rgb01(f.color)
        xs = [p[0] for p in f.coords]
        ys = [p[1] for p in f.coords]
        ax.fill(xs, ys, color=color, alpha=0.6, linewidth=0)
        cx, cy = f.centroid()
        ax.text(cx, cy, str(f.id), color="red", ha="center", va="center")

    for (u, v) in G.edges:
        a, b = G.vertices[u], G.vertices[v]
        ax.plot([a[0], b[0]], [a[1], b[1]], color="black", linewidth=lw)

    if G.vertices:
        ax.scatter([p[0] for p in G.vertices], [p[1] for p in G.vertices],
                   s=12, color="black", zorder=3)
    if show_indices:
        for i, (x, y) in enumerate(G.vertices):
            ax.annotate(str(i), (x, y), textcoords="offset points", xytext=(4, 4),
                        color="blue", fontsize=8)

    if point is not None:
        ax.plot([point[0]], [point[1]], marker="x", color="red", markersize=10)

    ax.set_aspect("equal", adjustable="box")
    ax.grid(True, linewidth=0.2)
    if title:
        ax.set_title(title)
    ax.margins(0.05)

    buf = BytesIO()
    fig.tight_layout()
    fig.savefig(buf, format="png", dpi=PARAMS["PREVIEW_DPI"])
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()
