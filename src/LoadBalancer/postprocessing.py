"""Static rendering of work distributions.

Draws the block ownership of one layer as an image, with the outlines of the
next coarser layer on top, and saves it to disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.colors import ListedColormap

from utils.plotting import palettes

from .distribution import LAYER_ORDER


def ownership_map(grid, layer) -> np.ndarray:
    """Block-shaped array with the index of the owning set, NaN for land.

    Parameters
    ----------
    grid : Grid
        Block grid the layer was computed on.
    layer : Layer
        Partition to rasterize.

    Returns
    -------
    np.ndarray
        Float array of shape (grid.height, grid.width).
    """
    owners = np.full((grid.height, grid.width), np.nan)
    for s in layer:
        for c in s:
            owners[c.y, c.x] = s.index
    return owners


def _outline(owners: np.ndarray) -> np.ndarray:
    """Segments separating blocks with different (non-NaN) owners."""
    segments = []
    height, width = owners.shape

    # Vertical edges between horizontally adjacent blocks
    left, right = owners[:, :-1], owners[:, 1:]
    for y, x in zip(*np.nonzero((left != right) & ~np.isnan(left) & ~np.isnan(right))):
        segments.append([(x + 0.5, y - 0.5), (x + 0.5, y + 0.5)])

    # Horizontal edges between vertically adjacent blocks
    lower, upper = owners[:-1, :], owners[1:, :]
    for y, x in zip(*np.nonzero((lower != upper) & ~np.isnan(lower) & ~np.isnan(upper))):
        segments.append([(x - 0.5, y + 0.5), (x + 0.5, y + 0.5)])

    return np.array(segments, dtype=float).reshape(-1, 2, 2)


def plot_distribution(distribution, layer: str = "CORES", ax=None):
    """Plot the ownership of ``layer`` with the next coarser layer outlined.

    Parameters
    ----------
    distribution : Distribution
        Computed distribution.
    layer : str
        Layer to color, e.g. 'CORES' or 'NODES'.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on; a new figure is created when omitted.

    Returns
    -------
    matplotlib.figure.Figure
    """
    grid = distribution.grid
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8 * grid.height / max(grid.width, 1)))
    else:
        fig = ax.figure

    owners = ownership_map(grid, distribution.layer(layer))
    n_sets = len(distribution.layer(layer))
    cmap = ListedColormap(palettes.get_categorical(max(n_sets, 1)))
    cmap.set_bad(palettes.LAND)

    ax.imshow(np.ma.masked_invalid(owners), origin="lower", cmap=cmap, interpolation="nearest",
              vmin=-0.5, vmax=max(n_sets, 1) - 0.5)

    # Outline the next coarser layer present in the distribution
    coarser = [n for n in LAYER_ORDER[LAYER_ORDER.index(layer) + 1:] if distribution.contains(n)]
    if coarser:
        segments = _outline(ownership_map(grid, distribution.layer(coarser[0])))
        ax.add_collection(LineCollection(segments, colors=palettes.OUTLINE, linewidths=1.5))

    ax.set_title(f"{layer}: {n_sets} sets")
    ax.set_xlabel("block x")
    ax.set_ylabel("block y")
    return fig


def save_distribution_image(distribution, path: Union[str, Path], layer: str = "CORES") -> Path:
    """Render ``layer`` of the distribution and write it to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig = plot_distribution(distribution, layer=layer)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path
