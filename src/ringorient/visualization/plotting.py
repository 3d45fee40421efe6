"""
Visualization utilities for ring orientation.

Contains plotting functions for:
- A single ring with its traversal direction and detected winding
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from ..algorithm.orientation import is_ccw
from ..core.coordinate import as_ring


def plot_ring(
    ring,
    ax: Optional[plt.Axes] = None,
    title: Optional[str] = None,
    show_direction: bool = True
) -> plt.Axes:
    """
    Visualize a closed ring and its winding direction.

    Parameters
    ----------
    ring : array-like, LinearRing, LineString or Polygon
        Ring vertices of shape (N, 2), first point equal to last.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str, optional
        Plot title. Defaults to "Ring orientation".
    show_direction : bool
        Whether to draw arrows along the edges in traversal order.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    ring = as_ring(ring)
    ccw = is_ccw(ring)

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    color = 'steelblue' if ccw else 'coral'

    ax.plot(ring[:, 0], ring[:, 1], '-', color=color, linewidth=2, zorder=3)
    ax.fill(ring[:, 0], ring[:, 1], alpha=0.15, color=color, zorder=1)
    ax.scatter(ring[:-1, 0], ring[:-1, 1], c='black', s=40, marker='s', zorder=4)

    # Start vertex
    ax.scatter([ring[0, 0]], [ring[0, 1]], c='red', s=120, marker='*', zorder=5,
               label='Start')

    if show_direction:
        starts = ring[:-1]
        deltas = np.diff(ring, axis=0)
        # Arrow from the start of each edge to its midpoint
        ax.quiver(
            starts[:, 0], starts[:, 1],
            deltas[:, 0] * 0.5, deltas[:, 1] * 0.5,
            angles='xy', scale_units='xy', scale=1,
            color=color, width=0.006, zorder=4
        )

    ax.text(
        0.02, 0.98,
        f"Winding: {'CCW' if ccw else 'CW'}\nVertices: {len(ring) - 1}",
        transform=ax.transAxes,
        verticalalignment='top',
        fontfamily='monospace',
        fontsize=9,
        bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
    )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title if title is not None else "Ring orientation")
    ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax
