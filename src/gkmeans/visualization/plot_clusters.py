"""
Cluster visualization utilities.

Plots cluster sets whose observations and centroids are 2-D points
(tensors, numpy arrays or pairs of numbers).
"""

from typing import Any, List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import torch

from ..base.data_structures import Cluster


def _to_points_2d(values: Sequence[Any]) -> np.ndarray:
    """Stack 2-D points into an (n, 2) numpy array."""
    rows = []
    for v in values:
        if isinstance(v, torch.Tensor):
            v = v.detach().cpu().numpy()
        rows.append(np.asarray(v, dtype=float).reshape(-1))

    if not rows:
        return np.empty((0, 2))

    points = np.vstack(rows)
    if points.shape[1] != 2:
        raise ValueError(f"Expected 2-D points, got dimension {points.shape[1]}")
    return points


def plot_clusters_2d(clusters: Sequence[Cluster],
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[Any]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_centers: bool = True,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        clusters: Cluster set returned by ``KMeans.calculate``
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_centers: Whether to draw centroids
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    n_clusters = len(clusters)

    # Default colors
    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    # Plot each cluster
    for k, cluster in enumerate(clusters):
        points = _to_points_2d(cluster.members)
        if len(points) == 0:
            continue
        ax.scatter(points[:, 0], points[:, 1],
                   c=[colors[k % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {k}')

    # Plot centroids
    if show_centers and n_clusters > 0:
        centers = _to_points_2d([cluster.centroid for cluster in clusters])
        ax.scatter(centers[:, 0], centers[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centers',
                   zorder=10)

    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')

    if title:
        ax.set_title(title)

    if show_legend:
        ax.legend()

    return ax
