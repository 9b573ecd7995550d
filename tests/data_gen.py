# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the gkmeans test suite.

    >>> X, y = make_blobs_2d()
    >>> X.shape, y.shape
    ((150, 2), (150,))
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import numpy as np

NDArray = np.ndarray

DEFAULT_CENTERS = ((0.0, 0.0), (10.0, 0.0), (0.0, 10.0))


def make_blobs_2d(
    centers: Sequence[Tuple[float, float]] = DEFAULT_CENTERS,
    n_per: int = 50,
    scale: float = 0.5,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray]:
    """
    Construct isotropic Gaussian blobs in R^2.

    Parameters
    ----------
    centers : sequence of (x, y)
        Blob centers. Keep them far apart relative to ``scale`` so that the
        ground-truth partition is the only stable one.
    n_per : int, default=50
        Number of points per blob.
    scale : float, default=0.5
        Standard deviation of each blob.
    seed : int or None
        RNG seed for reproducibility.

    Returns
    -------
    X : (len(centers)*n_per, 2) ndarray, float32
        Points grouped by blob: rows [k*n_per, (k+1)*n_per) belong to blob k.
    y : (len(centers)*n_per,) ndarray, int64
        Ground-truth labels.
    """
    rng = np.random.default_rng(seed)

    blobs = [np.asarray(c, dtype=float) + scale * rng.normal(size=(n_per, 2)) for c in centers]

    X = np.vstack(blobs).astype(np.float32)
    y = np.repeat(np.arange(len(centers), dtype=np.int64), n_per)

    return X, y


def true_partition(y: NDArray) -> set:
    """Ground-truth partition as a set of frozensets of positions."""
    return {frozenset(np.flatnonzero(y == k).tolist()) for k in np.unique(y)}
