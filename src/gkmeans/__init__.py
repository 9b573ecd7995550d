"""
gkmeans: k-means clustering for observations of any type.

The caller supplies what "distance", "mean" and "equality" mean for their
observations; gkmeans supplies k-means++ seeding and Lloyd's iteration.

Example usage:
    >>> from gkmeans import KMeans
    >>>
    >>> km = KMeans([1, 2, 3, 10, 11, 12],
    ...             distance=lambda a, b: abs(a - b),
    ...             mean=lambda xs: sum(xs) / len(xs),
    ...             equals=lambda a, b: a == b,
    ...             random_state=0)
    >>> clusters = km.calculate(2)
    >>> sorted(c.centroid for c in clusters)
    [2.0, 11.0]

Tensor observations:
    >>> import torch
    >>> from gkmeans import KMeans, tensor_ops
    >>>
    >>> X = torch.randn(200, 2)
    >>> clusters = KMeans.from_ops(X, tensor_ops(atol=1e-6)).calculate(3)
"""

__version__ = '0.1.0'

# Import main algorithm
from .algorithms.kmeans import KMeans

# Ready-made operations
from .representations import numeric_ops, tensor_ops

# Visualization
from .visualization import plot_clusters_2d

# Convenience imports
from .base import (
    Cluster,
    ClusterOps,
    AlgorithmState
)

from .exceptions import (
    KMeansError,
    InvalidInputError,
    InconsistentClusterError,
    EmptyClusterError,
    ClusteringCancelled,
    ConvergenceWarning
)

__all__ = [
    # Algorithms
    'KMeans',

    # Operations
    'numeric_ops',
    'tensor_ops',

    # Core data structures
    'Cluster',
    'ClusterOps',
    'AlgorithmState',

    # Errors
    'KMeansError',
    'InvalidInputError',
    'InconsistentClusterError',
    'EmptyClusterError',
    'ClusteringCancelled',
    'ConvergenceWarning',

    # Visualization
    'plot_clusters_2d',

    # Version
    '__version__'
]
