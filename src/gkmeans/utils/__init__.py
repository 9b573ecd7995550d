"""Utility functions for gkmeans algorithms."""

from .convergence import CentroidsUnchanged

from .metrics import (
    inertia,
    cluster_labels,
    is_stable_partition
)

from .validation import (
    check_observations,
    check_n_clusters,
    check_random_state,
    check_init_centroids
)

__all__ = [
    # Convergence criteria
    'CentroidsUnchanged',

    # Metrics
    'inertia',
    'cluster_labels',
    'is_stable_partition',

    # Validation
    'check_observations',
    'check_n_clusters',
    'check_random_state',
    'check_init_centroids'
]
