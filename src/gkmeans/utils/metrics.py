"""
Evaluation helpers for a computed cluster set.

All helpers work through the caller's distance function; observations stay
opaque.
"""

from typing import List, Sequence

from ..base.data_structures import Cluster, DistanceFn
from ..assignments.hard import nearest_cluster


def inertia(clusters: Sequence[Cluster], distance: DistanceFn) -> float:
    """Compute sum of distances from members to their cluster centroid.

    With a squared Euclidean distance this is the usual k-means inertia.

    Returns:
        Total inertia (lower is better)
    """
    total = 0.0

    for cluster in clusters:
        for member in cluster.members:
            total += float(distance(member, cluster.centroid))

    return total


def cluster_labels(clusters: Sequence[Cluster], n_observations: int) -> List[int]:
    """Cluster index of every observation position.

    Positions not present in any cluster get label -1.
    """
    labels = [-1] * n_observations

    for k, cluster in enumerate(clusters):
        for idx in cluster.indices:
            labels[idx] = k

    return labels


def is_stable_partition(clusters: Sequence[Cluster], distance: DistanceFn) -> bool:
    """Check that reassigning every member leaves it where it is.

    Uses the same nearest-centroid rule as assignment (ties go to the lowest
    cluster index), so a converged cluster set always passes.
    """
    centroids = [cluster.centroid for cluster in clusters]

    for k, cluster in enumerate(clusters):
        for member in cluster.members:
            nearest, _ = nearest_cluster(member, centroids, distance)
            if nearest != k:
                return False

    return True
