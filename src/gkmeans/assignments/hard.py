"""
Hard assignment strategy for clustering algorithms.

Assigns each observation to its nearest cluster based on the injected
distance function.
"""

from typing import Any, List, Sequence, Tuple

from ..base.interfaces import AssignmentStrategy
from ..base.data_structures import Cluster, ClusterOps, DistanceFn


def nearest_cluster(observation: Any, centroids: Sequence[Any],
                    distance: DistanceFn) -> Tuple[int, float]:
    """Find the centroid closest to ``observation``.

    Ties go to the lowest index. If no distance compares below infinity
    (e.g. every distance is NaN), index 0 is returned so that assignment stays
    a total function.

    Returns:
        (index, distance) of the nearest centroid
    """
    best_idx = 0
    best_distance = float('inf')

    for k, centroid in enumerate(centroids):
        d = distance(observation, centroid)
        if d < best_distance:
            best_distance = d
            best_idx = k

    return best_idx, best_distance


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each observation is assigned to exactly one cluster based on minimum
    distance. Members are cleared before assignment and appended in
    observation order.
    """

    def compute_assignments(self, observations: Sequence[Any],
                            clusters: List[Cluster],
                            ops: ClusterOps) -> Tuple[List[int], List[float]]:
        """Assign each observation to its nearest cluster.

        Args:
            observations: Observation collection
            clusters: Clusters to refill
            ops: Caller-supplied functions

        Returns:
            (assignments, distances) per observation
        """
        for cluster in clusters:
            cluster.clear()

        centroids = [cluster.centroid for cluster in clusters]
        assignments = []
        distances = []

        for i, observation in enumerate(observations):
            k, d = nearest_cluster(observation, centroids, ops.distance)
            clusters[k].add(observation, i)
            assignments.append(k)
            distances.append(d)

        return assignments, distances
