"""
K-means++ initialization strategy.

Selects initial cluster centroids that are far apart to improve convergence
speed and quality.
"""

from typing import Any, List, Sequence

import torch

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster, ClusterOps, new_cluster_set
from ..utils.validation import check_n_clusters


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization with greedy farthest-point selection.

    Algorithm:
    1. Choose first centroid uniformly at random
    2. For each remaining centroid:
       - Compute distance from each unchosen observation to its nearest
         already-chosen centroid
       - Choose the observation with the largest such distance

    Step 2 picks the farthest observation instead of sampling with probability
    proportional to the squared distance as textbook k-means++ does. Given the
    first pick, seeding is deterministic, and ties go to the lowest position.

    Observations are tracked by position, so equal-valued observations at
    different positions may both become centroids.
    """

    def select_indices(self, observations: Sequence[Any], n_clusters: int,
                       ops: ClusterOps, generator: torch.Generator) -> List[int]:
        """Choose the positions of the initial centroids.

        Args:
            observations: Observation collection
            n_clusters: Number of centroids, 1 <= n_clusters <= len(observations)
            ops: Caller-supplied functions (only distance is used)
            generator: Random source for the first pick

        Returns:
            List of n_clusters distinct positions, in selection order

        Raises:
            InconsistentClusterError: If n_clusters is out of range
        """
        n_points = len(observations)
        n_clusters = check_n_clusters(n_clusters, n_points)

        first_idx = int(torch.randint(n_points, (1,), generator=generator).item())
        center_indices = [first_idx]
        chosen = {first_idx}

        # Distance from each observation to its nearest chosen centroid,
        # updated against the newest centroid only
        min_distances = [float('inf')] * n_points
        newest = first_idx

        while len(center_indices) < n_clusters:
            new_centroid = observations[newest]
            best_distance = -1.0
            best_candidate = None

            for i, observation in enumerate(observations):
                if i in chosen:
                    continue

                d = ops.distance(observation, new_centroid)
                if d < min_distances[i]:
                    min_distances[i] = d

                if min_distances[i] > best_distance:
                    best_distance = min_distances[i]
                    best_candidate = i

            center_indices.append(best_candidate)
            chosen.add(best_candidate)
            newest = best_candidate

        return center_indices

    def initialize(self, observations: Sequence[Any], n_clusters: int,
                   ops: ClusterOps, generator: torch.Generator) -> List[Cluster]:
        """Initialize cluster centroids using K-means++.

        Returns:
            List of clusters with centroids copied from observations
        """
        indices = self.select_indices(observations, n_clusters, ops, generator)
        self.center_indices_ = indices
        return new_cluster_set([observations[idx] for idx in indices])
