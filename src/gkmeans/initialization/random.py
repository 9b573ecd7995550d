"""
Random initialization strategy for clustering algorithms.

Selects random observations as initial cluster centroids.
"""

from typing import Any, List, Sequence

import torch

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster, ClusterOps, new_cluster_set
from ..utils.validation import check_n_clusters


class RandomInit(InitializationStrategy):
    """Random initialization by selecting observations from the collection.

    Selects n_clusters random positions (without replacement) as initial
    centroids.
    """

    def initialize(self, observations: Sequence[Any], n_clusters: int,
                   ops: ClusterOps, generator: torch.Generator) -> List[Cluster]:
        """Initialize clusters with random observations.

        Args:
            observations: Observation collection
            n_clusters: Number of clusters
            ops: Unused
            generator: Random source

        Returns:
            List of clusters with centroids copied from observations

        Raises:
            InconsistentClusterError: If n_clusters is out of range
        """
        n_points = len(observations)
        n_clusters = check_n_clusters(n_clusters, n_points)

        indices = torch.randperm(n_points, generator=generator)[:n_clusters].tolist()
        self.center_indices_ = indices

        return new_cluster_set([observations[idx] for idx in indices])
