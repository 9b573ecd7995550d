"""
Initialization from previous solution or custom centroids.

Useful for warm starts or when you have good initial guesses.
"""

from typing import Any, List, Sequence, Union

import torch

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster, ClusterOps, new_cluster_set
from ..utils.validation import check_init_centroids


class FromPreviousInit(InitializationStrategy):
    """Initialize from previous clusters or custom starting centroids.

    Accepts either:
    - A sequence of centroid values (a tensor is split along dim 0)
    - A list of Cluster objects from a previous run
    """

    def __init__(self, initial_state: Union[Sequence[Any], List[Cluster], torch.Tensor]):
        """
        Args:
            initial_state: Previous solution to use for initialization
        """
        self.initial_state = initial_state

    def initialize(self, observations: Sequence[Any], n_clusters: int,
                   ops: ClusterOps, generator: torch.Generator) -> List[Cluster]:
        """Initialize from previous state.

        Returns:
            Fresh clusters with the given centroids and no members
        """
        state = self.initial_state
        if not isinstance(state, torch.Tensor):
            state = tuple(state)
            if all(isinstance(c, Cluster) for c in state):
                state = [c.centroid for c in state]

        centroids = check_init_centroids(state, n_clusters)
        self.center_indices_ = None

        return new_cluster_set(centroids)
