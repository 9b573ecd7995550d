"""
K-means clustering algorithm.

The classic K-means algorithm over observations of any type, implemented
using the modular framework.
"""

from typing import Any, Dict, Iterable, Optional, Sequence, Union

import torch

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import ClusterOps, DistanceFn, MeanFn, EqualsFn
from ..assignments.hard import HardAssignment
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..initialization.random import RandomInit
from ..initialization.from_previous import FromPreviousInit
from ..updates.mean import MeanUpdater, EMPTY_CLUSTER_POLICIES
from ..utils.convergence import CentroidsUnchanged


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions a fixed collection of observations into K clusters using
    caller-supplied distance, mean and equality functions. Refinement runs
    Lloyd's iteration until no centroid changes.

    Parameters
    ----------
    observations : iterable
        Observations to cluster. Never inspected directly.
    distance : callable
        ``distance(a, b) -> float``, non-negative
    mean : callable
        ``mean(members) -> centroid``
    equals : callable
        ``equals(a, b) -> bool``, decides whether a centroid moved
    init : str or sequence, default='k-means++'
        Initialization method:
        - 'k-means++' : farthest-point K-means++ seeding
        - 'random' : distinct random observations
        - sequence of n_clusters centroids : warm start
    max_iter : int or None, default=300
        Maximum number of iterations, None for no limit
    empty_cluster : {'pass', 'keep', 'raise'}, default='pass'
        What to do with a cluster that receives no members
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random source for seeding

    Attributes
    ----------
    n_iter_ : int
        Number of iterations run by the last call
    converged_ : bool
        Whether the last call reached a fixed point
    history_ : list of AlgorithmState
        Per-iteration diagnostics of the last call
    seed_indices_ : list of int or None
        Positions of the observations picked as initial centroids
    """

    def __init__(self,
                 observations: Iterable[Any],
                 distance: DistanceFn,
                 mean: MeanFn,
                 equals: EqualsFn,
                 init: Union[str, Sequence[Any], torch.Tensor] = 'k-means++',
                 max_iter: Optional[int] = 300,
                 empty_cluster: str = 'pass',
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """Initialize K-means algorithm."""
        super().__init__(
            observations=observations,
            distance=distance,
            mean=mean,
            equals=equals,
            max_iter=max_iter,
            verbose=verbose,
            random_state=random_state
        )
        if empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise ValueError(f"empty_cluster must be one of {EMPTY_CLUSTER_POLICIES}, "
                             f"got {empty_cluster!r}")
        self.init = init
        self.empty_cluster = empty_cluster

    @classmethod
    def from_ops(cls, observations: Iterable[Any], ops: ClusterOps, **kwargs) -> 'KMeans':
        """Build K-means from a ClusterOps bundle, e.g. ``tensor_ops()``."""
        return cls(observations, ops.distance, ops.mean, ops.equals, **kwargs)

    def _create_components(self) -> None:
        """Create K-means specific components."""
        # Assignment strategy
        self.assignment_strategy = HardAssignment()

        # Update strategy
        self.update_strategy = MeanUpdater(empty_cluster=self.empty_cluster)

        # Initialization
        if isinstance(self.init, str):
            if self.init == 'k-means++':
                self.initialization_strategy = KMeansPlusPlusInit()
            elif self.init == 'random':
                self.initialization_strategy = RandomInit()
            else:
                raise ValueError(f"Unknown init method: {self.init}")
        else:
            # Custom initial centroids provided
            self.initialization_strategy = FromPreviousInit(self.init)

        # Convergence criterion
        self.convergence_criterion = CentroidsUnchanged()

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get configuration parameters (sklearn compatibility)."""
        params = super().get_params(deep=deep)
        params.update({
            'init': self.init,
            'empty_cluster': self.empty_cluster
        })
        return params

    def set_params(self, **params) -> 'KMeans':
        """Set configuration parameters (sklearn compatibility)."""
        if 'empty_cluster' in params and params['empty_cluster'] not in EMPTY_CLUSTER_POLICIES:
            raise ValueError(f"empty_cluster must be one of {EMPTY_CLUSTER_POLICIES}, "
                             f"got {params['empty_cluster']!r}")
        return super().set_params(**params)

    def __repr__(self) -> str:
        init = self.init if isinstance(self.init, str) else 'custom'
        return (f"KMeans(n_observations={len(self.observations)}, init={init!r}, "
                f"max_iter={self.max_iter})")
