"""
Base class for clustering algorithms in the gkmeans family.

Provides the common algorithmic skeleton: seed once, then alternate
assignment and update steps until the convergence criterion holds.
"""

from abc import abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Union
import numbers
import time
import warnings

import torch

from .interfaces import (
    AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ConvergenceCriterion
)
from .data_structures import (
    Cluster, ClusterOps, AlgorithmState, DistanceFn, MeanFn, EqualsFn
)
from ..exceptions import ClusteringCancelled, ConvergenceWarning
from ..utils.validation import check_observations, check_n_clusters, check_random_state


class BaseClusteringAlgorithm:
    """Base class implementing the alternating optimization framework.

    Subclasses need to specify:
    - Initialization strategy
    - Assignment strategy
    - Parameter update strategy
    - Convergence criterion

    The observation collection and the three caller functions are fixed for
    the lifetime of the object. Everything else is configuration and can be
    changed with ``set_params``.
    """

    def __init__(self,
                 observations: Iterable[Any],
                 distance: DistanceFn,
                 mean: MeanFn,
                 equals: EqualsFn,
                 max_iter: Optional[int] = 300,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            observations: Collection of observations to cluster
            distance: (a, b) -> float, non-negative
            mean: (members) -> centroid
            equals: (a, b) -> bool, used to detect convergence
            max_iter: Maximum iterations, None for no limit
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or torch.Generator for reproducibility

        Raises:
            InvalidInputError: If observations is empty
        """
        self._observations = check_observations(observations)
        self._ops = ClusterOps(distance=distance, mean=mean, equals=equals)

        self.max_iter = self._check_max_iter(max_iter)
        self.verbose = verbose
        self.random_state = random_state
        self._generator = check_random_state(random_state)

        # These will be set by subclasses
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None

        # Diagnostics of the last run
        self.n_iter_ = 0
        self.converged_ = False
        self.history_: List[AlgorithmState] = []
        self.seed_indices_: Optional[List[int]] = None

    @staticmethod
    def _check_max_iter(max_iter: Optional[int]) -> Optional[int]:
        if max_iter is None:
            return None
        if isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral):
            raise ValueError(f"max_iter must be int or None, got {type(max_iter).__name__}")
        max_iter = int(max_iter)
        if max_iter < 1:
            raise ValueError(f"max_iter must be positive or None, got {max_iter}")
        return max_iter

    @property
    def observations(self) -> tuple:
        """The observation collection, in input order."""
        return self._observations

    @property
    def ops(self) -> ClusterOps:
        """The caller-supplied distance/mean/equals functions."""
        return self._ops

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.convergence_criterion
        """
        pass

    def _ensure_components(self) -> None:
        if self.assignment_strategy is None:
            self._create_components()

    def calculate(self, n_clusters: int, cancel_event: Optional[Any] = None) -> List[Cluster]:
        """Seed and refine a fresh cluster set.

        Args:
            n_clusters: Number of clusters, 1 <= n_clusters <= len(observations)
            cancel_event: Optional object with ``is_set()`` (e.g.
                threading.Event), checked before each iteration

        Returns:
            List of n_clusters clusters (centroid + members)

        Raises:
            InconsistentClusterError: If n_clusters is out of range
            ClusteringCancelled: If cancel_event was set
        """
        n_clusters = check_n_clusters(n_clusters, len(self._observations))

        self._create_components()

        if self.verbose:
            print(f"Initializing {n_clusters} clusters...")

        clusters = self.initialization_strategy.initialize(
            self._observations, n_clusters, self._ops, self._generator
        )
        self.seed_indices_ = getattr(self.initialization_strategy, 'center_indices_', None)

        self.refine(clusters, cancel_event=cancel_event)
        return clusters

    def refine(self, clusters: List[Cluster], cancel_event: Optional[Any] = None) -> None:
        """Run assignment/update iterations on ``clusters`` until convergence.

        Mutates the clusters in place. Stops early with a ConvergenceWarning
        when max_iter is reached.
        """
        self._ensure_components()

        self.n_iter_ = 0
        self.converged_ = False
        self.history_ = []
        self.convergence_criterion.reset()

        start_time = time.time()
        iteration = 0

        while self.max_iter is None or iteration < self.max_iter:
            if cancel_event is not None and cancel_event.is_set():
                raise ClusteringCancelled(f"Clustering cancelled before iteration {iteration}")

            iter_start_time = time.time()

            state = self._iterate(clusters, iteration)
            state.converged = self.convergence_criterion.check({
                'iteration': iteration,
                'n_changed': state.n_changed,
                'objective': state.objective
            })
            self.history_.append(state)
            self.n_iter_ = iteration + 1

            # Logging
            iter_time = time.time() - iter_start_time
            if self.verbose >= 2:
                print(f"Iteration {iteration:3d}: changed = {state.n_changed}, "
                      f"objective = {state.objective:.6f} ({iter_time:.3f}s)")

            if state.converged:
                self.converged_ = True
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

            iteration += 1

        if not self.converged_:
            warnings.warn(f"Failed to converge after {self.max_iter} iterations",
                          ConvergenceWarning)

        if self.verbose:
            print(f"Total refinement time: {time.time() - start_time:.3f}s")

    def step(self, clusters: List[Cluster]) -> bool:
        """Run a single assignment+update iteration.

        Returns:
            True if any centroid changed
        """
        self._ensure_components()
        state = self._iterate(clusters, self.n_iter_)
        return state.n_changed > 0

    def _iterate(self, clusters: List[Cluster], iteration: int) -> AlgorithmState:
        """One assignment step followed by one update step."""
        # Assignment step
        _, distances = self.assignment_strategy.compute_assignments(
            self._observations, clusters, self._ops
        )

        # Update step: every centroid is recomputed, no short-circuit
        n_changed = 0
        for k, cluster in enumerate(clusters):
            if self.update_strategy.update(cluster, self._ops, cluster_idx=k, iteration=iteration):
                n_changed += 1

        return AlgorithmState(
            iteration=iteration,
            n_changed=n_changed,
            objective=float(sum(distances)),
            metadata={'sizes': [cluster.size for cluster in clusters]}
        )

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get configuration parameters (sklearn compatibility)."""
        return {
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set configuration parameters (sklearn compatibility).

        Observations and the caller functions cannot be changed.
        """
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Invalid parameter {key!r} for {type(self).__name__}")
            if key == 'max_iter':
                value = self._check_max_iter(value)
            if key == 'random_state':
                self._generator = check_random_state(value)
            setattr(self, key, value)

        # Rebuild components on next use
        self.assignment_strategy = None
        return self
