"""
Core interfaces for the gkmeans clustering components.

This module defines the abstract base classes every pluggable component
implements, so that seeding, assignment, update and convergence checking can
be swapped independently of each other.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple

import torch

from .data_structures import Cluster, ClusterOps


class InitializationStrategy(ABC):
    """Abstract base class for cluster seeding strategies."""

    @abstractmethod
    def initialize(self, observations: Sequence[Any], n_clusters: int,
                   ops: ClusterOps, generator: torch.Generator) -> List[Cluster]:
        """Create the initial cluster set.

        Args:
            observations: Observation collection
            n_clusters: Number of clusters to create
            ops: Caller-supplied distance/mean/equals functions
            generator: Random source

        Returns:
            List of ``n_clusters`` clusters with centroids set and no members
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for observation-to-cluster assignment."""

    @abstractmethod
    def compute_assignments(self, observations: Sequence[Any],
                            clusters: List[Cluster],
                            ops: ClusterOps) -> Tuple[List[int], List[float]]:
        """Rebuild cluster membership in place.

        Args:
            observations: Observation collection
            clusters: Clusters whose members are reset and refilled
            ops: Caller-supplied functions

        Returns:
            (assignments, distances): cluster index and distance to that
            cluster's centroid for every observation
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for centroid update strategies."""

    @abstractmethod
    def update(self, cluster: Cluster, ops: ClusterOps, **kwargs) -> bool:
        """Recompute the centroid of ``cluster`` from its members.

        Returns:
            True if the centroid changed
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
