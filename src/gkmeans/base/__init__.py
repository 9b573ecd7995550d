"""Base classes and interfaces for gkmeans clustering algorithms."""

from .interfaces import (
    AssignmentStrategy,
    ParameterUpdater,
    InitializationStrategy,
    ConvergenceCriterion
)

from .data_structures import (
    Cluster,
    ClusterOps,
    AlgorithmState
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'AssignmentStrategy',
    'ParameterUpdater',
    'InitializationStrategy',
    'ConvergenceCriterion',

    # Data structures
    'Cluster',
    'ClusterOps',
    'AlgorithmState',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
