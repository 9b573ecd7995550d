"""Assignment strategies for clustering algorithms."""

from .hard import HardAssignment, nearest_cluster

__all__ = [
    'HardAssignment',
    'nearest_cluster'
]
