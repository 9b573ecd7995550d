"""Distance functions for clustering algorithms."""

from .euclidean import (
    EuclideanDistance,
    absolute_difference,
    euclidean_distance,
    squared_euclidean_distance
)

__all__ = [
    'EuclideanDistance',
    'absolute_difference',
    'euclidean_distance',
    'squared_euclidean_distance'
]
