"""
Centroid functions for K-means clustering.

Ready-made ``mean`` and ``equals`` callables, plus factories bundling them
with a matching distance into a ``ClusterOps``.
"""

from typing import Optional, Sequence

import torch
from torch import Tensor

from ..base.data_structures import ClusterOps
from ..distances.euclidean import EuclideanDistance, absolute_difference


def arithmetic_mean(values: Sequence[float]) -> float:
    """Arithmetic average of a non-empty sequence of numbers."""
    if len(values) == 0:
        raise ValueError("Cannot compute the mean of an empty cluster")
    return sum(values) / len(values)


def exact_equals(a, b) -> bool:
    """Exact equality of two numbers."""
    return a == b


def tensor_mean(points: Sequence[Tensor]) -> Tensor:
    """Coordinate-wise mean of a non-empty sequence of equally shaped tensors."""
    if len(points) == 0:
        raise ValueError("Cannot compute the mean of an empty cluster")

    stacked = torch.stack([torch.as_tensor(p) for p in points])
    if not torch.is_floating_point(stacked):
        stacked = stacked.to(torch.get_default_dtype())

    return stacked.mean(dim=0)


class TensorEquals:
    """Equality of two tensor centroids.

    Exact (``torch.equal``) by default. With ``atol`` set, centroids closer
    than ``atol`` in every coordinate compare equal, which bounds the number
    of iterations spent chasing floating point noise.
    """

    def __init__(self, atol: Optional[float] = None):
        if atol is not None and atol < 0:
            raise ValueError(f"atol must be non-negative, got {atol}")
        self.atol = atol

    def __call__(self, a, b) -> bool:
        a = torch.as_tensor(a)
        b = torch.as_tensor(b)

        if self.atol is None:
            return torch.equal(a, b)
        if a.shape != b.shape:
            return False
        return torch.allclose(a, b, rtol=0.0, atol=self.atol)

    def __repr__(self) -> str:
        return f"TensorEquals(atol={self.atol})"


def numeric_ops() -> ClusterOps:
    """Operations for clustering plain numbers.

    distance = |a - b|, mean = arithmetic average, equals = exact equality.
    """
    return ClusterOps(distance=absolute_difference, mean=arithmetic_mean, equals=exact_equals)


def tensor_ops(squared: bool = False, atol: Optional[float] = None) -> ClusterOps:
    """Operations for clustering points stored as torch tensors.

    Args:
        squared: Use squared Euclidean distance
        atol: Tolerance for centroid equality, None for exact equality
    """
    return ClusterOps(
        distance=EuclideanDistance(squared=squared),
        mean=tensor_mean,
        equals=TensorEquals(atol=atol)
    )
