"""
Euclidean distance functions for clustering.

Ready-made ``distance`` callables for the two most common observation types:
plain numbers and torch tensors (or anything ``torch.as_tensor`` accepts).
"""

import torch
from torch import Tensor


def absolute_difference(a: float, b: float) -> float:
    """1-D Euclidean distance |a - b| between two numbers."""
    return abs(a - b)


def _as_float_tensor(x) -> Tensor:
    x = torch.as_tensor(x)
    if not torch.is_floating_point(x):
        x = x.to(torch.get_default_dtype())
    return x


class EuclideanDistance:
    """Euclidean distance metric between two points.

    Computes ||a - b|| (or its square) and returns a Python float.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False (default), return actual Euclidean distances.
        """
        self.squared = squared

    def __call__(self, a, b) -> float:
        diff = _as_float_tensor(a) - _as_float_tensor(b)
        squared_distance = torch.sum(diff * diff)

        if self.squared:
            return squared_distance.item()
        else:
            return torch.sqrt(squared_distance).item()

    def __repr__(self) -> str:
        return f"EuclideanDistance(squared={self.squared})"


euclidean_distance = EuclideanDistance()
squared_euclidean_distance = EuclideanDistance(squared=True)
