"""Centroid (mean/equality) functions and ClusterOps factories."""

from .centroid import (
    arithmetic_mean,
    exact_equals,
    tensor_mean,
    TensorEquals,
    numeric_ops,
    tensor_ops
)

__all__ = [
    'arithmetic_mean',
    'exact_equals',
    'tensor_mean',
    'TensorEquals',
    'numeric_ops',
    'tensor_ops'
]
