"""
Input validation utilities.

Provides functions for validating observations, cluster counts and random
sources before clustering starts.
"""

from typing import Any, Iterable, Optional, Sequence, Tuple, Union
import numbers

import torch

from ..exceptions import InvalidInputError, InconsistentClusterError


def check_observations(observations: Iterable[Any]) -> Tuple[Any, ...]:
    """Validate and freeze the observation collection.

    Args:
        observations: Any finite iterable of observations. Tensors and numpy
            arrays are split along their first dimension.

    Returns:
        Tuple of observations

    Raises:
        InvalidInputError: If the collection is empty or not iterable
    """
    if isinstance(observations, torch.Tensor):
        if observations.dim() == 0:
            raise InvalidInputError("Expected a collection of observations, got a 0-d tensor")
        observations = tuple(observations.unbind(0))
    else:
        try:
            observations = tuple(observations)
        except TypeError:
            raise InvalidInputError(
                f"Observations must be iterable, got {type(observations).__name__}"
            ) from None

    if len(observations) == 0:
        raise InvalidInputError("No observations provided")

    return observations


def check_n_clusters(n_clusters: int, n_samples: int) -> int:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of observations

    Returns:
        n_clusters as a plain int

    Raises:
        InconsistentClusterError: If invalid
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, numbers.Integral):
        raise InconsistentClusterError(f"n_clusters must be int, got {type(n_clusters).__name__}")

    n_clusters = int(n_clusters)

    if n_clusters <= 0:
        raise InconsistentClusterError(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise InconsistentClusterError(f"n_clusters ({n_clusters}) cannot be larger than "
                                       f"the number of observations ({n_samples})")

    return n_clusters


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: Seed, generator, or None for a non-deterministically
            seeded generator

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, numbers.Integral) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")


def check_init_centroids(centroids: Sequence[Any], n_clusters: int) -> Tuple[Any, ...]:
    """Validate caller-provided initial centroids.

    Raises:
        InconsistentClusterError: If the number of centroids differs from n_clusters
    """
    if isinstance(centroids, torch.Tensor):
        centroids = tuple(centroids.unbind(0))
    else:
        centroids = tuple(centroids)

    if len(centroids) != n_clusters:
        raise InconsistentClusterError(f"Provided {len(centroids)} initial centroids, "
                                       f"but n_clusters={n_clusters}")
    return centroids
