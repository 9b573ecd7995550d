# tests/test_validation.py
"""
Input validation: observations, n_clusters, random state, warm-start centroids.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from gkmeans.exceptions import InvalidInputError, InconsistentClusterError, KMeansError
from gkmeans.utils.validation import (
    check_observations,
    check_n_clusters,
    check_random_state,
    check_init_centroids,
)


def test_check_observations_freezes_iterables():
    obs = check_observations(x for x in [3, 1, 2])
    assert obs == (3, 1, 2)


def test_check_observations_splits_tensors_and_arrays():
    X = torch.arange(6.0).reshape(3, 2)
    obs = check_observations(X)
    assert len(obs) == 3
    assert torch.equal(obs[1], torch.tensor([2.0, 3.0]))

    arr = np.zeros((4, 2))
    assert len(check_observations(arr)) == 4


@pytest.mark.parametrize("bad", [[], (), torch.empty(0, 2)])
def test_check_observations_rejects_empty(bad):
    with pytest.raises(InvalidInputError):
        check_observations(bad)


def test_check_observations_rejects_scalars():
    with pytest.raises(InvalidInputError):
        check_observations(5)
    with pytest.raises(InvalidInputError):
        check_observations(torch.tensor(1.0))


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        check_observations([])
    assert issubclass(InvalidInputError, KMeansError)


@pytest.mark.parametrize("k", [1, 3, 6, np.int64(2)])
def test_check_n_clusters_accepts_range(k):
    assert check_n_clusters(k, 6) == int(k)


@pytest.mark.parametrize("k", [0, -1, 7, 2.5, True, "2"])
def test_check_n_clusters_rejects(k):
    with pytest.raises(InconsistentClusterError):
        check_n_clusters(k, 6)


def test_check_random_state_int_is_reproducible():
    g1 = check_random_state(5)
    g2 = check_random_state(5)
    a = torch.randint(1000, (10,), generator=g1)
    b = torch.randint(1000, (10,), generator=g2)
    assert torch.equal(a, b)


def test_check_random_state_passes_generator_through():
    g = torch.Generator()
    assert check_random_state(g) is g


def test_check_random_state_none_gives_generator():
    assert isinstance(check_random_state(None), torch.Generator)


def test_check_random_state_rejects_other_types():
    with pytest.raises(TypeError):
        check_random_state("seed")


def test_check_init_centroids_counts():
    assert check_init_centroids([1.0, 2.0], 2) == (1.0, 2.0)
    assert len(check_init_centroids(torch.zeros(3, 2), 3)) == 3
    with pytest.raises(InconsistentClusterError):
        check_init_centroids([1.0], 2)
