"""
Core data structures for the gkmeans clustering algorithms.

Observations are opaque: nothing in here inspects them. The only way the
algorithms interact with an observation is through the three functions held
by ``ClusterOps``.
"""

from typing import Any, Callable, Dict, Generic, List, Sequence, TypeVar
from dataclasses import dataclass, field

T = TypeVar('T')

DistanceFn = Callable[[Any, Any], float]
MeanFn = Callable[[Sequence[Any]], Any]
EqualsFn = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class ClusterOps:
    """The caller-supplied semantics of an observation type.

    Attributes:
        distance: (a, b) -> non-negative float
        mean: (members) -> representative value of the members
        equals: (a, b) -> whether two centroids are considered identical
    """

    distance: DistanceFn
    mean: MeanFn
    equals: EqualsFn

    def __post_init__(self):
        for name in ('distance', 'mean', 'equals'):
            if not callable(getattr(self, name)):
                raise TypeError(f"{name} must be callable, got {type(getattr(self, name))}")


@dataclass
class Cluster(Generic[T]):
    """A centroid together with the observations currently assigned to it.

    ``members`` and ``indices`` are rebuilt from scratch on every assignment
    step; ``indices[i]`` is the position of ``members[i]`` in the observation
    collection.
    """

    centroid: T
    members: List[T] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of assigned observations."""
        return len(self.members)

    def clear(self) -> None:
        """Drop all members."""
        self.members = []
        self.indices = []

    def add(self, observation: T, index: int) -> None:
        """Append an observation found at ``index``."""
        self.members.append(observation)
        self.indices.append(index)

    def __repr__(self) -> str:
        return f"Cluster(centroid={self.centroid!r}, size={self.size})"


@dataclass
class AlgorithmState:
    """Summary of one assignment+update iteration.

    Used for convergence diagnostics and debugging; centroids themselves are
    not retained.
    """
    iteration: int
    n_changed: int
    objective: float
    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)


def new_cluster_set(centroids: Sequence[T]) -> List[Cluster]:
    """Build clusters with the given centroids and no members."""
    return [Cluster(centroid=centroid) for centroid in centroids]
