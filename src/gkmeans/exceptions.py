"""
Exceptions and warnings raised by the gkmeans algorithms.

Errors raised inside caller-supplied distance/mean/equals functions are never
wrapped; they propagate unchanged to the caller of ``calculate``.
"""


class KMeansError(Exception):
    """Base class for all errors raised by gkmeans."""


class InvalidInputError(KMeansError, ValueError):
    """The observation collection (or an injected function) is unusable."""


class InconsistentClusterError(KMeansError, ValueError):
    """The requested number of clusters cannot be built from the observations."""


class EmptyClusterError(KMeansError, RuntimeError):
    """A cluster received no members during an assignment step."""

    def __init__(self, cluster_idx: int, iteration: int):
        self.cluster_idx = cluster_idx
        self.iteration = iteration
        super().__init__(f"Cluster {cluster_idx} has no members at iteration {iteration}")


class ClusteringCancelled(KMeansError, RuntimeError):
    """The run was interrupted through its cancel event."""


class ConvergenceWarning(UserWarning):
    """Refinement stopped at max_iter before the centroids reached a fixed point."""
