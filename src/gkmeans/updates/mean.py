"""
Mean update strategy for centroid-based clustering.
"""

from ..base.interfaces import ParameterUpdater
from ..base.data_structures import Cluster, ClusterOps
from ..exceptions import EmptyClusterError

EMPTY_CLUSTER_POLICIES = ('pass', 'keep', 'raise')


class MeanUpdater(ParameterUpdater):
    """Updates a cluster centroid by computing the mean of its members.

    The ``empty_cluster`` policy decides what happens to a cluster that
    received no members:

    - 'pass': call ``mean([])`` and use whatever it returns
    - 'keep': leave the previous centroid in place
    - 'raise': raise EmptyClusterError
    """

    def __init__(self, empty_cluster: str = 'pass'):
        if empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise ValueError(f"empty_cluster must be one of {EMPTY_CLUSTER_POLICIES}, "
                             f"got {empty_cluster!r}")
        self.empty_cluster = empty_cluster

    def update(self, cluster: Cluster, ops: ClusterOps, **kwargs) -> bool:
        """Update cluster centroid.

        Args:
            cluster: Cluster to update in place
            ops: Caller-supplied functions
            **kwargs: ``cluster_idx`` and ``iteration`` for error reporting

        Returns:
            True if the new centroid differs from the previous one
        """
        if cluster.size == 0 and self.empty_cluster != 'pass':
            if self.empty_cluster == 'keep':
                return False
            raise EmptyClusterError(kwargs.get('cluster_idx', -1), kwargs.get('iteration', -1))

        previous = cluster.centroid
        cluster.centroid = ops.mean(list(cluster.members))

        return not ops.equals(previous, cluster.centroid)
