"""
Convergence criteria for clustering algorithms.

Lloyd's iteration is run to a fixed point: refinement stops in the first
iteration whose update step leaves every centroid unchanged.
"""

from typing import Any, Dict

from ..base.interfaces import ConvergenceCriterion


class CentroidsUnchanged(ConvergenceCriterion):
    """Convergence when no centroid changed in the last update step.

    Expects ``current_state['n_changed']``: the number of clusters whose
    recomputed centroid was not equal to the previous one.
    """

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the centroids reached a fixed point."""
        n_changed = current_state['n_changed']

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed
        })

        return n_changed == 0
