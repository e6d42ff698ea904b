import numpy as np

from weightrank.core import Graph, GraphSignal
from weightrank.algorithms.abstract_filters import GraphFilter


class PageRank(GraphFilter):
    """A weighted PageRank power method algorithm. The rank of dangling nodes, i.e. nodes without outbound
    weight, is redistributed uniformly across all nodes, so that ranks always sum to one."""

    def __init__(self, alpha: float = 0.85, *args, **kwargs):
        """ Initializes the PageRank scheme parameters.

        Args:
            alpha: Optional. The damping factor, i.e. the probability of following an edge instead of teleporting
                to a uniformly random node. Should lie in the range (0, 1). Default value is 0.85.
        Example:
            >>> import weightrank as wr
            >>> algorithm = wr.PageRank(alpha=0.99, tol=1.E-9) # tol passed to the ConvergenceManager
        """
        self.alpha = float(alpha)  # typecast to make sure that a graph is not accidentally the first argument
        super().__init__(*args, **kwargs)

    def _start(self, graph: Graph, ranks: GraphSignal):
        if not 0 < self.alpha < 1:
            raise Exception("PageRank alpha should lie in the range (0, 1)")
        node2id = ranks.node2id
        transitions = list(graph.transitions())
        self._sources = np.array([node2id[source] for source, _, _ in transitions], dtype=int)
        self._targets = np.array([node2id[target] for _, target, _ in transitions], dtype=int)
        self._probabilities = np.array([probability for _, _, probability in transitions], dtype=float)
        self._dangling = np.array([graph.is_dangling(node) for node in node2id], dtype=bool)
        self._inverse = 1. / len(node2id)

    def _end(self, graph: Graph, ranks: GraphSignal):
        del self._sources
        del self._targets
        del self._probabilities
        del self._dangling
        del self._inverse

    def _formula(self, graph: Graph, ranks: np.ndarray) -> np.ndarray:
        leak = self.alpha * ranks[self._dangling].sum()
        new_ranks = np.zeros(len(ranks))
        np.add.at(new_ranks, self._targets, self.alpha * ranks[self._sources] * self._probabilities)
        new_ranks += (1 - self.alpha) * self._inverse + leak * self._inverse
        return new_ranks
