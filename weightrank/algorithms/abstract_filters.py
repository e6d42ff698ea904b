import networkx as nx
import numpy as np

from weightrank.core import Graph, GraphSignal, NodeRanking, RankSink, call, ensure_used_args, to_signal
from weightrank.algorithms.convergence import ConvergenceManager


class GraphFilter(NodeRanking):
    """Implements the base functionality of a ranking algorithm that starts from a uniform distribution over nodes and
    iterates a computation scheme until a convergence manager stops it."""

    def __init__(self, convergence: ConvergenceManager = None, **kwargs):
        """
        Args:
            convergence: Optional. The ConvergenceManager that determines when iterations stop. If None (default),
                a ConvergenceManager is used with keyword arguments automatically extracted from the ones passed
                to this constructor.
        """
        self.convergence = call(ConvergenceManager, kwargs) if convergence is None else convergence
        ensure_used_args(kwargs, [ConvergenceManager])

    def rank(self, graph: Graph = None, sink: RankSink = None) -> GraphSignal:
        """
        Runs the algorithm until convergence.

        Args:
            graph: A weightrank.Graph, or a networkx graph that is converted to one.
            sink: Optional. A callable that receives (node, rank) exactly once for every node after convergence.
                Calls follow no particular node order.
        Returns:
            A GraphSignal with the rank of every node.
        """
        if isinstance(graph, nx.Graph):
            graph = Graph.from_networkx(graph)
        if not isinstance(graph, Graph):
            raise Exception("Can only rank weightrank.Graph or networkx graph instances")
        if sink is not None and not callable(sink):
            raise Exception("The rank sink should be callable with (node, rank) arguments")
        if len(graph) == 0:
            raise Exception("Cannot rank an empty graph")
        ranks = to_signal(graph, np.repeat(1. / len(graph), len(graph)))
        self.convergence.start()
        self._start(graph, ranks)
        try:
            while not self.convergence.has_converged(ranks.np):
                self._step(graph, ranks)
        finally:
            self._end(graph, ranks)
        if sink is not None:
            for node, rank in ranks.items():
                sink(node, rank)
        return ranks

    def _start(self, graph: Graph, ranks: GraphSignal):
        pass

    def _end(self, graph: Graph, ranks: GraphSignal):
        pass

    def _step(self, graph: Graph, ranks: GraphSignal):
        ranks.np = self._formula(graph, ranks.np)

    def _formula(self, graph: Graph, ranks: np.ndarray) -> np.ndarray:
        raise Exception("Use a derived class of GraphFilter that implements the _formula method")
