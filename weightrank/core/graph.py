import warnings
from typing import Dict, Iterator, Tuple

import networkx as nx

from weightrank.core.typing import Node


class Graph:
    """
    A directed graph whose edges accumulate weight. Nodes can be any hashable objects and are created the
    first time an edge mentions them. Linking the same source-target pair many times adds up their weights.

    Example:
        >>> import weightrank as wr
        >>> graph = wr.Graph()
        >>> graph.link("A", "B")
        >>> graph.link("A", "B", 2)
        >>> graph.link("B", "C", 0.5)
        >>> print(graph.weight("A", "B"), graph.outbound("A"), len(graph))
        3.0 3.0 3
    """

    def __init__(self):
        self.node_map: Dict[Node, int] = dict()
        self._edges: Dict[Node, Dict[Node, float]] = dict()
        self._outbound: Dict[Node, float] = dict()

    def add_node(self, node: Node) -> int:
        """Registers a node if it does not exist yet and returns its position in the graph's node order."""
        if node not in self.node_map:
            self.node_map[node] = len(self.node_map)
            self._outbound[node] = 0.
        return self.node_map[node]

    def link(self, source: Node, target: Node, weight: float = 1.):
        """
        Adds a weighted edge from source to target. If the edge already exists, its weight is incremented.

        Args:
            source: The node the edge starts from.
            target: The node the edge ends at. May equal the source, in which case a self-loop is added.
            weight: Optional. The weight to add to the edge. Default is 1.
        """
        weight = float(weight)
        if weight < 0:
            warnings.warn("PageRank is designed for non-negative edge weights", stacklevel=2)
        self.add_node(source)
        self.add_node(target)
        self._outbound[source] += weight
        targets = self._edges.setdefault(source, dict())
        targets[target] = targets.get(target, 0.) + weight

    def reset(self):
        """Clears all nodes and edges."""
        self.node_map = dict()
        self._edges = dict()
        self._outbound = dict()

    def outbound(self, node: Node) -> float:
        return self._outbound[node]

    def weight(self, source: Node, target: Node) -> float:
        return self._edges.get(source, {}).get(target, 0.)

    def is_dangling(self, node: Node) -> bool:
        return self._outbound[node] == 0

    def edges(self) -> Iterator[Tuple[Node, Node, float]]:
        for source, targets in self._edges.items():
            for target, weight in targets.items():
                yield source, target, weight

    def transitions(self) -> Iterator[Tuple[Node, Node, float]]:
        """
        Iterates through (source, target, probability) triplets, where probabilities are edge weights divided by
        the total outbound weight of their source. Sources without positive outbound weight keep their raw weights.
        Stored weights are left untouched, so this can be called any number of times.
        """
        for source, targets in self._edges.items():
            outbound = self._outbound[source]
            for target, weight in targets.items():
                yield source, target, weight / outbound if outbound > 0 else weight

    def nodes(self):
        return self.node_map.keys()

    def number_of_nodes(self) -> int:
        return len(self.node_map)

    def number_of_edges(self) -> int:
        return sum(len(targets) for targets in self._edges.values())

    def __iter__(self):
        return iter(self.node_map)

    def __len__(self):
        return len(self.node_map)

    def __contains__(self, node):
        return node in self.node_map

    def copy(self) -> "Graph":
        graph = Graph()
        graph.node_map = dict(self.node_map)
        graph._outbound = dict(self._outbound)
        graph._edges = {source: dict(targets) for source, targets in self._edges.items()}
        return graph

    def rank(self, alpha: float = 0.85, epsilon: float = 1.E-6, sink=None):
        """
        Computes the weighted PageRank of every node. This is a shorthand for
        `weightrank.PageRank(alpha, tol=epsilon).rank(graph, sink)`.

        Args:
            alpha: Optional. The damping factor, i.e. the probability of following an edge instead of teleporting.
                Default is 0.85.
            epsilon: Optional. Iterations stop once the total absolute rank change of an iteration is at most
                this value. Default is 1.E-6.
            sink: Optional. A callable that receives (node, rank) once for every node.
        Returns:
            A GraphSignal holding the rank of every node.
        """
        from weightrank.algorithms.pagerank import PageRank
        return PageRank(alpha, tol=epsilon).rank(self, sink)

    @staticmethod
    def from_networkx(G: nx.Graph, weight: str = "weight") -> "Graph":
        """
        Creates a graph holding the edges of a networkx graph. Edges of undirected graphs are linked in both
        directions and edges without a weight attribute count as having unit weight. Isolated nodes are kept.

        Args:
            G: A networkx graph.
            weight: Optional. The edge attribute holding edge weights. Default is "weight".
        """
        graph = Graph()
        for node in G:
            graph.add_node(node)
        for u, v, w in G.edges(data=weight, default=1.):
            graph.link(u, v, w)
            if not G.is_directed() and u != v:
                graph.link(v, u, w)
        return graph

    def to_networkx(self, weight: str = "weight") -> nx.DiGraph:
        G = nx.DiGraph()
        G.add_nodes_from(self.node_map)
        G.add_weighted_edges_from(self.edges(), weight=weight)
        return G
