from collections.abc import MutableMapping
from typing import Optional, Mapping

import numpy as np

from weightrank.core.typing import GraphSignalGraph, GraphSignalData, Node


class GraphSignal(MutableMapping):
    """
    Assigns numeric values to the nodes of a graph, for example their ranks.
    Graph signals should be instantiated through the method weightrank.to_signal(graph, obj).
    Subclasses a MutableMapping and hence can be accessed as a dictionary whose iteration order carries no meaning.

    Attributes:
        graph: Explicit reference to the graph object the signal is tied to.
        np: A numpy array holding a vector representation of the signal. Editing this also edits node values.
        node2id: A map from graph nodes to their position inside the above-described numpy array.

    Example:
        >>> import weightrank as wr
        >>> graph = wr.Graph()
        >>> graph.link("A", "B")
        >>> graph.link("B", "C")
        >>> signal = wr.to_signal(graph, {"A": 3, "C": 2})
        >>> print(signal["A"], signal["B"])
        3.0 0.0
        >>> print(signal.np)
        [3. 0. 2.]
    """

    def __init__(self, graph: GraphSignalGraph, obj: GraphSignalData, node2id: Optional[Mapping[Node, int]] = None):
        if node2id is not None:
            self.node2id = node2id
        elif hasattr(graph, "node_map"):
            self.node2id = dict(graph.node_map)  # snapshot of the current node order
        else:
            self.node2id = {v: i for i, v in enumerate(graph)}
        self.graph = graph
        if isinstance(obj, (list, np.ndarray)):
            if len(self.node2id) != len(obj):
                raise Exception("Graph signal array dimensions " + str(len(obj)) +
                                " should be equal to graph nodes " + str(len(self.node2id)))
            self._np = np.array(obj, dtype=float)
        elif obj is None:
            self._np = np.repeat(1.0, len(self.node2id))
        else:
            self._np = np.repeat(0.0, len(self.node2id))
            for key, value in obj.items():
                self[key] = value

    @property
    def np(self):
        return self._np

    @np.setter
    def np(self, value):
        if isinstance(value, GraphSignal):
            if value.graph is not self.graph:
                raise Exception("Can not operate between graph signals of different graphs")
            value = value.np
        self._np = np.asarray(value, dtype=float)

    def __getitem__(self, key):
        return float(self._np[self.node2id[key]])

    def __setitem__(self, key, value):
        self._np[self.node2id[key]] = float(value)

    def __delitem__(self, key):
        self._np[self.node2id[key]] = 0

    def __iter__(self):
        return iter(self.node2id)

    def __len__(self):
        return len(self.node2id)

    def __str__(self):
        return "{"+(", ".join(repr(k)+": "+str(v) for k, v in self.items()))+"}"

    def normalized(self, normalize: bool = True, copy: bool = True) -> "GraphSignal":
        """
        Copies the signal into a normalized one, which is subsequently returned.

        Args:
            normalize: If True (default) applies L1 normalization to the values of the copied signal.
            copy: If True (default) a new copy is created, otherwise in-place normalization is performed (if at all)
                and self is returned.
        """
        if copy:
            return GraphSignal(self.graph, np.copy(self._np), self.node2id).normalized(normalize, copy=False)
        if normalize:
            total = np.abs(self._np).sum()
            if total != 0:
                self._np = self._np / total
        return self


def to_signal(graph: GraphSignalGraph, obj: GraphSignalData) -> GraphSignal:
    """
    Converts an object to a GraphSignal tied to an explicit or implicit reference to a graph.

    Args:
        graph: Either a graph or a GraphSignal, in which case the signal's graph is used in its place.
            If None, the second argument needs to be a GraphSignal.
        obj: Either a numpy array or a hashmap between graph nodes and their values, or a GraphSignal in which
            case it is returned as-is after checking that it is tied to the same graph. If None, this argument
            induces a graph signal of ones.
    """
    if obj is None and graph is None:
        raise Exception("Cannot create signal from two None arguments")
    node2id = None
    if graph is None:
        if not isinstance(obj, GraphSignal):
            raise Exception("None graph allowed only for explicit graph signal input")
        graph = obj.graph
    elif isinstance(graph, GraphSignal):
        node2id = graph.node2id
        graph = graph.graph
    elif isinstance(graph, (list, np.ndarray)):
        raise Exception("Graph cannot be an array")
    if isinstance(obj, GraphSignal):
        if obj.graph is not graph:
            raise Exception("Graph signal tied to a different graph")
        return obj
    return GraphSignal(graph, obj, node2id)


class NodeRanking(object):
    """
    A generic node ranking algorithm interface that transforms graphs into GraphSignals.
    Ranking algorithms should subclass this interface and implement an appropriate rank method.
    NodeRanking objects can be used as callables and their arguments are passed to their rank methods.
    """

    def __call__(self, graph: GraphSignalGraph = None, *args, **kwargs) -> GraphSignal:
        return self.rank(graph, *args, **kwargs)

    def rank(self, graph: GraphSignalGraph = None, *args, **kwargs) -> GraphSignal:
        raise Exception("NodeRanking subclasses should implement a rank method")
