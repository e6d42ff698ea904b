import networkx as nx
import weightrank as wr


def create_test_graph(directed=True):
    G = nx.DiGraph() if directed else nx.Graph()
    G.add_edge("A", "B", weight=1)
    G.add_edge("B", "C", weight=2)
    G.add_edge("C", "D", weight=1)
    G.add_edge("E", "F", weight=0.5)
    G.add_edge("F", "G", weight=1)
    G.add_edge("G", "H", weight=3)
    G.add_edge("H", "I", weight=1)
    G.add_edge("I", "J", weight=1)
    G.add_edge("J", "K", weight=2)
    G.add_edge("A", "D", weight=1)
    G.add_edge("B", "D", weight=1)
    G.add_edge("B", "E", weight=4)
    G.add_edge("E", "G", weight=1)
    G.add_edge("G", "J", weight=1)
    G.add_edge("G", "I", weight=0.25)
    G.add_edge("H", "J", weight=1)
    G.add_edge("I", "K", weight=1)
    G.add_edge("L", "K", weight=1)
    G.add_edge("K", "M", weight=1)
    G.add_edge("M", "A", weight=0.5)
    return G


def create_dangling_graph():
    graph = wr.Graph()
    graph.link("A", "B")
    graph.link("B", "C", 2)
    graph.link("B", "D")
    graph.link("C", "A")
    graph.link("C", "C", 0.5)
    graph.add_node("E")
    return graph
