import weightrank as wr
import pytest


def test_array_measures():
    assert wr.L1([1, 2, 3])([1, 1, 1]) == 3
    assert wr.Mabs([1, 2, 3])([1, 1, 1]) == 1
    assert wr.MaxDifference([1, 2, 3])([1, 1, 1]) == 2
    assert wr.L1(0.5)(0.25) == 0.25
    with pytest.raises(Exception):
        wr.L1([1, 2, 3])([1, 2])


def test_signal_measures():
    graph = wr.Graph()
    graph.link("A", "B")
    graph.link("B", "C")
    signal = wr.to_signal(graph, [0.5, 0.25, 0.25])
    assert wr.L1({"A": 0.5, "C": 0.5})(signal) == 0.5
    assert wr.L1(signal)({"A": 0.5, "B": 0.25, "C": 0.25}) == 0
    assert wr.MaxDifference(signal)([0, 0, 0]) == 0.5


def test_abstract_measure():
    with pytest.raises(Exception):
        wr.Measure()([0, 1, 0])
