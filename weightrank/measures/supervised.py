import numbers
from typing import Tuple

import numpy as np

from weightrank.measures.utils import Measure
from weightrank.core import GraphSignal, to_signal, GraphSignalData, BackendPrimitive


class Supervised(Measure):
    """Provides a base class with the ability to simultaneously convert scores and known scores to numpy arrays.
    This class is used as a base for the error measures that compare rankings with each other."""

    def __init__(self, known_scores: GraphSignalData):
        """
        Initializes the supervised measure with desired graph signal outcomes.

        Args:
            known_scores: The desired graph signal outcomes. Can be a GraphSignal, a numpy array or list aligned
                with the compared scores, or a dict from nodes to values if compared scores are a GraphSignal.
        """
        self.known_scores = known_scores

    def to_numpy(self, scores: GraphSignalData) -> Tuple[np.ndarray, np.ndarray]:
        if isinstance(scores, numbers.Number) and isinstance(self.known_scores, numbers.Number):
            return np.array([self.known_scores], dtype=float), np.array([scores], dtype=float)
        if isinstance(scores, GraphSignal):
            return to_signal(scores, self.known_scores).np, scores.np
        if isinstance(self.known_scores, GraphSignal):
            return self.known_scores.np, to_signal(self.known_scores, scores).np
        known_scores = np.asarray(self.known_scores, dtype=float)
        scores = np.asarray(scores, dtype=float)
        if known_scores.shape != scores.shape:
            raise Exception("Cannot compare scores of shape "+str(scores.shape)+" with "+str(known_scores.shape))
        return known_scores, scores


class L1(Supervised):
    """Computes the sum of absolute differences between scores and known scores."""

    def evaluate(self, scores: GraphSignalData) -> BackendPrimitive:
        known_scores, scores = self.to_numpy(scores)
        return float(np.abs(known_scores-scores).sum())


class Mabs(Supervised):
    """Computes the mean absolute error between scores and known scores."""

    def evaluate(self, scores: GraphSignalData) -> BackendPrimitive:
        known_scores, scores = self.to_numpy(scores)
        return float(np.abs(known_scores-scores).sum()) / len(scores)


class MaxDifference(Supervised):
    """Computes the maximum absolute error between scores and known scores."""

    def evaluate(self, scores: GraphSignalData) -> BackendPrimitive:
        known_scores, scores = self.to_numpy(scores)
        return float(np.abs(known_scores-scores).max())
