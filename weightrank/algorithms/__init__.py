from weightrank.algorithms.convergence import ConvergenceManager
from weightrank.algorithms.abstract_filters import GraphFilter
from weightrank.algorithms.pagerank import PageRank
