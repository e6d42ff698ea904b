from weightrank.measures.utils import Measure
from weightrank.measures.supervised import Supervised, L1, Mabs, MaxDifference
