from weightrank.core.typing import *
from weightrank.core.utils import call, ensure_used_args
from weightrank.core.graph import Graph
from weightrank.core.signals import GraphSignal, NodeRanking, to_signal
