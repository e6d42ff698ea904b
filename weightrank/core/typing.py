from typing import Union, Optional, Iterable, Mapping, List, Hashable, Callable
import numpy as np


Node = Hashable
BackendPrimitive = Union[np.ndarray, float, List[float]]
GraphSignalGraph = Optional[Union["Graph", "GraphSignal"]]
GraphSignalData = Optional[Union["GraphSignal", BackendPrimitive, Iterable[float], Mapping[Node, float]]]
RankSink = Optional[Callable[[Node, float], None]]
