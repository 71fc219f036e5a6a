from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from aspectpath.config import WeightConfig
from aspectpath.errors import DegenerateWeightError
from aspectpath.graph.builder import AspectGraph
from aspectpath.weights.curves import make_curve

logger = logging.getLogger(__name__)

Context = Tuple[int, ...]

class NodeWeightEvaluator:
    """
    Weights of aspects inside a path.

    A node's context is the part of the path that starts at it, so its sub
    components are its path neighbours except the predecessor it was reached
    from. Weights are memoised on that context; paths sharing a tail share
    the computation.
    """

    def __init__(self, graph: AspectGraph, config: Optional[WeightConfig] = None):
        self.graph = graph
        self.config = config or WeightConfig()
        self.curve = make_curve(self.config.curve, self.config.alpha)
        self._self_weights: Dict[int, float] = {}
        self._memo: Dict[Context, float] = {}

    def self_weight(self, i: int) -> float:
        """``M(h) / b`` for the node with handle ``i``."""
        if i not in self._self_weights:
            node = self.graph.nodes[i]
            if not node.base_value > 0: raise DegenerateWeightError(node.name, "base_value", node.base_value)
            if node.held < 0: raise DegenerateWeightError(node.name, "held quantity", node.held)
            self._self_weights[i] = self.curve(node.held) / node.base_value
        return self._self_weights[i]

    @staticmethod
    def sub_contexts(context: Context) -> Iterable[Context]:
        return (context[1:],) if len(context) > 1 else ()

    def combine(self, own: float, sub_weight_sum: float) -> float:
        # a leaf contributes only its own weight
        if sub_weight_sum == 0: return own
        p = self.config.p
        return p * own + (1.0 - p) * (1.0 / sub_weight_sum)

    def weight(self, context: Sequence[int]) -> float:
        """Weight of ``context[0]`` given the rest of the path after it."""
        context = tuple(context)
        if context in self._memo: return self._memo[context]
        # fill from the tail so every sub context is already known
        for k in range(len(context) - 1, -1, -1):
            suffix = context[k:]
            if suffix in self._memo: continue
            sub = sum(self._memo[s] for s in self.sub_contexts(suffix))
            self._memo[suffix] = self.combine(self.self_weight(suffix[0]), sub)
        return self._memo[context]

    def path_weights(self, path: Sequence[int]) -> List[float]:
        path = tuple(path)
        return [self.weight(path[k:]) for k in range(len(path))]

    def final_weight(self, path: Sequence[int]) -> float:
        return sum(self.path_weights(path))

    def node_self_weight(self, name: str) -> float:
        return self.self_weight(self.graph.index_of(name))

    def weights_by_name(self, names: Sequence[str]) -> List[Tuple[str, float]]:
        path = [self.graph.index_of(n) for n in names]
        return list(zip(names, self.path_weights(path)))

    def clear(self):
        self._memo.clear()
        self._self_weights.clear()
