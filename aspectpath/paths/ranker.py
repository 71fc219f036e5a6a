from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple
from aspectpath.config import WeightConfig
from aspectpath.graph.builder import AspectGraph
from aspectpath.paths.enumerator import PathEnumerator
from aspectpath.weights.evaluator import NodeWeightEvaluator

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RankedPath:
    path: Tuple[str, ...]
    final_weight: float
    weights: Tuple[float, ...] = ()

    @property
    def length(self) -> int: return len(self.path)

    @property
    def route(self) -> str: return "->".join(self.path)

    def sort_key(self):
        return (-self.final_weight, len(self.path), self.path)

    def __iter__(self):
        # unpacks as a (path, final_weight) pair
        yield self.path
        yield self.final_weight


class PathRanker:
    def __init__(self, graph: AspectGraph, config: Optional[WeightConfig] = None, evaluator: Optional[NodeWeightEvaluator] = None):
        self.graph = graph
        self.evaluator = evaluator or NodeWeightEvaluator(graph, config)

    def score(self, path: Tuple[int, ...]) -> RankedPath:
        weights = self.evaluator.path_weights(path)
        return RankedPath(tuple(self.graph.name_of(i) for i in path), sum(weights), tuple(weights))

    def rank(
        self,
        begin: str,
        end: str,
        max_paths: Optional[int] = None,
        max_path_length: Optional[int] = None,
        steps: Optional[int] = None,
    ) -> List[RankedPath]:
        """All simple paths from ``begin`` to ``end``, best first."""
        b, e = self.graph.index_of(begin), self.graph.index_of(end)
        enumerator = PathEnumerator(self.graph, max_paths=max_paths, max_path_length=max_path_length)
        try:
            ranked = sorted((self.score(p) for p in enumerator.enumerate(b, e, steps)), key=RankedPath.sort_key)
        finally:
            # contexts are only shared within one query
            self.evaluator.clear()
        logger.debug("Ranked %d paths from %s to %s", len(ranked), begin, end)
        return ranked
