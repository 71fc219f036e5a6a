from __future__ import annotations
import logging
from itertools import islice
from typing import Iterator, List, Optional, Tuple
from aspectpath.graph.builder import AspectGraph

logger = logging.getLogger(__name__)

Path = Tuple[int, ...]

class PathEnumerator:
    """Depth-first search for every simple path between two aspects, recipes walked both ways."""

    def __init__(self, graph: AspectGraph, max_paths: Optional[int] = None, max_path_length: Optional[int] = None):
        if max_paths is not None and max_paths < 1:
            raise ValueError(f"max_paths must be >= 1, got {max_paths}")
        if max_path_length is not None and max_path_length < 1:
            raise ValueError(f"max_path_length must be >= 1, got {max_path_length}")
        self.graph = graph
        self.max_paths, self.max_path_length = max_paths, max_path_length

    def _length_bounds(self, steps: Optional[int]) -> Tuple[Optional[int], Optional[int]]:
        if steps is None: return self.max_path_length, None
        if steps < 0: raise ValueError(f"steps must be >= 0, got {steps}")
        exact = steps + 2
        if self.max_path_length is not None: return min(self.max_path_length, exact), exact
        return exact, exact

    def iter_paths(self, begin: int, end: int, steps: Optional[int] = None) -> Iterator[Path]:
        """Yield paths in neighbour order. ``steps`` asks for exactly that many aspects between the ends."""
        limit, exact = self._length_bounds(steps)
        if begin == end:
            if exact is None: yield (begin,)
            return
        neighbors = self.graph.neighbors
        path, on_path = [begin], {begin}
        stack = [iter(neighbors[begin])]
        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                on_path.discard(path.pop())
                continue
            if nxt in on_path: continue
            if nxt == end:
                n = len(path) + 1
                if (limit is None or n <= limit) and (exact is None or n == exact):
                    yield tuple(path) + (end,)
                continue
            # room is needed for nxt and the end node
            if limit is not None and len(path) + 2 > limit: continue
            path.append(nxt)
            on_path.add(nxt)
            stack.append(iter(neighbors[nxt]))

    def enumerate(self, begin: int, end: int, steps: Optional[int] = None) -> List[Path]:
        paths = list(islice(self.iter_paths(begin, end, steps), self.max_paths))
        if self.max_paths is not None and len(paths) == self.max_paths:
            logger.info("Path enumeration stopped at max_paths=%d", self.max_paths)
        return paths
