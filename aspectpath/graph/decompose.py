from __future__ import annotations
from collections import Counter
from typing import Dict, Mapping
from aspectpath.graph.builder import AspectGraph

def decompose(graph: AspectGraph, counts: Mapping[str, int]) -> Dict[str, int]:
    """
    Expand aspects into the primary aspects they are made of.

    Each compound is split along its first recipe, recursively, so
    ``{"Lux": 2}`` with ``Lux = Aer + Ignis`` gives ``{"Aer": 2, "Ignis": 2}``.
    """
    totals: Counter = Counter()
    stack = [(graph.index_of(name), n) for name, n in counts.items()]
    while stack:
        i, n = stack.pop()
        if n <= 0: continue
        if not graph.recipes[i]:
            totals[graph.name_of(i)] += n
            continue
        for c in graph.recipes[i][0]:
            stack.append((c, n))
    return dict(sorted(totals.items()))
