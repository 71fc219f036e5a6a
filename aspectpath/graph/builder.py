"""
In-memory snapshot of the recipe graph.

Aspects are interned into integer handles; the component relation (result to
its two components, one pair per recipe) and its inverse, the composite
relation, are stored as per-handle lists so every lookup is a list index.
"""
from __future__ import annotations
import logging
import warnings
from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
from aspectpath.errors import DegenerateWeightError, GraphCycleWarning, UnknownNodeError
from aspectpath.graph.models import Node, Recipe

logger = logging.getLogger(__name__)

class AspectGraph:
    def __init__(self):
        self.nodes: List[Node] = []
        self.index: Dict[str, int] = {}
        self.recipes: List[List[Tuple[int, int]]] = []
        self.composites: List[List[int]] = []
        self.neighbors: List[Tuple[int, ...]] = []
        self.rejected: List[Recipe] = []
        self._built = False

    @classmethod
    def from_store(cls, store) -> AspectGraph:
        return cls().build(store.list_nodes(), store.list_recipes())

    def build(self, nodes: Iterable[Node], recipes: Iterable[Recipe], holdings: Optional[Mapping[str, float]] = None) -> AspectGraph:
        if self._built: raise RuntimeError("AspectGraph snapshots are immutable once built.")
        for node in nodes:
            if holdings is not None: node = replace(node, held=float(holdings.get(node.name, 0.0)))
            self._add_node(node)
        if holdings is not None:
            for name in holdings:
                if name not in self.index: raise UnknownNodeError(name, "holdings")
        for recipe in recipes:
            self._add_recipe(recipe)
        self._finalize()
        self._built = True
        logger.info("Built aspect graph: %d aspects, %d recipes, %d rejected", len(self.nodes), sum(map(len, self.recipes)), len(self.rejected))
        return self

    def _add_node(self, node: Node):
        if node.name in self.index: raise ValueError(f"Duplicate aspect: {node.name!r}")
        if not node.base_value > 0: raise DegenerateWeightError(node.name, "base_value", node.base_value)
        if not node.held >= 0: raise DegenerateWeightError(node.name, "held quantity", node.held)
        self.index[node.name] = len(self.nodes)
        self.nodes.append(node)
        self.recipes.append([])
        self.composites.append([])

    def _lookup(self, name: str, recipe: Recipe) -> int:
        try: return self.index[name]
        except KeyError: raise UnknownNodeError(name, f"recipe {recipe}") from None

    def _reaches(self, start: int, target: int) -> bool:
        """Whether ``target`` is ``start`` or one of its transitive components."""
        stack, seen = [start], {start}
        while stack:
            i = stack.pop()
            if i == target: return True
            for pair in self.recipes[i]:
                for c in pair:
                    if c not in seen:
                        seen.add(c); stack.append(c)
        return False

    def _add_recipe(self, recipe: Recipe):
        r = self._lookup(recipe.result, recipe)
        a, b = (self._lookup(c, recipe) for c in recipe.components)
        pair = (a, b) if self.nodes[a].name <= self.nodes[b].name else (b, a)
        if pair in self.recipes[r]: return
        if self._reaches(a, r) or self._reaches(b, r):
            self.rejected.append(recipe)
            logger.warning("Rejected cyclic recipe %s", recipe)
            warnings.warn(GraphCycleWarning((recipe.result, recipe.component_a, recipe.component_b)), stacklevel=3)
            return
        self.recipes[r].append(pair)
        for c in set(pair):
            self.composites[c].append(r)

    def _finalize(self):
        name = lambda i: self.nodes[i].name
        for i in range(len(self.nodes)):
            self.composites[i] = sorted(set(self.composites[i]), key=name)
            linked = {c for pair in self.recipes[i] for c in pair} | set(self.composites[i])
            self.neighbors.append(tuple(sorted(linked, key=name)))

    def __len__(self) -> int: return len(self.nodes)
    def __contains__(self, name: str) -> bool: return name in self.index

    def index_of(self, name: str) -> int:
        try: return self.index[name]
        except KeyError: raise UnknownNodeError(name) from None

    def name_of(self, i: int) -> str: return self.nodes[i].name
    def node(self, name: str) -> Node: return self.nodes[self.index_of(name)]

    def components(self, name: str) -> List[Tuple[str, str]]:
        return [(self.name_of(a), self.name_of(b)) for a, b in self.recipes[self.index_of(name)]]

    def composites_of(self, name: str) -> List[str]:
        return [self.name_of(i) for i in self.composites[self.index_of(name)]]

    def neighbors_of(self, name: str) -> List[str]:
        return [self.name_of(i) for i in self.neighbors[self.index_of(name)]]

    def is_primary(self, name: str) -> bool:
        return not self.recipes[self.index_of(name)]

    def connected(self, a: str, b: str) -> bool:
        return self.index_of(b) in self.neighbors[self.index_of(a)]

    def __repr__(self) -> str:
        return f"AspectGraph(aspects={len(self.nodes)}, recipes={sum(map(len, self.recipes))})"


def build_graph(nodes: Iterable[Node], recipes: Iterable[Recipe], holdings: Optional[Mapping[str, float]] = None) -> AspectGraph:
    return AspectGraph().build(nodes, recipes, holdings)
