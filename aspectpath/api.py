from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
import pyarrow as pa
from aspectpath.config import WeightConfig
from aspectpath.core.connection import DuckDBConnection
from aspectpath.core.ingestion import load_elements, load_recipes, load_holdings
from aspectpath.core.store import AspectStore
from aspectpath.graph.builder import AspectGraph
from aspectpath.graph.decompose import decompose
from aspectpath.paths.ranker import PathRanker, RankedPath
from aspectpath.reporting import to_table

class AspectPath:
    """Aspect store plus the path recommender built on a snapshot of it."""

    def __init__(
        self,
        database: Union[str, Path] = ":memory:",
        config: Optional[WeightConfig] = None,
        memory_limit: Optional[str] = None,
        threads: Optional[int] = None,
    ) -> None:
        self.conn = DuckDBConnection(database=database, memory_limit=memory_limit, threads=threads)
        self.store = AspectStore(self.conn)
        self.config = config or WeightConfig()
        self._graph: Optional[AspectGraph] = None
        self._ranker: Optional[PathRanker] = None

    # -- loading ----------------------------------------------------------

    def load(self, elements: Any, recipes: Any = None, holdings: Any = None, **kwargs) -> AspectPath:
        self.load_elements(elements, **kwargs)
        if recipes is not None: self.load_recipes(recipes)
        if holdings is not None: self.load_holdings(holdings)
        return self

    def load_elements(self, source: Any, **kwargs) -> int:
        self._invalidate()
        return load_elements(self.conn, source, **kwargs)

    def load_recipes(self, source: Any, **kwargs) -> int:
        self._invalidate()
        return load_recipes(self.conn, source, **kwargs)

    def load_holdings(self, source: Any, **kwargs) -> int:
        self._invalidate()
        return load_holdings(self.conn, source, **kwargs)

    def set_holding(self, name: str, num: float) -> AspectPath:
        self.store.set_holding(name, num)
        self._invalidate()
        return self

    # -- snapshot ---------------------------------------------------------

    def _invalidate(self):
        self._graph, self._ranker = None, None

    @property
    def graph(self) -> AspectGraph:
        if self._graph is None: self._graph = AspectGraph.from_store(self.store)
        return self._graph

    def refresh(self) -> AspectPath:
        """Rebuild the in-memory snapshot from the store."""
        self._invalidate()
        _ = self.graph
        return self

    def _get_ranker(self) -> PathRanker:
        if self._ranker is None: self._ranker = PathRanker(self.graph, self.config)
        return self._ranker

    # -- queries ----------------------------------------------------------

    def recommend(
        self,
        begin: str,
        end: str,
        max_paths: Optional[int] = None,
        max_path_length: Optional[int] = None,
        steps: Optional[int] = None,
    ) -> List[RankedPath]:
        return self._get_ranker().rank(begin, end, max_paths=max_paths, max_path_length=max_path_length, steps=steps)

    def recommend_table(self, begin: str, end: str, **kwargs) -> pa.Table:
        return to_table(self.recommend(begin, end, **kwargs))

    def self_weight(self, name: str) -> float:
        return self._get_ranker().evaluator.node_self_weight(name)

    def decompose(self, counts: Mapping[str, int]) -> Dict[str, int]:
        return decompose(self.graph, counts)

    def elements(self) -> pa.Table: return self.store.elements_table()
    def recipes(self) -> pa.Table: return self.store.recipes_table()
    def mods(self) -> List[str]: return self.store.list_mods()
    def holdings(self) -> List[Tuple[str, float]]: return self.store.list_holdings()

    def sql(self, query: str) -> pa.Table: return self.conn.query(query)
    def close(self): self.conn.close()
    def __enter__(self): return self
    def __exit__(self, *_): self.close()
    def __repr__(self) -> str: return f"AspectPath(database={self.conn._database!r})"
