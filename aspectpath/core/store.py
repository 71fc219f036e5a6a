from __future__ import annotations
import logging
from typing import Dict, List, Tuple
import pyarrow as pa
from aspectpath.core.connection import DuckDBConnection
from aspectpath.core.schema import ensure_schema
from aspectpath.errors import DegenerateWeightError, UnknownNodeError
from aspectpath.graph.models import Node, Recipe

logger = logging.getLogger(__name__)

class AspectStore:
    """Read side of the aspect database plus the holding updates the CLI needs."""

    def __init__(self, conn: DuckDBConnection, create: bool = True):
        self.conn = conn
        if create: ensure_schema(conn)

    def list_nodes(self) -> List[Node]:
        rows = self.conn.rows("""
            SELECT e.name, e.belongs_to_mod, e.base_value, COALESCE(h.num, 0.0)
            FROM elements e LEFT JOIN elements_holding h ON e.name = h.name
            ORDER BY e.name
        """)
        return [Node(name, mod, base_value, held) for name, mod, base_value, held in rows]

    def list_recipes(self) -> List[Recipe]:
        rows = self.conn.rows("SELECT name, component_a, component_b FROM recipes ORDER BY name, component_a, component_b")
        return [Recipe(*row) for row in rows]

    def list_mods(self) -> List[str]:
        return [r[0] for r in self.conn.rows("SELECT DISTINCT belongs_to_mod FROM elements WHERE belongs_to_mod IS NOT NULL ORDER BY 1")]

    def list_holdings(self) -> List[Tuple[str, float]]:
        return [tuple(r) for r in self.conn.rows("SELECT name, num FROM elements_holding ORDER BY name")]

    def holdings(self) -> Dict[str, float]:
        return dict(self.list_holdings())

    def has_node(self, name: str) -> bool:
        return self.conn.execute("SELECT COUNT(*) FROM elements WHERE name = ?", [name]).fetchone()[0] == 1

    def _require(self, name: str):
        if not self.has_node(name): raise UnknownNodeError(name)

    def base_value(self, name: str) -> float:
        row = self.conn.execute("SELECT base_value FROM elements WHERE name = ?", [name]).fetchone()
        if row is None: raise UnknownNodeError(name)
        return row[0]

    def held_quantity(self, name: str) -> float:
        row = self.conn.execute("SELECT num FROM elements_holding WHERE name = ?", [name]).fetchone()
        return row[0] if row else 0.0

    def set_holding(self, name: str, num: float) -> None:
        self._require(name)
        if not num >= 0: raise DegenerateWeightError(name, "held quantity", num)
        self.conn.execute("DELETE FROM elements_holding WHERE name = ?", [name])
        self.conn.execute("INSERT INTO elements_holding VALUES (?, ?)", [name, float(num)])
        logger.info("Holding of %s set to %s", name, num)

    def primary_nodes(self) -> List[str]:
        return [r[0] for r in self.conn.rows("SELECT name FROM elements e WHERE NOT EXISTS (SELECT 1 FROM recipes r WHERE r.name = e.name) ORDER BY 1")]

    def is_primary(self, name: str) -> bool:
        self._require(name)
        return self.conn.execute("SELECT COUNT(*) FROM recipes WHERE name = ?", [name]).fetchone()[0] == 0

    def components_of(self, name: str) -> List[Tuple[str, str]]:
        self._require(name)
        return [tuple(r) for r in self.conn.execute("SELECT component_a, component_b FROM recipes WHERE name = ? ORDER BY 1, 2", [name]).fetchall()]

    def composites_of(self, name: str) -> List[str]:
        self._require(name)
        return [r[0] for r in self.conn.execute("SELECT DISTINCT name FROM recipes WHERE component_a = ? OR component_b = ? ORDER BY 1", [name, name]).fetchall()]

    def elements_table(self) -> pa.Table:
        return self.conn.query("SELECT name, belongs_to_mod, base_value FROM elements ORDER BY name")

    def recipes_table(self) -> pa.Table:
        return self.conn.query("SELECT name, component_a, component_b FROM recipes ORDER BY name, component_a, component_b")
