from __future__ import annotations
import logging
import duckdb
from pathlib import Path
from typing import Union, Optional, Any
import pyarrow as pa

logger = logging.getLogger(__name__)

class DuckDBConnection:
    """Wrapper for DuckDB connection with utility methods."""
    def __init__(
        self,
        database: Union[str, Path] = ":memory:",
        memory_limit: Optional[str] = None,
        threads: Optional[int] = None,
        read_only: bool = False,
    ):
        self._database = str(database)
        self.conn = duckdb.connect(self._database, read_only=read_only)
        logger.debug("Opened DuckDB database %s (read_only=%s)", self._database, read_only)

        if memory_limit:
            self.conn.execute(f"SET memory_limit='{memory_limit}'")
        if threads:
            self.conn.execute(f"SET threads={threads}")

    def execute(self, query: str, params: Optional[Union[list, dict]] = None) -> duckdb.DuckDBPyConnection:
        return self.conn.execute(query, params)

    def query(self, query: str, params: Optional[Union[list, dict]] = None) -> pa.Table:
        res = self.execute(query, params)
        table = res.arrow()
        if hasattr(table, "read_all"):
            return table.read_all()
        return table

    def rows(self, query: str, params: Optional[Union[list, dict]] = None) -> list:
        return self.execute(query, params).fetchall()

    def table_exists(self, table_name: str) -> bool:
        try:
            self.conn.execute(f"SELECT 1 FROM {table_name} LIMIT 0")
            return True
        except duckdb.CatalogException:
            return False

    def register(self, name: str, df: Any):
        self.conn.register(name, df)

    def unregister(self, name: str):
        self.conn.unregister(name)

    def close(self):
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def __repr__(self) -> str:
        return f"DuckDBConnection(database={self._database!r})"
