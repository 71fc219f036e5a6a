"""DDL for the three tables the aspect store reads from."""
from __future__ import annotations
from aspectpath.core.connection import DuckDBConnection

ELEMENTS_DDL = """
CREATE TABLE IF NOT EXISTS elements (
    name VARCHAR PRIMARY KEY,
    belongs_to_mod VARCHAR,
    base_value DOUBLE NOT NULL DEFAULT 1.0
)
"""

RECIPES_DDL = """
CREATE TABLE IF NOT EXISTS recipes (
    name VARCHAR NOT NULL REFERENCES elements(name),
    component_a VARCHAR NOT NULL REFERENCES elements(name),
    component_b VARCHAR NOT NULL REFERENCES elements(name)
)
"""

HOLDING_DDL = """
CREATE TABLE IF NOT EXISTS elements_holding (
    name VARCHAR PRIMARY KEY REFERENCES elements(name),
    num DOUBLE NOT NULL DEFAULT 0.0
)
"""

TABLES = ("elements", "recipes", "elements_holding")

def ensure_schema(conn: DuckDBConnection) -> None:
    for ddl in (ELEMENTS_DDL, RECIPES_DDL, HOLDING_DDL):
        conn.execute(ddl)

def has_schema(conn: DuckDBConnection) -> bool:
    return all(conn.table_exists(t) for t in TABLES)
