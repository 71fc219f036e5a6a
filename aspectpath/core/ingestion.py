from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Tuple, Union
from pathlib import Path
import narwhals as nw
from aspectpath.core.connection import DuckDBConnection
from aspectpath.core.schema import ensure_schema
from aspectpath.errors import DegenerateWeightError, UnknownNodeError

logger = logging.getLogger(__name__)

_FILE_SOURCE = "_tmp_file_source"
_FRAME_SOURCE = "_tmp_frame_source"
_STAGED = "_tmp_staged"

Source = Union[str, Path, Any]

def _prepare_file_source(conn: DuckDBConnection, source: Union[str, Path]) -> Tuple[str, List[str]]:
    p = str(source)
    if p.endswith(".csv"): reader = f"read_csv_auto('{p}')"
    elif p.endswith(".parquet"): reader = f"read_parquet('{p}')"
    else: raise ValueError("Unsupported file type")
    conn.execute(f"CREATE OR REPLACE TEMP VIEW {_FILE_SOURCE} AS SELECT * FROM {reader}")
    return _FILE_SOURCE, [row[0] for row in conn.rows(f"DESCRIBE {_FILE_SOURCE}")]

def _prepare_df_source(conn: DuckDBConnection, source: Any) -> Tuple[str, List[str]]:
    try: df = nw.from_native(source)
    except TypeError as e: raise ValueError(f"Unsupported source type: {type(source).__name__}") from e
    if isinstance(df, nw.LazyFrame): df = df.collect()
    conn.register(_FRAME_SOURCE, df.to_native())
    return _FRAME_SOURCE, list(df.collect_schema().names())

def _prepare_source(conn: DuckDBConnection, source: Source) -> Tuple[str, List[str]]:
    if isinstance(source, (str, Path)): return _prepare_file_source(conn, source)
    return _prepare_df_source(conn, source)

def _select_list(columns: List[str], mapping: Dict[str, Tuple[Optional[str], str, Optional[str]]]) -> str:
    """Build ``src::TYPE AS target`` items; a missing optional column falls back to its default literal."""
    items = []
    for target, (src, sql_type, default) in mapping.items():
        if src is not None and src in columns:
            items.append(f'CAST("{src}" AS {sql_type}) AS {target}')
        elif default is not None:
            items.append(f"CAST({default} AS {sql_type}) AS {target}")
        else:
            raise ValueError(f"Missing column {src!r} (available: {columns})")
    return ", ".join(items)

def _stage(conn: DuckDBConnection, source: Source, mapping, not_null: List[str]) -> int:
    view, columns = _prepare_source(conn, source)
    where = " AND ".join(f"{c} IS NOT NULL" for c in not_null)
    try:
        conn.execute(f"CREATE OR REPLACE TEMP TABLE {_STAGED} AS SELECT DISTINCT * FROM (SELECT {_select_list(columns, mapping)} FROM {view}) WHERE {where}")
    finally:
        # drop the reference to the caller's frame
        if view == _FRAME_SOURCE: conn.unregister(_FRAME_SOURCE)
    return conn.execute(f"SELECT COUNT(*) FROM {_STAGED}").fetchone()[0]

def _check_known(conn: DuckDBConnection, column: str, context: str):
    missing = conn.execute(f"SELECT s.{column} FROM {_STAGED} s LEFT JOIN elements e ON s.{column} = e.name WHERE e.name IS NULL ORDER BY 1 LIMIT 1").fetchone()
    if missing: raise UnknownNodeError(missing[0], context)

def load_elements(conn: DuckDBConnection, source: Source, name_col="name", mod_col="belongs_to_mod", base_value_col="base_value") -> int:
    """Insert aspect definitions; names already present are left untouched."""
    ensure_schema(conn)
    staged = _stage(conn, source, {
        "name": (name_col, "VARCHAR", None),
        "belongs_to_mod": (mod_col, "VARCHAR", "NULL"),
        "base_value": (base_value_col, "DOUBLE", "1.0"),
    }, not_null=["name"])
    conn.execute(f"UPDATE {_STAGED} SET base_value = 1.0 WHERE base_value IS NULL")
    bad = conn.execute(f"SELECT name, base_value FROM {_STAGED} WHERE base_value <= 0 OR isnan(base_value) ORDER BY name LIMIT 1").fetchone()
    if bad: raise DegenerateWeightError(bad[0], "base_value", bad[1])
    conn.execute(f"""
        INSERT INTO elements BY NAME
        SELECT DISTINCT ON (name) name, belongs_to_mod, base_value FROM {_STAGED}
        WHERE name NOT IN (SELECT name FROM elements)
        ORDER BY name
    """)
    logger.info("Staged %d element rows", staged)
    return conn.execute("SELECT COUNT(*) FROM elements").fetchone()[0]

def load_recipes(conn: DuckDBConnection, source: Source, name_col="name", a_col="component_a", b_col="component_b") -> int:
    """Append recipes; every referenced aspect must already exist in ``elements``."""
    ensure_schema(conn)
    staged = _stage(conn, source, {
        "name": (name_col, "VARCHAR", None),
        "component_a": (a_col, "VARCHAR", None),
        "component_b": (b_col, "VARCHAR", None),
    }, not_null=["name", "component_a", "component_b"])
    for column in ("name", "component_a", "component_b"):
        _check_known(conn, column, f"recipes.{column}")
    conn.execute(f"""
        INSERT INTO recipes
        SELECT name, component_a, component_b FROM {_STAGED}
        EXCEPT SELECT name, component_a, component_b FROM recipes
    """)
    logger.info("Staged %d recipe rows", staged)
    return conn.execute("SELECT COUNT(*) FROM recipes").fetchone()[0]

def load_holdings(conn: DuckDBConnection, source: Source, name_col="name", num_col="num") -> int:
    """Upsert held quantities. A name repeated in the source keeps its largest quantity."""
    ensure_schema(conn)
    staged = _stage(conn, source, {
        "name": (name_col, "VARCHAR", None),
        "num": (num_col, "DOUBLE", "0.0"),
    }, not_null=["name", "num"])
    _check_known(conn, "name", "elements_holding.name")
    bad = conn.execute(f"SELECT name, num FROM {_STAGED} WHERE num < 0 OR isnan(num) ORDER BY name LIMIT 1").fetchone()
    if bad: raise DegenerateWeightError(bad[0], "held quantity", bad[1])
    conn.execute(f"DELETE FROM elements_holding WHERE name IN (SELECT name FROM {_STAGED})")
    conn.execute(f"INSERT INTO elements_holding SELECT name, max(num) AS num FROM {_STAGED} GROUP BY name")
    logger.info("Staged %d holding rows", staged)
    return conn.execute("SELECT COUNT(*) FROM elements_holding").fetchone()[0]
