from __future__ import annotations
from typing import List
import pyarrow as pa
from aspectpath.paths.ranker import RankedPath

RANKING_SCHEMA = pa.schema([
    ("rank", pa.int32()),
    ("path", pa.list_(pa.string())),
    ("route", pa.string()),
    ("length", pa.int32()),
    ("final_weight", pa.float64()),
])

def format_path(ranked: RankedPath, precision: int = 6) -> str:
    return f"{ranked.route}: weight {ranked.final_weight:.{precision}f}"

def to_table(ranking: List[RankedPath]) -> pa.Table:
    rows = [
        {"rank": i, "path": list(r.path), "route": r.route, "length": r.length, "final_weight": r.final_weight}
        for i, r in enumerate(ranking, start=1)
    ]
    return pa.Table.from_pylist(rows, schema=RANKING_SCHEMA)
