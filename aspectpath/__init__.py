from .api import AspectPath
from .config import WeightConfig
from .core.connection import DuckDBConnection
from .core.store import AspectStore
from .errors import AspectPathError, UnknownNodeError, DegenerateWeightError, GraphCycleWarning
from .graph.models import Node, Recipe
from .graph.builder import AspectGraph, build_graph
from .graph.decompose import decompose
from .weights import NodeWeightEvaluator, PiecewiseSaturation, HyperbolicSaturation, make_curve
from .paths.enumerator import PathEnumerator
from .paths.ranker import PathRanker, RankedPath
from .reporting import format_path, to_table
from .datasets import generate_thaumcraft_aspects

__version__ = "0.1.0"

def load(elements, recipes=None, holdings=None, **kwargs) -> AspectPath:
    engine = AspectPath()
    engine.load(elements, recipes, holdings, **kwargs)
    return engine

def connect(database=":memory:", **kwargs) -> AspectPath:
    return AspectPath(database=database, **kwargs)

__all__ = [
    "AspectPath",
    "load",
    "connect",
    "WeightConfig",
    "DuckDBConnection",
    "AspectStore",
    "AspectPathError",
    "UnknownNodeError",
    "DegenerateWeightError",
    "GraphCycleWarning",
    "Node",
    "Recipe",
    "AspectGraph",
    "build_graph",
    "decompose",
    "NodeWeightEvaluator",
    "PiecewiseSaturation",
    "HyperbolicSaturation",
    "make_curve",
    "PathEnumerator",
    "PathRanker",
    "RankedPath",
    "format_path",
    "to_table",
    # Datasets
    "generate_thaumcraft_aspects",
]
