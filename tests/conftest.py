# ---------------------------------------------------------------------------
# Tests configuration
# ---------------------------------------------------------------------------

import pytest
import pandas as pd

from aspectpath.core.connection import DuckDBConnection
from aspectpath.graph.models import Node, Recipe


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def conn():
    """In-memory DuckDB connection for each test."""
    db = DuckDBConnection()  # :memory:
    yield db
    db.close()


@pytest.fixture
def abc_nodes():
    # A and C are not held, B is held 100 times
    return [Node("A"), Node("B", held=100.0), Node("C")]


@pytest.fixture
def abc_recipes():
    # C = A + B
    return [Recipe("C", "A", "B")]


@pytest.fixture
def diamond_nodes():
    """
    Two compounds made from the same primals.

    X = P + Q, Y = P + Q, Z = X + Y
    """
    return [Node("P", held=10.0), Node("Q", held=500.0), Node("X", held=50.0), Node("Y"), Node("Z", base_value=2.0)]


@pytest.fixture
def diamond_recipes():
    return [Recipe("X", "P", "Q"), Recipe("Y", "P", "Q"), Recipe("Z", "X", "Y")]


@pytest.fixture
def elements_df():
    return pd.DataFrame({
        "name": ["A", "B", "C"],
        "belongs_to_mod": ["Core", "Core", "Addon"],
        "base_value": [1.0, 1.0, 2.0],
    })


@pytest.fixture
def recipes_df():
    return pd.DataFrame({"name": ["C"], "component_a": ["A"], "component_b": ["B"]})


@pytest.fixture
def holdings_df():
    return pd.DataFrame({"name": ["B"], "num": [100.0]})


@pytest.fixture
def loaded_conn(conn, elements_df, recipes_df, holdings_df):
    """Connection with the A, B, C = A + B tables loaded."""
    from aspectpath.core.ingestion import load_elements, load_recipes, load_holdings
    load_elements(conn, elements_df)
    load_recipes(conn, recipes_df)
    load_holdings(conn, holdings_df)
    return conn


@pytest.fixture
def thaumcraft():
    """AspectPath engine with the bundled aspect set loaded."""
    from aspectpath.api import AspectPath
    from aspectpath.datasets import generate_thaumcraft_aspects
    elements, recipes, _ = generate_thaumcraft_aspects()
    engine = AspectPath()
    engine.load(elements, recipes)
    yield engine
    engine.close()
