import pandas as pd

from aspectpath.datasets import generate_thaumcraft_aspects, PRIMALS, COMPOUNDS


def test_generate_thaumcraft_aspects():
    elements, recipes, holdings = generate_thaumcraft_aspects()
    assert isinstance(elements, pd.DataFrame)
    assert list(elements.columns) == ["name", "belongs_to_mod", "base_value"]
    assert list(recipes.columns) == ["name", "component_a", "component_b"]
    assert len(elements) == len(PRIMALS) + len(COMPOUNDS)
    assert elements["name"].is_unique
    assert holdings.empty


def test_recipes_only_reference_known_aspects():
    elements, recipes, _ = generate_thaumcraft_aspects()
    known = set(elements["name"])
    for col in recipes.columns:
        assert set(recipes[col]) <= known
    assert not set(PRIMALS) & set(recipes["name"])


def test_holdings():
    _, _, holdings = generate_thaumcraft_aspects({"Lux": 120, "Aer": 3})
    assert holdings.to_dict("records") == [{"name": "Aer", "num": 3.0}, {"name": "Lux", "num": 120.0}]
