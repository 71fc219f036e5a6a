"""Integration tests for the high-level AspectPath API."""

import math
import pytest
import pandas as pd
import pyarrow as pa

import aspectpath
from aspectpath.api import AspectPath
from aspectpath.config import WeightConfig
from aspectpath.errors import DegenerateWeightError, UnknownNodeError


class TestAspectPathLoading:

    def test_load_returns_self(self, elements_df, recipes_df, holdings_df):
        with AspectPath() as engine:
            assert engine.load(elements_df, recipes_df, holdings_df) is engine
            assert engine.elements().num_rows == 3
            assert engine.recipes().num_rows == 1
            assert engine.holdings() == [("B", 100.0)]
            assert engine.mods() == ["Addon", "Core"]

    def test_factory_functions(self, elements_df, recipes_df):
        engine = aspectpath.load(elements_df, recipes_df)
        assert isinstance(engine, AspectPath)
        engine.close()
        engine2 = aspectpath.connect()
        assert isinstance(engine2, AspectPath)
        engine2.close()

    def test_raw_sql(self, elements_df):
        with AspectPath() as engine:
            engine.load(elements_df)
            result = engine.sql("SELECT COUNT(*) AS n FROM elements")
            assert result.column("n")[0].as_py() == 3

    def test_persistent_database(self, tmp_path, elements_df, recipes_df):
        db_path = tmp_path / "aspects.duckdb"
        with AspectPath(database=db_path) as engine:
            engine.load(elements_df, recipes_df)
        with AspectPath(database=db_path) as engine:
            assert [r.path for r in engine.recommend("A", "B")] == [("A", "C", "B")]

    def test_repr(self):
        with AspectPath() as engine:
            assert ":memory:" in repr(engine)


class TestAspectPathRecommend:

    @pytest.fixture
    def engine(self, elements_df, recipes_df, holdings_df):
        elements_df = elements_df.assign(base_value=1.0)
        engine = AspectPath().load(elements_df, recipes_df, holdings_df)
        yield engine
        engine.close()

    def test_example(self, engine):
        ranking = engine.recommend("A", "B")
        assert [r.path for r in ranking] == [("A", "C", "B")]
        w_b = 0.07
        w_c = 0.3 / w_b
        assert ranking[0].final_weight == pytest.approx(w_b + w_c + 0.3 / w_c)

    def test_same_node(self, engine):
        ranking = engine.recommend("B", "B")
        assert len(ranking) == 1
        assert ranking[0].path == ("B",)
        assert ranking[0].final_weight == engine.self_weight("B")

    def test_unknown(self, engine):
        with pytest.raises(UnknownNodeError):
            engine.recommend("Nonexistent", "A")

    def test_idempotent(self, engine):
        assert engine.recommend("A", "B") == engine.recommend("A", "B")

    def test_snapshot_refreshes_after_holding_change(self, engine):
        before = engine.recommend("A", "B")[0].final_weight
        engine.set_holding("A", 500)
        after = engine.recommend("A", "B")[0].final_weight
        assert after != before
        assert engine.graph.node("A").held == 500.0

    def test_nan_holding_rejected(self, engine):
        with pytest.raises(DegenerateWeightError):
            engine.set_holding("C", math.nan)
        assert engine.recommend("A", "B")[0].path == ("A", "C", "B")

    def test_refresh(self, engine):
        g = engine.graph
        assert engine.refresh().graph is not g

    def test_recommend_table(self, engine):
        table = engine.recommend_table("A", "B")
        assert isinstance(table, pa.Table)
        assert table.column_names == ["rank", "path", "route", "length", "final_weight"]
        assert table.column("path").to_pylist() == [["A", "C", "B"]]

    def test_recommend_table_empty(self):
        with AspectPath() as engine:
            engine.load(pd.DataFrame({"name": ["A", "B"]}))
            table = engine.recommend_table("A", "B")
            assert table.num_rows == 0
            assert "final_weight" in table.column_names

    def test_config(self, elements_df, recipes_df, holdings_df):
        with AspectPath(config=WeightConfig(curve="hyperbolic")) as engine:
            engine.load(elements_df, recipes_df, holdings_df)
            assert engine.self_weight("B") == pytest.approx(100 / 101)


class TestThaumcraft:

    def _routes(self, ranking):
        return {r.route for r in ranking}

    def test_one_step(self, thaumcraft):
        assert self._routes(thaumcraft.recommend("Aer", "Ignis", steps=1)) == {"Aer->Lux->Ignis"}

    def test_two_steps(self, thaumcraft):
        assert thaumcraft.recommend("Aer", "Ignis", steps=2) == []
        assert self._routes(thaumcraft.recommend("Humanus", "Ignis", steps=2)) == {"Humanus->Instrumentum->Telum->Ignis"}
        assert self._routes(thaumcraft.recommend("Machina", "Cognitio", steps=2)) == {"Machina->Instrumentum->Humanus->Cognitio"}
        assert self._routes(thaumcraft.recommend("Bestia", "Spiritus", steps=2)) == {
            "Bestia->Humanus->Cognitio->Spiritus",
            "Bestia->Victus->Mortuus->Spiritus",
            "Bestia->Corpus->Mortuus->Spiritus",
        }

    def test_paths_are_viable(self, thaumcraft):
        g = thaumcraft.graph
        for r in thaumcraft.recommend("Motus", "Mortuus", max_path_length=5):
            assert len(set(r.path)) == r.length <= 5
            assert all(g.connected(x, y) for x, y in zip(r.path, r.path[1:]))

    def test_holdings_steer_ranking(self, thaumcraft):
        thaumcraft.set_holding("Victus", 900)
        thaumcraft.set_holding("Mortuus", 900)
        best = thaumcraft.recommend("Bestia", "Spiritus", steps=2)[0]
        assert best.path == ("Bestia", "Victus", "Mortuus", "Spiritus")

    def test_max_paths(self, thaumcraft):
        assert len(thaumcraft.recommend("Aer", "Terra", max_paths=3)) == 3

    def test_decompose(self, thaumcraft):
        assert thaumcraft.decompose({"Lux": 2, "Aer": 1}) == {"Aer": 3, "Ignis": 2}
