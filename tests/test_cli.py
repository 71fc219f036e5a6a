"""Tests for the command line interface."""

import io
import pytest

from aspectpath.cli import main, parse_aspect_counts


def run(*argv):
    out = io.StringIO()
    code = main(list(argv), out=out)
    return code, out.getvalue().splitlines()


@pytest.fixture
def db(tmp_path):
    path = str(tmp_path / "aspects.duckdb")
    assert run("--database", path, "import", "--sample")[0] == 0
    return path


class TestParseAspectCounts:

    def test_quantities(self):
        assert parse_aspect_counts(["Sano", "Aer", "48", "Ira", "11", "Superbia"]) == {
            "Sano": 1, "Aer": 48, "Ira": 11, "Superbia": 1,
        }

    def test_repeated_aspects_add_up(self):
        assert parse_aspect_counts(["Aer", "2", "Aer"]) == {"Aer": 3}

    def test_leading_quantity(self):
        with pytest.raises(ValueError):
            parse_aspect_counts(["3", "Aer"])

    def test_empty(self):
        with pytest.raises(ValueError):
            parse_aspect_counts([])


class TestCommands:

    def test_list_elements(self, db):
        code, lines = run("--database", db, "list-elements")
        assert code == 0
        assert "Aer,Thaumcraft,1.0" in lines

    def test_list_recipes(self, db):
        _, lines = run("--database", db, "list-recipes")
        assert "Lux = Aer + Ignis" in lines

    def test_list_mods(self, db):
        assert run("--database", db, "list-mods")[1] == ["Thaumcraft"]

    def test_holdings(self, db):
        assert run("--database", db, "set-holding", "Lux", "120")[0] == 0
        assert run("--database", db, "list-holdings")[1] == ["Element: Lux | Number: 120"]

    def test_crack(self, db):
        _, lines = run("--database", db, "crack", "Lux", "2", "Aer")
        assert lines == ["Aer: 3", "Ignis: 2"]

    def test_connect(self, db):
        code, lines = run("--database", db, "connect", "Aer", "Ignis", "--steps", "1")
        assert code == 0
        assert len(lines) == 1
        assert lines[0].startswith("Aer->Lux->Ignis: weight ")

    def test_connect_limit(self, db):
        _, lines = run("--database", db, "connect", "Aer", "Terra", "--max-length", "5", "--limit", "2")
        assert len(lines) == 2

    def test_connect_disconnected(self, db, capsys):
        code, lines = run("--database", db, "connect", "Aer", "Ignis", "--steps", "2")
        assert code == 0
        assert lines == []
        assert "can't be connected" in capsys.readouterr().err

    def test_unknown_aspect(self, db, capsys):
        code, _ = run("--database", db, "connect", "Nonexistent", "Aer")
        assert code == 1
        assert "Nonexistent" in capsys.readouterr().err

    def test_import_files(self, tmp_path, elements_df, recipes_df, holdings_df):
        files = {}
        for name, df in (("elements", elements_df), ("recipes", recipes_df), ("holdings", holdings_df)):
            files[name] = str(tmp_path / f"{name}.csv")
            df.to_csv(files[name], index=False)
        path = str(tmp_path / "imported.duckdb")
        code, _ = run("--database", path, "import", "--elements", files["elements"], "--recipes", files["recipes"], "--holdings", files["holdings"])
        assert code == 0
        assert run("--database", path, "list-holdings")[1] == ["Element: B | Number: 100"]
        assert run("--database", path, "connect", "A", "B")[1][0].startswith("A->C->B")

    def test_env_database(self, db, monkeypatch):
        monkeypatch.setenv("ASPECTPATH_DATABASE", db)
        assert run("list-mods")[1] == ["Thaumcraft"]
