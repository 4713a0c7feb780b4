"""Tests for the Typer CLI — list, show, show-all, delete, config."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from filed_recipes.presentation.cli.app import app

runner = CliRunner()

RECIPES_TXT = """\
[Recept]
Zucchini
[Ingredienser]
2;st;zucchini
[Instruktioner]
Skiva zucchinin

[Recept]
Apple pie
[Ingredienser]
4;st;äpplen
[Instruktioner]
Grädda i 30 minuter

[Recept]
Pancakes
[Ingredienser]
2;dl;flour
3;st;eggs
[Instruktioner]
Mix ingredients
Fry on pan
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> None:
    """Keep the CLI away from the real user config directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))


@pytest.fixture()
def recipes_file(tmp_path: Path) -> Path:
    path = tmp_path / "recipes.txt"
    path.write_text(RECIPES_TXT, encoding="utf-8")
    return path


def _run(recipes_file: Path, *args: str, **kwargs):
    return runner.invoke(app, ["--file", str(recipes_file), *args], **kwargs)


# ═══════════════════════════════════════════════════════════════════════════════
# Reading commands
# ═══════════════════════════════════════════════════════════════════════════════


class TestList:
    def test_list_shows_sorted_names(self, recipes_file: Path):
        result = _run(recipes_file, "list")
        assert result.exit_code == 0, result.output
        out = result.output
        assert out.index("Apple pie") < out.index("Pancakes") < out.index("Zucchini")

    def test_list_empty_file(self, tmp_path: Path):
        empty = tmp_path / "empty.txt"
        empty.write_text("", encoding="utf-8")
        result = _run(empty, "list")
        assert result.exit_code == 0
        assert "No recipes" in result.output

    def test_missing_file(self, tmp_path: Path):
        result = _run(tmp_path / "nope.txt", "list")
        assert result.exit_code == 1
        assert "Recipe file not found" in result.output

    def test_malformed_file(self, tmp_path: Path):
        bad = tmp_path / "bad.txt"
        bad.write_text("[Recept]\nMjölk\n[Ingredienser]\n2 dl mjölk\n", encoding="utf-8")
        result = _run(bad, "list")
        assert result.exit_code == 1
        assert "Could not read recipes" in result.output


class TestShow:
    def test_show_one_recipe(self, recipes_file: Path):
        result = _run(recipes_file, "show", "2")
        assert result.exit_code == 0, result.output
        assert "Pancakes" in result.output
        assert "flour" in result.output
        assert "1. Mix ingredients" in result.output
        assert "2. Fry on pan" in result.output

    @pytest.mark.parametrize("number", ["0", "4"])
    def test_show_out_of_range(self, recipes_file: Path, number: str):
        result = _run(recipes_file, "show", number)
        assert result.exit_code == 1
        assert f"No recipe number {number}" in result.output

    def test_bracketed_text_is_shown_literally(self, tmp_path: Path):
        path = tmp_path / "brackets.txt"
        path.write_text(
            "[Recept]\nChili [/]\n[Ingredienser]\n1;st;salt [/]\n[Instruktioner]\nStir [bold]\n"
            "[Recept]\nSoup [bold]\n[Ingredienser]\n2;dl;[red]water\n",
            encoding="utf-8",
        )
        listed = _run(path, "list")
        assert listed.exit_code == 0, listed.output
        assert "Chili [/]" in listed.output
        assert "Soup [bold]" in listed.output

        shown = _run(path, "show", "1")
        assert shown.exit_code == 0, shown.output
        assert "salt [/]" in shown.output
        assert "Stir [bold]" in shown.output

        other = _run(path, "show", "2")
        assert other.exit_code == 0, other.output
        assert "[red]water" in other.output

    def test_show_all(self, recipes_file: Path):
        result = _run(recipes_file, "show-all", "--no-pause")
        assert result.exit_code == 0, result.output
        out = result.output
        assert out.index("Apple pie") < out.index("Pancakes") < out.index("Zucchini")
        assert "Skiva zucchinin" in out


# ═══════════════════════════════════════════════════════════════════════════════
# Delete
# ═══════════════════════════════════════════════════════════════════════════════


class TestDelete:
    def test_delete_with_yes_saves_file(self, recipes_file: Path):
        result = _run(recipes_file, "delete", "1", "--yes")
        assert result.exit_code == 0, result.output
        text = recipes_file.read_text(encoding="utf-8")
        assert "Apple pie" not in text
        assert "Pancakes" in text
        assert "Zucchini" in text

    def test_delete_confirmed(self, recipes_file: Path):
        result = _run(recipes_file, "delete", "3", input="y\n")
        assert result.exit_code == 0, result.output
        assert "Zucchini" not in recipes_file.read_text(encoding="utf-8")

    def test_delete_declined_keeps_file(self, recipes_file: Path):
        result = _run(recipes_file, "delete", "1", input="n\n")
        assert result.exit_code == 1
        assert recipes_file.read_text(encoding="utf-8") == RECIPES_TXT

    def test_delete_out_of_range(self, recipes_file: Path):
        result = _run(recipes_file, "delete", "7", "--yes")
        assert result.exit_code == 1
        assert recipes_file.read_text(encoding="utf-8") == RECIPES_TXT


# ═══════════════════════════════════════════════════════════════════════════════
# Config
# ═══════════════════════════════════════════════════════════════════════════════


class TestConfig:
    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0, result.output
        assert "raise_errors" in result.output

    def test_config_reset(self, tmp_path: Path):
        settings_file = tmp_path / "config" / "filed_recipes" / "settings.json"
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text('{"raise_errors": true}', encoding="utf-8")

        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0, result.output
        assert not settings_file.exists()
