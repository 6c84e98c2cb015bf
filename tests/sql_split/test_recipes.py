"""Every marimo notebook under recipes/ must run top to bottom."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

marimo = pytest.importorskip("marimo")

RECIPES_DIR = Path(__file__).resolve().parents[2] / "recipes"
RECIPES = sorted(p.stem for p in RECIPES_DIR.glob("*.py") if not p.name.startswith("_"))


def test_recipes_found() -> None:
    assert "sqlite_scripts" in RECIPES


@pytest.mark.parametrize("name", RECIPES)
def test_recipe_runs(name: str) -> None:
    mod = importlib.import_module(f"recipes.{name}")
    mod.app.run()
