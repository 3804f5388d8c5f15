"""Shared fixtures: an on-disk data directory and an isolated config."""

import json

import pytest

from apothecary import config as config_module


INGREDIENT_ROWS = [
    {"name": "Moonpetal", "potency": 2, "resonance": 1, "entropy": 0, "rarity": "Common"},
    {"name": "Ashroot", "potency": 1, "resonance": 0, "entropy": 0},
    {"name": "Gloomcap", "potency": 2, "resonance": 0, "entropy": 1},
    {"name": "Brightmoss", "potency": 0, "resonance": 3, "entropy": 0},
    {"name": "Ditchweed"},
    {"name": "  ", "potency": 4},
]


def alchemy_rows() -> list[dict]:
    """15 Potency recipes, Elixir 1-15, first three discovered (reverse file order)."""
    return [
        {
            "recipeNo": no,
            "name": f"Elixir {no}",
            "qualityCategory": "Potency",
            "rarity": "Rare" if no > 10 else "Common",
            "effect": f"Heals {no} HP",
            "discovered": no <= 3,
        }
        for no in range(15, 0, -1)
    ]


HERBALISM_YAML = """\
recipes:
  - recipe_no: 1
    name: Calming Tea
    quality_category: clarity
    discovered: true
  - recipe_no: 2
    name: Focus Draught
    quality_category: Clarity
  - recipe_no: 3
    name: Dream Salve
    quality_category: resonance
  - recipe_no: 4
    name: Quiet Balm
    quality_category: Resonance
  - recipe_no: 5
    name: Still Water
    quality_category: RESONANCE
"""


@pytest.fixture
def data_dir(tmp_path):
    """Data directory with ingredients, an Alchemy and a Herbalism catalog.

    Poison has no catalog file.
    """
    root = tmp_path / "data"
    root.mkdir()
    (root / "ingredients.json").write_text(json.dumps(INGREDIENT_ROWS))
    (root / "recipes_alchemy.json").write_text(json.dumps(alchemy_rows()))
    (root / "recipes_herbalism.yaml").write_text(HERBALISM_YAML)
    return root


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at tmp_path and clear APOTHECARY_* env vars."""
    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    for name in (
        "APOTHECARY_MODE",
        "APOTHECARY_DISCIPLINE",
        "APOTHECARY_SEED",
        "APOTHECARY_DATA_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield config_file
    config_module.reset_config()
