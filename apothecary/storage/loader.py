"""Load ingredients and recipe catalogs from YAML or JSON files.

A data directory holds:
- ingredients.yaml (or .yml / .json): list of ingredient rows
- recipes_<discipline>.yaml (or .yml / .json): one catalog per discipline,
  e.g. recipes_herbalism.json
- recipes.yaml (or .yml / .json): optional mixed table split by each row's
  discipline and merged into the per-discipline catalogs

Files may be a bare list or an object wrapping the list under ``ingredients``
or ``recipes``. JSON is read with the YAML parser, which accepts it as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..core.models import Discipline, Ingredient, Recipe
from ..crafting.catalog import group_by_discipline, sort_catalog

logger = logging.getLogger(__name__)

DATA_SUFFIXES = (".yaml", ".yml", ".json")
COMBINED_STEM = "recipes"


class DataLoadError(Exception):
    """Raised when a data file cannot be read or validated."""

    pass


@dataclass
class CraftingData:
    """Everything needed to craft: ingredients and per-discipline catalogs."""

    ingredients: list[Ingredient] = field(default_factory=list)
    catalogs: dict[Discipline, list[Recipe]] = field(default_factory=dict)

    @property
    def ingredients_by_name(self) -> dict[str, Ingredient]:
        return {ingredient.name: ingredient for ingredient in self.ingredients}

    def catalog(self, discipline: Discipline | str) -> list[Recipe]:
        key = Discipline.parse(discipline)
        if key is None:
            return []
        return self.catalogs.get(key, [])


def _read_rows(path: Path, wrapper_key: str) -> list[dict[str, Any]]:
    """Read a list of row dicts from a YAML/JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise DataLoadError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise DataLoadError(f"Invalid YAML/JSON in {path}: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get(wrapper_key, [])
    if not isinstance(data, list):
        raise DataLoadError(f"{path} must contain a list of {wrapper_key}")

    rows = []
    for i, row in enumerate(data):
        if not isinstance(row, dict):
            raise DataLoadError(f"{path}: entry {i} is not an object")
        rows.append(row)
    return rows


def load_ingredients(path: Path | str) -> list[Ingredient]:
    """Load ingredients from a file. Rows without a name are skipped."""
    path = Path(path)
    ingredients: list[Ingredient] = []
    for row in _read_rows(path, "ingredients"):
        try:
            ingredient = Ingredient.model_validate(row)
        except ValidationError as e:
            raise DataLoadError(f"{path}: invalid ingredient {row.get('name')!r}: {e}") from e
        if not ingredient.name:
            logger.debug("Skipping unnamed ingredient row in %s", path)
            continue
        ingredients.append(ingredient)
    return ingredients


def load_catalog(
    path: Path | str, discipline: Discipline | str | None = None
) -> list[Recipe]:
    """Load one recipe catalog, sorted by quality then recipe number.

    Each recipe's discipline comes from its own ``discipline`` field, then its
    ``category``, then the ``discipline`` argument.
    """
    path = Path(path)
    fallback = Discipline.parse(discipline)
    recipes: list[Recipe] = []
    for row in _read_rows(path, "recipes"):
        data = dict(row)
        if fallback is not None and not data.get("discipline") and not data.get("category"):
            data["discipline"] = fallback.value
        try:
            recipes.append(Recipe.model_validate(data))
        except ValidationError as e:
            raise DataLoadError(f"{path}: invalid recipe {row.get('name')!r}: {e}") from e
    return sort_catalog(recipes)


def find_data_file(data_dir: Path, stem: str) -> Path | None:
    """First existing ``<stem><suffix>`` in the data directory."""
    for suffix in DATA_SUFFIXES:
        candidate = data_dir / f"{stem}{suffix}"
        if candidate.exists():
            return candidate
    return None


def catalog_stem(discipline: Discipline) -> str:
    return f"recipes_{discipline.value.lower()}"


def load_data_dir(data_dir: Path | str) -> CraftingData:
    """Load ingredients and every discipline's catalog from a directory.

    Missing files give empty lists; a missing directory is an error. Rows of a
    mixed ``recipes`` file without a known discipline are skipped.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DataLoadError(f"Data directory not found: {data_dir}")

    ingredients_path = find_data_file(data_dir, "ingredients")
    ingredients = load_ingredients(ingredients_path) if ingredients_path else []

    combined: dict[Discipline, list[Recipe]] = {d: [] for d in Discipline}
    combined_path = find_data_file(data_dir, COMBINED_STEM)
    if combined_path is not None:
        mixed = load_catalog(combined_path)
        combined = group_by_discipline(mixed)
        dropped = len(mixed) - sum(len(c) for c in combined.values())
        if dropped:
            logger.warning(
                "Skipped %d recipes without a known discipline in %s", dropped, combined_path
            )

    catalogs: dict[Discipline, list[Recipe]] = {}
    for discipline in Discipline:
        catalog_path = find_data_file(data_dir, catalog_stem(discipline))
        if catalog_path is None:
            if combined_path is None:
                logger.info("No %s catalog in %s", discipline.value, data_dir)
            catalogs[discipline] = combined[discipline]
            continue
        catalogs[discipline] = sort_catalog(
            combined[discipline] + load_catalog(catalog_path, discipline)
        )

    logger.info(
        "Loaded %d ingredients and %d recipes from %s",
        len(ingredients),
        sum(len(c) for c in catalogs.values()),
        data_dir,
    )
    return CraftingData(ingredients=ingredients, catalogs=catalogs)
