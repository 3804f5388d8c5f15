"""Catalog ordering and grouping helpers."""

from collections.abc import Iterable

from ..core.models import Discipline, QualityCategory, Recipe

# Ungrouped recipes sort after every quality pool.
_QUALITY_RANK = {quality: rank for rank, quality in enumerate(QualityCategory)}
_UNGROUPED_RANK = 99


def sort_catalog(catalog: Iterable[Recipe]) -> list[Recipe]:
    """Order recipes by quality (Potency, Resonance, Entropy), then recipe number."""
    return sorted(
        catalog,
        key=lambda recipe: (
            _QUALITY_RANK.get(recipe.quality_category, _UNGROUPED_RANK),
            recipe.recipe_no or 0,
        ),
    )


def group_by_discipline(recipes: Iterable[Recipe]) -> dict[Discipline, list[Recipe]]:
    """Split a mixed recipe list into sorted per-discipline catalogs.

    Every discipline gets a key, even when it has no recipes. Recipes naming an
    unknown discipline are dropped.
    """
    grouped: dict[Discipline, list[Recipe]] = {d: [] for d in Discipline}
    for recipe in recipes:
        discipline = Discipline.parse(recipe.discipline)
        if discipline is not None:
            grouped[discipline].append(recipe)
    return {d: sort_catalog(items) for d, items in grouped.items()}


def build_almanac(catalog: Iterable[Recipe]) -> dict[QualityCategory, dict[int, Recipe]]:
    """Index a catalog by quality and slot number.

    Ungrouped recipes and recipes without a positive slot are left out. When two
    recipes claim the same slot the later one wins.
    """
    almanac: dict[QualityCategory, dict[int, Recipe]] = {q: {} for q in QualityCategory}
    for recipe in catalog:
        if recipe.quality_category is None or recipe.recipe_no <= 0:
            continue
        almanac[recipe.quality_category][recipe.recipe_no] = recipe
    return almanac
