"""Crafting resolution: totals, dominant attribute, recipe slot.

Usage:
    from apothecary.crafting import resolve

    result = resolve(ingredients, "Alchemy", catalog)
    result = resolve(ingredients, "Poison", catalog, mode="random", rng=random.Random(7))
"""

import random
from collections.abc import Iterable
from typing import Any

from ..core.models import (
    ATTRIBUTE_ORDER,
    Attribute,
    CraftingResult,
    CraftMode,
    Discipline,
    Recipe,
)
from .aggregator import aggregate
from .dominant import resolve_dominant
from .selector import SLOTS_PER_TIER, select_recipe


def resolve(
    ingredients: Iterable[Any] | None,
    discipline: Discipline | str | None,
    catalog: Iterable[Any] | None,
    *,
    mode: CraftMode | str | None = None,
    rng: random.Random | None = None,
) -> CraftingResult:
    """Resolve one crafting attempt.

    Stateless: identical inputs in deterministic mode always give equal
    results. Inputs are never mutated.

    Args:
        ingredients: The selected ingredients
        discipline: Discipline whose tie-break priority applies
        catalog: That discipline's recipes
        mode: ``deterministic`` (default) or ``random``
        rng: Random source used in random mode

    Returns:
        CraftingResult with the selection, totals, dominant attribute and mode
    """
    totals = aggregate(ingredients)
    dominant = resolve_dominant(totals, discipline)
    craft_mode = CraftMode.parse(mode)
    selection = select_recipe(catalog, dominant, totals, craft_mode, rng=rng)

    return CraftingResult(
        **dict(selection),
        totals=totals,
        dominant_attribute=dominant,
        mode=craft_mode,
    )


def result_for_recipe(recipe: Recipe) -> CraftingResult:
    """Rebuild a result for a recipe picked from the almanac rather than crafted.

    The slot comes from ``recipe_no`` and the tier from the quality category
    (potency when ungrouped). No ingredients were combined, so ``totals`` is None.
    """
    quality = recipe.quality_category
    attribute = quality.attribute if quality is not None else Attribute.POTENCY
    tier = ATTRIBUTE_ORDER.index(attribute)
    roll = max(0, min(SLOTS_PER_TIER - 1, (recipe.recipe_no or 1) - 1))

    return CraftingResult(
        recipe=recipe,
        tier_index=tier,
        roll=roll,
        ideal_index=tier * SLOTS_PER_TIER + roll,
        used_fallback=False,
        totals=None,
        dominant_attribute=attribute,
        mode=CraftMode.DETERMINISTIC,
    )
