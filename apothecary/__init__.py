"""Apothecary: crafting resolution for tabletop alchemy, herbalism and poisons.

Usage:
    from apothecary import resolve, Ingredient, Recipe

    result = resolve(ingredients, "Alchemy", catalog)
    if result.recipe is None:
        ...  # nothing craftable in this catalog
"""

__version__ = "0.1.0"

from .core.models import (
    ATTRIBUTE_ORDER,
    Attribute,
    AttributeTotals,
    CraftingResult,
    CraftMode,
    Discipline,
    Ingredient,
    QualityCategory,
    Recipe,
    RecipeSelection,
)
from .crafting import aggregate, resolve, resolve_dominant, select_recipe

__all__ = [
    "__version__",
    "resolve",
    "aggregate",
    "resolve_dominant",
    "select_recipe",
    "Attribute",
    "ATTRIBUTE_ORDER",
    "AttributeTotals",
    "CraftingResult",
    "CraftMode",
    "Discipline",
    "Ingredient",
    "QualityCategory",
    "Recipe",
    "RecipeSelection",
]
