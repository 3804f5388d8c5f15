"""All Pydantic models for Apothecary, organized by domain.

This package centralizes model definitions:
- crafting.py: Ingredients, recipes, attribute totals and crafting results
"""

from .crafting import (
    # Vocabulary
    Attribute,
    ATTRIBUTE_ORDER,
    Discipline,
    QualityCategory,
    CraftMode,
    # Inputs
    Ingredient,
    Recipe,
    # Outputs
    AttributeTotals,
    RecipeSelection,
    CraftingResult,
)

__all__ = [
    "Attribute",
    "ATTRIBUTE_ORDER",
    "Discipline",
    "QualityCategory",
    "CraftMode",
    "Ingredient",
    "Recipe",
    "AttributeTotals",
    "RecipeSelection",
    "CraftingResult",
]
