"""Checks a caller runs on an ingredient selection before crafting.

The resolver accepts anything; these checks produce the user-facing messages
for selections that should not be crafted at all.
"""

from collections.abc import Mapping, Sequence

from ..core.models import Ingredient

REQUIRED_INGREDIENTS = 3


class SelectionError(ValueError):
    """Raised when an ingredient selection cannot be crafted."""

    pass


def validate_selection(
    names: Sequence[str | None],
    ingredients_by_name: Mapping[str, Ingredient],
) -> list[Ingredient]:
    """Check a selection and return the chosen ingredients in order.

    Raises:
        SelectionError: If fewer or more than three names are given, a name is
            blank, names repeat, or a name is not a known ingredient
    """
    cleaned = [(name or "").strip() for name in names]
    if len(cleaned) != REQUIRED_INGREDIENTS or not all(cleaned):
        raise SelectionError("Select three ingredients to craft.")

    if len(set(cleaned)) < REQUIRED_INGREDIENTS:
        raise SelectionError("Choose three unique ingredients.")

    selected: list[Ingredient] = []
    for name in cleaned:
        ingredient = ingredients_by_name.get(name)
        if ingredient is None:
            raise SelectionError(f"Unknown ingredient: {name}.")
        selected.append(ingredient)
    return selected
