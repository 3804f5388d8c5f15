"""Recipe slot selection.

A discipline catalog is meant to hold 15 recipes per quality category, one per
roll of a d15. Each attempt rolls a zero-indexed slot (0-14), either from the
dominant attribute's total or uniformly at random, and reads that slot from
the matching quality pool.

Hand-authored catalogs are often incomplete, so selection degrades in layers:

1. Quality pool (case-insensitive match on the attribute display name):
   ``pool[roll % len(pool)]``; flagged as fallback when the pool is short.
2. No pool: the flat catalog at ``ideal_index``.
3. Still nothing: a pool matched on the raw attribute token, else
   ``catalog[roll % len(catalog)]``; always flagged as fallback.
"""

import logging
import random
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import ValidationError

from ..core.models import (
    ATTRIBUTE_ORDER,
    Attribute,
    AttributeTotals,
    CraftMode,
    Recipe,
    RecipeSelection,
)
from .aggregator import attribute_value, read_field

logger = logging.getLogger(__name__)

SLOTS_PER_TIER = 15


def tier_index(attribute: Attribute | str | None) -> int:
    """Position of the attribute in canonical order, 0 if unrecognized."""
    attr = Attribute.parse(attribute)
    if attr is None:
        return 0
    return ATTRIBUTE_ORDER.index(attr)


def deterministic_roll(
    attribute: Attribute | str | None, totals: AttributeTotals | Any
) -> int:
    """Attribute total clamped into 1-15, minus one."""
    name = attribute.value if isinstance(attribute, Attribute) else str(attribute)
    value = attribute_value(totals, name)
    return min(SLOTS_PER_TIER, max(1, value)) - 1


def random_roll(rng: random.Random | None = None) -> int:
    """Uniform slot in 0-14."""
    if rng is None:
        rng = random.Random()
    return rng.randrange(SLOTS_PER_TIER)


def _attribute_token(attribute: Attribute | str | None) -> str:
    """Raw attribute token, lower-cased."""
    if isinstance(attribute, Attribute):
        return attribute.value
    return str(attribute or "").lower()


def _display_key(attribute: Attribute | str | None) -> str:
    attr = Attribute.parse(attribute)
    if attr is not None:
        return attr.display_name.lower()
    return _attribute_token(attribute)


def _quality_key(recipe: Any) -> str:
    quality = read_field(recipe, "quality_category")
    if quality is None:
        quality = read_field(recipe, "qualityCategory")
    if isinstance(quality, Enum):
        quality = quality.value
    if not isinstance(quality, str):
        return ""
    return quality.lower()


def _record_data(record: Any) -> dict[str, Any]:
    """Field values of a mapping or plain object, keyed by alias or name."""
    if isinstance(record, Mapping):
        return dict(record)
    data = {}
    for name, info in Recipe.model_fields.items():
        for key in (info.alias, name):
            if key and hasattr(record, key):
                data[key] = getattr(record, key)
                break
    return data


def _field_keys(loc_key: Any) -> set[Any]:
    for name, info in Recipe.model_fields.items():
        if loc_key in (name, info.alias):
            return {name, info.alias}
    return {loc_key}


def as_recipe(record: Any) -> Recipe | None:
    """Convert a picked catalog record into a Recipe.

    Fields that fail validation are dropped and fall back to their defaults,
    so any mapping or object yields a Recipe. None stays None.
    """
    if record is None or isinstance(record, Recipe):
        return record

    data = _record_data(record)
    try:
        return Recipe.model_validate(data)
    except ValidationError as e:
        bad_keys: set[Any] = set()
        for error in e.errors():
            if error["loc"]:
                bad_keys |= _field_keys(error["loc"][0])
        logger.warning(
            "Recipe %r has invalid fields %s, using defaults for them",
            data.get("name"),
            sorted(str(k) for k in bad_keys if k),
        )
    return Recipe.model_validate({k: v for k, v in data.items() if k not in bad_keys})


def select_recipe(
    catalog: Iterable[Any] | None,
    dominant_attribute: Attribute | str | None,
    totals: AttributeTotals | Any,
    mode: CraftMode | str | None = CraftMode.DETERMINISTIC,
    rng: random.Random | None = None,
) -> RecipeSelection:
    """Pick one recipe for the dominant attribute.

    Args:
        catalog: One discipline's recipes (models, mappings or plain objects)
        dominant_attribute: Attribute chosen by the dominant resolver
        totals: Aggregated attribute totals
        mode: ``deterministic`` or ``random``; anything else is deterministic
        rng: Random source for random mode (fresh unseeded source if None)

    Returns:
        RecipeSelection; ``recipe`` is None only when nothing can be picked
    """
    recipes = list(catalog or ())
    tier = tier_index(dominant_attribute)

    if not recipes:
        return RecipeSelection(
            recipe=None, tier_index=tier, roll=0, ideal_index=0, used_fallback=False
        )

    if CraftMode.parse(mode) is CraftMode.RANDOM:
        roll = random_roll(rng)
    else:
        roll = deterministic_roll(dominant_attribute, totals)
    ideal_index = tier * SLOTS_PER_TIER + roll

    recipe = None
    used_fallback = False

    display_key = _display_key(dominant_attribute)
    pool = [item for item in recipes if _quality_key(item) == display_key]
    if pool:
        recipe = pool[roll % len(pool)]
        used_fallback = len(pool) < SLOTS_PER_TIER
    elif ideal_index < len(recipes):
        recipe = recipes[ideal_index]

    if recipe is None:
        token = _attribute_token(dominant_attribute)
        matches = [item for item in recipes if _quality_key(item) == token]
        if matches:
            recipe = matches[roll % len(matches)]
        else:
            recipe = recipes[roll % len(recipes)]
        used_fallback = True
        logger.debug(
            "No %s recipe at slot %d, fell back to %r",
            display_key,
            roll,
            read_field(recipe, "name"),
        )

    return RecipeSelection(
        recipe=as_recipe(recipe),
        tier_index=tier,
        roll=roll,
        ideal_index=ideal_index,
        used_fallback=used_fallback,
    )
