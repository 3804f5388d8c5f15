"""Attribute aggregation across selected ingredients.

Sums potency, resonance and entropy over any sequence of ingredient-like
records. Absent records and absent or null fields count as zero, so the
aggregate is defined for every input.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.models import ATTRIBUTE_ORDER, Attribute, AttributeTotals

logger = logging.getLogger(__name__)


def read_field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a model, plain object or mapping."""
    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def attribute_value(record: Any, attribute: Attribute | str) -> int:
    """Numeric value of one attribute on a record, zero when absent.

    Floats are truncated to int. Booleans, NaN, infinities and other
    non-numeric values are treated as absent.
    """
    name = attribute.value if isinstance(attribute, Attribute) else str(attribute)
    value = read_field(record, name)
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    logger.debug("Ignoring non-numeric %s=%r", name, value)
    return 0


def aggregate(ingredients: Iterable[Any] | None) -> AttributeTotals:
    """Sum the three attributes across ingredients.

    Args:
        ingredients: Ingredient models or mappings; may be empty, None, or
            contain None entries

    Returns:
        AttributeTotals with one sum per attribute
    """
    sums = {attr.value: 0 for attr in ATTRIBUTE_ORDER}
    for ingredient in ingredients or ():
        for attr in ATTRIBUTE_ORDER:
            sums[attr.value] += attribute_value(ingredient, attr)
    return AttributeTotals(**sums)
