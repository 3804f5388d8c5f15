"""Dominant attribute resolution with discipline tie-breaking."""

import logging
from typing import Any

from ..core.models import ATTRIBUTE_ORDER, Attribute, AttributeTotals, Discipline
from .aggregator import attribute_value

logger = logging.getLogger(__name__)


# Highest priority first.
PRIORITY_MATRIX: dict[Discipline, tuple[Attribute, ...]] = {
    Discipline.HERBALISM: (Attribute.RESONANCE, Attribute.ENTROPY, Attribute.POTENCY),
    Discipline.ALCHEMY: (Attribute.POTENCY, Attribute.RESONANCE, Attribute.ENTROPY),
    Discipline.POISON: (Attribute.ENTROPY, Attribute.POTENCY, Attribute.RESONANCE),
}


def priority_for(discipline: Discipline | str | None) -> tuple[Attribute, ...]:
    """Tie-break order for a discipline; canonical order if unrecognized."""
    key = Discipline.parse(discipline)
    if key is None:
        logger.warning(
            "Unknown discipline %r, breaking ties in canonical order", discipline
        )
        return ATTRIBUTE_ORDER
    return PRIORITY_MATRIX[key]


def tied_attributes(totals: AttributeTotals | Any) -> list[Attribute]:
    """Attributes sharing the maximum total, in canonical order."""
    if not isinstance(totals, AttributeTotals):
        totals = AttributeTotals(
            **{attr.value: attribute_value(totals, attr) for attr in ATTRIBUTE_ORDER}
        )
    max_value = totals.max_value()
    return [attr for attr in ATTRIBUTE_ORDER if totals.get(attr) == max_value]


def is_tie(totals: AttributeTotals | Any) -> bool:
    """True when more than one attribute shares the maximum total."""
    return len(tied_attributes(totals)) > 1


def resolve_dominant(
    totals: AttributeTotals | Any, discipline: Discipline | str | None
) -> Attribute:
    """Pick the single dominant attribute.

    A unique maximum wins outright. Otherwise the first attribute of the
    discipline's priority that is in the tied set wins. All-zero totals are a
    three-way tie like any other.
    """
    tied = tied_attributes(totals)
    if len(tied) == 1:
        return tied[0]

    winner = next(attr for attr in priority_for(discipline) if attr in tied)
    logger.debug(
        "Tie between %s resolved to %s for %s",
        ", ".join(attr.value for attr in tied),
        winner.value,
        discipline,
    )
    return winner
