"""Crafting resolution engine for Apothecary.

Turns three ingredients and a discipline into one recipe from that
discipline's catalog. Every function here is pure: no I/O, no shared state,
and inputs are never mutated.

Usage:
    from apothecary.crafting import resolve, aggregate, resolve_dominant

    totals = aggregate(ingredients)
    dominant = resolve_dominant(totals, "Herbalism")
    result = resolve(ingredients, "Herbalism", catalog, mode="deterministic")

Key Concepts:
    - Dominant attribute: highest total, ties broken by discipline priority
    - Roll: zero-indexed slot 0-14 within a quality pool
    - Fallback: any pick not drawn from a full 15-recipe pool
"""

from .aggregator import aggregate
from .catalog import build_almanac, group_by_discipline, sort_catalog
from .dominant import (
    PRIORITY_MATRIX,
    is_tie,
    priority_for,
    resolve_dominant,
    tied_attributes,
)
from .resolver import resolve, result_for_recipe
from .selection import SelectionError, validate_selection
from .selector import SLOTS_PER_TIER, select_recipe

__all__ = [
    "aggregate",
    "resolve_dominant",
    "tied_attributes",
    "is_tie",
    "priority_for",
    "PRIORITY_MATRIX",
    "select_recipe",
    "SLOTS_PER_TIER",
    "resolve",
    "result_for_recipe",
    "sort_catalog",
    "group_by_discipline",
    "build_almanac",
    "validate_selection",
    "SelectionError",
]
