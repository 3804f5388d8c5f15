"""Storage layer: loads ingredient and recipe data files into models."""

from .loader import (
    CraftingData,
    DataLoadError,
    load_catalog,
    load_data_dir,
    load_ingredients,
)

__all__ = [
    "CraftingData",
    "DataLoadError",
    "load_catalog",
    "load_data_dir",
    "load_ingredients",
]
