"""CLI commands for Apothecary."""

from . import (
    craft,
    almanac,
    config_cmd,
)

__all__ = [
    "craft",
    "almanac",
    "config_cmd",
]
