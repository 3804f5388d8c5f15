"""Crafting models for Apothecary.

A crafting attempt combines three ingredients under one discipline and picks a
recipe from that discipline's catalog. This module holds every record the
resolver reads or produces:

- Vocabulary: Attribute, Discipline, QualityCategory, CraftMode
- Inputs: Ingredient, Recipe
- Outputs: AttributeTotals, RecipeSelection, CraftingResult
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Vocabulary
# =============================================================================


class Attribute(str, Enum):
    """One of the three numeric ingredient attributes."""

    POTENCY = "potency"
    RESONANCE = "resonance"
    ENTROPY = "entropy"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "Attribute | None":
        """Return the attribute for an exact token, or None if unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


# Canonical order: slot tiers, the ideal_index layout and the unknown-discipline
# tie-break all follow it.
ATTRIBUTE_ORDER: tuple[Attribute, ...] = (
    Attribute.POTENCY,
    Attribute.RESONANCE,
    Attribute.ENTROPY,
)


class Discipline(str, Enum):
    """Crafting discipline. Selects the tie-break priority and the catalog."""

    HERBALISM = "Herbalism"
    ALCHEMY = "Alchemy"
    POISON = "Poison"

    @classmethod
    def parse(cls, value: Any) -> "Discipline | None":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


# Catalog synonyms used by hand-authored recipe files.
_QUALITY_SYNONYMS = {
    "clarity": "Resonance",
    "chaos": "Entropy",
}


class QualityCategory(str, Enum):
    """Catalog grouping key. Each value pairs with one Attribute."""

    POTENCY = "Potency"
    RESONANCE = "Resonance"
    ENTROPY = "Entropy"

    @property
    def attribute(self) -> Attribute:
        return Attribute(self.value.lower())

    @classmethod
    def normalize(cls, value: Any) -> "QualityCategory | None":
        """Normalize a raw catalog tag.

        Matching is case-insensitive and understands the domain synonyms
        ``Clarity`` (Resonance) and ``Chaos`` (Entropy). Blank or unknown tags
        return None, which marks the recipe as ungrouped.

        Examples:
            "potency" → QualityCategory.POTENCY
            " Clarity " → QualityCategory.RESONANCE
            "Sweetness" → None
        """
        if value is None or isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        if not lowered:
            return None
        lowered = _QUALITY_SYNONYMS.get(lowered, lowered).lower()
        for member in cls:
            if member.value.lower() == lowered:
                return member
        return None


class CraftMode(str, Enum):
    """How the recipe slot is rolled."""

    DETERMINISTIC = "deterministic"
    RANDOM = "random"

    @classmethod
    def parse(cls, value: Any) -> "CraftMode":
        """Anything other than ``random`` rolls deterministically."""
        if value == cls.RANDOM:
            return cls.RANDOM
        return cls.DETERMINISTIC


# =============================================================================
# Inputs
# =============================================================================


class Ingredient(BaseModel):
    """One crafting component. Attribute values are conventionally 0-5."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(default="", description="Unique ingredient name")
    potency: int = 0
    resonance: int = 0
    entropy: int = 0
    rarity: str = ""
    source: str = ""

    @field_validator("potency", "resonance", "entropy", mode="before")
    @classmethod
    def _none_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("rarity", "source", mode="before")
    @classmethod
    def _none_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value


class Recipe(BaseModel):
    """One catalog entry of a discipline.

    Accepts both camelCase (``recipeNo``, ``qualityCategory``) and snake_case
    keys so catalog files and database rows validate the same way.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    recipe_no: int = Field(
        default=0,
        alias="recipeNo",
        description="Slot number within the quality group, expected 1-15",
    )
    name: str = ""
    category: str = Field(
        default="", description="Display grouping, usually the discipline"
    )
    quality_category: QualityCategory | None = Field(
        default=None,
        alias="qualityCategory",
        description="Grouping key; None when the catalog does not group recipes",
    )
    rarity: str = ""
    effect: str = ""
    description: str = ""
    source: str = ""
    discipline: str = ""
    discovered: bool = Field(
        default=False, description="Whether players have revealed this recipe"
    )

    @field_validator("quality_category", mode="before")
    @classmethod
    def _normalize_quality(cls, value: Any) -> QualityCategory | None:
        return QualityCategory.normalize(value)

    @field_validator("recipe_no", mode="before")
    @classmethod
    def _none_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator(
        "name", "category", "rarity", "effect", "description", "source", "discipline",
        mode="before",
    )
    @classmethod
    def _none_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("discovered", mode="before")
    @classmethod
    def _none_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @model_validator(mode="after")
    def _fill_discipline_and_category(self) -> "Recipe":
        if not self.discipline and self.category:
            self.discipline = self.category
        if not self.category and self.discipline:
            self.category = self.discipline
        return self


# =============================================================================
# Outputs
# =============================================================================


class AttributeTotals(BaseModel, frozen=True):
    """Summed attributes of a set of ingredients."""

    potency: int = 0
    resonance: int = 0
    entropy: int = 0

    def get(self, attribute: Attribute | str, default: int = 0) -> int:
        attr = Attribute.parse(attribute)
        if attr is None:
            return default
        return getattr(self, attr.value)

    def as_dict(self) -> dict[str, int]:
        return {attr.value: getattr(self, attr.value) for attr in ATTRIBUTE_ORDER}

    def max_value(self) -> int:
        return max(self.as_dict().values())

    def __add__(self, other: "AttributeTotals") -> "AttributeTotals":
        if not isinstance(other, AttributeTotals):
            return NotImplemented
        return AttributeTotals(
            potency=self.potency + other.potency,
            resonance=self.resonance + other.resonance,
            entropy=self.entropy + other.entropy,
        )


class RecipeSelection(BaseModel):
    """Outcome of the slot selector."""

    recipe: Recipe | None = None
    tier_index: int = Field(default=0, ge=0, le=2)
    roll: int = Field(default=0, ge=0, le=14, description="Zero-indexed 1-of-15 slot")
    ideal_index: int = Field(
        default=0,
        ge=0,
        description="Position in a flat 45-entry catalog [potency][resonance][entropy]",
    )
    used_fallback: bool = Field(
        default=False,
        description="True when the recipe was not drawn from a full 15-entry pool",
    )


class CraftingResult(RecipeSelection):
    """Everything a caller needs to present one crafting attempt."""

    totals: AttributeTotals | None = Field(
        default=None, description="None when rebuilt from an already known recipe"
    )
    dominant_attribute: Attribute
    mode: CraftMode = CraftMode.DETERMINISTIC
