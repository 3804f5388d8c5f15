"""Tests for crafting models: vocabulary enums, inputs and totals."""

import pytest
from pydantic import ValidationError

from apothecary.core.models import (
    Attribute,
    AttributeTotals,
    CraftingResult,
    CraftMode,
    Discipline,
    Ingredient,
    QualityCategory,
    Recipe,
)


class TestQualityCategoryNormalize:
    """Catalog tag normalization, including the Clarity/Chaos synonyms."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Potency", QualityCategory.POTENCY),
            ("potency", QualityCategory.POTENCY),
            ("RESONANCE", QualityCategory.RESONANCE),
            (" Entropy ", QualityCategory.ENTROPY),
            ("Clarity", QualityCategory.RESONANCE),
            ("clarity", QualityCategory.RESONANCE),
            ("CHAOS", QualityCategory.ENTROPY),
        ],
    )
    def test_known_tags(self, raw, expected):
        assert QualityCategory.normalize(raw) is expected

    @pytest.mark.parametrize("raw", ["", "   ", "Sweetness", None, 3])
    def test_unknown_or_blank_is_ungrouped(self, raw):
        assert QualityCategory.normalize(raw) is None

    def test_enum_passes_through(self):
        assert QualityCategory.normalize(QualityCategory.ENTROPY) is QualityCategory.ENTROPY

    def test_attribute_pairing(self):
        assert QualityCategory.RESONANCE.attribute is Attribute.RESONANCE


class TestVocabulary:
    def test_attribute_display_name(self):
        assert Attribute.POTENCY.display_name == "Potency"
        assert Attribute.ENTROPY.display_name == "Entropy"

    def test_attribute_parse(self):
        assert Attribute.parse("resonance") is Attribute.RESONANCE
        assert Attribute.parse("Resonance") is None
        assert Attribute.parse(None) is None

    def test_discipline_parse(self):
        assert Discipline.parse("Poison") is Discipline.POISON
        assert Discipline.parse("poison") is None
        assert Discipline.parse(["Poison"]) is None

    def test_craft_mode_parse(self):
        assert CraftMode.parse("random") is CraftMode.RANDOM
        assert CraftMode.parse(CraftMode.RANDOM) is CraftMode.RANDOM
        assert CraftMode.parse(None) is CraftMode.DETERMINISTIC
        assert CraftMode.parse("bogus") is CraftMode.DETERMINISTIC


class TestIngredient:
    def test_missing_attributes_default_to_zero(self):
        ingredient = Ingredient(name="Ditchweed")
        assert (ingredient.potency, ingredient.resonance, ingredient.entropy) == (0, 0, 0)

    def test_null_attributes_default_to_zero(self):
        ingredient = Ingredient.model_validate(
            {"name": "Ditchweed", "potency": None, "entropy": None, "rarity": None}
        )
        assert ingredient.potency == 0
        assert ingredient.entropy == 0
        assert ingredient.rarity == ""

    def test_numeric_strings_are_accepted(self):
        assert Ingredient.model_validate({"name": "X", "potency": "3"}).potency == 3

    def test_name_is_stripped(self):
        assert Ingredient(name="  Moonpetal ").name == "Moonpetal"


class TestRecipe:
    def test_camel_case_keys(self):
        recipe = Recipe.model_validate(
            {"recipeNo": 3, "name": "Calming Tea", "qualityCategory": "clarity"}
        )
        assert recipe.recipe_no == 3
        assert recipe.quality_category is QualityCategory.RESONANCE

    def test_snake_case_keys(self):
        recipe = Recipe.model_validate(
            {"recipe_no": 7, "name": "Rot Tonic", "quality_category": "chaos"}
        )
        assert recipe.recipe_no == 7
        assert recipe.quality_category is QualityCategory.ENTROPY

    def test_unknown_quality_is_ungrouped(self):
        assert Recipe(name="Odd", quality_category="Sweetness").quality_category is None

    def test_discipline_falls_back_to_category(self):
        recipe = Recipe(name="Nightshade Drops", category="Poison")
        assert recipe.discipline == "Poison"

    def test_category_falls_back_to_discipline(self):
        recipe = Recipe(name="Iron Elixir", discipline="Alchemy")
        assert recipe.category == "Alchemy"

    def test_null_fields(self):
        recipe = Recipe.model_validate(
            {"name": "X", "recipe_no": None, "effect": None, "discovered": None}
        )
        assert recipe.recipe_no == 0
        assert recipe.effect == ""
        assert recipe.discovered is False


class TestAttributeTotals:
    def test_addition_is_element_wise(self):
        total = AttributeTotals(potency=1, resonance=2, entropy=3) + AttributeTotals(
            potency=4, resonance=0, entropy=1
        )
        assert total == AttributeTotals(potency=5, resonance=2, entropy=4)

    def test_get(self):
        totals = AttributeTotals(potency=5, resonance=1, entropy=0)
        assert totals.get(Attribute.POTENCY) == 5
        assert totals.get("resonance") == 1
        assert totals.get("charisma") == 0

    def test_as_dict_has_exactly_three_keys_in_order(self):
        assert list(AttributeTotals().as_dict()) == ["potency", "resonance", "entropy"]

    def test_max_value(self):
        assert AttributeTotals(potency=2, resonance=7, entropy=7).max_value() == 7

    def test_is_immutable(self):
        totals = AttributeTotals()
        with pytest.raises(ValidationError):
            totals.potency = 3


class TestCraftingResult:
    def test_roll_is_bounded(self):
        with pytest.raises(ValidationError):
            CraftingResult(roll=15, dominant_attribute=Attribute.POTENCY)

    def test_json_dump_uses_enum_values(self):
        result = CraftingResult(
            dominant_attribute=Attribute.ENTROPY,
            mode=CraftMode.RANDOM,
            totals=AttributeTotals(entropy=4),
        )
        data = result.model_dump(mode="json")
        assert data["dominant_attribute"] == "entropy"
        assert data["mode"] == "random"
        assert data["totals"] == {"potency": 0, "resonance": 0, "entropy": 4}
