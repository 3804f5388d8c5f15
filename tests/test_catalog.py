"""Tests for catalog ordering, grouping and the almanac index."""

from apothecary.core.models import Discipline, QualityCategory, Recipe
from apothecary.crafting import build_almanac, group_by_discipline, sort_catalog


def _recipe(no, quality, discipline="Alchemy", name=None):
    return Recipe(
        recipe_no=no,
        name=name or f"{quality} {no}",
        quality_category=quality,
        discipline=discipline,
    )


class TestSortCatalog:
    def test_quality_order_then_recipe_number(self):
        catalog = [
            _recipe(2, "Entropy"),
            _recipe(1, None),
            _recipe(3, "Potency"),
            _recipe(1, "Resonance"),
            _recipe(1, "Potency"),
        ]
        ordered = [(r.quality_category, r.recipe_no) for r in sort_catalog(catalog)]
        assert ordered == [
            (QualityCategory.POTENCY, 1),
            (QualityCategory.POTENCY, 3),
            (QualityCategory.RESONANCE, 1),
            (QualityCategory.ENTROPY, 2),
            (None, 1),
        ]

    def test_returns_new_list(self):
        catalog = [_recipe(2, "Potency"), _recipe(1, "Potency")]
        sort_catalog(catalog)
        assert [r.recipe_no for r in catalog] == [2, 1]


class TestGroupByDiscipline:
    def test_every_discipline_present(self):
        grouped = group_by_discipline([])
        assert set(grouped) == set(Discipline)
        assert all(items == [] for items in grouped.values())

    def test_groups_and_sorts(self):
        recipes = [
            _recipe(2, "Potency", "Poison"),
            _recipe(1, "Potency", "Poison"),
            _recipe(1, "Resonance", "Herbalism"),
            _recipe(1, "Potency", "Cooking"),
        ]
        grouped = group_by_discipline(recipes)
        assert [r.recipe_no for r in grouped[Discipline.POISON]] == [1, 2]
        assert len(grouped[Discipline.HERBALISM]) == 1
        assert grouped[Discipline.ALCHEMY] == []

    def test_discipline_from_category(self):
        recipe = Recipe(recipe_no=1, name="Drops", category="Poison", quality_category="Chaos")
        assert group_by_discipline([recipe])[Discipline.POISON] == [recipe]


class TestBuildAlmanac:
    def test_indexes_by_quality_and_slot(self):
        elixir = _recipe(4, "Potency", name="Iron Elixir")
        tea = _recipe(1, "Clarity", name="Calming Tea")
        almanac = build_almanac([elixir, tea])

        assert almanac[QualityCategory.POTENCY] == {4: elixir}
        assert almanac[QualityCategory.RESONANCE] == {1: tea}
        assert almanac[QualityCategory.ENTROPY] == {}

    def test_skips_ungrouped_and_slotless(self):
        almanac = build_almanac([_recipe(3, None), _recipe(0, "Potency")])
        assert all(entries == {} for entries in almanac.values())

    def test_later_recipe_wins_slot(self):
        first = _recipe(2, "Entropy", name="First")
        second = _recipe(2, "Entropy", name="Second")
        assert build_almanac([first, second])[QualityCategory.ENTROPY][2] is second
