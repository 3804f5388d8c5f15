"""Tests for dominant attribute resolution and discipline tie-breaking."""

import logging

import pytest

from apothecary.core.models import ATTRIBUTE_ORDER, Attribute, AttributeTotals, Discipline
from apothecary.crafting import (
    PRIORITY_MATRIX,
    is_tie,
    priority_for,
    resolve_dominant,
    tied_attributes,
)


def _totals(potency=0, resonance=0, entropy=0):
    return AttributeTotals(potency=potency, resonance=resonance, entropy=entropy)


class TestPriorityTables:
    def test_fixed_tables(self):
        assert PRIORITY_MATRIX[Discipline.HERBALISM] == (
            Attribute.RESONANCE,
            Attribute.ENTROPY,
            Attribute.POTENCY,
        )
        assert PRIORITY_MATRIX[Discipline.ALCHEMY] == (
            Attribute.POTENCY,
            Attribute.RESONANCE,
            Attribute.ENTROPY,
        )
        assert PRIORITY_MATRIX[Discipline.POISON] == (
            Attribute.ENTROPY,
            Attribute.POTENCY,
            Attribute.RESONANCE,
        )

    def test_every_table_is_a_total_order(self):
        for order in PRIORITY_MATRIX.values():
            assert sorted(order) == sorted(ATTRIBUTE_ORDER)

    def test_unknown_discipline_uses_canonical_order(self, caplog):
        with caplog.at_level(logging.WARNING, logger="apothecary"):
            assert priority_for("Brewing") == ATTRIBUTE_ORDER
        assert "Unknown discipline" in caplog.text


class TestThreeWayTie:
    @pytest.mark.parametrize(
        "discipline, expected",
        [
            ("Herbalism", Attribute.RESONANCE),
            ("Alchemy", Attribute.POTENCY),
            ("Poison", Attribute.ENTROPY),
            (Discipline.POISON, Attribute.ENTROPY),
        ],
    )
    def test_discipline_priority_breaks_tie(self, discipline, expected):
        assert resolve_dominant(_totals(3, 3, 3), discipline) is expected

    @pytest.mark.parametrize(
        "discipline, expected",
        [
            ("Herbalism", Attribute.RESONANCE),
            ("Alchemy", Attribute.POTENCY),
            ("Poison", Attribute.ENTROPY),
        ],
    )
    def test_all_zero_totals_resolve_like_any_tie(self, discipline, expected):
        assert resolve_dominant(_totals(), discipline) is expected

    @pytest.mark.parametrize("discipline", ["Brewing", None, "herbalism"])
    def test_unknown_discipline_falls_back_to_potency(self, discipline):
        assert resolve_dominant(_totals(2, 2, 2), discipline) is Attribute.POTENCY


class TestTwoWayTie:
    @pytest.mark.parametrize(
        "totals, discipline, expected",
        [
            # potency == resonance
            (_totals(4, 4, 1), "Herbalism", Attribute.RESONANCE),
            (_totals(4, 4, 1), "Alchemy", Attribute.POTENCY),
            (_totals(4, 4, 1), "Poison", Attribute.POTENCY),
            # resonance == entropy
            (_totals(0, 3, 3), "Herbalism", Attribute.RESONANCE),
            (_totals(0, 3, 3), "Alchemy", Attribute.RESONANCE),
            (_totals(0, 3, 3), "Poison", Attribute.ENTROPY),
            # potency == entropy
            (_totals(2, 1, 2), "Herbalism", Attribute.ENTROPY),
            (_totals(2, 1, 2), "Alchemy", Attribute.POTENCY),
            (_totals(2, 1, 2), "Poison", Attribute.ENTROPY),
        ],
    )
    def test_first_tied_attribute_in_priority(self, totals, discipline, expected):
        assert resolve_dominant(totals, discipline) is expected


class TestNoTie:
    @pytest.mark.parametrize("discipline", ["Herbalism", "Alchemy", "Poison", "Brewing"])
    def test_unique_maximum_wins_for_any_discipline(self, discipline):
        assert resolve_dominant(_totals(5, 1, 0), discipline) is Attribute.POTENCY

    def test_accepts_plain_mapping(self):
        totals = {"potency": 1, "resonance": 0, "entropy": 6}
        assert resolve_dominant(totals, "Herbalism") is Attribute.ENTROPY


class TestTiedAttributes:
    def test_tied_set_in_canonical_order(self):
        assert tied_attributes(_totals(1, 4, 4)) == [Attribute.RESONANCE, Attribute.ENTROPY]

    def test_single_winner(self):
        assert tied_attributes(_totals(1, 5, 4)) == [Attribute.RESONANCE]

    def test_is_tie(self):
        assert is_tie(_totals(3, 3, 0))
        assert is_tie(_totals())
        assert not is_tie(_totals(3, 2, 0))

    def test_mapping_and_model_agree(self):
        totals = _totals(2, 5, 5)
        assert tied_attributes(totals.as_dict()) == tied_attributes(totals)
        assert tied_attributes({"potency": 2.5, "entropy": None}) == [Attribute.POTENCY]
