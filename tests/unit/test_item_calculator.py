"""
Unit Tests for Item Costs and Display
=====================================

Test Coverage
-------------
- IP / TP / currency sums
- Range, damage and damage-reduction strings
- Proficiency extraction and chips
- General property detection
- Display payload

Testing Strategy
----------------
- AAA pattern (Arrange, Act, Assert)
- Catalog rows come from the item_properties fixture
"""

import pytest

from realms_mechanics.domain.models import PartReference, Proficiency
from realms_mechanics.modules.item import (
    calculate_item_costs,
    derive_damage_reduction,
    derive_item_display,
    extract_proficiencies,
    format_item_damage,
    format_item_range,
    format_proficiency_chip,
    is_general_property,
)


@pytest.mark.unit
class TestCalculateItemCosts:
    """Test calculate_item_costs()."""

    def test_sums_base_and_option_one(self, item_properties):
        # Arrange
        refs = [{"id": 26}, {"id": 13, "op_1_lvl": 2}]

        # Act
        result = calculate_item_costs(refs, item_properties)

        # Assert
        assert result.total_ip == pytest.approx(3.5)
        assert result.total_tp == 4
        assert result.total_currency == pytest.approx(4.5)

    def test_order_independent(self, item_properties):
        forward = calculate_item_costs([{"id": 26}, {"id": 13, "op_1_lvl": 2}], item_properties)
        backward = calculate_item_costs([{"id": 13, "op_1_lvl": 2}, {"id": 26}], item_properties)

        assert forward == backward

    def test_negative_properties_reduce_totals(self, item_properties):
        result = calculate_item_costs([{"id": 26}, {"name": "Two-Handed"}], item_properties)

        assert result.total_ip == pytest.approx(0.5)
        assert result.total_currency == pytest.approx(-0.5)

    def test_unknown_property_skipped(self, item_properties):
        result = calculate_item_costs([{"id": 999, "op_1_lvl": 4}], item_properties)

        assert result.to_dict() == {"totalIP": 0, "totalTP": 0, "totalCurrency": 0}


@pytest.mark.unit
class TestItemDisplayHelpers:
    """Test range, damage and damage-reduction strings."""

    def test_range(self):
        assert format_item_range([{"id": 13, "op_1_lvl": 1}]) == "16 Spaces"
        assert format_item_range([{"name": "Range"}]) == "8 Spaces"
        assert format_item_range([{"id": 26}]) == "Melee"

    def test_damage_reduction(self):
        assert derive_damage_reduction([{"id": 1, "op_1_lvl": 2}]) == 3
        assert derive_damage_reduction([]) == 0

    def test_damage_joined(self):
        damage = [
            {"amount": 1, "size": 8, "type": "slashing"},
            {"amount": 0, "size": 4, "type": "cold"},
            {"amount": 2, "size": 6, "type": "fire"},
        ]

        assert format_item_damage(damage) == "1d8 slashing, 2d6 fire"

    def test_damage_malformed(self):
        assert format_item_damage(None) == ""
        assert format_item_damage("1d8 slashing") == ""
        assert format_item_damage({"amount": 1, "size": 8, "type": "slashing"}) == ""


@pytest.mark.unit
class TestProficiencies:
    """Test extract_proficiencies() / format_proficiency_chip()."""

    def test_extract(self, item_properties):
        # Arrange
        refs = [{"id": 13, "op_1_lvl": 2}, {"id": 14}, {"id": 26}]

        # Act
        proficiencies = extract_proficiencies(refs, item_properties)

        # Assert
        assert [p.name for p in proficiencies] == ["Range", "Finesse"]
        range_prof = proficiencies[0]
        assert (range_prof.base_tp, range_prof.option_tp, range_prof.total_tp) == (1, 2, 3)
        assert range_prof.description == "Attack from afar."

    def test_chip(self):
        assert format_proficiency_chip(Proficiency(13, "Range", 2, 1, 2, 3)) == "Range (Level 2) | TP: 1 + 2"
        assert format_proficiency_chip(Proficiency(26, "Finesse", 0, 1, 0, 1)) == "Finesse | TP: 1"


@pytest.mark.unit
class TestIsGeneralProperty:
    """Test is_general_property()."""

    @pytest.mark.parametrize(
        "ref, expected",
        [
            (None, False),
            ({"id": 13}, True),
            ({"name": "Two-Handed"}, True),
            ({"id": 26, "name": "Finesse"}, False),
            (PartReference(name="Armor Base"), True),
            ({"property": {"id": 16, "name": "Armor Base"}}, True),
        ],
    )
    def test_general_property(self, ref, expected):
        assert is_general_property(ref) is expected


@pytest.mark.unit
class TestDeriveItemDisplay:
    """Test derive_item_display()."""

    def test_display_payload(self, item_properties):
        # Arrange
        doc = {
            "name": "Elven Longbow",
            "properties": [{"id": 26}, {"id": 13, "op_1_lvl": 2}],
            "damage": [{"amount": 1, "size": 8, "type": "piercing"}],
        }

        # Act
        display = derive_item_display(doc, item_properties)

        # Assert
        assert display.armament_type == "Weapon"
        assert display.rarity == "Common"
        assert display.currency_cost == 39
        assert display.range == "24 Spaces"
        assert display.damage == "1d8 piercing"
        assert display.damage_reduction == 0
        assert len(display.proficiencies) == 2

    def test_to_dict_keeps_legacy_gold_key(self, item_properties):
        data = derive_item_display({"armamentType": "Armor"}, item_properties).to_dict()

        assert data["armamentType"] == "Armor"
        assert data["currencyCost"] == data["goldCost"] == 25
        assert data["range"] == "Melee"
        assert data["proficiencies"] == []
