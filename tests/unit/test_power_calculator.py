"""
Unit Tests for the Power Cost Calculator
========================================

Test Coverage
-------------
- Energy buckets (flat, percentage, duration)
- Duration scaling with and without duration parts
- TP flooring and TP source strings
- Action type from parts and from the selector value
- Repeated calculation over the same payloads, inputs left unmodified

Testing Strategy
----------------
- AAA pattern (Arrange, Act, Assert)
- Expected energies are worked by hand from the power_parts fixture
"""

import copy

import pytest

from realms_mechanics.modules.item import calculate_item_costs
from realms_mechanics.modules.power import (
    calculate_power_costs,
    compute_action_type_from_selection,
    compute_power_action_type,
)
from realms_mechanics.modules.technique import calculate_technique_costs


@pytest.mark.unit
class TestCalculatePowerCosts:
    """Test calculate_power_costs()."""

    def test_single_flat_part(self, power_parts):
        # Act
        result = calculate_power_costs([{"id": 500, "op_1_lvl": 1}], power_parts)

        # Assert
        assert result.total_energy == 4
        assert result.total_tp == 2
        assert result.tp_sources == ("2 TP: Flight (Opt1 1)",)

    def test_percentage_part_scales_flat_energy(self, power_parts):
        """Flight 3 * Empower 1.5 = 4.5, rounded up."""
        result = calculate_power_costs([{"id": 500}, {"id": 501}], power_parts)

        assert result.energy_raw == pytest.approx(4.5)
        assert result.total_energy == 5

    def test_duration_scales_flagged_parts(self, power_parts):
        """3 + (3 + 1) * 3 - 3 with the Minute part at level 1 (energy 3)."""
        # Arrange
        refs = [
            {"id": 500, "applyDuration": True},
            {"id": 378, "op_1_lvl": 1},
        ]

        # Act
        result = calculate_power_costs(refs, power_parts)

        # Assert
        assert result.total_energy == 12

    def test_unflagged_parts_ignore_duration(self, power_parts):
        refs = [{"id": 500}, {"id": 378, "op_1_lvl": 1}]

        assert calculate_power_costs(refs, power_parts).total_energy == 3

    def test_apply_duration_without_duration_parts_counts_once(self, power_parts):
        result = calculate_power_costs([{"id": 500, "apply_duration": True}], power_parts)

        assert result.total_energy == 3

    def test_percentage_applied_to_duration(self, power_parts):
        """perc_dur only collects percentage parts flagged for duration."""
        # Arrange
        refs = [
            {"id": 500, "applyDuration": True},
            {"id": 501, "applyDuration": True},
            {"id": 378, "op_1_lvl": 1},
        ]

        # Act
        result = calculate_power_costs(refs, power_parts)

        # Assert
        # 3*1.5 + 4*3*1.5 - 3*1.5
        assert result.energy_raw == pytest.approx(18)
        assert result.total_energy == 18

    def test_unknown_reference_contributes_nothing(self, power_parts):
        result = calculate_power_costs([{"id": 9999, "op_1_lvl": 3}], power_parts)

        assert result.total_energy == 0
        assert result.total_tp == 0
        assert result.tp_sources == ()

    def test_empty_and_none(self, power_parts):
        assert calculate_power_costs(None, power_parts).total_energy == 0
        assert calculate_power_costs([], None).total_energy == 0

    def test_inline_definition_needs_no_catalog(self):
        refs = [{"part": {"id": 500, "name": "Flight", "base_en": 3, "op_1_en": 1}, "op_1_lvl": 2}]

        assert calculate_power_costs(refs).total_energy == 5

    def test_legacy_name_reference(self, power_parts):
        result = calculate_power_costs([{"name": "Power Range", "opt1Level": 3}], power_parts)

        assert result.total_energy == 2

    def test_to_dict(self, power_parts):
        data = calculate_power_costs([{"id": 500, "op_1_lvl": 1}], power_parts).to_dict()

        assert data["totalEnergy"] == 4
        assert data["totalTP"] == 2
        assert data["tpSources"] == ["2 TP: Flight (Opt1 1)"]

    def test_non_finite_level_counts_as_zero(self, power_parts):
        result = calculate_power_costs([{"id": 500, "op_1_lvl": float("nan")}], power_parts)

        assert result.total_energy == 3
        assert result.tp_sources == ("1 TP: Flight",)


@pytest.mark.unit
class TestCalculatorsArePure:
    """Recomputing over the same payloads is stable and leaves inputs untouched."""

    def test_repeated_calls_match_and_inputs_unchanged(
        self, power_parts, technique_parts, item_properties
    ):
        # Arrange
        cases = [
            (
                calculate_power_costs,
                [
                    {"id": 500, "op_1_lvl": 1, "applyDuration": True},
                    {"name": "Duration (Minute)", "opt1Level": 1},
                    {"id": 501},
                ],
                power_parts,
            ),
            (
                calculate_technique_costs,
                [{"id": 6, "op_1_lvl": 2}, {"id": 601, "op_2_lvl": 1}],
                technique_parts,
            ),
            (
                calculate_item_costs,
                [{"id": 26}, {"name": "Range", "op_1_lvl": 2}],
                item_properties,
            ),
        ]

        for calculate, refs, catalog in cases:
            refs_snapshot = copy.deepcopy(refs)
            catalog_snapshot = copy.deepcopy(catalog)

            # Act
            first = calculate(refs, catalog)
            second = calculate(refs, catalog)

            # Assert
            assert first == second
            assert first.to_dict() == second.to_dict()
            assert refs == refs_snapshot
            assert catalog == catalog_snapshot


@pytest.mark.unit
class TestPowerActionType:
    """Test compute_power_action_type() / compute_action_type_from_selection()."""

    def test_free_reaction(self, power_parts):
        refs = [{"id": 82}, {"id": 83, "op_1_lvl": 1}]

        assert compute_power_action_type(refs, power_parts) == "Free Reaction"

    def test_name_only_reference_resolved_through_catalog(self, power_parts):
        assert compute_power_action_type([{"name": "Power Long Action"}], power_parts) == "Long (3) Action"

    def test_inline_definition_id(self):
        refs = [{"part": {"id": 83, "name": "Power Quick or Free Action"}, "op_1_lvl": 0}]

        assert compute_power_action_type(refs) == "Quick Action"

    def test_no_action_parts(self, power_parts):
        assert compute_power_action_type([], power_parts) == "Basic Action"
        assert compute_power_action_type([{"id": 500}], power_parts) == "Basic Action"

    def test_selection(self):
        assert compute_action_type_from_selection("long4", True) == "Long (4) Reaction"
        assert compute_action_type_from_selection("quick") == "Quick Action"

    def test_unknown_selection_is_basic(self):
        assert compute_action_type_from_selection("sprint") == "Basic Action"
        assert compute_action_type_from_selection(None, True) == "Basic Reaction"
