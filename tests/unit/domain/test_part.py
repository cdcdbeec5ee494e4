"""
Unit Tests for Part Definitions and Value Objects
=================================================

Test Coverage
-------------
- Id, number and level coercion
- PartDefinition.from_mapping() defaults and errors
- DamageConfig validity and parsing
- RarityBracket validation and immutability

Testing Strategy
----------------
- Unit tests (pure, no config)
- AAA pattern (Arrange, Act, Assert)
"""

import pytest

from realms_mechanics.domain.models import (
    DamageConfig,
    PartDefinition,
    RarityBracket,
    coerce_id,
    coerce_level,
    coerce_number,
)
from realms_mechanics.domain.models.base import DomainValidationError
from realms_mechanics.modules.shared.exceptions import CatalogEntryError, ErrorSeverity


# ============================================================================
# COERCION
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
class TestCoercion:
    """Test the coercion helpers."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (292, 292),
            ("292", 292),
            (" 7 ", 7),
            (12.0, 12),
            (12.5, None),
            ("Power Range", None),
            (True, None),
            (None, None),
        ],
    )
    def test_coerce_id(self, value, expected):
        assert coerce_id(value) == expected

    def test_coerce_number(self):
        assert coerce_number("1.5") == 1.5
        assert coerce_number("2") == 2
        assert isinstance(coerce_number("2"), int)
        assert coerce_number("") == 0
        assert coerce_number("abc") == 0
        assert coerce_number(None) == 0

    def test_coerce_level(self):
        assert coerce_level("3") == 3
        assert coerce_level(2.9) == 2
        assert coerce_level(None) == 0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "nan", "inf"])
    def test_non_finite_values_are_zero(self, value):
        assert coerce_number(value) == 0
        assert coerce_level(value) == 0


# ============================================================================
# PART DEFINITION
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
class TestPartDefinition:
    """Test PartDefinition.from_mapping()."""

    def test_loose_row(self):
        # Arrange
        row = {
            "id": "296",
            "name": "Physical Damage",
            "mechanic": 1,
            "base_en": "1",
            "op_1_en": 0.5,
            "op_2_en": None,
            "type": "Weapon",
        }

        # Act
        definition = PartDefinition.from_mapping(row)

        # Assert
        assert definition.id == 296
        assert definition.mechanic is True
        assert definition.duration is False
        assert definition.option_energy == (0.5, 0, 0)
        assert definition.base_en == 1
        assert definition.item_type == "Weapon"

    def test_name_only_row(self):
        definition = PartDefinition.from_mapping({"name": "Power Split Damage Dice"})

        assert definition.id is None
        assert definition.matches_id(401) is False

    def test_definition_passes_through(self):
        definition = PartDefinition(id=1, name="Damage Reduction")

        assert PartDefinition.from_mapping(definition) is definition

    def test_row_without_identity_rejected(self):
        with pytest.raises(CatalogEntryError) as exc_info:
            PartDefinition.from_mapping({"base_en": 1})

        assert exc_info.value.error_code == "INVALID_CATALOG_ENTRY"
        assert exc_info.value.severity is ErrorSeverity.WARNING

    def test_non_mapping_rejected(self):
        with pytest.raises(CatalogEntryError):
            PartDefinition.from_mapping(["id", 1])

    def test_immutable(self):
        definition = PartDefinition(id=1, name="Damage Reduction")

        with pytest.raises(AttributeError):
            definition.name = "Other"


# ============================================================================
# DAMAGE CONFIG
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
class TestDamageConfig:
    """Test DamageConfig."""

    def test_is_valid(self):
        assert DamageConfig(amount=2, size=6, type="fire").is_valid()
        assert not DamageConfig(amount=2, size=7, type="fire").is_valid()
        assert not DamageConfig(amount=0, size=6, type="fire").is_valid()
        assert not DamageConfig(amount=2, size=6, type="none").is_valid()
        assert not DamageConfig(amount=2, size=6).is_valid()

    def test_custom_sizes(self):
        assert DamageConfig(amount=1, size=20, type="fire").is_valid(frozenset({20}))

    def test_has_dice(self):
        assert DamageConfig(amount=2, size=6).has_dice
        assert not DamageConfig(amount=0, size=6).has_dice
        assert not DamageConfig(amount=2, size=0).has_dice

    def test_from_creator_keys(self):
        config = DamageConfig.from_mapping(
            {"diceAmount": "3", "dieSize": 8, "type": "cold", "applyDuration": True}
        )

        assert config == DamageConfig(amount=3, size=8, type="cold", apply_duration=True)
        assert config.dice_notation() == "3d8"

    def test_from_non_mapping(self):
        assert DamageConfig.from_mapping(None) is None
        assert DamageConfig.from_mapping("2d6") is None


# ============================================================================
# RARITY BRACKET
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
class TestRarityBracket:
    """Test RarityBracket value object."""

    def test_contains(self):
        bracket = RarityBracket("Uncommon", 4.01, 6, 100)

        assert bracket.contains(5)
        assert bracket.contains(6)
        assert not bracket.contains(4.005)
        assert not bracket.is_open_ended

    def test_open_ended(self):
        bracket = RarityBracket("Ascended", 16.01, None, 100000)

        assert bracket.is_open_ended
        assert bracket.contains(1000)
        assert repr(bracket) == "RarityBracket('Ascended', 16.01-inf, 100000)"

    @pytest.mark.parametrize(
        "args, field",
        [
            (("", 0, 4, 25), "name"),
            (("Common", -1, 4, 25), "ip_low"),
            (("Common", 0, 4, -25), "base_currency"),
            (("Common", 5, 4, 25), "ip_high"),
        ],
    )
    def test_validation(self, args, field):
        with pytest.raises(DomainValidationError) as exc_info:
            RarityBracket(*args)

        assert exc_info.value.field == field

    def test_immutable_and_equal_by_value(self):
        bracket = RarityBracket("Common", 0, 4, 25)

        with pytest.raises(AttributeError):
            bracket.base_currency = 50

        assert bracket == RarityBracket("Common", 0, 4, 25)
        assert hash(bracket) == hash(RarityBracket("Common", 0, 4, 25))
        assert bracket.to_dict() == {"name": "Common", "ip_low": 0, "ip_high": 4, "base_currency": 25}
