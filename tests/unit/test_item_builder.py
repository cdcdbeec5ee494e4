"""
Unit Tests for the Item Property Builder
========================================

Test Coverage
-------------
- Weapon, Armor and Shield built-in properties
- Emission order (selected, built-in, ability requirement)
- Catalog gating
- ArmamentConfig.from_mapping()

Testing Strategy
----------------
- AAA pattern (Arrange, Act, Assert)
- Catalog rows come from the item_properties fixture
"""

import pytest

from realms_mechanics.domain.models import DamageConfig, PartReference
from realms_mechanics.modules.mechanics import (
    AbilityRequirement,
    ArmamentConfig,
    build_item_properties,
)


def _summary(props):
    return [(p.name, p.op_1_lvl) for p in props]


@pytest.mark.unit
class TestWeaponProperties:
    """Test weapon built-in properties."""

    def test_weapon_damage_and_split(self, item_properties):
        # Arrange
        config = ArmamentConfig(damage=DamageConfig(amount=2, size=6, type="slashing"))

        # Act
        props = build_item_properties(config, item_properties)

        # Assert
        assert _summary(props) == [("Weapon Damage", 4), ("Split Damage Dice", 0)]

    def test_two_handed_and_range_precede_damage(self, item_properties):
        config = ArmamentConfig(
            two_handed=True,
            range_level=2,
            damage=DamageConfig(amount=1, size=8, type="piercing"),
        )

        props = build_item_properties(config, item_properties)

        assert _summary(props) == [("Two-Handed", 0), ("Range", 1), ("Weapon Damage", 2)]

    def test_untyped_damage_emits_nothing(self, item_properties):
        config = ArmamentConfig(damage=DamageConfig(amount=2, size=6, type="none"))

        assert build_item_properties(config, item_properties) == []

    def test_invalid_die_size_emits_nothing(self, item_properties):
        config = ArmamentConfig(damage=DamageConfig(amount=2, size=7, type="fire"))

        assert build_item_properties(config, item_properties) == []

    def test_property_missing_from_catalog_is_omitted(self, item_properties):
        # Arrange
        catalog = [row for row in item_properties if row["name"] != "Two-Handed"]
        config = ArmamentConfig(two_handed=True, range_level=1)

        # Act
        props = build_item_properties(config, catalog)

        # Assert
        assert _summary(props) == [("Range", 0)]


@pytest.mark.unit
class TestArmorAndShieldProperties:
    """Test armor and shield built-in properties."""

    def test_armor(self, item_properties):
        # Arrange
        config = ArmamentConfig(
            armament_type="Armor",
            damage_reduction=2,
            agility_reduction=1,
            critical_range_increase=2,
        )

        # Act
        props = build_item_properties(config, item_properties)

        # Assert
        assert _summary(props) == [
            ("Armor Base", 0),
            ("Damage Reduction", 1),
            ("Agility Reduction", 0),
            ("Critical Range +1", 1),
        ]

    def test_armor_ignores_weapon_options(self, item_properties):
        config = ArmamentConfig(
            armament_type="Armor",
            two_handed=True,
            damage=DamageConfig(amount=2, size=6, type="slashing"),
        )

        assert _summary(build_item_properties(config, item_properties)) == [("Armor Base", 0)]

    def test_shield(self, item_properties):
        config = ArmamentConfig(
            armament_type="Shield",
            shield_amount=DamageConfig(amount=1, size=4),
            shield_damage=DamageConfig(amount=2, size=6),
        )

        props = build_item_properties(config, item_properties)

        assert _summary(props) == [
            ("Shield Base", 0),
            ("Shield Amount", 0),
            ("Shield Damage", 4),
        ]

    def test_shield_without_damage(self, item_properties):
        config = ArmamentConfig(
            armament_type="Shield", shield_amount=DamageConfig(amount=1, size=6)
        )

        assert _summary(build_item_properties(config, item_properties)) == [
            ("Shield Base", 0),
            ("Shield Amount", 1),
        ]


@pytest.mark.unit
class TestSelectedAndRequirement:
    """Test user-picked properties and the ability requirement."""

    def test_full_order(self, item_properties):
        # Arrange
        config = ArmamentConfig(
            selected_properties=(PartReference(id=26, name="Finesse"),),
            range_level=1,
            ability_requirement=AbilityRequirement(
                id=6, name="Weapon Strength Requirement", level=3
            ),
        )

        # Act
        props = build_item_properties(config, item_properties)

        # Assert
        assert _summary(props) == [
            ("Finesse", 0),
            ("Range", 0),
            ("Weapon Strength Requirement", 2),
        ]

    def test_requirement_level_zero_is_skipped(self, item_properties):
        config = ArmamentConfig(
            ability_requirement=AbilityRequirement(id=6, name="Weapon Strength Requirement", level=0)
        )

        assert build_item_properties(config, item_properties) == []

    def test_unresolved_requirement_is_kept(self, item_properties):
        """A requirement the catalog does not know is still listed as given."""
        config = ArmamentConfig(
            ability_requirement=AbilityRequirement(id=None, name="Weapon Luck Requirement", level=2)
        )

        props = build_item_properties(config, item_properties)

        assert props == [PartReference(name="Weapon Luck Requirement", op_1_lvl=1)]


@pytest.mark.unit
class TestArmamentConfigFromMapping:
    """Test ArmamentConfig.from_mapping()."""

    def test_saved_armor_document(self):
        # Arrange
        doc = {
            "type": "armor",
            "damageReduction": "2",
            "agilityReduction": 1,
            "properties": [{"id": 26, "name": "Finesse"}],
        }

        # Act
        config = ArmamentConfig.from_mapping(doc)

        # Assert
        assert config.armament_type == "Armor"
        assert config.damage_reduction == 2
        assert config.agility_reduction == 1
        assert config.selected_properties == (PartReference(id=26, name="Finesse"),)

    def test_defaults_to_weapon_and_first_damage_entry(self):
        doc = {
            "damage": [{"amount": 2, "size": 6, "type": "slashing"}, {"amount": 1, "size": 4, "type": "fire"}],
            "isTwoHanded": True,
            "rangeLevel": 3,
        }

        config = ArmamentConfig.from_mapping(doc)

        assert config.armament_type == "Weapon"
        assert config.damage == DamageConfig(amount=2, size=6, type="slashing")
        assert config.two_handed is True
        assert config.range_level == 3

    def test_shield_damage_requires_flag(self):
        doc = {
            "armamentType": "Shield",
            "shieldDR": {"diceAmount": 1, "dieSize": 4},
            "shieldDamage": {"amount": 1, "size": 6},
        }

        config = ArmamentConfig.from_mapping(doc)

        assert config.shield_amount == DamageConfig(amount=1, size=4)
        assert config.shield_damage is None
        assert ArmamentConfig.from_mapping({**doc, "hasShieldDamage": True}).shield_damage == (
            DamageConfig(amount=1, size=6)
        )

    def test_ability_requirement(self):
        config = ArmamentConfig.from_mapping(
            {"abilityRequirement": {"id": "6", "name": "Weapon Strength Requirement", "level": 2}}
        )

        assert config.ability_requirement == AbilityRequirement(
            id=6, name="Weapon Strength Requirement", level=2
        )

    def test_round_trip_through_builder(self, item_properties):
        doc = {"type": "weapon", "damage": {"amount": 2, "size": 6, "type": "slashing"}}

        props = build_item_properties(ArmamentConfig.from_mapping(doc), item_properties)

        assert _summary(props) == [("Weapon Damage", 4), ("Split Damage Dice", 0)]
