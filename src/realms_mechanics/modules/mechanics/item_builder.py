"""
Item property builder.

Assembles the full property reference list of an armament: the properties
the user picked, plus the built-in properties implied by the armament
configuration (two-handed, range, weapon dice, armor base and reductions,
shield dice, ability requirement).

Built-in properties are emitted only when they resolve in the catalog. Item
properties carry no ``mechanic`` gate; every one of them is cost-bearing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from realms_mechanics.core.logging.logger import get_logger
from realms_mechanics.domain.models.damage import DamageConfig
from realms_mechanics.domain.models.part import coerce_id, coerce_level
from realms_mechanics.domain.models.reference import PartReference
from realms_mechanics.modules.catalog.lookup import (
    Catalog,
    CatalogSource,
    ReferenceLike,
    as_catalog,
    as_references,
    normalize_ref,
    resolve_part_key,
)
from realms_mechanics.modules.shared.balance import get_valid_die_sizes
from realms_mechanics.modules.shared.constants import (
    DEFAULT_ARMAMENT_TYPE,
    PROP_AGILITY_REDUCTION,
    PROP_ARMOR_BASE,
    PROP_CRITICAL_RANGE_PLUS_1,
    PROP_DAMAGE_REDUCTION,
    PROP_RANGE,
    PROP_SHIELD_AMOUNT,
    PROP_SHIELD_BASE,
    PROP_SHIELD_DAMAGE,
    PROP_SPLIT_DAMAGE_DICE,
    PROP_TWO_HANDED,
    PROP_WEAPON_DAMAGE,
    PartKey,
)
from realms_mechanics.modules.shared.formulas import compute_splits, item_damage_level

logger = get_logger(__name__)

WEAPON = "Weapon"
ARMOR = "Armor"
SHIELD = "Shield"


@dataclass(frozen=True)
class AbilityRequirement:
    """Minimum ability score to wield or wear the armament."""

    id: Optional[int]
    name: str
    level: int = 0

    @classmethod
    def from_mapping(cls, data: Any) -> Optional["AbilityRequirement"]:
        if not isinstance(data, Mapping):
            return None
        return cls(
            id=coerce_id(data.get("id")),
            name=str(data.get("name") or ""),
            level=coerce_level(data.get("level")),
        )


@dataclass(frozen=True)
class ArmamentConfig:
    """
    Item creator configuration.

    Attributes
    ----------
    armament_type : str
        ``Weapon``, ``Armor`` or ``Shield``
    selected_properties : Sequence[PartReference]
        Properties the user picked, kept first and in order
    damage : Optional[DamageConfig]
        Weapon dice and damage type
    two_handed, range_level : weapon options
    damage_reduction, agility_reduction, critical_range_increase : armor options
    shield_amount, shield_damage : shield dice; ``shield_damage`` of ``None``
        means the shield deals no damage
    ability_requirement : Optional[AbilityRequirement]
    """

    armament_type: str = DEFAULT_ARMAMENT_TYPE
    selected_properties: Sequence[PartReference] = field(default_factory=tuple)
    damage: Optional[DamageConfig] = None
    two_handed: bool = False
    range_level: int = 0
    damage_reduction: int = 0
    agility_reduction: int = 0
    critical_range_increase: int = 0
    shield_amount: Optional[DamageConfig] = None
    shield_damage: Optional[DamageConfig] = None
    ability_requirement: Optional[AbilityRequirement] = None

    @classmethod
    def from_mapping(cls, doc: Mapping[str, Any]) -> "ArmamentConfig":
        """
        Build from a saved item document.

        The saved ``type`` is lower-case (``"weapon"``); an absent type is a
        Weapon. A single ``damage`` mapping or the first entry of a damage
        list is the weapon dice.
        """
        armament_type = str(doc.get("armamentType") or doc.get("type") or DEFAULT_ARMAMENT_TYPE)
        damage = doc.get("damage")
        if isinstance(damage, (list, tuple)):
            damage = damage[0] if damage else None
        shield_damage = doc.get("shieldDamage") if doc.get("hasShieldDamage") else None
        return cls(
            armament_type=armament_type.capitalize(),
            selected_properties=as_references(doc.get("properties")),
            damage=DamageConfig.from_mapping(damage),
            two_handed=bool(doc.get("isTwoHanded")),
            range_level=coerce_level(doc.get("rangeLevel")),
            damage_reduction=coerce_level(doc.get("damageReduction")),
            agility_reduction=coerce_level(doc.get("agilityReduction")),
            critical_range_increase=coerce_level(doc.get("criticalRangeIncrease")),
            shield_amount=DamageConfig.from_mapping(doc.get("shieldDR")),
            shield_damage=DamageConfig.from_mapping(shield_damage),
            ability_requirement=AbilityRequirement.from_mapping(doc.get("abilityRequirement")),
        )


class _PropertyCollector:
    def __init__(self, catalog: Catalog, selected: Iterable[ReferenceLike]) -> None:
        self.catalog = catalog
        self.properties: List[PartReference] = list(as_references(selected))

    def add(self, prop: PartKey, op_1_lvl: int = 0) -> None:
        definition = resolve_part_key(self.catalog, prop)
        if definition is None:
            logger.debug(
                "Item property not in catalog",
                extra={"property_id": prop.id, "property_name": prop.name},
            )
            return
        self.properties.append(
            PartReference(id=definition.id, name=definition.name or prop.name, op_1_lvl=op_1_lvl)
        )


def _dice_level(dice: Optional[DamageConfig]) -> Optional[int]:
    """Option level for a dice-based property, or ``None`` when the dice are invalid."""
    if dice is None or dice.size not in get_valid_die_sizes() or dice.amount < 1:
        return None
    return item_damage_level(dice.amount, dice.size)


def _add_weapon(collector: _PropertyCollector, config: ArmamentConfig) -> None:
    if config.two_handed:
        collector.add(PROP_TWO_HANDED)
    if config.range_level > 0:
        collector.add(PROP_RANGE, config.range_level - 1)

    damage = config.damage
    if damage is None or not damage.has_type:
        return
    level = _dice_level(damage)
    if level is None:
        return
    collector.add(PROP_WEAPON_DAMAGE, level)
    if damage.amount > 1:
        splits = compute_splits(damage.amount, damage.size, get_valid_die_sizes())
        if splits > 0:
            collector.add(PROP_SPLIT_DAMAGE_DICE, splits - 1)


def _add_armor(collector: _PropertyCollector, config: ArmamentConfig) -> None:
    collector.add(PROP_ARMOR_BASE)
    if config.damage_reduction > 0:
        collector.add(PROP_DAMAGE_REDUCTION, config.damage_reduction - 1)
    if config.agility_reduction > 0:
        collector.add(PROP_AGILITY_REDUCTION, config.agility_reduction - 1)
    if config.critical_range_increase > 0:
        collector.add(PROP_CRITICAL_RANGE_PLUS_1, config.critical_range_increase - 1)


def _add_shield(collector: _PropertyCollector, config: ArmamentConfig) -> None:
    collector.add(PROP_SHIELD_BASE)
    amount_level = _dice_level(config.shield_amount)
    if amount_level is not None:
        collector.add(PROP_SHIELD_AMOUNT, amount_level)
    damage_level = _dice_level(config.shield_damage)
    if damage_level is not None:
        collector.add(PROP_SHIELD_DAMAGE, damage_level)


def build_item_properties(config: ArmamentConfig, catalog: CatalogSource) -> List[PartReference]:
    """
    Build the property reference list for an armament.

    Returns:
        Selected properties first, then the built-in properties for the
        armament type, then the ability requirement.

    Example:
        >>> config = ArmamentConfig(damage=DamageConfig(amount=2, size=6, type="slashing"))
        >>> [(p.name, p.op_1_lvl) for p in build_item_properties(config, properties)]
        [('Weapon Damage', 4), ('Split Damage Dice', 0)]
    """
    parts = as_catalog(catalog)
    collector = _PropertyCollector(parts, config.selected_properties)

    if config.armament_type == WEAPON:
        _add_weapon(collector, config)
    elif config.armament_type == ARMOR:
        _add_armor(collector, config)
    elif config.armament_type == SHIELD:
        _add_shield(collector, config)

    requirement = config.ability_requirement
    if requirement is not None and requirement.level > 0:
        collector.properties.append(
            normalize_ref(
                parts,
                PartReference(
                    id=requirement.id,
                    name=requirement.name or None,
                    op_1_lvl=requirement.level - 1,
                ),
            )
        )

    return collector.properties
