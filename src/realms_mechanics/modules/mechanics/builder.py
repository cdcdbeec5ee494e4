"""
Mechanic part builder.

Purpose
-------
Translate a creator's UI selections (action type, damage dice, range, area,
duration, weapon) into the canonical list of mechanic PartReferences that
the cost calculators consume. One builder serves the Power, Technique and
Empowered Technique creators.

Responsibilities
----------------
- Map each selection to its well-known catalog part and option level
- Emit a part only when it resolves in the catalog and is flagged ``mechanic``
- Carry ``apply_duration`` for Power and Empowered creators only

Non-Responsibilities
--------------------
- Cost arithmetic (realms_mechanics.modules.power / technique)
- Merging with user-picked parts (the creator owns the final list)

Design Notes
------------
- Emission order is fixed: action, damage, range, area, duration, weapon.
- Power split dice is computed from the total dice across every damage
  entry with the largest die size among them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union

from realms_mechanics.core.logging.logger import get_logger
from realms_mechanics.domain.models.damage import NO_DAMAGE_TYPE, DamageConfig
from realms_mechanics.domain.models.reference import PartReference
from realms_mechanics.modules.catalog.lookup import CatalogSource, as_catalog, resolve_part_key
from realms_mechanics.modules.shared.balance import get_valid_die_sizes
from realms_mechanics.modules.shared.constants import (
    ACTION_SELECTION_LEVELS,
    AREA_TYPE_PARTS,
    BUILDER_DAY_VALUES,
    BUILDER_HOUR_VALUES,
    BUILDER_MINUTE_VALUES,
    DAMAGE_TYPE_PARTS,
    DURATION_TYPE_PARTS,
    PART_ADD_WEAPON_ATTACK,
    PART_ADDITIONAL_DAMAGE,
    PART_DURATION_ENDS_ON_ACTIVATION,
    PART_DURATION_FOCUS,
    PART_DURATION_NO_HARM,
    PART_DURATION_SUSTAIN,
    PART_LONG_ACTION,
    PART_POWER_LONG_ACTION,
    PART_POWER_QUICK_OR_FREE_ACTION,
    PART_POWER_RANGE,
    PART_POWER_REACTION,
    PART_POWER_SPLIT_DAMAGE_DICE,
    PART_QUICK_OR_FREE_ACTION,
    PART_REACTION,
    PART_SPLIT_DAMAGE_DICE,
    PartKey,
)
from realms_mechanics.modules.shared.formulas import (
    compute_splits,
    power_damage_level,
    technique_damage_level,
)

logger = get_logger(__name__)

NO_AREA = "none"
INSTANT = "instant"


class CreatorType(str, Enum):
    POWER = "power"
    TECHNIQUE = "technique"
    EMPOWERED = "empowered"

    @property
    def supports_duration(self) -> bool:
        return self in (CreatorType.POWER, CreatorType.EMPOWERED)


# ============================================================================
# SELECTION CONFIGS
# ============================================================================


@dataclass(frozen=True)
class ActionConfig:
    """Action selector (``basic|quick|free|long3|long4``) plus reaction flag."""

    type: str = "basic"
    is_reaction: bool = False


@dataclass(frozen=True)
class RangeConfig:
    """Range steps; 0 is melee (1 space)."""

    steps: int = 0
    apply_duration: bool = False


@dataclass(frozen=True)
class AreaConfig:
    """Area shape and 1-based level (1 is the base shape)."""

    type: str = NO_AREA
    level: int = 1
    apply_duration: bool = False


@dataclass(frozen=True)
class DurationConfig:
    """
    Duration unit and value, plus the duration modifiers.

    ``value`` is in displayed units (1/10/30 minutes, 1/6/12 hours, ...) or a
    round count.
    """

    type: str = INSTANT
    value: int = 1
    apply_duration: bool = False
    focus: bool = False
    no_harm: bool = False
    ends_on_activation: bool = False
    sustain: int = 0


@dataclass(frozen=True)
class WeaponConfig:
    """Training points of the selected weapon."""

    tp: int = 0


@dataclass
class MechanicBuilderContext:
    """Everything one creator hands to ``build_mechanic_parts``."""

    creator_type: Union[CreatorType, str]
    catalog: CatalogSource = None
    action: Optional[ActionConfig] = None
    power_damage: Sequence[DamageConfig] = field(default_factory=tuple)
    range: Optional[RangeConfig] = None
    area: Optional[AreaConfig] = None
    duration: Optional[DurationConfig] = None
    technique_damage: Optional[DamageConfig] = None
    weapon: Optional[WeaponConfig] = None


# ============================================================================
# EMISSION
# ============================================================================


class _PartCollector:
    """Resolves well-known parts and collects the mechanic ones."""

    def __init__(self, ctx: MechanicBuilderContext) -> None:
        self.creator_type = CreatorType(ctx.creator_type)
        self.catalog = as_catalog(ctx.catalog)
        self.parts: List[PartReference] = []

    def add(self, part: PartKey, op_1_lvl: int = 0, apply_duration: bool = False) -> None:
        definition = resolve_part_key(self.catalog, part)
        if definition is None:
            logger.debug(
                "Mechanic part not in catalog",
                extra={"part_id": part.id, "part_name": part.name},
            )
            return
        if not definition.mechanic:
            logger.debug(
                "Skipping non-mechanic part",
                extra={"part_id": definition.id, "part_name": definition.name},
            )
            return
        self.parts.append(
            PartReference(
                id=definition.id,
                name=definition.name or part.name,
                op_1_lvl=op_1_lvl,
                apply_duration=bool(apply_duration) if self.creator_type.supports_duration else False,
            )
        )


def _action_parts(creator_type: CreatorType):
    if creator_type is CreatorType.POWER:
        return {
            "reaction": PART_POWER_REACTION,
            "quick_or_free": PART_POWER_QUICK_OR_FREE_ACTION,
            "long": PART_POWER_LONG_ACTION,
        }
    return {
        "reaction": PART_REACTION,
        "quick_or_free": PART_QUICK_OR_FREE_ACTION,
        "long": PART_LONG_ACTION,
    }


def _add_action(collector: _PartCollector, action: ActionConfig) -> None:
    parts = _action_parts(collector.creator_type)
    if action.is_reaction:
        collector.add(parts["reaction"])
    selection = ACTION_SELECTION_LEVELS.get(action.type)
    if selection is not None:
        kind, level = selection
        collector.add(parts[kind], level)


def _add_power_damage(collector: _PartCollector, entries: Sequence[DamageConfig]) -> None:
    total_dice = 0
    max_size = 0
    for entry in entries:
        if entry.type == NO_DAMAGE_TYPE or entry.amount <= 0 or entry.size < 4:
            continue
        part = DAMAGE_TYPE_PARTS.get(entry.type)
        if part is None:
            logger.debug("Unmapped power damage type", extra={"damage_type": entry.type})
            continue
        collector.add(part, power_damage_level(entry.amount, entry.size), entry.apply_duration)
        total_dice += entry.amount
        max_size = max(max_size, entry.size)

    if total_dice > 1 and max_size >= 4:
        splits = compute_splits(total_dice, max_size, get_valid_die_sizes())
        if splits > 0:
            apply_duration = next((e.apply_duration for e in entries if e.apply_duration), False)
            collector.add(PART_POWER_SPLIT_DAMAGE_DICE, splits - 1, apply_duration)


def _add_technique_damage(collector: _PartCollector, damage: DamageConfig) -> None:
    if damage.amount <= 0 or damage.size < 4:
        return
    collector.add(PART_ADDITIONAL_DAMAGE, technique_damage_level(damage.amount, damage.size))
    splits = compute_splits(damage.amount, damage.size, get_valid_die_sizes())
    if splits > 0:
        collector.add(PART_SPLIT_DAMAGE_DICE, splits - 1)


def _index_or_zero(values: Sequence[int], value: int) -> int:
    try:
        return list(values).index(value)
    except ValueError:
        return 0


def _add_duration(collector: _PartCollector, duration: DurationConfig) -> None:
    if duration.focus:
        collector.add(PART_DURATION_FOCUS)
    if duration.no_harm:
        collector.add(PART_DURATION_NO_HARM)
    if duration.ends_on_activation:
        collector.add(PART_DURATION_ENDS_ON_ACTIVATION)
    if duration.sustain and duration.sustain > 0:
        collector.add(PART_DURATION_SUSTAIN, max(0, duration.sustain - 1))

    part = DURATION_TYPE_PARTS.get(duration.type)
    if part is None:
        return
    apply = duration.apply_duration
    if duration.type == "rounds":
        # A single round is the base duration and needs no part.
        if duration.value > 1:
            collector.add(part, max(0, duration.value - 2), apply)
    elif duration.type == "permanent":
        collector.add(part, 0, apply)
    elif duration.type == "minutes":
        collector.add(part, _index_or_zero(BUILDER_MINUTE_VALUES, duration.value), apply)
    elif duration.type == "hours":
        collector.add(part, _index_or_zero(BUILDER_HOUR_VALUES, duration.value), apply)
    elif duration.type == "days":
        collector.add(part, _index_or_zero(BUILDER_DAY_VALUES, duration.value), apply)


def build_mechanic_parts(ctx: MechanicBuilderContext) -> List[PartReference]:
    """
    Build the mechanic part references for one creator's selections.

    Args:
        ctx: Creator type, catalog and the optional per-concern selections

    Returns:
        Fresh list of PartReferences in emission order. Parts that do not
        resolve, or resolve to a non-mechanic definition, are omitted.

    Raises:
        ValueError: If ``ctx.creator_type`` is not a known creator.

    Example:
        >>> ctx = MechanicBuilderContext(
        ...     creator_type="power",
        ...     catalog=parts,
        ...     power_damage=[DamageConfig(amount=2, size=6, type="slashing")],
        ... )
        >>> [(p.name, p.op_1_lvl) for p in build_mechanic_parts(ctx)]
        [('Physical Damage', 4), ('Power Split Damage Dice', 0)]
    """
    collector = _PartCollector(ctx)

    if ctx.action is not None:
        _add_action(collector, ctx.action)

    if ctx.power_damage:
        _add_power_damage(collector, ctx.power_damage)

    if ctx.technique_damage is not None:
        _add_technique_damage(collector, ctx.technique_damage)

    if ctx.range is not None and ctx.range.steps > 0:
        collector.add(PART_POWER_RANGE, max(0, ctx.range.steps - 1), ctx.range.apply_duration)

    if ctx.area is not None and ctx.area.type != NO_AREA:
        part = AREA_TYPE_PARTS.get(ctx.area.type)
        if part is not None:
            collector.add(part, max(0, ctx.area.level - 1), ctx.area.apply_duration)

    if ctx.duration is not None and ctx.duration.type != INSTANT:
        _add_duration(collector, ctx.duration)

    if ctx.weapon is not None and ctx.weapon.tp >= 1:
        collector.add(PART_ADD_WEAPON_ATTACK, ctx.weapon.tp - 1)

    logger.debug(
        "Built mechanic parts",
        extra={"creator_type": collector.creator_type.value, "part_count": len(collector.parts)},
    )
    return collector.parts


# ============================================================================
# FLAT KEYWORD WRAPPERS
# ============================================================================


def build_power_mechanic_parts(
    action_type_selection: Optional[str] = None,
    reaction: bool = False,
    damage_type: Optional[str] = None,
    dice_amt: Optional[int] = None,
    die_size: Optional[int] = None,
    range: Optional[int] = None,
    range_apply_duration: bool = False,
    area_type: Optional[str] = None,
    area_level: Optional[int] = None,
    area_apply_duration: bool = False,
    duration_type: Optional[str] = None,
    duration_value: Optional[int] = None,
    duration_apply_duration: bool = False,
    focus: bool = False,
    no_harm: bool = False,
    ends_on_activation: bool = False,
    sustain: int = 0,
    catalog: CatalogSource = None,
) -> List[PartReference]:
    """Single-damage keyword form of the Power builder."""
    power_damage = []
    if damage_type and damage_type != NO_DAMAGE_TYPE and dice_amt and die_size:
        power_damage.append(DamageConfig(amount=dice_amt, size=die_size, type=damage_type))

    return build_mechanic_parts(
        MechanicBuilderContext(
            creator_type=CreatorType.POWER,
            catalog=catalog,
            action=ActionConfig(type=action_type_selection or "basic", is_reaction=bool(reaction)),
            power_damage=power_damage,
            range=(
                RangeConfig(steps=range, apply_duration=range_apply_duration)
                if range is not None
                else None
            ),
            area=(
                AreaConfig(type=area_type, level=area_level or 1, apply_duration=area_apply_duration)
                if area_type and area_type != NO_AREA
                else None
            ),
            duration=(
                DurationConfig(
                    type=duration_type,
                    value=duration_value or 1,
                    apply_duration=duration_apply_duration,
                    focus=focus,
                    no_harm=no_harm,
                    ends_on_activation=ends_on_activation,
                    sustain=sustain or 0,
                )
                if duration_type and duration_type != INSTANT
                else None
            ),
        )
    )


def build_technique_mechanic_parts(
    action_type_selection: Optional[str] = None,
    reaction: bool = False,
    dice_amt: Optional[int] = None,
    die_size: Optional[int] = None,
    weapon_tp: Optional[int] = None,
    catalog: CatalogSource = None,
) -> List[PartReference]:
    """Keyword form of the Technique builder."""
    return build_mechanic_parts(
        MechanicBuilderContext(
            creator_type=CreatorType.TECHNIQUE,
            catalog=catalog,
            action=ActionConfig(type=action_type_selection or "basic", is_reaction=bool(reaction)),
            technique_damage=(
                DamageConfig(amount=dice_amt, size=die_size) if dice_amt and die_size else None
            ),
            weapon=WeaponConfig(tp=weapon_tp) if weapon_tp is not None else None,
        )
    )
