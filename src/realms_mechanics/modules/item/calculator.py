"""
Item cost calculator and property display helpers.

Item properties only scale by option 1. IP, TP and currency totals are plain
sums with no per-property rounding, so the order of properties never changes
the result.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from realms_mechanics.core.logging.logger import get_logger
from realms_mechanics.domain.models.damage import DamageConfig
from realms_mechanics.domain.models.reference import PartReference
from realms_mechanics.domain.models.results import ItemCostResult, Proficiency
from realms_mechanics.modules.catalog.lookup import (
    CatalogSource,
    ReferenceLike,
    as_catalog,
    as_references,
    find_marker,
    resolve,
)
from realms_mechanics.modules.shared.balance import get_item_range_steps
from realms_mechanics.modules.shared.constants import (
    DEFAULT_ITEM_RANGE,
    GENERAL_PROPERTY_IDS,
    GENERAL_PROPERTY_NAMES,
    PROP_DAMAGE_REDUCTION,
    PROP_RANGE,
)

logger = get_logger(__name__)


def calculate_item_costs(
    refs: Optional[Iterable[ReferenceLike]], catalog: CatalogSource = None
) -> ItemCostResult:
    """
    Sum IP, TP and currency over the resolved properties.

    Each property contributes ``base_x + op_1_x * op_1_lvl``.
    """
    properties = as_catalog(catalog)
    total_ip = 0
    total_tp = 0
    total_currency = 0

    for ref in as_references(refs):
        definition = resolve(properties, ref)
        if definition is None:
            logger.debug(
                "Unresolved item property",
                extra={"property_id": ref.id, "property_name": ref.name},
            )
            continue
        level = ref.op_1_lvl
        total_ip += definition.base_ip + definition.op_1_ip * level
        total_tp += definition.base_tp + definition.op_1_tp * level
        total_currency += definition.base_c + definition.op_1_c * level

    return ItemCostResult(total_ip=total_ip, total_tp=total_tp, total_currency=total_currency)


def format_item_range(refs: Optional[Iterable[ReferenceLike]]) -> str:
    """``"{8+8*lvl} Spaces"`` when a Range property is present, else ``"Melee"``."""
    marker = find_marker(as_references(refs), PROP_RANGE)
    if marker is None:
        return DEFAULT_ITEM_RANGE
    base, step = get_item_range_steps()
    return f"{base + step * marker.op_1_lvl} Spaces"


def derive_damage_reduction(refs: Optional[Iterable[ReferenceLike]]) -> int:
    """``1 + lvl`` of the Damage Reduction property, else 0."""
    marker = find_marker(as_references(refs), PROP_DAMAGE_REDUCTION)
    if marker is None:
        return 0
    return 1 + marker.op_1_lvl


def format_item_damage(damage: Optional[Iterable[Any]]) -> str:
    """
    Every complete damage entry as ``"{a}d{s} {type}"``, joined by ``", "``.

    Example:
        >>> format_item_damage([{"amount": 1, "size": 8, "type": "slashing"},
        ...                     {"amount": 0, "size": 6, "type": "fire"}])
        '1d8 slashing'
    """
    if damage is None or isinstance(damage, (str, Mapping)):
        return ""
    formatted = []
    for entry in damage:
        config = DamageConfig.from_mapping(entry)
        if config is not None and config.has_dice and config.has_type:
            formatted.append(f"{config.dice_notation()} {config.type}")
    return ", ".join(formatted)


def extract_proficiencies(
    refs: Optional[Iterable[ReferenceLike]], catalog: CatalogSource = None
) -> List[Proficiency]:
    """Resolved properties that cost TP, with their TP broken down."""
    properties = as_catalog(catalog)
    proficiencies = []
    for ref in as_references(refs):
        definition = resolve(properties, ref)
        if definition is None:
            continue
        level = ref.op_1_lvl
        option_tp = definition.op_1_tp * level if level > 0 else 0
        total_tp = definition.base_tp + option_tp
        if total_tp > 0:
            proficiencies.append(
                Proficiency(
                    id=definition.id,
                    name=definition.name,
                    level=level,
                    base_tp=definition.base_tp,
                    option_tp=option_tp,
                    total_tp=total_tp,
                    description=definition.description,
                )
            )
    return proficiencies


def format_proficiency_chip(proficiency: Proficiency) -> str:
    """
    Example:
        >>> format_proficiency_chip(Proficiency(13, "Range", 2, 1, 2, 3))
        'Range (Level 2) | TP: 1 + 2'
    """
    text = proficiency.name
    if proficiency.level > 0:
        text += f" (Level {proficiency.level})"
    if proficiency.total_tp > 0:
        text += f" | TP: {proficiency.base_tp}"
        if proficiency.option_tp > 0:
            text += f" + {proficiency.option_tp}"
    return text


def is_general_property(ref: Any) -> bool:
    """Whether a property is one of the built-ins the item creator manages itself."""
    if ref is None:
        return False
    ref = PartReference.from_payload(ref)
    part_id = ref.effective_id
    if part_id is not None and part_id in GENERAL_PROPERTY_IDS:
        return True
    name = ref.effective_name
    return bool(name) and name in GENERAL_PROPERTY_NAMES
