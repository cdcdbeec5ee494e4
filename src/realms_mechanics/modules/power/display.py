"""
Power display derivers.

Human-readable attributes of a saved Power: range, area, duration, damage,
part chips, and the full display payload. The range/area/duration derivers
scan the references for well-known marker parts by id or name and never
need the catalog.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from realms_mechanics.domain.models.damage import DamageConfig
from realms_mechanics.domain.models.part import PartDefinition
from realms_mechanics.domain.models.reference import PartReference
from realms_mechanics.domain.models.results import PartChip, PowerDisplay
from realms_mechanics.modules.catalog.lookup import (
    CatalogSource,
    ReferenceLike,
    as_catalog,
    as_references,
    find_marker,
    resolve,
)
from realms_mechanics.modules.power.calculator import (
    calculate_power_costs,
    compute_power_action_type,
    part_tp,
)
from realms_mechanics.modules.shared.balance import get_power_range_steps
from realms_mechanics.modules.shared.constants import (
    AREA_SHAPES,
    DEFAULT_POWER_AREA,
    DEFAULT_POWER_DURATION,
    DEFAULT_POWER_RANGE,
    DISPLAY_DAY_VALUES,
    DISPLAY_HOUR_VALUES,
    DISPLAY_MINUTE_VALUES,
    PART_DURATION_DAYS,
    PART_DURATION_HOUR,
    PART_DURATION_MINUTE,
    PART_DURATION_PERMANENT,
    PART_DURATION_ROUND,
    PART_POWER_RANGE,
)
from realms_mechanics.modules.shared.formulas import option_suffix


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}s" if count > 1 else f"{count} {unit}"


def _table_value(values: Sequence[int], level: int) -> int:
    """Quantity for an option level; out-of-table levels read as 1."""
    if 0 <= level < len(values):
        return values[level] or 1
    return 1


def derive_range(refs: Optional[Iterable[ReferenceLike]]) -> str:
    """``"{3+3*lvl} spaces"`` for a Power Range part, else ``"1 space"``."""
    marker = find_marker(as_references(refs), PART_POWER_RANGE)
    if marker is None:
        return DEFAULT_POWER_RANGE
    base, step = get_power_range_steps()
    return _plural(base + step * marker.op_1_lvl, "space")


def derive_area(refs: Optional[Iterable[ReferenceLike]]) -> str:
    """Shape name of the first area part present (Sphere first), else ``"1 target"``."""
    references = as_references(refs)
    for shape, part in AREA_SHAPES:
        if find_marker(references, part) is not None:
            return shape
    return DEFAULT_POWER_AREA


def derive_duration(refs: Optional[Iterable[ReferenceLike]]) -> str:
    """
    Duration string from the first duration part found.

    Checked in order: Permanent, Round, Minute, Hour, Days. Rounds read as
    ``2 + lvl``; the other units index a fixed table by option level.

    Example:
        >>> derive_duration([{"id": 378, "op_1_lvl": 1}])
        '10 minutes'
    """
    references = as_references(refs)

    if find_marker(references, PART_DURATION_PERMANENT) is not None:
        return "Permanent"

    rounds = find_marker(references, PART_DURATION_ROUND)
    if rounds is not None:
        return _plural(2 + rounds.op_1_lvl, "round")

    for part, values, unit in (
        (PART_DURATION_MINUTE, DISPLAY_MINUTE_VALUES, "minute"),
        (PART_DURATION_HOUR, DISPLAY_HOUR_VALUES, "hour"),
        (PART_DURATION_DAYS, DISPLAY_DAY_VALUES, "day"),
    ):
        marker = find_marker(references, part)
        if marker is not None:
            return _plural(_table_value(values, marker.op_1_lvl), unit)

    return DEFAULT_POWER_DURATION


def format_power_part_chip(definition: PartDefinition, ref: ReferenceLike) -> PartChip:
    """Chip text is the part name, its non-zero option levels, and ``" | TP: n"``."""
    ref = PartReference.from_payload(ref)
    final_tp = part_tp(definition, ref)
    text = f"{definition.name}{option_suffix(ref.levels)}"
    if final_tp > 0:
        text += f" | TP: {final_tp}"
    return PartChip(text=text, description=definition.description, final_tp=final_tp)


def format_power_damage(damage: Optional[Iterable[Any]]) -> str:
    """``"{amount}d{size} {type}"`` of the first complete damage entry, else ``""``."""
    if damage is None or isinstance(damage, (str, Mapping)):
        return ""
    for entry in damage:
        config = DamageConfig.from_mapping(entry)
        if config is not None and config.has_dice and config.has_type:
            return f"{config.dice_notation()} {config.type}"
    return ""


def derive_power_display(doc: Mapping[str, Any], catalog: CatalogSource = None) -> PowerDisplay:
    """
    Full display payload of a saved Power document.

    Chips are produced only for references that resolve in the catalog.
    """
    parts = as_catalog(catalog)
    references = as_references(doc.get("parts") or ())
    costs = calculate_power_costs(references, parts)

    chips = []
    for ref in references:
        definition = resolve(parts, ref)
        if definition is not None:
            chips.append(format_power_part_chip(definition, ref))

    return PowerDisplay(
        name=str(doc.get("name") or ""),
        description=str(doc.get("description") or ""),
        action_type=compute_power_action_type(references, parts),
        range=derive_range(references),
        area=derive_area(references),
        duration=derive_duration(references),
        energy=costs.total_energy,
        tp=costs.total_tp,
        tp_sources=costs.tp_sources,
        part_chips=tuple(chips),
        damage=format_power_damage(doc.get("damage")),
    )
