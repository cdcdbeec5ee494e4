"""Technique display derivers: damage string, part chips and the display payload."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from realms_mechanics.domain.models.part import PartDefinition
from realms_mechanics.domain.models.reference import PartReference
from realms_mechanics.domain.models.results import PartChip, TechniqueDisplay
from realms_mechanics.modules.catalog.lookup import (
    CatalogSource,
    ReferenceLike,
    as_catalog,
    as_references,
    resolve,
)
from realms_mechanics.modules.power.calculator import compute_action_type_from_selection
from realms_mechanics.modules.shared.constants import UNARMED
from realms_mechanics.modules.shared.formulas import option_suffix
from realms_mechanics.modules.technique.calculator import (
    calculate_technique_costs,
    compute_technique_action_type,
    technique_part_tp,
)


def format_technique_damage(damage: Optional[Mapping[str, Any]]) -> str:
    """
    ``"+{amount}d{size}"``, or ``""`` when either is missing or zero.

    Example:
        >>> format_technique_damage({"amount": 2, "size": 6})
        '+2d6'
    """
    if not isinstance(damage, Mapping):
        return ""
    amount = damage.get("amount")
    size = damage.get("size")
    if not amount or not size or amount == "0" or size == "0":
        return ""
    return f"+{amount}d{size}"


def format_technique_part_chip(definition: PartDefinition, ref: ReferenceLike) -> PartChip:
    ref = PartReference.from_payload(ref)
    final_tp = technique_part_tp(definition, ref)
    text = f"{definition.name}{option_suffix(ref.levels)}"
    if final_tp > 0:
        text += f" | TP: {final_tp}"
    return PartChip(text=text, description=definition.description, final_tp=final_tp)


def _weapon_name(weapon: Any) -> str:
    if not isinstance(weapon, Mapping):
        return UNARMED
    name = weapon.get("name")
    if name:
        return str(name)
    weapon_id = weapon.get("id")
    if weapon_id:
        return f"Weapon #{weapon_id}"
    return UNARMED


def derive_technique_display(doc: Mapping[str, Any], catalog: CatalogSource = None) -> TechniqueDisplay:
    """
    Full display payload of a saved Technique document.

    A saved ``actionType`` selector (with ``isReaction``) wins over the
    action type derived from the parts.
    """
    parts = as_catalog(catalog)
    references = as_references(doc.get("parts") or ())
    costs = calculate_technique_costs(references, parts)

    saved_action = doc.get("actionType")
    if saved_action:
        action_type = compute_action_type_from_selection(saved_action, bool(doc.get("isReaction")))
    else:
        action_type = compute_technique_action_type(references, parts)

    chips = []
    for ref in references:
        definition = resolve(parts, ref)
        if definition is not None:
            chips.append(format_technique_part_chip(definition, ref))

    return TechniqueDisplay(
        name=str(doc.get("name") or ""),
        description=str(doc.get("description") or ""),
        weapon_name=_weapon_name(doc.get("weapon")),
        action_type=action_type,
        damage=format_technique_damage(doc.get("damage")),
        energy=costs.total_energy,
        tp=costs.total_tp,
        tp_sources=costs.tp_sources,
        part_chips=tuple(chips),
    )
