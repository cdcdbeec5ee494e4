"""
Power cost calculator.

Purpose
-------
Compute the Energy and Training Point cost of a Power from its part
references, and derive its action type.

Design Notes
------------
Each resolved part lands in exactly one energy bucket, checked in order:

- duration parts multiply together into ``dur_all``
- percentage parts multiply into ``perc_all`` (and ``perc_dur`` when the
  reference applies to duration)
- every other part is flat and sums into ``flat_normal`` (and
  ``flat_duration`` when the reference applies to duration)

The unified equation is then::

    energy_raw = flat_normal * perc_all
               + (dur_all + 1) * flat_duration * perc_dur
               - flat_duration * perc_dur

with ``dur_all`` taken as 0 when no duration part is present, so that
duration-flagged flat energy counts once. ``total_energy`` is the ceiling.
TP is floored per part, then summed.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from realms_mechanics.core.logging.logger import get_logger
from realms_mechanics.domain.models.part import PartDefinition
from realms_mechanics.domain.models.reference import ByName, PartReference
from realms_mechanics.domain.models.results import PowerCostResult
from realms_mechanics.modules.catalog.lookup import (
    Catalog,
    CatalogSource,
    ReferenceLike,
    as_catalog,
    as_references,
    find_by_key,
    resolve,
)
from realms_mechanics.modules.shared.constants import (
    ACTION_SELECTIONS,
    POWER_LONG_ACTION,
    POWER_QUICK_OR_FREE_ACTION,
    POWER_REACTION,
)
from realms_mechanics.modules.shared.formulas import option_suffix, weighted_sum

logger = get_logger(__name__)


def part_energy(definition: PartDefinition, ref: PartReference) -> float:
    """``base_en + Σ op_i_en * level_i``."""
    return weighted_sum(definition.base_en, definition.option_energy, ref.levels)


def part_tp(definition: PartDefinition, ref: PartReference) -> int:
    """Floored ``base_tp + Σ op_i_tp * level_i``."""
    return math.floor(weighted_sum(definition.base_tp, definition.option_tp, ref.levels))


def tp_source(tp: int, name: str, ref: PartReference) -> str:
    """``"{tp} TP: {name} (Opt1 a)..."``; only non-zero levels are listed."""
    return f"{tp} TP: {name}{option_suffix(ref.levels)}"


def calculate_power_costs(
    refs: Optional[Iterable[ReferenceLike]], catalog: CatalogSource = None
) -> PowerCostResult:
    """
    Calculate total energy, total TP and TP sources for a Power.

    Args:
        refs: Part references (saved or UI shape); ``None`` is empty
        catalog: Part definitions or a CatalogProvider

    Returns:
        PowerCostResult; unresolvable references contribute nothing.

    Example:
        >>> calculate_power_costs([{"id": 292, "op_1_lvl": 1}], parts).total_energy
        2
    """
    parts = as_catalog(catalog)

    flat_normal = 0.0
    flat_duration = 0.0
    perc_all = 1.0
    perc_dur = 1.0
    dur_all = 1.0
    has_duration_parts = False
    total_tp = 0
    tp_sources: List[str] = []

    for ref in as_references(refs):
        definition = resolve(parts, ref)
        if definition is None:
            logger.debug(
                "Unresolved power part",
                extra={"part_id": ref.id, "part_name": ref.name},
            )
            continue

        energy = part_energy(definition, ref)
        if definition.duration:
            dur_all *= energy
            has_duration_parts = True
        elif definition.percentage:
            perc_all *= energy
            if ref.apply_duration:
                perc_dur *= energy
        else:
            flat_normal += energy
            if ref.apply_duration:
                flat_duration += energy

        tp = part_tp(definition, ref)
        if tp > 0:
            tp_sources.append(tp_source(tp, definition.name, ref))
        total_tp += tp

    if not has_duration_parts:
        dur_all = 0.0

    energy_raw = (
        flat_normal * perc_all
        + (dur_all + 1) * flat_duration * perc_dur
        - flat_duration * perc_dur
    )

    return PowerCostResult(
        total_energy=math.ceil(energy_raw),
        total_tp=total_tp,
        tp_sources=tuple(tp_sources),
        energy_raw=energy_raw,
    )


# ============================================================================
# ACTION TYPE
# ============================================================================


def _marker_id(ref: PartReference, parts: Catalog) -> Optional[int]:
    part_id = ref.effective_id
    if part_id is not None:
        return part_id
    name = ref.effective_name
    if name:
        found = find_by_key(parts, ByName(name))
        return found.id if found is not None else None
    return None


def _format_action(base: str, is_reaction: bool) -> str:
    return f"{base} Reaction" if is_reaction else f"{base} Action"


def compute_power_action_type(
    refs: Optional[Iterable[ReferenceLike]], catalog: CatalogSource = None
) -> str:
    """
    Derive ``"{Basic|Quick|Free|Long (3)|Long (4)} {Action|Reaction}"`` from
    the Power action parts present.
    """
    parts = as_catalog(catalog)
    action = "Basic"
    is_reaction = False

    for ref in as_references(refs):
        part_id = _marker_id(ref, parts)
        level = ref.op_1_lvl
        if part_id == POWER_REACTION:
            is_reaction = True
        elif part_id == POWER_QUICK_OR_FREE_ACTION:
            if level == 0:
                action = "Quick"
            elif level == 1:
                action = "Free"
        elif part_id == POWER_LONG_ACTION:
            if level == 0:
                action = "Long (3)"
            elif level == 1:
                action = "Long (4)"

    return _format_action(action, is_reaction)


def compute_action_type_from_selection(selection: Optional[str], reaction: bool = False) -> str:
    """
    Action type from the creator's selector value.

    Example:
        >>> compute_action_type_from_selection("long4", True)
        'Long (4) Reaction'
    """
    base = ACTION_SELECTIONS.get(selection or "", "Basic")
    return _format_action(base, bool(reaction))
