"""
Technique cost calculator.

Techniques have no duration scaling: energy is the sum of flat parts times
the product of percentage parts, rounded up. TP follows the Power rule with
one exception: the option-1 TP of Additional Damage is floored on its own
before the part total is floored.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from realms_mechanics.core.logging.logger import get_logger
from realms_mechanics.domain.models.part import PartDefinition
from realms_mechanics.domain.models.reference import ByName, PartReference
from realms_mechanics.domain.models.results import TechniqueCostResult
from realms_mechanics.modules.catalog.lookup import (
    CatalogSource,
    ReferenceLike,
    as_catalog,
    as_references,
    find_by_key,
    resolve,
)
from realms_mechanics.modules.power.calculator import part_energy, tp_source
from realms_mechanics.modules.shared.constants import (
    LONG_ACTION,
    PART_ADDITIONAL_DAMAGE,
    PART_LONG_ACTION,
    PART_QUICK_OR_FREE_ACTION,
    PART_REACTION,
    QUICK_OR_FREE_ACTION,
    REACTION,
)

logger = get_logger(__name__)


def _is_additional_damage(definition: PartDefinition) -> bool:
    return (
        definition.matches_id(PART_ADDITIONAL_DAMAGE.id)
        or definition.name == PART_ADDITIONAL_DAMAGE.name
    )


def technique_part_tp(definition: PartDefinition, ref: PartReference) -> int:
    """
    Floored TP of one technique part.

    Example:
        Additional Damage with ``op_1_tp=0.5`` at level 3 and ``op_2_tp=0.5``
        at level 1 is ``floor(0 + floor(1.5) + 0.5) = 1``, not 2.
    """
    opt1 = definition.op_1_tp * ref.op_1_lvl
    if _is_additional_damage(definition):
        opt1 = math.floor(opt1)
    raw = (
        definition.base_tp
        + opt1
        + definition.op_2_tp * ref.op_2_lvl
        + definition.op_3_tp * ref.op_3_lvl
    )
    return math.floor(raw)


def calculate_technique_costs(
    refs: Optional[Iterable[ReferenceLike]], catalog: CatalogSource = None
) -> TechniqueCostResult:
    """
    Calculate total energy, total TP and TP sources for a Technique.

    Unresolvable references contribute nothing.
    """
    parts = as_catalog(catalog)
    flat_sum = 0.0
    percentage_product = 1.0
    total_tp = 0
    tp_sources: List[str] = []

    for ref in as_references(refs):
        definition = resolve(parts, ref)
        if definition is None:
            logger.debug(
                "Unresolved technique part",
                extra={"part_id": ref.id, "part_name": ref.name},
            )
            continue

        energy = part_energy(definition, ref)
        if definition.percentage:
            percentage_product *= energy
        else:
            flat_sum += energy

        tp = technique_part_tp(definition, ref)
        if tp > 0:
            tp_sources.append(tp_source(tp, definition.name, ref))
        total_tp += tp

    energy_raw = flat_sum * percentage_product
    return TechniqueCostResult(
        total_energy=math.ceil(energy_raw),
        total_tp=total_tp,
        tp_sources=tuple(tp_sources),
        energy_raw=energy_raw,
    )


def compute_technique_action_type(
    refs: Optional[Iterable[ReferenceLike]], catalog: CatalogSource = None
) -> str:
    """
    Derive the action type from the Technique action parts present.

    References are matched by id; a name-only reference is first looked up
    in the catalog, and if that still yields no action id its name is
    compared with the canonical action part names.
    """
    parts = as_catalog(catalog)
    action = "Basic"
    is_reaction = False

    for ref in as_references(refs):
        part_id = ref.id
        if part_id is None and ref.name:
            found = find_by_key(parts, ByName(ref.name))
            part_id = found.id if found is not None else None
        level = ref.op_1_lvl

        if part_id == REACTION:
            kind = "reaction"
        elif part_id == QUICK_OR_FREE_ACTION:
            kind = "quick_or_free"
        elif part_id == LONG_ACTION:
            kind = "long"
        elif ref.name == PART_REACTION.name:
            kind = "reaction"
        elif ref.name == PART_QUICK_OR_FREE_ACTION.name:
            kind = "quick_or_free"
        elif ref.name == PART_LONG_ACTION.name:
            kind = "long"
        else:
            continue

        if kind == "reaction":
            is_reaction = True
        elif kind == "quick_or_free":
            if level == 0:
                action = "Quick"
            elif level == 1:
                action = "Free"
        elif level == 0:
            action = "Long (3)"
        elif level == 1:
            action = "Long (4)"

    return f"{action} Reaction" if is_reaction else f"{action} Action"
