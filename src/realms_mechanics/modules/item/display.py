"""Item display payload."""

from __future__ import annotations

from typing import Any, Mapping

from realms_mechanics.domain.models.results import ItemDisplay
from realms_mechanics.modules.catalog.lookup import CatalogSource, as_catalog, as_references
from realms_mechanics.modules.item.calculator import (
    calculate_item_costs,
    derive_damage_reduction,
    extract_proficiencies,
    format_item_damage,
    format_item_range,
)
from realms_mechanics.modules.item.rarity import calculate_currency_cost_and_rarity
from realms_mechanics.modules.shared.constants import DEFAULT_ARMAMENT_TYPE


def derive_item_display(doc: Mapping[str, Any], catalog: CatalogSource = None) -> ItemDisplay:
    """
    Full display payload of a saved item document.

    ``armamentType`` defaults to ``"Weapon"``; ``damage`` is a list of dice
    entries.
    """
    properties = as_catalog(catalog)
    references = as_references(doc.get("properties") or ())
    costs = calculate_item_costs(references, properties)
    rarity = calculate_currency_cost_and_rarity(costs.total_currency, costs.total_ip)

    return ItemDisplay(
        name=str(doc.get("name") or ""),
        armament_type=str(doc.get("armamentType") or DEFAULT_ARMAMENT_TYPE),
        description=str(doc.get("description") or ""),
        rarity=rarity.rarity,
        currency_cost=rarity.currency_cost,
        total_ip=costs.total_ip,
        total_tp=costs.total_tp,
        total_currency=costs.total_currency,
        range=format_item_range(references),
        damage=format_item_damage(doc.get("damage")),
        damage_reduction=derive_damage_reduction(references),
        proficiencies=tuple(extract_proficiencies(references, properties)),
    )
