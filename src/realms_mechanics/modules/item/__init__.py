"""
Item cost calculation, rarity resolution and display derivation.

Usage
-----
    from realms_mechanics.modules.item import (
        calculate_item_costs,
        calculate_currency_cost_and_rarity,
    )

    costs = calculate_item_costs(properties, catalog)
    rarity = calculate_currency_cost_and_rarity(costs.total_currency, costs.total_ip)
"""

from .calculator import (
    calculate_item_costs,
    derive_damage_reduction,
    extract_proficiencies,
    format_item_damage,
    format_item_range,
    format_proficiency_chip,
    is_general_property,
)
from .display import derive_item_display
from .rarity import (
    DEFAULT_RARITY_BRACKETS,
    calculate_currency_cost_and_rarity,
    find_bracket,
    get_rarity_brackets,
    parse_brackets,
)

__all__ = [
    "DEFAULT_RARITY_BRACKETS",
    "calculate_currency_cost_and_rarity",
    "calculate_item_costs",
    "derive_damage_reduction",
    "derive_item_display",
    "extract_proficiencies",
    "find_bracket",
    "format_item_damage",
    "format_item_range",
    "format_proficiency_chip",
    "get_rarity_brackets",
    "is_general_property",
    "parse_brackets",
]
