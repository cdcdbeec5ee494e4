"""Power cost calculation and display derivation."""

from .calculator import (
    calculate_power_costs,
    compute_action_type_from_selection,
    compute_power_action_type,
)
from .display import (
    derive_area,
    derive_duration,
    derive_power_display,
    derive_range,
    format_power_damage,
    format_power_part_chip,
)

__all__ = [
    "calculate_power_costs",
    "compute_action_type_from_selection",
    "compute_power_action_type",
    "derive_area",
    "derive_duration",
    "derive_power_display",
    "derive_range",
    "format_power_damage",
    "format_power_part_chip",
]
