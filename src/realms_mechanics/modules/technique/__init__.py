"""Technique cost calculation and display derivation."""

from .calculator import (
    calculate_technique_costs,
    compute_technique_action_type,
    technique_part_tp,
)
from .display import (
    derive_technique_display,
    format_technique_damage,
    format_technique_part_chip,
)

__all__ = [
    "calculate_technique_costs",
    "compute_technique_action_type",
    "derive_technique_display",
    "format_technique_damage",
    "format_technique_part_chip",
    "technique_part_tp",
]
