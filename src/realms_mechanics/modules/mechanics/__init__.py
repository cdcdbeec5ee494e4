"""
Mechanic builders.

Turn creator UI selections into canonical part/property reference lists:
- build_mechanic_parts: Power, Technique and Empowered creators
- build_item_properties: armament configuration of the Item creator
"""

from .builder import (
    ActionConfig,
    AreaConfig,
    CreatorType,
    DurationConfig,
    MechanicBuilderContext,
    RangeConfig,
    WeaponConfig,
    build_mechanic_parts,
    build_power_mechanic_parts,
    build_technique_mechanic_parts,
)
from .item_builder import AbilityRequirement, ArmamentConfig, build_item_properties

__all__ = [
    "AbilityRequirement",
    "ActionConfig",
    "ArmamentConfig",
    "AreaConfig",
    "CreatorType",
    "DurationConfig",
    "MechanicBuilderContext",
    "RangeConfig",
    "WeaponConfig",
    "build_item_properties",
    "build_mechanic_parts",
    "build_power_mechanic_parts",
    "build_technique_mechanic_parts",
]
