"""
Domain models for the Realms mechanic engine.

Design Notes
------------
- PartDefinition: immutable catalog entry (part or item property)
- PartReference: a selected part with option levels; sole owner of payload
  normalization
- DamageConfig: dice + damage type, never cost-bearing itself
- RarityBracket: one row of the item rarity table
- Result objects: what calculators and derivers return
"""

from .base import (
    DomainValidationError,
    ValueObject,
    validate_non_negative,
    validate_not_empty,
)
from .bracket import RarityBracket
from .damage import DamageConfig
from .part import PartDefinition, coerce_id, coerce_level, coerce_number
from .reference import ById, ByName, PartReference, RefKey
from .results import (
    EnergyCostResult,
    ItemCostResult,
    ItemDisplay,
    PartChip,
    PowerCostResult,
    PowerDisplay,
    Proficiency,
    RarityResult,
    TechniqueCostResult,
    TechniqueDisplay,
)

__all__ = [
    "DomainValidationError",
    "ValueObject",
    "validate_non_negative",
    "validate_not_empty",
    "RarityBracket",
    "DamageConfig",
    "PartDefinition",
    "coerce_id",
    "coerce_level",
    "coerce_number",
    "ById",
    "ByName",
    "PartReference",
    "RefKey",
    "EnergyCostResult",
    "ItemCostResult",
    "ItemDisplay",
    "PartChip",
    "PowerCostResult",
    "PowerDisplay",
    "Proficiency",
    "RarityResult",
    "TechniqueCostResult",
    "TechniqueDisplay",
]
