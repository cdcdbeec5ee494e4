"""
Realms Mechanics Shared Module

Purpose
-------
Provides the foundations every creator module builds on:
- Domain exceptions and error handling
- Catalog identifiers and display defaults
- Pure formulas (dice splits, damage levels, option sums)
- Balance-table accessors backed by ConfigManager

Usage
-----
    from realms_mechanics.modules.shared import (
        CatalogEntryError,
        compute_splits,
        get_valid_die_sizes,
    )
"""

from __future__ import annotations

from .balance import (
    get_currency_surcharge_rate,
    get_item_range_steps,
    get_power_range_steps,
    get_valid_die_sizes,
)
from .exceptions import (
    CatalogEntryError,
    ErrorSeverity,
    InvalidReferenceError,
    RealmsDomainException,
)
from .formulas import (
    compute_splits,
    item_damage_level,
    option_suffix,
    power_damage_level,
    technique_damage_level,
    weighted_sum,
)

__all__ = [
    # Balance
    "get_currency_surcharge_rate",
    "get_item_range_steps",
    "get_power_range_steps",
    "get_valid_die_sizes",
    # Exceptions
    "CatalogEntryError",
    "ErrorSeverity",
    "InvalidReferenceError",
    "RealmsDomainException",
    # Formulas
    "compute_splits",
    "item_damage_level",
    "option_suffix",
    "power_damage_level",
    "technique_damage_level",
    "weighted_sum",
]
