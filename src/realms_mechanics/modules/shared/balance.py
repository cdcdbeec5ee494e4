"""
Balance-table accessors.

Thin, typed readers over ConfigManager for the tunable numbers the
calculators use. Each accessor carries the code default so the engine works
without any balance files, and each key has a validator registered so a
malformed table is rejected when it is loaded rather than mid-calculation.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Tuple

from realms_mechanics.core.config.errors import ConfigValidationError
from realms_mechanics.core.config.manager import ConfigManager
from realms_mechanics.modules.shared.constants import (
    DEFAULT_CURRENCY_SURCHARGE_RATE,
    DEFAULT_ITEM_RANGE_BASE,
    DEFAULT_ITEM_RANGE_STEP,
    DEFAULT_POWER_RANGE_BASE,
    DEFAULT_POWER_RANGE_STEP,
    VALID_DIE_SIZES,
)


# ============================================================================
# VALIDATORS
# ============================================================================


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate_non_negative_number(key: str):
    def validator(value: Any) -> None:
        if not _is_number(value) or value < 0:
            raise ConfigValidationError(f"{key} must be a non-negative number, got {value!r}")

    return validator


def _validate_die_sizes(value: Any) -> None:
    if not isinstance(value, list) or not value:
        raise ConfigValidationError(f"dice.valid_sizes must be a non-empty list, got {value!r}")
    for size in value:
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ConfigValidationError(f"dice.valid_sizes entries must be positive ints, got {size!r}")


_NUMERIC_KEYS = (
    "items.currency_surcharge_rate",
    "items.range.base_spaces",
    "items.range.spaces_per_level",
    "powers.range.base_spaces",
    "powers.range.spaces_per_level",
)

for _key in _NUMERIC_KEYS:
    ConfigManager.register_validator(_key, _validate_non_negative_number(_key))
ConfigManager.register_validator("dice.valid_sizes", _validate_die_sizes)


# ============================================================================
# ACCESSORS
# ============================================================================


def get_valid_die_sizes() -> FrozenSet[int]:
    """Die sizes that count as valid dice (default {4, 6, 8, 10, 12})."""
    sizes = ConfigManager.get("dice.valid_sizes", None)
    if sizes is None:
        return VALID_DIE_SIZES
    return frozenset(sizes)


def get_currency_surcharge_rate() -> float:
    """Fraction of the bracket base added per point of item currency."""
    return ConfigManager.get("items.currency_surcharge_rate", DEFAULT_CURRENCY_SURCHARGE_RATE)


def get_power_range_steps() -> Tuple[int, int]:
    """``(base_spaces, spaces_per_level)`` for the Power Range display."""
    return (
        ConfigManager.get("powers.range.base_spaces", DEFAULT_POWER_RANGE_BASE),
        ConfigManager.get("powers.range.spaces_per_level", DEFAULT_POWER_RANGE_STEP),
    )


def get_item_range_steps() -> Tuple[int, int]:
    """``(base_spaces, spaces_per_level)`` for the item Range display."""
    return (
        ConfigManager.get("items.range.base_spaces", DEFAULT_ITEM_RANGE_BASE),
        ConfigManager.get("items.range.spaces_per_level", DEFAULT_ITEM_RANGE_STEP),
    )
