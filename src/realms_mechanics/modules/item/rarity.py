"""
Item rarity and currency cost.

Purpose
-------
Map an item's total Item Power (IP) to its rarity tier and compute the final
currency cost from the tier's base cost and the item's currency total.

Design Notes
------------
- The bracket table comes from ``items.rarity_brackets`` in the balance
  files and falls back to the built-in table below. It is validated on load:
  tiers must start at 0, be ordered without overlap, and only the last tier
  may be open-ended.
- Tiers are published with two-decimal lower bounds (4.01, 6.01, ...). An IP
  between one tier's ``ip_high`` and the next tier's ``ip_low`` belongs to
  the next tier up, so every non-negative IP has exactly one tier. This
  differs from the web item creator, which drops such values (4.005,
  6.000000001) to Common at the Common base cost.
- The parsed table is cached per ConfigManager generation; a reload is
  picked up on the next call.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Sequence, Tuple

from realms_mechanics.core.config.errors import ConfigValidationError
from realms_mechanics.core.config.manager import ConfigManager
from realms_mechanics.core.logging.logger import get_logger
from realms_mechanics.domain.models.base import DomainValidationError
from realms_mechanics.domain.models.bracket import RarityBracket
from realms_mechanics.domain.models.results import RarityResult
from realms_mechanics.modules.shared.balance import get_currency_surcharge_rate

logger = get_logger(__name__)

RARITY_BRACKETS_KEY = "items.rarity_brackets"

DEFAULT_RARITY_BRACKETS: Tuple[RarityBracket, ...] = (
    RarityBracket("Common", 0, 4, 25),
    RarityBracket("Uncommon", 4.01, 6, 100),
    RarityBracket("Rare", 6.01, 8, 500),
    RarityBracket("Epic", 8.01, 11, 2500),
    RarityBracket("Legendary", 11.01, 14, 10000),
    RarityBracket("Mythic", 14.01, 16, 50000),
    RarityBracket("Ascended", 16.01, None, 100000),
)


# ============================================================================
# TABLE PARSING & VALIDATION
# ============================================================================


def parse_brackets(rows: Sequence[Any]) -> Tuple[RarityBracket, ...]:
    """
    Parse and validate a rarity table.

    Raises:
        ConfigValidationError: If the table is empty, a row is malformed,
            tiers overlap or are out of order, the first tier does not start
            at 0, or the last tier is not open-ended.
    """
    if not isinstance(rows, (list, tuple)) or not rows:
        raise ConfigValidationError(f"{RARITY_BRACKETS_KEY} must be a non-empty list")

    brackets = []
    for index, row in enumerate(rows):
        if isinstance(row, RarityBracket):
            brackets.append(row)
            continue
        if not isinstance(row, Mapping):
            raise ConfigValidationError(f"{RARITY_BRACKETS_KEY}[{index}] must be a mapping")
        try:
            brackets.append(
                RarityBracket(
                    name=row["name"],
                    ip_low=row["ip_low"],
                    ip_high=row.get("ip_high"),
                    base_currency=row["base_currency"],
                )
            )
        except KeyError as e:
            raise ConfigValidationError(
                f"{RARITY_BRACKETS_KEY}[{index}] is missing {e.args[0]!r}"
            ) from e
        except (DomainValidationError, TypeError) as e:
            raise ConfigValidationError(f"{RARITY_BRACKETS_KEY}[{index}]: {e}") from e

    if brackets[0].ip_low != 0:
        raise ConfigValidationError(f"{RARITY_BRACKETS_KEY} must start at IP 0")
    for previous, current in zip(brackets, brackets[1:]):
        if previous.is_open_ended:
            raise ConfigValidationError(
                f"only the last rarity tier may be open-ended, not {previous.name}"
            )
        if current.ip_low <= previous.ip_high:
            raise ConfigValidationError(
                f"rarity tier {current.name} overlaps or precedes {previous.name}"
            )
    if not brackets[-1].is_open_ended:
        raise ConfigValidationError(f"last rarity tier {brackets[-1].name} must be open-ended")

    return tuple(brackets)


ConfigManager.register_validator(RARITY_BRACKETS_KEY, parse_brackets)

_bracket_cache: Optional[Tuple[int, Tuple[RarityBracket, ...]]] = None


def get_rarity_brackets() -> Tuple[RarityBracket, ...]:
    """Current rarity table, from the balance files or the built-in default."""
    global _bracket_cache

    generation = ConfigManager.generation()
    if _bracket_cache is not None and _bracket_cache[0] == generation:
        return _bracket_cache[1]

    rows = ConfigManager.get(RARITY_BRACKETS_KEY)
    brackets = parse_brackets(rows) if rows is not None else DEFAULT_RARITY_BRACKETS
    _bracket_cache = (generation, brackets)
    logger.debug(
        "Rarity table loaded",
        extra={"generation": generation, "tiers": len(brackets)},
    )
    return brackets


# ============================================================================
# RESOLUTION
# ============================================================================


def find_bracket(ip: float, brackets: Sequence[RarityBracket]) -> RarityBracket:
    """First tier whose upper bound is at least ``max(0, ip)``."""
    ip = max(0, ip)
    for bracket in brackets:
        if bracket.ip_high is None or ip <= bracket.ip_high:
            return bracket
    return brackets[-1]


def calculate_currency_cost_and_rarity(
    total_currency: float,
    total_ip: float,
    brackets: Optional[Sequence[RarityBracket]] = None,
) -> RarityResult:
    """
    Rarity tier and final currency cost of an item.

    ``currency_cost = floor(max(base * (1 + rate * max(0, total_currency)), base))``
    with ``rate`` the configured surcharge (default 0.125). Negative IP is
    treated as 0.

    Example:
        >>> calculate_currency_cost_and_rarity(8, 5)
        RarityResult(rarity='Uncommon', currency_cost=200)
    """
    table = brackets if brackets is not None else get_rarity_brackets()
    bracket = find_bracket(total_ip, table)
    currency = max(0, total_currency)
    base = bracket.base_currency
    cost = base * (1 + get_currency_surcharge_rate() * currency)
    return RarityResult(rarity=bracket.name, currency_cost=math.floor(max(cost, base)))
