"""
Realms Mechanic Formulas

Purpose
-------
Pure calculation functions shared by the creators: dice splitting, damage
option levels, per-part energy and TP sums, and the option-level suffix used
in TP sources and chips.

Design Notes
------------
All formulas:
- Accept parameters explicitly (no config access; callers pass die sizes)
- Return calculated values
- Are deterministic and never raise for numeric input

Usage
-----
    from realms_mechanics.modules.shared.formulas import compute_splits

    splits = compute_splits(dice=3, size=6)   # 3d6 could be 2d12 → 1 split
"""

from __future__ import annotations

import math
from typing import AbstractSet, Tuple

from realms_mechanics.modules.shared.constants import D12, VALID_DIE_SIZES


def compute_splits(
    dice: int, size: int, valid_sizes: AbstractSet[int] = VALID_DIE_SIZES
) -> int:
    """
    Count how many more dice are rolled than the fewest d12s reaching the same maximum.

    Args:
        dice: Number of dice rolled
        size: Die size
        valid_sizes: Accepted die sizes

    Returns:
        0 for an invalid die size or a single die, else
        ``max(0, dice - ceil(dice*size/12))``

    Example:
        >>> compute_splits(2, 6)
        1
        >>> compute_splits(3, 12)
        0
    """
    if size not in valid_sizes or dice <= 1:
        return 0
    min_d12 = math.ceil(dice * size / D12)
    return max(0, dice - min_d12)


def power_damage_level(dice: int, size: int) -> int:
    """
    Option-1 level of a power damage part: ``max(0, floor((dice*size - 4) / 2))``.

    Example:
        >>> power_damage_level(2, 6)
        4
    """
    return max(0, math.floor((dice * size - 4) / 2))


def technique_damage_level(dice: int, size: int) -> int:
    """
    Option-1 level of Additional Damage, scaled on average damage.

    Level 0 is 1d4 (average 2.5); every +2 average damage is one level.

    Example:
        >>> technique_damage_level(1, 4)
        0
        >>> technique_damage_level(2, 6)
        2
    """
    if dice <= 0 or size < 4:
        return 0
    average = dice * (size + 1) / 2
    return max(0, math.floor((average - 2.5) / 2))


def item_damage_level(dice: int, size: int) -> int:
    """Option-1 level for Weapon Damage / Shield Amount / Shield Damage."""
    return max(0, (dice * size - 4) // 2)


def weighted_sum(base: float, deltas: Tuple[float, ...], levels: Tuple[int, ...]) -> float:
    """``base + Σ delta_i * level_i``; the common shape of energy, TP and IP sums."""
    return base + sum(delta * level for delta, level in zip(deltas, levels))


def option_suffix(levels: Tuple[int, int, int]) -> str:
    """
    Render the non-zero option levels as ``" (Opt1 a) (Opt2 b) (Opt3 c)"``.

    Example:
        >>> option_suffix((2, 0, 1))
        ' (Opt1 2) (Opt3 1)'
    """
    return "".join(
        f" (Opt{index} {level})" for index, level in enumerate(levels, start=1) if level > 0
    )
