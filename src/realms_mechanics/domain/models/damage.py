"""Damage dice configuration shared by the creators and display derivers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Any, Mapping, Optional, Union

from realms_mechanics.domain.models.part import coerce_level
from realms_mechanics.modules.shared.constants import VALID_DIE_SIZES

NO_DAMAGE_TYPE = "none"


@dataclass(frozen=True)
class DamageConfig:
    """
    Dice count, die size and damage-type tag, e.g. 2d6 slashing.

    Never cost-bearing by itself; the mechanic builder turns it into damage
    parts and the derivers into display strings.
    """

    amount: int = 0
    size: int = 0
    type: str = ""
    apply_duration: bool = False

    @property
    def has_type(self) -> bool:
        return bool(self.type) and self.type != NO_DAMAGE_TYPE

    @property
    def has_dice(self) -> bool:
        return self.amount > 0 and self.size > 0

    def is_valid(self, valid_sizes: AbstractSet[int] = VALID_DIE_SIZES) -> bool:
        """Valid iff the die size is standard, at least one die, and a real type."""
        return self.size in valid_sizes and self.amount > 0 and self.has_type

    def dice_notation(self) -> str:
        return f"{self.amount}d{self.size}"

    @classmethod
    def from_mapping(
        cls, data: Optional[Union["DamageConfig", Mapping[str, Any]]]
    ) -> Optional["DamageConfig"]:
        """
        Build from a saved damage entry; ``None`` for anything that is not a mapping.

        Accepts both the saved keys (``amount``/``size``) and the creator keys
        (``diceAmount``/``dieSize``). Numeric strings are coerced.
        """
        if isinstance(data, DamageConfig):
            return data
        if not isinstance(data, Mapping):
            return None
        amount = data.get("amount", data.get("diceAmount"))
        size = data.get("size", data.get("dieSize"))
        apply_duration = data.get("apply_duration", data.get("applyDuration"))
        return cls(
            amount=coerce_level(amount),
            size=coerce_level(size),
            type=str(data.get("type") or ""),
            apply_duration=bool(apply_duration),
        )
