"""Rarity bracket value object."""

from __future__ import annotations

from typing import Any, Dict, Optional

from realms_mechanics.domain.models.base import (
    DomainValidationError,
    ValueObject,
    validate_non_negative,
    validate_not_empty,
)


class RarityBracket(ValueObject):
    """
    One row of the rarity table: an IP interval and its base currency cost.

    ``ip_high`` of ``None`` marks the open-ended top tier.
    """

    def __init__(
        self,
        name: str,
        ip_low: float,
        ip_high: Optional[float],
        base_currency: int,
    ) -> None:
        self.name = name
        self.ip_low = ip_low
        self.ip_high = ip_high
        self.base_currency = base_currency
        self._validate()
        self._freeze()

    def _validate(self) -> None:
        validate_not_empty(self.name, "name")
        validate_non_negative(self.ip_low, "ip_low")
        validate_non_negative(self.base_currency, "base_currency")
        if self.ip_high is not None and self.ip_high < self.ip_low:
            raise DomainValidationError(
                f"ip_high ({self.ip_high}) is below ip_low ({self.ip_low}) for {self.name}",
                field="ip_high",
            )

    @property
    def is_open_ended(self) -> bool:
        return self.ip_high is None

    def contains(self, ip: float) -> bool:
        """Whether ``ip`` lies in the closed interval ``[ip_low, ip_high]``."""
        return ip >= self.ip_low and (self.ip_high is None or ip <= self.ip_high)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "ip_low": self.ip_low,
            "ip_high": self.ip_high,
            "base_currency": self.base_currency,
        }

    def __repr__(self) -> str:
        high = "inf" if self.ip_high is None else self.ip_high
        return f"RarityBracket({self.name!r}, {self.ip_low}-{high}, {self.base_currency})"
