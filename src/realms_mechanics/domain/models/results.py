"""
Calculation result value objects.

Every calculator and deriver returns one of these frozen dataclasses. Each
exposes ``to_dict()`` producing the camelCase keys the saved documents and
the creator UIs already use (``totalEnergy``, ``tpSources``, ...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

Number = Union[int, float]


# ============================================================================
# COST RESULTS
# ============================================================================


@dataclass(frozen=True)
class EnergyCostResult:
    """Energy and TP totals shared by Powers and Techniques."""

    total_energy: int
    total_tp: int
    tp_sources: Tuple[str, ...] = ()
    energy_raw: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalEnergy": self.total_energy,
            "totalTP": self.total_tp,
            "tpSources": list(self.tp_sources),
            "energyRaw": self.energy_raw,
        }


@dataclass(frozen=True)
class PowerCostResult(EnergyCostResult):
    """Result of ``calculate_power_costs``."""


@dataclass(frozen=True)
class TechniqueCostResult(EnergyCostResult):
    """Result of ``calculate_technique_costs``."""


@dataclass(frozen=True)
class ItemCostResult:
    """Unfloored IP, TP and currency totals of an item's properties."""

    total_ip: Number = 0
    total_tp: Number = 0
    total_currency: Number = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalIP": self.total_ip,
            "totalTP": self.total_tp,
            "totalCurrency": self.total_currency,
        }


@dataclass(frozen=True)
class RarityResult:
    """Rarity tier name and final currency cost."""

    rarity: str
    currency_cost: int

    def to_dict(self) -> Dict[str, Any]:
        return {"rarity": self.rarity, "currencyCost": self.currency_cost}


# ============================================================================
# DISPLAY RESULTS
# ============================================================================


@dataclass(frozen=True)
class PartChip:
    """One part rendered as a chip: label, description and its TP."""

    text: str
    description: str = ""
    final_tp: int = 0

    @property
    def has_tp(self) -> bool:
        return self.final_tp > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "description": self.description,
            "finalTP": self.final_tp,
            "hasTP": self.has_tp,
        }


@dataclass(frozen=True)
class Proficiency:
    """An item property that costs TP to use proficiently."""

    id: Optional[int]
    name: str
    level: int
    base_tp: Number
    option_tp: Number
    total_tp: Number
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level,
            "baseTP": self.base_tp,
            "optionTP": self.option_tp,
            "totalTP": self.total_tp,
            "description": self.description,
        }


@dataclass(frozen=True)
class PowerDisplay:
    name: str
    description: str
    action_type: str
    range: str
    area: str
    duration: str
    energy: int
    tp: int
    tp_sources: Tuple[str, ...] = ()
    part_chips: Tuple[PartChip, ...] = ()
    damage: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "actionType": self.action_type,
            "range": self.range,
            "area": self.area,
            "duration": self.duration,
            "energy": self.energy,
            "tp": self.tp,
            "tpSources": list(self.tp_sources),
            "partChips": [chip.to_dict() for chip in self.part_chips],
            "damage": self.damage,
        }


@dataclass(frozen=True)
class TechniqueDisplay:
    name: str
    description: str
    weapon_name: str
    action_type: str
    damage: str
    energy: int
    tp: int
    tp_sources: Tuple[str, ...] = ()
    part_chips: Tuple[PartChip, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "weaponName": self.weapon_name,
            "actionType": self.action_type,
            "damageStr": self.damage,
            "energy": self.energy,
            "tp": self.tp,
            "tpSources": list(self.tp_sources),
            "partChips": [chip.to_dict() for chip in self.part_chips],
        }


@dataclass(frozen=True)
class ItemDisplay:
    name: str
    armament_type: str
    description: str
    rarity: str
    currency_cost: int
    total_ip: Number
    total_tp: Number
    total_currency: Number
    range: str
    damage: str
    damage_reduction: int
    proficiencies: Tuple[Proficiency, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "armamentType": self.armament_type,
            "description": self.description,
            "rarity": self.rarity,
            "currencyCost": self.currency_cost,
            "goldCost": self.currency_cost,
            "totalIP": self.total_ip,
            "totalTP": self.total_tp,
            "totalCurrency": self.total_currency,
            "range": self.range,
            "damage": self.damage,
            "damageReduction": self.damage_reduction,
            "proficiencies": [p.to_dict() for p in self.proficiencies],
        }
