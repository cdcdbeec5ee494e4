"""
Part reference model.

Purpose
-------
A PartReference is one selected part (or item property) inside a Power,
Technique or Item, with the option levels the user picked. It points at a
catalog definition by id (preferred) or by name (legacy saves), or carries
the definition inline when it comes straight from a creator UI.

Responsibilities
----------------
- Normalize every accepted payload shape in one place (`from_payload`)
- Yield lookup keys in priority order (id first, then name)
- Serialize back to the saved-document shape

Design Notes
------------
- Legacy alias keys (`opt1Level`/`opt2Level`/`opt3Level`, `applyDuration`)
  are understood here and nowhere else; calculators only ever see the
  canonical fields.
- The inline definition arrives under `part` (Powers/Techniques) or
  `property` (Items).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from realms_mechanics.domain.models.part import (
    PartDefinition,
    coerce_id,
    coerce_level,
)
from realms_mechanics.modules.shared.exceptions import InvalidReferenceError


# ============================================================================
# LOOKUP KEYS
# ============================================================================


@dataclass(frozen=True)
class ById:
    """Lookup key matching a catalog entry by numeric id."""

    id: int


@dataclass(frozen=True)
class ByName:
    """Lookup key matching a catalog entry by exact, case-sensitive name."""

    name: str


RefKey = Union[ById, ByName]


# ============================================================================
# PART REFERENCE
# ============================================================================


_LEVEL_KEYS = (
    ("op_1_lvl", "opt1Level"),
    ("op_2_lvl", "opt2Level"),
    ("op_3_lvl", "opt3Level"),
)


def _first_present(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


@dataclass(frozen=True)
class PartReference:
    """
    Immutable reference to a catalog part with chosen option levels.

    Attributes
    ----------
    id : Optional[int]
        Catalog id, when known
    name : Optional[str]
        Catalog name, used when the id is missing or stale
    op_1_lvl, op_2_lvl, op_3_lvl : int
        Chosen option levels (default 0)
    apply_duration : bool
        Power only: the part's energy is also scaled by duration
    definition : Optional[PartDefinition]
        Inline definition supplied by a creator UI; wins over catalog lookup
    """

    id: Optional[int] = None
    name: Optional[str] = None
    op_1_lvl: int = 0
    op_2_lvl: int = 0
    op_3_lvl: int = 0
    apply_duration: bool = False
    definition: Optional[PartDefinition] = None

    @property
    def levels(self) -> Tuple[int, int, int]:
        return (self.op_1_lvl, self.op_2_lvl, self.op_3_lvl)

    @property
    def effective_id(self) -> Optional[int]:
        """Id of the inline definition if present, else the reference id."""
        if self.definition is not None and self.definition.id is not None:
            return self.definition.id
        return self.id

    @property
    def effective_name(self) -> Optional[str]:
        """Name of the inline definition if present, else the reference name."""
        if self.definition is not None and self.definition.name:
            return self.definition.name
        return self.name

    def keys(self) -> Tuple[RefKey, ...]:
        """Lookup keys in priority order: id first, then name."""
        keys: Tuple[RefKey, ...] = ()
        if self.id is not None:
            keys += (ById(self.id),)
        if self.name:
            keys += (ByName(self.name),)
        return keys

    def with_identity(self, part_id: Optional[int], name: str) -> "PartReference":
        """Return a copy carrying the canonical id and name of its definition."""
        return replace(self, id=part_id, name=name)

    def to_dict(self, include_apply_duration: bool = True) -> Dict[str, Any]:
        """
        Serialize to the saved-document shape.

        Technique and Item saves have no duration flag; pass
        ``include_apply_duration=False`` for those.
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "op_1_lvl": self.op_1_lvl,
            "op_2_lvl": self.op_2_lvl,
            "op_3_lvl": self.op_3_lvl,
        }
        if include_apply_duration:
            data["applyDuration"] = self.apply_duration
        return data

    @classmethod
    def from_payload(
        cls, payload: Union["PartReference", Mapping[str, Any]]
    ) -> "PartReference":
        """
        Normalize any accepted reference shape.

        Accepts saved references (``{"id", "name", "op_1_lvl", ...}``), UI
        references with an inline ``part``/``property`` definition, and the
        legacy alias keys. Missing or ``None`` levels become 0.

        Raises:
            InvalidReferenceError: If ``payload`` is not a mapping or PartReference.
            CatalogEntryError: If an inline definition is malformed.

        Example:
            >>> PartReference.from_payload({"name": "Power Range", "opt1Level": 2}).op_1_lvl
            2
        """
        if isinstance(payload, PartReference):
            return payload
        if not isinstance(payload, Mapping):
            raise InvalidReferenceError(payload)

        inline = _first_present(payload, "part", "property")
        definition = PartDefinition.from_mapping(inline) if inline is not None else None

        raw_name = payload.get("name")
        levels = [coerce_level(_first_present(payload, *keys)) for keys in _LEVEL_KEYS]
        apply_duration = _first_present(payload, "apply_duration", "applyDuration")

        return cls(
            id=coerce_id(payload.get("id")),
            name=str(raw_name) if raw_name else None,
            op_1_lvl=levels[0],
            op_2_lvl=levels[1],
            op_3_lvl=levels[2],
            apply_duration=bool(apply_duration),
            definition=definition,
        )
