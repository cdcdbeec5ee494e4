"""
Part / property definition model.

Purpose
-------
Immutable catalog entry describing one reusable rule building block: a Power
or Technique "part", or an Item "property". Definitions carry the base costs
and up to three option deltas that references scale by their option levels.

Responsibilities
----------------
- Build definitions from loose catalog rows (string ids, missing numbers)
- Expose option deltas as tuples so calculators can zip them with levels

Non-Responsibilities
--------------------
- Lookup (handled by realms_mechanics.modules.catalog)
- Cost arithmetic (handled by the creator calculators)

Design Notes
------------
- Only option 1 carries item IP and currency deltas; options 2 and 3 are
  Power/Technique only.
- Missing or non-numeric cost fields default to 0, mirroring how rows in the
  shared catalog omit zero columns.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from realms_mechanics.modules.shared.exceptions import CatalogEntryError

Number = Union[int, float]


# ============================================================================
# COERCION HELPERS
# ============================================================================


def coerce_id(value: Any) -> Optional[int]:
    """
    Coerce a catalog or reference id to ``int``.

    Accepts ints, integral floats and numeric strings (``"12"``, ``" 7 "``).
    Anything else, including booleans, yields ``None``.

    Example:
        >>> coerce_id("292")
        292
        >>> coerce_id("Power Range") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("+-").isdigit():
            return int(text)
    return None


def coerce_number(value: Any) -> Number:
    """Coerce a cost field to a number, keeping ints as ints; bad input → 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return 0
        if not math.isfinite(number):
            return 0
        return int(number) if number.is_integer() else number
    return 0


def coerce_level(value: Any) -> int:
    """Coerce an option level to ``int``; missing or malformed levels are 0."""
    number = coerce_number(value)
    return int(number)


# ============================================================================
# PART DEFINITION
# ============================================================================


@dataclass(frozen=True)
class PartDefinition:
    """
    Immutable catalog definition of a part or property.

    Attributes
    ----------
    id : Optional[int]
        Catalog id; ``None`` for legacy rows known only by name
    name : str
        Canonical, case-sensitive name
    mechanic : bool
        Whether the mechanic builder may emit this part automatically
    duration / percentage : bool
        Power energy buckets (multiplicative duration / percentage parts)
    base_en, base_tp, base_ip, base_c : Number
        Base energy, training points, item power and currency
    op_{1,2,3}_en, op_{1,2,3}_tp : Number
        Per-level deltas for each option
    op_1_ip, op_1_c : Number
        Per-level item deltas (option 1 only)
    """

    id: Optional[int]
    name: str
    description: str = ""
    category: str = ""
    item_type: str = ""

    mechanic: bool = False
    duration: bool = False
    percentage: bool = False

    base_en: Number = 0
    base_tp: Number = 0
    base_ip: Number = 0
    base_c: Number = 0

    op_1_en: Number = 0
    op_1_tp: Number = 0
    op_1_ip: Number = 0
    op_1_c: Number = 0
    op_1_desc: str = ""

    op_2_en: Number = 0
    op_2_tp: Number = 0
    op_2_desc: str = ""

    op_3_en: Number = 0
    op_3_tp: Number = 0
    op_3_desc: str = ""

    @property
    def option_energy(self) -> Tuple[Number, Number, Number]:
        return (self.op_1_en, self.op_2_en, self.op_3_en)

    @property
    def option_tp(self) -> Tuple[Number, Number, Number]:
        return (self.op_1_tp, self.op_2_tp, self.op_3_tp)

    def matches_id(self, part_id: int) -> bool:
        return self.id is not None and self.id == part_id

    @classmethod
    def from_mapping(cls, entry: Union["PartDefinition", Mapping[str, Any]]) -> "PartDefinition":
        """
        Build a definition from a catalog row.

        Raises:
            CatalogEntryError: If ``entry`` is not a mapping, or has neither
                a usable id nor a name.

        Example:
            >>> PartDefinition.from_mapping({"id": "296", "name": "Physical Damage"}).id
            296
        """
        if isinstance(entry, PartDefinition):
            return entry
        if not isinstance(entry, Mapping):
            raise CatalogEntryError("entry is not a mapping", entry)

        part_id = coerce_id(entry.get("id"))
        raw_name = entry.get("name")
        name = str(raw_name) if raw_name else ""
        if part_id is None and not name:
            raise CatalogEntryError("entry has neither an id nor a name", entry)

        def text(key: str) -> str:
            value = entry.get(key)
            return str(value) if value else ""

        def num(key: str) -> Number:
            return coerce_number(entry.get(key))

        return cls(
            id=part_id,
            name=name,
            description=text("description"),
            category=text("category"),
            item_type=text("type"),
            mechanic=bool(entry.get("mechanic")),
            duration=bool(entry.get("duration")),
            percentage=bool(entry.get("percentage")),
            base_en=num("base_en"),
            base_tp=num("base_tp"),
            base_ip=num("base_ip"),
            base_c=num("base_c"),
            op_1_en=num("op_1_en"),
            op_1_tp=num("op_1_tp"),
            op_1_ip=num("op_1_ip"),
            op_1_c=num("op_1_c"),
            op_1_desc=text("op_1_desc"),
            op_2_en=num("op_2_en"),
            op_2_tp=num("op_2_tp"),
            op_2_desc=text("op_2_desc"),
            op_3_en=num("op_3_en"),
            op_3_tp=num("op_3_tp"),
            op_3_desc=text("op_3_desc"),
        )
