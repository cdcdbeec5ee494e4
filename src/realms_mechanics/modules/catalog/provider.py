"""
Catalog providers.

The engine never fetches the catalog itself. Hosts hand it either a plain
sequence of definitions/rows or an object satisfying ``CatalogProvider``;
the provider's lifetime and refresh policy belong to the host.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, Sequence, Tuple, Union, runtime_checkable

from realms_mechanics.core.logging.logger import get_logger
from realms_mechanics.domain.models.part import PartDefinition

logger = get_logger(__name__)

CatalogEntry = Union[PartDefinition, Mapping[str, Any]]


@runtime_checkable
class CatalogProvider(Protocol):
    """Anything that can hand over the current part/property definitions."""

    def get_parts(self) -> Sequence[PartDefinition]:
        ...


class StaticCatalogProvider:
    """
    In-memory provider over a fixed sequence of catalog rows.

    Rows are converted to PartDefinition once, at construction.

    Raises:
        CatalogEntryError: If any row is malformed.

    Example:
        >>> provider = StaticCatalogProvider([{"id": 292, "name": "Power Range"}])
        >>> provider.get_parts()[0].name
        'Power Range'
    """

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        self._parts: Tuple[PartDefinition, ...] = tuple(
            PartDefinition.from_mapping(entry) for entry in entries
        )
        logger.debug(
            "Static catalog loaded",
            extra={"part_count": len(self._parts)},
        )

    def get_parts(self) -> Sequence[PartDefinition]:
        return self._parts

    def __len__(self) -> int:
        return len(self._parts)

    def __repr__(self) -> str:
        return f"StaticCatalogProvider(parts={len(self._parts)})"
