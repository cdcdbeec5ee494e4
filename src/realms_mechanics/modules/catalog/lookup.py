"""
Catalog lookup.

Purpose
-------
Resolve loose references (numeric id, name, or inline definition) against a
catalog of part/property definitions, and normalize legacy name-only saves
to carry canonical ids.

Design Notes
------------
- Resolution order: inline definition, then exact id, then exact
  case-sensitive name.
- A miss is ``None``, never an exception. Only structurally invalid input
  (a catalog row or reference payload of the wrong type) raises, and it does
  so while the input is being normalized, before any lookup happens.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from realms_mechanics.domain.models.part import PartDefinition, coerce_id
from realms_mechanics.domain.models.reference import ById, ByName, PartReference, RefKey
from realms_mechanics.modules.catalog.provider import CatalogEntry, CatalogProvider
from realms_mechanics.modules.shared.constants import PartKey

Catalog = Sequence[PartDefinition]
CatalogSource = Union[CatalogProvider, Iterable[CatalogEntry], None]
ReferenceLike = Union[PartReference, Mapping[str, Any]]


# ============================================================================
# INPUT NORMALIZATION
# ============================================================================


def as_catalog(source: CatalogSource) -> Tuple[PartDefinition, ...]:
    """
    Normalize a provider, a sequence of rows, or ``None`` into definitions.

    Raises:
        CatalogEntryError: If a row is malformed.
    """
    if source is None:
        return ()
    if isinstance(source, CatalogProvider):
        source = source.get_parts()
    return tuple(PartDefinition.from_mapping(entry) for entry in source)


def as_references(refs: Optional[Iterable[ReferenceLike]]) -> Tuple[PartReference, ...]:
    """
    Normalize a list of references; ``None`` is an empty list.

    Raises:
        InvalidReferenceError: If an element is not a mapping or PartReference.
    """
    if refs is None:
        return ()
    return tuple(PartReference.from_payload(ref) for ref in refs)


# ============================================================================
# LOOKUP
# ============================================================================


def find_by_key(catalog: Catalog, key: RefKey) -> Optional[PartDefinition]:
    """First definition matching a tagged key, or ``None``."""
    if isinstance(key, ById):
        return next((d for d in catalog if d.id is not None and d.id == key.id), None)
    if isinstance(key, ByName):
        return next((d for d in catalog if d.name == key.name), None)
    return None


def resolve(catalog: Catalog, ref: ReferenceLike) -> Optional[PartDefinition]:
    """
    Resolve a reference to its definition.

    The inline definition wins; otherwise id, then name.

    Example:
        >>> resolve(catalog, {"name": "Power Range"}).id
        292
    """
    ref = PartReference.from_payload(ref)
    if ref.definition is not None:
        return ref.definition
    for key in ref.keys():
        found = find_by_key(catalog, key)
        if found is not None:
            return found
    return None


def resolve_part_key(catalog: Catalog, part: PartKey) -> Optional[PartDefinition]:
    """Resolve a well-known part by its id, falling back to its canonical name."""
    found = None
    if part.id is not None:
        found = find_by_key(catalog, ById(part.id))
    if found is None:
        found = find_by_key(catalog, ByName(part.name))
    return found


def find_by_id_or_name_value(catalog: Catalog, value: Any) -> Optional[PartDefinition]:
    """
    Resolve a bare id-or-name value.

    - int: id match
    - numeric string: id match, then name match
    - other string: name match
    - anything else: ``None``
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return find_by_key(catalog, ById(value))
    if isinstance(value, str):
        numeric = coerce_id(value)
        if numeric is not None:
            found = find_by_key(catalog, ById(numeric))
            if found is not None:
                return found
        return find_by_key(catalog, ByName(value))
    return None


def normalize_ref(catalog: Catalog, ref: ReferenceLike) -> PartReference:
    """
    Fill in the canonical id and name of a reference.

    Unresolvable references are returned unchanged.
    """
    ref = PartReference.from_payload(ref)
    found = resolve(catalog, ref)
    if found is None:
        return ref
    return ref.with_identity(found.id, found.name)


def normalize_refs(refs: Optional[Iterable[ReferenceLike]], catalog: Catalog) -> List[PartReference]:
    """Apply ``normalize_ref`` to every reference of a saved document."""
    return [normalize_ref(catalog, ref) for ref in as_references(refs)]


def matches_part(ref: PartReference, part: PartKey) -> bool:
    """
    Whether a reference points at a well-known part, by id or by name.

    Used by the display derivers, which scan references without a catalog.
    """
    part_id = ref.effective_id
    if part.id is not None and part_id is not None and part_id == part.id:
        return True
    return ref.effective_name == part.name


def find_marker(refs: Sequence[PartReference], part: PartKey) -> Optional[PartReference]:
    """First reference pointing at ``part``, or ``None``."""
    return next((ref for ref in refs if matches_part(ref, part)), None)
