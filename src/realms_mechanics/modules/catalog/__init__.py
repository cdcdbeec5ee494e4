"""
Catalog lookup and providers.

Resolves loose part/property references against an in-memory catalog and
defines the provider protocol hosts implement to supply that catalog.
"""

from .lookup import (
    Catalog,
    as_catalog,
    as_references,
    find_by_id_or_name_value,
    find_by_key,
    find_marker,
    matches_part,
    normalize_ref,
    normalize_refs,
    resolve,
    resolve_part_key,
)
from .provider import CatalogProvider, StaticCatalogProvider

__all__ = [
    "Catalog",
    "CatalogProvider",
    "StaticCatalogProvider",
    "as_catalog",
    "as_references",
    "find_by_id_or_name_value",
    "find_by_key",
    "find_marker",
    "matches_part",
    "normalize_ref",
    "normalize_refs",
    "resolve",
    "resolve_part_key",
]
