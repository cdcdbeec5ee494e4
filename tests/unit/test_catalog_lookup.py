"""
Unit Tests for Catalog Lookup
=============================

Test Coverage
-------------
- Reference resolution order (inline definition, id, name)
- Bare id-or-name value lookup
- Legacy name-only reference normalization
- Catalog providers

Testing Strategy
----------------
- AAA pattern (Arrange, Act, Assert)
- Test one behavior per test
"""

import pytest

from realms_mechanics.domain.models import PartDefinition, PartReference
from realms_mechanics.modules.catalog import (
    CatalogProvider,
    StaticCatalogProvider,
    as_catalog,
    find_by_id_or_name_value,
    normalize_ref,
    normalize_refs,
    resolve,
)
from realms_mechanics.modules.item import calculate_item_costs
from realms_mechanics.modules.shared.exceptions import CatalogEntryError


@pytest.fixture
def catalog(item_properties):
    return as_catalog(item_properties)


# ============================================================================
# RESOLVE
# ============================================================================


@pytest.mark.unit
class TestResolve:
    """Test resolve()."""

    def test_resolves_by_id(self, catalog):
        """An id reference finds its definition."""
        # Act
        found = resolve(catalog, {"id": 13})

        # Assert
        assert found is not None
        assert found.name == "Range"

    def test_resolves_by_name(self, catalog):
        """A name-only reference finds its definition."""
        found = resolve(catalog, {"name": "Two-Handed"})

        assert found is not None
        assert found.id == 14

    def test_falls_back_to_name_when_id_is_stale(self, catalog):
        """An unknown id with a known name still resolves by name."""
        found = resolve(catalog, {"id": 9999, "name": "Range"})

        assert found is not None
        assert found.id == 13

    def test_id_wins_over_name(self, catalog):
        """When both match different entries, the id match is used."""
        found = resolve(catalog, {"id": 13, "name": "Two-Handed"})

        assert found.name == "Range"

    def test_inline_definition_wins(self, catalog):
        """A reference carrying its own definition never consults the catalog."""
        # Arrange
        ref = {"id": 13, "property": {"id": 777, "name": "Homebrew", "base_ip": 9}}

        # Act
        found = resolve(catalog, ref)

        # Assert
        assert found.id == 777
        assert found.base_ip == 9

    def test_name_match_is_case_sensitive(self, catalog):
        """Names must match exactly."""
        assert resolve(catalog, {"name": "range"}) is None

    def test_unknown_reference_is_none(self, catalog):
        """Nothing matching yields None rather than an error."""
        assert resolve(catalog, {"id": 9999}) is None
        assert resolve(catalog, {}) is None

    def test_empty_catalog(self):
        """An empty catalog resolves nothing."""
        assert resolve((), {"id": 13}) is None


# ============================================================================
# ID-OR-NAME VALUES
# ============================================================================


@pytest.mark.unit
class TestFindByIdOrNameValue:
    """Test find_by_id_or_name_value()."""

    def test_int_matches_id(self, catalog):
        assert find_by_id_or_name_value(catalog, 13).name == "Range"

    def test_numeric_string_matches_id(self, catalog):
        assert find_by_id_or_name_value(catalog, "13").name == "Range"

    def test_plain_string_matches_name(self, catalog):
        assert find_by_id_or_name_value(catalog, "Finesse").id == 26

    def test_numeric_string_falls_back_to_name(self):
        """A numeric string with no id match is tried as a name."""
        # Arrange
        catalog = as_catalog([{"id": 50, "name": "42"}])

        # Act
        found = find_by_id_or_name_value(catalog, "42")

        # Assert
        assert found.id == 50

    def test_unmatched_values_are_none(self, catalog):
        assert find_by_id_or_name_value(catalog, 999) is None
        assert find_by_id_or_name_value(catalog, "Nope") is None
        assert find_by_id_or_name_value(catalog, None) is None


# ============================================================================
# NORMALIZATION
# ============================================================================


@pytest.mark.unit
class TestNormalizeRef:
    """Test normalize_ref() / normalize_refs()."""

    def test_fills_canonical_id(self, catalog):
        """A legacy name-only save gains its catalog id."""
        # Act
        ref = normalize_ref(catalog, {"name": "Range", "op_1_lvl": 1})

        # Assert
        assert ref.id == 13
        assert ref.name == "Range"
        assert ref.op_1_lvl == 1

    def test_fills_canonical_name(self, catalog):
        ref = normalize_ref(catalog, {"id": "14"})

        assert ref.name == "Two-Handed"

    def test_unresolved_reference_unchanged(self, catalog):
        """Unknown references come back as they were."""
        # Arrange
        original = PartReference(name="Lost Property", op_1_lvl=2)

        # Act
        ref = normalize_ref(catalog, original)

        # Assert
        assert ref == original

    def test_normalize_refs_keeps_order(self, catalog):
        refs = normalize_refs([{"name": "Finesse"}, {"name": "Range"}], catalog)

        assert [r.id for r in refs] == [26, 13]

    def test_normalize_refs_accepts_none(self, catalog):
        assert normalize_refs(None, catalog) == []


# ============================================================================
# PROVIDERS
# ============================================================================


@pytest.mark.unit
class TestCatalogProviders:
    """Test StaticCatalogProvider and the CatalogProvider protocol."""

    def test_static_provider_converts_rows(self, item_properties):
        # Act
        provider = StaticCatalogProvider(item_properties)

        # Assert
        assert len(provider) == len(item_properties)
        assert all(isinstance(p, PartDefinition) for p in provider.get_parts())

    def test_static_provider_satisfies_protocol(self, item_properties):
        assert isinstance(StaticCatalogProvider(item_properties), CatalogProvider)

    def test_static_provider_rejects_malformed_rows(self):
        with pytest.raises(CatalogEntryError):
            StaticCatalogProvider([{"description": "no id or name"}])

    def test_calculators_accept_a_provider(self, mocker, item_properties):
        """Any object with get_parts() can stand in for the catalog."""
        # Arrange
        provider = mocker.Mock(spec=["get_parts"])
        provider.get_parts.return_value = item_properties

        # Act
        result = calculate_item_costs([{"id": 26}], provider)

        # Assert
        provider.get_parts.assert_called_once()
        assert result.total_ip == 1.5
