"""
Realms mechanic cost engine.

Derives Energy, Training Point, Item Power and currency costs, rarity tiers
and display strings for Powers, Techniques and Items from a catalog of part
and property definitions.

Usage
-----
    from realms_mechanics import StaticCatalogProvider, calculate_power_costs

    catalog = StaticCatalogProvider(rows)
    result = calculate_power_costs(power["parts"], catalog)
    result.to_dict()   # {"totalEnergy": ..., "totalTP": ..., ...}

Logging is left to the host; call ``realms_mechanics.core.setup_logging()``
to use the engine's structured logging stack.
"""

from realms_mechanics.domain.models import (
    ById,
    ByName,
    DamageConfig,
    ItemCostResult,
    ItemDisplay,
    PartChip,
    PartDefinition,
    PartReference,
    PowerCostResult,
    PowerDisplay,
    Proficiency,
    RarityBracket,
    RarityResult,
    TechniqueCostResult,
    TechniqueDisplay,
)
from realms_mechanics.modules.catalog import (
    CatalogProvider,
    StaticCatalogProvider,
    find_by_id_or_name_value,
    normalize_ref,
    normalize_refs,
    resolve,
)
from realms_mechanics.modules.item import (
    calculate_currency_cost_and_rarity,
    calculate_item_costs,
    derive_damage_reduction,
    derive_item_display,
    extract_proficiencies,
    format_item_damage,
    format_item_range,
    format_proficiency_chip,
    is_general_property,
)
from realms_mechanics.modules.mechanics import (
    ActionConfig,
    AreaConfig,
    ArmamentConfig,
    DurationConfig,
    MechanicBuilderContext,
    RangeConfig,
    WeaponConfig,
    build_item_properties,
    build_mechanic_parts,
    build_power_mechanic_parts,
    build_technique_mechanic_parts,
)
from realms_mechanics.modules.power import (
    calculate_power_costs,
    compute_action_type_from_selection,
    compute_power_action_type,
    derive_area,
    derive_duration,
    derive_power_display,
    derive_range,
    format_power_damage,
    format_power_part_chip,
)
from realms_mechanics.modules.shared import (
    CatalogEntryError,
    InvalidReferenceError,
    RealmsDomainException,
    compute_splits,
)
from realms_mechanics.modules.technique import (
    calculate_technique_costs,
    compute_technique_action_type,
    derive_technique_display,
    format_technique_damage,
    format_technique_part_chip,
)

__version__ = "1.0.0"

__all__ = [
    # Models
    "ById",
    "ByName",
    "DamageConfig",
    "ItemCostResult",
    "ItemDisplay",
    "PartChip",
    "PartDefinition",
    "PartReference",
    "PowerCostResult",
    "PowerDisplay",
    "Proficiency",
    "RarityBracket",
    "RarityResult",
    "TechniqueCostResult",
    "TechniqueDisplay",
    # Catalog
    "CatalogProvider",
    "StaticCatalogProvider",
    "find_by_id_or_name_value",
    "normalize_ref",
    "normalize_refs",
    "resolve",
    # Builders
    "ActionConfig",
    "AreaConfig",
    "ArmamentConfig",
    "DurationConfig",
    "MechanicBuilderContext",
    "RangeConfig",
    "WeaponConfig",
    "build_item_properties",
    "build_mechanic_parts",
    "build_power_mechanic_parts",
    "build_technique_mechanic_parts",
    # Powers
    "calculate_power_costs",
    "compute_action_type_from_selection",
    "compute_power_action_type",
    "derive_area",
    "derive_duration",
    "derive_power_display",
    "derive_range",
    "format_power_damage",
    "format_power_part_chip",
    # Techniques
    "calculate_technique_costs",
    "compute_technique_action_type",
    "derive_technique_display",
    "format_technique_damage",
    "format_technique_part_chip",
    # Items
    "calculate_currency_cost_and_rarity",
    "calculate_item_costs",
    "derive_damage_reduction",
    "derive_item_display",
    "extract_proficiencies",
    "format_item_damage",
    "format_item_range",
    "format_proficiency_chip",
    "is_general_property",
    # Errors & formulas
    "CatalogEntryError",
    "InvalidReferenceError",
    "RealmsDomainException",
    "compute_splits",
]
