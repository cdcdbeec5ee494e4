"""
Realms Mechanics Catalog Constants

Purpose
-------
Provide the catalog identifiers the engine recognises by meaning: action
parts, damage parts, area parts, range, duration parts and their modifiers,
and the general item properties. Every identifier is paired with its
canonical catalog name because saved documents from before the catalog was
numbered reference parts by name only.

Design Notes
------------
- Values are annotated with typing.Final to signal immutability
- Grouped by game system (actions, damage, area, duration, items)
- Name-keyed maps (damage type, area shape, duration unit) are what the
  mechanic builder uses to translate UI selections into catalog parts
- Balance numbers that a designer may tune (rarity brackets, surcharge rate,
  range steps) live in balance/*.yaml and are read through ConfigManager
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, FrozenSet, Mapping, NamedTuple, Optional, Tuple


class PartKey(NamedTuple):
    """Catalog identifier for a well-known part: numeric id plus canonical name."""

    id: Optional[int]
    name: str


# ============================================================================
# PART IDS (Power & Technique Parts)
# ============================================================================

# Technique damage
TRUE_DAMAGE: Final[int] = 1
SPLIT_DAMAGE_DICE: Final[int] = 5
ADDITIONAL_DAMAGE: Final[int] = 6

# Technique action modifiers
REACTION: Final[int] = 2
LONG_ACTION: Final[int] = 3
QUICK_OR_FREE_ACTION: Final[int] = 4

# Power action modifiers
POWER_LONG_ACTION: Final[int] = 81
POWER_REACTION: Final[int] = 82
POWER_QUICK_OR_FREE_ACTION: Final[int] = 83

# Weapon / attack parts
ADD_WEAPON_ATTACK: Final[int] = 7
RECKLESS: Final[int] = 8
PASS_THROUGH: Final[int] = 9
SPIN: Final[int] = 10
STUN: Final[int] = 11
WIND_UP: Final[int] = 12
KNOCKBACK: Final[int] = 13
SLOW: Final[int] = 14
DAZE: Final[int] = 15
WIDE_SWING: Final[int] = 16
ENEMY_STRENGTH_REDUCTION: Final[int] = 17
REACH: Final[int] = 18
EXPOSE: Final[int] = 19
ENEMY_ATTACK_REDUCTION: Final[int] = 20
BLEED: Final[int] = 21

# Area of effect parts
LINE_OF_EFFECT: Final[int] = 88
CONE_OF_EFFECT: Final[int] = 89
CYLINDER_OF_EFFECT: Final[int] = 231
SPHERE_OF_EFFECT: Final[int] = 232
TRAIL_OF_EFFECT: Final[int] = 233
PIERCE_TARGETS_ON_PATH: Final[int] = 234
ADD_MULTIPLE_TARGETS: Final[int] = 235
EXPANDING_AREA_OF_EFFECT: Final[int] = 236
TARGET_ONE_IN_AREA: Final[int] = 237
EXCLUDE_AREA: Final[int] = 238

# Power range
POWER_RANGE: Final[int] = 292

# Power damage
MAGIC_DAMAGE: Final[int] = 294
LIGHT_DAMAGE: Final[int] = 295
PHYSICAL_DAMAGE: Final[int] = 296
ELEMENTAL_DAMAGE: Final[int] = 297
POISON_OR_NECROTIC_DAMAGE: Final[int] = 298
SONIC_DAMAGE: Final[int] = 299
SPIRITUAL_DAMAGE: Final[int] = 300
PSYCHIC_DAMAGE: Final[int] = 301

# Duration parts
DURATION_PERMANENT: Final[int] = 306
DURATION_DAYS: Final[int] = 375
DURATION_HOUR: Final[int] = 376
DURATION_ROUND: Final[int] = 377
DURATION_MINUTE: Final[int] = 378

# Duration modifiers
DURATION_ENDS_ON_ACTIVATION: Final[int] = 302
DURATION_NO_HARM: Final[int] = 303
DURATION_FOCUS: Final[int] = 304
DURATION_SUSTAIN: Final[int] = 305

# The catalog has no numbered power split-dice part; it resolves by name.
POWER_SPLIT_DAMAGE_DICE: Final[Optional[int]] = None


# ============================================================================
# WELL-KNOWN PARTS (id + canonical name)
# ============================================================================

PART_REACTION: Final = PartKey(REACTION, "Reaction")
PART_QUICK_OR_FREE_ACTION: Final = PartKey(QUICK_OR_FREE_ACTION, "Quick or Free Action")
PART_LONG_ACTION: Final = PartKey(LONG_ACTION, "Long Action")

PART_POWER_REACTION: Final = PartKey(POWER_REACTION, "Power Reaction")
PART_POWER_QUICK_OR_FREE_ACTION: Final = PartKey(
    POWER_QUICK_OR_FREE_ACTION, "Power Quick or Free Action"
)
PART_POWER_LONG_ACTION: Final = PartKey(POWER_LONG_ACTION, "Power Long Action")

PART_ADDITIONAL_DAMAGE: Final = PartKey(ADDITIONAL_DAMAGE, "Additional Damage")
PART_SPLIT_DAMAGE_DICE: Final = PartKey(SPLIT_DAMAGE_DICE, "Split Damage Dice")
PART_POWER_SPLIT_DAMAGE_DICE: Final = PartKey(POWER_SPLIT_DAMAGE_DICE, "Power Split Damage Dice")
PART_ADD_WEAPON_ATTACK: Final = PartKey(ADD_WEAPON_ATTACK, "Add Weapon Attack")
PART_POWER_RANGE: Final = PartKey(POWER_RANGE, "Power Range")

PART_MAGIC_DAMAGE: Final = PartKey(MAGIC_DAMAGE, "Magic Damage")
PART_LIGHT_DAMAGE: Final = PartKey(LIGHT_DAMAGE, "Light Damage")
PART_PHYSICAL_DAMAGE: Final = PartKey(PHYSICAL_DAMAGE, "Physical Damage")
PART_ELEMENTAL_DAMAGE: Final = PartKey(ELEMENTAL_DAMAGE, "Elemental Damage")
PART_POISON_OR_NECROTIC_DAMAGE: Final = PartKey(
    POISON_OR_NECROTIC_DAMAGE, "Poison or Necrotic Damage"
)
PART_SONIC_DAMAGE: Final = PartKey(SONIC_DAMAGE, "Sonic Damage")
PART_SPIRITUAL_DAMAGE: Final = PartKey(SPIRITUAL_DAMAGE, "Spiritual Damage")
PART_PSYCHIC_DAMAGE: Final = PartKey(PSYCHIC_DAMAGE, "Psychic Damage")

PART_SPHERE_OF_EFFECT: Final = PartKey(SPHERE_OF_EFFECT, "Sphere of Effect")
PART_CYLINDER_OF_EFFECT: Final = PartKey(CYLINDER_OF_EFFECT, "Cylinder of Effect")
PART_CONE_OF_EFFECT: Final = PartKey(CONE_OF_EFFECT, "Cone of Effect")
PART_LINE_OF_EFFECT: Final = PartKey(LINE_OF_EFFECT, "Line of Effect")
PART_TRAIL_OF_EFFECT: Final = PartKey(TRAIL_OF_EFFECT, "Trail of Effect")

PART_DURATION_ROUND: Final = PartKey(DURATION_ROUND, "Duration (Round)")
PART_DURATION_MINUTE: Final = PartKey(DURATION_MINUTE, "Duration (Minute)")
PART_DURATION_HOUR: Final = PartKey(DURATION_HOUR, "Duration (Hour)")
PART_DURATION_DAYS: Final = PartKey(DURATION_DAYS, "Duration (Days)")
PART_DURATION_PERMANENT: Final = PartKey(DURATION_PERMANENT, "Duration (Permanent)")

PART_DURATION_FOCUS: Final = PartKey(DURATION_FOCUS, "Focus for Duration")
PART_DURATION_NO_HARM: Final = PartKey(DURATION_NO_HARM, "No Harm or Adaptation for Duration")
PART_DURATION_ENDS_ON_ACTIVATION: Final = PartKey(
    DURATION_ENDS_ON_ACTIVATION, "Duration Ends On Activation"
)
PART_DURATION_SUSTAIN: Final = PartKey(DURATION_SUSTAIN, "Sustain for Duration")


# ============================================================================
# UI SELECTION → PART MAPS
# ============================================================================

DAMAGE_TYPE_PARTS: Final[Mapping[str, PartKey]] = MappingProxyType({
    "magic": PART_MAGIC_DAMAGE,
    "light": PART_LIGHT_DAMAGE,
    "radiant": PART_LIGHT_DAMAGE,
    "fire": PART_ELEMENTAL_DAMAGE,
    "cold": PART_ELEMENTAL_DAMAGE,
    "ice": PART_ELEMENTAL_DAMAGE,
    "lightning": PART_ELEMENTAL_DAMAGE,
    "acid": PART_ELEMENTAL_DAMAGE,
    "poison": PART_POISON_OR_NECROTIC_DAMAGE,
    "necrotic": PART_POISON_OR_NECROTIC_DAMAGE,
    "sonic": PART_SONIC_DAMAGE,
    "spiritual": PART_SPIRITUAL_DAMAGE,
    "psychic": PART_PSYCHIC_DAMAGE,
    "physical": PART_PHYSICAL_DAMAGE,
    "bludgeoning": PART_PHYSICAL_DAMAGE,
    "piercing": PART_PHYSICAL_DAMAGE,
    "slashing": PART_PHYSICAL_DAMAGE,
})

AREA_TYPE_PARTS: Final[Mapping[str, PartKey]] = MappingProxyType({
    "sphere": PART_SPHERE_OF_EFFECT,
    "cylinder": PART_CYLINDER_OF_EFFECT,
    "cone": PART_CONE_OF_EFFECT,
    "line": PART_LINE_OF_EFFECT,
    "trail": PART_TRAIL_OF_EFFECT,
})

# Display order matters: the first shape present wins.
AREA_SHAPES: Final[Tuple[Tuple[str, PartKey], ...]] = (
    ("Sphere", PART_SPHERE_OF_EFFECT),
    ("Cylinder", PART_CYLINDER_OF_EFFECT),
    ("Cone", PART_CONE_OF_EFFECT),
    ("Line", PART_LINE_OF_EFFECT),
    ("Trail", PART_TRAIL_OF_EFFECT),
)

DURATION_TYPE_PARTS: Final[Mapping[str, PartKey]] = MappingProxyType({
    "rounds": PART_DURATION_ROUND,
    "minutes": PART_DURATION_MINUTE,
    "hours": PART_DURATION_HOUR,
    "days": PART_DURATION_DAYS,
    "permanent": PART_DURATION_PERMANENT,
})

# UI value → option-1 level index used by the mechanic builder
BUILDER_MINUTE_VALUES: Final[Tuple[int, ...]] = (1, 10, 30)
BUILDER_HOUR_VALUES: Final[Tuple[int, ...]] = (1, 6, 12)
BUILDER_DAY_VALUES: Final[Tuple[int, ...]] = (1, 7, 14)

# Option-1 level → displayed quantity used by the duration deriver
DISPLAY_MINUTE_VALUES: Final[Tuple[int, ...]] = (1, 10, 30)
DISPLAY_HOUR_VALUES: Final[Tuple[int, ...]] = (1, 6, 12)
DISPLAY_DAY_VALUES: Final[Tuple[int, ...]] = (1, 10, 20, 30)

ACTION_SELECTIONS: Final[Mapping[str, str]] = MappingProxyType({
    "basic": "Basic",
    "quick": "Quick",
    "free": "Free",
    "long3": "Long (3)",
    "long4": "Long (4)",
})

# Selector value → (action kind, option-1 level)
ACTION_SELECTION_LEVELS: Final[Mapping[str, Tuple[str, int]]] = MappingProxyType({
    "quick": ("quick_or_free", 0),
    "free": ("quick_or_free", 1),
    "long3": ("long", 0),
    "long4": ("long", 1),
})


# ============================================================================
# DICE
# ============================================================================

VALID_DIE_SIZES: Final[FrozenSet[int]] = frozenset({4, 6, 8, 10, 12})
D12: Final[int] = 12


# ============================================================================
# PROPERTY IDS (Item Properties)
# ============================================================================

# General / base properties
PROPERTY_DAMAGE_REDUCTION: Final[int] = 1
PROPERTY_ARMOR_STRENGTH_REQUIREMENT: Final[int] = 2
PROPERTY_ARMOR_AGILITY_REQUIREMENT: Final[int] = 3
PROPERTY_ARMOR_VITALITY_REQUIREMENT: Final[int] = 4
PROPERTY_AGILITY_REDUCTION: Final[int] = 5
PROPERTY_WEAPON_STRENGTH_REQUIREMENT: Final[int] = 6
PROPERTY_WEAPON_AGILITY_REQUIREMENT: Final[int] = 7
PROPERTY_WEAPON_VITALITY_REQUIREMENT: Final[int] = 8
PROPERTY_WEAPON_ACUITY_REQUIREMENT: Final[int] = 9
PROPERTY_WEAPON_INTELLIGENCE_REQUIREMENT: Final[int] = 10
PROPERTY_WEAPON_CHARISMA_REQUIREMENT: Final[int] = 11
PROPERTY_SPLIT_DAMAGE_DICE: Final[int] = 12
PROPERTY_RANGE: Final[int] = 13
PROPERTY_TWO_HANDED: Final[int] = 14
PROPERTY_SHIELD_BASE: Final[int] = 15
PROPERTY_ARMOR_BASE: Final[int] = 16
PROPERTY_WEAPON_DAMAGE: Final[int] = 17

# Combat properties
PROPERTY_DAMAGE_TYPE_RESISTANCE: Final[int] = 18
PROPERTY_BLUDGEONING_VULNERABILITY: Final[int] = 19
PROPERTY_PIERCING_VULNERABILITY: Final[int] = 20
PROPERTY_SLASHING_VULNERABILITY: Final[int] = 21
PROPERTY_CRITICAL_RANGE_PLUS_1: Final[int] = 22
PROPERTY_CRITICAL_RANGE: Final[int] = 23
PROPERTY_CRITICAL_MULTIPLIER: Final[int] = 24
PROPERTY_THROWN: Final[int] = 25
PROPERTY_FINESSE: Final[int] = 26
PROPERTY_DAMAGED: Final[int] = 27
PROPERTY_GRAZE: Final[int] = 28
PROPERTY_LOADING: Final[int] = 29
PROPERTY_KNOCKBACK: Final[int] = 30
PROPERTY_WOUNDING: Final[int] = 31
PROPERTY_SLOW: Final[int] = 32
PROPERTY_TOPPLE: Final[int] = 33
PROPERTY_EXPOSE: Final[int] = 34
PROPERTY_CHARGING: Final[int] = 35
PROPERTY_HIDDEN: Final[int] = 36
PROPERTY_AMMUNITION: Final[int] = 37
PROPERTY_BLEED: Final[int] = 38
PROPERTY_SHIELD_AMOUNT: Final[int] = 39
PROPERTY_SHIELD_DAMAGE: Final[int] = 40
PROPERTY_REACH: Final[int] = 41
PROPERTY_MOUNTED: Final[int] = 42
PROPERTY_VERSATILE: Final[int] = 43
PROPERTY_CLEAVE: Final[int] = 44
PROPERTY_INTERCHANGEABLE: Final[int] = 45
PROPERTY_BLOCK: Final[int] = 46
PROPERTY_QUICK: Final[int] = 47
PROPERTY_PULL: Final[int] = 48

PROP_DAMAGE_REDUCTION: Final = PartKey(PROPERTY_DAMAGE_REDUCTION, "Damage Reduction")
PROP_AGILITY_REDUCTION: Final = PartKey(PROPERTY_AGILITY_REDUCTION, "Agility Reduction")
PROP_SPLIT_DAMAGE_DICE: Final = PartKey(PROPERTY_SPLIT_DAMAGE_DICE, "Split Damage Dice")
PROP_RANGE: Final = PartKey(PROPERTY_RANGE, "Range")
PROP_TWO_HANDED: Final = PartKey(PROPERTY_TWO_HANDED, "Two-Handed")
PROP_SHIELD_BASE: Final = PartKey(PROPERTY_SHIELD_BASE, "Shield Base")
PROP_ARMOR_BASE: Final = PartKey(PROPERTY_ARMOR_BASE, "Armor Base")
PROP_WEAPON_DAMAGE: Final = PartKey(PROPERTY_WEAPON_DAMAGE, "Weapon Damage")
PROP_CRITICAL_RANGE_PLUS_1: Final = PartKey(PROPERTY_CRITICAL_RANGE_PLUS_1, "Critical Range +1")
PROP_SHIELD_AMOUNT: Final = PartKey(PROPERTY_SHIELD_AMOUNT, "Shield Amount")
PROP_SHIELD_DAMAGE: Final = PartKey(PROPERTY_SHIELD_DAMAGE, "Shield Damage")

WEAPON_REQUIREMENTS: Final[Mapping[str, PartKey]] = MappingProxyType({
    "STR": PartKey(PROPERTY_WEAPON_STRENGTH_REQUIREMENT, "Weapon Strength Requirement"),
    "AGI": PartKey(PROPERTY_WEAPON_AGILITY_REQUIREMENT, "Weapon Agility Requirement"),
    "VIT": PartKey(PROPERTY_WEAPON_VITALITY_REQUIREMENT, "Weapon Vitality Requirement"),
    "ACU": PartKey(PROPERTY_WEAPON_ACUITY_REQUIREMENT, "Weapon Acuity Requirement"),
    "INT": PartKey(PROPERTY_WEAPON_INTELLIGENCE_REQUIREMENT, "Weapon Intelligence Requirement"),
    "CHA": PartKey(PROPERTY_WEAPON_CHARISMA_REQUIREMENT, "Weapon Charisma Requirement"),
})

ARMOR_REQUIREMENTS: Final[Mapping[str, PartKey]] = MappingProxyType({
    "STR": PartKey(PROPERTY_ARMOR_STRENGTH_REQUIREMENT, "Armor Strength Requirement"),
    "AGI": PartKey(PROPERTY_ARMOR_AGILITY_REQUIREMENT, "Armor Agility Requirement"),
    "VIT": PartKey(PROPERTY_ARMOR_VITALITY_REQUIREMENT, "Armor Vitality Requirement"),
})

# Built-in properties the item creator manages itself
GENERAL_PROPERTY_IDS: Final[FrozenSet[int]] = frozenset({
    PROPERTY_SHIELD_BASE,
    PROPERTY_ARMOR_BASE,
    PROPERTY_RANGE,
    PROPERTY_TWO_HANDED,
    PROPERTY_SPLIT_DAMAGE_DICE,
    PROPERTY_DAMAGE_REDUCTION,
    PROPERTY_WEAPON_DAMAGE,
    PROPERTY_AGILITY_REDUCTION,
    PROPERTY_WEAPON_STRENGTH_REQUIREMENT,
    PROPERTY_WEAPON_AGILITY_REQUIREMENT,
    PROPERTY_WEAPON_VITALITY_REQUIREMENT,
    PROPERTY_WEAPON_ACUITY_REQUIREMENT,
    PROPERTY_WEAPON_INTELLIGENCE_REQUIREMENT,
    PROPERTY_WEAPON_CHARISMA_REQUIREMENT,
    PROPERTY_ARMOR_STRENGTH_REQUIREMENT,
    PROPERTY_ARMOR_AGILITY_REQUIREMENT,
    PROPERTY_ARMOR_VITALITY_REQUIREMENT,
})

GENERAL_PROPERTY_NAMES: Final[FrozenSet[str]] = frozenset({
    "Shield Base",
    "Armor Base",
    "Range",
    "Two-Handed",
    "Split Damage Dice",
    "Damage Reduction",
    "Weapon Damage",
    "Agility Reduction",
    "Weapon Strength Requirement",
    "Weapon Agility Requirement",
    "Weapon Vitality Requirement",
    "Weapon Acuity Requirement",
    "Weapon Intelligence Requirement",
    "Weapon Charisma Requirement",
    "Armor Strength Requirement",
    "Armor Agility Requirement",
    "Armor Vitality Requirement",
})


# ============================================================================
# DISPLAY DEFAULTS
# ============================================================================

DEFAULT_POWER_RANGE: Final[str] = "1 space"
DEFAULT_POWER_AREA: Final[str] = "1 target"
DEFAULT_POWER_DURATION: Final[str] = "1 round"
DEFAULT_ITEM_RANGE: Final[str] = "Melee"
DEFAULT_ARMAMENT_TYPE: Final[str] = "Weapon"
UNARMED: Final[str] = "Unarmed"

# Code defaults for balance values also shipped in balance/*.yaml
DEFAULT_POWER_RANGE_BASE: Final[int] = 3
DEFAULT_POWER_RANGE_STEP: Final[int] = 3
DEFAULT_ITEM_RANGE_BASE: Final[int] = 8
DEFAULT_ITEM_RANGE_STEP: Final[int] = 8
DEFAULT_CURRENCY_SURCHARGE_RATE: Final[float] = 0.125
