"""
Pytest Configuration and Fixtures for the Realms mechanic engine
================================================================

Purpose
-------
Centralized fixtures for the test suite: small in-memory catalogs for the
Power, Technique and Item creators, and isolation of the balance-table
registry between tests.

Architecture Notes
------------------
- Catalog fixtures are plain catalog rows (dicts), the same shape a host
  passes in; calculators normalize them themselves
- ConfigManager is class-level state, so every test starts and ends with a
  reset cache
"""

from __future__ import annotations

import os

# Static config is read once at import; point it at the test environment first.
os.environ["REALMS_ENV"] = "testing"
os.environ["REALMS_LOG_LEVEL"] = "DEBUG"

from typing import Any, Dict, List

import pytest

from realms_mechanics.core.config import Config, ConfigManager


def pytest_configure(config):
    """Configure pytest environment."""
    Config.load()


# ============================================================================
# CONFIG ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def reset_config_manager():
    """
    Reset the balance-table cache around every test.

    Scope: function
    Uses: all tests (tests may load their own balance directory)
    """
    ConfigManager.reset()
    ConfigManager.reset_metrics()
    yield
    ConfigManager.reset()


@pytest.fixture
def balance_dir(tmp_path):
    """
    Empty balance directory for tests that write their own YAML.

    Scope: function
    """
    directory = tmp_path / "balance"
    directory.mkdir()
    return directory


# ============================================================================
# CATALOG FIXTURES
# ============================================================================


@pytest.fixture
def power_parts() -> List[Dict[str, Any]]:
    """
    Power part catalog rows.

    Scope: function
    Uses: power builder, calculator and display tests
    """
    return [
        {"id": 82, "name": "Power Reaction", "mechanic": True, "base_en": 1},
        {"id": 83, "name": "Power Quick or Free Action", "mechanic": True, "base_en": 1, "op_1_en": 1},
        {"id": 81, "name": "Power Long Action", "mechanic": True, "base_en": -1, "op_1_en": -0.5},
        {"id": 294, "name": "Magic Damage", "mechanic": True, "base_en": 1.5, "op_1_en": 0.75},
        {"id": 296, "name": "Physical Damage", "mechanic": True, "base_en": 1, "op_1_en": 0.5},
        {"id": 297, "name": "Elemental Damage", "mechanic": True, "base_en": 1, "op_1_en": 0.5},
        {"id": 401, "name": "Power Split Damage Dice", "mechanic": True, "base_en": 0.5, "op_1_en": 0.5},
        {"id": 292, "name": "Power Range", "mechanic": True, "base_en": 0, "op_1_en": 0.5},
        {"id": 232, "name": "Sphere of Effect", "mechanic": True, "base_en": 1, "op_1_en": 0.5},
        {"id": 89, "name": "Cone of Effect", "mechanic": True, "base_en": 1, "op_1_en": 0.5},
        {"id": 377, "name": "Duration (Round)", "mechanic": True, "duration": True, "base_en": 1.25, "op_1_en": 0.25},
        {"id": 378, "name": "Duration (Minute)", "mechanic": True, "duration": True, "base_en": 2, "op_1_en": 1},
        {"id": 376, "name": "Duration (Hour)", "mechanic": True, "duration": True, "base_en": 4, "op_1_en": 2},
        {"id": 375, "name": "Duration (Days)", "mechanic": True, "duration": True, "base_en": 8, "op_1_en": 4},
        {"id": 306, "name": "Duration (Permanent)", "mechanic": True, "duration": True, "base_en": 20},
        {"id": 304, "name": "Focus for Duration", "mechanic": True, "percentage": True, "base_en": 0.75},
        {"id": 303, "name": "No Harm or Adaptation for Duration", "mechanic": True, "percentage": True, "base_en": 0.9},
        {"id": 302, "name": "Duration Ends On Activation", "mechanic": True, "percentage": True, "base_en": 0.9},
        {"id": 305, "name": "Sustain for Duration", "mechanic": True, "percentage": True, "base_en": 0.8, "op_1_en": -0.1},
        {
            "id": 500,
            "name": "Flight",
            "description": "Take to the air.",
            "base_en": 3,
            "op_1_en": 1,
            "base_tp": 1.5,
            "op_1_tp": 1,
        },
        {"id": 501, "name": "Empower", "percentage": True, "base_en": 1.5},
    ]


@pytest.fixture
def technique_parts() -> List[Dict[str, Any]]:
    """
    Technique part catalog rows.

    Scope: function
    Uses: technique builder, calculator and display tests
    """
    return [
        {"id": 2, "name": "Reaction", "mechanic": True, "base_en": 1},
        {"id": 4, "name": "Quick or Free Action", "mechanic": True, "base_en": 1, "op_1_en": 1},
        {"id": 3, "name": "Long Action", "mechanic": True, "base_en": -1, "op_1_en": -0.5},
        {
            "id": 6,
            "name": "Additional Damage",
            "mechanic": True,
            "base_en": 0.5,
            "op_1_en": 0.5,
            "op_1_tp": 0.5,
            "op_2_tp": 0.5,
            "description": "Deal extra damage.",
        },
        {"id": 5, "name": "Split Damage Dice", "mechanic": True, "base_en": 0.5, "op_1_en": 0.5},
        {"id": 7, "name": "Add Weapon Attack", "mechanic": True, "base_en": 1, "op_1_en": 1, "base_tp": 1, "op_1_tp": 1},
        {"id": 600, "name": "Exhausting", "percentage": True, "base_en": 0.5},
        {"id": 601, "name": "Sweep", "base_en": 2, "op_1_tp": 0.5, "op_2_tp": 0.5},
    ]


@pytest.fixture
def item_properties() -> List[Dict[str, Any]]:
    """
    Item property catalog rows.

    Scope: function
    Uses: item builder, calculator and display tests
    """
    return [
        {"id": 1, "name": "Damage Reduction", "base_ip": 1, "op_1_ip": 1, "base_tp": 1, "op_1_tp": 1, "base_c": 1, "op_1_c": 1},
        {"id": 5, "name": "Agility Reduction", "base_ip": -0.5, "op_1_ip": -0.5},
        {"id": 6, "name": "Weapon Strength Requirement", "base_ip": -0.25, "op_1_ip": -0.25},
        {"id": 12, "name": "Split Damage Dice", "base_ip": 0.5, "op_1_ip": 0.5},
        {
            "id": 13,
            "name": "Range",
            "description": "Attack from afar.",
            "base_ip": 1,
            "op_1_ip": 0.5,
            "base_tp": 1,
            "op_1_tp": 1,
            "base_c": 2,
            "op_1_c": 1,
        },
        {"id": 14, "name": "Two-Handed", "base_ip": -1, "base_c": -1},
        {"id": 15, "name": "Shield Base", "base_ip": 0.5},
        {"id": 16, "name": "Armor Base", "base_ip": 1},
        {"id": 17, "name": "Weapon Damage", "base_ip": 0, "op_1_ip": 0.5, "op_1_c": 0.5},
        {"id": 22, "name": "Critical Range +1", "base_ip": 1, "op_1_ip": 1},
        {"id": 26, "name": "Finesse", "base_ip": 1.5, "base_tp": 1, "base_c": 0.5},
        {"id": 39, "name": "Shield Amount", "op_1_ip": 0.5},
        {"id": 40, "name": "Shield Damage", "op_1_ip": 0.5},
    ]
