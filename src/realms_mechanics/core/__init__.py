"""
Core infrastructure layer for the Realms mechanic engine.

Purpose
-------
Provide a single import surface for the infrastructure the calculators lean on:

- Configuration management (Config, ConfigManager)
- Logging (structured logging, logger factory)

Non-Responsibilities
--------------------
- Game rules or cost formulas (see realms_mechanics.modules)
- Any side effects beyond the static Config load

Design Decisions
----------------
- Config is imported before logging; the logger reads Config at setup time.
"""

from __future__ import annotations

from realms_mechanics.core.config import Config, ConfigManager
from realms_mechanics.core.logging import get_logger, setup_logging, shutdown_logging

__all__ = [
    "Config",
    "ConfigManager",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
