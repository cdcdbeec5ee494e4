"""
Realms Mechanics Logging Infrastructure

Exports the structured logging subsystem, log context helpers,
and configuration interface.

This module provides:
- JSON and colored console logging
- ContextVar-based contextual logging (`LogContext`)
- Setup and teardown helpers for hosts that want the engine's logging stack
"""

from realms_mechanics.core.logging.logger import (
    LogContext,
    LoggerConfig,
    LoggingHealth,
    clear_log_context,
    get_log_context,
    get_logger,
    get_logging_health,
    set_log_context,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "setup_logging",
    "shutdown_logging",
    "get_logger",
    "get_logging_health",
    "LogContext",
    "set_log_context",
    "get_log_context",
    "clear_log_context",
    "LoggerConfig",
    "LoggingHealth",
]
