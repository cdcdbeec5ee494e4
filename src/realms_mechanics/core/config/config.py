"""
Static configuration management for the Realms mechanic engine.

Purpose
-------
Provides centralized static configuration loaded from environment variables
with sensible defaults and type validation. This module handles settings that
are fixed at process startup: environment type, logging behaviour and the
location of the game-balance tables.

Responsibilities
----------------
- Load configuration from environment variables with .env support (only
  ``REALMS_*`` keys are taken from .env; the host's other keys are untouched)
- Provide type-safe access to all static configuration values
- Track which values came from the environment versus defaults

Non-Responsibilities
--------------------
- Game-balance tables (handled by ConfigManager)
- Creating directories (the logging subsystem creates its own log dir)
- Secrets management (this package holds no secrets)

Architecture Notes
------------------
- Singleton pattern via class methods (no instantiation)
- Auto-loads on module import via Config.load()
- Metrics track which values came from environment vs defaults
- Every variable is prefixed with ``REALMS_`` so the engine can live inside a
  host application without clashing with its settings

Environment Variables
---------------------
All optional (with defaults):
- REALMS_ENV: Environment type (default: development)
- REALMS_LOG_LEVEL: Logging level (default: INFO)
- REALMS_LOG_JSON: Force JSON console logs (default: production only)
- REALMS_LOG_COLORS: Colored console logs in development (default: True)
- REALMS_LOG_TO_FILE: Also write a rotating JSON log file (default: False)
- REALMS_LOGS_DIR: Directory for the log file (default: ./logs)
- REALMS_BALANCE_DIR: Override directory for balance YAML files
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values, find_dotenv

ENV_PREFIX = "REALMS_"


# ============================================================================
# Enums and Constants
# ============================================================================


class Environment(Enum):
    """
    Deployment environment types.

    Defines valid environment values with strict type safety.
    """
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """
        Parse environment string safely with fallback.

        Parameters
        ----------
        value:
            Environment string to parse.

        Returns
        -------
        Environment
            Parsed environment enum value.

        Example
        -------
        >>> Environment.from_string("production") == Environment.PRODUCTION
        True
        >>> Environment.from_string("invalid") == Environment.DEVELOPMENT
        True
        """
        try:
            return cls(value.lower())
        except ValueError:
            # Structured logger may not be configured yet
            import logging
            logging.getLogger(__name__).warning(
                f"Unknown environment '{value}', defaulting to development"
            )
            return cls.DEVELOPMENT


# ============================================================================
# Configuration Metrics Tracker
# ============================================================================


class _ConfigLoadMetrics:
    """
    Internal metrics tracker for configuration loading.

    Tracks which configuration values came from environment variables
    versus defaults, and any validation errors encountered.
    """

    def __init__(self):
        self.env_vars_loaded: Dict[str, bool] = {}
        self.validation_errors: Dict[str, str] = {}
        self.defaults_used: Dict[str, Any] = {}
        self.last_reload: Optional[str] = None

    def record_env_load(self, key: str, from_env: bool, value: Any, default: Any):
        """Record whether a config value came from environment."""
        self.env_vars_loaded[key] = from_env
        if not from_env:
            self.defaults_used[key] = default

    def record_validation_error(self, key: str, error: str):
        """Record a validation error."""
        self.validation_errors[key] = error

    def get_summary(self) -> Dict[str, Any]:
        """Get configuration loading summary."""
        return {
            "total_configs": len(self.env_vars_loaded),
            "from_environment": sum(1 for v in self.env_vars_loaded.values() if v),
            "from_defaults": sum(1 for v in self.env_vars_loaded.values() if not v),
            "validation_errors": len(self.validation_errors),
            "defaults_used": list(self.defaults_used.keys()),
            "last_reload": self.last_reload,
        }


# ============================================================================
# Main Configuration Class
# ============================================================================


class Config:
    """
    Centralized static configuration for the Realms mechanic engine.

    Usage
    -----
    >>> if Config.is_production():
    ...     logger.info("Running in production mode")
    >>> summary = Config.get_config_summary()
    >>> logger.info("Config loaded", extra=summary)
    """

    _metrics: Optional[_ConfigLoadMetrics] = None
    _enable_metrics: bool = True

    # =========================================================================
    # Environment Configuration
    # =========================================================================

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: Optional[bool] = None
    LOG_COLORS: bool = True
    LOG_TO_FILE: bool = False

    # =========================================================================
    # Directory Configuration
    # =========================================================================

    PACKAGE_ROOT = Path(__file__).resolve().parents[2]
    LOGS_DIR: Path = Path("logs")
    BALANCE_DIR: Path = PACKAGE_ROOT / "balance"

    # =========================================================================
    # Helper Methods
    # =========================================================================

    @classmethod
    def _init_metrics(cls):
        """Initialize metrics tracking if enabled."""
        if cls._enable_metrics and cls._metrics is None:
            cls._metrics = _ConfigLoadMetrics()

    @classmethod
    def _record_error(cls, key: str, error: str) -> None:
        import logging
        logging.getLogger(__name__).warning(error)
        if cls._metrics:
            cls._metrics.record_validation_error(key, error)

    @classmethod
    def _safe_bool(cls, key: str, default: Optional[bool]) -> Optional[bool]:
        """
        Safely parse boolean from environment.

        Recognizes: true/false, yes/no, 1/0, on/off (case-insensitive).

        Example
        -------
        >>> Config._safe_bool("REALMS_LOG_TO_FILE", False)
        False
        """
        cls._init_metrics()

        raw_value = os.getenv(key)
        if raw_value is None:
            if cls._metrics:
                cls._metrics.record_env_load(key, False, default, default)
            return default

        normalized = raw_value.lower().strip()
        if normalized in {"true", "yes", "1", "on"}:
            value = True
        elif normalized in {"false", "no", "0", "off"}:
            value = False
        else:
            cls._record_error(
                key, f"{key}='{raw_value}' is not a valid boolean, using default {default}"
            )
            return default

        if cls._metrics:
            cls._metrics.record_env_load(key, True, value, default)
        return value

    @classmethod
    def _safe_str(cls, key: str, default: str) -> str:
        """Safely get string from environment."""
        cls._init_metrics()

        value = os.getenv(key, default)
        if cls._metrics:
            cls._metrics.record_env_load(key, key in os.environ, value, default)
        return value

    @classmethod
    def _safe_path(cls, key: str, default: Path) -> Path:
        """Get a filesystem path from environment, falling back to ``default``."""
        raw_value = cls._safe_str(key, "")
        return Path(raw_value) if raw_value else default

    # =========================================================================
    # Configuration Loading
    # =========================================================================

    @staticmethod
    def _load_dotenv() -> None:
        """
        Copy ``REALMS_*`` keys from the nearest .env file into the environment.

        Variables already set in the environment win over the file.
        """
        dotenv_path = find_dotenv(usecwd=True)
        if not dotenv_path:
            return
        for key, value in dotenv_values(dotenv_path).items():
            if key.startswith(ENV_PREFIX) and value is not None:
                os.environ.setdefault(key, value)

    @classmethod
    def load(cls) -> None:
        """
        Load all configuration from environment variables with validation.

        Called automatically on module import; call again after changing the
        environment (tests do this) to pick up the new values.
        """
        cls._load_dotenv()
        cls._init_metrics()

        cls.ENVIRONMENT = Environment.from_string(
            cls._safe_str("REALMS_ENV", "development")
        ).value

        log_level = cls._safe_str("REALMS_LOG_LEVEL", "INFO").upper()
        if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            cls._record_error(
                "REALMS_LOG_LEVEL", f"Invalid REALMS_LOG_LEVEL '{log_level}', using INFO"
            )
            log_level = "INFO"
        cls.LOG_LEVEL = log_level

        cls.LOG_JSON = cls._safe_bool("REALMS_LOG_JSON", None)
        cls.LOG_COLORS = bool(cls._safe_bool("REALMS_LOG_COLORS", True))
        cls.LOG_TO_FILE = bool(cls._safe_bool("REALMS_LOG_TO_FILE", False))

        cls.LOGS_DIR = cls._safe_path("REALMS_LOGS_DIR", Path("logs"))
        cls.BALANCE_DIR = cls._safe_path(
            "REALMS_BALANCE_DIR", cls.PACKAGE_ROOT / "balance"
        )

        if cls._metrics:
            from datetime import datetime, timezone
            cls._metrics.last_reload = datetime.now(timezone.utc).isoformat()

    # =========================================================================
    # Environment Checks
    # =========================================================================

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT == Environment.PRODUCTION.value

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT == Environment.DEVELOPMENT.value

    @classmethod
    def is_testing(cls) -> bool:
        """Check if running in testing environment."""
        return cls.ENVIRONMENT == Environment.TESTING.value

    # =========================================================================
    # Metrics & Summary
    # =========================================================================

    @classmethod
    def get_metrics(cls) -> Optional[_ConfigLoadMetrics]:
        """Get configuration loading metrics."""
        return cls._metrics

    @classmethod
    def get_config_summary(cls) -> Dict[str, Any]:
        """
        Get configuration summary for debugging.

        Example
        -------
        >>> Config.get_config_summary()["environment"]
        'development'
        """
        return {
            "environment": cls.ENVIRONMENT,
            "log_level": cls.LOG_LEVEL,
            "log_json": cls.LOG_JSON,
            "log_to_file": cls.LOG_TO_FILE,
            "logs_dir": str(cls.LOGS_DIR),
            "balance_dir": str(cls.BALANCE_DIR),
        }


# Auto-load on import
Config.load()
