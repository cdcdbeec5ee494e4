"""
Game-balance configuration loaded from YAML with dot-notation access.

Features:
- Hierarchical config access with dot notation (e.g., 'items.rarity_brackets')
- Balance tables externalized to ``balance/*.yaml`` shipped with the package
- Per-key validators run on every load so a bad table fails fast
- Explicit reload for hosts that edit the YAML at runtime
- Lookup metrics

Notes:
- Calculators always pass a code default to ``get`` so the engine keeps
  working when the balance directory is missing
- Loading is synchronous and happens once, lazily, on the first ``get``;
  a lazy load that fails logs at ERROR and keeps the code defaults, while an
  explicit ``initialize()`` or ``reload()`` raises
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from realms_mechanics.core.config.config import Config
from realms_mechanics.core.config.errors import (
    ConfigInitializationError,
    ConfigValidationError,
)
from realms_mechanics.core.logging.logger import get_logger

logger = get_logger(__name__)

Validator = Callable[[Any], None]


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value
    return target


class ConfigManager:
    """
    Balance-table configuration with YAML backing and in-memory cache.

    Provides hierarchical config access using dot notation
    (e.g., 'items.currency_surcharge_rate').
    """

    _cache: Dict[str, Any] = {}
    _initialized: bool = False
    _generation: int = 0
    _validators: Dict[str, Validator] = {}
    _source_dir: Optional[Path] = None

    _metrics = {
        "gets": 0,
        "cache_hits": 0,
        "cache_misses": 0,
        "loads": 0,
        "files_loaded": 0,
        "errors": 0,
        "fallback_to_defaults": 0,
        "total_get_time_ms": 0.0,
    }

    # Infrastructure defaults only; balance values live in balance/*.yaml
    _defaults: Dict[str, Any] = {}

    # =========================================================================
    # INITIALIZATION / RELOAD
    # =========================================================================

    @classmethod
    def _load_yaml_configs(cls, config_dir: Path) -> Dict[str, Any]:
        """
        Recursively load all YAML files under ``config_dir`` into one dict.

        Files are merged in sorted path order, so later files win on conflicts.
        """
        merged: Dict[str, Any] = {}

        if not config_dir.exists():
            logger.warning(
                "Balance directory not found, using code defaults",
                extra={"balance_dir": str(config_dir)},
            )
            return merged

        yaml_files = sorted(
            list(config_dir.rglob("*.yaml")) + list(config_dir.rglob("*.yml"))
        )
        if not yaml_files:
            logger.info("No balance YAML files found", extra={"balance_dir": str(config_dir)})
            return merged

        loaded_count = 0
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                cls._metrics["errors"] += 1
                raise ConfigInitializationError(
                    f"Failed to parse balance file {yaml_file.name}: {e}"
                ) from e

            if data is None:
                continue
            if not isinstance(data, dict):
                cls._metrics["errors"] += 1
                raise ConfigInitializationError(
                    f"Balance file {yaml_file.name} must contain a mapping at top level"
                )

            _deep_merge(merged, data)
            loaded_count += 1
            logger.debug(
                f"Loaded balance file: {yaml_file.relative_to(config_dir)}",
                extra={"file": str(yaml_file)},
            )

        cls._metrics["files_loaded"] += loaded_count
        logger.info(
            f"Loaded {loaded_count} balance files",
            extra={"yaml_count": loaded_count, "total_keys": len(merged)},
        )
        return merged

    @classmethod
    def initialize(cls, config_dir: Optional[Path] = None) -> None:
        """
        Load balance YAML into the cache and run registered validators.

        Args:
            config_dir: Directory to load from (default: Config.BALANCE_DIR)

        Raises:
            ConfigInitializationError: If a balance file cannot be parsed
            ConfigValidationError: If a registered validator rejects a value
        """
        source = Path(config_dir) if config_dir is not None else Config.BALANCE_DIR

        cache = _deep_merge({}, cls._defaults)
        _deep_merge(cache, cls._load_yaml_configs(source))

        for key, validator in cls._validators.items():
            value = cls._lookup(cache, key)
            if value is not None:
                try:
                    validator(value)
                except ConfigValidationError:
                    cls._metrics["errors"] += 1
                    raise

        cls._cache = cache
        cls._source_dir = source
        cls._initialized = True
        cls._generation += 1
        cls._metrics["loads"] += 1

    @classmethod
    def _ensure_initialized(cls) -> None:
        """
        Lazily load on first access.

        Unlike an explicit ``initialize()``, a lazy load never raises: a bad
        balance file leaves the cache at code defaults (degraded mode) so
        every accessor falls back to its own default.
        """
        if cls._initialized:
            return
        try:
            cls.initialize()
        except (ConfigInitializationError, ConfigValidationError) as exc:
            cls._metrics["fallback_to_defaults"] += 1
            cls._cache = _deep_merge({}, cls._defaults)
            cls._source_dir = Config.BALANCE_DIR
            cls._initialized = True  # Mark as initialized in degraded mode.
            cls._generation += 1
            logger.error(
                "Balance tables failed to load; falling back to code defaults",
                extra={
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                    "balance_dir": str(Config.BALANCE_DIR),
                },
                exc_info=True,
            )

    @classmethod
    def reload(cls, config_dir: Optional[Path] = None) -> None:
        """Re-read balance files; keeps the old cache if the new one is invalid."""
        cls.initialize(config_dir if config_dir is not None else cls._source_dir)
        logger.info(
            "ConfigManager reloaded",
            extra={"generation": cls._generation, "balance_dir": str(cls._source_dir)},
        )

    @classmethod
    def reset(cls) -> None:
        """Drop the cache so the next ``get`` reloads from Config.BALANCE_DIR."""
        cls._cache = {}
        cls._initialized = False
        cls._source_dir = None
        cls._generation += 1

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @classmethod
    def register_validator(cls, key: str, validator: Validator) -> None:
        """
        Register a validator for a dot-notation key.

        Validators run on every load. When the cache is already populated, the
        current value is validated immediately.
        """
        cls._validators[key] = validator
        if cls._initialized:
            value = cls._lookup(cls._cache, key)
            if value is not None:
                validator(value)

    # =========================================================================
    # PUBLIC METHODS
    # =========================================================================

    @staticmethod
    def _lookup(data: Dict[str, Any], key: str) -> Any:
        value: Any = data
        for k in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(k)
            if value is None:
                return None
        return value

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Retrieve config value by dot notation path.

        Args:
            key: Dot-notation config path (e.g., 'items.currency_surcharge_rate')
            default: Value returned when the key is absent

        Example:
            >>> ConfigManager.get("items.currency_surcharge_rate", 0.125)
            0.125
        """
        start_time = time.perf_counter()
        cls._metrics["gets"] += 1

        cls._ensure_initialized()

        value = cls._lookup(cls._cache, key)
        if value is None:
            cls._metrics["cache_misses"] += 1
            value = default
        else:
            cls._metrics["cache_hits"] += 1

        cls._metrics["total_get_time_ms"] += (time.perf_counter() - start_time) * 1000
        return value

    @classmethod
    def generation(cls) -> int:
        """Counter bumped on every load/reset; lets callers cache derived tables."""
        cls._ensure_initialized()
        return cls._generation

    # =========================================================================
    # METRICS & MONITORING
    # =========================================================================

    @classmethod
    def get_metrics(cls) -> Dict[str, Any]:
        """
        Get ConfigManager lookup metrics.

        Example:
            >>> metrics = ConfigManager.get_metrics()
            >>> print(f"Hit rate: {metrics['cache_hit_rate']:.1f}%")
        """
        total_gets = cls._metrics["gets"]
        hit_rate = (cls._metrics["cache_hits"] / total_gets * 100) if total_gets else 0.0
        avg_get_time = (cls._metrics["total_get_time_ms"] / total_gets) if total_gets else 0.0

        return {
            "gets": total_gets,
            "cache_hits": cls._metrics["cache_hits"],
            "cache_misses": cls._metrics["cache_misses"],
            "cache_hit_rate": round(hit_rate, 2),
            "loads": cls._metrics["loads"],
            "files_loaded": cls._metrics["files_loaded"],
            "errors": cls._metrics["errors"],
            "fallback_to_defaults": cls._metrics["fallback_to_defaults"],
            "avg_get_time_ms": round(avg_get_time, 4),
            "initialized": cls._initialized,
            "generation": cls._generation,
            "cached_configs": len(cls._cache),
        }

    @classmethod
    def reset_metrics(cls) -> None:
        """Reset all metrics counters."""
        cls._metrics = {
            "gets": 0,
            "cache_hits": 0,
            "cache_misses": 0,
            "loads": 0,
            "files_loaded": 0,
            "errors": 0,
            "fallback_to_defaults": 0,
            "total_get_time_ms": 0.0,
        }


__all__ = ["ConfigManager", "ConfigValidationError"]
