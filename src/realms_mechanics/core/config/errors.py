"""
Configuration error hierarchy for the Realms mechanic engine.

Purpose
-------
Provides exceptions for configuration management operations with clear error
classification and helpful error messages.

Non-Responsibilities
--------------------
- Error logging (handled by logger)
- Error recovery logic (handled by ConfigManager)

Exception Hierarchy
-------------------
ConfigError (base)
├── ConfigValidationError (balance table shape/value failures)
└── ConfigInitializationError (balance files unreadable at load)
"""


class ConfigError(Exception):
    """
    Base exception for all configuration-related errors.

    Example
    -------
    >>> try:
    ...     ConfigManager.reload()
    ... except ConfigError as e:
    ...     logger.error(f"Config operation failed: {e}")
    """
    pass


class ConfigValidationError(ConfigError):
    """
    Raised when a balance table fails validation.

    This exception is raised when:
    - A rarity bracket table is unordered or overlapping, or its top tier is bounded
    - A numeric balance value has the wrong type or is negative
    - Required bracket fields are missing
    """
    pass


class ConfigInitializationError(ConfigError):
    """
    Raised when balance YAML files cannot be parsed.

    A missing balance directory is not an error (code defaults apply); a file
    that exists but is not valid YAML is.
    """
    pass


__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConfigInitializationError",
]
