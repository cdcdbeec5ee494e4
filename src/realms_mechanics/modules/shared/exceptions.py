"""
Domain exceptions for the Realms mechanic engine.

Purpose
-------
Define the structured exception hierarchy raised at the engine's input
boundary. Calculations themselves never raise for well-formed input: an
unresolvable reference or invalid dice is a soft failure that contributes
nothing. These exceptions cover input that is structurally wrong, such as a
catalog entry that is not a mapping or a reference payload of the wrong type.

Design Notes
------------
- All domain exceptions inherit from `RealmsDomainException`.
- Each exception carries:
  - `message`: human-readable description
  - `details`: additional structured context (dict-like)
  - `severity`: `ErrorSeverity` value for logging/alerting
  - `error_code`: short, stable identifier for programmatic use
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels for logging and alerting."""

    DEBUG = "debug"  # Expected, not concerning
    INFO = "info"  # Bad user input (e.g., malformed saved document)
    WARNING = "warning"  # Concerning but handled (e.g., bad catalog row)
    ERROR = "error"  # Unexpected errors requiring attention
    CRITICAL = "critical"  # System-level failures requiring immediate action


class RealmsDomainException(Exception):
    """
    Base exception for all mechanic-engine domain errors.

    Args:
        message: Human-readable error message
        details: Additional structured data about the error (dict-like)
        severity: Error severity level for logging handlers
        error_code: Optional code for programmatic handling

    Example:
        >>> raise RealmsDomainException(
        ...     "Catalog entry rejected",
        ...     {"index": 3}
        ... )
    """

    DEFAULT_SEVERITY: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[ErrorSeverity] = None,
        error_code: Optional[str] = None,
    ) -> None:
        self.message: str = message
        self.details: Dict[str, Any] = details or {}
        self.severity: ErrorSeverity = severity or self.DEFAULT_SEVERITY
        self.error_code: str = error_code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "severity": self.severity.value,
        }

    def __str__(self) -> str:
        details_str = f" | Details: {self.details}" if self.details else ""
        return f"[{self.error_code}] {self.message}{details_str}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"severity={self.severity.value!r}"
            ")"
        )


class CatalogEntryError(RealmsDomainException):
    """
    Raised when a catalog entry cannot be turned into a definition.

    The entry is either not a mapping at all or carries neither a usable id
    nor a name, so nothing could ever resolve to it.

    Args:
        reason: Why the entry was rejected
        entry: The offending entry (repr'd into details)
    """

    DEFAULT_SEVERITY = ErrorSeverity.WARNING

    def __init__(self, reason: str, entry: Any = None) -> None:
        self.reason = reason
        self.entry = entry
        super().__init__(
            f"Invalid catalog entry: {reason}",
            details={"reason": reason, "entry": repr(entry)},
            error_code="INVALID_CATALOG_ENTRY",
        )


class InvalidReferenceError(RealmsDomainException):
    """
    Raised when a reference payload is not a mapping or PartReference.

    Args:
        payload: The offending payload
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        super().__init__(
            f"Part reference must be a mapping, got {type(payload).__name__}",
            details={"payload_type": type(payload).__name__, "payload": repr(payload)},
            error_code="INVALID_PART_REFERENCE",
        )
