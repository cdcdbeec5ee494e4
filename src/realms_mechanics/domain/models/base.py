"""
Base domain model classes for the Realms mechanic engine.

Purpose
-------
Provide the small set of foundations the domain models share: an immutable
value-object base and the validation helpers used when a model is built from
configuration rather than from user input.

Non-Responsibilities
--------------------
- Parsing loose catalog or save payloads (see PartDefinition.from_mapping and
  PartReference.from_payload)
- Cost arithmetic (see realms_mechanics.modules)

Design Patterns
---------------
- **Value Object**: Immutable objects defined by their attributes

Most models in this package are frozen dataclasses, which already give
attribute equality. ValueObject is for the hand-written classes that validate
their own invariants on construction.

Usage Example
-------------
>>> class Bracket(ValueObject):
...     def __init__(self, name: str, base: int):
...         self.name = name
...         self.base = base
...         self._validate()
...
...     def _validate(self) -> None:
...         validate_not_empty(self.name, "name")
...         validate_non_negative(self.base, "base")
"""

from __future__ import annotations

from abc import ABC
from typing import Optional


# ============================================================================
# VALUE OBJECT
# ============================================================================


class ValueObject(ABC):
    """
    Base class for immutable value objects.

    Value objects are defined by their attributes, not by identity.
    Two value objects with the same attributes are considered equal.

    Characteristics
    ---------------
    - Immutable: Cannot be changed after creation
    - No identity: Equality based on attributes
    - Self-validating: Validates invariants in constructor

    Usage
    -----
    Subclasses should:
    1. Define all attributes in __init__
    2. Implement _validate() to enforce invariants
    3. Expose attributes read-only
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def _validate(self) -> None:
        """
        Validate invariants.

        Subclasses should override this to enforce domain rules.
        Raise DomainValidationError for violations.
        """
        pass


# ============================================================================
# DOMAIN MODEL VALIDATION
# ============================================================================


class DomainValidationError(Exception):
    """
    Exception raised when domain model validation fails.

    Parameters
    ----------
    message : str
        Human-readable error message
    field : Optional[str]
        Field name that failed validation (if applicable)
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


def validate_non_negative(value: float, field_name: str) -> None:
    """
    Validate that a value is non-negative.

    Raises
    ------
    DomainValidationError
        If value is negative
    """
    if value < 0:
        raise DomainValidationError(
            f"{field_name} must be non-negative, got {value}",
            field=field_name,
        )


def validate_not_empty(value: str, field_name: str) -> None:
    """
    Validate that a string is not empty.

    Raises
    ------
    DomainValidationError
        If value is empty or whitespace-only
    """
    if not value or not value.strip():
        raise DomainValidationError(
            f"{field_name} cannot be empty",
            field=field_name,
        )
