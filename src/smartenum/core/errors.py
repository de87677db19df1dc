"""
Errors — Exception taxonomy for smart enums.

Lookups never raise; only the narrowing conversion and the one-time
registry build are allowed to fail.
"""

from typing import Any


class SmartEnumError(Exception):
    """Base class for all smartenum errors."""
    pass


class InvalidConversion(SmartEnumError, ValueError):
    """Raised when a raw value does not map to any declared member."""

    def __init__(self, enum_type: type, value: Any):
        self.enum_type = enum_type
        self.value = value
        super().__init__(
            f"{value!r} is not a valid {enum_type.__name__}"
        )


class DuplicateDeclaration(SmartEnumError, TypeError):
    """
    Raised when two declared members share a value or a name.

    This is a programming error in the enum's declarations, surfaced the
    first time the enum type is used.
    """

    def __init__(
        self,
        enum_type: type,
        kind: str,
        key: Any,
        first: str,
        second: str,
    ):
        self.enum_type = enum_type
        self.kind = kind
        self.key = key
        self.first = first
        self.second = second
        super().__init__(
            f"{enum_type.__name__}: duplicate {kind} {key!r} "
            f"declared by '{first}' and '{second}'"
        )
