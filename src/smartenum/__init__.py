"""
smartenum — Smart enums: closed sets of named, valued singletons.

Members compare and hash by their underlying value, can carry behavior,
and are discovered and indexed automatically on first use.
"""

from smartenum.core import (
    SmartEnum,
    SmartEnumMeta,
    member,
    SmartEnumError,
    InvalidConversion,
    DuplicateDeclaration,
)
from smartenum.scalars import SmartIntEnum, SmartLongEnum

__version__ = "0.1.0"

__all__ = [
    "SmartEnum",
    "SmartEnumMeta",
    "SmartIntEnum",
    "SmartLongEnum",
    "member",
    "SmartEnumError",
    "InvalidConversion",
    "DuplicateDeclaration",
]
