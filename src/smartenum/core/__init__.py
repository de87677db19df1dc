"""
Core — Smart enum base class, registry, and errors.
"""

from smartenum.core.errors import (
    SmartEnumError,
    InvalidConversion,
    DuplicateDeclaration,
)
from smartenum.core.registry import (
    EnumRegistry,
    RegistryTable,
    discover_members,
    get_registry_table,
)
from smartenum.core.base import (
    SmartEnum,
    SmartEnumMeta,
    member,
)

__all__ = [
    # Errors
    "SmartEnumError",
    "InvalidConversion",
    "DuplicateDeclaration",
    # Registry
    "EnumRegistry",
    "RegistryTable",
    "discover_members",
    "get_registry_table",
    # Base
    "SmartEnum",
    "SmartEnumMeta",
    "member",
]
