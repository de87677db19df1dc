"""
Registry — Per-type member discovery and lookup tables.

Every concrete enum type gets exactly one EnumRegistry, built lazily on
first use and never mutated afterwards. The process-wide RegistryTable
guarantees the build runs at most once per type, even when many threads
race on first access.
"""

from dataclasses import dataclass, field
from inspect import getattr_static
from threading import Lock
from types import MappingProxyType
from typing import Any, Callable, Mapping

from smartenum.core.errors import DuplicateDeclaration
from smartenum.observability.logging import get_logger


logger = get_logger("registry")


def discover_members(enum_type: type) -> list[tuple[str, Any]]:
    """
    Find the members declared on enum_type and its ancestors.

    Public class attributes are visited from the root of the MRO down to
    enum_type, in declaration order. Each name is resolved on enum_type
    itself without invoking descriptors, so a subclass attribute shadows
    an inherited one and a property that queries the enum cannot re-enter
    the build. Only values that are instances of enum_type are kept.

    Returns:
        (attribute name, member) pairs in discovery order
    """
    names: dict[str, None] = {}
    for klass in reversed(enum_type.__mro__):
        for attr in vars(klass):
            if not attr.startswith("_"):
                names.setdefault(attr)

    found = []
    for attr in names:
        candidate = getattr_static(enum_type, attr, None)
        if isinstance(candidate, enum_type):
            found.append((attr, candidate))
    return found


@dataclass(frozen=True)
class EnumRegistry:
    """
    Immutable lookup tables for one concrete enum type.

    by_value and by_name always hold exactly the instances in members.
    """
    enum_type: type
    members: tuple[Any, ...]
    by_value: Mapping[Any, Any]
    by_name: Mapping[str, Any]

    @classmethod
    def build(cls, enum_type: type) -> "EnumRegistry":
        """
        Discover the members of enum_type and index them.

        Raises:
            DuplicateDeclaration: Two distinct members share a value or name
        """
        logger.debug("Discovering members of %s", enum_type.__qualname__)

        members: list[Any] = []
        by_value: dict[Any, Any] = {}
        by_name: dict[str, Any] = {}
        declared_as: dict[int, str] = {}

        for attr, member in discover_members(enum_type):
            # Aliases (DEFAULT = RED) point at an already collected object
            if id(member) in declared_as:
                continue

            other = by_value.get(member.value)
            if other is not None:
                raise DuplicateDeclaration(
                    enum_type, "value", member.value, declared_as[id(other)], attr
                )
            other = by_name.get(member.name)
            if other is not None:
                raise DuplicateDeclaration(
                    enum_type, "name", member.name, declared_as[id(other)], attr
                )

            declared_as[id(member)] = attr
            members.append(member)
            by_value[member.value] = member
            by_name[member.name] = member

        registry = cls(
            enum_type=enum_type,
            members=tuple(members),
            by_value=MappingProxyType(by_value),
            by_name=MappingProxyType(by_name),
        )
        logger.debug(
            "Built registry for %s",
            enum_type.__qualname__,
            extra={"extra_data": {
                "enum_type": enum_type.__qualname__,
                "members": len(members),
            }},
        )
        return registry

    def lookup_value(self, value: Any) -> Any | None:
        """Member with the given value, or None."""
        try:
            return self.by_value.get(value)
        except TypeError:
            # Unhashable input can never be a declared value
            return None

    def lookup_name(self, name: str) -> Any | None:
        """Member with exactly the given name, or None."""
        if not isinstance(name, str):
            return None
        return self.by_name.get(name)


class _LazyRegistry:
    """Exactly-once holder for a single type's registry."""

    def __init__(self, enum_type: type, builder: Callable[[type], EnumRegistry]):
        self._enum_type = enum_type
        self._builder = builder
        self._registry: EnumRegistry | None = None
        self._lock = Lock()

    def get(self) -> EnumRegistry:
        registry = self._registry
        if registry is not None:
            return registry

        with self._lock:
            if self._registry is None:
                # Published only once fully built; a failed build leaves
                # nothing behind and the next caller fails identically.
                self._registry = self._builder(self._enum_type)
            return self._registry

    @property
    def is_built(self) -> bool:
        return self._registry is not None


@dataclass
class RegistryTable:
    """
    Process-wide table of registries, keyed by concrete enum type.

    Entries are created under a table lock; each entry then builds its
    registry under its own lock so unrelated types never contend.
    """
    builder: Callable[[type], EnumRegistry] = EnumRegistry.build
    _entries: dict[type, _LazyRegistry] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock)

    def get(self, enum_type: type) -> EnumRegistry:
        """Get (building on first use) the registry for enum_type."""
        entry = self._entries.get(enum_type)
        if entry is None:
            with self._lock:
                entry = self._entries.get(enum_type)
                if entry is None:
                    entry = _LazyRegistry(enum_type, self.builder)
                    self._entries[enum_type] = entry
        return entry.get()

    def is_built(self, enum_type: type) -> bool:
        """Whether enum_type's registry has been published."""
        entry = self._entries.get(enum_type)
        return entry is not None and entry.is_built


_table = RegistryTable()


def get_registry_table() -> RegistryTable:
    """Get the process-wide registry table."""
    return _table
