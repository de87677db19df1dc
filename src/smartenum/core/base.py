"""
SmartEnum — Generic base for closed sets of named, valued singletons.

A concrete smart enum declares its members as class attributes:

    class Status(SmartEnum[str]):
        ACTIVE = member("active")
        RETIRED = member("retired", name="Retired")

        @property
        def is_final(self) -> bool:
            return self is Status.RETIRED

Members behave like the scalar behind them (equality and hashing by
value) while keeping the methods and state of a full class. The set of
members is discovered on first use and indexed once; see registry.py.
"""

from functools import total_ordering
from typing import (
    Any,
    ClassVar,
    Generic,
    Iterator,
    TypeVar,
    get_args,
    get_origin,
)

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from smartenum.core.errors import InvalidConversion
from smartenum.core.registry import EnumRegistry, get_registry_table


TBase = TypeVar("TBase")
TEnum = TypeVar("TEnum", bound="SmartEnum[Any]")


class member:
    """
    Declares a member inside a smart enum class body.

    The attribute name becomes the member name unless name= is given.
    Extra arguments are forwarded to the enum's __init__ after
    (name, value). The placeholder is swapped for the live instance
    when the class is created.
    """

    def __init__(
        self,
        value: Any,
        *args: Any,
        name: str | None = None,
        **kwargs: Any,
    ):
        self.value = value
        self.name = name
        self.args = args
        self.kwargs = kwargs

    def create(self, owner: type, attr: str) -> Any:
        """Build the live instance declared under attr on owner."""
        name = attr if self.name is None else self.name
        return owner(name, self.value, *self.args, **self.kwargs)

    def __repr__(self) -> str:
        return f"member({self.value!r})"


def _declared_base_type(orig_bases: tuple[Any, ...]) -> type | None:
    """Pull TBase out of a subscripted base such as SmartEnum[int]."""
    for base in orig_bases:
        origin = get_origin(base)
        if isinstance(origin, SmartEnumMeta):
            args = get_args(base)
            if args and isinstance(args[0], type):
                return args[0]
    return None


class SmartEnumMeta(type):
    """
    Metaclass for smart enums.

    Handles the abstract= class keyword, records TBase and the enum
    family, and lets the class itself be iterated like a collection of
    its members.
    """

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        abstract: bool = False,
        **kwargs: Any,
    ):
        namespace["_abstract"] = abstract
        base_type = _declared_base_type(namespace.get("__orig_bases__", ()))
        if base_type is not None and "_base_type" not in namespace:
            namespace["_base_type"] = base_type

        cls = super().__new__(mcls, name, bases, namespace, **kwargs)

        family = getattr(cls, "_enum_family", None)
        if abstract:
            if family is not None:
                raise TypeError(
                    f"{name} cannot be abstract: it extends concrete "
                    f"smart enum {family.__name__}"
                )
            cls._enum_family = None
        elif family is None:
            cls._enum_family = cls

        # Swap member() placeholders for live instances
        for attr, value in list(namespace.items()):
            if isinstance(value, member):
                setattr(cls, attr, value.create(cls, attr))
        return cls

    def __init__(cls, name, bases, namespace, abstract=False, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)

    def __iter__(cls) -> Iterator[Any]:
        return iter(cls.get_all())

    def __len__(cls) -> int:
        return len(cls.get_all())

    def __contains__(cls, item: Any) -> bool:
        if isinstance(type(item), SmartEnumMeta):
            return isinstance(item, cls) and cls.from_value(item.value) is not None
        return cls.from_value(item) is not None

    def __bool__(cls) -> bool:
        # Classes are truthy even with no members
        return True


@total_ordering
class SmartEnum(Generic[TBase], metaclass=SmartEnumMeta, abstract=True):
    """
    Base class for smart enums backed by a TBase scalar.

    Identity is the value: two members of the same enum family are equal
    iff their values are equal, whatever their names, object identity or
    subclass state. Members of different families never compare equal.

    Class-level queries (from_value, from_name, get_all, from_base) read
    a registry built once per concrete type on first use.
    """

    _base_type: ClassVar[type | None] = None
    _value_range: ClassVar[tuple[Any, Any] | None] = None
    _enum_family: ClassVar[type | None] = None

    def __init__(self, name: str, value: TBase):
        cls = type(self)
        if cls.__dict__.get("_abstract", False):
            raise TypeError(f"Cannot instantiate abstract smart enum {cls.__name__}")
        if not isinstance(name, str):
            raise TypeError(f"Member name must be str, got {type(name).__name__}")
        if not name:
            raise ValueError("Member name must not be empty")
        cls._check_value(value)

        self._name = name
        self._value = value

    @classmethod
    def _check_value(cls, value: Any) -> None:
        base_type = cls._base_type
        if base_type is not None:
            if not isinstance(value, base_type) or (
                isinstance(value, bool) and base_type is not bool
            ):
                raise TypeError(
                    f"{cls.__name__} values must be {base_type.__name__}, "
                    f"got {type(value).__name__}"
                )
        try:
            hash(value)
        except TypeError:
            raise TypeError(
                f"{cls.__name__} values must be hashable, got {type(value).__name__}"
            ) from None
        if cls._value_range is not None:
            low, high = cls._value_range
            if not low <= value <= high:
                raise ValueError(
                    f"{cls.__name__} value {value!r} is outside [{low}, {high}]"
                )

    # -------------------------------------------------------------------------
    # Member state
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> TBase:
        return self._value

    def to_base(self) -> TBase:
        """Widening conversion to the underlying scalar; never fails."""
        return self._value

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @classmethod
    def _registry(cls) -> EnumRegistry:
        return get_registry_table().get(cls)

    @classmethod
    def from_value(cls: type[TEnum], value: Any) -> TEnum | None:
        """Member whose value equals value, or None."""
        if isinstance(value, bool) and cls._base_type not in (None, bool):
            # Mirrors the constructor, which never accepts bool here
            return None
        return cls._registry().lookup_value(value)

    @classmethod
    def from_name(cls: type[TEnum], name: str) -> TEnum | None:
        """Member whose name is exactly name (case-sensitive), or None."""
        return cls._registry().lookup_name(name)

    @classmethod
    def get_all(cls: type[TEnum]) -> tuple[TEnum, ...]:
        """All members in declaration order."""
        return cls._registry().members

    @classmethod
    def from_base(cls: type[TEnum], value: Any) -> TEnum:
        """
        Narrowing conversion from a raw scalar.

        Raises:
            InvalidConversion: No member has this value
        """
        found = cls.from_value(value)
        if found is None:
            raise InvalidConversion(cls, value)
        return found

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SmartEnum):
            return NotImplemented
        return (
            self._enum_family is other._enum_family
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SmartEnum) or self._enum_family is not other._enum_family:
            return NotImplemented
        return self._value < other._value

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._name}: {self._value!r}>"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def _coerce(cls, value: Any) -> "SmartEnum[Any]":
        if isinstance(value, cls):
            # Swap stray instances for the declared member
            found = cls.from_value(value.value)
        else:
            found = cls.from_value(value)
        if found is None and isinstance(value, str):
            found = cls.from_name(value)
        if found is None:
            raise InvalidConversion(cls, value)
        return found

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: instance.value
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"enum": [m.value for m in cls.get_all()]}
