"""
Scalar specializations — Smart enums backed by fixed-width integers.
"""

from smartenum.core.base import SmartEnum


class _SmartIntegerEnum(SmartEnum[int], abstract=True):
    """Integer-backed members convert implicitly wherever an int is expected."""

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


class SmartIntEnum(_SmartIntegerEnum, abstract=True):
    """Smart enum backed by a 32-bit signed integer."""
    _value_range = (-2**31, 2**31 - 1)


class SmartLongEnum(_SmartIntegerEnum, abstract=True):
    """Smart enum backed by a 64-bit signed integer."""
    _value_range = (-2**63, 2**63 - 1)
