"""
Shared fixtures for smartenum tests.
"""

import types

import pytest

from smartenum import SmartIntEnum, member


@pytest.fixture
def make_int_enum():
    """
    Factory for brand-new int-backed enum types.

    Each call returns a class whose registry has never been built, so
    tests can observe first-use behavior.
    """
    def factory(name: str = "Fresh", **members):
        def body(namespace):
            for attr, value in members.items():
                namespace[attr] = member(value)
        return types.new_class(name, (SmartIntEnum,), exec_body=body)
    return factory
