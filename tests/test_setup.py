"""
Verify project setup is correct.
"""

import smartenum


def test_version_exists():
    """Package has version."""
    assert hasattr(smartenum, "__version__")
    assert smartenum.__version__ == "0.1.0"


def test_public_api_exported():
    """Top-level package exports the public surface."""
    for name in smartenum.__all__:
        assert hasattr(smartenum, name)
