"""
Pytest configuration and fixtures for schema naming tests.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def diagnostics():
    """Diagnostics sink that records every deprecation identifier."""
    from schema.diagnostics import RecordingDiagnostics

    return RecordingDiagnostics()


@pytest.fixture
def public_config():
    """Schema config with 'public' as the default namespace."""
    from schema.schema_config import SchemaConfig

    return SchemaConfig(name="public")


@pytest.fixture
def valid_names():
    """Raw names that parse, with their expected (namespace, local, quoted)."""
    return [
        ("foo", (None, "foo", False)),
        ("Foo_Bar1", (None, "Foo_Bar1", False)),
        ("ns.local", ("ns", "local", False)),
        ("`foo`", (None, "foo", True)),
        ('"Foo Bar"', (None, "Foo Bar", True)),
        ("[order]", (None, "order", True)),
        ('"Ns".local', ("Ns", "local", False)),
        ("ns.[Local]", ("ns", "Local", True)),
    ]
