"""Root pytest configuration for all tests."""

import pytest

from site_mirror.entries.entry_store import InMemoryEntryStore


@pytest.fixture
def store():
    """Empty in-memory entry store."""
    return InMemoryEntryStore()
