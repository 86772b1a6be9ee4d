"""
Kernel test fixtures.

Stores are built fresh per test; nothing here touches IO.
"""

import pytest

from roster_engine.kernel.store import create_store


@pytest.fixture
def store():
    return create_store()
