"""Unit test fixtures: mock pool."""

# Standard Library
from unittest.mock import AsyncMock

# Third-Party
import pytest


@pytest.fixture
def mock_pool():
    """AsyncMock of asyncpg.Pool for unit tests."""

    pool = AsyncMock()
    pool.fetchrow = AsyncMock(return_value=None)
    pool.fetch = AsyncMock(return_value=[{"id": 1, "name": "alice"}])
    pool.fetchval = AsyncMock(return_value=1)
    pool.execute = AsyncMock(return_value="SELECT 1")
    return pool
