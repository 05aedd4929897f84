"""Integration test fixtures: real PostgreSQL connection with a users table."""

# Third-Party
import asyncpg
import pytest

from sqlfile.db import build_dsn


@pytest.fixture
async def db_conn():
    """Connection with a temporary, seeded users table.

    Skips when no database is configured or reachable.
    """

    try:
        dsn = build_dsn()
    except ValueError:
        pytest.skip("POSTGRES_PASSWORD not set")

    try:
        conn = await asyncpg.connect(dsn)
    except (OSError, asyncpg.PostgresError) as exc:
        pytest.skip(f"PostgreSQL unavailable: {exc}")

    try:
        await conn.execute("CREATE TEMP TABLE users (id serial PRIMARY KEY, name text NOT NULL)")
        await conn.execute("INSERT INTO users (name) VALUES ('alice'), ('bob')")
        yield conn
    finally:
        await conn.close()
