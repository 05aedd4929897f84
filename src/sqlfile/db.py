"""Database connection pool and query execution helpers for sqlfile."""

# Standard Library
import os
from typing import Any
from urllib.parse import quote_plus

# Third-Party
import asyncpg
from asyncpg import Connection, Pool, Record

# Local
from .query_file import QueryFile

Executor = Pool | Connection
QueryLike = str | QueryFile


def build_dsn() -> str:
    """Build a PostgreSQL DSN from environment variables.

    Returns:
        PostgreSQL connection string.

    Raises:
        ValueError: If POSTGRES_PASSWORD is not set.
    """

    host = os.getenv("POSTGRES_HOST", "localhost")
    port = os.getenv("POSTGRES_PORT", "5432")
    db_name = os.getenv("POSTGRES_DB", "postgres")
    user = os.getenv("POSTGRES_USER", "postgres")
    password = os.getenv("POSTGRES_PASSWORD")

    if not password:
        raise ValueError("POSTGRES_PASSWORD is required")

    safe_password = quote_plus(password)
    return f"postgresql://{user}:{safe_password}@{host}:{port}/{db_name}"


async def get_pool(
    *,
    min_size: int = 1,
    max_size: int = 10,
    command_timeout: int = 30,
) -> Pool:
    """Create and return an asyncpg connection pool.

    Args:
        min_size: Minimum pool size.
        max_size: Maximum pool size.
        command_timeout: Query timeout in seconds.

    Returns:
        Configured asyncpg connection pool.

    Raises:
        RuntimeError: If the database refuses the connection.
    """

    dsn = build_dsn()
    try:
        return await asyncpg.create_pool(
            dsn=dsn,
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
        )
    except (ConnectionRefusedError, asyncpg.CannotConnectNowError) as exc:
        raise RuntimeError("Database connection failed. Is Docker running?") from exc


def resolve_query(query: QueryLike) -> str:
    """Return the SQL text to send for a string or QueryFile.

    A QueryFile is prepared first, so a changed file is picked up when its
    `debug` option is on.

    Args:
        query: Raw SQL or a QueryFile.

    Returns:
        str: SQL text.

    Raises:
        QueryFileError: If the QueryFile holds a captured error.
        TypeError: If query is neither a string nor a QueryFile.
        ValueError: If the query text is empty.
    """

    if isinstance(query, QueryFile):
        query.prepare()
        if query.error is not None:
            raise query.error
        text = query.query
    elif isinstance(query, str):
        text = query
    else:
        raise TypeError(f"Invalid query type: {type(query).__name__}")

    if not text or not text.strip():
        raise ValueError("Empty query")
    return text


async def fetch(executor: Executor, query: QueryLike, *args: Any) -> list[Record]:
    """Run a query and return all rows."""

    return await executor.fetch(resolve_query(query), *args)


async def fetchrow(executor: Executor, query: QueryLike, *args: Any) -> Record | None:
    """Run a query and return the first row or None."""

    return await executor.fetchrow(resolve_query(query), *args)


async def fetchval(executor: Executor, query: QueryLike, *args: Any, column: int = 0) -> Any:
    """Run a query and return one value from the first row."""

    return await executor.fetchval(resolve_query(query), *args, column=column)


async def execute(executor: Executor, query: QueryLike, *args: Any) -> str:
    """Run a command and return its status string."""

    return await executor.execute(resolve_query(query), *args)
