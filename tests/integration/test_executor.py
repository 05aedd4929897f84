"""Integration tests for running QueryFile objects against PostgreSQL."""

# Standard Library
import os
import time

# Third-Party
import pytest

from sqlfile.db import fetch, fetchval
from sqlfile.errors import FileReadError, SQLParsingError
from sqlfile.query_file import QueryFile

pytestmark = pytest.mark.integration


async def test_non_minified_query(db_conn, sql_dir):
    """A raw query file resolves with data."""

    rows = await fetch(db_conn, QueryFile(sql_dir / "allUsers.sql", {}))
    assert len(rows) > 0


async def test_minified_query(db_conn, sql_dir):
    """A minified query file resolves with data."""

    rows = await fetch(db_conn, QueryFile(sql_dir / "allUsers.sql", {"minify": True}))
    assert [row["name"] for row in rows] == ["alice", "bob"]


async def test_missing_file_rejects(db_conn, tmp_path):
    """A missing query file rejects with its captured error."""

    with pytest.raises(FileReadError):
        await fetch(db_conn, QueryFile(tmp_path / "unknown.sql"))


async def test_invalid_sql_rejects(db_conn, sql_dir):
    """An unparsable query file rejects with its parsing error."""

    with pytest.raises(SQLParsingError):
        await fetch(db_conn, QueryFile(sql_dir / "invalid.sql", {"minify": True}))


async def test_debug_reload_between_calls(db_conn, tmp_path):
    """An edited file is sent in its new form when debug is on."""

    sql_file = tmp_path / "count.sql"
    sql_file.write_text("select count(*) from users", encoding="utf-8")
    qf = QueryFile(sql_file, {"debug": True})
    assert await fetchval(db_conn, qf) == 2

    sql_file.write_text("select count(*) from users where name = 'bob'", encoding="utf-8")
    stamp = time.time() + 3600
    os.utime(sql_file, (stamp, stamp))
    assert await fetchval(db_conn, qf) == 1
