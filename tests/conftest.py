"""Root test configuration: source path, settings reset, SQL fixture files."""

# Standard Library
import sys
from pathlib import Path

# Third-Party
import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

from sqlfile.config import get_settings

SIMPLE_SQL = "select 1; --comment"

ALL_USERS_SQL = """/*
    Selects all users.
*/
select *   -- every column
    from
  users
"""

INVALID_SQL = "select 'unterminated from users"


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached settings so each test sees its own environment."""

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sql_dir(tmp_path):
    """A directory holding the standard SQL fixture files."""

    (tmp_path / "simple.sql").write_text(SIMPLE_SQL, encoding="utf-8")
    (tmp_path / "allUsers.sql").write_text(ALL_USERS_SQL, encoding="utf-8")
    (tmp_path / "invalid.sql").write_text(INVALID_SQL, encoding="utf-8")
    return tmp_path
