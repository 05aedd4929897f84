"""Process-wide runtime settings and logging setup for sqlfile."""

# Standard Library
import os
import sys
from dataclasses import dataclass
from functools import lru_cache

# Third-Party
from dotenv import load_dotenv
from loguru import logger

ENV_MODE = "SQLFILE_ENV"
ENV_DEBUG = "SQLFILE_DEBUG"
ENV_LOG_LEVEL = "SQLFILE_LOG_LEVEL"

DEVELOPMENT = "development"
PRODUCTION = "production"

LOG_FORMAT = "{time} | {level} | {message}"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Runtime mode resolved once at startup."""

    env: str
    debug: bool
    log_level: str


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name, "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


@lru_cache
def get_settings() -> Settings:
    """Resolve settings from the environment (and `.env`, if present).

    `SQLFILE_ENV=development` turns debug on; `SQLFILE_DEBUG` overrides it
    either way when set to a recognizable boolean.

    Returns:
        Settings: Cached settings for the process.
    """

    load_dotenv()

    env = os.environ.get(ENV_MODE, "").strip().lower() or PRODUCTION
    debug = _env_flag(ENV_DEBUG)
    if debug is None:
        debug = env == DEVELOPMENT

    log_level = os.environ.get(ENV_LOG_LEVEL, "").strip().upper() or "INFO"
    return Settings(env=env, debug=debug, log_level=log_level)


def configure_logging(level: str | None = None) -> int:
    """Replace loguru's default sink with a stderr sink at the given level.

    Args:
        level: Log level name. Defaults to the configured `log_level`.

    Returns:
        int: Handler id of the new sink.
    """

    logger.remove()
    return logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level or get_settings().log_level,
    )
