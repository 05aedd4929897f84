"""Pydantic models for sqlfile."""

# Standard Library
from collections.abc import Mapping
from typing import Any

# Third-Party
from pydantic import BaseModel, ConfigDict, Field, StrictBool

# Local
from .config import get_settings


def _default_debug() -> bool:
    return get_settings().debug


class QueryFileOptions(BaseModel):
    """Frozen configuration of a QueryFile."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    minify: StrictBool = False
    debug: StrictBool = Field(default_factory=_default_debug)

    @classmethod
    def resolve(
        cls, options: "QueryFileOptions | Mapping[str, Any] | None"
    ) -> "QueryFileOptions":
        """Merge user options over the defaults.

        Args:
            options: Existing options, a mapping of overrides, or None.

        Returns:
            QueryFileOptions: Validated, frozen options.
        """

        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls(**dict(options))
