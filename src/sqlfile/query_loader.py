"""Loads QueryFile objects from nested directories of `.sql` files."""

# Standard Library
from collections.abc import Mapping
from pathlib import Path
from typing import Any

# Local
from .errors import QueryFileError
from .minify import Minifier, minify
from .models import QueryFileOptions
from .query_file import QueryFile


class QueryLoader:
    """Maps query names to QueryFile objects under a base directory.

    Supports nested directories using slash notation: QUERIES["users/all"]
    """

    def __init__(
        self,
        path: Path | str,
        options: QueryFileOptions | Mapping[str, Any] | None = None,
        *,
        minifier: Minifier = minify,
    ) -> None:
        """Initialize the loader with a base path and shared options."""

        self.path = Path(path)
        self.options = QueryFileOptions.resolve(options)
        self.minifier = minifier
        self.cache: dict[str, QueryFile] = {}

    def __getitem__(self, name: str) -> QueryFile:
        """Return the cached QueryFile for a query name.

        Args:
            name: Query name, optionally with path (e.g., "users/all").

        Returns:
            QueryFile: Query for `<path>/<name>.sql`. A missing file yields a
            QueryFile holding a FileReadError.

        Raises:
            ValueError: If name is empty.
        """

        if not name:
            raise ValueError("Query name required")

        if name not in self.cache:
            file_path = self.path / f"{name}.sql"
            self.cache[name] = QueryFile(file_path, self.options, minifier=self.minifier)

        return self.cache[name]

    def names(self) -> list[str]:
        """List query names for every `.sql` file under the base path."""

        return sorted(
            file_path.relative_to(self.path).with_suffix("").as_posix()
            for file_path in self.path.rglob("*.sql")
            if file_path.is_file()
        )

    def prepare_all(self) -> dict[str, QueryFileError]:
        """Prepare every query file and return errors keyed by name."""

        errors: dict[str, QueryFileError] = {}
        for name in self.names():
            query_file = self[name]
            query_file.prepare()
            if query_file.error is not None:
                errors[name] = query_file.error
        return errors
