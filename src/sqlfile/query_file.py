"""File-backed SQL query with on-demand revalidation."""

# Standard Library
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

# Third-Party
from loguru import logger

# Local
from .errors import FileReadError, QueryFileError, SQLParsingError
from .minify import Minifier, minify
from .models import QueryFileOptions


class QueryFile:
    """SQL loaded from a file, optionally minified, cached until it changes.

    Construction prepares the file once. Afterwards exactly one of `query`
    and `error` is set. Failures are never raised from here; they are kept in
    `error` and raised by the executor helpers in `sqlfile.db` instead.

    With `debug` off the first successfully loaded text is kept for the life
    of the object. With `debug` on every `prepare()` compares the file's
    modification time and reloads when it differs.
    """

    def __init__(
        self,
        path: Path | str,
        options: QueryFileOptions | Mapping[str, Any] | None = None,
        *,
        minifier: Minifier = minify,
    ) -> None:
        """Resolve options and load the file.

        Args:
            path: Path to the SQL file.
            options: Options or overrides of `minify` / `debug`.
            minifier: Callable used when `minify` is on.

        Raises:
            ValueError: If path is empty.
            pydantic.ValidationError: If options are invalid.
        """

        if not str(path).strip() or Path(path) == Path("."):
            raise ValueError("path required")

        self._path = Path(path)
        self._options = QueryFileOptions.resolve(options)
        self._minifier = minifier
        self._lock = threading.Lock()
        # (query, error), always replaced as a whole
        self._state: tuple[str | None, QueryFileError | None] = (None, None)
        self._mtime: int | None = None

        self.prepare()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def options(self) -> QueryFileOptions:
        return self._options

    @property
    def query(self) -> str | None:
        """Resolved SQL text, or None if the last prepare failed."""

        return self._state[0]

    @property
    def error(self) -> QueryFileError | None:
        """Failure captured by the last prepare, or None."""

        return self._state[1]

    def inspect(self) -> QueryFileError | str | None:
        """Return the error if there is one, otherwise the query."""

        query, error = self._state
        if error is not None:
            return error
        return query

    def prepare(self) -> None:
        """Load or revalidate the file, capturing any failure in `error`."""

        with self._lock:
            self._prepare()

    def _prepare(self) -> None:
        debug = self._options.debug
        if not debug and self._state[0] is not None:
            return

        try:
            mtime = self._path.stat().st_mtime_ns
        except OSError as exc:
            self._fail(FileReadError(self._path, exc))
            return

        if debug and self._state[0] is not None and mtime == self._mtime:
            return

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._fail(FileReadError(self._path, exc))
            return

        if self._options.minify:
            try:
                text = self._minifier(text, self._path)
            except SQLParsingError as exc:
                if exc.file is None:
                    exc.file = self._path
                self._fail(exc)
                return
            except Exception as exc:
                error = SQLParsingError(str(exc), self._path)
                error.__cause__ = exc
                self._fail(error)
                return

        self._state = (text, None)
        self._mtime = mtime
        logger.debug("Loaded query file {}", self._path)

    def _fail(self, error: QueryFileError) -> None:
        # mtime stays as-is so the next prepare retries the file
        previous = self._state[1]
        self._state = (None, error)
        if _same_failure(previous, error):
            return
        logger.warning("Query file {} failed: {}", self._path, error)

    def __str__(self) -> str:
        return str(self.inspect())

    def __repr__(self) -> str:
        return (
            f"QueryFile(path={str(self._path)!r}, "
            f"minify={self._options.minify}, debug={self._options.debug})"
        )


def _same_failure(previous: QueryFileError | None, error: QueryFileError) -> bool:
    return (
        previous is not None
        and type(previous) is type(error)
        and str(previous) == str(error)
    )
