"""Error types captured by QueryFile and raised by the executor helpers."""

# Standard Library
import re
from dataclasses import dataclass
from pathlib import Path

# Third-Party
from sqlglot.errors import TokenError


@dataclass(frozen=True)
class Position:
    """One-based line/column of a parsing failure."""

    line: int
    column: int


class QueryFileError(Exception):
    """Base class for failures captured while preparing a query file."""

    kind = "query file error"

    def __init__(self, message: str, file: Path | str | None = None) -> None:
        super().__init__(message)
        self.file = file


class FileReadError(QueryFileError):
    """The query file could not be stat'd or read."""

    kind = "file read error"

    def __init__(self, file: Path | str, cause: Exception) -> None:
        super().__init__(f"Cannot read query file {file}: {cause}", file)
        self.cause = cause
        self.__cause__ = cause


class SQLParsingError(QueryFileError):
    """The minifier rejected the query text.

    Attributes:
        error: Short description of the problem.
        file: Source file the text came from, when known.
        position: Where the problem was found, when the tokenizer reports it.
        context: Snippet around the failure, suitable for display.
    """

    kind = "SQL parsing error"

    def __init__(
        self,
        error: str,
        file: Path | str | None = None,
        *,
        position: Position | None = None,
        context: str | None = None,
    ) -> None:
        location = f" at {position.line}:{position.column}" if position else ""
        source = f" in {file}" if file is not None else ""
        super().__init__(f"{error}{source}{location}", file)
        self.error = error
        self.position = position
        self.context = context

    @classmethod
    def from_token_error(
        cls, exc: TokenError, sql: str, file: Path | str | None = None
    ) -> "SQLParsingError":
        """Translate a sqlglot tokenizer failure.

        sqlglot reports unterminated tokens as "Missing <delimiter> from
        <line>:<offset>", possibly wrapped in a generic "Error tokenizing"
        error. The offset is turned into a line/column and a caret snippet.
        """

        error = str(exc)
        position = None
        context = None

        for cause in _exception_chain(exc):
            match = _MISSING_DELIMITER.search(str(cause))
            if match is None:
                continue
            offset = min(int(match.group("offset")), max(len(sql) - 1, 0))
            error = f"Missing {match.group('delimiter')}"
            position, context = _locate(sql, offset)
            break

        parsed = cls(error, file, position=position, context=context)
        parsed.__cause__ = exc
        return parsed


_MISSING_DELIMITER = re.compile(r"Missing (?P<delimiter>.+?) from \d+:(?P<offset>\d+)")


def _exception_chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def _locate(sql: str, offset: int) -> tuple[Position, str]:
    line_start = sql.rfind("\n", 0, offset) + 1
    line_end = sql.find("\n", offset)
    if line_end == -1:
        line_end = len(sql)

    column = offset - line_start + 1
    position = Position(line=sql.count("\n", 0, offset) + 1, column=column)
    context = f"{sql[line_start:line_end]}\n{' ' * (column - 1)}^"
    return position, context
