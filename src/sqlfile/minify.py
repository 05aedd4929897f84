"""Default SQL minifier built on the sqlglot tokenizer."""

# Standard Library
from collections.abc import Callable
from pathlib import Path

# Third-Party
from sqlglot.dialects.dialect import Dialect
from sqlglot.errors import TokenError

# Local
from .errors import SQLParsingError

DEFAULT_DIALECT = "postgres"

Minifier = Callable[[str, Path], str]


def minify(sql: str, file: Path | str | None = None, *, dialect: str = DEFAULT_DIALECT) -> str:
    """Strip comments and redundant whitespace from SQL text.

    Tokens are copied from the source as written, so case, literals, casts
    and statements the parser does not know survive unchanged. Any run of
    whitespace and comments between two tokens becomes a single space;
    tokens that touch in the source stay touching.

    Args:
        sql: Raw SQL source.
        file: Source identifier attached to errors.
        dialect: sqlglot dialect whose tokenizer is used.

    Returns:
        str: Minified SQL.

    Raises:
        SQLParsingError: If the text cannot be tokenized, e.g. an
            unterminated string or quoted identifier.
    """

    try:
        tokens = Dialect.get_or_raise(dialect).tokenize(sql)
    except TokenError as exc:
        raise SQLParsingError.from_token_error(exc, sql, file) from exc

    parts: list[str] = []
    previous_end = None
    for token in tokens:
        if previous_end is not None and token.start > previous_end + 1:
            parts.append(" ")
        parts.append(sql[token.start : token.end + 1])
        previous_end = token.end
    return "".join(parts)
