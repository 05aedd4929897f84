"""File-backed SQL queries with minification and change detection."""

# Local
from .errors import FileReadError, Position, QueryFileError, SQLParsingError
from .minify import minify
from .models import QueryFileOptions
from .query_file import QueryFile
from .query_loader import QueryLoader

__all__ = [
    "FileReadError",
    "Position",
    "QueryFile",
    "QueryFileError",
    "QueryFileOptions",
    "QueryLoader",
    "SQLParsingError",
    "minify",
]
