"""Data sources for plan-explain rows."""

from .base import RowSource, StaticRowSource
from .factory import (
    create_row_source,
    create_row_source_from_file,
    normalize_database_url,
)
from .sqlalchemy_source import SQLAlchemyRowSource, mask_url

__all__ = [
    "RowSource",
    "StaticRowSource",
    "SQLAlchemyRowSource",
    "create_row_source",
    "create_row_source_from_file",
    "normalize_database_url",
    "mask_url",
]
