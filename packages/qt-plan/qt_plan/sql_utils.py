"""SQL text helpers: comment stripping and statement-kind checks.

Only statements whose first keyword (after comments are removed) is SELECT
can be explained. Everything else is rejected before the data source is
contacted.
"""

from __future__ import annotations

import logging
import re

import sqlglot
from sqlglot.errors import TokenError

from .errors import UnsupportedStatementKind

logger = logging.getLogger(__name__)

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"(--|#)[^\n]*")

SELECT_KEYWORD = "SELECT"


def _strip_comments_regex(sql: str) -> str:
    """Regex fallback for text the tokenizer rejects (e.g. unterminated quotes)."""
    sql = _BLOCK_COMMENT.sub(" ", sql)
    return _LINE_COMMENT.sub(" ", sql).strip()


def strip_comments(sql: str, dialect: str = "mysql") -> str:
    """Remove comments from SQL using the sqlglot tokenizer.

    Token text is sliced from the original string, so string literals
    (including ones that look like comments) are preserved as written.

    Args:
        sql: SQL text.
        dialect: sqlglot dialect used for tokenizing.

    Returns:
        SQL with comments removed and tokens separated by single spaces.
    """
    try:
        tokens = sqlglot.tokenize(sql, read=dialect)
    except TokenError as e:
        logger.debug(f"sqlglot tokenizing failed, falling back to regex: {e}")
        return _strip_comments_regex(sql)

    return " ".join(sql[tok.start:tok.end + 1] for tok in tokens)


def normalize_statement(sql: str, dialect: str = "mysql") -> str:
    """Strip comments and uppercase the statement."""
    return strip_comments(sql, dialect).strip().upper()


def is_select_statement(sql: str, dialect: str = "mysql") -> bool:
    """True if the statement starts with SELECT once comments are removed."""
    return normalize_statement(sql, dialect).startswith(SELECT_KEYWORD)


def ensure_select(sql: str, dialect: str = "mysql") -> None:
    """Raise UnsupportedStatementKind unless the statement is a SELECT."""
    if not is_select_statement(sql, dialect):
        raise UnsupportedStatementKind(sql)
