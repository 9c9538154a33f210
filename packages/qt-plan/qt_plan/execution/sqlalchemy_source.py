"""SQLAlchemy-backed row source for live databases."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

logger = logging.getLogger(__name__)


class SQLAlchemyRowSource:
    """Run plan queries through a SQLAlchemy engine.

    Statements are sent with ``exec_driver_sql`` so that text such as
    ``:name`` inside the query is passed through untouched.

    Usage:
        with SQLAlchemyRowSource("mysql+pymysql://user:pw@localhost/db") as source:
            rows = source.execute_for_rows("EXPLAIN EXTENDED SELECT * FROM t")

    Args:
        url: SQLAlchemy database URL (ignored if ``engine`` is given).
        engine: Existing engine to use. It is not disposed by ``close()``.
        echo: Enable SQLAlchemy statement logging.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        engine: Optional[Engine] = None,
        echo: bool = False,
    ):
        if engine is None and not url:
            raise ValueError("Either url or engine is required")
        self._owns_engine = engine is None
        self._engine: Optional[Engine] = engine or create_engine(url, echo=echo)
        self.name = self._engine.url.render_as_string(hide_password=True)

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Row source is closed")
        return self._engine

    def execute_for_rows(self, sql: str) -> list[dict[str, Any]]:
        """Execute SQL and return results as list of dicts."""
        with self.engine.connect() as conn:
            result = conn.exec_driver_sql(sql)
            if not result.returns_rows:
                return []
            rows = [dict(row) for row in result.mappings()]
        logger.debug(f"{self.name}: {len(rows)} row(s)")
        return rows

    def close(self) -> None:
        """Dispose the engine if this source created it."""
        if self._engine is not None and self._owns_engine:
            self._engine.dispose()
        self._engine = None

    def __enter__(self) -> "SQLAlchemyRowSource":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def mask_url(url: str) -> str:
    """Render a database URL with the password hidden."""
    return make_url(url).render_as_string(hide_password=True)
