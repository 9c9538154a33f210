"""Pytest configuration and fixtures for qt-plan tests."""

from typing import Any, Optional

import pytest

from qt_plan.config import get_settings
from qt_plan.plan import PlanStep


class RecordingSource:
    """Row source that records every SQL it receives."""

    def __init__(self, rows: Optional[list[dict[str, Any]]] = None, name: str = "recording"):
        self.rows = rows or []
        self.name = name
        self.calls: list[str] = []
        self.closed = False

    def execute_for_rows(self, sql: str) -> list[dict[str, Any]]:
        self.calls.append(sql)
        return [dict(r) for r in self.rows]

    def __enter__(self) -> "RecordingSource":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.closed = True


class FailingSource:
    """Row source whose round-trip always fails."""

    def __init__(self, error: Exception, name: str = "mysql+pymysql://app:***@db/shop"):
        self.error = error
        self.name = name
        self.calls: list[str] = []

    def execute_for_rows(self, sql: str) -> list[dict[str, Any]]:
        self.calls.append(sql)
        raise self.error


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate tests from QT_PLAN_* variables in the developer environment."""
    for name in ("QT_PLAN_DATABASE_URL", "QT_PLAN_DIALECT", "QT_PLAN_EXPLAIN_PREFIX",
                 "QT_PLAN_LOG_LEVEL", "QT_PLAN_DB_ECHO"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_step(group_id: Optional[int], table: str = "t", **columns: Any) -> PlanStep:
    """Build a PlanStep with MySQL-shaped columns."""
    row = {
        "id": group_id,
        "select_type": columns.pop("select_type", "SIMPLE"),
        "table": table,
        "type": columns.pop("type", "ALL"),
        "key": columns.pop("key", None),
        "rows": columns.pop("rows", 1),
        "Extra": columns.pop("Extra", None),
    }
    row.update(columns)
    return PlanStep.from_row(row)


@pytest.fixture
def step():
    """Factory fixture for plan steps."""
    return make_step


# =============================================================================
# SAMPLE EXPLAIN ROWS
# =============================================================================

@pytest.fixture
def join_with_subquery_rows() -> list[dict[str, Any]]:
    """EXPLAIN EXTENDED rows for a two-table join plus a dependent subquery."""
    return [
        {"id": 1, "select_type": "PRIMARY", "table": "o", "type": "ALL",
         "possible_keys": "fk_user", "key": None, "key_len": None, "ref": None,
         "rows": 1000, "filtered": 100.0, "Extra": "Using where"},
        {"id": 1, "select_type": "PRIMARY", "table": "u", "type": "eq_ref",
         "possible_keys": "PRIMARY", "key": "PRIMARY", "key_len": "4", "ref": "shop.o.user_id",
         "rows": 1, "filtered": 100.0, "Extra": None},
        {"id": 2, "select_type": "DEPENDENT SUBQUERY", "table": "r", "type": "ref",
         "possible_keys": "fk_order", "key": "fk_order", "key_len": "4", "ref": "shop.o.id",
         "rows": 3, "filtered": 100.0, "Extra": "Using index"},
    ]


@pytest.fixture
def union_rows() -> list[dict[str, Any]]:
    """EXPLAIN EXTENDED rows for a UNION (the UNION RESULT row has a NULL id)."""
    return [
        {"id": 1, "select_type": "PRIMARY", "table": "a", "type": "ALL", "rows": 10, "Extra": None},
        {"id": 2, "select_type": "UNION", "table": "b", "type": "ALL", "rows": 20, "Extra": None},
        {"id": None, "select_type": "UNION RESULT", "table": "<union1,2>", "type": "ALL",
         "rows": None, "Extra": "Using temporary"},
    ]
