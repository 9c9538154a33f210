"""Row source protocol and an in-memory implementation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence


class RowSource(Protocol):
    """Protocol for anything that can run a plan query and return rows."""

    name: str
    """Identifier used in error messages (no credentials)."""

    def execute_for_rows(self, sql: str) -> list[dict[str, Any]]:
        """Execute SQL and return results as list of dicts, in result order."""
        ...


class StaticRowSource:
    """Row source replaying rows that were fetched earlier.

    Every call returns fresh copies of the stored rows; the SQL text is
    ignored.

    Usage:
        source = StaticRowSource.from_json_file("explain_rows.json")
        steps = PlanStepCollector(source).collect("SELECT ...")
    """

    def __init__(self, rows: Sequence[Mapping[str, Any]], name: str = "static"):
        self._rows = [dict(row) for row in rows]
        self.name = name

    @classmethod
    def from_json_file(cls, path: str | Path) -> "StaticRowSource":
        """Load rows from a JSON file.

        Accepts either a list of row objects or ``{"rows": [...]}``.
        """
        path = Path(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = data.get("rows", [])
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise ValueError(f"Expected a list of row objects in {path}")
        return cls(data, name=str(path))

    def execute_for_rows(self, sql: str) -> list[dict[str, Any]]:
        return [dict(row) for row in self._rows]

    def __len__(self) -> int:
        return len(self._rows)
