"""Collect plan steps for a query from a row source."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..errors import SourceQueryFailure
from ..execution.base import RowSource
from ..sql_utils import ensure_select
from .steps import PlanStep

logger = logging.getLogger(__name__)

EXPLAIN_PREFIX = "EXPLAIN EXTENDED "


def build_plan_query(query: str, explain_prefix: str = EXPLAIN_PREFIX) -> str:
    """Turn a query into its plan-explain query."""
    return explain_prefix + query


class PlanStepCollector:
    """Materialize plan-explain rows into an ordered list of PlanStep.

    Rows are kept in the order received: no reordering, deduplication or
    filtering.

    Args:
        source: Row source the plan query runs against.
        dialect: sqlglot dialect used to strip comments during validation.
        explain_prefix: Text prepended to the query to form the plan query.
    """

    def __init__(
        self,
        source: RowSource,
        dialect: str = "mysql",
        explain_prefix: str = EXPLAIN_PREFIX,
    ):
        self.source = source
        self.dialect = dialect
        self.explain_prefix = explain_prefix

    def collect(self, query: str) -> list[PlanStep]:
        """Run the plan query for ``query`` and return its steps.

        Raises:
            UnsupportedStatementKind: If the query is not a SELECT. The source
                is not contacted.
            SourceQueryFailure: If the round-trip to the source fails.
        """
        ensure_select(query, self.dialect)
        plan_query = build_plan_query(query, self.explain_prefix)
        try:
            rows = self.source.execute_for_rows(plan_query)
        except Exception as e:
            logger.warning(f"Plan query failed on {self.source.name}: {e}")
            raise SourceQueryFailure(self.source.name, e) from e

        steps = self.from_rows(rows)
        logger.info(f"Collected {len(steps)} plan step(s) from {self.source.name}")
        return steps

    @staticmethod
    def from_rows(rows: Iterable[Mapping[str, Any]]) -> list[PlanStep]:
        """Convert already-fetched rows to steps, one per row, in order."""
        return [PlanStep.from_row(row) for row in rows]
