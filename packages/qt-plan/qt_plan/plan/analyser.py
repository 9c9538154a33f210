"""MySQL execution plan analyser."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..execution.base import RowSource
from .collector import EXPLAIN_PREFIX, PlanStepCollector, build_plan_query
from .nodes import PlanNode
from .tree_builder import PlanTreeBuilder


class MySQLPlanAnalyser:
    """Explain one query and hold the reconstructed plan forest.

    Usage:
        analyser = MySQLPlanAnalyser("SELECT * FROM orders o JOIN users u ON ...")
        analyser.explain(source)
        for root in analyser.get_plan_nodes():
            ...
    """

    def __init__(self, query: str, dialect: str = "mysql", explain_prefix: str = EXPLAIN_PREFIX):
        self.query = query
        self.dialect = dialect
        self.explain_prefix = explain_prefix
        self._root_nodes: Optional[list[PlanNode]] = None

    def get_query_string(self) -> str:
        return self.query

    def get_plan_query_string(self) -> str:
        return build_plan_query(self.query, self.explain_prefix)

    def get_plan_nodes(self) -> Optional[list[PlanNode]]:
        """Root nodes of the plan, or None if the query was not explained yet."""
        return self._root_nodes

    def explain(self, source: RowSource) -> list[PlanNode]:
        """Collect plan steps from ``source`` and build the plan tree.

        Errors from validation or the round-trip propagate unchanged and
        leave any previously built forest untouched.
        """
        collector = PlanStepCollector(source, self.dialect, self.explain_prefix)
        steps = collector.collect(self.query)
        self._root_nodes = PlanTreeBuilder().convert_to_plan_tree(steps)
        return self._root_nodes

    def load_rows(self, rows: Iterable[Mapping[str, Any]]) -> list[PlanNode]:
        """Build the plan tree from rows fetched elsewhere."""
        steps = PlanStepCollector.from_rows(rows)
        self._root_nodes = PlanTreeBuilder().convert_to_plan_tree(steps)
        return self._root_nodes
