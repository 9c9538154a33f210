"""Plan steps, plan nodes and tree reconstruction."""

from .analyser import MySQLPlanAnalyser
from .collector import EXPLAIN_PREFIX, PlanStepCollector, build_plan_query
from .nodes import JoinNode, LeafNode, NodeKind, PlanNode
from .steps import PlanStep, coerce_group_id
from .tree_builder import PlanTreeBuilder, convert_to_plan_tree

__all__ = [
    "MySQLPlanAnalyser",
    "EXPLAIN_PREFIX",
    "PlanStepCollector",
    "build_plan_query",
    "NodeKind",
    "PlanNode",
    "LeafNode",
    "JoinNode",
    "PlanStep",
    "coerce_group_id",
    "PlanTreeBuilder",
    "convert_to_plan_tree",
]
