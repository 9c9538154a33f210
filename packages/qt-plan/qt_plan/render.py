"""Serialize and display plan forests."""

from __future__ import annotations

import json
from typing import Any, Optional, Sequence

from rich.markup import escape
from rich.tree import Tree

from .plan.nodes import JoinNode, LeafNode, NodeKind, PlanNode

# Columns shown in tree labels, in order (MySQL EXPLAIN names)
LABEL_COLUMNS = ("select_type", "table", "type", "key", "rows", "extra")


def node_to_dict(node: PlanNode) -> dict[str, Any]:
    """Convert a node (and its subtree) to a JSON-friendly dict."""
    if node.kind is NodeKind.LEAF:
        assert isinstance(node, LeafNode)
        return {
            "kind": node.kind.value,
            "index": node.index,
            "group_id": node.step.group_id,
            "columns": dict(node.step.columns),
        }
    if node.kind is NodeKind.JOIN:
        assert isinstance(node, JoinNode)
        return {
            "kind": node.kind.value,
            "children": [node_to_dict(child) for child in node.children],
        }
    raise TypeError(f"Unknown plan node kind: {node.kind!r}")


def forest_to_dicts(forest: Sequence[PlanNode]) -> list[dict[str, Any]]:
    return [node_to_dict(root) for root in forest]


def forest_to_json(forest: Sequence[PlanNode], indent: Optional[int] = 2) -> str:
    """Serialize a forest to JSON. Non-JSON column values are stringified."""
    return json.dumps(forest_to_dicts(forest), indent=indent, default=str)


def node_label(node: PlanNode) -> str:
    """One-line label for a node."""
    if node.kind is NodeKind.LEAF:
        assert isinstance(node, LeafNode)
        parts = [f"#{node.step.group_id}" if node.step.group_id is not None else "#-"]
        for column in LABEL_COLUMNS:
            value = node.step.get(column)
            if value is not None and value != "":
                parts.append(escape(f"{column}={value}"))
        return " ".join(parts)
    if node.kind is NodeKind.JOIN:
        return "[bold]JOIN[/bold]"
    raise TypeError(f"Unknown plan node kind: {node.kind!r}")


def _add_subtree(tree: Tree, node: PlanNode) -> None:
    branch = tree.add(node_label(node))
    for child in node.children:
        _add_subtree(branch, child)


def build_rich_tree(forest: Sequence[PlanNode], title: str = "Plan") -> Tree:
    """Build a rich Tree with one branch per root."""
    tree = Tree(f"[bold cyan]{title}[/bold cyan]")
    for root in forest:
        _add_subtree(tree, root)
    return tree
