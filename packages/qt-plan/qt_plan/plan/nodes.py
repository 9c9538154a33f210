"""Plan tree nodes.

Two node kinds exist:
- LeafNode wraps exactly one PlanStep (by reference, no copy).
- JoinNode is synthesized by the tree builder; it carries no step data
  and has exactly two children, left and right.

Code that depends on the node kind dispatches on ``node.kind`` and treats
any other value as an error.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

from .steps import PlanStep


class NodeKind(str, Enum):
    """Kind tag for plan nodes."""
    LEAF = "leaf"
    JOIN = "join"


class PlanNode:
    """A node in the reconstructed plan tree."""

    kind: NodeKind

    def __init__(self, parent: Optional["PlanNode"] = None):
        self.parent = parent

    @property
    def children(self) -> list["PlanNode"]:
        """Child nodes in production order."""
        raise NotImplementedError

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def walk(self) -> Iterator["PlanNode"]:
        """Yield this node and all descendants, depth-first, left to right."""
        yield self
        for child in self.children:
            yield from child.walk()

    def leaves(self) -> Iterator["LeafNode"]:
        """Yield the leaf nodes under (and including) this node."""
        for node in self.walk():
            if node.kind is NodeKind.LEAF:
                yield node  # type: ignore[misc]


class LeafNode(PlanNode):
    """Plan node wrapping a single plan step.

    Args:
        step: The wrapped step.
        index: Position of the step in the source sequence.
        parent: Parent node (None for roots).
    """

    kind = NodeKind.LEAF

    def __init__(self, step: PlanStep, index: int, parent: Optional[PlanNode] = None):
        super().__init__(parent)
        self.step = step
        self.index = index

    @property
    def children(self) -> list[PlanNode]:
        return []

    @property
    def group_id(self) -> Optional[int]:
        return self.step.group_id

    def __repr__(self) -> str:
        return f"LeafNode(index={self.index}, group_id={self.step.group_id}, table={self.step.table!r})"


class JoinNode(PlanNode):
    """Synthesized node joining two subtrees that share a group identifier.

    Both operands are re-parented onto the new join.
    """

    kind = NodeKind.JOIN

    def __init__(self, parent: Optional[PlanNode], left: PlanNode, right: PlanNode):
        super().__init__(parent)
        self.left = left
        self.right = right
        left.parent = self
        right.parent = self

    @property
    def children(self) -> list[PlanNode]:
        return [self.left, self.right]

    def __repr__(self) -> str:
        return f"JoinNode(left={self.left!r}, right={self.right!r})"
