"""Rebuild a plan tree from flat EXPLAIN rows.

MySQL reports a plan as a flat list of rows. Rows sharing the same ``id``
belong to the same query block (a join of several tables); blocks are
numbered 1, 2, 3, ... for sub-selects and unions. Rows with a NULL id
(e.g. UNION RESULT) stand on their own.

Algorithm:
1. One step: a single leaf, no grouping.
2. Scan ids 1, 2, 3, ... and stop at the first id with no rows.
   - A block with one row becomes a leaf root.
   - A block with several rows is folded into a left-deep chain of joins:
     Join(Join(A, B), C). The outermost join is the block's root.
3. Steps never consumed by the scan are appended in source order.

The builder is total: it never raises, whatever the ids look like.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Optional, Sequence

from .nodes import JoinNode, LeafNode, PlanNode
from .steps import PlanStep

logger = logging.getLogger(__name__)


class PlanTreeBuilder:
    """Convert an ordered sequence of plan steps into a forest of plan nodes.

    Instances hold no state between calls; one builder may be shared by
    concurrent callers.
    """

    def convert_to_plan_tree(self, steps: Sequence[PlanStep]) -> list[PlanNode]:
        """Build the root list for the given steps.

        Args:
            steps: Plan steps in source order.

        Returns:
            Root nodes: grouped blocks in ascending id order, then leftover
            steps in source order.
        """
        roots: list[PlanNode] = []

        if len(steps) == 1:
            roots.append(LeafNode(steps[0], 0))
            return roots

        # Source indexes per group id, in source order
        by_id: dict[int, list[int]] = defaultdict(list)
        for index, step in enumerate(steps):
            if step.group_id is not None:
                by_id[step.group_id].append(index)

        parsed: set[int] = set()
        group_id = 1
        while True:
            indexes = by_id.get(group_id)
            if not indexes:
                break
            leaves = [LeafNode(steps[i], i) for i in indexes]
            if len(leaves) == 1:
                roots.append(leaves[0])
            else:
                roots.append(self._join_nodes(leaves))
            parsed.update(indexes)
            logger.debug(f"Plan group {group_id}: {len(indexes)} step(s)")
            group_id += 1

        # Add the rest
        for index, step in enumerate(steps):
            if index not in parsed:
                roots.append(LeafNode(step, index))

        unreached = sorted(gid for gid in by_id if gid > group_id)
        if unreached:
            logger.debug(f"Plan group scan stopped at {group_id}; ids {unreached} kept as standalone roots")

        return roots

    @staticmethod
    def _join_nodes(leaves: list[LeafNode]) -> JoinNode:
        """Fold two or more leaves into a left-deep join chain."""
        parent: Optional[PlanNode] = leaves[0].parent
        running: PlanNode = leaves[0]
        for leaf in leaves[1:]:
            running = JoinNode(parent, running, leaf)
        assert isinstance(running, JoinNode)
        return running


def convert_to_plan_tree(steps: Sequence[PlanStep]) -> list[PlanNode]:
    """Convenience wrapper around PlanTreeBuilder.convert_to_plan_tree()."""
    return PlanTreeBuilder().convert_to_plan_tree(steps)
