"""Binary cluster trees built by bisecting point sets along their longest axis."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .node import BBox, Nodes


@dataclass
class ClusterNode:
    """A cluster of point indices with its bounding box and children."""

    bbox: BBox
    indices: list[int]
    children: tuple[int, int] | None = None
    level: int = 0

    def is_leaf(self) -> bool:
        return self.children is None


@dataclass
class ClusterTree:
    """Clusters stored in post-order; the root is the last node."""

    nodes: list[ClusterNode] = field(default_factory=list)
    root_id: int = 0

    @classmethod
    def build_tree(cls, nodes: Nodes, leaf_size: int) -> ClusterTree:
        """Split all points of ``nodes`` until clusters hold at most ``leaf_size``."""
        if leaf_size < 1:
            raise ValueError("leaf_size must be at least 1")
        tree = cls()
        tree.root_id = tree._build(nodes, list(range(len(nodes.points))), 0, leaf_size)
        return tree

    def _build(self, nodes: Nodes, indices: Sequence[int], level: int, leaf_size: int) -> int:
        bbox = nodes.bbox_from_indices(indices)

        if len(indices) <= leaf_size:
            self.nodes.append(ClusterNode(bbox, list(indices), None, level))
            return len(self.nodes) - 1

        longest_dim, longest_len = 0, 0.0
        for d, (lo, hi) in enumerate(zip(bbox.min, bbox.max)):
            if hi - lo > longest_len:
                longest_dim, longest_len = d, hi - lo

        ordered = sorted(indices, key=lambda i: nodes.points[i][longest_dim])
        mid = len(ordered) // 2
        left_id = self._build(nodes, ordered[:mid], level + 1, leaf_size)
        right_id = self._build(nodes, ordered[mid:], level + 1, leaf_size)

        self.nodes.append(ClusterNode(bbox, ordered, (left_id, right_id), level))
        return len(self.nodes) - 1

    def summary(self) -> str:
        """One line per node giving its level and index, then the root index."""
        lines = [f"level: {node.level}, index: {i}" for i, node in enumerate(self.nodes)]
        lines.append(f"root_id: {self.root_id}")
        return "\n".join(lines)