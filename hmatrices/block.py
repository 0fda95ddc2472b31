"""Block trees pairing target and source clusters by admissibility."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import product

from .cluster import ClusterTree
from .node import BBox


class BlockType(Enum):
    """How a block is to be stored: in full or as a low-rank approximation."""

    NEAR = "near"
    FAR = "far"


@dataclass
class BlockNode:
    """A pairing of a target cluster with a source cluster."""

    target_index: int
    source_index: int
    children: tuple[int, ...] | None = None
    block_type: BlockType = BlockType.NEAR

    def is_leaf(self) -> bool:
        return self.children is None


def is_far(source_bbox: BBox, target_bbox: BBox, max_dist: float) -> bool:
    """True when the boxes' centres are further apart than ``max_dist``."""
    return BBox.bbox_distance(source_bbox, target_bbox) > max_dist


@dataclass
class BlockTree:
    """Blocks stored in post-order; the root is the last node."""

    nodes: list[BlockNode] = field(default_factory=list)
    root_id: int = 0

    @classmethod
    def build_tree(
        cls, target_tree: ClusterTree, source_tree: ClusterTree, max_dist: float
    ) -> BlockTree:
        """Build the block tree of two cluster trees starting from their roots."""
        tree = cls()
        tree.root_id = tree._build(
            target_tree.root_id, source_tree.root_id, target_tree, source_tree, max_dist
        )
        return tree

    def _push(self, node: BlockNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def _build(
        self,
        target_index: int,
        source_index: int,
        target_tree: ClusterTree,
        source_tree: ClusterTree,
        max_dist: float,
    ) -> int:
        target = target_tree.nodes[target_index]
        source = source_tree.nodes[source_index]

        if is_far(source.bbox, target.bbox, max_dist):
            return self._push(BlockNode(target_index, source_index, None, BlockType.FAR))

        if target.is_leaf() and source.is_leaf():
            return self._push(BlockNode(target_index, source_index, None, BlockType.NEAR))

        target_parts = target.children if target.children is not None else (target_index,)
        source_parts = source.children if source.children is not None else (source_index,)
        children = tuple(
            self._build(t, s, target_tree, source_tree, max_dist)
            for t, s in product(target_parts, source_parts)
        )
        return self._push(BlockNode(target_index, source_index, children, BlockType.NEAR))

    def leaves(self) -> list[BlockNode]:
        """The blocks without children, in storage order."""
        return [node for node in self.nodes if node.is_leaf()]