"""Hierarchical matrices assembled from block trees."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .block import BlockTree, BlockType
from .cluster import ClusterTree
from .kernel import Kernel
from .node import Nodes

_ACA_TOLERANCE = 1e-12


@dataclass
class DenseBlock:
    """A block held in full; ``data[i, j]`` couples ``rows[i]`` with ``cols[j]``."""

    rows: list[int]
    cols: list[int]
    data: np.ndarray

    def to_array(self) -> np.ndarray:
        return self.data


@dataclass
class LowRankBlock:
    """A block approximated as ``u @ v.T`` with ``u`` of shape (rows, rank)."""

    rows: list[int]
    cols: list[int]
    u: np.ndarray
    v: np.ndarray

    @property
    def rank(self) -> int:
        return self.u.shape[1]

    def to_array(self) -> np.ndarray:
        return self.u @ self.v.T


BlockStorage = DenseBlock | LowRankBlock


def build_dense_block(
    target_nodes: Nodes,
    source_nodes: Nodes,
    rows: Sequence[int],
    cols: Sequence[int],
    kernel: Kernel,
) -> DenseBlock:
    """Evaluate the kernel at every row/column pair of the block."""
    rows, cols = list(rows), list(cols)
    data = np.array(
        [
            [kernel.eval(target_nodes.points[i], source_nodes.points[j]) for j in cols]
            for i in rows
        ],
        dtype=complex,
    ).reshape(len(rows), len(cols))
    return DenseBlock(rows, cols, data)


def build_low_rank_block(
    target_nodes: Nodes,
    source_nodes: Nodes,
    rows: Sequence[int],
    cols: Sequence[int],
    kernel: Kernel,
) -> LowRankBlock:
    """Approximate the block by adaptive cross approximation with partial pivoting."""
    rows, cols = list(rows), list(cols)
    m, n = len(rows), len(cols)
    max_rank = min(m, n)
    us: list[np.ndarray] = []
    vs: list[np.ndarray] = []
    unused = set(range(m))
    norm_sq = 0.0
    i = 0

    while len(us) < max_rank and unused:
        unused.discard(i)
        x = target_nodes.points[rows[i]]
        row = np.array([kernel.eval(x, source_nodes.points[c]) for c in cols], dtype=complex)
        for u, v in zip(us, vs):
            row -= u[i] * v
        j = int(np.argmax(np.abs(row)))
        pivot = row[j]
        if pivot == 0:
            if not unused:
                break
            i = min(unused)
            continue

        v_new = row / pivot
        y = source_nodes.points[cols[j]]
        u_new = np.array([kernel.eval(target_nodes.points[r], y) for r in rows], dtype=complex)
        for u, v in zip(us, vs):
            u_new -= v[j] * u

        uu = np.vdot(u_new, u_new).real
        vv = np.vdot(v_new, v_new).real
        cross = sum(
            (np.vdot(u, u_new) * np.vdot(v, v_new) for u, v in zip(us, vs)), 0j
        )
        norm_sq += 2.0 * cross.real + uu * vv
        us.append(u_new)
        vs.append(v_new)

        if math.sqrt(uu * vv) <= _ACA_TOLERANCE * math.sqrt(max(norm_sq, 0.0)):
            break
        if not unused:
            break
        i = max(unused, key=lambda k: abs(u_new[k]))

    u_mat = np.column_stack(us) if us else np.zeros((m, 0), dtype=complex)
    v_mat = np.column_stack(vs) if vs else np.zeros((n, 0), dtype=complex)
    return LowRankBlock(rows, cols, u_mat, v_mat)


@dataclass
class HMatrix:
    """A kernel matrix stored as dense near blocks and low-rank far blocks."""

    block_tree: BlockTree
    blocks: list[BlockStorage]
    kernel: Kernel
    n_rows: int
    n_cols: int

    @classmethod
    def assemble(
        cls,
        target_nodes: Nodes,
        source_nodes: Nodes,
        target_tree: ClusterTree,
        source_tree: ClusterTree,
        block_tree: BlockTree,
        kernel: Kernel,
    ) -> HMatrix:
        """Store every leaf of ``block_tree`` according to its block type."""
        if target_nodes.dim != source_nodes.dim:
            raise ValueError("target and source nodes differ in dimension")
        blocks: list[BlockStorage] = []
        for leaf in block_tree.leaves():
            rows = list(target_tree.nodes[leaf.target_index].indices)
            cols = list(source_tree.nodes[leaf.source_index].indices)
            build = build_dense_block if leaf.block_type is BlockType.NEAR else build_low_rank_block
            blocks.append(build(target_nodes, source_nodes, rows, cols, kernel))
        return cls(block_tree, blocks, kernel, len(target_nodes), len(source_nodes))

    def to_dense(self) -> np.ndarray:
        """The full matrix rebuilt from the stored blocks."""
        out = np.zeros((self.n_rows, self.n_cols), dtype=complex)
        for block in self.blocks:
            out[np.ix_(block.rows, block.cols)] = block.to_array()
        return out