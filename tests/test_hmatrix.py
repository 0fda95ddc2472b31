import numpy as np
import pytest

from hmatrices.block import BlockTree
from hmatrices.cluster import ClusterTree
from hmatrices.hmatrix import (
    DenseBlock,
    HMatrix,
    LowRankBlock,
    build_dense_block,
    build_low_rank_block,
)
from hmatrices.kernel import Helmholtz, Kernel, Laplace
from hmatrices.node import Nodes


class _Zero(Kernel):
    def eval(self, x, y):
        return 0j


def _nodes(n, dim=3, seed=0, shift=0.0):
    rng = np.random.default_rng(seed)
    return Nodes((rng.random((n, dim)) + shift).tolist())


def _full(kernel, target, source):
    return np.array([[kernel.eval(x, y) for y in source.points] for x in target.points])


def test_dense_block_entries():
    target = _nodes(5, seed=1)
    source = _nodes(4, seed=2)
    kernel = Laplace()
    block = build_dense_block(target, source, [4, 0, 2], [3, 1], kernel)
    assert block.to_array().shape == (3, 2)
    assert block.to_array()[0, 0] == kernel.eval(target.points[4], source.points[3])
    assert block.to_array()[2, 1] == kernel.eval(target.points[2], source.points[1])


@pytest.mark.parametrize("kernel", [Laplace(), Helmholtz(2.0)])
def test_low_rank_block_of_separated_clusters(kernel):
    target = _nodes(30, seed=3)
    source = _nodes(30, seed=4, shift=10.0)
    rows, cols = list(range(30)), list(range(30))
    block = build_low_rank_block(target, source, rows, cols, kernel)
    exact = _full(kernel, target, source)
    assert block.rank < 30
    assert block.u.shape == (30, block.rank)
    assert block.v.shape == (30, block.rank)
    err = np.linalg.norm(block.to_array() - exact) / np.linalg.norm(exact)
    assert err < 1e-6


def test_low_rank_block_full_rank_is_exact():
    target = _nodes(4, seed=5)
    source = _nodes(6, seed=6, shift=0.2)
    kernel = Laplace()
    block = build_low_rank_block(target, source, range(4), range(6), kernel)
    np.testing.assert_allclose(block.to_array(), _full(kernel, target, source), rtol=1e-9)


def test_low_rank_block_of_zero_kernel_has_rank_zero():
    target = _nodes(5, seed=7)
    source = _nodes(3, seed=8)
    block = build_low_rank_block(target, source, range(5), range(3), _Zero())
    assert block.rank == 0
    assert np.array_equal(block.to_array(), np.zeros((5, 3)))


@pytest.mark.parametrize("dim,kernel", [(3, Laplace()), (2, Laplace()), (3, Helmholtz(1.5))])
def test_assembled_matrix_matches_full_kernel(dim, kernel):
    target = _nodes(60, dim=dim, seed=9)
    source = _nodes(50, dim=dim, seed=10, shift=0.3)
    ttree = ClusterTree.build_tree(target, 6)
    stree = ClusterTree.build_tree(source, 6)
    btree = BlockTree.build_tree(ttree, stree, 0.5)
    hmat = HMatrix.assemble(target, source, ttree, stree, btree, kernel)
    assert (hmat.n_rows, hmat.n_cols) == (60, 50)
    assert len(hmat.blocks) == len(btree.leaves())
    exact = _full(kernel, target, source)
    err = np.linalg.norm(hmat.to_dense() - exact) / np.linalg.norm(exact)
    assert err < 1e-6


def test_block_storage_follows_block_type():
    target = _nodes(40, seed=11)
    source = _nodes(40, seed=12, shift=1.0)
    ttree = ClusterTree.build_tree(target, 4)
    stree = ClusterTree.build_tree(source, 4)
    btree = BlockTree.build_tree(ttree, stree, 0.5)
    hmat = HMatrix.assemble(target, source, ttree, stree, btree, Laplace())
    kinds = [type(b) for b in hmat.blocks]
    expected = [
        DenseBlock if leaf.block_type.value == "near" else LowRankBlock for leaf in btree.leaves()
    ]
    assert kinds == expected
    assert LowRankBlock in kinds


def test_assemble_rejects_mixed_dimensions():
    target = _nodes(4, dim=2)
    source = _nodes(4, dim=3)
    ttree = ClusterTree.build_tree(target, 2)
    stree = ClusterTree.build_tree(source, 2)
    with pytest.raises(ValueError):
        btree = BlockTree.build_tree(ttree, stree, 0.3)
        HMatrix.assemble(target, source, ttree, stree, btree, Laplace())