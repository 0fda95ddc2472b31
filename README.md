# hmatrices

Hierarchical matrices (H-matrices) for free-space Green's function kernels in
two and three dimensions. A point set is split recursively into a binary
cluster tree. Pairs of clusters are arranged in a block tree, and each leaf
block is stored either densely or as a low-rank product built by adaptive
cross approximation.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building blocks

- `hmatrices.node`
  - `Nodes(points)` holds a non-empty set of points that all have the same
    dimension. It raises `ValueError` otherwise.
  - `Nodes.bbox_from_indices(indices)` returns the axis-aligned `BBox` of the
    selected points.
  - `BBox.centre()` returns, for each axis, `(min + max) / dim`. In two
    dimensions this is the midpoint of the box.
  - `BBox.bbox_distance(a, b)` is the Euclidean distance between the
    `centre()` values of two boxes.
- `hmatrices.kernel`
  - `Kernel` is the abstract interface: a subclass implements
    `eval(x, y) -> complex`.
  - `Laplace()` and `Helmholtz(wavenumber)` are the free-space Green's
    functions for 2 and 3 dimensions. The Helmholtz kernel uses the Hankel
    function `H0^(1)` in 2D. Distances are clamped below at `1e-15`. Any other
    dimension raises `ValueError`.
- `hmatrices.cluster`
  - `ClusterTree.build_tree(nodes, leaf_size)` bisects the points along the
    longest side of each bounding box. It stops when a cluster holds at most
    `leaf_size` points.
  - Nodes are stored in post-order, so the root is the last entry and
    `root_id` points to it. Each `ClusterNode` has `bbox`, `indices`,
    `children`, `level` and `is_leaf()`.
  - `ClusterTree.summary()` returns a text listing of levels and indices.
- `hmatrices.block`
  - `BlockTree.build_tree(target_tree, source_tree, max_dist)` pairs clusters.
    `is_far` decides admissibility. A pair whose box centres are more than
    `max_dist` apart becomes a `BlockType.FAR` leaf. A pair of nearby leaves
    becomes a `BlockType.NEAR` leaf. Any other nearby pair is split further.
  - `BlockTree.leaves()` returns the childless blocks.
- `hmatrices.hmatrix`
  - `HMatrix.assemble(target_nodes, source_nodes, target_tree, source_tree,
    block_tree, kernel)` stores each near leaf as a `DenseBlock` (see
    `build_dense_block`). It stores each far leaf as a `LowRankBlock` with
    factors `u`, `v` such that the block is `u @ v.T` (see
    `build_low_rank_block`, which uses adaptive cross approximation with
    partial pivoting).
  - `HMatrix.to_dense()` rebuilds the full complex matrix of shape
    `(n_rows, n_cols)`.

## Example

```python
from hmatrices.node import Nodes
from hmatrices.kernel import Helmholtz
from hmatrices.cluster import ClusterTree
from hmatrices.block import BlockTree
from hmatrices.hmatrix import HMatrix

nodes = Nodes([[0.0, 0.0, 2.0], [0.4, 0.2, 0.3], [0.5, 0.5, 0.3], [0.0, 1.0, 0.0]])
tree = ClusterTree.build_tree(nodes, 1)
blocks = BlockTree.build_tree(tree, tree, 0.3)

matrix = HMatrix.assemble(nodes, nodes, tree, tree, blocks, Helmholtz(3.02))
dense = matrix.to_dense()   # complex array of shape (4, 4)
```

## Command line

```
hmatrices [--leaf-size N] [--max-dist D]
```

This runs a short demonstration on four fixed 3D points. It evaluates the
Laplace kernel, prints the kernel matrix and a bounding box, and builds a
cluster tree and a block tree. It then prints the cluster tree summary.
`--leaf-size` defaults to 1 and `--max-dist` to 0.3.

## What is not included

An `HMatrix` can be assembled and turned back into a dense array, but no
arithmetic is provided on the hierarchical form. There is no matrix-vector
product, no solver and no determinant or singular-value routine.