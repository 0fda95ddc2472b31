"""Small demonstration of kernels, bounding boxes and trees."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .block import BlockTree
from .cluster import ClusterTree
from .kernel import Kernel, Laplace
from .node import Nodes

_DEMO_POINTS = [
    (0.0, 0.0, 2.0),
    (0.4, 0.2, 0.3),
    (0.5, 0.5, 0.3),
    (0.0, 1.0, 0.0),
]


def _print_matrix(nodes: Nodes, kernel: Kernel) -> None:
    for i, x in enumerate(nodes.points):
        for j, y in enumerate(nodes.points):
            print(f"{i}th row, {j}th column, cell value = {kernel.eval(x, y)!r}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hmatrices", description=__doc__)
    parser.add_argument("--leaf-size", type=int, default=1)
    parser.add_argument("--max-dist", type=float, default=0.3)
    args = parser.parse_args(argv)

    value = Laplace().eval((0.0, 0.0), (4.0, 0.0))
    print(f"Laplace Greens function = {value.real!r}")

    nodes = Nodes(_DEMO_POINTS)
    print(f"ith node value = {list(nodes.points[2])}")

    _print_matrix(nodes, Laplace())

    bbox = nodes.bbox_from_indices([0, 1, 3])
    print(f"min values of the bounding box = {list(bbox.min)}")
    print(f"centre of the bounding box = {bbox.centre()}")

    cluster_tree = ClusterTree.build_tree(nodes, args.leaf_size)
    BlockTree.build_tree(cluster_tree, cluster_tree, args.max_dist)
    print(cluster_tree.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())