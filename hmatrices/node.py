"""Point sets and axis-aligned bounding boxes."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Point = tuple[float, ...]


@dataclass(frozen=True)
class BBox:
    """Axis-aligned bounding box given by its lower and upper corners."""

    min: Point
    max: Point

    def __post_init__(self) -> None:
        if len(self.min) != len(self.max):
            raise ValueError("bounding box corners differ in dimension")

    @property
    def dim(self) -> int:
        return len(self.min)

    def centre(self) -> list[float]:
        """Sum of the corners divided by the dimension, per axis.

        In two dimensions this is the midpoint of the box.
        """
        return [(lo + hi) / self.dim for lo, hi in zip(self.min, self.max)]

    @staticmethod
    def bbox_distance(source_bbox: BBox, target_bbox: BBox) -> float:
        """Euclidean distance between the centres of two boxes."""
        if source_bbox.dim != target_bbox.dim:
            raise ValueError("bounding boxes differ in dimension")
        return math.dist(source_bbox.centre(), target_bbox.centre())


class Nodes:
    """A non-empty collection of points of one common dimension."""

    def __init__(self, points: Iterable[Sequence[float]]) -> None:
        pts = tuple(tuple(float(c) for c in p) for p in points)
        if not pts:
            raise ValueError("Nodes requires at least one point")
        dim = len(pts[0])
        if dim == 0:
            raise ValueError("points must have at least one coordinate")
        if any(len(p) != dim for p in pts):
            raise ValueError("all points must share the same dimension")
        self.points: tuple[Point, ...] = pts
        self.dim: int = dim

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"Nodes(n={len(self.points)}, dim={self.dim})"

    def bbox_from_indices(self, indices: Sequence[int]) -> BBox:
        """Bounding box of the points selected by ``indices``."""
        if len(indices) == 0:
            raise ValueError("cannot build a bounding box from no indices")
        selected = [self.points[i] for i in indices]
        axes = list(zip(*selected))
        return BBox(
            min=tuple(min(axis) for axis in axes),
            max=tuple(max(axis) for axis in axes),
        )