"""Green's function kernels for two- and three-dimensional problems."""

from __future__ import annotations

import cmath
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from scipy.special import hankel1

_MIN_DISTANCE = 1e-15


def _distance(x: Sequence[float], y: Sequence[float]) -> tuple[int, float]:
    if len(x) != len(y):
        raise ValueError("points differ in dimension")
    return len(x), max(math.dist(x, y), _MIN_DISTANCE)


class Kernel(ABC):
    """A two-point kernel returning a complex value."""

    @abstractmethod
    def eval(self, x: Sequence[float], y: Sequence[float]) -> complex:
        """Evaluate the kernel between points ``x`` and ``y``."""


class Laplace(Kernel):
    """Free-space Green's function of the Laplace equation."""

    def eval(self, x: Sequence[float], y: Sequence[float]) -> complex:
        dim, r = _distance(x, y)
        if dim == 2:
            return complex(-math.log(r) / (2.0 * math.pi), 0.0)
        if dim == 3:
            return complex(1.0 / (4.0 * math.pi * r), 0.0)
        raise ValueError(f"Laplace kernel supports 2 or 3 dimensions, not {dim}")


@dataclass(frozen=True)
class Helmholtz(Kernel):
    """Free-space Green's function of the Helmholtz equation."""

    wavenumber: float

    def eval(self, x: Sequence[float], y: Sequence[float]) -> complex:
        dim, r = _distance(x, y)
        if dim == 2:
            h0 = complex(hankel1(0.0, self.wavenumber * r))
            return 0.25j * h0
        if dim == 3:
            return -cmath.exp(1j * self.wavenumber * r) / (4.0 * math.pi * r)
        raise ValueError(f"Helmholtz kernel supports 2 or 3 dimensions, not {dim}")