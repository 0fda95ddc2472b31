"""Hierarchical matrices: point sets, kernels, cluster and block trees, and assembly."""

__version__ = "0.1.0"