# Path: `src/toolbox/features/ds/__init__.py`
# Summary: Export the matrix and graph containers.
# Why: Provide a stable import surface for callers and tests.

from .domain import Edge, Graph, Matrix, MatrixSizeError, Node

__all__ = ["Edge", "Graph", "Matrix", "MatrixSizeError", "Node"]
