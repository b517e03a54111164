from .graph import Edge, Graph, Node
from .matrix import Matrix, MatrixSizeError

__all__ = ["Edge", "Graph", "Matrix", "MatrixSizeError", "Node"]
