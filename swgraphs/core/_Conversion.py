"""Directed <-> undirected conversion on the underlying weight matrices."""

from ._WeightMatrix import WeightMatrix


def symmetrize(mat: WeightMatrix) -> WeightMatrix:
    """Return ``A + A^T`` as a new weight matrix.

    Opposite-direction weights between the same pair are added, a one-way
    entry is mirrored unchanged, and a diagonal entry is doubled. Pairs whose
    sum is zero are dropped.
    """
    a = mat.to_scipy()
    return WeightMatrix.from_scipy(a + a.T, dtype=mat.dtype, index_dtype=mat.index_dtype)


def to_undirected(graph):
    """Undirected copy of ``graph``; a directed graph is symmetrized."""
    from .graph import WeightedGraph

    return WeightedGraph(graph)


def to_directed(graph):
    """Directed copy of ``graph``; each undirected edge yields both directions."""
    from .graph import WeightedDiGraph

    return WeightedDiGraph(graph)
