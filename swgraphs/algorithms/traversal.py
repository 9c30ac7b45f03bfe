# Traversal (neighbors, degrees)
import numpy as np

from ..core._helpers import _check_vertex


class Traversal:
    """Neighbor and degree queries over the column-compressed weight store.

    Column ``v - 1`` lists the out-neighbors of ``v`` in ascending order, so
    out-queries cost O(out-degree). In-queries on a directed graph scan every
    stored entry (O(nnz)); undirected graphs answer them from the column
    because the matrix is symmetric.
    """

    def out_neighbors(self, vertex):
        """Out-neighbors of a vertex, ascending.

        Parameters
        --
        vertex : int

        Returns
        ---
        list[int]

        """
        j = _check_vertex(vertex, self.nv())
        return [int(i) + 1 for i in self._weights.column(j)]

    def in_neighbors(self, vertex):
        """In-neighbors of a vertex, ascending.

        Parameters
        --
        vertex : int

        Returns
        ---
        list[int]

        Notes
        -
        O(nnz) on directed graphs.

        """
        i = _check_vertex(vertex, self.nv())
        if not self.is_directed():
            return [int(r) + 1 for r in self._weights.column(i)]
        return [int(c) + 1 for c in self._weights.row(i)]

    def neighbors(self, vertex):
        """Same as ``out_neighbors``."""
        return self.out_neighbors(vertex)

    def successors(self, vertex):
        return self.out_neighbors(vertex)

    def predecessors(self, vertex):
        return self.in_neighbors(vertex)

    def all_neighbors(self, vertex):
        """Union of in- and out-neighbors, ascending."""
        if not self.is_directed():
            return self.out_neighbors(vertex)
        return sorted(set(self.out_neighbors(vertex)) | set(self.in_neighbors(vertex)))

    def outdegree(self, vertex=None):
        """Number of out-neighbors (self-loop counts once); all vertices if ``vertex`` is None."""
        if vertex is None:
            return [int(d) for d in np.diff(self._weights.indptr)]
        return self._weights.column_nnz(_check_vertex(vertex, self.nv()))

    def indegree(self, vertex=None):
        """Number of in-neighbors; all vertices if ``vertex`` is None."""
        if not self.is_directed():
            return self.outdegree(vertex)
        if vertex is None:
            counts = np.bincount(self._weights.indices, minlength=self.nv())
            return [int(d) for d in counts]
        return self._weights.row_nnz(_check_vertex(vertex, self.nv()))

    def degree(self, vertex=None):
        """Structural degree (neighbor count, not a weighted sum).

        Undirected: number of distinct neighbors. Directed: in-degree plus
        out-degree. All vertices if ``vertex`` is None.
        """
        if not self.is_directed():
            return self.outdegree(vertex)
        if vertex is None:
            return [i + o for i, o in zip(self.indegree(), self.outdegree())]
        return self.indegree(vertex) + self.outdegree(vertex)
