import warnings

import numpy as np
import scipy.sparse as sp

from ..algorithms.traversal import Traversal
from ._Conversion import symmetrize
from ._Edge import WeightedEdge
from ._helpers import (
    DEFAULT_DTYPE,
    DEFAULT_INDEX_DTYPE,
    DEFAULT_WEIGHT,
    _PACKAGE_DIR,
    ConstructionError,
    EdgeType,
    _cast_weight,
    _check_vertex,
)
from ._History import History
from ._Matrices import Matrices
from ._WeightMatrix import WeightMatrix


class EdgeIterator:
    """Lazy, restartable view over the edges of a graph.

    Iteration is column-major: edges are grouped by the vertex owning the
    column (the source for directed graphs, the larger endpoint for
    undirected ones) and ascend by the other endpoint. Each ``iter()`` starts
    over and reflects the graph's current state.
    """

    def __init__(self, graph):
        self._graph = graph

    def __iter__(self):
        return self._graph._iter_edges()

    def __len__(self):
        return self._graph.ne()

    def __contains__(self, edge):
        e = WeightedEdge.coerce(edge)
        g = self._graph
        if not (g.has_vertex(e.src) and g.has_vertex(e.dst)):
            return False
        w = g.get_weight(e.src, e.dst)
        if w == 0:
            return False
        # a bare (src, dst) pair matches any weight
        if isinstance(edge, WeightedEdge) or len(tuple(edge)) == 3:
            return w == e.weight
        return True

    def __eq__(self, other):
        if not isinstance(other, EdgeIterator):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None

    def __repr__(self):
        return f"EdgeIterator({self._graph!r})"


class AbstractWeightedGraph(History, Traversal, Matrices):
    """Weighted graph over vertices ``1..N`` backed by a ``WeightMatrix``.

    Entry ``(i, j)`` of the matrix holds the weight of the edge from ``j + 1``
    to ``i + 1`` (column = source, row = destination). Subclasses fix the
    ``edge_type`` tag and how an edge projects onto matrix entries.

    Parameters
    --
    data : None | int | iterable of edges | matrix | AbstractWeightedGraph, optional
        - ``None`` or ``0``: empty graph;
        - ``int``: that many vertices, no edges;
        - iterable of ``(src, dst)`` or ``(src, dst, weight)``: edge list
          (default weight 1);
        - ``WeightMatrix``, scipy sparse matrix or 2-D ndarray: adjacency matrix;
        - another graph: copy (directed -> undirected symmetrizes).
    dtype : numpy dtype, optional
        Weight type. Defaults to float64, or to the source's type when copying.
    index_dtype : numpy dtype, default int64
        Vertex index type.
    permute : bool, default True
        For matrix input: True if ``data[u-1, v-1]`` is the weight of ``u -> v``
        (usual adjacency layout); False to adopt ``data`` as stored
        (column = source).
    combine : str or numpy ufunc, default "sum"
        How repeated edges in an edge list are merged (see ``WeightMatrix.from_triples``).
    history : bool, default True
        Record mutations in the in-memory history log.

    Raises
    --
    ConstructionError
        Negative vertex count, non-positive vertex ids, non-square matrices.

    """

    edge_type = None

    def __init__(
        self,
        data=None,
        *,
        dtype=None,
        index_dtype=DEFAULT_INDEX_DTYPE,
        permute: bool = True,
        combine="sum",
        history: bool = True,
    ):
        wtype = DEFAULT_DTYPE if dtype is None else dtype
        if data is None:
            mat = WeightMatrix(0, dtype=wtype, index_dtype=index_dtype)
        elif isinstance(data, AbstractWeightedGraph):
            mat = self._matrix_from_graph(data)
            if dtype is not None:
                mat = mat.astype(dtype)
        elif isinstance(data, (int, np.integer)) and not isinstance(data, (bool, np.bool_)):
            if data < 0:
                raise ConstructionError(f"number of vertices must be >= 0, got {data}")
            mat = WeightMatrix(int(data), dtype=wtype, index_dtype=index_dtype)
        elif isinstance(data, WeightMatrix) or sp.issparse(data) or isinstance(data, np.ndarray):
            mat = self._matrix_from_array(data, permute=permute, dtype=dtype, index_dtype=index_dtype)
        else:
            mat = self._matrix_from_edge_list(
                data, None, combine=combine, dtype=wtype, index_dtype=index_dtype
            )
        self._setup(mat, history)

    def _setup(self, mat: WeightMatrix, history: bool = True):
        self._weights = mat
        self._init_history(history)

    @classmethod
    def _wrap(cls, mat: WeightMatrix, history: bool = True):
        g = cls.__new__(cls)
        g._setup(mat, history)
        return g

    # Construction helpers

    @classmethod
    def from_edges(
        cls,
        sources,
        destinations,
        weights=None,
        n=None,
        *,
        combine="sum",
        dtype=DEFAULT_DTYPE,
        index_dtype=DEFAULT_INDEX_DTYPE,
        history: bool = True,
    ):
        """Build from parallel arrays of 1-based sources, destinations and weights.

        Parameters
        --
        sources, destinations : array-like of int
        weights : array-like of numbers, optional
            Defaults to all ones.
        n : int, optional
            Number of vertices; defaults to the largest vertex id.
        combine : str or numpy ufunc, default "sum"
            Merge rule for repeated edges.

        Raises
        --
        ConstructionError
            Mismatched lengths, non-positive ids, or ids larger than ``n``.

        """
        mat = cls._build_matrix(
            sources, destinations, weights, n, combine=combine, dtype=dtype, index_dtype=index_dtype
        )
        return cls._wrap(mat, history)

    @classmethod
    def from_edge_list(
        cls,
        edges,
        n=None,
        *,
        combine="sum",
        dtype=DEFAULT_DTYPE,
        index_dtype=DEFAULT_INDEX_DTYPE,
        history: bool = True,
    ):
        """Build from ``(src, dst)`` / ``(src, dst, weight)`` tuples or ``WeightedEdge`` values."""
        mat = cls._matrix_from_edge_list(
            edges, n, combine=combine, dtype=dtype, index_dtype=index_dtype
        )
        return cls._wrap(mat, history)

    @classmethod
    def from_matrix(
        cls,
        matrix,
        *,
        permute: bool = True,
        dtype=None,
        index_dtype=DEFAULT_INDEX_DTYPE,
        history: bool = True,
    ):
        """Build from a square scipy sparse matrix, dense array, or ``WeightMatrix``."""
        mat = cls._matrix_from_array(matrix, permute=permute, dtype=dtype, index_dtype=index_dtype)
        return cls._wrap(mat, history)

    @classmethod
    def _matrix_from_edge_list(cls, edges, n, *, combine, dtype, index_dtype):
        try:
            parsed = [WeightedEdge.coerce(e) for e in edges]
        except (TypeError, ValueError) as exc:
            raise ConstructionError(f"malformed edge list: {exc}") from exc
        if not parsed:
            return WeightMatrix(n or 0, dtype=dtype, index_dtype=index_dtype)
        src, dst, w = zip(*parsed)
        return cls._build_matrix(
            src, dst, w, n, combine=combine, dtype=dtype, index_dtype=index_dtype
        )

    @classmethod
    def _build_matrix(cls, sources, destinations, weights, n, *, combine, dtype, index_dtype):
        src = np.asarray(sources)
        dst = np.asarray(destinations)
        if src.shape != dst.shape or src.ndim != 1:
            raise ConstructionError(
                f"sources and destinations must be 1-D of equal length, got {src.shape} and {dst.shape}"
            )
        if weights is None:
            weights = np.ones(len(src), dtype=dtype)
        w = np.asarray(weights)
        if w.shape != src.shape:
            raise ConstructionError(f"expected {len(src)} weights, got {w.shape}")
        if len(src):
            if not (np.issubdtype(src.dtype, np.integer) and np.issubdtype(dst.dtype, np.integer)):
                raise ConstructionError("vertex ids must be integers")
            if src.min() < 1 or dst.min() < 1:
                raise ConstructionError("vertex ids must be >= 1")
        if n is not None and int(n) < 0:
            raise ConstructionError(f"number of vertices must be >= 0, got {n}")
        rows, cols, w = cls._edge_triples(dst - 1, src - 1, w)
        return WeightMatrix.from_triples(
            rows, cols, w, n, combine=combine, dtype=dtype, index_dtype=index_dtype
        )

    @classmethod
    def _edge_triples(cls, rows, cols, weights):
        """Matrix ``(rows, cols, weights)`` for edges; overridden by undirected graphs."""
        return rows, cols, weights

    @classmethod
    def _matrix_from_array(cls, data, *, permute, dtype, index_dtype):
        if isinstance(data, WeightMatrix):
            mat = data.transpose() if permute else data.copy()
            if dtype is not None:
                mat = mat.astype(dtype)
        else:
            if not sp.issparse(data):
                data = np.asarray(data)
                if data.ndim != 2:
                    raise ConstructionError(f"expected a 2-D matrix, got {data.ndim}-D input")
            mat = WeightMatrix.from_scipy(
                data.T if permute else data, dtype=dtype, index_dtype=index_dtype
            )
        return cls._prepare_matrix(mat)

    @classmethod
    def _prepare_matrix(cls, mat: WeightMatrix) -> WeightMatrix:
        return mat

    def _matrix_from_graph(self, other) -> WeightMatrix:
        return other._weights.copy()

    # Variant projection onto the store (0-based)

    def _store_edge(self, s, d, weight) -> bool:
        raise NotImplementedError

    def _drop_edge(self, s, d) -> bool:
        raise NotImplementedError

    def _iter_edges(self):
        raise NotImplementedError

    # Queries

    def is_directed(self) -> bool:
        return self.edge_type is EdgeType.DIRECTED

    @property
    def directed(self) -> bool:
        return self.is_directed()

    @property
    def eltype(self):
        """Vertex index dtype."""
        return self._weights.index_dtype

    @property
    def weighttype(self):
        """Edge weight dtype."""
        return self._weights.dtype

    @property
    def matrix(self) -> WeightMatrix:
        """The underlying weight store (column = source, row = destination)."""
        return self._weights

    def nv(self) -> int:
        return self._weights.n

    def number_of_vertices(self) -> int:
        return self.nv()

    def ne(self) -> int:
        raise NotImplementedError

    def number_of_edges(self) -> int:
        return self.ne()

    def vertices(self):
        """Vertex ids ``1..N`` in order."""
        return range(1, self.nv() + 1)

    def edges(self) -> EdgeIterator:
        """Lazy, restartable edge sequence of ``WeightedEdge`` values."""
        return EdgeIterator(self)

    def edge_list(self):
        """Materialize ``(src, dst, weight)`` tuples in edge iteration order."""
        return [tuple(e) for e in self._iter_edges()]

    def has_vertex(self, v) -> bool:
        if not isinstance(v, (int, np.integer)) or isinstance(v, (bool, np.bool_)):
            return False
        return 1 <= v <= self.nv()

    def has_edge(self, u, v=None) -> bool:
        """True if an edge ``u -> v`` is stored. Accepts an edge or pair as ``u``."""
        if v is None:
            u, v, _ = WeightedEdge.coerce(u)
        s = _check_vertex(u, self.nv())
        d = _check_vertex(v, self.nv())
        return self._weights.has(d, s)

    def get_weight(self, u, v):
        """Weight of edge ``u -> v``, or zero if there is none."""
        s = _check_vertex(u, self.nv())
        d = _check_vertex(v, self.nv())
        return self._weights.get(d, s)

    weight_of = get_weight

    def weights(self) -> sp.csr_matrix:
        """Copy of the weights with ``W[u-1, v-1]`` the weight of ``u -> v``."""
        return self._weights.to_scipy().T.tocsr()

    def has_self_loops(self) -> bool:
        return self.num_self_loops() > 0

    def num_self_loops(self) -> int:
        return self._weights.diagonal_count()

    # Mutation

    def add_edge(self, u, v=None, weight=DEFAULT_WEIGHT) -> bool:
        """Add edge ``u -> v`` or update its weight.

        ``u`` may also be a ``WeightedEdge`` or a ``(src, dst[, weight])`` tuple.

        Returns
        ---
        bool
            True if a new edge was created, False if an existing edge was
            updated or ``weight`` is zero (zero-weight edges are not stored and
            the call does nothing).

        Raises
        --
        VertexIndexError
            If ``u`` or ``v`` is not in ``1..nv()``.
        TypeError
            If ``weight`` is not numeric.
        ValueError
            If the graph has integer weights and ``weight`` is not an integer
            value (``0.4`` would otherwise become ``0``).

        """
        if v is None:
            u, v, weight = WeightedEdge.coerce(u, weight)
        s = _check_vertex(u, self.nv())
        d = _check_vertex(v, self.nv())
        value = _cast_weight(weight, self.weighttype)
        if value == 0:
            return False
        return self._store_edge(s, d, value)

    def remove_edge(self, u, v=None) -> bool:
        """Remove edge ``u -> v``; False if there was none."""
        if v is None:
            u, v, _ = WeightedEdge.coerce(u)
        s = _check_vertex(u, self.nv())
        d = _check_vertex(v, self.nv())
        return self._drop_edge(s, d)

    def add_vertex(self) -> bool:
        self._weights.resize(self.nv() + 1)
        return True

    def add_vertices(self, k: int) -> int:
        """Append ``k`` isolated vertices; returns ``k``."""
        if not isinstance(k, (int, np.integer)) or k < 0:
            raise ValueError(f"k must be a non-negative integer, got {k!r}")
        self._weights.resize(self.nv() + int(k))
        return int(k)

    def remove_vertex(self, v):
        raise NotImplementedError(
            "vertex removal is not supported; build a new graph with induced_subgraph()"
        )

    # Whole-graph operations

    def copy(self):
        return type(self)._wrap(self._weights.copy(), self._history_enabled)

    def to_directed(self):
        from ._Conversion import to_directed

        return to_directed(self)

    def to_undirected(self):
        from ._Conversion import to_undirected

        return to_undirected(self)

    def issubset(self, other) -> bool:
        """True if ``other`` has at least these vertices and every edge with the same weight."""
        if type(self) is not type(other) or self.nv() > other.nv():
            return False
        return all(other.get_weight(e.src, e.dst) == e.weight for e in self._iter_edges())

    def induced_subgraph(self, vlist):
        """Subgraph on ``vlist`` (1-based ids, order kept).

        Returns
        ---
        tuple[AbstractWeightedGraph, list[int]]
            The subgraph and ``vmap`` where ``vmap[i - 1]`` is the original id
            of subgraph vertex ``i``.

        """
        vmap = [int(v) for v in vlist]
        if len(set(vmap)) != len(vmap):
            raise ValueError("vertices in subgraph list must be unique")
        idx = np.array([_check_vertex(v, self.nv()) for v in vmap], dtype=np.int64)
        sub = self._weights.to_scipy()[idx, :][:, idx]
        mat = WeightMatrix.from_scipy(sub, dtype=self.weighttype, index_dtype=self.eltype)
        return type(self)._wrap(mat, self._history_enabled), vmap

    def __eq__(self, other):
        if not isinstance(other, AbstractWeightedGraph):
            return NotImplemented
        return type(self) is type(other) and self._weights == other._weights

    __hash__ = None

    def __repr__(self):
        kind = "directed" if self.is_directed() else "undirected"
        return (
            f"{{{self.nv()}, {self.ne()}}} {kind} simple {self.eltype} graph "
            f"with {self.weighttype} weights"
        )


class WeightedGraph(AbstractWeightedGraph):
    """Undirected weighted graph; the weight matrix is kept symmetric.

    A self-loop is a single diagonal entry and counts as one edge. Building
    from a directed graph or a non-symmetric matrix symmetrizes by adding
    opposite-direction weights (``A + A^T``).
    """

    edge_type = EdgeType.UNDIRECTED

    @classmethod
    def _edge_triples(cls, rows, cols, weights):
        off = rows != cols
        return (
            np.concatenate((rows, cols[off])),
            np.concatenate((cols, rows[off])),
            np.concatenate((weights, weights[off])),
        )

    @classmethod
    def _prepare_matrix(cls, mat):
        if mat.is_symmetric():
            return mat
        warnings.warn(
            "weight matrix is not symmetric; symmetrizing as A + A^T",
            UserWarning,
            skip_file_prefixes=(_PACKAGE_DIR,),
        )
        return symmetrize(mat)

    def _matrix_from_graph(self, other):
        if other.is_directed():
            return symmetrize(other._weights)
        return other._weights.copy()

    def _store_edge(self, s, d, weight):
        created = self._weights.set(d, s, weight)
        if s != d:
            self._weights.set(s, d, weight)
        return created

    def _drop_edge(self, s, d):
        removed = self._weights.delete(d, s)
        if removed and s != d:
            self._weights.delete(s, d)
        return removed

    def _iter_edges(self):
        for row, col, w in self._weights.triples():
            if row <= col:
                yield WeightedEdge(row + 1, col + 1, w)

    def ne(self) -> int:
        return (self._weights.nnz + self._weights.diagonal_count()) // 2


class WeightedDiGraph(AbstractWeightedGraph):
    """Directed weighted graph; column = source, row = destination.

    Out-neighbors of ``v`` are the stored rows of column ``v`` (O(out-degree));
    in-neighbors require scanning every stored entry (O(nnz)).
    """

    edge_type = EdgeType.DIRECTED

    def _store_edge(self, s, d, weight):
        return self._weights.set(d, s, weight)

    def _drop_edge(self, s, d):
        return self._weights.delete(d, s)

    def _iter_edges(self):
        for row, col, w in self._weights.triples():
            yield WeightedEdge(col + 1, row + 1, w)

    def ne(self) -> int:
        return self._weights.nnz


# Short aliases
WGraph = WeightedGraph
WDiGraph = WeightedDiGraph
