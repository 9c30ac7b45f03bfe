import warnings

import numpy as np
import scipy.sparse as sp

from ._helpers import (
    DEFAULT_DTYPE,
    DEFAULT_INDEX_DTYPE,
    _PACKAGE_DIR,
    ConstructionError,
    _cast_weight,
    _check_index,
    _to_scalar,
)
from ._Locator import insertion_point, locate

_COMBINE = {"sum": np.add, "max": np.maximum, "min": np.minimum}


class WeightMatrix:
    """Square sparse weight matrix in column-compressed (CSC) layout.

    Entry ``(i, j)`` holds the weight of the edge from vertex ``j`` to vertex ``i``.
    Storage is three numpy arrays, laid out exactly like ``scipy.sparse.csc_matrix``:

    - ``indptr`` (length ``n + 1``): column ``j`` occupies positions
      ``indptr[j]:indptr[j + 1]``;
    - ``indices``: row index of each stored entry, strictly ascending per column;
    - ``data``: weight of each stored entry, aligned with ``indices``.

    Parameters
    --
    n : int, default 0
        Dimension (number of vertices).
    dtype : numpy dtype, default float64
        Weight type.
    index_dtype : numpy dtype, default int64
        Type of ``indptr``/``indices``.

    Notes
    -
    - All indices are 0-based here; the graph layer maps vertex ``v`` to ``v - 1``.
    - A stored weight is never zero: ``set(i, j, 0)`` drops the entry.
    - ``indices`` and ``data`` are views of the first ``nnz`` slots of buffers
      with spare capacity. Inserting or deleting an entry shifts only the
      entries stored after it, in place; the buffers grow geometrically, so
      appending at the end of the last column is amortized O(1). Updating an
      existing weight is O(log k) with ``k`` the number of entries in that column.

    """

    def __init__(self, n: int = 0, *, dtype=DEFAULT_DTYPE, index_dtype=DEFAULT_INDEX_DTYPE):
        n = int(n)
        if n < 0:
            raise ConstructionError(f"matrix dimension must be >= 0, got {n}")
        self.dtype = np.dtype(dtype)
        self.index_dtype = np.dtype(index_dtype)
        self.indptr = np.zeros(n + 1, dtype=self.index_dtype)
        self.indices = np.empty(0, dtype=self.index_dtype)
        self.data = np.empty(0, dtype=self.dtype)

    # Storage

    @property
    def indices(self):
        return self._ibuf[: self.nnz]

    @indices.setter
    def indices(self, arr):
        self._ibuf = arr

    @property
    def data(self):
        return self._dbuf[: self.nnz]

    @data.setter
    def data(self, arr):
        self._dbuf = arr

    @property
    def capacity(self) -> int:
        """Entries the buffers hold before the next reallocation."""
        return min(len(self._ibuf), len(self._dbuf))

    def _reserve(self, size):
        if size <= self.capacity:
            return
        cap = self.capacity
        cap = max(size, cap + max(8, cap >> 1))
        nnz = self.nnz
        ibuf = np.empty(cap, dtype=self.index_dtype)
        dbuf = np.empty(cap, dtype=self.dtype)
        ibuf[:nnz] = self._ibuf[:nnz]
        dbuf[:nnz] = self._dbuf[:nnz]
        self._ibuf, self._dbuf = ibuf, dbuf

    # Construction

    @classmethod
    def _from_arrays(cls, indptr, indices, data, *, dtype=None, index_dtype=DEFAULT_INDEX_DTYPE):
        mat = cls.__new__(cls)
        mat.dtype = np.dtype(dtype if dtype is not None else np.asarray(data).dtype)
        mat.index_dtype = np.dtype(index_dtype)
        mat.indptr = np.array(indptr, dtype=mat.index_dtype)
        mat.indices = np.array(indices, dtype=mat.index_dtype)
        mat.data = np.array(data, dtype=mat.dtype)
        return mat

    @classmethod
    def from_scipy(cls, mat, *, dtype=None, index_dtype=DEFAULT_INDEX_DTYPE):
        """Adopt a square scipy sparse matrix (or dense array) as stored.

        Duplicates are summed, explicit zeros dropped and row indices sorted.
        """
        if not sp.issparse(mat):
            arr = np.asarray(mat)
            if arr.ndim != 2:
                raise ConstructionError(f"expected a 2-D matrix, got {arr.ndim}-D input")
            mat = sp.csc_matrix(arr)
        if mat.shape[0] != mat.shape[1]:
            raise ConstructionError(f"weight matrix must be square, got shape {mat.shape}")
        csc = sp.csc_matrix(mat, dtype=dtype if dtype is not None else mat.dtype, copy=True)
        csc.sum_duplicates()
        csc.eliminate_zeros()
        csc.sort_indices()
        return cls._from_arrays(
            csc.indptr, csc.indices, csc.data, dtype=csc.dtype, index_dtype=index_dtype
        )

    @classmethod
    def from_triples(
        cls,
        rows,
        cols,
        weights,
        n=None,
        *,
        combine="sum",
        dtype=DEFAULT_DTYPE,
        index_dtype=DEFAULT_INDEX_DTYPE,
    ):
        """Build from parallel arrays of 0-based ``rows``, ``cols`` and ``weights``.

        Parameters
        --
        rows, cols : array-like of int
        weights : array-like of numbers
        n : int, optional
            Dimension; defaults to ``max(rows, cols) + 1``.
        combine : {"sum", "max", "min", "first", "last"} or numpy ufunc, default "sum"
            How duplicate ``(row, col)`` pairs are merged.

        Raises
        --
        ConstructionError
            Mismatched lengths, negative indices, or indices beyond ``n``.

        """
        rows = np.asarray(rows)
        cols = np.asarray(cols)
        raw = np.asarray(weights)
        weights = raw.astype(dtype)
        if np.issubdtype(weights.dtype, np.integer) and not np.array_equal(weights, raw):
            raise ConstructionError(f"weights are not exactly representable as {weights.dtype}")
        if not (rows.ndim == cols.ndim == weights.ndim == 1):
            raise ConstructionError("rows, cols and weights must be 1-D")
        if not (len(rows) == len(cols) == len(weights)):
            raise ConstructionError(
                f"length mismatch: {len(rows)} rows, {len(cols)} cols, {len(weights)} weights"
            )
        if len(rows) and not (
            np.issubdtype(rows.dtype, np.integer) and np.issubdtype(cols.dtype, np.integer)
        ):
            raise ConstructionError("row and column indices must be integers")
        rows = rows.astype(index_dtype, copy=False)
        cols = cols.astype(index_dtype, copy=False)
        if len(rows) and (rows.min() < 0 or cols.min() < 0):
            raise ConstructionError("indices must be non-negative")
        top = int(max(rows.max(), cols.max())) + 1 if len(rows) else 0
        if n is None:
            n = top
        n = int(n)
        if n < top:
            raise ConstructionError(f"index {top - 1} out of range for dimension {n}")

        mat = cls(n, dtype=dtype, index_dtype=index_dtype)
        if not len(rows):
            return mat

        order = np.lexsort((rows, cols))  # stable: keeps input order among duplicates
        r, c, w = rows[order], cols[order], weights[order]
        brk = np.flatnonzero((r[1:] != r[:-1]) | (c[1:] != c[:-1])) + 1
        starts = np.concatenate(([0], brk))
        if combine == "first":
            vals = w[starts]
        elif combine == "last":
            vals = w[np.concatenate((brk - 1, [len(w) - 1]))]
        elif isinstance(combine, str):
            if combine not in _COMBINE:
                raise ValueError(
                    f"combine must be one of {sorted(_COMBINE) + ['first', 'last']}, got {combine!r}"
                )
            vals = _COMBINE[combine].reduceat(w, starts)
        elif hasattr(combine, "reduceat"):
            vals = combine.reduceat(w, starts)
        else:
            raise TypeError("combine must be a name or a numpy ufunc")
        r, c = r[starts], c[starts]

        keep = vals != 0
        if not keep.all():
            warnings.warn(
                f"dropping {int((~keep).sum())} zero-weight entries; zero weights are not stored",
                UserWarning,
                skip_file_prefixes=(_PACKAGE_DIR,),
            )
            r, c, vals = r[keep], c[keep], vals[keep]

        mat.indptr[1:] = np.cumsum(np.bincount(c, minlength=n))
        mat.indices = r.astype(mat.index_dtype)
        mat.data = vals.astype(mat.dtype)
        return mat

    def to_scipy(self) -> sp.csc_matrix:
        """Copy into a ``scipy.sparse.csc_matrix``."""
        return sp.csc_matrix(
            (self.data.copy(), self.indices.copy(), self.indptr.copy()), shape=self.shape
        )

    def copy(self):
        return self._from_arrays(
            self.indptr, self.indices, self.data, dtype=self.dtype, index_dtype=self.index_dtype
        )

    def astype(self, dtype):
        """Copy with another weight dtype; entries that become zero are dropped."""
        out = self._from_arrays(
            self.indptr, self.indices, self.data.astype(dtype), index_dtype=self.index_dtype
        )
        if np.any(out.data == 0):
            return type(self).from_scipy(out.to_scipy(), index_dtype=self.index_dtype)
        return out

    def transpose(self):
        t = self.to_scipy().T.tocsc()
        t.sort_indices()
        return self._from_arrays(
            t.indptr, t.indices, t.data, dtype=self.dtype, index_dtype=self.index_dtype
        )

    # Shape

    @property
    def n(self) -> int:
        return len(self.indptr) - 1

    @property
    def shape(self):
        return (self.n, self.n)

    @property
    def nnz(self) -> int:
        return int(self.indptr[-1])

    # Element access

    def get(self, row, col):
        """Stored weight at ``(row, col)``, or zero if there is no entry."""
        row = _check_index(row, self.n, "row")
        col = _check_index(col, self.n, "column")
        pos = locate(self, row, col)
        if pos is None:
            return _to_scalar(self.dtype.type(0))
        return _to_scalar(self.data[pos])

    def has(self, row, col) -> bool:
        row = _check_index(row, self.n, "row")
        col = _check_index(col, self.n, "column")
        return locate(self, row, col) is not None

    def set(self, row, col, weight) -> bool:
        """Store ``weight`` at ``(row, col)``.

        Overwrites in place when the entry exists; otherwise inserts it at its
        sorted position, shifting every later entry one slot right. A zero
        ``weight`` deletes the entry instead.

        Returns
        ---
        bool
            True if a new entry was inserted.

        """
        row = _check_index(row, self.n, "row")
        col = _check_index(col, self.n, "column")
        value = _cast_weight(weight, self.dtype)
        pos = locate(self, row, col)
        if pos is not None:
            if value == 0:
                self._delete_at(pos, col)
            else:
                self._dbuf[pos] = value
            return False
        if value == 0:
            return False
        pos = insertion_point(self, row, col)
        nnz = self.nnz
        self._reserve(nnz + 1)
        # overlapping slice assignment: numpy buffers the source
        self._ibuf[pos + 1 : nnz + 1] = self._ibuf[pos:nnz]
        self._dbuf[pos + 1 : nnz + 1] = self._dbuf[pos:nnz]
        self._ibuf[pos] = row
        self._dbuf[pos] = value
        self.indptr[col + 1 :] += 1
        return True

    def delete(self, row, col) -> bool:
        """Remove the entry at ``(row, col)``; False if there was none."""
        row = _check_index(row, self.n, "row")
        col = _check_index(col, self.n, "column")
        pos = locate(self, row, col)
        if pos is None:
            return False
        self._delete_at(pos, col)
        return True

    def _delete_at(self, pos, col):
        nnz = self.nnz
        self._ibuf[pos : nnz - 1] = self._ibuf[pos + 1 : nnz]
        self._dbuf[pos : nnz - 1] = self._dbuf[pos + 1 : nnz]
        self.indptr[col + 1 :] -= 1

    def resize(self, new_n: int):
        """Grow to ``new_n x new_n``; new rows and columns are empty."""
        new_n = int(new_n)
        if new_n < self.n:
            raise ValueError(f"cannot shrink matrix from {self.n} to {new_n}")
        if new_n == self.n:
            return
        tail = np.full(new_n - self.n, self.indptr[-1], dtype=self.index_dtype)
        self.indptr = np.concatenate((self.indptr, tail))

    # Column / row access

    def column(self, col):
        """Row indices stored in column ``col`` (ascending, read-only view)."""
        col = _check_index(col, self.n, "column")
        view = self.indices[self.indptr[col] : self.indptr[col + 1]]
        view.flags.writeable = False
        return view

    def column_weights(self, col):
        col = _check_index(col, self.n, "column")
        view = self.data[self.indptr[col] : self.indptr[col + 1]]
        view.flags.writeable = False
        return view

    def column_nnz(self, col) -> int:
        col = _check_index(col, self.n, "column")
        return int(self.indptr[col + 1] - self.indptr[col])

    def _column_of_positions(self):
        return np.repeat(np.arange(self.n, dtype=self.index_dtype), np.diff(self.indptr))

    def row_positions(self, row):
        """Storage positions of entries in row ``row``. Scans every entry."""
        row = _check_index(row, self.n, "row")
        return np.flatnonzero(self.indices == row)

    def row(self, row):
        """Columns holding an entry in row ``row`` (ascending). O(nnz)."""
        pos = self.row_positions(row)
        return np.searchsorted(self.indptr, pos, side="right") - 1

    def row_nnz(self, row) -> int:
        row = _check_index(row, self.n, "row")
        return int(np.count_nonzero(self.indices == row))

    def diagonal_count(self) -> int:
        """Number of stored diagonal entries."""
        return int(np.count_nonzero(self.indices == self._column_of_positions()))

    def is_symmetric(self) -> bool:
        return self == self.transpose()

    def triples(self):
        """Yield ``(row, col, weight)`` in column-major order."""
        indptr, indices, data = self.indptr, self.indices, self.data
        for col in range(self.n):
            for pos in range(indptr[col], indptr[col + 1]):
                yield int(indices[pos]), col, _to_scalar(data[pos])

    def __eq__(self, other):
        if not isinstance(other, WeightMatrix):
            return NotImplemented
        return (
            self.n == other.n
            and np.array_equal(self.indptr, other.indptr)
            and np.array_equal(self.indices, other.indices)
            and np.array_equal(self.data, other.data)
        )

    __hash__ = None

    def __repr__(self):
        return f"WeightMatrix(n={self.n}, nnz={self.nnz}, dtype={self.dtype})"
