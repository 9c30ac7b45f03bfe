"""Position lookup inside a column-compressed (CSC) structure.

Works on anything exposing ``indptr`` and ``indices`` in CSC layout: the
package's own ``WeightMatrix`` as well as ``scipy.sparse.csc_matrix`` (with
sorted indices).

Neither function validates ``row``/``col``; callers check bounds first.
"""

import numpy as np


def insertion_point(matrix, row, col) -> int:
    """Storage position where ``(row, col)`` is, or would be inserted.

    Binary search over the sorted row indices of column ``col``.
    """
    r1 = int(matrix.indptr[col])
    r2 = int(matrix.indptr[col + 1])
    if r1 == r2:
        return r1
    return r1 + int(np.searchsorted(matrix.indices[r1:r2], row, side="left"))


def locate(matrix, row, col):
    """Storage position of entry ``(row, col)``, or ``None`` if not stored.

    Parameters
    --
    matrix : WeightMatrix | scipy.sparse.csc_matrix
    row, col : int
        0-based, already bounds-checked.

    Returns
    ---
    int | None

    """
    r1 = int(matrix.indptr[col])
    r2 = int(matrix.indptr[col + 1])
    if r1 == r2:
        # empty column: structural zero
        return None
    pos = r1 + int(np.searchsorted(matrix.indices[r1:r2], row, side="left"))
    if pos >= r2 or matrix.indices[pos] != row:
        return None
    return pos
