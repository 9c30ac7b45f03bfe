import os
from enum import Enum
from numbers import Number

import numpy as np

DEFAULT_WEIGHT = 1
DEFAULT_DTYPE = np.float64
DEFAULT_INDEX_DTYPE = np.int64


class EdgeType(Enum):
    DIRECTED = "DIRECTED"
    UNDIRECTED = "UNDIRECTED"


class VertexIndexError(IndexError):
    """Vertex (or matrix) index outside the valid range."""


class ConstructionError(ValueError):
    """Malformed input to a graph or matrix constructor."""


def _is_numeric(x) -> bool:
    return isinstance(x, (Number, np.number)) and not isinstance(x, (bool, np.bool_))


def _check_weight(weight):
    if not _is_numeric(weight):
        raise TypeError(f"weight must be numeric, got {type(weight).__name__}")
    return weight


def _check_index(i, n, what="vertex"):
    """Validate a 0-based matrix index against dimension ``n``."""
    if not isinstance(i, (int, np.integer)) or isinstance(i, (bool, np.bool_)):
        raise TypeError(f"{what} index must be an integer, got {type(i).__name__}")
    if i < 0 or i >= n:
        raise VertexIndexError(f"{what} index {i} out of range for dimension {n}")
    return int(i)


def _check_vertex(v, n):
    """Validate a 1-based vertex id and return its 0-based matrix index."""
    if not isinstance(v, (int, np.integer)) or isinstance(v, (bool, np.bool_)):
        raise TypeError(f"vertex must be an integer, got {type(v).__name__}")
    if v < 1 or v > n:
        raise VertexIndexError(f"vertex {v} not in graph with {n} vertices")
    return int(v) - 1


def _to_scalar(x):
    # NumPy scalars -> Python scalars (exact for ints and float64)
    if isinstance(x, np.generic):
        return x.item()
    return x


def _cast_weight(weight, dtype):
    """``weight`` as a ``dtype`` scalar; integer dtypes reject values they would truncate."""
    _check_weight(weight)
    dtype = np.dtype(dtype)
    value = dtype.type(weight)
    if np.issubdtype(dtype, np.integer) and value != weight:
        raise ValueError(f"weight {weight!r} is not exactly representable as {dtype}")
    return value


# warnings raised inside the package are attributed to the first caller outside it
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep
