from typing import NamedTuple

from ._helpers import DEFAULT_WEIGHT


class WeightedEdge(NamedTuple):
    """Immutable ``(src, dst, weight)`` edge value.

    Equality compares all three fields, so two edges between the same vertices
    with different weights are different values (they still address the same
    matrix entry).
    """

    src: int
    dst: int
    weight: float = DEFAULT_WEIGHT

    @classmethod
    def coerce(cls, x, weight=DEFAULT_WEIGHT):
        """Build an edge from an edge, a ``(src, dst)`` pair or a ``(src, dst, w)`` triple."""
        if isinstance(x, cls):
            return x
        x = tuple(x)
        if len(x) == 2:
            return cls(x[0], x[1], weight)
        if len(x) == 3:
            return cls(x[0], x[1], x[2])
        raise ValueError(f"cannot build an edge from {len(x)} values: {x!r}")

    def reverse(self):
        return WeightedEdge(self.dst, self.src, self.weight)

    def endpoints(self):
        return (self.src, self.dst)

    def __repr__(self):
        return f"Edge {self.src} => {self.dst} with weight {self.weight}"
