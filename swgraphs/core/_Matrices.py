import numpy as np
import scipy.sparse as sp

_DIRS = ("out", "in", "both")
_LAPLACIANS = ("comb", "norm", "rw")


def _strength(A) -> np.ndarray:
    # weighted row sums; a self-loop is a single diagonal entry, counted once
    return np.asarray(A.sum(axis=1)).ravel()


def _inverse(x, power=1.0) -> np.ndarray:
    """``x ** -power`` elementwise, 0 where ``x`` is 0."""
    out = np.zeros(x.shape, dtype=float)
    # fractional powers are only taken of positive strengths
    nz = (x > 0) if power % 1 else (x != 0)
    out[nz] = np.power(x[nz].astype(float), -power)
    return out


class Matrices:
    """Adjacency, degree and Laplacian matrices as ``scipy.sparse`` CSR."""

    def adjacency_matrix(self, dir: str = "out"):
        """Weighted adjacency matrix.

        dir="out"  -> ``A[u-1, v-1]`` = weight of ``u -> v``
        dir="in"   -> transpose of the above
        dir="both" -> ``A + A^T`` for directed graphs
        Undirected graphs return the same symmetric matrix for every ``dir``.
        """
        if dir not in _DIRS:
            raise ValueError(f"dir must be one of {_DIRS}, got {dir!r}")
        A = self.weights()
        if not self.is_directed() or dir == "out":
            return A
        if dir == "in":
            return A.T.tocsr()
        return (A + A.T).tocsr()

    def degree_matrix(self, dir: str = "out"):
        """Diagonal matrix of vertex strengths (weighted degree)."""
        return sp.diags(_strength(self.adjacency_matrix(dir)), format="csr")

    def laplacian_matrix(self, dir: str = "out", kind: str = "comb"):
        """
        Weighted Laplacian of ``adjacency_matrix(dir)``.
        kind="comb" -> L = D - A
        kind="norm" -> L = I - D^{-1/2} A D^{-1/2}
        kind="rw"   -> L = I - D^{-1} A
        Rows of zero-strength vertices are left as identity rows for the
        normalized kinds.
        """
        if kind not in _LAPLACIANS:
            raise ValueError(f"kind must be one of {_LAPLACIANS}, got {kind!r}")
        A = self.adjacency_matrix(dir)
        s = _strength(A)
        if kind == "comb":
            return (sp.diags(s, format="csr") - A).tocsr()
        eye = sp.identity(A.shape[0], format="csr")
        if kind == "rw":
            return (eye - sp.diags(_inverse(s), format="csr") @ A).tocsr()
        half = sp.diags(_inverse(s, 0.5), format="csr")
        return (eye - half @ A @ half).tocsr()
