"""Assertion helpers shared by the I/O and adapter tests."""


def assert_graphs_equal(G1, G2):
    """Assert two graphs are structurally identical (exact weights)."""
    assert G1.is_directed() == G2.is_directed(), "Directedness differs"
    assert G1.nv() == G2.nv(), f"Vertex counts differ: {G1.nv()} != {G2.nv()}"
    assert G1.ne() == G2.ne(), f"Edge counts differ: {G1.ne()} != {G2.ne()}"
    assert list(G1.edges()) == list(G2.edges()), "Edge sequences differ"
    assert G1 == G2
