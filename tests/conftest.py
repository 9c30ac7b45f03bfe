"""Shared fixtures and helpers for swgraphs tests."""

import pathlib
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from swgraphs.core.graph import WeightedDiGraph, WeightedGraph  # noqa: E402

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def directed_graph():
    """Directed triangle 1->2, 1->3, 2->3 with unit weights."""
    return WeightedDiGraph([(1, 2, 1), (1, 3, 1), (2, 3, 1)])


@pytest.fixture
def undirected_graph():
    """Undirected graph with distinct weights, a self-loop and an isolated vertex."""
    G = WeightedGraph(5)
    G.add_edge(1, 2, 0.5)
    G.add_edge(2, 3, 2.25)
    G.add_edge(1, 3, 0.1 + 0.2)
    G.add_edge(4, 4, 7.0)
    return G


@pytest.fixture
def weighted_digraph():
    """Directed graph with opposite-direction edges, a self-loop and awkward floats."""
    G = WeightedDiGraph(4)
    G.add_edge(1, 2, 3.0)
    G.add_edge(2, 1, 4.0)
    G.add_edge(3, 3, 1e-300)
    G.add_edge(4, 1, -2.5)
    G.add_edge(2, 4, 1 / 3)
    return G


@pytest.fixture
def tmpdir_fixture():
    """Temporary directory for file I/O (input/output) tests."""
    tmpdir = Path(tempfile.mkdtemp())
    yield tmpdir
    shutil.rmtree(tmpdir)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
