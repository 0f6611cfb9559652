"""
Pytest configuration and shared fixtures for seedgen tests.
"""
import pytest

from seedgen.graph import Graph


@pytest.fixture(autouse=True)
def clean_seedgen_env(monkeypatch):
    """Keep SEEDGEN_* variables from the developer's shell out of the tests."""
    for key in (
        "SEEDGEN_SEED_METHOD",
        "SEEDGEN_SEED_ENCODING",
        "SEEDGEN_PRESCAN_SEED_FILES",
        "SEEDGEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def graph():
    """Triangle a-b-c with a pendant node d and an isolated node e."""
    g = Graph.from_edges([("a", "b"), ("b", "c"), ("c", "a"), ("c", "d")])
    g.add_node("e")
    return g


@pytest.fixture
def loop_graph():
    """Path x-y with a self-loop on y."""
    return Graph.from_edges([("x", "y"), ("y", "y")])


@pytest.fixture
def write_seed_file(tmp_path):
    """Fixture returning a helper that writes a seed file and returns its path."""
    def _write(content, name="seeds.txt"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
