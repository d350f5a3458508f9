import pytest


@pytest.fixture
def star_edges():
    return [(0, 1), (0, 2), (0, 3)]


@pytest.fixture
def cycle_edges():
    return [(i, (i + 1) % 5) for i in range(5)]


@pytest.fixture
def twin_path_edges():
    """Two disconnected 3-node paths with identical shape."""
    return [(0, 1), (1, 2), (10, 11), (11, 12)]
