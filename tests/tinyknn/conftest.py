"""Configuration for pytest fixtures."""

import shutil
import tempfile

import numpy as np
import pytest

from tinyknn.core.data_structures import Instance, InstanceHeader, Neighbour


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    dir_path = tempfile.mkdtemp()
    yield dir_path
    shutil.rmtree(dir_path)


@pytest.fixture
def header():
    """Two features, three classes."""
    return InstanceHeader(num_features=2, num_classes=3)


@pytest.fixture
def make_instance(header):
    """Factory for instances sharing the default header."""
    def _make(features, label=None, instance_header=None):
        return Instance(
            features=np.array(features, dtype=float),
            label=label,
            header=instance_header if instance_header is not None else header
        )
    return _make


class StubSearch:
    """Search strategy returning a fixed selection of the stored instances."""

    def __init__(self, picks):
        self.picks = picks
        self.calls = []

    def k_nearest_neighbours(self, instances, query, k):
        self.calls.append(k)
        return [Neighbour(instance=instances[i], distance=float(rank)) for rank, i in enumerate(self.picks[:k])]


class FailingSearch:
    """Search strategy that always raises."""

    def k_nearest_neighbours(self, instances, query, k):
        raise ValueError("malformed input")


@pytest.fixture
def stub_search_cls():
    return StubSearch


@pytest.fixture
def failing_search():
    return FailingSearch()
