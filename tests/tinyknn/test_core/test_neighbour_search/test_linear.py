"""Tests for the exhaustive neighbour search."""

import numpy as np
import pytest

from tinyknn.core.neighbour_search import LinearNNSearch
from tinyknn.utils.errors import SearchError


@pytest.fixture
def line_instances(make_instance):
    return [make_instance([float(x), 0.0], label=x % 3) for x in range(4)]


def test_returns_k_nearest_in_ascending_order(line_instances):
    neighbours = LinearNNSearch().k_nearest_neighbours(line_instances, np.array([1.2, 0.0]), 3)

    assert [n.instance for n in neighbours] == [line_instances[1], line_instances[2], line_instances[0]]
    distances = [n.distance for n in neighbours]
    assert distances == sorted(distances)
    assert distances[0] == pytest.approx(0.2)


def test_k_larger_than_window_is_clamped(line_instances):
    neighbours = LinearNNSearch().k_nearest_neighbours(line_instances, np.array([0.0, 0.0]), 10)

    assert len(neighbours) == 4


def test_ties_keep_window_order(make_instance):
    older = make_instance([1.0, 0.0], label=0)
    newer = make_instance([-1.0, 0.0], label=1)

    neighbours = LinearNNSearch().k_nearest_neighbours([older, newer], np.array([0.0, 0.0]), 1)

    assert neighbours[0].instance is older


def test_empty_window_raises():
    with pytest.raises(SearchError):
        LinearNNSearch().k_nearest_neighbours([], np.array([0.0, 0.0]), 1)


def test_invalid_k_raises(line_instances):
    with pytest.raises(SearchError):
        LinearNNSearch().k_nearest_neighbours(line_instances, np.array([0.0, 0.0]), 0)


def test_dimension_mismatch_raises(line_instances):
    with pytest.raises(SearchError):
        LinearNNSearch().k_nearest_neighbours(line_instances, np.array([0.0, 0.0, 0.0]), 1)


def test_non_finite_query_raises(line_instances):
    with pytest.raises(SearchError):
        LinearNNSearch().k_nearest_neighbours(line_instances, np.array([np.nan, 0.0]), 1)
