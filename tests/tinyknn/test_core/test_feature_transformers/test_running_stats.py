"""Tests for running per-feature statistics."""

import numpy as np
import pytest

from tinyknn.core.feature_transformers import RunningStats
from tinyknn.utils.errors import InvalidInputError, StateError


def test_initialize_seeds_sums_with_raw_values():
    stats = RunningStats()
    stats.initialize(np.array([2.0, -3.0]))

    assert stats.initialized
    assert stats.num_features == 2
    np.testing.assert_array_equal(stats.sums, [2.0, -3.0])
    np.testing.assert_array_equal(stats.sum_squares, [4.0, 9.0])


def test_update_accumulates():
    stats = RunningStats()
    stats.initialize(np.array([1.0, 2.0]))
    stats.update(np.array([3.0, 2.0]))

    np.testing.assert_array_equal(stats.sums, [4.0, 4.0])
    np.testing.assert_array_equal(stats.sum_squares, [10.0, 8.0])


def test_mean_and_variance_use_the_counter():
    stats = RunningStats()
    stats.initialize(np.array([1.0]))
    stats.update(np.array([3.0]))
    stats.increment()
    stats.increment()

    np.testing.assert_allclose(stats.mean(), [2.0])
    # (10 - 16 / 2) / 1
    np.testing.assert_allclose(stats.variance(), [2.0])


def test_variance_is_zero_below_two_counts():
    stats = RunningStats()
    stats.initialize(np.array([5.0]))
    stats.increment()

    np.testing.assert_array_equal(stats.variance(), [0.0])


def test_uninitialized_access_raises():
    stats = RunningStats()

    with pytest.raises(StateError):
        stats.mean()
    with pytest.raises(StateError):
        stats.update(np.array([1.0]))


def test_mean_before_any_count_raises():
    stats = RunningStats()
    stats.initialize(np.array([1.0]))

    with pytest.raises(StateError):
        stats.mean()


def test_update_dimension_mismatch_raises():
    stats = RunningStats()
    stats.initialize(np.array([1.0, 2.0]))

    with pytest.raises(InvalidInputError):
        stats.update(np.array([1.0]))


def test_reset_and_state_round_trip():
    stats = RunningStats()
    stats.initialize(np.array([0.1, 0.2]))
    stats.update(np.array([0.3, 0.7]))
    stats.increment()

    restored = RunningStats()
    restored.set_state(stats.get_state())

    assert restored.count == 1
    np.testing.assert_array_equal(restored.sums, stats.sums)
    np.testing.assert_array_equal(restored.sum_squares, stats.sum_squares)

    stats.reset()
    assert stats.count == 0
    assert not stats.initialized
