"""
Running per-feature sums for online standardization.

The statistics cover every vector ever submitted, independently of what the
window currently holds, and live as long as the classifier that owns them.
"""

from typing import Any, Dict, Optional

import numpy as np

from tinyknn.utils.errors import InvalidInputError, StateError


class RunningStats:
    """Per-feature running sum and sum of squares plus a call counter.

    ``count`` is advanced by the owner through :meth:`increment` (the
    classifier does so once per prediction) and is the ``n`` used for the
    mean and variance, whether or not every call also fed :meth:`update`.
    """

    def __init__(self) -> None:
        self.count = 0
        self.sums: Optional[np.ndarray] = None
        self.sum_squares: Optional[np.ndarray] = None

    @property
    def initialized(self) -> bool:
        return self.sums is not None

    @property
    def num_features(self) -> int:
        return 0 if self.sums is None else int(self.sums.shape[0])

    def increment(self) -> int:
        self.count += 1
        return self.count

    def initialize(self, features: np.ndarray) -> None:
        """Seed the sums with the raw values of the first vector."""
        features = np.asarray(features, dtype=float)
        self.sums = features.copy()
        self.sum_squares = features ** 2

    def update(self, features: np.ndarray) -> None:
        features = self._check(features)
        self.sums += features
        self.sum_squares += features ** 2

    def mean(self) -> np.ndarray:
        if not self.initialized:
            raise StateError("Running statistics have not been initialized")
        if self.count < 1:
            raise StateError("Mean is undefined before the first counted call")
        return self.sums / self.count

    def variance(self) -> np.ndarray:
        """Sample variance per feature; zeros while fewer than two calls were counted."""
        if not self.initialized:
            raise StateError("Running statistics have not been initialized")
        if self.count < 2:
            return np.zeros_like(self.sums)
        return (self.sum_squares - self.sums ** 2 / self.count) / (self.count - 1)

    def reset(self) -> None:
        self.count = 0
        self.sums = None
        self.sum_squares = None

    def _check(self, features: np.ndarray) -> np.ndarray:
        if not self.initialized:
            raise StateError("Running statistics have not been initialized")
        features = np.asarray(features, dtype=float)
        if features.shape != self.sums.shape:
            raise InvalidInputError(
                f"Feature dimension mismatch: got {features.shape[0] if features.ndim else 0}, "
                f"expected {self.sums.shape[0]}"
            )
        return features

    def get_state(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "sums": self.sums.tolist() if self.sums is not None else None,
            "sum_squares": self.sum_squares.tolist() if self.sum_squares is not None else None
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        self.count = int(state.get("count", 0))
        sums = state.get("sums")
        sum_squares = state.get("sum_squares")
        self.sums = np.array(sums, dtype=float) if sums is not None else None
        self.sum_squares = np.array(sum_squares, dtype=float) if sum_squares is not None else None
