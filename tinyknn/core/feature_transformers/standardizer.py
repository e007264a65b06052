"""
Online standardization of streaming feature vectors.

Each vector is rescaled to ``(x - mean) / sqrt(variance)`` using the
running statistics accumulated so far. Stored examples and queries end up
in the same space only when every call goes through the standardizer;
switching it on or off mid-stream is left to the caller.
"""

from typing import Any, Dict

import numpy as np

from tinyknn.core.data_structures import Instance
from tinyknn.core.feature_transformers.base import FeatureTransformer
from tinyknn.core.feature_transformers.running_stats import RunningStats
from tinyknn.core.window import Window
from tinyknn.utils.logging import setup_logger

logger = setup_logger(__name__)


class OnlineStandardizer(FeatureTransformer):
    """Standardize vectors against running statistics, bootstrapping on an empty window.

    Behaviour per call:

    1. The first call seeds the statistics with the raw vector.
    2. While the window is empty every feature is set to zero.
    3. Otherwise the vector is added to the statistics and standardized.

    Two numeric cases are guarded rather than left to produce ``nan``:
    a first call made while the window already holds instances returns the
    vector unchanged (its variance denominator would be zero), and a feature
    with non-positive running variance maps to ``0.0``.
    """

    def __init__(self, stats: RunningStats, window: Window):
        self.stats = stats
        self.window = window

    def transform(self, features: np.ndarray) -> np.ndarray:
        features = np.asarray(features, dtype=float)
        first_call = not self.stats.initialized
        if first_call:
            self.stats.initialize(features)

        if self.window.size() == 0:
            return np.zeros_like(features)

        if first_call:
            logger.warning(
                "First standardization call with a non-empty window; "
                "variance is undefined, leaving the vector unscaled"
            )
            return features.copy()

        self.stats.update(features)
        logger.debug("Standardizing instance...")
        mean = self.stats.mean()
        variance = self.stats.variance()

        standardized = np.zeros_like(features)
        positive = variance > 0
        standardized[positive] = (features[positive] - mean[positive]) / np.sqrt(variance[positive])
        return standardized

    def standardize(self, instance: Instance) -> Instance:
        """Overwrite the instance's features with their standardized values."""
        instance.set_features(self.transform(instance.features))
        return instance

    def get_state(self) -> Dict[str, Any]:
        return self.stats.get_state()

    def set_state(self, state: Dict[str, Any]) -> None:
        self.stats.set_state(state)
