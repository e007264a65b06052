"""
tinyknn - Streaming k-nearest-neighbour classification.

tinyknn keeps a bounded window of the most recent labelled examples of a
stream and classifies new examples by the votes of their nearest stored
neighbours, with:

1. Oldest-first eviction from a fixed-size window
2. Optional online standardization from running statistics
3. Unweighted or inverse-distance weighted votes
4. Exhaustive or KD-tree neighbour search
"""

__version__ = "0.1.0"

from tinyknn.constants import SearchAlgorithm, ClassifierState
from tinyknn.core.data_structures import Instance, InstanceHeader, Neighbour
from tinyknn.core.window import Window
from tinyknn.core.feature_transformers import RunningStats, OnlineStandardizer
from tinyknn.core.neighbour_search import LinearNNSearch, KDTreeSearch, create_search
from tinyknn.core.voting import VoteAggregator
from tinyknn.core.classifiers import BaseStreamClassifier, KNNClassifier
from tinyknn.utils.errors import (
    TinyKNNError,
    ConfigError,
    SchemaError,
    InvalidInputError,
    SearchError,
    StateError
)

__all__ = [
    "__version__",

    # Options
    "SearchAlgorithm",
    "ClassifierState",

    # Data structures
    "Instance",
    "InstanceHeader",
    "Neighbour",

    # Components
    "Window",
    "RunningStats",
    "OnlineStandardizer",
    "LinearNNSearch",
    "KDTreeSearch",
    "create_search",
    "VoteAggregator",

    # Classification
    "BaseStreamClassifier",
    "KNNClassifier",

    # Errors
    "TinyKNNError",
    "ConfigError",
    "SchemaError",
    "InvalidInputError",
    "SearchError",
    "StateError"
]
