"""Core components of the tinyknn library.

This module provides the building blocks of the streaming classifier:
- Window: bounded FIFO memory of recent training instances
- RunningStats / OnlineStandardizer: incremental feature standardization
- LinearNNSearch / KDTreeSearch: neighbour search strategies
- VoteAggregator: weighted and unweighted class votes
- KNNClassifier: the facade tying them together
"""

from tinyknn.core.data_structures import Instance, InstanceHeader, Neighbour
from tinyknn.core.base import AdaptiveComponent, NeighbourSearch
from tinyknn.core.window import Window
from tinyknn.core.feature_transformers import FeatureTransformer, RunningStats, OnlineStandardizer
from tinyknn.core.neighbour_search import LinearNNSearch, KDTreeSearch, create_search
from tinyknn.core.voting import VoteAggregator
from tinyknn.core.classifiers import BaseStreamClassifier, KNNClassifier

__all__ = [
    # Data structures
    "Instance",
    "InstanceHeader",
    "Neighbour",

    # Interfaces
    "AdaptiveComponent",
    "NeighbourSearch",
    "FeatureTransformer",
    "BaseStreamClassifier",

    # Memory and statistics
    "Window",
    "RunningStats",
    "OnlineStandardizer",

    # Search and voting
    "LinearNNSearch",
    "KDTreeSearch",
    "create_search",
    "VoteAggregator",

    # Classification
    "KNNClassifier",
]
