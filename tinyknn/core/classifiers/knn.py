import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np

from tinyknn.constants import DEFAULT_K, DEFAULT_LIMIT, ClassifierState, SearchAlgorithm
from tinyknn.core.base import AdaptiveComponent, NeighbourSearch
from tinyknn.core.classifiers.base import BaseStreamClassifier
from tinyknn.core.data_structures import Instance, InstanceHeader
from tinyknn.core.feature_transformers import OnlineStandardizer, RunningStats
from tinyknn.core.neighbour_search import create_search, resolve_search_algorithm
from tinyknn.core.voting import VoteAggregator
from tinyknn.core.window import Window
from tinyknn.utils.config import Config, get_config
from tinyknn.utils.errors import ConfigError, InvalidInputError, SchemaError, StateError
from tinyknn.utils.file_utils import load_json, save_json
from tinyknn.utils.logging import setup_logger
from tinyknn.utils.metrics import CallStats, Timer

logger = setup_logger(__name__)


def _check_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise ConfigError(f"{name} must be an integer >= 1, got {value!r}")
    return int(value)


class KNNClassifier(BaseStreamClassifier, AdaptiveComponent):
    """A k-Nearest Neighbors classifier over a sliding window of the stream.

    The classifier keeps the ``limit`` most recent training instances and
    votes with the ``k`` of them closest to each query.

    Features:
    - Oldest-first eviction once the window is full
    - Unweighted (count) or inverse-distance weighted votes
    - Optional online standardization of queries, which also standardizes
      the instance that is trained on afterwards
    - Exhaustive or KD-tree neighbour search, chosen once at construction
    - Vote vectors sized by the highest class index seen in training

    Prediction never raises because of the neighbour search: a failing search
    is logged and answered with zero votes sized to the instance's declared
    number of classes.
    """

    def __init__(
        self,
        k: int = DEFAULT_K,
        limit: int = DEFAULT_LIMIT,
        weighted_vote: bool = False,
        standardize_data: bool = False,
        search_algorithm: Union[str, SearchAlgorithm] = SearchAlgorithm.EXHAUSTIVE,
        exit_on_schema_error: bool = False,
        search: Optional[NeighbourSearch] = None
    ):
        """Initialize the classifier.

        Args:
            k: Number of neighbours per prediction, clamped to the window size
            limit: Maximum number of instances kept in the window
            weighted_vote: Whether to use inverse-distance votes instead of counts
            standardize_data: Whether to standardize queries with running statistics
            search_algorithm: "exhaustive" or "spatial-index"
            exit_on_schema_error: Whether a malformed schema terminates the process
                instead of raising SchemaError
            search: Search strategy to use instead of the one named by search_algorithm
        """
        self.k = _check_positive_int("k", k)
        self.limit = _check_positive_int("limit", limit)
        self.weighted_vote = bool(weighted_vote)
        self.standardize_data = bool(standardize_data)
        self.search_algorithm = resolve_search_algorithm(search_algorithm)
        self.exit_on_schema_error = bool(exit_on_schema_error)

        self._custom_search = search is not None
        self._search = search if search is not None else create_search(self.search_algorithm)
        self._aggregator = VoteAggregator(weighted=self.weighted_vote)
        self._window = Window(self.limit)
        self._stats = RunningStats()
        self._standardizer = OnlineStandardizer(self._stats, self._window)
        self._max_class_seen = -1

        # Performance metrics
        self._training_stats = CallStats()
        self._prediction_stats = CallStats()
        self._degraded_predictions = 0

        logger.debug(
            f"Initialized KNNClassifier with k={self.k}, limit={self.limit}, "
            f"weighted_vote={self.weighted_vote}, standardize_data={self.standardize_data}, "
            f"search={self.search_algorithm.value}"
        )

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'KNNClassifier':
        """Create a classifier from the "knn" section of a configuration.

        Args:
            config: Configuration to read, the global configuration if omitted
        """
        config = config if config is not None else get_config()
        options = config.get_component_config("knn")
        known = ("k", "limit", "weighted_vote", "standardize_data", "search_algorithm", "exit_on_schema_error")
        unknown = sorted(set(options) - set(known))
        if unknown:
            logger.warning(f"Ignoring unknown knn options: {', '.join(unknown)}")
        return cls(**{key: options[key] for key in known if key in options})

    @property
    def state(self) -> ClassifierState:
        if not self._window.initialized:
            return ClassifierState.UNINITIALIZED
        if self._window.size() == 0:
            return ClassifierState.EMPTY
        return ClassifierState.POPULATED

    @property
    def window_size(self) -> int:
        return self._window.size()

    @property
    def max_class_seen(self) -> int:
        return self._max_class_seen

    @property
    def prediction_count(self) -> int:
        return self._stats.count

    @property
    def header(self) -> Optional[InstanceHeader]:
        return self._window.header

    def get_window(self) -> List[Instance]:
        """Snapshot of the stored instances, oldest first."""
        return self._window.instances()

    def get_purpose_string(self) -> str:
        return "kNN: k nearest neighbours over a sliding window of the stream."

    def set_schema(self, header: InstanceHeader) -> None:
        try:
            self._window.initialize(header)
        except SchemaError as e:
            if self.exit_on_schema_error:
                logger.error(f"Error: no model context available ({e}), exiting")
                sys.exit(1)
            raise

    def reset(self) -> None:
        self._window.reset()
        self._stats.reset()
        self._max_class_seen = -1
        self._training_stats.reset()
        self._prediction_stats.reset()
        self._degraded_predictions = 0
        logger.debug("Reset classifier")

    def train(self, instance: Instance) -> None:
        if instance.label is None:
            raise InvalidInputError("Cannot train on an instance without a class label")

        if not self._window.initialized:
            header = instance.header
            if header is None:
                header = InstanceHeader(num_features=instance.num_features, num_classes=instance.class_value + 1)
            self.set_schema(header)

        expected = self._window.header.num_features
        if instance.num_features != expected:
            raise InvalidInputError(
                f"Feature dimension mismatch: got {instance.num_features}, expected {expected}"
            )

        with Timer() as timer:
            if instance.class_value > self._max_class_seen:
                self._max_class_seen = instance.class_value
            evicted = self._window.add(instance.copy())
        self._training_stats.record(timer.elapsed())

        if evicted is not None:
            logger.debug(f"Window full ({self.limit}), evicted oldest instance of class {evicted.label}")

    def predict(self, instance: Instance) -> np.ndarray:
        count = self._stats.increment()
        logger.debug(f"Instance number: {count}")

        if self.standardize_data:
            self._standardizer.standardize(instance)

        with Timer() as timer:
            votes = self._votes_for(instance)
        self._prediction_stats.record(timer.elapsed())
        return votes

    def _votes_for(self, instance: Instance) -> np.ndarray:
        n_classes = self._max_class_seen + 1
        size = self._window.size()
        if size == 0:
            return np.zeros(n_classes)

        try:
            neighbours = self._search.k_nearest_neighbours(
                self._window.instances(), instance.features, min(self.k, size)
            )
            return self._aggregator.aggregate(instance.features, neighbours, n_classes)
        except Exception as e:
            # zero votes sized by the instance header, not by max_class_seen
            self._degraded_predictions += 1
            logger.warning(f"kNN search failed, returning zero votes: {e}")
            return np.zeros(instance.num_classes)

    def get_model_measurements(self) -> Dict[str, Any]:
        """Get counters and timings for this classifier.

        Returns:
            Dictionary containing:
            - window_size: Number of stored instances
            - max_class_seen: Highest class index trained on (-1 if none)
            - prediction_count: Number of predict calls
            - training_count: Number of train calls
            - degraded_predictions: Predictions answered with zero votes after a failure
            - avg_prediction_time / avg_training_time: Seconds per call
        """
        return {
            "window_size": self._window.size(),
            "max_class_seen": self._max_class_seen,
            "prediction_count": self._stats.count,
            "training_count": self._training_stats.calls,
            "degraded_predictions": self._degraded_predictions,
            "total_prediction_time": self._prediction_stats.total_time,
            "avg_prediction_time": self._prediction_stats.average_time,
            "total_training_time": self._training_stats.total_time,
            "avg_training_time": self._training_stats.average_time
        }

    def get_state(self) -> Dict[str, Any]:
        """Get the current state of the classifier.

        Returns:
            Dict containing the serializable state
        """
        header = self._window.header
        return {
            "type": "KNNClassifier",
            "k": self.k,
            "limit": self.limit,
            "weighted_vote": self.weighted_vote,
            "standardize_data": self.standardize_data,
            "search_algorithm": self.search_algorithm.value,
            "exit_on_schema_error": self.exit_on_schema_error,
            "header": header.to_dict() if header is not None else None,
            "window": [instance.to_dict() for instance in self._window],
            "running_stats": self._stats.get_state(),
            "max_class_seen": self._max_class_seen,
            "metrics": {
                "training": self._training_stats.to_dict(),
                "prediction": self._prediction_stats.to_dict(),
                "degraded_predictions": self._degraded_predictions
            }
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        """Restore the classifier's state.

        Args:
            state: Previously saved state dictionary
        """
        if state.get("type", "KNNClassifier") != "KNNClassifier":
            raise StateError(f"Cannot restore KNNClassifier from state of type {state.get('type')}")

        self.k = _check_positive_int("k", state.get("k", self.k))
        self.limit = _check_positive_int("limit", state.get("limit", self.limit))
        self.weighted_vote = bool(state.get("weighted_vote", self.weighted_vote))
        self.standardize_data = bool(state.get("standardize_data", self.standardize_data))
        self.search_algorithm = resolve_search_algorithm(state.get("search_algorithm", self.search_algorithm))
        self.exit_on_schema_error = bool(state.get("exit_on_schema_error", self.exit_on_schema_error))

        if not self._custom_search:
            self._search = create_search(self.search_algorithm)
        self._aggregator = VoteAggregator(weighted=self.weighted_vote)
        self._window = Window(self.limit)
        self._standardizer = OnlineStandardizer(self._stats, self._window)

        header_data = state.get("header")
        if header_data is not None:
            header = InstanceHeader.from_dict(header_data)
            self._window.initialize(header)
            for data in state.get("window", []):
                self._window.add(Instance.from_dict(data, header=header))

        self._stats.set_state(state.get("running_stats", {}))
        self._max_class_seen = int(state.get("max_class_seen", -1))

        metrics = state.get("metrics", {})
        self._training_stats.reset()
        self._prediction_stats.reset()
        self._training_stats.calls = metrics.get("training", {}).get("calls", 0)
        self._training_stats.total_time = metrics.get("training", {}).get("total_time", 0.0)
        self._prediction_stats.calls = metrics.get("prediction", {}).get("calls", 0)
        self._prediction_stats.total_time = metrics.get("prediction", {}).get("total_time", 0.0)
        self._degraded_predictions = metrics.get("degraded_predictions", 0)

    def save(self, file_path: Union[str, Path]) -> None:
        """Write the classifier state to a JSON file."""
        save_json(self.get_state(), file_path)
        logger.info(f"Saved KNNClassifier state with {self._window.size()} instances to {file_path}")

    @classmethod
    def load(cls, file_path: Union[str, Path]) -> 'KNNClassifier':
        """Create a classifier from a JSON state file written by :meth:`save`."""
        classifier = cls()
        classifier.set_state(load_json(file_path))
        return classifier
