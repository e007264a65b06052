from collections import deque
from typing import Deque, Iterator, List, Optional

import numpy as np

from tinyknn.core.data_structures import Instance, InstanceHeader
from tinyknn.utils.errors import ConfigError, SchemaError
from tinyknn.utils.logging import setup_logger

logger = setup_logger(__name__)


class Window:
    """Bounded FIFO store of the most recent training instances.

    Insertion order is recency order. Once ``limit`` instances are held,
    adding a new one first evicts the oldest.
    """

    def __init__(self, limit: int):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ConfigError(f"Window limit must be an integer >= 1, got {limit!r}")
        self.limit = limit
        self._header: Optional[InstanceHeader] = None
        self._instances: Deque[Instance] = deque()

    def initialize(self, header: InstanceHeader) -> None:
        """Set the stream shape and empty the storage."""
        if header is None:
            raise SchemaError("No instance header available")
        if not isinstance(header, InstanceHeader):
            raise SchemaError(f"Expected an InstanceHeader, got {type(header).__name__}")
        header.validate()
        self._header = header
        self._instances.clear()
        logger.debug(f"Initialized window for {header.num_features} features, limit={self.limit}")

    @property
    def header(self) -> Optional[InstanceHeader]:
        return self._header

    def add(self, instance: Instance) -> Optional[Instance]:
        """Append an instance, evicting the oldest one when full.

        Returns:
            The evicted instance, or None
        """
        evicted = None
        if len(self._instances) >= self.limit:
            evicted = self._instances.popleft()
        self._instances.append(instance)
        return evicted

    def size(self) -> int:
        return len(self._instances)

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[Instance]:
        return iter(list(self._instances))

    def instances(self) -> List[Instance]:
        """Snapshot of the stored instances, oldest first."""
        return list(self._instances)

    def oldest(self) -> Optional[Instance]:
        return self._instances[0] if self._instances else None

    def newest(self) -> Optional[Instance]:
        return self._instances[-1] if self._instances else None

    def feature_matrix(self) -> np.ndarray:
        if not self._instances:
            width = self._header.num_features if self._header is not None else 0
            return np.empty((0, width))
        return np.vstack([instance.features for instance in self._instances])

    def labels(self) -> np.ndarray:
        return np.array([instance.class_value for instance in self._instances], dtype=int)

    def clear(self) -> None:
        self._instances.clear()

    @property
    def initialized(self) -> bool:
        return self._header is not None

    def reset(self) -> None:
        """Drop both the stored instances and the header."""
        self._instances.clear()
        self._header = None
