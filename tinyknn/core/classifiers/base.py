from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

import numpy as np

from tinyknn.core.data_structures import Instance, InstanceHeader


class BaseStreamClassifier(ABC):
    """Base abstract class for classifiers that learn from a stream one instance at a time.

    The surrounding harness is expected to call :meth:`predict` on each
    incoming instance before handing it to :meth:`train`.
    """

    @abstractmethod
    def set_schema(self, header: InstanceHeader) -> None:
        """Declare the shape of the stream.

        Args:
            header: Number of features and classes of the stream

        Raises:
            SchemaError: If the header is missing or malformed
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Forget everything learned so far, including the schema."""
        pass

    @abstractmethod
    def train(self, instance: Instance) -> None:
        """Learn from a single labelled instance.

        Args:
            instance: Labelled instance
        """
        pass

    def train_many(self, instances: Iterable[Instance]) -> None:
        """Learn from several labelled instances, in order.

        Args:
            instances: Labelled instances, oldest first
        """
        for instance in instances:
            self.train(instance)

    @abstractmethod
    def predict(self, instance: Instance) -> np.ndarray:
        """Compute the class vote vector for an instance.

        Args:
            instance: Instance to classify

        Returns:
            Non-negative votes, one per class index
        """
        pass

    def predict_class(self, instance: Instance) -> Optional[int]:
        """Predict the single most voted class index.

        Returns:
            The class index with the highest vote (lowest index on ties),
            or None when no class received a vote
        """
        votes = self.predict(instance)
        if votes.size == 0 or not np.any(votes > 0):
            return None
        return int(np.argmax(votes))

    def is_randomizable(self) -> bool:
        return False

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        pass

    @abstractmethod
    def set_state(self, state: Dict[str, Any]) -> None:
        pass
