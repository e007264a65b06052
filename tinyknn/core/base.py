from abc import ABC, abstractmethod
from typing import Any, Dict, List, Protocol, Sequence

import numpy as np

from tinyknn.core.data_structures import Instance, Neighbour


class AdaptiveComponent(ABC):
    """Base abstract class for components whose state can be saved and restored."""

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """Get the current state of this component for persistence.

        Returns:
            Dict containing the serializable state of this component
        """
        pass

    @abstractmethod
    def set_state(self, state: Dict[str, Any]) -> None:
        """Restore this component's state from a previously saved state.

        Args:
            state: Previously saved state dictionary to restore from
        """
        pass


class NeighbourSearch(Protocol):
    """Protocol for the nearest-neighbour search strategies consumed by the classifier.

    Implementations are free to use their own distance; the classifier only
    relies on the returned set and its ascending order.
    """

    def k_nearest_neighbours(self, instances: Sequence[Instance], query: np.ndarray, k: int) -> List[Neighbour]:
        """Find the k stored instances closest to the query.

        Args:
            instances: Stored instances, oldest first
            query: Feature vector to search around, shape (n_features,)
            k: Number of neighbours wanted, 1 <= k <= len(instances)

        Returns:
            Up to k neighbours ordered by ascending distance

        Raises:
            SearchError: If the search cannot be performed on the given input
        """
        ...
