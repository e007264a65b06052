from typing import Sequence

import numpy as np

from tinyknn.core.data_structures import Neighbour
from tinyknn.utils.errors import InvalidInputError


class VoteAggregator:
    """Turn an ordered neighbour list into a per-class vote vector.

    Unweighted mode counts one vote per neighbour. Weighted mode accumulates,
    per class, the Euclidean distance between the query and each neighbour's
    stored features, then replaces every positive total with its reciprocal.
    A class whose accumulated distance is exactly zero keeps a vote of 0.0:
    an exact match is not inverted into an infinite vote.
    """

    def __init__(self, weighted: bool = False):
        self.weighted = weighted

    def aggregate(self, query: np.ndarray, neighbours: Sequence[Neighbour], n_classes: int) -> np.ndarray:
        """Compute the vote vector for one query.

        Args:
            query: Feature vector of the query, shape (n_features,)
            neighbours: Search result, ascending distance
            n_classes: Length of the vote vector

        Returns:
            Vote vector of shape (n_classes,)
        """
        votes = np.zeros(n_classes)
        if not neighbours:
            return votes

        if self.weighted:
            self._accumulate_distances(votes, np.asarray(query, dtype=float), neighbours)
            positive = votes > 0
            votes[positive] = 1.0 / votes[positive]
        else:
            for neighbour in neighbours:
                votes[self._class_index(neighbour, n_classes)] += 1
        return votes

    def _accumulate_distances(self, votes: np.ndarray, query: np.ndarray, neighbours: Sequence[Neighbour]) -> None:
        for neighbour in neighbours:
            values = neighbour.instance.features
            if values.shape != query.shape:
                raise InvalidInputError(
                    f"Feature dimension mismatch: query has {query.shape[0]}, neighbour has {values.shape[0]}"
                )
            # the searcher's own distance may be normalised, so recompute it here
            dist = float(np.sqrt(np.sum((values - query) ** 2)))
            votes[self._class_index(neighbour, votes.shape[0])] += dist

    @staticmethod
    def _class_index(neighbour: Neighbour, n_classes: int) -> int:
        index = neighbour.class_value
        if index >= n_classes:
            raise InvalidInputError(f"Neighbour class {index} outside vote vector of size {n_classes}")
        return index
