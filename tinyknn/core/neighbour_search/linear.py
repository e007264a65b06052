from typing import List, Sequence, Tuple

import numpy as np

from tinyknn.core.data_structures import Instance, Neighbour
from tinyknn.utils.errors import SearchError


def prepare_search(instances: Sequence[Instance], query: np.ndarray, k: int) -> Tuple[np.ndarray, np.ndarray]:
    """Validate a search request and stack the stored features.

    Returns:
        Tuple of (feature matrix of shape (n, n_features), query vector)
    """
    if len(instances) == 0:
        raise SearchError("Cannot search an empty window")
    if k < 1:
        raise SearchError(f"k must be >= 1, got {k}")
    query = np.asarray(query, dtype=float)
    if query.ndim != 1:
        raise SearchError(f"Query must be one-dimensional, got shape {query.shape}")
    if not np.all(np.isfinite(query)):
        raise SearchError("Query contains non-finite values")
    matrix = np.vstack([instance.features for instance in instances])
    if matrix.shape[1] != query.shape[0]:
        raise SearchError(
            f"Feature dimension mismatch: query has {query.shape[0]}, stored instances have {matrix.shape[1]}"
        )
    return matrix, query


class LinearNNSearch:
    """Brute-force search: Euclidean distance to every stored instance.

    Ties keep window order, so the older of two equidistant instances comes first.
    """

    def k_nearest_neighbours(self, instances: Sequence[Instance], query: np.ndarray, k: int) -> List[Neighbour]:
        matrix, query = prepare_search(instances, query, k)
        distances = np.sqrt(np.sum((matrix - query) ** 2, axis=1))
        order = np.argsort(distances, kind="stable")[:min(k, len(instances))]
        return [Neighbour(instance=instances[i], distance=float(distances[i])) for i in order]
