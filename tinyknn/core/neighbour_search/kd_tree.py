from typing import List, Sequence

import numpy as np
from sklearn.neighbors import KDTree

from tinyknn.core.data_structures import Instance, Neighbour
from tinyknn.core.neighbour_search.linear import prepare_search
from tinyknn.utils.errors import SearchError


class KDTreeSearch:
    """Spatial-index search backed by scikit-learn's KDTree.

    The tree is rebuilt over the window snapshot for every query, since the
    window changes between predictions.
    """

    def __init__(self, leaf_size: int = 40):
        self.leaf_size = leaf_size

    def k_nearest_neighbours(self, instances: Sequence[Instance], query: np.ndarray, k: int) -> List[Neighbour]:
        matrix, query = prepare_search(instances, query, k)
        if not np.all(np.isfinite(matrix)):
            raise SearchError("Stored instances contain non-finite values")
        k = min(k, len(instances))
        tree = KDTree(matrix, leaf_size=self.leaf_size, metric="euclidean")
        distances, indices = tree.query(query.reshape(1, -1), k=k, return_distance=True, sort_results=True)
        return [
            Neighbour(instance=instances[int(i)], distance=float(d))
            for d, i in zip(distances[0], indices[0])
        ]
