# Nearest-neighbour search strategies

from typing import Union

from tinyknn.constants import SearchAlgorithm
from tinyknn.core.base import NeighbourSearch
from tinyknn.core.neighbour_search.kd_tree import KDTreeSearch
from tinyknn.core.neighbour_search.linear import LinearNNSearch
from tinyknn.utils.logging import setup_logger

logger = setup_logger(__name__)


def resolve_search_algorithm(algorithm: Union[str, SearchAlgorithm]) -> SearchAlgorithm:
    if isinstance(algorithm, SearchAlgorithm):
        return algorithm
    try:
        return SearchAlgorithm(str(algorithm).lower())
    except ValueError:
        logger.warning(f"Unknown search algorithm: {algorithm}, using exhaustive instead")
        return SearchAlgorithm.EXHAUSTIVE


def create_search(algorithm: Union[str, SearchAlgorithm]) -> NeighbourSearch:
    """Build the search strategy for a configured algorithm name."""
    algorithm = resolve_search_algorithm(algorithm)
    if algorithm == SearchAlgorithm.SPATIAL_INDEX:
        return KDTreeSearch()
    return LinearNNSearch()


__all__ = ['LinearNNSearch', 'KDTreeSearch', 'create_search', 'resolve_search_algorithm']
