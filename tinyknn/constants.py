from enum import Enum
from typing import Dict, Any, Final

VERSION: Final[str] = "0.1.0"

class SearchAlgorithm(str, Enum):
    EXHAUSTIVE = "exhaustive"        # linear scan over the whole window
    SPATIAL_INDEX = "spatial-index"  # KD-tree built over the window

SEARCH_ALGORITHM_EXHAUSTIVE: Final[str] = SearchAlgorithm.EXHAUSTIVE.value
SEARCH_ALGORITHM_SPATIAL_INDEX: Final[str] = SearchAlgorithm.SPATIAL_INDEX.value

class ClassifierState(str, Enum):
    UNINITIALIZED = "uninitialized"  # no schema set
    EMPTY = "empty"                  # schema set, window empty
    POPULATED = "populated"          # window holds at least one instance

DEFAULT_K: Final[int] = 10
DEFAULT_LIMIT: Final[int] = 1000

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_CONFIG_FILE: Final[str] = "tinyknn_config.json"

DEFAULT_CONFIG: Final[Dict[str, Dict[str, Any]]] = {
    "knn": {
        "k": DEFAULT_K,
        "limit": DEFAULT_LIMIT,
        "weighted_vote": False,
        "standardize_data": False,
        "search_algorithm": SEARCH_ALGORITHM_EXHAUSTIVE,
        "exit_on_schema_error": False
    },
    "logging": {
        "level": "INFO",
        "format": DEFAULT_LOG_FORMAT
    }
}
