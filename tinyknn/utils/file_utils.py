import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union, TypeVar, overload

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
T = TypeVar('T')

def ensure_dir(dir_path: PathLike) -> Path:
    path_obj = Path(dir_path)
    try:
        path_obj.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured directory exists: {path_obj}")
    except OSError as e:
        logger.error(f"Failed to create or access directory {path_obj}: {e}")
        raise
    return path_obj

@overload
def load_json(file_path: PathLike) -> Dict[str, Any]: ...
@overload
def load_json(file_path: PathLike, default: T) -> Union[Dict[str, Any], T]: ...

def load_json(file_path: PathLike, default: Optional[T] = None) -> Union[Dict[str, Any], T]:
    path_obj = Path(file_path)
    if not path_obj.is_file():
        if default is not None:
            logger.warning(f"JSON file not found at {path_obj}, returning default.")
            return default
        raise FileNotFoundError(f"JSON file not found: {file_path}")
    try:
        with path_obj.open('r', encoding='utf-8') as f:
            content = f.read()
        if not content:
            if default is not None:
                logger.warning(f"JSON file is empty at {path_obj}, returning default.")
                return default
            raise ValueError(f"JSON file is empty: {file_path}")
        data = json.loads(content)
        logger.debug(f"Loaded JSON from: {path_obj}")
        return data
    except json.JSONDecodeError as e:
        if default is not None:
            logger.warning(f"Invalid JSON in file {path_obj} (Error: {e}), returning default.")
            return default
        logger.error(f"Failed to decode JSON from {path_obj}: {e}")
        raise

def save_json(data: Dict[str, Any], file_path: PathLike, pretty: bool = True) -> None:
    path_obj = Path(file_path)
    ensure_dir(path_obj.parent)
    try:
        with path_obj.open('w', encoding='utf-8') as f:
            if pretty:
                json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)
        logger.debug(f"Saved JSON to: {path_obj}")
    except TypeError as e:
        logger.error(f"Data for {path_obj} is not JSON serializable: {e}", exc_info=True)
        raise
