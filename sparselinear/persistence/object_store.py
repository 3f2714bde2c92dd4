"""Pickle-based storage for label maps, vocabularies and problems."""

import logging
import pickle
from pathlib import Path
from typing import Any, Dict, Optional, Set

from sparselinear.persistence.exceptions import ObjectStoreError

logger = logging.getLogger(__name__)


def write_object(obj: Any, path: str) -> None:
    """
    Serialize an object to disk.
    
    Raises:
        ObjectStoreError: If the file cannot be written or the object pickled
    """
    path = Path(path)
    try:
        with open(path, "wb") as f:
            pickle.dump(obj, f)
    except (OSError, pickle.PicklingError) as e:
        raise ObjectStoreError(f"Failed to write {path}: {e}") from e
    logger.debug(f"Wrote {type(obj).__name__} to {path}")


def read_object(path: Optional[str]) -> Any:
    """
    Deserialize an object written by write_object.
    
    Returns None when `path` is None.
    
    Raises:
        ObjectStoreError: If the file is missing, unreadable or corrupt
    """
    if path is None:
        return None

    path = Path(path)
    try:
        with open(path, "rb") as f:
            obj = pickle.load(f)
    except (OSError, pickle.UnpicklingError, EOFError) as e:
        raise ObjectStoreError(f"Failed to read {path}: {e}") from e
    logger.debug(f"Read {type(obj).__name__} from {path}")
    return obj


def load_label_map(path: str) -> Dict[int, Set[int]]:
    """
    Load a {document index: set of label indices} map.
    
    Raises:
        ObjectStoreError: If the stored object has a different shape
    """
    logger.info(f"Loading label map from {path}")
    label_map = read_object(path)
    if not isinstance(label_map, dict) or not all(
        isinstance(key, int) and isinstance(value, (set, frozenset))
        for key, value in label_map.items()
    ):
        raise ObjectStoreError(f"{path} does not contain a label map")
    logger.info(f"Loaded labels for {len(label_map)} documents")
    return label_map
