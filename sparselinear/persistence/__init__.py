"""Object persistence."""
from sparselinear.persistence.exceptions import ObjectStoreError
from sparselinear.persistence.object_store import (
    write_object,
    read_object,
    load_label_map,
)

__all__ = [
    "ObjectStoreError",
    "write_object",
    "read_object",
    "load_label_map",
]
