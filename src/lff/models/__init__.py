"""lff data models."""

from lff.models.file_record import FileRecord
from lff.models.traversal_config import MEBIBYTE, SortMethod, TraversalConfig

__all__ = [
    "FileRecord",
    "MEBIBYTE",
    "SortMethod",
    "TraversalConfig",
]
