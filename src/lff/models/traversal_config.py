"""Traversal configuration dataclass."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

MEBIBYTE = 1024 * 1024


class SortMethod(Enum):
    """How found files are ordered before the limit is applied."""

    SIZE = "size"
    NAME = "name"


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Resolved filter, limit and behaviour settings for one walk.

    Shared read-only by every worker thread; never mutated once built.
    """

    min_size_bytes: int = 0
    extension: str | None = None
    name_pattern: str | None = None
    exclude_hidden: bool = False
    limit: int | None = None
    absolute: bool = False
    sort_method: SortMethod | None = None

    def __post_init__(self) -> None:
        if self.min_size_bytes < 0:
            raise ValueError(f"min_size_bytes must be non-negative, got {self.min_size_bytes}")
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be non-negative, got {self.limit}")

    @classmethod
    def from_mib(cls, min_size_mib: float, **kwargs) -> TraversalConfig:
        """Build a config from a threshold in MiB, e.g. 0.1 = 100 KiB.

        The byte threshold is rounded up, so ``size >= min_size_bytes``
        holds exactly when ``size / MiB >= min_size_mib``.
        """
        if not math.isfinite(min_size_mib) or min_size_mib < 0:
            raise ValueError(f"min_size_mib must be a finite, non-negative number, got {min_size_mib}")
        return cls(min_size_bytes=math.ceil(min_size_mib * MEBIBYTE), **kwargs)

    @property
    def early_exit(self) -> bool:
        """Whether the walk may stop once ``limit`` matches are found."""
        return self.limit is not None and self.sort_method is None
