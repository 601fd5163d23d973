"""Exception types shared by the indexed structures."""

from __future__ import annotations


class IndexOutOfRangeError(IndexError):
    """Raised when an element index falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range for size {size}")
        self.index = index
        self.size = size
