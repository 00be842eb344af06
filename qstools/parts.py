"""Part size calculation for multipart uploads."""

from __future__ import annotations

__all__ = [
    "DEFAULT_PART_SIZE",
    "MAXIMUM_OBJECT_SIZE",
    "MAXIMUM_MULTIPART_NUMBER",
    "MAXIMUM_AUTO_MULTIPART_SIZE",
    "LocalFileTooLargeError",
    "calculate_part_size",
]

DEFAULT_PART_SIZE = 128 * 1024 * 1024
MAXIMUM_OBJECT_SIZE = 50 * 1024 * 1024 * 1024 * 1024
MAXIMUM_MULTIPART_NUMBER = 10000
MAXIMUM_AUTO_MULTIPART_SIZE = 1024 * 1024 * 1024


class LocalFileTooLargeError(ValueError):
    """Raised when a local file exceeds the maximum object size."""

    def __init__(self, size: int) -> None:
        super().__init__(f"calculate part size failed: local file too large: {size}")
        self.size = size


def calculate_part_size(size: int) -> int:
    """Return a part size that keeps an object of ``size`` bytes under the part limit."""
    if size > MAXIMUM_OBJECT_SIZE:
        raise LocalFileTooLargeError(size)

    part_size = DEFAULT_PART_SIZE
    while size // part_size >= MAXIMUM_MULTIPART_NUMBER:
        if part_size < MAXIMUM_AUTO_MULTIPART_SIZE:
            part_size <<= 1
            continue
        # Account for integer division truncation.
        part_size = size // MAXIMUM_MULTIPART_NUMBER + 1
        break
    return part_size