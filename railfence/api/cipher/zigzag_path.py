"""Materialize the zig-zag path for a message length."""

from ._validate_depth import _validate_depth
from .next_rail import next_rail


def zigzag_path(length: int, depth: int) -> list[int]:
    """Return the rail visited at each of ``length`` positions.

    Example:
        >>> zigzag_path(5, 3)
        [0, 1, 2, 1, 0]
    """
    _validate_depth(depth)
    path: list[int] = []
    rail, direction = 0, 1
    for _ in range(length):
        path.append(rail)
        rail, direction = next_rail(rail, direction, depth)
    return path
