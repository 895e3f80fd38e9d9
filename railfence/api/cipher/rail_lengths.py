"""Count how many positions land on each rail."""

from .zigzag_path import zigzag_path


def rail_lengths(length: int, depth: int) -> list[int]:
    """Return the number of characters held by each rail, top rail first.

    Rails the path never reaches (depth greater than length) have length 0.
    """
    path = zigzag_path(length, depth)
    counts = [0] * depth
    for rail in path:
        counts[rail] += 1
    return counts
