"""One step of the zig-zag oscillator."""


def next_rail(current: int, direction: int, depth: int) -> tuple[int, int]:
    """Advance one position along the zig-zag path.

    The direction turns upward on the top rail and downward on the bottom rail.
    With a single rail the path never leaves rail 0.

    Args:
        current: Rail of the current position
        direction: +1 while descending the rails, -1 while climbing back
        depth: Number of rails

    Returns:
        Tuple of (rail for the next position, direction after the step)
    """
    if depth == 1:
        return 0, direction
    if current == 0:
        direction = 1
    elif current == depth - 1:
        direction = -1
    return current + direction, direction
