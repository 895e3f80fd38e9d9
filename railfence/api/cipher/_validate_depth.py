from .InvalidParameterError import InvalidParameterError


def _validate_depth(depth: int) -> int:
    """Return depth unchanged if it is a usable rail count.

    Raises:
        InvalidParameterError: If depth is not an int or is less than 1
    """
    # bool is an int subclass; True would silently mean one rail
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise InvalidParameterError(depth)
    if depth < 1:
        raise InvalidParameterError(depth)
    return depth
