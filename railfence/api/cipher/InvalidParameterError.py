"""Invalid rail depth error."""

from .RailFenceError import RailFenceError


class InvalidParameterError(RailFenceError):
    """Raised when the rail depth is not a positive integer."""

    def __init__(self, depth: object):
        self.depth = depth
        super().__init__(f"Invalid depth {depth!r}: depth must be an integer >= 1")
