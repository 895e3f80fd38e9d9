"""Unparsable depth error."""

from .RailFenceError import RailFenceError


class ParameterFormatError(RailFenceError):
    """Raised when a depth string supplied by a caller cannot be parsed as an integer."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid depth format {value!r}: expected a positive integer")
