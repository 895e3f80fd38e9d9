"""Base error for rail fence operations."""


class RailFenceError(ValueError):
    """Raised when a rail fence operation cannot be performed."""
