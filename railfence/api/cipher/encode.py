"""Rail fence encryption."""

from ...utils.logger import get_logger
from .zigzag_path import zigzag_path

logger = get_logger("cipher")


def encode(message: str, depth: int) -> str:
    """Encrypt a message by writing it along the rails and reading rail by rail.

    Args:
        message: Text to encrypt (may be empty)
        depth: Number of rails (>= 1)

    Returns:
        The encrypted text, a permutation of ``message``

    Raises:
        InvalidParameterError: If depth is not a positive integer
    """
    path = zigzag_path(len(message), depth)
    rails: list[list[str]] = [[] for _ in range(depth)]
    for char, rail in zip(message, path):
        rails[rail].append(char)
    logger.debug(f"Encoded {len(message)} characters across {depth} rails")
    return "".join("".join(rail) for rail in rails)
