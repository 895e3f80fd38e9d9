"""Rail fence decryption."""

from ...utils.logger import get_logger
from .rail_lengths import rail_lengths
from .zigzag_path import zigzag_path

logger = get_logger("cipher")


def decode(message: str, depth: int) -> str:
    """Decrypt a message produced by :func:`encode` with the same depth.

    The rail lengths are recomputed from the message length, the ciphertext is
    cut into one contiguous run per rail, and the zig-zag path is replayed,
    taking the next unread character from each rail it visits.

    Args:
        message: Text to decrypt (may be empty)
        depth: Number of rails (>= 1)

    Returns:
        The decrypted text

    Raises:
        InvalidParameterError: If depth is not a positive integer
    """
    lengths = rail_lengths(len(message), depth)

    rails: list[list[str]] = []
    pos = 0
    for length in lengths:
        rails.append(list(message[pos : pos + length]))
        pos += length

    cursors = [0] * depth
    result: list[str] = []
    for rail in zigzag_path(len(message), depth):
        result.append(rails[rail][cursors[rail]])
        cursors[rail] += 1

    logger.debug(f"Decoded {len(message)} characters across {depth} rails")
    return "".join(result)
