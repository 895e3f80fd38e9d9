"""Encode command - encrypts text with the rail fence cipher."""

from ..StageResult import StageResult
from ._cipher_stage import _cipher_stage
from .CipherMode import CipherMode


def cmd_encode(text: str, depth: int | str) -> StageResult:
    """Encrypt text.

    Args:
        text: Plain text to encrypt
        depth: Number of rails, as an int or as the raw string from a caller

    Returns:
        StageResult with CipherOutput
    """
    return _cipher_stage(text, depth, CipherMode.ENCRYPT)
