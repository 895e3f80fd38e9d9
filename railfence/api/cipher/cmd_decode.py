"""Decode command - decrypts rail fence ciphertext."""

from ..StageResult import StageResult
from ._cipher_stage import _cipher_stage
from .CipherMode import CipherMode


def cmd_decode(text: str, depth: int | str) -> StageResult:
    """Decrypt text.

    Args:
        text: Ciphertext produced with the same depth
        depth: Number of rails, as an int or as the raw string from a caller

    Returns:
        StageResult with CipherOutput
    """
    return _cipher_stage(text, depth, CipherMode.DECRYPT)
