"""Mode-dispatching entry point for the cipher."""

from .CipherMode import CipherMode
from .decode import decode
from .encode import encode


def transform(text: str, depth: int, mode: CipherMode) -> str:
    """Encrypt or decrypt ``text`` with a rail fence of ``depth`` rails."""
    mode = CipherMode(mode)
    if mode is CipherMode.DECRYPT:
        return decode(text, depth)
    return encode(text, depth)
