"""Rail Fence transposition cipher."""

from .api.cipher import CipherMode, decode, encode, transform

__all__ = ["CipherMode", "decode", "encode", "transform"]
