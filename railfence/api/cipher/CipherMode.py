"""Cipher direction."""

from enum import Enum


class CipherMode(str, Enum):
    """Direction of the rail fence transform."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @property
    def label(self) -> str:
        """Label used when printing a transformed text."""
        return "Encrypted Text" if self is CipherMode.ENCRYPT else "Decrypted Text"
