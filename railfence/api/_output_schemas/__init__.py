"""Output schemas for API commands.

Importing this package registers every command schema.
"""

from . import cipher, config
from ._registry import get_output_schema

__all__ = ["cipher", "config", "get_output_schema"]
