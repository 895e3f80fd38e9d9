"""Output schemas for cipher commands."""

from typing import Literal

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class CipherOutput(BaseOutputSchema):
    """Output schema for cipher encode and decode commands.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - mode: "encrypt" or "decrypt"
    - depth: the requested rail count, null if the value could not be parsed
    - input: the text that was transformed
    - text: the transformed text, empty string on failure
    - length: number of characters in text
    """

    mode: Literal["encrypt", "decrypt"] = Field(..., description="Cipher direction")
    depth: int | None = Field(..., description="Number of rails requested, null if it could not be parsed")
    input: str = Field(..., description="Text supplied to the command")
    text: str = Field(..., description="Transformed text, empty string on failure")
    length: int = Field(..., ge=0, description="Number of characters in text")


# Register schemas
register_output_schema("cipher", "encode", CipherOutput)
register_output_schema("cipher", "decode", CipherOutput)
