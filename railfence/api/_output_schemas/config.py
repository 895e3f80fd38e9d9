"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")
    full_version: str = Field(..., description="Program name and version, as printed by --version")


register_output_schema("config", "version", ConfigVersionOutput)
