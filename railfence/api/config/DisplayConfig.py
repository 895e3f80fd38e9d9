"""Display configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DisplayConfig(BaseModel):
    """Display configuration."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json", "yaml"] = Field("text", description="Default CLI output format")
