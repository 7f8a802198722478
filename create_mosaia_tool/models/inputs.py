"""User-provided answers collected before scaffolding."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserInputs(BaseModel):
    """The three strings written into the project's config file."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    display_name: str = Field(..., min_length=5, description="User-facing tool name")
    short_description: str = Field(..., min_length=30, description="User-facing summary")
    long_description: str = Field(..., min_length=30, description="LLM-facing description")

    def placeholders(self) -> dict[str, str]:
        """Map each config file token to its value, in prompt order."""
        return {
            "TOOL_DISPLAY_NAME": self.display_name,
            "SHORT_TOOL_DESCRIPTION": self.short_description,
            "LONG_TOOL_DESCRIPTION": self.long_description,
        }
