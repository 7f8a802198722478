"""Configuration models for the scaffolder."""

from __future__ import annotations

from pydantic import BaseModel, Field

STARTER_TARBALL_URL = (
    "https://codeload.github.com/mosaia-development/mosaia-tools-starter/tar.gz/refs/heads/main"
)


class PromptConfig(BaseModel):
    """A single interactive question."""

    field: str = Field(..., description="UserInputs field the answer is stored in")
    question: str = Field(..., description="Text shown before reading the answer")
    min_length: int = Field(default=0, ge=0, description="Minimum trimmed answer length")


def _default_prompts() -> list[PromptConfig]:
    return [
        PromptConfig(
            field="display_name",
            question="Tool Display Name (user-facing, min length: 5): ",
            min_length=5,
        ),
        PromptConfig(
            field="short_description",
            question="Short Tool Description (user-facing, min length: 30): ",
            min_length=30,
        ),
        PromptConfig(
            field="long_description",
            question="Long Tool Description (llm-facing, min length: 30): ",
            min_length=30,
        ),
    ]


class ScaffoldConfig(BaseModel):
    """Fixed settings for creating a project from the starter template."""

    tarball_url: str = Field(default=STARTER_TARBALL_URL, description="Starter archive location")
    archive_name: str = Field(
        default="repo.tar.gz", description="Temporary archive file name inside the target"
    )
    config_filename: str = Field(
        default=".mosaia", description="Template file whose placeholders are filled in"
    )
    strip_components: int = Field(
        default=1, ge=0, description="Leading path segments dropped from archive entries"
    )
    prompts: list[PromptConfig] = Field(default_factory=_default_prompts)
