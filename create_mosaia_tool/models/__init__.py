"""Data models for create-mosaia-tool."""

from create_mosaia_tool.models.config import PromptConfig, ScaffoldConfig
from create_mosaia_tool.models.inputs import UserInputs

__all__ = [
    "PromptConfig",
    "ScaffoldConfig",
    "UserInputs",
]
