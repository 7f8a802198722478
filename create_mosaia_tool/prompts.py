"""Interactive questions asked on the controlling terminal."""

from __future__ import annotations

import logging

import click
from rich.console import Console

from create_mosaia_tool.errors import ValidationError
from create_mosaia_tool.models.config import ScaffoldConfig
from create_mosaia_tool.models.inputs import UserInputs

logger = logging.getLogger(__name__)

console = Console()


def check_minimum_length(answer: str, min_length: int) -> str:
    """Return the trimmed answer, or raise ValidationError if it is too short."""
    answer = answer.strip()
    if len(answer) < min_length:
        raise ValidationError(min_length)
    return answer


def ask_with_minimum_length(question: str, min_length: int) -> str:
    """Ask until the trimmed answer has at least ``min_length`` characters.

    There is no retry limit. Closing stdin raises ``click.Abort``.
    """
    while True:
        answer = click.prompt(question, default="", show_default=False, prompt_suffix="")
        try:
            return check_minimum_length(answer, min_length)
        except ValidationError as e:
            console.print(str(e), markup=False, highlight=False)


def collect_inputs(config: ScaffoldConfig | None = None) -> UserInputs:
    """Ask every configured question in order and build the user inputs."""
    config = config or ScaffoldConfig()
    answers: dict[str, str] = {}
    for prompt in config.prompts:
        answers[prompt.field] = ask_with_minimum_length(prompt.question, prompt.min_length)
        logger.debug("Collected %s (%d chars)", prompt.field, len(answers[prompt.field]))
    return UserInputs(**answers)
