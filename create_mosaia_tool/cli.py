"""Command-line entry point for create-mosaia-tool."""

from __future__ import annotations

import asyncio
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from create_mosaia_tool.errors import ScaffoldError
from create_mosaia_tool.models.config import ScaffoldConfig
from create_mosaia_tool.prompts import collect_inputs
from create_mosaia_tool.scaffolder import Scaffolder

console = Console()
err_console = Console(stderr=True)


def get_scaffolder(config: ScaffoldConfig) -> Scaffolder:
    return Scaffolder(config)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@click.command()
@click.argument("target_dir", required=False)
def main(target_dir: str | None) -> None:
    """Create a new Mosaia tool project.

    TARGET_DIR defaults to a slug of the tool display name, created in the
    current directory. It must not exist yet.
    """
    _configure_logging()
    config = ScaffoldConfig()
    inputs = collect_inputs(config)
    scaffolder = get_scaffolder(config)

    try:
        with console.status("Creating project...") as status:
            result = asyncio.run(
                scaffolder.create(inputs, target_dir, progress_callback=status.update)
            )
    except ScaffoldError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
        raise SystemExit(1)
    except Exception as e:
        err_console.print(
            f"[red]Unexpected error:[/red] {escape(repr(e))}", soft_wrap=True, highlight=False
        )
        raise SystemExit(1)

    console.print(
        f"[green]Project initialized in {escape(str(result.target_dir))}[/green]",
        soft_wrap=True,
        highlight=False,
    )


if __name__ == "__main__":
    main()
