"""Main Scaffolder class - creates a tool project from the starter template."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from create_mosaia_tool.errors import DirectoryExistsError, FileSystemError
from create_mosaia_tool.models.config import ScaffoldConfig
from create_mosaia_tool.models.inputs import UserInputs
from create_mosaia_tool.slug import slugify
from create_mosaia_tool.sources.archive import extract_archive_async
from create_mosaia_tool.sources.remote import RemoteFetcher
from create_mosaia_tool.template import patch_file

logger = logging.getLogger(__name__)


@dataclass
class ScaffoldResult:
    """Outcome of a successful scaffold run."""

    target_dir: Path
    config_path: Path
    entries_extracted: int = 0
    replacements: dict[str, int] = field(default_factory=dict)


class Scaffolder:
    """Runs the create-project pipeline.

    Steps run strictly in order: resolve target, check it is absent,
    create it, download, extract, remove the archive, patch the config
    file. Nothing is rolled back when a step fails.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        fetcher: RemoteFetcher | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self._fetcher = fetcher

    @property
    def fetcher(self) -> RemoteFetcher:
        if self._fetcher is None:
            self._fetcher = RemoteFetcher()
        return self._fetcher

    def resolve_target(self, inputs: UserInputs, target: str | Path | None = None) -> Path:
        """Absolute target path: the explicit target, or the display name slug."""
        raw = str(target) if target else slugify(inputs.display_name)
        return Path(os.path.abspath(raw))

    def prepare_target(self, target_dir: Path) -> None:
        """Create ``target_dir``, which must not exist yet."""
        if target_dir.exists():
            raise DirectoryExistsError(target_dir)
        try:
            target_dir.mkdir(parents=True)
        except OSError as e:
            raise FileSystemError(target_dir, str(e), action="create") from e
        logger.debug("Created %s", target_dir)

    def remove_archive(self, archive_path: Path) -> None:
        """Delete the downloaded archive, ignoring any failure."""
        try:
            archive_path.unlink(missing_ok=True)
        except OSError as e:
            logger.debug("Could not remove %s: %s", archive_path, e)

    async def create(
        self,
        inputs: UserInputs,
        target: str | Path | None = None,
        progress_callback: Callable[[str], None] | None = None,
    ) -> ScaffoldResult:
        """Create a new project directory from the starter template.

        Args:
            inputs: Answers to substitute into the config file
            target: Explicit target directory, defaults to the display name slug
            progress_callback: Optional callback(step description)

        Returns:
            ScaffoldResult describing the created project
        """

        def report(step: str) -> None:
            logger.info(step)
            if progress_callback:
                progress_callback(step)

        target_dir = self.resolve_target(inputs, target)
        self.prepare_target(target_dir)

        archive_path = target_dir / self.config.archive_name
        report("Downloading template...")
        try:
            await self.fetcher.fetch(self.config.tarball_url, archive_path)
        finally:
            await self.fetcher.close()

        report("Extracting template...")
        entries = await extract_archive_async(
            archive_path, target_dir, self.config.strip_components
        )
        self.remove_archive(archive_path)

        report("Updating configuration...")
        config_path = target_dir / self.config.config_filename
        replacements = patch_file(config_path, inputs.placeholders())

        return ScaffoldResult(
            target_dir=target_dir,
            config_path=config_path,
            entries_extracted=entries,
            replacements=replacements,
        )
