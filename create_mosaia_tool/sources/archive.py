"""Tar-gzip extraction with leading path components stripped."""

from __future__ import annotations

import asyncio
import gzip
import logging
import tarfile
import zlib
from pathlib import Path, PurePosixPath

from create_mosaia_tool.errors import ExtractionError, FileSystemError

logger = logging.getLogger(__name__)


def _strip(name: str, count: int) -> str | None:
    """Drop the first ``count`` segments of an archive path."""
    parts = [p for p in PurePosixPath(name).parts if p not in ("/", ".")]
    if len(parts) <= count:
        return None
    return str(PurePosixPath(*parts[count:]))


def _stripped_members(tar: tarfile.TarFile, count: int) -> list[tarfile.TarInfo]:
    members: list[tarfile.TarInfo] = []
    for member in tar.getmembers():
        name = _strip(member.name, count)
        if name is None:
            # The wrapper directory itself
            continue
        member.name = name
        if member.islnk():
            # Hard link targets are archive paths too
            member.linkname = _strip(member.linkname, count) or member.linkname
        members.append(member)
    return members


def extract_archive(archive_path: Path, output_dir: Path, strip_components: int = 1) -> int:
    """Unpack a tar-gzip archive into ``output_dir``.

    The first ``strip_components`` path segments of every entry are removed,
    which flattens the single wrapper directory of source archive exports.
    Entry paths are trusted as-is.

    Returns the number of entries written.
    """
    try:
        with tarfile.open(archive_path, "r:gz") as tar:
            members = _stripped_members(tar, strip_components)
            tar.extractall(path=output_dir, members=members, filter="fully_trusted")
    except (tarfile.TarError, EOFError, zlib.error, gzip.BadGzipFile) as e:
        raise ExtractionError(archive_path, str(e) or type(e).__name__) from e
    except OSError as e:
        raise FileSystemError(output_dir, str(e), action="extract into") from e

    logger.info("Extracted %d entries from %s into %s", len(members), archive_path.name, output_dir)
    return len(members)


async def extract_archive_async(
    archive_path: Path, output_dir: Path, strip_components: int = 1
) -> int:
    """Run :func:`extract_archive` in a worker thread."""
    return await asyncio.to_thread(extract_archive, archive_path, output_dir, strip_components)
