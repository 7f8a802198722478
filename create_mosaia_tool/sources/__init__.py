"""Fetching and unpacking the starter template."""

from create_mosaia_tool.sources.archive import extract_archive, extract_archive_async
from create_mosaia_tool.sources.remote import RemoteFetcher

__all__ = ["RemoteFetcher", "extract_archive", "extract_archive_async"]
