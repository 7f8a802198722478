"""Error types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class ValidationError(ScaffoldError):
    """An interactive answer did not meet its minimum length."""

    def __init__(self, min_length: int) -> None:
        self.min_length = min_length
        super().__init__(f"Input must be at least {min_length} characters.")


class DirectoryExistsError(ScaffoldError):
    """The target directory is already present on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory {path} already exists.")


class NetworkError(ScaffoldError):
    """The connection to the template host could not be established."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Request to {url} failed: {reason}")


class HttpStatusError(ScaffoldError):
    """The template host answered with a non-200 status."""

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Request failed: {status_code}")


class ExtractionError(ScaffoldError):
    """The downloaded archive is not a readable tar-gzip stream."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not extract {path}: {reason}")


class FileSystemError(ScaffoldError):
    """Creating, reading or writing a project path failed."""

    def __init__(self, path: Path, reason: str, action: str = "update") -> None:
        self.path = path
        self.action = action
        super().__init__(f"Could not {action} {path}: {reason}")
