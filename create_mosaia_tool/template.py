"""Placeholder substitution in template files.

A placeholder is a key wrapped in double quotes, e.g. ``"TOOL_DISPLAY_NAME"``.
Substitution keeps the quotes: the token becomes ``"<value>"``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from create_mosaia_tool.errors import FileSystemError

logger = logging.getLogger(__name__)


def _token(key: str) -> str:
    return f'"{key}"'


def interpolate(text: str, mapping: Mapping[str, str]) -> str:
    """Replace every quoted key in ``text`` with its quoted value.

    Keys are applied one pass each, in mapping order. Keys missing from
    the text are skipped.
    """
    for key, value in mapping.items():
        text = text.replace(_token(key), _token(value))
    return text


def count_placeholders(text: str, mapping: Mapping[str, str]) -> dict[str, int]:
    """Count occurrences of each quoted key in ``text``."""
    return {key: text.count(_token(key)) for key in mapping}


def patch_file(path: Path, mapping: Mapping[str, str]) -> dict[str, int]:
    """Interpolate a UTF-8 text file in place.

    Returns the number of tokens replaced per key.
    """
    # newline="" keeps the file's line endings untouched
    try:
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(path, str(e), action="read") from e

    counts = count_placeholders(content, mapping)
    missing = [key for key, count in counts.items() if count == 0]
    if missing:
        logger.warning("No placeholder found in %s for: %s", path.name, ", ".join(missing))

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(interpolate(content, mapping))
    except OSError as e:
        raise FileSystemError(path, str(e)) from e

    return counts
