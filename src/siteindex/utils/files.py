"""Utility helpers for locating content files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List

from siteindex.models import FileEntry

LOGGER = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^v(\d+)$")


def generate_url(section: str, file_name: str, base_url: str | None = None) -> str:
    """Build the public URL of a content file.

    ``generate_url("documentation/v10", "getting-started.md")`` gives
    ``"documentation/v10/getting-started"``; with a base URL the result is
    absolute.
    """
    url = "/".join([section, file_name]).replace(".md", "", 1)
    if base_url:
        return f"{base_url.rstrip('/')}/{url}"
    return url


def is_version_dir_name(name: str) -> bool:
    return _VERSION_RE.match(name) is not None


def to_number_version(version: str) -> int:
    """Parse a version directory name such as ``v10`` into ``10``."""
    match = _VERSION_RE.match(version)
    if match is None:
        raise ValueError(f"Not a version directory name: {version!r}")
    return int(match.group(1))


def scan_section(content_dir: Path, section: str, base_url: str | None = None) -> List[FileEntry]:
    """List the content files of a section such as ``blog`` or ``documentation/v10``.

    Raises ``FileNotFoundError`` when the section directory does not exist.
    """
    section_dir = (content_dir / section).resolve()
    entries = []
    for child in sorted(section_dir.iterdir()):
        if child.is_dir():
            LOGGER.debug("Skipping directory %s", child)
            continue
        entries.append(
            FileEntry(
                name=child.name,
                path=child,
                url=generate_url(section, child.name, base_url),
            )
        )
    return entries


def list_version_dirs(docs_dir: Path, active_versions: Iterable[str] | None = None) -> List[str]:
    """Return the version subdirectories of the documentation directory.

    When ``active_versions`` is ``None`` every subdirectory is considered.
    Names that are not of the form ``v<number>`` are skipped.
    """
    allowed = set(active_versions) if active_versions is not None else None
    versions = []
    for child in sorted(docs_dir.iterdir()):
        if allowed is not None and child.name not in allowed:
            continue
        if not child.is_dir():
            continue
        if not is_version_dir_name(child.name):
            LOGGER.warning("Skipping documentation directory with invalid version name: %s", child)
            continue
        versions.append(child.name)
    return versions
