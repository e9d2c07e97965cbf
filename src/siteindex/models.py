"""Core siteindex data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A content file found by the scanner."""

    name: str
    path: Path
    url: str


@dataclass(frozen=True, slots=True)
class Record:
    """One searchable unit pushed to the search index.

    ``name``, ``path`` and ``category`` are only filled in by the file
    export; ``version`` only for documentation pages.
    """

    url: str
    title: str
    content: str
    name: str | None = None
    path: str | None = None
    category: str | None = None
    version: int | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}
