"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

DEFAULT_BASE_URL = "https://graphql-java.com"
DEFAULT_APPLICATION_ID = "QN236PQQTM"
API_KEY_ENV = "API_KEY"

# TODO: read active versions from the docs site config instead of pinning them here
ACTIVE_VERSIONS = ("v9", "v10")


class MissingCredentialsError(RuntimeError):
    """Raised when the hosted search index is used without an API key."""


@dataclass(slots=True)
class AppConfig:
    content_dir: Path = Path("content")
    output_path: Path = Path("dist/algolia-index.json")
    base_url: str = DEFAULT_BASE_URL
    active_versions: Sequence[str] | None = ACTIVE_VERSIONS
    application_id: str = DEFAULT_APPLICATION_ID
    api_key: str | None = None
    blog_index: str = "blog"
    docs_index: str = "documentation"

    def __post_init__(self) -> None:
        if self.api_key is None:
            self.api_key = os.environ.get(API_KEY_ENV) or None
        self.base_url = self.base_url.rstrip("/")

    def resolve_content_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.content_dir, base_dir)

    def resolve_output_path(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.output_path, base_dir)

    def require_api_key(self) -> str:
        """Return the hosted index API key or fail if none is configured."""
        if not self.api_key:
            raise MissingCredentialsError(
                f"No API key configured; set the {API_KEY_ENV} environment variable"
            )
        return self.api_key


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if Path(path).is_absolute() or base_dir is None:
        return Path(path)
    return base_dir / path
