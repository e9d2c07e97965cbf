"""Content indexing pipeline."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Sequence

from siteindex.config import ACTIVE_VERSIONS
from siteindex.models import FileEntry, Record
from siteindex.utils.files import list_version_dirs, scan_section, to_number_version
from siteindex.utils.text import (
    MAX_CONTENT_LENGTH,
    MIN_PARAGRAPH_LENGTH,
    extract_title,
    filter_short_paragraphs,
    remove_metadata,
    split_paragraphs,
    truncate,
)

LOGGER = logging.getLogger(__name__)

BLOG_SECTION = "blog"
DOCS_SECTION = "documentation"


class IndexMode(str, Enum):
    """How a page body is turned into records."""

    PARAGRAPH = "paragraph"
    TRUNCATE = "truncate"


@dataclass(slots=True)
class IndexStats:
    blog_records: int = 0
    docs_records: int = 0
    pages: int = 0

    @property
    def total(self) -> int:
        return self.blog_records + self.docs_records


@dataclass(slots=True)
class IndexedContent:
    """Records produced by one indexing run, split by section."""

    blog: List[Record] = field(default_factory=list)
    docs: List[Record] = field(default_factory=list)

    @property
    def stats(self) -> IndexStats:
        return IndexStats(
            blog_records=len(self.blog),
            docs_records=len(self.docs),
            pages=len({record.url for record in self.blog + self.docs}),
        )


class Indexer:
    """Scans the content tree and extracts search records from every page.

    In paragraph mode each long enough line of a page becomes its own record.
    In truncate mode a page yields exactly one record holding the start of
    its body, along with the file name and path.
    """

    def __init__(
        self,
        content_dir: Path,
        *,
        mode: IndexMode = IndexMode.PARAGRAPH,
        base_url: str | None = None,
        active_versions: Sequence[str] | None = ACTIVE_VERSIONS,
        min_paragraph_length: int = MIN_PARAGRAPH_LENGTH,
        max_content_length: int = MAX_CONTENT_LENGTH,
    ) -> None:
        self.content_dir = Path(content_dir).resolve()
        self.mode = IndexMode(mode)
        self.base_url = base_url
        self.active_versions = active_versions
        self.min_paragraph_length = min_paragraph_length
        self.max_content_length = max_content_length

    async def index(self) -> IndexedContent:
        """Index the blog and the documentation concurrently."""
        blog, docs = await asyncio.gather(self.index_blog(), self.index_docs())
        return IndexedContent(blog=blog, docs=docs)

    async def index_blog(self) -> List[Record]:
        return await self.index_dir(BLOG_SECTION)

    async def index_docs(self) -> List[Record]:
        docs_dir = self.content_dir / DOCS_SECTION
        versions = await asyncio.to_thread(list_version_dirs, docs_dir, self.active_versions)
        if not versions:
            LOGGER.warning("No documentation versions found in %s", docs_dir)
            return []

        indexed = await asyncio.gather(
            *(
                self.index_dir(f"{DOCS_SECTION}/{version}", version=to_number_version(version))
                for version in versions
            )
        )
        return [record for records in indexed for record in records]

    async def index_dir(self, section: str, *, version: int | None = None) -> List[Record]:
        """Read every file of a section concurrently and extract its records."""
        entries = await asyncio.to_thread(scan_section, self.content_dir, section, self.base_url)
        LOGGER.info("Indexing %d files in %s", len(entries), section)

        texts = await asyncio.gather(
            *(asyncio.to_thread(entry.path.read_text, encoding="utf-8") for entry in entries)
        )

        records: List[Record] = []
        for entry, text in zip(entries, texts):
            extracted = self.extract(entry, text, version=version)
            if not extracted:
                LOGGER.debug("No indexable content in %s", entry.path)
            records.extend(extracted)
        return records

    def extract(self, entry: FileEntry, text: str, *, version: int | None = None) -> List[Record]:
        """Turn the raw text of one page into records."""
        title = extract_title(text)
        body = remove_metadata(text)

        if self.mode is IndexMode.TRUNCATE:
            return [
                Record(
                    url=entry.url,
                    title=title,
                    content=truncate(body, max_chars=self.max_content_length),
                    name=entry.name,
                    path=str(entry.path),
                    version=version,
                )
            ]

        paragraphs = filter_short_paragraphs(
            split_paragraphs(body), min_length=self.min_paragraph_length
        )
        return [
            Record(url=entry.url, title=title, content=paragraph, version=version)
            for paragraph in paragraphs
        ]
