"""Publishing of indexed records."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Sequence

from siteindex.index.hosted import SearchIndexClient
from siteindex.index.indexer import IndexedContent
from siteindex.models import Record

LOGGER = logging.getLogger(__name__)

BLOG_CATEGORY = "Blogs"
DOCS_CATEGORY = "Documentation"


class HostedIndexEmitter:
    """Replaces the contents of the hosted blog and documentation indexes."""

    def __init__(
        self,
        client: SearchIndexClient,
        *,
        blog_index: str = "blog",
        docs_index: str = "documentation",
    ) -> None:
        self.client = client
        self.blog_index = blog_index
        self.docs_index = docs_index

    async def emit(self, content: IndexedContent) -> None:
        """Update both indexes; a failure in one does not interrupt the other.

        Every failure is logged and the first one is raised once both
        updates have finished.
        """
        index_names = (self.blog_index, self.docs_index)
        results = await asyncio.gather(
            self.replace_index(self.blog_index, content.blog),
            self.replace_index(self.docs_index, content.docs),
            return_exceptions=True,
        )

        errors = []
        for index_name, result in zip(index_names, results):
            if isinstance(result, BaseException):
                LOGGER.error("Failed to update index %s: %s", index_name, result)
                errors.append(result)
        if errors:
            raise errors[0]

    async def replace_index(self, index_name: str, records: Sequence[Record]) -> None:
        """Clear an index, then add the new records once the clear has finished.

        A failure after the clear leaves the index empty; nothing is rolled back.
        """
        LOGGER.info("Clearing index %s", index_name)
        response = await self.client.clear_objects(index_name=index_name)
        await self.client.wait_for_task(index_name=index_name, task_id=response.task_id)

        if not records:
            LOGGER.warning("No records to add to index %s", index_name)
            return

        LOGGER.info("Adding %d records to index %s", len(records), index_name)
        await self.client.save_objects(
            index_name=index_name, objects=[record.to_dict() for record in records]
        )


class FileExporter:
    """Writes all records, tagged with their category, to one JSON file."""

    def __init__(self, output_path: Path, *, indent: int | None = 2) -> None:
        self.output_path = Path(output_path)
        self.indent = indent

    def build_records(self, content: IndexedContent) -> List[Record]:
        return [replace(record, category=BLOG_CATEGORY) for record in content.blog] + [
            replace(record, category=DOCS_CATEGORY) for record in content.docs
        ]

    def emit(self, content: IndexedContent) -> Path:
        records = self.build_records(content)
        payload = json.dumps(
            [record.to_dict() for record in records], indent=self.indent, ensure_ascii=False
        )

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(payload, encoding="utf-8")
        LOGGER.info("Wrote %d records to %s", len(records), self.output_path)
        return self.output_path
