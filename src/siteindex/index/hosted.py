"""Hosted search client lifecycle."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Protocol

from algoliasearch.search.client import SearchClient

from siteindex.config import AppConfig

LOGGER = logging.getLogger(__name__)


class SearchIndexClient(Protocol):
    """The subset of the Algolia search client used to publish records."""

    async def clear_objects(self, index_name: str) -> Any: ...

    async def wait_for_task(self, index_name: str, task_id: int) -> Any: ...

    async def save_objects(self, index_name: str, objects: List[Dict[str, Any]]) -> Any: ...


@asynccontextmanager
async def open_search_client(config: AppConfig) -> AsyncIterator[SearchClient]:
    """Create a search client for one run and close it afterwards."""
    client = SearchClient(config.application_id, config.require_api_key())
    LOGGER.debug("Opened search client for application %s", config.application_id)
    try:
        yield client
    finally:
        await client.close()
