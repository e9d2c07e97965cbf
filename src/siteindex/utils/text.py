"""Text helpers for turning markdown pages into index content."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List

MIN_PARAGRAPH_LENGTH = 50
MAX_CONTENT_LENGTH = 1000

_TITLE_RE = re.compile(r'title.*"(.*)"')
# Greedy and spanning newlines: everything between the first and last marker goes.
_METADATA_RE = re.compile(r"[-+]{3}.*[-+]{3}", re.DOTALL)


def extract_title(text: str) -> str:
    """Return the quoted value of the first ``title`` header line, or ``""``."""
    match = _TITLE_RE.search(text)
    if match:
        return match.group(1)
    return ""


def remove_metadata(text: str) -> str:
    """Strip the front-matter block delimited by ``---`` or ``+++`` markers."""
    return _METADATA_RE.sub("", text, count=1)


def split_paragraphs(text: str) -> List[str]:
    return [line for line in text.split("\n") if line]


def filter_short_paragraphs(
    paragraphs: Iterable[str], *, min_length: int = MIN_PARAGRAPH_LENGTH
) -> Iterator[str]:
    """Yield paragraphs long enough to be worth indexing, keeping their order."""
    for paragraph in paragraphs:
        if len(paragraph) >= min_length:
            yield paragraph


def truncate(text: str, *, max_chars: int = MAX_CONTENT_LENGTH) -> str:
    return text[:max_chars]
