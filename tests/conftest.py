"""Shared fixtures: a small site content tree."""

from __future__ import annotations

from pathlib import Path

import pytest

_LONG_PARAGRAPH = "GraphQL Java lets you build a GraphQL server in Java!"  # 53 chars
_HELLO_BODY = "a" * 60
_HELLO_TAIL = "b" * 10


def _make_page(title: str, *paragraphs: str) -> str:
    return "---\ntitle: \"{}\"\n---\n\n{}\n".format(title, "\n".join(paragraphs))


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """content/blog with one post and three documentation versions."""
    content = tmp_path / "content"
    blog = content / "blog"
    blog.mkdir(parents=True)
    (blog / "hello.md").write_text(_make_page("Hello", _HELLO_BODY, _HELLO_TAIL))

    docs = content / "documentation"
    for version in ("v9", "v10", "master"):
        version_dir = docs / version
        version_dir.mkdir(parents=True)
        (version_dir / "getting-started.md").write_text(
            _make_page(f"Getting started {version}", _LONG_PARAGRAPH, "tiny")
        )
    (docs / "v10" / "schema.md").write_text(_make_page("Schema", _LONG_PARAGRAPH, _LONG_PARAGRAPH))
    return content


@pytest.fixture
def hello_body() -> str:
    """The only indexable paragraph of the blog post in ``site_dir``."""
    return _HELLO_BODY


@pytest.fixture
def long_paragraph() -> str:
    """The indexable paragraph repeated across the documentation pages of ``site_dir``."""
    return _LONG_PARAGRAPH
