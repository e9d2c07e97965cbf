"""Command line interface for siteindex."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from siteindex.config import ACTIVE_VERSIONS, AppConfig, MissingCredentialsError
from siteindex.index.emitter import FileExporter, HostedIndexEmitter
from siteindex.index.hosted import open_search_client
from siteindex.index.indexer import IndexedContent, Indexer, IndexMode

LOGGER = logging.getLogger(__name__)

console = Console()
app = typer.Typer(help="siteindex - build the search index of the documentation site")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _print_stats(content: IndexedContent) -> None:
    stats = content.stats
    console.print(
        f"Pages: {stats.pages}, blog records: {stats.blog_records}, "
        f"documentation records: {stats.docs_records}, total: {stats.total}"
    )


def _fail(exc: Exception) -> NoReturn:
    LOGGER.error("Indexing failed: %s", exc)
    console.print(f"[red]Indexing failed:[/red] {exc}")
    raise typer.Exit(code=1)


async def _push(indexer: Indexer, config: AppConfig) -> IndexedContent:
    content = await indexer.index()
    async with open_search_client(config) as client:
        emitter = HostedIndexEmitter(
            client, blog_index=config.blog_index, docs_index=config.docs_index
        )
        await emitter.emit(content)
    return content


@app.command()
def push(
    content_dir: Path = typer.Option(AppConfig().content_dir, help="Site content directory"),
    versions: Optional[List[str]] = typer.Option(
        None, "--version", help="Documentation version to index (repeatable)"
    ),
    app_id: str = typer.Option(AppConfig().application_id, help="Search application id"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Replace the hosted blog and documentation indexes, one record per paragraph."""
    _setup_logging(verbose)
    config = AppConfig(
        content_dir=content_dir,
        active_versions=versions or ACTIVE_VERSIONS,
        application_id=app_id,
    )
    try:
        config.require_api_key()
    except MissingCredentialsError as exc:
        raise typer.BadParameter(str(exc)) from exc

    indexer = Indexer(
        config.resolve_content_dir(Path.cwd()),
        mode=IndexMode.PARAGRAPH,
        active_versions=config.active_versions,
    )
    console.print(f"Pushing records to application [bold]{config.application_id}[/bold]...")
    try:
        content = asyncio.run(_push(indexer, config))
    except Exception as exc:
        _fail(exc)
    _print_stats(content)


@app.command()
def export(
    content_dir: Path = typer.Option(AppConfig().content_dir, help="Site content directory"),
    output: Path = typer.Option(AppConfig().output_path, "--output", "-o", help="JSON output file"),
    base_url: str = typer.Option(AppConfig().base_url, help="Public URL of the site"),
    versions: Optional[List[str]] = typer.Option(
        None, "--version", help="Documentation version to index (repeatable, default: all)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Write every page, truncated, to a single JSON file."""
    _setup_logging(verbose)
    config = AppConfig(
        content_dir=content_dir,
        output_path=output,
        base_url=base_url,
        active_versions=versions or None,
    )
    indexer = Indexer(
        config.resolve_content_dir(Path.cwd()),
        mode=IndexMode.TRUNCATE,
        base_url=config.base_url,
        active_versions=config.active_versions,
    )
    exporter = FileExporter(config.resolve_output_path(Path.cwd()))

    try:
        content = asyncio.run(indexer.index())
        written = exporter.emit(content)
    except Exception as exc:
        _fail(exc)
    console.print(f"Wrote [bold]{written}[/bold]")
    _print_stats(content)


@app.command()
def preview(
    content_dir: Path = typer.Option(AppConfig().content_dir, help="Site content directory"),
    mode: IndexMode = typer.Option(IndexMode.PARAGRAPH, help="Record extraction mode"),
    versions: Optional[List[str]] = typer.Option(
        None, "--version", help="Documentation version to index (repeatable)"
    ),
    limit: int = typer.Option(20, help="Number of records to display"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show the records that would be indexed without publishing them.

    Paragraph mode previews `push`, truncate mode previews `export`.
    """
    _setup_logging(verbose)
    exporting = mode is IndexMode.TRUNCATE
    default_versions = None if exporting else ACTIVE_VERSIONS
    config = AppConfig(content_dir=content_dir, active_versions=versions or default_versions)
    indexer = Indexer(
        config.resolve_content_dir(Path.cwd()),
        mode=mode,
        base_url=config.base_url if exporting else None,
        active_versions=config.active_versions,
    )
    try:
        content = asyncio.run(indexer.index())
    except Exception as exc:
        _fail(exc)

    records = content.blog + content.docs
    if not records:
        console.print("[yellow]No records found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("URL", overflow="fold")
    table.add_column("Version")
    table.add_column("Title")
    table.add_column("Content", overflow="fold")

    for record in records[:limit]:
        version = "" if record.version is None else str(record.version)
        table.add_row(record.url, version, record.title, record.content.replace("\n", " ")[:120])

    console.print(table)
    _print_stats(content)
