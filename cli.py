"""
docsearch CLI - Command Line Interface
"""

import json
from pathlib import Path

import anyio
import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from dotenv import load_dotenv

from docsearch.indexing import IndexLoader, IndexUnavailable, LocalBlobProvider
from docsearch.retrieval import SearchEngine
from docsearch.server.render import render_json

# Load environment variables
load_dotenv()

console = Console()

DEFAULT_INDEX = Path("book") / "search-index.json"


def _load_index(index_file: str):
    """Load an index file through the same loader the server uses."""
    path = Path(index_file)
    loader = IndexLoader(key_value=None, blob=LocalBlobProvider(path.parent), blob_path=path.name)
    return anyio.run(loader.load)


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """docsearch CLI - Server-side search for htmx documentation sites"""
    pass


@cli.command()
@click.argument("query")
@click.option("--index", "-i", "index_file", default=str(DEFAULT_INDEX), help="Path to search-index.json")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON API payload")
@click.option("--limit", "-n", default=20, help="Maximum results to show")
def search(query: str, index_file: str, as_json: bool, limit: int):
    """Search a local index file."""
    try:
        index = _load_index(index_file)
    except IndexUnavailable:
        console.print(f"[red]Search index not available: {index_file}[/red]")
        raise SystemExit(1)

    results = SearchEngine().search(index, query)[:limit]

    if as_json:
        click.echo(json.dumps(render_json(results).model_dump(exclude_none=True), indent=2))
        return

    if not results:
        console.print(f'[yellow]No results found for "{query}"[/yellow]')
        return

    table = Table(title=f"Results for: {query}", show_header=True, header_style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Page", style="cyan", no_wrap=True)
    table.add_column("Headings")
    table.add_column("Excerpt", ratio=1)

    for r in results:
        table.add_row(
            str(r.score),
            f"{r.document.title}\n[dim]{r.document.path}[/dim]",
            "\n".join(r.top_headings()),
            r.excerpt or "",
        )

    console.print(table)


@cli.command()
@click.option("--index", "-i", "index_file", default=str(DEFAULT_INDEX), help="Path to search-index.json")
def stats(index_file: str):
    """Show search index statistics."""
    try:
        index = _load_index(index_file)
    except IndexUnavailable:
        console.print(f"[red]Search index not available: {index_file}[/red]")
        raise SystemExit(1)

    console.print(Panel.fit(
        "[bold blue]Index Statistics[/bold blue]",
        title="📊 Stats"
    ))

    table = Table()
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Version", index.version)
    table.add_row("Generated", index.generated_at)
    table.add_row("Documents", str(len(index)))
    table.add_row("Headings", str(sum(len(d.headings) for d in index.documents)))
    table.add_row("Heading Split Level", str(index.config.heading_split_level))
    table.add_row("Index Location", str(index_file))

    console.print(table)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address")
@click.option("--port", "-p", default=8000, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool):
    """Run the search API server."""
    import uvicorn

    uvicorn.run("docsearch.server.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()
