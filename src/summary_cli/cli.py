from __future__ import annotations
import json
import logging
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box
from .config import SummaryConfig, write_default_config
from .fetcher import FetchError, fetch_text
from .lemmatizer import LemmatizerLoadError
from .segmenter import segment as segment_text
from .summarizer import Summarizer

app = typer.Typer(help="Extractive text summary and keyword CLI")
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger("summary_cli")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def build_summarizer(cfg: SummaryConfig) -> Summarizer:
    return Summarizer.from_config(cfg)


def _read_input(file: Optional[Path], url: Optional[str], cfg: SummaryConfig) -> str:
    if url:
        try:
            text = fetch_text(url, cfg)
        except FetchError as ex:
            err_console.print(f"[red]Fetch failed:[/red] {ex}")
            raise typer.Exit(code=1)
    elif file is not None and str(file) != "-":
        text = file.read_text(encoding="utf-8")
    elif not sys.stdin.isatty():
        text = sys.stdin.read()
    else:
        err_console.print("Provide FILE, '-' for stdin, or --url")
        raise typer.Exit(code=2)
    if len(text) > cfg.max_text_chars:
        logger.warning("input clamped to %d characters", cfg.max_text_chars)
        text = text[:cfg.max_text_chars]
    return text


@app.callback()
def main_options(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(None, "--config", exists=True, help="JSON config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    cfg = SummaryConfig.load(config_path)
    setup_logging("DEBUG" if verbose else cfg.log_level)
    ctx.obj = cfg


@app.command()
def init(
    config_path: Path = typer.Option("summary.json", help="Where to create config"),
):
    """Create a default config file."""
    try:
        write_default_config(config_path)
    except FileExistsError as ex:
        err_console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Created[/green] {config_path}")


@app.command()
def segment(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(None, exists=True, dir_okay=False, allow_dash=True, help="Text file ('-' for stdin)"),
    url: Optional[str] = typer.Option(None, help="Fetch text from a web page"),
):
    """Show detected sentence boundaries."""
    text = _read_input(file, url, ctx.obj)
    table = Table(title="Sentences", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Sentence")
    for i, s in enumerate(segment_text(text)):
        table.add_row(str(i), s)
    console.print(table)


@app.command()
def summarize(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(None, exists=True, dir_okay=False, allow_dash=True, help="Text file ('-' for stdin)"),
    url: Optional[str] = typer.Option(None, help="Fetch text from a web page"),
    sentences: Optional[int] = typer.Option(None, min=0, help="Number of sentences"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Create an extractive summary and keyword list."""
    cfg: SummaryConfig = ctx.obj
    text = _read_input(file, url, cfg)
    try:
        summarizer = build_summarizer(cfg)
    except LemmatizerLoadError as ex:
        err_console.print(f"[red]{ex}[/red]")
        err_console.print("Install it with: python -m nltk.downloader wordnet (or set WORDNET_PATH)")
        raise typer.Exit(code=1)

    n = cfg.default_sentences if sentences is None else sentences
    phrases, keywords = summarizer.summarize(text, n)

    if as_json:
        typer.echo(json.dumps({"phrases": phrases, "keywords": keywords}, indent=2, ensure_ascii=False))
        return
    console.print(Panel(" ".join(phrases) or "[yellow]No sentences[/yellow]", title="Summary"))
    console.print(f"[bold]Keywords:[/bold] {', '.join(keywords)}")


@app.command()
def serve(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None),
    port: Optional[int] = typer.Option(None),
):
    """Run the HTTP summary service."""
    import uvicorn
    from .server.main import create_app

    cfg: SummaryConfig = ctx.obj
    try:
        summarizer = build_summarizer(cfg)
    except LemmatizerLoadError as ex:
        err_console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=1)
    uvicorn.run(create_app(summarizer, cfg), host=host or cfg.host, port=port or cfg.port)


def main():
    app()

if __name__ == "__main__":
    main()
