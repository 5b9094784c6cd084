"""CLI entry point for dsfrmark."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from dsfrmark.config import DsfrmarkConfig, load_config
from dsfrmark.config.loader import DEFAULT_CONFIG_TEMPLATE
from dsfrmark.render import DocumentRenderer, write_html
from dsfrmark.transpiler import Diagnostic

app = typer.Typer(
    name="dsfrmark",
    help="Markdown with DSFR components: turn `///` blocks into DSFR HTML.",
)

config_app = typer.Typer(help="Manage dsfrmark configuration.")
app.add_typer(config_app, name="config")

err_console = Console(stderr=True)

# Global state
_config: DsfrmarkConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _configure_logging(cfg: DsfrmarkConfig) -> None:
    if cfg.log_format == "json":
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_JsonFormatter())
    else:
        handler = RichHandler(console=err_console, show_path=False)
    logging.basicConfig(level=_LOG_LEVELS[cfg.log_level], handlers=[handler], force=True)


def _get_config() -> DsfrmarkConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to dsfrmark.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    _configure_logging(_config)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        rprint(f"[red]Error:[/red] File not found: {source}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _with_strategy(cfg: DsfrmarkConfig, strategy: str | None) -> DsfrmarkConfig:
    if strategy is None:
        return cfg
    if strategy not in ("nested", "passes"):
        rprint(f"[red]Error:[/red] Unknown strategy {strategy!r} (expected nested or passes)")
        raise typer.Exit(1)
    return cfg.model_copy(
        update={"transpiler": cfg.transpiler.model_copy(update={"strategy": strategy})}
    )


def _print_diagnostics(diagnostics: list[Diagnostic]) -> None:
    for d in diagnostics:
        err_console.print(f"[yellow]warn:[/yellow] {escape(str(d))}", highlight=False)


@app.command()
def render(
    source: str = typer.Argument(..., help="Markdown file to render ('-' for stdin)"),
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Write HTML here instead of stdout")
    ] = None,
    slides: Annotated[bool, typer.Option("--slides", help="Render as a slide deck")] = False,
    standalone: Annotated[
        bool, typer.Option("--standalone", help="Wrap in a full DSFR HTML page")
    ] = False,
    no_markdown: Annotated[
        bool, typer.Option("--no-markdown", help="Skip the Markdown renderer, output transpiled text")
    ] = False,
    strategy: Annotated[
        str | None, typer.Option("--strategy", help="Transpile strategy: nested or passes")
    ] = None,
) -> None:
    """Render a Markdown file with DSFR components to HTML."""
    cfg = _with_strategy(_get_config(), strategy)
    text = _read_source(source)

    doc = DocumentRenderer(cfg).render(
        text, slides=slides, markdown=False if no_markdown else None, standalone=standalone
    )
    _print_diagnostics(doc.diagnostics)

    if output:
        dest = write_html(output, doc.html)
        rprint(f"[green]Wrote[/green] {dest}", file=sys.stderr)
    else:
        typer.echo(doc.html)


@app.command()
def check(
    source: str = typer.Argument(..., help="Markdown file to check ('-' for stdin)"),
    slides: Annotated[bool, typer.Option("--slides", help="Check as a slide deck")] = False,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table or json")
    ] = "table",
    strategy: Annotated[
        str | None, typer.Option("--strategy", help="Transpile strategy: nested or passes")
    ] = None,
) -> None:
    """Report malformed blocks and options without writing anything."""
    cfg = _with_strategy(_get_config(), strategy)
    text = _read_source(source)
    doc = DocumentRenderer(cfg).render(text, slides=slides, markdown=False)

    if format == "json":
        typer.echo(json.dumps([d.model_dump() for d in doc.diagnostics], indent=2))
    elif not doc.diagnostics:
        rprint("[green]No problems found.[/green]")
    else:
        table = Table(title=f"Diagnostics ({len(doc.diagnostics)})")
        if slides:
            table.add_column("Slide", justify="right")
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Component", style="magenta")
        table.add_column("Problem", style="yellow")
        table.add_column("Text")
        for d in doc.diagnostics:
            row = [
                str(d.lineno) if d.lineno is not None else "-",
                d.component or "-",
                escape(d.reason),
                escape(d.line),
            ]
            if slides:
                row.insert(0, str(d.slide) if d.slide is not None else "-")
            table.add_row(*row)
        rprint(table)

    if doc.diagnostics and cfg.transpiler.diagnostics == "strict":
        raise typer.Exit(1)


@app.command()
def watch(
    source: str = typer.Argument(..., help="Markdown file to watch"),
    output: Annotated[str, typer.Option("--output", "-o", help="HTML file to keep up to date")] = "",
    slides: Annotated[bool, typer.Option("--slides", help="Render as a slide deck")] = False,
    standalone: Annotated[
        bool, typer.Option("--standalone/--fragment", help="Wrap in a full DSFR HTML page")
    ] = True,
    debounce: Annotated[float, typer.Option("--debounce", help="Seconds between rebuilds")] = 0.5,
) -> None:
    """Re-render SOURCE into OUTPUT on every change."""
    from dsfrmark.watcher import RenderWatcher

    if not output:
        typer.echo("Error: --output is required for watch mode")
        raise typer.Exit(1)
    if not Path(source).is_file():
        rprint(f"[red]Error:[/red] File not found: {source}")
        raise typer.Exit(1)

    watcher = RenderWatcher(
        Path(source),
        Path(output),
        DocumentRenderer(_get_config()),
        slides=slides,
        standalone=standalone,
        debounce_seconds=debounce,
        on_render=lambda doc: _print_diagnostics(doc.diagnostics),
    )
    watcher.build()
    rprint(f"[bold]Watching[/bold] {source} -> {output} (Ctrl+C to stop)")
    watcher.run_forever()


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default dsfrmark.yaml in current directory."""
    target = Path("dsfrmark.yaml")
    if target.exists() and not force:
        rprint("[yellow]dsfrmark.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
