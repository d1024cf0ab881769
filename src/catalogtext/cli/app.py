"""Root CLI application: render, detect, excerpt and policy commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from catalogtext.core.config import configure_logging, load_config
from catalogtext.richtext.detector import looks_like_html, looks_like_markdown
from catalogtext.richtext.policy import (
    ALLOWED_ATTRIBUTES,
    ALLOWED_PROTOCOLS,
    ANCHOR_REL,
    ANCHOR_TARGET,
    UNSAFE_SCHEMES,
)
from catalogtext.richtext.render import describe_html, render as render_markup
from catalogtext.utils.text import synthesize_description, truncate

console = Console()
app = typer.Typer(
    name="catalogtext",
    help="Render untrusted catalog descriptions into safe HTML.",
    no_args_is_help=True,
)


def _read_input(path: Optional[Path]) -> str:
    """Read a file, or stdin when no path is given."""
    if path is None:
        return sys.stdin.read()
    if not path.exists():
        console.print(f"[red]File not found:[/red] {path}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8", errors="replace")


@app.command()
def render(
    path: Optional[Path] = typer.Argument(None, help="File to render (defaults to stdin)"),
    raw: bool = typer.Option(False, "--raw", help="Print plain output without rich formatting"),
    synthesize: bool = typer.Option(False, "--synthesize", help="Condense the description into short paragraphs first"),
) -> None:
    """Render a description to sanitized HTML."""
    cfg = load_config()
    configure_logging(cfg)

    text = _read_input(path)
    if synthesize:
        html = describe_html(text, fallback=cfg.fallback_text)
    else:
        html = render_markup(text, fallback=cfg.fallback_text)
    if raw:
        typer.echo(html)
    else:
        console.print(html, markup=False, highlight=False)


@app.command()
def detect(
    path: Optional[Path] = typer.Argument(None, help="File to inspect (defaults to stdin)"),
) -> None:
    """Show how a description would be classified."""
    text = _read_input(path)
    md = looks_like_markdown(text)
    markup = looks_like_html(text)

    console.print(f"Markdown-like: {'[green]yes[/green]' if md else '[dim]no[/dim]'}")
    console.print(f"HTML-like:     {'[green]yes[/green]' if markup else '[dim]no[/dim]'}")
    route = "markdown -> sanitize" if md else "sanitize"
    console.print(f"Route:         [cyan]{route}[/cyan]")


@app.command()
def excerpt(
    path: Optional[Path] = typer.Argument(None, help="File to summarize (defaults to stdin)"),
    length: Optional[int] = typer.Option(None, "-l", "--length", help="Maximum excerpt length"),
) -> None:
    """Print a plain-text excerpt of a description."""
    cfg = load_config()
    summary = synthesize_description(_read_input(path))
    typer.echo(truncate(summary, max_length=length or cfg.excerpt_length))


@app.command()
def policy() -> None:
    """List the tags and attributes that survive sanitization."""
    table = Table(title="Allowed Markup")
    table.add_column("Tag", style="cyan")
    table.add_column("Attributes", style="white")

    for tag in sorted(ALLOWED_ATTRIBUTES):
        attrs = ", ".join(sorted(ALLOWED_ATTRIBUTES[tag])) or "[dim]none[/dim]"
        table.add_row(tag, attrs)

    console.print(table)
    console.print(f"\nURL protocols: [cyan]{', '.join(sorted(ALLOWED_PROTOCOLS))}[/cyan]")
    console.print(f"Blocked schemes: [red]{', '.join(UNSAFE_SCHEMES)}[/red]")
    console.print(f"Anchors: target=[cyan]{ANCHOR_TARGET}[/cyan] rel=[cyan]{ANCHOR_REL}[/cyan]")
