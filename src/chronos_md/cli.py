# src/chronos_md/cli.py
"""
chronos-md Command Line Interface (CLI).

This module implements the terminal interface using `typer` and `rich`. It is a
thin presentation layer over :func:`chronos_md.parse`; it never re-derives the
document's semantics.

Commands
--------
- **parse**: Render the parsed items and diagnostics as tables, or dump JSON.
- **check**: Print only diagnostics; exit code 1 when errors are present.
- **highlight**: Show each source line with the kind the parser assigned it.

Usage
-----
    $ chronos-md parse samples/history.md --locale en-GB
    $ chronos-md parse samples/history.md --json > history.json
    $ chronos-md check samples/history.md
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from chronos_md.core.contracts.document import ParseError, ParseOptions, ParseResult
from chronos_md.core.contracts.items import Marker, TimelineItem
from chronos_md.core.grammar import LineKind
from chronos_md.core.settings import load_settings
from chronos_md.dates.labels import smart_date_range
from chronos_md.parser.assembler import parse
from chronos_md.parser.classifier import classify_document

# Ensure env vars (like CHRONOS_LOCALE) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help="chronos-md: parse Chronos timeline markdown into structured data.",
    rich_markup_mode="markdown",
)
console = Console()

_KIND_STYLES: dict[LineKind, str] = {
    LineKind.BLANK: "dim",
    LineKind.COMMENT: "dim italic",
    LineKind.FLAG: "yellow",
    LineKind.EVENT: "green",
    LineKind.PERIOD: "magenta",
    LineKind.POINT: "blue",
    LineKind.MARKER: "dark_orange",
    LineKind.MALFORMED: "bold red",
}

FileArg = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to a Chronos markdown document.",
    ),
]
LocaleOpt = Annotated[
    str | None,
    typer.Option(
        "--locale",
        "-l",
        help="Locale for natural-language dates (defaults to CHRONOS_LOCALE).",
    ),
]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _options(locale: str | None) -> ParseOptions:
    """Helper: Build parse options, falling back to configured defaults."""
    chosen = locale or load_settings().default_locale
    try:
        return ParseOptions(locale=chosen)
    except ValidationError as e:
        console.print(f"[bold red]❌ Invalid locale:[/bold red] {escape(chosen)}")
        raise typer.Exit(code=2) from e


def _parse_file(file: Path, locale: str | None) -> tuple[ParseResult, str]:
    options = _options(locale)
    text = file.read_text(encoding="utf-8")
    return parse(text, options), options.locale


def _item_title(item: TimelineItem) -> str:
    if isinstance(item, Marker):
        return item.label or ""
    return item.title


def _render_items(result: ParseResult, locale: str) -> None:
    """Helper: Render items as a Rich table."""
    table = Table(title="Items", show_lines=False)
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("When")
    table.add_column("Title")
    table.add_column("Group", style="magenta")
    table.add_column("Color", style="dark_orange")

    for item in result.items:
        group = getattr(item, "group", None)
        table.add_row(
            str(item.line),
            item.kind,
            smart_date_range(item.when, locale) if item.when else "-",
            escape(_item_title(item)),
            escape(group or ""),
            item.color or "",
        )
    console.print(table)


def _render_errors(errors: tuple[ParseError, ...]) -> None:
    """Helper: Render diagnostics, capped at the configured maximum."""
    if not errors:
        console.print("[green]No diagnostics.[/green]")
        return

    limit = load_settings().max_errors_shown
    table = Table(title="Diagnostics")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Severity")
    table.add_column("Message")
    for e in errors[:limit]:
        style = "red" if e.severity == "error" else "yellow"
        table.add_row(str(e.line), f"[{style}]{e.severity}[/{style}]", escape(e.message))
    console.print(table)
    if len(errors) > limit:
        console.print(f"[dim]… {len(errors) - limit} more not shown[/dim]")


def _render_flags(result: ParseResult, locale: str) -> None:
    flags = result.flags
    view = smart_date_range(flags.default_view, locale) if flags.default_view else "-"
    console.print(
        Panel(
            f"order by: [cyan]{flags.order_by or '-'}[/cyan]   "
            f"default view: [cyan]{view}[/cyan]   "
            f"today marker: [cyan]{'off' if flags.no_today else 'on'}[/cyan]   "
            f"height: [cyan]{flags.height or '-'}[/cyan]",
            title="Flags",
            border_style="yellow",
        )
    )


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command("parse")  # type: ignore[misc]
def parse_command(
    file: FileArg,
    locale: LocaleOpt = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the parse result as JSON instead of tables."),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 if any error diagnostics exist."),
    ] = False,
) -> None:
    """
    Parse a document and show its items, groups, flags and diagnostics.
    """
    result, resolved_locale = _parse_file(file, locale)

    if as_json:
        typer.echo(result.to_json())
    else:
        console.print(
            Panel.fit(
                f"[bold cyan]chronos-md[/bold cyan]\nParsed: [u]{file.name}[/u]",
                border_style="cyan",
            )
        )
        _render_items(result, resolved_locale)
        if result.groups:
            names = escape(", ".join(g.name for g in result.groups))
            console.print(f"[bold]Groups:[/bold] [magenta]{names}[/magenta]")
        _render_flags(result, resolved_locale)
        _render_errors(result.errors)

    if strict and not result.ok:
        raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def check(file: FileArg, locale: LocaleOpt = None) -> None:
    """
    Report diagnostics only; exit with code 1 when errors are present.
    """
    result, _ = _parse_file(file, locale)
    _render_errors(result.errors)
    if not result.ok:
        console.print(f"[bold red]❌ {len(result.failures)} error(s)[/bold red]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]✅ {len(result.items)} item(s) parsed[/bold green]")


@app.command()  # type: ignore[misc]
def highlight(file: FileArg) -> None:
    """
    Print each line with the kind the parser assigns it.
    """
    text = file.read_text(encoding="utf-8")
    for line in classify_document(text):
        style = _KIND_STYLES[line.kind]
        label = f"[{style}]{line.kind.value:<9}[/{style}]"
        console.print(
            f"[dim]{line.number:4d}[/dim] {label} {escape(line.text)}",
            highlight=False,
        )


if __name__ == "__main__":
    app()
