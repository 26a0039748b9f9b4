"""Command-line interface for tagmark."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape as escape_markup
from rich.table import Table
from rich.text import Text

from tagmark import __version__
from tagmark.config import get_settings
from tagmark.core.formatter import MessageFormatter, MessageFormatError
from tagmark.formatting.links import tag_links
from tagmark.formatting.parser import escape_tags
from tagmark.renderers import SUPPORTED_DIALECTS

app = typer.Typer(
    name="tagmark",
    help="Render inline tag markup as chat platform HTML.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"tagmark v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error:[/red] {escape_markup(message)}", highlight=False)


def read_input(text: Optional[str], file: Optional[Path]) -> str:
    """Get the input text from the argument, a file or standard input."""
    if text is not None:
        return text
    if file is not None:
        return file.read_text(encoding="utf-8")
    return sys.stdin.read()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Parse inline tag markup and render it for a chat platform.

    Examples:

        tagmark render "<bold>Hello</bold> <link:https://example.com>there</link>"

        tagmark render --plain --auto-link "see https://example.com"

        tagmark parse --file message.txt

        echo "a < b" | tagmark escape
    """
    try:
        setup_logging(verbose)
    except ValidationError as e:
        print_error(f"invalid configuration: {e}")
        raise typer.Exit(2)


@app.command()
def render(
    text: Optional[str] = typer.Argument(
        None,
        help="Text to process (default: read --file or standard input)",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Read the text from a file",
        exists=True,
        dir_okay=False,
    ),
    to: str = typer.Option(
        "html",
        "--to",
        "-t",
        help=f"Output dialect: {', '.join(SUPPORTED_DIALECTS)}",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        "-p",
        help="Treat the input as plain text instead of tag markup",
    ),
    auto_link: Optional[bool] = typer.Option(
        None,
        "--auto-link/--no-auto-link",
        help="Tag links in plain text input (default: TAGMARK_AUTO_LINK)",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-l",
        min=0,
        help="Maximum output length in characters, 0 for none "
        "(default: TAGMARK_MESSAGE_CHAR_LIMIT)",
    ),
) -> None:
    """Render tag markup in an output dialect."""
    try:
        formatter = MessageFormatter(dialect=to, auto_link=auto_link, char_limit=limit)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(2)

    try:
        rendered = formatter.format(read_input(text, file), plain=plain)
    except MessageFormatError as e:
        cause = f" ({e.__cause__})" if e.__cause__ else ""
        print_error(f"{e}{cause}")
        raise typer.Exit(1)

    typer.echo(rendered)


@app.command()
def parse(
    text: Optional[str] = typer.Argument(
        None,
        help="Text to process (default: read --file or standard input)",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Read the text from a file",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Show the styled runs parsed from tag markup."""
    formatter = MessageFormatter(dialect="plain", char_limit=0)
    try:
        components = formatter.parse(read_input(text, file))
    except MessageFormatError as e:
        print_error(f"{e} ({e.__cause__})")
        raise typer.Exit(1)

    table = Table(title=f"{len(components)} run(s)")
    table.add_column("#", justify="right")
    table.add_column("Text")
    table.add_column("Style")
    for index, component in enumerate(components, start=1):
        style = ", ".join(
            f"link({decoration.target})" if decoration.is_link else decoration.name
            for decoration in component.style
        )
        table.add_row(str(index), Text(repr(component.text)), Text(style or "-"))
    console.print(table)


@app.command()
def escape(
    text: Optional[str] = typer.Argument(
        None,
        help="Text to process (default: read --file or standard input)",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Read the text from a file",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Escape text so that it is never read as tag markup."""
    typer.echo(escape_tags(read_input(text, file)))


@app.command()
def links(
    text: Optional[str] = typer.Argument(
        None,
        help="Text to process (default: read --file or standard input)",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Read the text from a file",
        exists=True,
        dir_okay=False,
    ),
    escape_text: bool = typer.Option(
        False,
        "--escape",
        "-e",
        help="Also escape tag characters in the text",
    ),
) -> None:
    """Wrap every link in plain text with a link tag."""
    typer.echo(tag_links(read_input(text, file), escape=escape_text))


if __name__ == "__main__":
    app()
