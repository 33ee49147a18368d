"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from book_gen import __version__
from book_gen.errors import BookGenError, InternalInvariantViolated
from book_gen.logging_setup import configure_logging
from book_gen.renderer import DEFAULT_RENDERER, RENDERERS

app = typer.Typer(
    name="book-gen",
    help="Create documentation books from Markdown and render them to disk.",
    add_completion=False,
)

console = Console()
log = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"book-gen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging for each stage",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """Create documentation books from Markdown and render them to disk."""
    configure_logging("DEBUG" if verbose else None)


@app.command()
def init(
    directory: Annotated[
        Path,
        typer.Argument(
            help="Directory to create the book in (default: current directory)",
        ),
    ] = Path("."),
    title: Annotated[
        Optional[str],
        typer.Option(
            "--title",
            help="Book title written to book.toml",
        ),
    ] = None,
    authors: Annotated[
        Optional[list[str]],
        typer.Option(
            "--author",
            "-a",
            help="Book author (can be used multiple times)",
        ),
    ] = None,
    theme: Annotated[
        bool,
        typer.Option(
            "--theme",
            help="Copy the default theme into the book so it can be customized",
        ),
    ] = False,
    theme_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--theme-dir",
            help="Theme directory relative to the book root (default: {src}/theme)",
        ),
    ] = None,
    gitignore: Annotated[
        Optional[bool],
        typer.Option(
            "--gitignore/--no-gitignore",
            help="Create a .gitignore that ignores the build directory",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Skip the questions and use the given options",
        ),
    ] = False,
) -> None:
    """Create a new book: directories, stub chapter, and book.toml.

    An existing SUMMARY.md and its chapters are never overwritten.
    """
    from book_gen.commands.init import execute_init

    try:
        execute_init(
            root=directory.resolve(),
            title=title,
            authors=authors,
            theme=theme,
            theme_dir=theme_dir,
            gitignore=gitignore,
            force=force,
            console=console,
        )
    except InternalInvariantViolated:
        log.critical("book-gen crashed while creating the book", exc_info=True)
        raise
    except BookGenError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def build(
    directory: Annotated[
        Path,
        typer.Argument(
            help="Root directory of the book (default: current directory)",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = Path("."),
    renderer: Annotated[
        str,
        typer.Option(
            "--renderer",
            "-r",
            help="Output backend to use (see 'book-gen renderers')",
        ),
    ] = DEFAULT_RENDERER,
    dest_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--dest-dir",
            "-d",
            help="Output directory (default: {directory}/{build-dir} from book.toml)",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress progress output",
        ),
    ] = False,
) -> None:
    """Load the book and render it with one backend.

    The destination directory is emptied first so only current output remains.
    """
    from book_gen.commands.build import execute_build

    try:
        execute_build(
            root=directory,
            renderer_name=renderer,
            dest_dir=dest_dir.resolve() if dest_dir is not None else None,
            quiet=quiet,
            console=console,
        )
    except BookGenError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def renderers() -> None:
    """List the available output backends."""
    table = Table(title="Renderers", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="white")
    table.add_column("Class", style="dim")

    for name, renderer_cls in sorted(RENDERERS.items()):
        label = f"{name} (default)" if name == DEFAULT_RENDERER else name
        table.add_row(label, renderer_cls.__name__)

    console.print(table)


if __name__ == "__main__":
    app()
