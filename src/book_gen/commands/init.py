"""Init command implementation."""

from pathlib import Path

import questionary
from questionary import Style
from rich.console import Console
from rich.panel import Panel

from book_gen.core.builder import BookBuilder
from book_gen.models.book import LoadedBook
from book_gen.models.config import Config, HtmlConfig, OutputSection

PROMPT_STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan bold"),
])


def ask_gitignore() -> bool:
    """Ask whether a .gitignore should be created."""
    answer = questionary.confirm(
        "Do you want a .gitignore to be created?",
        default=True,
        style=PROMPT_STYLE,
    ).ask()
    return bool(answer)


def ask_title() -> str | None:
    """Ask for the book title; an empty answer means no title."""
    answer = questionary.text(
        "What title would you like to give the book?",
        style=PROMPT_STYLE,
    ).ask()
    return (answer or "").strip() or None


def build_config(
    title: str | None,
    authors: list[str] | None = None,
    theme_dir: Path | None = None,
) -> Config:
    """Assemble the Config written to book.toml for a new book."""
    config = Config()
    config.book.title = title
    if authors:
        config.book.authors = list(authors)
    if theme_dir is not None:
        config.output = OutputSection(html=HtmlConfig(theme=theme_dir))
    return config


def execute_init(
    root: Path,
    title: str | None,
    authors: list[str] | None,
    theme: bool,
    theme_dir: Path | None,
    gitignore: bool | None,
    force: bool,
    console: Console,
) -> LoadedBook:
    """Execute the init command.

    Without ``force`` any option left as None is asked interactively.
    """
    if not force:
        if gitignore is None:
            gitignore = ask_gitignore()
        if title is None:
            title = ask_title()

    config = build_config(title, authors, theme_dir)
    builder = (
        BookBuilder(root)
        .with_config(config)
        .with_theme(theme)
        .with_gitignore(bool(gitignore))
    )
    loaded = builder.build()

    lines = [
        f"[green]Created book in {loaded.root}[/]",
        "",
        f"[dim]Title:[/] {config.book.title or 'Untitled'}",
        f"[dim]Source:[/] {loaded.source_dir}",
        f"[dim]Build dir:[/] {loaded.build_dir}",
    ]
    if theme:
        lines.append(f"[dim]Theme:[/] {root / builder.theme_dir()}")
    if gitignore:
        lines.append("[dim].gitignore:[/] created")

    console.print()
    console.print(Panel("\n".join(lines), title="All done, no errors...", border_style="green"))
    return loaded
