"""Build command implementation."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from book_gen.core.loader import load_book
from book_gen.models.book import Chapter, PartTitle, Separator
from book_gen.renderer import RenderContext, get_renderer


def resolve_destination(root: Path, build_dir: Path, dest_dir: Path | None) -> Path:
    """Use --dest-dir when given (relative to cwd), else the book's build dir."""
    if dest_dir is not None:
        return dest_dir
    return root / build_dir


def execute_build(
    root: Path,
    renderer_name: str,
    dest_dir: Path | None,
    quiet: bool,
    console: Console,
) -> Path:
    """Execute the build command.

    Returns:
        The destination directory that was rendered into
    """
    renderer = get_renderer(renderer_name)
    loaded = load_book(root)
    destination = resolve_destination(root, loaded.config.build.build_dir, dest_dir)
    ctx = RenderContext.from_loaded(loaded, destination)

    if not quiet:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task(f"Rendering {renderer.name}...", total=None)
            renderer.render(ctx)
    else:
        renderer.render(ctx)

    if not quiet:
        items = list(loaded.iter())
        chapters = sum(1 for item in items if isinstance(item, Chapter))
        parts = sum(1 for item in items if isinstance(item, PartTitle))
        separators = sum(1 for item in items if isinstance(item, Separator))

        summary_lines = [
            f"[green]Rendered {chapters} chapter(s) with the {renderer.name} renderer[/]",
            "",
            f"[dim]Book:[/] {loaded.config.book.title or loaded.root.name}",
            f"[dim]Output directory:[/] {destination}",
        ]
        if parts or separators:
            summary_lines.append(f"[dim]Parts:[/] {parts}  [dim]Separators:[/] {separators}")

        console.print()
        console.print(
            Panel(
                "\n".join(summary_lines),
                title="Complete",
                border_style="green",
            )
        )

    return destination
