"""Load a book directory (book.toml + SUMMARY.md + chapters) into memory."""

import logging
from pathlib import Path

from book_gen.core.summary import SUMMARY_FILE, parse_summary
from book_gen.errors import BookLoadError
from book_gen.models.book import Book, Chapter, LoadedBook, iter_items
from book_gen.models.config import CONFIG_FILE, Config

log = logging.getLogger(__name__)


def _read_chapter(chapter: Chapter, src_dir: Path, create_missing: bool) -> None:
    chapter_file = src_dir / chapter.path

    if not chapter_file.exists():
        if not create_missing:
            raise BookLoadError(
                f"Chapter file not found: {chapter_file} (referenced as '{chapter.name}')"
            )
        log.debug("Creating missing chapter file %s", chapter_file)
        try:
            chapter_file.parent.mkdir(parents=True, exist_ok=True)
            chapter_file.write_text(f"# {chapter.name}\n", encoding="utf-8", newline="\n")
        except OSError as e:
            raise BookLoadError(f"Unable to create missing chapter {chapter_file}: {e}") from e

    try:
        chapter.content = chapter_file.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BookLoadError(f"Unable to read chapter {chapter_file}: {e}") from e


def load_book(root: Path) -> LoadedBook:
    """Load the book rooted at `root`.

    Args:
        root: Book root directory containing book.toml

    Returns:
        LoadedBook with every chapter's content read from disk

    Raises:
        BookLoadError: If the config, summary or a chapter can't be read
    """
    config = Config.load(root / CONFIG_FILE)
    src_dir = root / config.book.src
    summary_path = src_dir / SUMMARY_FILE

    if not summary_path.is_file():
        raise BookLoadError(f"No {SUMMARY_FILE} found in {src_dir}")

    try:
        summary_text = summary_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BookLoadError(f"Unable to read {summary_path}: {e}") from e

    summary = parse_summary(summary_text)

    for item in iter_items(summary.items):
        if isinstance(item, Chapter):
            _read_chapter(item, src_dir, config.build.create_missing)

    log.debug("Loaded book from %s (%d top-level items)", root, len(summary.items))
    return LoadedBook(root=root, config=config, book=Book(sections=summary.items))
