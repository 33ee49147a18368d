"""Tests for the markdown passthrough renderer."""

from pathlib import Path

import pytest

from book_gen.core.builder import BookBuilder
from book_gen.core.loader import load_book
from book_gen.errors import (
    BookGenError,
    ChapterWriteError,
    DestinationCreateError,
    RenderError,
    StaleOutputRemovalError,
    UnknownRendererError,
)
from book_gen.models.book import Book, Chapter, PartTitle, Separator
from book_gen.models.config import Config
from book_gen.renderer import MarkdownRenderer, RenderContext, get_renderer
from book_gen.renderer import markdown as markdown_module


def _ctx(tmp_path: Path, book: Book, destination: Path | None = None) -> RenderContext:
    return RenderContext(
        root=tmp_path,
        destination=destination or tmp_path / "out",
        book=book,
        config=Config(),
    )


def test_name():
    assert MarkdownRenderer().name == "markdown"


def test_renders_every_chapter(tmp_path, sample_book):
    ctx = _ctx(tmp_path, sample_book)
    MarkdownRenderer().render(ctx)

    out = ctx.destination
    files = {p.relative_to(out).as_posix() for p in out.rglob("*") if p.is_file()}
    assert files == {"intro.md", "chapter_1.md", "chapter_1/section_1.md", "chapter_2.md"}
    assert (out / "chapter_1" / "section_1.md").read_text() == "## Section 1.1\n"


def test_writes_in_document_order(tmp_path, sample_book, monkeypatch):
    written = []
    real_write_file = markdown_module.write_file

    def recording_write_file(root, relative, content):
        written.append(relative.as_posix())
        return real_write_file(root, relative, content)

    monkeypatch.setattr(markdown_module, "write_file", recording_write_file)
    MarkdownRenderer().render(_ctx(tmp_path, sample_book))

    assert written == ["intro.md", "chapter_1.md", "chapter_1/section_1.md", "chapter_2.md"]


def test_separators_and_part_titles_produce_no_files(tmp_path):
    book = Book(sections=[PartTitle("Part"), Separator(), PartTitle("Another")])
    ctx = _ctx(tmp_path, book)

    MarkdownRenderer().render(ctx)

    assert ctx.destination.is_dir()
    assert list(ctx.destination.iterdir()) == []


def test_empty_book_creates_destination(tmp_path):
    destination = tmp_path / "deep" / "out"
    MarkdownRenderer().render(_ctx(tmp_path, Book(), destination))
    assert destination.is_dir()
    assert list(destination.iterdir()) == []


def test_rendering_twice_removes_stale_output(tmp_path, sample_book):
    ctx = _ctx(tmp_path, sample_book)
    MarkdownRenderer().render(ctx)
    (ctx.destination / "stale.md").write_text("old")
    (ctx.destination / "old_dir").mkdir()
    (ctx.destination / "old_dir" / "x.md").write_text("old")

    smaller = Book(sections=[Chapter(name="Only", content="# Only\n", path=Path("only.md"))])
    MarkdownRenderer().render(_ctx(tmp_path, smaller))

    files = {p.relative_to(ctx.destination).as_posix() for p in ctx.destination.rglob("*")}
    assert files == {"only.md"}


def test_destination_that_is_a_file_fails_removal(tmp_path, sample_book):
    destination = tmp_path / "out"
    destination.write_text("not a directory")

    with pytest.raises(StaleOutputRemovalError) as exc_info:
        MarkdownRenderer().render(_ctx(tmp_path, sample_book, destination))

    assert exc_info.value.path == destination
    assert isinstance(exc_info.value, RenderError)
    assert isinstance(exc_info.value, BookGenError)


def test_unwritable_destination_fails_chapter_write(tmp_path, sample_book):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where a directory should be")
    destination = blocker / "out"

    with pytest.raises(ChapterWriteError) as exc_info:
        MarkdownRenderer().render(_ctx(tmp_path, sample_book, destination))

    assert exc_info.value.path == destination / "intro.md"
    assert isinstance(exc_info.value.__cause__, OSError)


def test_partial_output_is_left_on_failure(tmp_path, sample_book):
    destination = tmp_path / "out"
    destination.mkdir()
    book = Book(
        sections=[
            Chapter(name="Ok", content="ok", path=Path("ok.md")),
            Chapter(name="Bad", content="bad", path=Path("ok.md/bad.md")),
        ]
    )

    with pytest.raises(ChapterWriteError):
        MarkdownRenderer().render(_ctx(tmp_path, book, destination))

    assert (destination / "ok.md").read_text() == "ok"


def test_render_scaffolded_book(book_root):
    loaded = BookBuilder(book_root).build()
    ctx = RenderContext.from_loaded(loaded, loaded.build_dir / "markdown")

    get_renderer("markdown").render(ctx)

    assert (ctx.destination / "chapter_1.md").read_text() == "# Chapter 1\n"
    assert ctx.config is loaded.config


def test_get_renderer_unknown_name():
    with pytest.raises(UnknownRendererError, match="markdown"):
        get_renderer("pdf")


def test_render_context_is_frozen(tmp_path):
    ctx = _ctx(tmp_path, Book())
    with pytest.raises(AttributeError):
        ctx.destination = tmp_path / "elsewhere"


@pytest.mark.parametrize("relative", ["../escaped.md", "sub/../../escaped.md"])
def test_chapter_escaping_destination_is_refused(tmp_path, relative):
    destination = tmp_path / "out"
    book = Book(sections=[Chapter(name="Up", content="nope", path=Path(relative))])

    with pytest.raises(ChapterWriteError) as exc_info:
        MarkdownRenderer().render(_ctx(tmp_path, book, destination))

    assert exc_info.value.path == destination / relative
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert not (tmp_path / "escaped.md").exists()


def test_absolute_chapter_path_is_refused(tmp_path):
    outside = tmp_path / "elsewhere" / "abs.md"
    book = Book(sections=[Chapter(name="Abs", content="nope", path=outside)])

    with pytest.raises(ChapterWriteError):
        MarkdownRenderer().render(_ctx(tmp_path, book))

    assert not outside.exists()


def test_crlf_content_passes_through_unchanged(book_root):
    src = book_root / "src"
    src.mkdir()
    (src / "SUMMARY.md").write_text("# Summary\n\n- [Chapter 1](./chapter_1.md)\n")
    (src / "chapter_1.md").write_bytes(b"# Chapter 1\r\nline\r\n")

    loaded = load_book(book_root)
    ctx = RenderContext.from_loaded(loaded, book_root / "out")
    MarkdownRenderer().render(ctx)

    assert (ctx.destination / "chapter_1.md").read_bytes() == b"# Chapter 1\r\nline\r\n"


def test_destination_create_error(tmp_path, monkeypatch):
    def failing_create_dir_all(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(markdown_module, "create_dir_all", failing_create_dir_all)
    destination = tmp_path / "out"

    with pytest.raises(DestinationCreateError) as exc_info:
        MarkdownRenderer().render(_ctx(tmp_path, Book(), destination))

    assert exc_info.value.path == destination
    assert isinstance(exc_info.value.__cause__, PermissionError)
