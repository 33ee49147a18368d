"""Tests for the command line interface."""

from typer.testing import CliRunner

from book_gen import __version__, theme
from book_gen.cli import app

runner = CliRunner()


def test_init_non_interactive(book_root):
    result = runner.invoke(
        app,
        ["init", str(book_root), "--title", "My Book", "--gitignore", "--theme", "--force"],
    )

    assert result.exit_code == 0, result.output
    assert 'title = "My Book"' in (book_root / "book.toml").read_text()
    assert (book_root / ".gitignore").read_text() == "book\n"
    assert (book_root / "src" / "theme" / "index.hbs").read_bytes() == theme.INDEX


def test_init_uses_prompt_answers(book_root, monkeypatch):
    from book_gen.commands import init as init_module

    monkeypatch.setattr(init_module, "ask_gitignore", lambda: True)
    monkeypatch.setattr(init_module, "ask_title", lambda: "Asked Title")

    result = runner.invoke(app, ["init", str(book_root)])

    assert result.exit_code == 0, result.output
    assert (book_root / ".gitignore").exists()
    assert 'title = "Asked Title"' in (book_root / "book.toml").read_text()


def test_init_error_exits_1(tmp_path):
    root = tmp_path / "file"
    root.write_text("occupied")

    result = runner.invoke(app, ["init", str(root), "--force"])

    assert result.exit_code == 1
    assert "Unable to create scaffolding directory" in result.output


def test_build_renders_markdown(book_root):
    runner.invoke(app, ["init", str(book_root), "--force", "--no-gitignore"])

    result = runner.invoke(app, ["build", str(book_root), "--quiet"])

    assert result.exit_code == 0, result.output
    assert (book_root / "book" / "chapter_1.md").read_text() == "# Chapter 1\n"


def test_build_dest_dir(book_root, tmp_path):
    runner.invoke(app, ["init", str(book_root), "--force"])
    dest = tmp_path / "rendered"

    result = runner.invoke(app, ["build", str(book_root), "--dest-dir", str(dest)])

    assert result.exit_code == 0, result.output
    assert (dest / "chapter_1.md").exists()


def test_build_unknown_renderer(book_root):
    runner.invoke(app, ["init", str(book_root), "--force"])

    result = runner.invoke(app, ["build", str(book_root), "--renderer", "epub"])

    assert result.exit_code == 1
    assert "Unknown renderer" in result.output


def test_renderers_lists_markdown():
    result = runner.invoke(app, ["renderers"])
    assert result.exit_code == 0
    assert "markdown" in result.output


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
