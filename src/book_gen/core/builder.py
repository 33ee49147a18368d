"""Scaffold a new book project on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from book_gen import theme
from book_gen.core.fs import create_dir_all
from book_gen.core.loader import load_book
from book_gen.core.summary import SUMMARY_FILE
from book_gen.errors import (
    BookLoadError,
    ChapterOneWriteError,
    ConfigSerializeError,
    ConfigWriteError,
    GitignoreWriteError,
    InternalInvariantViolated,
    ScaffoldDirectoryError,
    SummaryWriteError,
    ThemeDirError,
    ThemeFileError,
)
from book_gen.models.book import LoadedBook
from book_gen.models.config import CONFIG_FILE, Config

log = logging.getLogger(__name__)

STUB_SUMMARY = "# Summary\n\n- [Chapter 1](./chapter_1.md)\n"
STUB_CHAPTER_FILE = "chapter_1.md"
STUB_CHAPTER = "# Chapter 1\n"


class BuilderOptions(BaseModel):
    """What the builder should create besides the bare scaffold."""

    model_config = ConfigDict(frozen=True)

    config: Config = Field(default_factory=Config)
    copy_theme: bool = False
    create_gitignore: bool = False


class BookBuilder:
    """Set up a new book and its directory structure.

    A builder is immutable once created. The ``with_*`` methods return a new
    builder, so options can be chained before calling ``build()``:

        book = (
            BookBuilder(root)
            .with_config(config)
            .with_theme(True)
            .with_gitignore(True)
            .build()
        )

    Only one build should run against a given root at a time.
    """

    def __init__(
        self,
        root: Path,
        config: Config | None = None,
        copy_theme: bool = False,
        create_gitignore: bool = False,
        logger: logging.Logger | None = None,
    ):
        """Initialize builder.

        Args:
            root: Directory the book is created in (created if missing)
            config: Book configuration, defaults to ``Config()``
            copy_theme: Copy the default theme into the book so it can be tweaked
            create_gitignore: Write a .gitignore that ignores the build directory
            logger: Logger for stage messages, defaults to this module's logger
        """
        self.root = Path(root)
        self.options = BuilderOptions(
            config=config if config is not None else Config(),
            copy_theme=copy_theme,
            create_gitignore=create_gitignore,
        )
        self.log = logger or log

    @property
    def config(self) -> Config:
        return self.options.config

    @property
    def copy_theme(self) -> bool:
        return self.options.copy_theme

    @property
    def create_gitignore(self) -> bool:
        return self.options.create_gitignore

    def _replace(self, **changes) -> BookBuilder:
        options = self.options.model_copy(update=changes)
        return BookBuilder(
            self.root,
            config=options.config,
            copy_theme=options.copy_theme,
            create_gitignore=options.create_gitignore,
            logger=self.log,
        )

    def with_config(self, config: Config) -> BookBuilder:
        return self._replace(config=config)

    def with_theme(self, copy: bool = True) -> BookBuilder:
        """Should the theme be copied into the generated book?"""
        return self._replace(copy_theme=copy)

    def with_gitignore(self, create: bool = True) -> BookBuilder:
        return self._replace(create_gitignore=create)

    def build(self) -> LoadedBook:
        """Generate the book. This will:

        - Create the directory structure.
        - Stub out a chapter and the SUMMARY.md (unless a summary exists).
        - Create a .gitignore (if enabled).
        - Create a theme directory and populate it (if enabled).
        - Write book.toml.
        - Load the book back so it can be built or tested.

        Returns:
            The freshly loaded book

        Raises:
            ScaffoldError: If any stage fails; earlier stages are not rolled back
            InternalInvariantViolated: If the result doesn't load. This is a bug.
        """
        self.log.info("Creating a new book with stub content in %s", self.root)

        self._create_directory_structure()
        self._create_stub_files()

        if self.create_gitignore:
            self._build_gitignore()

        if self.copy_theme:
            self._copy_across_theme()

        self._write_book_toml()

        try:
            return load_book(self.root)
        except BookLoadError as e:
            self.log.error("%s", e)
            raise InternalInvariantViolated(self.root, e) from e

    def _create_directory_structure(self) -> None:
        self.log.debug("Creating directory tree")
        for directory in (
            self.root,
            self.root / self.config.book.src,
            self.root / self.config.build.build_dir,
        ):
            try:
                create_dir_all(directory)
            except OSError as e:
                raise ScaffoldDirectoryError(directory, e) from e

    def _create_stub_files(self) -> None:
        self.log.debug("Creating example book contents")
        src_dir = self.root / self.config.book.src

        summary = src_dir / SUMMARY_FILE
        if summary.exists():
            self.log.debug("Existing summary found, no need to create stub files.")
            return

        self.log.debug("No summary found, creating stub summary and %s.", STUB_CHAPTER_FILE)
        try:
            summary.write_text(STUB_SUMMARY, encoding="utf-8", newline="\n")
        except OSError as e:
            raise SummaryWriteError(summary, e) from e

        chapter_1 = src_dir / STUB_CHAPTER_FILE
        try:
            chapter_1.write_text(STUB_CHAPTER, encoding="utf-8", newline="\n")
        except OSError as e:
            raise ChapterOneWriteError(chapter_1, e) from e

    def _build_gitignore(self) -> None:
        self.log.debug("Creating .gitignore")
        gitignore = self.root / ".gitignore"
        build_dir = self.config.build.build_dir.as_posix()
        try:
            gitignore.write_text(f"{build_dir}\n", encoding="utf-8", newline="\n")
        except OSError as e:
            raise GitignoreWriteError(gitignore, e) from e

    def theme_dir(self) -> Path:
        """Theme directory relative to the root: [output.html] theme, else <src>/theme."""
        html = self.config.html_config()
        if html is not None and html.theme is not None:
            return html.theme
        return self.config.book.src / "theme"

    def _copy_across_theme(self) -> None:
        self.log.debug("Copying theme")
        theme_dir = self.root / self.theme_dir()

        for directory in (theme_dir, theme_dir / theme.CSS_DIR):
            try:
                create_dir_all(directory)
            except OSError as e:
                raise ThemeDirError(directory, e) from e

        for relative, contents in theme.THEME_FILES:
            target = theme_dir / relative
            try:
                target.write_bytes(contents)
            except OSError as e:
                raise ThemeFileError(target, e) from e

    def _write_book_toml(self) -> None:
        self.log.debug("Writing %s", CONFIG_FILE)
        book_toml = self.root / CONFIG_FILE

        try:
            text = self.config.to_toml()
        except (TypeError, ValueError) as e:
            raise ConfigSerializeError(book_toml, e) from e

        try:
            book_toml.write_text(text, encoding="utf-8", newline="\n")
        except OSError as e:
            raise ConfigWriteError(book_toml, e) from e
