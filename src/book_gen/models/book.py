"""In-memory book structure: the item tree parsed from SUMMARY.md."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from book_gen.models.config import Config


@dataclass
class Chapter:
    """A chapter and its (possibly nested) sub-chapters."""

    name: str
    content: str
    path: Path
    number: list[int] | None = None
    sub_items: list[BookItem] = field(default_factory=list)
    parent_names: list[str] = field(default_factory=list)

    @property
    def section_number(self) -> str | None:
        """Dotted section number, e.g. "1.2." for the second child of chapter 1."""
        if self.number is None:
            return None
        return "".join(f"{n}." for n in self.number)


@dataclass
class Separator:
    """A horizontal rule between groups of chapters."""


@dataclass
class PartTitle:
    """A heading that starts a new part of the book."""

    title: str


BookItem = Union[Chapter, Separator, PartTitle]


def iter_items(items: list[BookItem]) -> Iterator[BookItem]:
    """Walk items depth-first, yielding each chapter before its sub-items."""
    for item in items:
        yield item
        if isinstance(item, Chapter):
            yield from iter_items(item.sub_items)


@dataclass
class Book:
    """Top-level items of a book, in document order."""

    sections: list[BookItem] = field(default_factory=list)

    def iter(self) -> Iterator[BookItem]:
        return iter_items(self.sections)

    def __iter__(self) -> Iterator[BookItem]:
        return self.iter()

    def chapters(self) -> list[Chapter]:
        return [item for item in self.iter() if isinstance(item, Chapter)]


@dataclass
class LoadedBook:
    """A book read from disk together with its configuration."""

    root: Path
    config: Config
    book: Book

    @property
    def source_dir(self) -> Path:
        return self.root / self.config.book.src

    @property
    def build_dir(self) -> Path:
        return self.root / self.config.build.build_dir

    def iter(self) -> Iterator[BookItem]:
        return self.book.iter()
