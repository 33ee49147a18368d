"""Renderer interface shared by all output backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from book_gen import __version__

if TYPE_CHECKING:
    from book_gen.models.book import Book, LoadedBook
    from book_gen.models.config import Config


@dataclass(frozen=True)
class RenderContext:
    """Everything a renderer needs to produce its output."""

    root: Path
    destination: Path
    book: Book
    config: Config
    version: str = __version__

    @classmethod
    def from_loaded(cls, loaded: LoadedBook, destination: Path) -> RenderContext:
        return cls(
            root=loaded.root,
            destination=destination,
            book=loaded.book,
            config=loaded.config,
        )


class Renderer(ABC):
    """Abstract base class for output backends.

    Subclasses must define:
        name:      str    stable backend identifier ("markdown", ...)
        render():  method write output below ``ctx.destination``
    """

    name: str = ""

    @abstractmethod
    def render(self, ctx: RenderContext) -> None:
        """Render the book in ctx.

        Raises:
            RenderError: If the output can't be written
        """
        pass
