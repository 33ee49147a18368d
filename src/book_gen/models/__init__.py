"""Data models."""

from book_gen.models.book import (
    Book,
    BookItem,
    Chapter,
    LoadedBook,
    PartTitle,
    Separator,
)
from book_gen.models.config import (
    BookSection,
    BuildSection,
    Config,
    HtmlConfig,
    OutputSection,
)

__all__ = [
    # Book models
    "Book",
    "BookItem",
    "Chapter",
    "LoadedBook",
    "PartTitle",
    "Separator",
    # Config models
    "BookSection",
    "BuildSection",
    "Config",
    "HtmlConfig",
    "OutputSection",
]
