"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from book_gen.models.book import Book, Chapter, PartTitle, Separator


@pytest.fixture
def book_root(tmp_path):
    """An empty directory to scaffold a book into."""
    root = tmp_path / "my-book"
    root.mkdir()
    return root


@pytest.fixture
def sample_book():
    """A book mixing chapters, nested chapters, a separator and a part title."""
    return Book(
        sections=[
            Chapter(name="Intro", content="# Intro\n", path=Path("intro.md")),
            Chapter(
                name="Chapter 1",
                content="# Chapter 1\n",
                path=Path("chapter_1.md"),
                number=[1],
                sub_items=[
                    Chapter(
                        name="Section 1.1",
                        content="## Section 1.1\n",
                        path=Path("chapter_1/section_1.md"),
                        number=[1, 1],
                        parent_names=["Chapter 1"],
                    ),
                ],
            ),
            Separator(),
            PartTitle("Part Two"),
            Chapter(name="Chapter 2", content="# Chapter 2\n", path=Path("chapter_2.md"), number=[2]),
        ]
    )
