"""Parse SUMMARY.md into the book item tree.

Supported layout:

    # Summary                     <- optional title, first heading only

    [Introduction](intro.md)      <- prefix/suffix chapter (unnumbered)

    - [Chapter 1](chapter_1.md)   <- numbered chapter, `-` or `*`
        - [Section](ch1/s1.md)    <- nested by indentation
    ---                           <- separator
    # Part Two                    <- part title
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from book_gen.errors import SummaryParseError
from book_gen.models.book import BookItem, Chapter, PartTitle, Separator

SUMMARY_FILE = "SUMMARY.md"

HEADING_RE = re.compile(r"^#+\s+(.+?)\s*#*\s*$")
SEPARATOR_RE = re.compile(r"^-{3,}\s*$")
LINK_RE = re.compile(r"^\[(?P<name>[^\]]+)\]\((?P<target>[^)]*)\)\s*$")
LIST_ITEM_RE = re.compile(r"^(?P<indent>\s*)[-*]\s+(?P<rest>.*)$")


@dataclass
class Summary:
    """Parsed SUMMARY.md."""

    title: str | None = None
    items: list[BookItem] = field(default_factory=list)


def _indent_width(whitespace: str) -> int:
    return len(whitespace.replace("\t", "    "))


def _parse_link(text: str, line_number: int, line: str) -> tuple[str, Path]:
    match = LINK_RE.match(text.strip())
    if not match:
        raise SummaryParseError(line_number, line, "expected a link like [Name](path.md)")
    target = match.group("target").strip()
    if not target:
        raise SummaryParseError(line_number, line, "chapter link has no target")
    path = Path(target)
    if path.is_absolute() or ".." in path.parts:
        raise SummaryParseError(line_number, line, "chapter path must stay inside the source directory")
    return match.group("name").strip(), path


def parse_summary(text: str) -> Summary:
    """Parse the contents of SUMMARY.md.

    Chapter paths are taken relative to the source directory. Chapter content is
    left empty; the loader fills it in.

    Raises:
        SummaryParseError: On a line that fits none of the supported forms
    """
    summary = Summary()
    # (indent, chapter) for the current chain of open list items
    stack: list[tuple[int, Chapter]] = []
    top_level_count = 0
    seen_content = False

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue

        if SEPARATOR_RE.match(line.strip()):
            stack.clear()
            summary.items.append(Separator())
            seen_content = True
            continue

        heading = HEADING_RE.match(line)
        if heading:
            if not seen_content and summary.title is None:
                summary.title = heading.group(1)
            else:
                stack.clear()
                summary.items.append(PartTitle(heading.group(1)))
            seen_content = True
            continue

        list_item = LIST_ITEM_RE.match(line)
        if list_item:
            indent = _indent_width(list_item.group("indent"))
            name, path = _parse_link(list_item.group("rest"), line_number, line)

            while stack and stack[-1][0] >= indent:
                stack.pop()

            if stack:
                parent = stack[-1][1]
                position = sum(1 for item in parent.sub_items if isinstance(item, Chapter)) + 1
                chapter = Chapter(
                    name=name,
                    content="",
                    path=path,
                    number=[*(parent.number or []), position],
                    parent_names=[*parent.parent_names, parent.name],
                )
                parent.sub_items.append(chapter)
            else:
                top_level_count += 1
                chapter = Chapter(name=name, content="", path=path, number=[top_level_count])
                summary.items.append(chapter)

            stack.append((indent, chapter))
            seen_content = True
            continue

        if line[:1].isspace():
            raise SummaryParseError(line_number, line, "unexpected indented line")

        # Unnumbered prefix or suffix chapter
        name, path = _parse_link(line, line_number, line)
        stack.clear()
        summary.items.append(Chapter(name=name, content="", path=path))
        seen_content = True

    return summary
