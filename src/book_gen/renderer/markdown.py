"""Markdown renderer.

Writes each chapter's source back out unchanged. Useful for inspecting what the
loader produced, or for feeding the chapters into other tools.
"""

import logging

from book_gen.core.fs import create_dir_all, remove_dir_content, write_file
from book_gen.errors import ChapterWriteError, DestinationCreateError, StaleOutputRemovalError
from book_gen.models.book import Chapter
from book_gen.renderer.base import RenderContext, Renderer

log = logging.getLogger(__name__)


class MarkdownRenderer(Renderer):
    name = "markdown"

    def __init__(self, logger: logging.Logger | None = None):
        self.log = logger or log

    def render(self, ctx: RenderContext) -> None:
        destination = ctx.destination

        if destination.exists():
            try:
                remove_dir_content(destination)
            except OSError as e:
                raise StaleOutputRemovalError(destination, e) from e

        self.log.debug("Rendering markdown into %s", destination)
        root = destination.resolve()
        for item in ctx.book.iter():
            if not isinstance(item, Chapter):
                continue
            target = destination / item.path
            if not target.resolve().is_relative_to(root):
                raise ChapterWriteError(
                    target, ValueError(f"chapter path escapes the destination {destination}")
                )
            try:
                write_file(destination, item.path, item.content.encode("utf-8"))
            except OSError as e:
                raise ChapterWriteError(target, e) from e

        try:
            create_dir_all(destination)
        except OSError as e:
            raise DestinationCreateError(destination, e) from e
