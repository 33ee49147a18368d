"""Exceptions raised while scaffolding, loading and rendering books."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class BookGenError(Exception):
    """Base exception for recoverable book-gen errors."""


class PathError(BookGenError):
    """An error tied to a filesystem path, wrapping the underlying cause."""

    action = "Failed to process"

    def __init__(self, path: Path, original_exception: Exception) -> None:
        self.path = path
        self.reason = original_exception
        super().__init__(f"{self.action} {path}: {original_exception}")
        self.__cause__ = original_exception


# Scaffolding


class ScaffoldError(PathError):
    """Base exception for the BookBuilder stages."""


class ConfigSerializeError(ScaffoldError):
    """Raised when the config cannot be serialized to TOML."""

    action = "Unable to serialize the config for"


class ConfigWriteError(ScaffoldError):
    action = "Unable to write the config to"


class ThemeDirError(ScaffoldError):
    action = "Couldn't create theme directory"


class ThemeFileError(ScaffoldError):
    action = "Couldn't copy theme file"


class GitignoreWriteError(ScaffoldError):
    action = "Unable to create .gitignore at"


class SummaryWriteError(ScaffoldError):
    action = "Unable to create summary at"


class ChapterOneWriteError(ScaffoldError):
    action = "Unable to create chapter one at"


class ScaffoldDirectoryError(ScaffoldError):
    action = "Unable to create scaffolding directory at"


# Rendering


class RenderError(PathError):
    """Base exception for renderer backends."""


class StaleOutputRemovalError(RenderError):
    action = "Unable to remove stale output in"


class ChapterWriteError(RenderError):
    action = "Unable to write chapter to"


class DestinationCreateError(RenderError):
    action = "Unable to create destination directory"


class UnknownRendererError(BookGenError):
    """Raised when no renderer is registered under the requested name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown renderer: '{name}'. Available renderers: {', '.join(available)}"
        )


# Loading


class BookLoadError(BookGenError):
    """Raised when a book directory cannot be loaded."""


class ConfigLoadError(BookLoadError):
    """Raised when book.toml is unreadable or does not match the schema."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        where = f" at '{path}'" if path is not None else ""
        super().__init__(f"Failed to load config{where}: {reason}")


class SummaryParseError(BookLoadError):
    """Raised when SUMMARY.md contains a line that can't be understood."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"SUMMARY.md line {line_number}: {reason}: {line.strip()!r}")


# Fatal


class InternalInvariantViolated(Exception):  # noqa: N818
    """A scaffolded book failed to load.

    The builder is expected to always produce a loadable book, so this points
    at a bug in book-gen itself. Not a ``BookGenError``: callers should let it
    terminate the process.
    """

    def __init__(self, root: Path, original_exception: Exception) -> None:
        self.root = root
        super().__init__(
            f"The BookBuilder should always create a valid book, but loading '{root}' "
            f"failed: {original_exception}. If you are seeing this it is a bug and "
            "should be reported."
        )
        self.__cause__ = original_exception
