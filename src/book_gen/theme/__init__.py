"""Default theme assets bundled with the package.

The files live in ``book_gen/theme/assets`` and are read once at import time,
so copying a theme never depends on the current working directory.
"""

from importlib import resources
from pathlib import PurePosixPath

_ASSETS = resources.files(__name__) / "assets"


def _asset(name: str) -> bytes:
    return _ASSETS.joinpath(name).read_bytes()


INDEX = _asset("index.hbs")
FAVICON = _asset("favicon.png")
JS = _asset("book.js")
HIGHLIGHT_CSS = _asset("highlight.css")
HIGHLIGHT_JS = _asset("highlight.js")
GENERAL_CSS = _asset("css/general.css")
CHROME_CSS = _asset("css/chrome.css")
PRINT_CSS = _asset("css/print.css")
VARIABLES_CSS = _asset("css/variables.css")

# Written in this order when a theme is copied into a book.
THEME_FILES: tuple[tuple[PurePosixPath, bytes], ...] = (
    (PurePosixPath("index.hbs"), INDEX),
    (PurePosixPath("favicon.png"), FAVICON),
    (PurePosixPath("book.js"), JS),
    (PurePosixPath("highlight.css"), HIGHLIGHT_CSS),
    (PurePosixPath("highlight.js"), HIGHLIGHT_JS),
    (PurePosixPath("css/general.css"), GENERAL_CSS),
    (PurePosixPath("css/chrome.css"), CHROME_CSS),
    (PurePosixPath("css/print.css"), PRINT_CSS),
    (PurePosixPath("css/variables.css"), VARIABLES_CSS),
)

CSS_DIR = "css"
