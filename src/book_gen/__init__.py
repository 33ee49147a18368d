"""book-gen: scaffold documentation books and render them to disk."""

__version__ = "0.1.0"
