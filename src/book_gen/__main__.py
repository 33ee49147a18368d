"""Allow running as ``python -m book_gen``."""

from book_gen.cli import app

if __name__ == "__main__":
    app()
