"""Allow running gitreview with `python -m gitreview`."""

from gitreview.cli import app

if __name__ == "__main__":
    app()
