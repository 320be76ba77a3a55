"""Rename Markdown files under ``docs/`` after their titles, then drop the front matter.

Equivalent to:
    python -m docs_retitler.cli strip --docs-dir docs
or install the package and run `docs-retitler strip`.
"""

from pathlib import Path

from docs_retitler.cli import strip_cli


if __name__ == "__main__":
    strip_cli(Path(__file__).resolve().parent / "docs")
