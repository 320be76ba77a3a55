"""Rename every Markdown file under ``docs/`` after its front-matter title.

Equivalent to:
    python -m docs_retitler.cli rename --docs-dir docs
or install the package and run `docs-retitler rename`.
"""

from pathlib import Path

from docs_retitler.cli import rename_cli


if __name__ == "__main__":
    rename_cli(Path(__file__).resolve().parent / "docs")
