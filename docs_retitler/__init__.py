"""Utilities for renaming Markdown documents after their front-matter titles."""

from .frontmatter import extract_title, split_front_matter, strip_front_matter
from .naming import build_filename, sanitize_title
from .renamer import find_markdown_files, plan_document, process_directory, write_report
from .types import DocumentOutcome, DocumentPlan, RunSummary

__all__ = [
    "extract_title",
    "split_front_matter",
    "strip_front_matter",
    "build_filename",
    "sanitize_title",
    "find_markdown_files",
    "plan_document",
    "process_directory",
    "write_report",
    "DocumentOutcome",
    "DocumentPlan",
    "RunSummary",
]
