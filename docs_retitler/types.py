from __future__ import annotations

from typing import Literal, TypedDict

OutcomeStatus = Literal["renamed", "unchanged", "skipped", "failed"]


class DocumentPlan(TypedDict):
    """Pure result of planning a single Markdown document."""

    path: str
    title: str | None
    target_name: str | None
    content: str | None
    message: str | None


class DocumentOutcome(TypedDict):
    source: str
    destination: str
    status: OutcomeStatus
    stripped: bool
    message: str | None


class RunSummary(TypedDict):
    """Per-run counters.

    ``renamed`` also counts documents that were renamed but then could not be
    rewritten; those appear under ``failed`` as well.
    """

    scanned: int
    renamed: int
    unchanged: int
    skipped: int
    failed: int
    stripped: int
    documents: list[DocumentOutcome]
