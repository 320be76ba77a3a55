from __future__ import annotations

import errno
import json
import logging
import os
from pathlib import Path
from typing import List, Set

from . import frontmatter
from .naming import NamingRules, build_filename
from .types import DocumentOutcome, DocumentPlan, RunSummary

LOGGER = logging.getLogger(__name__)

MARKDOWN_PATTERN = "*.md"


def env_path(var_name: str, default: str | Path) -> Path:
    return Path(os.getenv(var_name, str(default)))


def _ensure_dir_exists(path: Path, description: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"{description} does not exist: {path}")
    if not path.is_dir():
        raise NotADirectoryError(f"{description} is not a directory: {path}")


def find_markdown_files(root: Path) -> List[Path]:
    """Recursively collect Markdown files under ``root`` in a stable order."""

    _ensure_dir_exists(root, "Documentation root")
    return sorted(path for path in root.rglob(MARKDOWN_PATTERN) if path.is_file())


def plan_document(
    content: str,
    path: str | Path,
    *,
    strip_front_matter: bool = False,
    rules: NamingRules | None = None,
) -> DocumentPlan:
    """Work out the new name (and content) for one document without touching disk."""

    name = Path(path).name
    title = frontmatter.extract_title(content)
    if title is None:
        return {
            "path": str(path),
            "title": None,
            "target_name": None,
            "content": None,
            "message": f"No title found in: {name}",
        }

    target_name = build_filename(title, path, rules)
    if target_name is None:
        return {
            "path": str(path),
            "title": title,
            "target_name": None,
            "content": None,
            "message": f"Title {title!r} leaves no usable filename for: {name}",
        }

    return {
        "path": str(path),
        "title": title,
        "target_name": target_name,
        "content": frontmatter.strip_front_matter(content) if strip_front_matter else None,
        "message": None,
    }


def _check_collision(source: Path, target: Path, claimed: Set[Path], vacated: Set[Path]) -> None:
    if target in claimed:
        raise FileExistsError(errno.EEXIST, "Target already claimed by another document", str(target))
    if target in vacated:
        return
    # Case-only renames on case-insensitive filesystems resolve to the source itself.
    if target.exists() and not os.path.samefile(source, target):
        raise FileExistsError(errno.EEXIST, "Target already exists", str(target))


def apply_plan(
    plan: DocumentPlan,
    *,
    claimed: Set[Path],
    vacated: Set[Path] | None = None,
    dry_run: bool = False,
) -> DocumentOutcome:
    """Rename (and optionally rewrite) a planned document.

    ``claimed`` collects every path handed out during the run so two documents
    never end up with the same name. ``vacated`` holds the paths earlier
    documents were renamed away from, so a dry run sees the same free names a
    real run would. A failed rename leaves the file untouched.
    """

    source = Path(plan["path"])
    freed = vacated if vacated is not None else set()
    outcome: DocumentOutcome = {
        "source": str(source),
        "destination": str(source),
        "status": "unchanged",
        "stripped": False,
        "message": None,
    }

    target_name = plan["target_name"]
    if target_name is None:
        LOGGER.warning("⚠️ %s", plan["message"])
        outcome["status"] = "skipped"
        outcome["message"] = plan["message"]
        return outcome

    current = source
    if target_name != source.name:
        target = source.with_name(target_name)
        try:
            _check_collision(source, target, claimed, freed)
            if not dry_run:
                source.rename(target)
        except OSError as exc:
            LOGGER.error("❌ Rename failed for %s: %s", source.name, exc)
            outcome["status"] = "failed"
            outcome["message"] = str(exc)
            return outcome
        LOGGER.info("✅ Renamed: %s → %s", source.name, target_name)
        freed.add(source)
        freed.discard(target)
        current = target
        outcome["status"] = "renamed"
        outcome["destination"] = str(target)
    else:
        LOGGER.debug("Name already matches title: %s", source.name)
    claimed.add(current)

    if plan["content"] is not None:
        if not dry_run:
            try:
                with current.open("w", encoding="utf-8", newline="") as outfile:
                    outfile.write(plan["content"])
            except OSError as exc:
                LOGGER.error("❌ Could not write %s: %s", current.name, exc)
                outcome["status"] = "failed"
                outcome["message"] = str(exc)
                return outcome
        LOGGER.info("✂️  Removed front matter from: %s", current.name)
        outcome["stripped"] = True

    return outcome


def read_document(path: Path) -> str:
    # newline="" keeps CRLF endings intact when the file is rewritten.
    with path.open("r", encoding="utf-8", newline="") as infile:
        return infile.read()


def _empty_summary() -> RunSummary:
    return {
        "scanned": 0,
        "renamed": 0,
        "unchanged": 0,
        "skipped": 0,
        "failed": 0,
        "stripped": 0,
        "documents": [],
    }


def _record(summary: RunSummary, outcome: DocumentOutcome) -> None:
    summary["scanned"] += 1
    summary[outcome["status"]] += 1
    # A rename that went through before the rewrite failed still counts as renamed.
    if outcome["status"] == "failed" and outcome["destination"] != outcome["source"]:
        summary["renamed"] += 1
    if outcome["stripped"]:
        summary["stripped"] += 1
    summary["documents"].append(outcome)


def process_directory(
    root: Path,
    *,
    strip_front_matter: bool = False,
    dry_run: bool = False,
    rules: NamingRules | None = None,
) -> RunSummary:
    """Rename every Markdown file under ``root`` after its front-matter title."""

    files = find_markdown_files(root)
    LOGGER.info("Found %d Markdown files under %s", len(files), root)
    if dry_run:
        LOGGER.info("Dry run: no files will be renamed or rewritten")

    summary = _empty_summary()
    claimed: Set[Path] = set()
    vacated: Set[Path] = set()
    for path in files:
        try:
            content = read_document(path)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.error("❌ Could not read %s: %s", path.name, exc)
            _record(
                summary,
                {
                    "source": str(path),
                    "destination": str(path),
                    "status": "failed",
                    "stripped": False,
                    "message": str(exc),
                },
            )
            continue

        plan = plan_document(content, path, strip_front_matter=strip_front_matter, rules=rules)
        _record(summary, apply_plan(plan, claimed=claimed, vacated=vacated, dry_run=dry_run))

    LOGGER.info(
        "Processed %d files: %d renamed, %d unchanged, %d skipped, %d failed, %d stripped",
        summary["scanned"],
        summary["renamed"],
        summary["unchanged"],
        summary["skipped"],
        summary["failed"],
        summary["stripped"],
    )
    return summary


def write_report(summary: RunSummary, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Writing rename report to %s", output_path)
    with output_path.open("w", encoding="utf-8") as outfile:
        json.dump(summary, outfile, ensure_ascii=False, indent=2)
