from __future__ import annotations

import logging
from typing import List, Sequence

LOGGER = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"
BYTE_ORDER_MARK = "\ufeff"


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONT_MATTER_DELIMITER


def split_front_matter(content: str) -> tuple[List[str], str] | None:
    """Split ``content`` into front-matter lines and the remaining body.

    The first line must be a ``---`` delimiter and a second ``---`` line must
    close the block. Returns ``None`` when either delimiter is missing so an
    unterminated block is never mistaken for front matter. Both ``\\n`` and
    ``\\r\\n`` line endings are accepted.
    """

    lines = content.split("\n")
    if not _is_delimiter(lines[0].lstrip(BYTE_ORDER_MARK)):
        return None

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            fields = [line.rstrip("\r") for line in lines[1:index]]
            body = "\n".join(lines[index + 1 :])
            return fields, body

    LOGGER.debug("Front matter opened but never closed; ignoring it")
    return None


def find_field(lines: Sequence[str], name: str) -> str | None:
    """Return the value of the first ``name:`` line, or ``None``."""

    prefix = f"{name.lower()}:"
    for line in lines:
        if line.lower().startswith(prefix):
            # Split once so colons inside the value survive.
            value = line.split(":", 1)[1].strip()
            return value or None
    return None


def extract_title(content: str) -> str | None:
    parsed = split_front_matter(content)
    if parsed is None:
        return None
    fields, _ = parsed
    return find_field(fields, "title")


def strip_front_matter(content: str) -> str:
    """Drop the leading front-matter block and any whitespace that follows it."""

    parsed = split_front_matter(content)
    body = content if parsed is None else parsed[1]
    return body.lstrip()
