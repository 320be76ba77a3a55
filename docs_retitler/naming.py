from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Iterable, Tuple

LOGGER = logging.getLogger(__name__)

INVALID_CHARACTERS = re.compile(r'[<>:"/\\|?*]+')
DASH_PATTERN = re.compile(r"-")
WHITESPACE_PATTERN = re.compile(r"\s+")

CONNECTORS_SEGMENT = "connectors"
DOMAIN_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (("connector", "component"),)
BRAND_TERMS: Tuple[str, ...] = ("Flow Builder",)
DEFAULT_EXTENSION = ".md"


@dataclass(frozen=True)
class NamingRules:
    """Folder-specific wording and brand casing applied to generated names."""

    connectors_segment: str = CONNECTORS_SEGMENT
    substitutions: Tuple[Tuple[str, str], ...] = DOMAIN_SUBSTITUTIONS
    brand_terms: Tuple[str, ...] = BRAND_TERMS


def to_sentence_case(text: str) -> str:
    """Convert "build Workflows" to "Build workflows"."""

    lowered = text.lower()
    return lowered[:1].upper() + lowered[1:]


def is_in_connectors(path: str | PurePath, rules: NamingRules | None = None) -> bool:
    segment = (rules or NamingRules()).connectors_segment.lower()
    return any(part.lower() == segment for part in PurePath(path).parent.parts)


def clean_title(title: str) -> str:
    cleaned = INVALID_CHARACTERS.sub("", title)
    cleaned = DASH_PATTERN.sub(" ", cleaned)
    return WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


def apply_substitutions(text: str, substitutions: Iterable[Tuple[str, str]]) -> str:
    for word, replacement in substitutions:
        text = _word_pattern(word).sub(replacement, text)
    return text


def apply_brand_terms(text: str, brand_terms: Tuple[str, ...]) -> str:
    for term in brand_terms:
        text = _word_pattern(term).sub(term, text)
    return text


def sanitize_title(title: str, path: str | PurePath, rules: NamingRules | None = None) -> str:
    """Turn a front-matter title into a filesystem-safe base name.

    Documents under a connectors folder keep their casing and have the
    configured words substituted; every other document is sentence-cased.
    Brand terms are fixed up last so neither step can undo them.
    """

    naming_rules = rules or NamingRules()
    cleaned = clean_title(title)

    if is_in_connectors(path, naming_rules):
        formatted = apply_substitutions(cleaned, naming_rules.substitutions)
    else:
        formatted = to_sentence_case(cleaned)

    return apply_brand_terms(formatted, naming_rules.brand_terms)


def build_filename(title: str, path: str | PurePath, rules: NamingRules | None = None) -> str | None:
    """Return the target filename for ``path``, or ``None`` if the title has no usable characters."""

    stem = sanitize_title(title, path, rules)
    if not stem:
        LOGGER.debug("Title %r sanitizes to an empty name", title)
        return None
    extension = Path(path).suffix or DEFAULT_EXTENSION
    return f"{stem}{extension}"
