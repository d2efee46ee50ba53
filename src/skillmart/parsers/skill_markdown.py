"""Metadata header parsing for SKILL.md marker files.

Only the ``description`` key is read. Two value styles are recognised:

* inline scalars, ``description: Formats tables``
* folded blocks, ``description: >`` followed by lines indented by at least
  two spaces, joined with single spaces

Anything else in the header is ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillmart.constants.discovery import DEFAULT_DESCRIPTION
from skillmart.constants.parsing import (
    BYTE_ORDER_MARK,
    CONTINUATION_INDENT,
    DESCRIPTION_KEY,
    FOLDED_SCALAR_INDICATOR,
    FRONTMATTER_DELIMITER,
)
from skillmart.exceptions import SkillParseError

logger = logging.getLogger(__name__)

_DESCRIPTION_PREFIX = f"{DESCRIPTION_KEY}:"


def read_skill_description(path: Path) -> str:
    """Return the description declared in a marker file, or the placeholder."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return DEFAULT_DESCRIPTION

    description = extract_description(text)
    if description is None:
        return DEFAULT_DESCRIPTION
    return description


def extract_description(text: str) -> str | None:
    """Extract the ``description`` value from marker file content.

    Returns ``None`` when the header is missing or unterminated, when it has
    no ``description`` key, or when the value is empty.
    """
    try:
        header = parse_frontmatter_lines(text.lstrip(BYTE_ORDER_MARK).splitlines())
    except SkillParseError as exc:
        logger.debug("Ignoring metadata header: %s", exc)
        return None

    for index, line in enumerate(header):
        if not line.startswith(_DESCRIPTION_PREFIX):
            continue
        value = line[len(_DESCRIPTION_PREFIX) :].strip()
        if value == FOLDED_SCALAR_INDICATOR:
            value = _fold_continuation_lines(header[index + 1 :])
        return value or None

    return None


def parse_frontmatter_lines(lines: list[str]) -> list[str]:
    """Return the header lines between the opening and closing delimiters.

    Raises:
        SkillParseError: If the first line is not a delimiter or the header is
            never closed.
    """
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        raise SkillParseError("Missing metadata header")

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            return lines[1:index]

    raise SkillParseError("Unterminated metadata header")


def _fold_continuation_lines(lines: list[str]) -> str:
    folded: list[str] = []
    for line in lines:
        if not line.strip() or not line.startswith(CONTINUATION_INDENT):
            break
        folded.append(line.strip())
    return " ".join(folded)
