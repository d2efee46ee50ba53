"""Constants for SKILL.md metadata header parsing."""

from __future__ import annotations

FRONTMATTER_DELIMITER: str = "---"
DESCRIPTION_KEY: str = "description"
FOLDED_SCALAR_INDICATOR: str = ">"
CONTINUATION_INDENT: str = "  "
BYTE_ORDER_MARK: str = "\ufeff"
