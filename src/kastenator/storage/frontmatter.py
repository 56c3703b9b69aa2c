# src/kastenator/storage/frontmatter.py
"""YAML frontmatter parsing."""

from typing import Any

import yaml

FRONTMATTER_DELIMITER = "---"


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """Split a note into its raw frontmatter block and body.

    Returns (None, text) when the note does not open with a closed
    `---` block.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return None, text

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            raw = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return raw, body

    return None, text


def parse_frontmatter(text: str) -> dict[str, Any]:
    """Parse a note's frontmatter into a mapping. Invalid YAML yields {}."""
    raw, _ = split_frontmatter(text)
    if raw is None:
        return {}

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError:
        return {}

    return data if isinstance(data, dict) else {}
