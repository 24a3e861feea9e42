# src/data/normalizer.py — v1
"""Skill name normalization used for weight-table lookups."""

from __future__ import annotations

import re

# Whitespace, periods and hyphens only. "+" and "#" are kept, so "C++" -> "c++"
# and does not match the stored "cpp" key.
_STRIP_RE = re.compile(r"[\s.\-]")


def normalize_skill(raw: str) -> str:
    """Lowercase and strip whitespace, periods and hyphens.

    >>> normalize_skill("Node.js")
    'nodejs'
    >>> normalize_skill("GitHub Actions")
    'githubactions'
    """
    return _STRIP_RE.sub("", raw.lower())


def normalize_skills(raw_skills: list[str]) -> list[str]:
    """Normalize every skill, preserving order and duplicates."""
    return [normalize_skill(s) for s in raw_skills]
