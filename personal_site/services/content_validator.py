"""Minimal shape checks for raw Contentful entries.

An entry is usable only if it has a non-blank title, a non-blank slug, a
rich-text document as content and a publish timestamp. Anything else is
dropped before mapping.
"""

from typing import Any


def _non_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validation_problems(entry: Any) -> list[str]:
    """Return the names of the rules this entry fails (empty if valid)."""
    if not isinstance(entry, dict):
        return ["entry"]
    fields = entry.get("fields")
    sys = entry.get("sys")
    if not isinstance(fields, dict):
        fields = {}
    if not isinstance(sys, dict):
        sys = {}

    problems = []
    if not _non_blank(fields.get("title")):
        problems.append("title")
    if not _non_blank(fields.get("slug")):
        problems.append("slug")
    content = fields.get("content")
    if not (isinstance(content, dict) and content.get("nodeType") == "document"):
        problems.append("content")
    if not sys.get("publishedAt"):
        problems.append("publishedAt")
    return problems


def is_valid(entry: Any) -> bool:
    return not validation_problems(entry)
