"""Raw Contentful entry → Post."""

from datetime import date
from typing import Any

from personal_site.models import Post

EXCERPT_PLACEHOLDER = "No excerpt available."


def _to_day(value: Any) -> date | None:
    """Truncate an ISO date or datetime string to its calendar day."""
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _tags(value: Any) -> tuple[str, ...]:
    # The content model stores one tag string: zero or one tag per post
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if isinstance(value, list):
        for item in value:
            if isinstance(item, str) and item.strip():
                return (item.strip(),)
    return ()


def effective_date(entry: dict) -> date:
    """publishedDate if usable, else the entry's creation day, else its publish day."""
    fields = entry.get("fields", {})
    sys = entry.get("sys", {})
    for candidate in (fields.get("publishedDate"), sys.get("createdAt"), sys.get("publishedAt")):
        day = _to_day(candidate)
        if day is not None:
            return day
    raise ValueError(f"Entry {sys.get('id', '?')} has no usable date")


def map_to_post(entry: dict) -> Post:
    """Map a validated entry. Pure; callers must run the validator first."""
    fields = entry["fields"]
    sys = entry.get("sys", {})
    excerpt = fields.get("excerpt")
    return Post(
        slug=fields["slug"],
        title=fields["title"],
        excerpt=excerpt if isinstance(excerpt, str) and excerpt.strip() else EXCERPT_PLACEHOLDER,
        content=fields["content"],
        date=effective_date(entry),
        published=True,
        featured=bool(fields.get("featured") or False),
        tags=_tags(fields.get("tags")),
        entry_id=sys.get("id"),
    )
