"""Internal post shape shared by the CMS mapper, the fallback set and the templates."""

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class Post:
    slug: str
    title: str
    excerpt: str
    content: str | dict[str, Any]
    date: date
    published: bool = True
    featured: bool = False
    tags: tuple[str, ...] = ()
    entry_id: str | None = None  # Contentful sys.id; None for fallback posts

    @property
    def source(self) -> str:
        return "Contentful" if self.entry_id else "Fallback"


@dataclass(frozen=True)
class BlogListing:
    posts: list[Post]
    source: str  # "contentful" or "fallback"

    @property
    def is_contentful(self) -> bool:
        return self.source == "contentful"
