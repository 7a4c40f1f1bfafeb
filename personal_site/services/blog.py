"""Blog service: CMS posts with an unconditional fallback to the demo set.

Per request: resolve preview vs. production, fetch, keep valid entries,
map, sort newest first. If that leaves nothing (CMS unconfigured,
unreachable, empty, or all entries invalid) the fallback posts are served
instead. Nothing raises out of here.
"""

import logging

from personal_site.cms_client import CMSClients
from personal_site.config import SiteConfig, resolve_preview
from personal_site.models import BlogListing, Post
from personal_site.results import CMSErrorKind, Err, Ok, Result
from personal_site.services import content_fetcher
from personal_site.services.content_mapper import map_to_post
from personal_site.services.content_validator import validation_problems
from personal_site.services.fallback_posts import FALLBACK_POSTS

logger = logging.getLogger(__name__)


def sort_posts(posts: list[Post]) -> list[Post]:
    """Newest first by effective date."""
    return sorted(posts, key=lambda p: p.date, reverse=True)


def fallback_posts() -> list[Post]:
    return sort_posts([p for p in FALLBACK_POSTS if p.published])


def to_post(entry: dict) -> Result[Post]:
    """Validate and map one raw entry."""
    problems = validation_problems(entry)
    if not problems:
        try:
            return Ok(map_to_post(entry))
        except ValueError as e:
            problems = [str(e)]

    sys = entry.get("sys") if isinstance(entry, dict) else None
    entry_id = sys.get("id") if isinstance(sys, dict) else None
    logger.debug("Skipping invalid entry %s: %s", entry_id, ", ".join(problems))
    return Err.of(CMSErrorKind.VALIDATION_FAILED, "Entry failed validation",
                  entry_id=entry_id, problems=problems)


class BlogService:
    def __init__(self, clients: CMSClients, config: SiteConfig):
        self.clients = clients
        self.config = config

    def _preview(self, preview: bool | None) -> bool:
        return resolve_preview(self.config) if preview is None else preview

    def cms_posts(self, preview: bool | None = None) -> Result[list[Post]]:
        """Valid, mapped CMS posts, newest first."""
        result = content_fetcher.list_posts(self.clients, self._preview(preview))
        if not result.ok:
            return result
        mapped = [r.value for r in map(to_post, result.value) if r.ok]
        return Ok(sort_posts(mapped))

    def load_posts(self, preview: bool | None = None) -> BlogListing:
        """Posts plus where they came from."""
        result = self.cms_posts(preview)
        if result.ok and result.value:
            return BlogListing(posts=result.value, source="contentful")

        if result.ok:
            logger.info("No valid posts in Contentful, using fallback posts")
        else:
            logger.info("Contentful unavailable (%s), using fallback posts", result.error.kind.value)
        return BlogListing(posts=fallback_posts(), source="fallback")

    def get_blog_posts(self, preview: bool | None = None) -> list[Post]:
        return self.load_posts(preview).posts

    def get_post(self, slug: str, preview: bool | None = None) -> Post | None:
        """CMS entry by slug if valid, else the fallback post with that slug, else None."""
        result = content_fetcher.get_post_by_slug(slug, self.clients, self._preview(preview))
        if result.ok:
            result = to_post(result.value)
        if result.ok:
            return result.value

        for post in FALLBACK_POSTS:
            if post.slug == slug and post.published:
                return post
        return None
