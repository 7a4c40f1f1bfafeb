"""Contentful queries for blog posts.

Nothing raises past this module: every failure comes back as an ``Err`` so
the blog service can treat "CMS empty" and "CMS broken" the same way.
"""

import logging
from typing import Any

from personal_site.cms_client import CMSClients
from personal_site.config import BLOG_CONTENT_TYPE
from personal_site.results import CMSErrorKind, Err, Ok, Result

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
ORDER = "-fields.publishedDate,-sys.createdAt"

RawEntry = dict[str, Any]


def _base_query() -> dict[str, Any]:
    return {
        "content_type": BLOG_CONTENT_TYPE,
        "sys.publishedAt[exists]": "true",
    }


def _query(clients: CMSClients, preview: bool, query: dict[str, Any]) -> Result[list[RawEntry]]:
    client = clients.select(preview)
    if client is None:
        return Err.of(CMSErrorKind.CONFIG_MISSING, "No Contentful client configured")

    try:
        response = client.entries(query)
        return Ok([item.raw for item in response])
    except Exception as e:
        logger.error("Error fetching blog posts from Contentful: %s", e)
        return Err.of(
            CMSErrorKind.TRANSPORT_FAILURE, str(e),
            status_code=getattr(e, "status_code", None),
            error_type=type(e).__name__,
        )


def list_posts(clients: CMSClients, preview: bool = False) -> Result[list[RawEntry]]:
    """Published blog post entries, newest first, up to one page."""
    query = _base_query()
    query.update({"limit": PAGE_SIZE, "order": ORDER})
    return _query(clients, preview, query)


def get_post_by_slug(slug: str, clients: CMSClients, preview: bool = False) -> Result[RawEntry]:
    """A single published entry matching the slug exactly."""
    query = _base_query()
    query.update({"fields.slug": slug, "limit": 1})
    result = _query(clients, preview, query)
    if not result.ok:
        return result
    if not result.value:
        return Err.of(CMSErrorKind.NOT_FOUND, f"Blog post '{slug}' not found", slug=slug)
    return Ok(result.value[0])
