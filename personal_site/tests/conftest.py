"""Shared fixtures for site tests.

Provides:
- FakeContentfulClient: in-memory stand-in for contentful.Client.entries()
- site_config / cms_clients: explicit config and clients for the service
- client / offline_client: TestClient wired to create_app()
- make_entry / rich_text: raw Contentful entry factories
"""

import os
import uuid

import pytest

# Set env vars before any site imports
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("PREVIEW_SECRET", "test-secret-123")

from fastapi.testclient import TestClient

from personal_site.app import create_app
from personal_site.cms_client import CMSClients
from personal_site.config import SiteConfig


# ---------------------------------------------------------------------------
# In-memory fake Contentful
# ---------------------------------------------------------------------------

class FakeEntry:
    """Mimics contentful.Entry; only .raw is used."""

    def __init__(self, raw):
        self.raw = raw


class FakeContentfulClient:
    """Answers entries() from a list of raw entries, honoring slug filter and limit."""

    def __init__(self, entries=None, error=None):
        self.items = list(entries or [])
        self.error = error
        self.queries = []

    def entries(self, query=None):
        query = dict(query or {})
        self.queries.append(query)
        if self.error is not None:
            raise self.error

        rows = list(self.items)
        if "fields.slug" in query:
            rows = [r for r in rows if r.get("fields", {}).get("slug") == query["fields.slug"]]
        if query.get("limit"):
            rows = rows[:query["limit"]]
        return [FakeEntry(r) for r in rows]


# ---------------------------------------------------------------------------
# Entry factories
# ---------------------------------------------------------------------------

def rich_text(text="Hello world"):
    return {
        "nodeType": "document",
        "data": {},
        "content": [{
            "nodeType": "paragraph",
            "data": {},
            "content": [{"nodeType": "text", "value": text, "marks": [], "data": {}}],
        }],
    }


def make_entry(drop=(), sys=None, **fields):
    """Raw Contentful entry. `drop` removes fields; `sys` overrides system keys."""
    base_sys = {
        "id": uuid.uuid4().hex[:22],
        "type": "Entry",
        "createdAt": "2024-02-01T09:30:00.000Z",
        "updatedAt": "2024-02-02T11:00:00.000Z",
        "publishedAt": "2024-02-02T11:00:00.000Z",
        "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": "blogPost"}},
    }
    base_fields = {
        "title": "Hello",
        "slug": "hello",
        "excerpt": "A short hello.",
        "content": rich_text(),
        "publishedDate": "2024-02-03",
    }
    base_sys.update(sys or {})
    base_fields.update(fields)
    for name in drop:
        base_fields.pop(name, None)
        base_sys.pop(name, None)
    return {"sys": base_sys, "fields": base_fields}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def site_config():
    return SiteConfig(
        space_id="space123",
        access_token="delivery-token-abc",
        preview_access_token="preview-token-xyz",
        environment="master",
        preview_secret="test-secret-123",
    )


@pytest.fixture
def fake_cms():
    return FakeContentfulClient()


@pytest.fixture
def fake_preview_cms():
    return FakeContentfulClient()


@pytest.fixture
def cms_clients(fake_cms, fake_preview_cms):
    return CMSClients(delivery=fake_cms, preview=fake_preview_cms)


@pytest.fixture
def client(site_config, cms_clients):
    """TestClient with fake delivery and preview clients."""
    app = create_app(site_config, cms_clients)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def offline_client(site_config):
    """TestClient for an app whose clients never initialized."""
    app = create_app(site_config, CMSClients())
    with TestClient(app) as c:
        yield c
