"""Contentful client construction for the delivery and preview APIs."""

import logging
from dataclasses import dataclass

import contentful

from personal_site.config import DELIVERY_API_HOST, PREVIEW_API_HOST, SiteConfig
from personal_site.results import CMSConfigError

logger = logging.getLogger(__name__)


def create_cms_client(config: SiteConfig, preview: bool = False) -> contentful.Client:
    """Build a read-only Contentful client. Raises CMSConfigError if credentials are missing."""
    token = config.preview_access_token if preview else config.access_token
    token_var = "CONTENTFUL_PREVIEW_ACCESS_TOKEN" if preview else "CONTENTFUL_ACCESS_TOKEN"

    missing = []
    if not config.space_id:
        missing.append("CONTENTFUL_SPACE_ID")
    if not token:
        missing.append(token_var)
    if missing:
        raise CMSConfigError(f"{', '.join(missing)} must be set", missing)

    return contentful.Client(
        config.space_id,
        token,
        api_url=PREVIEW_API_HOST if preview else DELIVERY_API_HOST,
        environment=config.environment,
        content_type_cache=False,
        max_rate_limit_retries=0,
    )


@dataclass(frozen=True)
class CMSClients:
    """The delivery and preview clients. Either slot is None if it failed to initialize."""

    delivery: contentful.Client | None = None
    preview: contentful.Client | None = None

    @property
    def available(self) -> bool:
        return self.delivery is not None or self.preview is not None

    def select(self, preview: bool = False) -> contentful.Client | None:
        """Return the client for this mode, downgrading to delivery if preview never initialized."""
        if preview and self.preview is not None:
            return self.preview
        if preview:
            logger.debug("Preview client unavailable, using delivery client")
        return self.delivery


def build_clients(config: SiteConfig) -> CMSClients:
    """Construct both clients once at startup. Failures are logged and cached as None."""
    slots = {}
    for name, preview in (("delivery", False), ("preview", True)):
        try:
            slots[name] = create_cms_client(config, preview=preview)
        except CMSConfigError as e:
            logger.warning("Contentful %s client disabled: %s", name, e)
            slots[name] = None

    clients = CMSClients(**slots)
    if not clients.available:
        logger.warning("Contentful is not configured, serving fallback posts only")
    return clients
