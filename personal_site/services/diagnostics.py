"""Environment and connectivity reports for the debug, preview and admin surfaces.

Credentials are only ever reported as "set" / "not set".
"""

from fastapi import Request

from personal_site.cms_client import CMSClients
from personal_site.config import PREVIEW_COOKIE, SiteConfig, resolve_preview
from personal_site.services import content_fetcher
from personal_site.services.content_validator import is_valid

_WITHHELD_HEADERS = {"authorization", "cookie", "proxy-authorization"}


def _presence(value: str) -> str:
    return "set" if value else "not set"


def environment_report(config: SiteConfig) -> dict:
    return {
        "CONTENTFUL_SPACE_ID": _presence(config.space_id),
        "CONTENTFUL_ACCESS_TOKEN": _presence(config.access_token),
        "CONTENTFUL_PREVIEW_ACCESS_TOKEN": _presence(config.preview_access_token),
        "CONTENTFUL_ENVIRONMENT": config.environment,
        "CONTENTFUL_PREVIEW_MODE": (
            "not set" if config.preview_mode is None else str(config.preview_mode).lower()
        ),
        "PREVIEW_SECRET": _presence(config.preview_secret),
        "DEPLOY_ENV": config.deploy_env or "not set",
        "APP_ENV": config.app_env,
    }


def request_report(request: Request, config: SiteConfig) -> dict:
    cookie = request.cookies.get(PREVIEW_COOKIE)
    return {
        "host": request.headers.get("host", "unknown"),
        "url": str(request.url),
        "method": request.method,
        "user_agent": request.headers.get("user-agent", "unknown"),
        "header_names": sorted(k for k in request.headers.keys() if k not in _WITHHELD_HEADERS),
        "cookie_names": sorted(request.cookies.keys()),
        "preview_cookie": "set" if cookie else "not set",
        "is_preview": resolve_preview(config, cookie),
    }


def check_connectivity(clients: CMSClients, preview: bool = False) -> dict:
    """Run the list query once and summarize what came back."""
    status = {
        "delivery_client": clients.delivery is not None,
        "preview_client": clients.preview is not None,
        "mode": "preview" if preview else "delivery",
    }
    result = content_fetcher.list_posts(clients, preview)
    if result.ok:
        status.update({
            "ok": True,
            "entries": len(result.value),
            "valid_entries": sum(1 for e in result.value if is_valid(e)),
        })
    else:
        status.update({
            "ok": False,
            "error_kind": result.error.kind.value,
            "error": result.error.message,
        })
    return status
