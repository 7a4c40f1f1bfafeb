"""Site configuration loaded from environment variables."""

import hashlib
import hmac
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Jinja2 templates for the web UI
WEB_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "info")

# Contentful
DELIVERY_API_HOST = "cdn.contentful.com"
PREVIEW_API_HOST = "preview.contentful.com"
BLOG_CONTENT_TYPE = "blogPost"

# Preview mode cookie (set by /api/preview)
PREVIEW_COOKIE = "preview-mode"
PREVIEW_COOKIE_MAX_AGE = 60 * 60

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SiteConfig:
    """Everything the site reads from the environment, resolved once."""

    space_id: str = ""
    access_token: str = ""
    preview_access_token: str = ""
    environment: str = "master"
    preview_mode: bool | None = None
    deploy_env: str = ""
    app_env: str = "development"
    preview_secret: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SiteConfig":
        env = os.environ if environ is None else environ
        raw_preview = env.get("CONTENTFUL_PREVIEW_MODE", "").strip().lower()
        return cls(
            space_id=env.get("CONTENTFUL_SPACE_ID", "").strip(),
            access_token=env.get("CONTENTFUL_ACCESS_TOKEN", "").strip(),
            preview_access_token=env.get("CONTENTFUL_PREVIEW_ACCESS_TOKEN", "").strip(),
            environment=env.get("CONTENTFUL_ENVIRONMENT", "").strip() or "master",
            preview_mode=(raw_preview in _TRUTHY) if raw_preview else None,
            deploy_env=env.get("DEPLOY_ENV", "").strip().lower(),
            app_env=env.get("APP_ENV", "").strip().lower() or "development",
            preview_secret=env.get("PREVIEW_SECRET", ""),
        )

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


def preview_token(config: SiteConfig) -> str:
    """Cookie value proving the preview secret was presented. Empty when no secret is set."""
    if not config.preview_secret:
        return ""
    return hmac.new(config.preview_secret.encode(), b"preview-mode", hashlib.sha256).hexdigest()


def resolve_preview(config: SiteConfig, cookie_value: str | None = None) -> bool:
    """Decide preview vs. production for one request.

    Precedence: a preview cookie carrying the current token, then
    CONTENTFUL_PREVIEW_MODE, then DEPLOY_ENV == "preview". Anything else
    is production.
    """
    token = preview_token(config)
    if token and cookie_value and hmac.compare_digest(cookie_value.encode(), token.encode()):
        return True
    if config.preview_mode is not None:
        return config.preview_mode
    return config.deploy_env == "preview"
