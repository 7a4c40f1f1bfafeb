#!/usr/bin/env python3
"""Personal site: blog and portfolio.

Launch: python3 run_site.py
Serves at http://0.0.0.0:8000 (or PORT env var)
"""

import uvicorn

from personal_site.config import HOST, LOG_LEVEL, PORT, SiteConfig


def main():
    print("=" * 60)
    print("  Matt Cammish - Personal Site")
    print("=" * 60)

    config = SiteConfig.from_env()
    if not config.space_id or not config.access_token:
        print("\n  WARNING: Contentful is not configured. Set environment variables:")
        print("    CONTENTFUL_SPACE_ID, CONTENTFUL_ACCESS_TOKEN")
        print("    (optional) CONTENTFUL_PREVIEW_ACCESS_TOKEN, CONTENTFUL_ENVIRONMENT")
        print("  Continuing with fallback posts...\n")
    if not config.preview_secret:
        print("  NOTE: PREVIEW_SECRET not set, /api/preview will reject every request\n")

    print(f"Starting server on {HOST}:{PORT}")
    print(f"\n  Site: http://{HOST}:{PORT}")
    print("  Press Ctrl+C to stop\n")

    from personal_site.app import create_app
    app = create_app(config)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL)


if __name__ == "__main__":
    main()
