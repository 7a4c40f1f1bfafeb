"""Preview mode: enable with the shared secret, clear with a POST.

Preview is carried by the ``preview-mode`` cookie only. Its value is an HMAC
of the secret, never a plain flag; the process environment is never touched.
"""

import hmac
import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse

from personal_site.config import PREVIEW_COOKIE, PREVIEW_COOKIE_MAX_AGE, preview_token
from personal_site.services.diagnostics import environment_report, request_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/preview")


def _secret_matches(given: str, expected: str) -> bool:
    """Constant-time compare. An unset secret never matches."""
    if not expected or not given:
        return False
    return hmac.compare_digest(given.encode(), expected.encode())


def _safe_path(path: str) -> str:
    """Only same-site absolute paths; anything else redirects home."""
    if not path.startswith("/") or path.startswith("//") or "\\" in path:
        return "/"
    return path


@router.get("")
async def enable_preview(
    request: Request,
    secret: str = Query(""),
    path: str = Query("/"),
):
    config = request.app.state.config

    if not _secret_matches(secret, config.preview_secret):
        logger.warning("Rejected preview request from %s",
                       request.client.host if request.client else "unknown")
        return JSONResponse({
            "message": "Invalid token. Preview mode not enabled.",
            "environment": environment_report(config),
            "request": request_report(request, config),
            "note": "To enable preview mode, use the correct secret token",
        }, status_code=401)

    response = RedirectResponse(_safe_path(path), status_code=307)
    response.set_cookie(
        PREVIEW_COOKIE, preview_token(config),
        path="/",
        httponly=True,
        secure=config.is_production,
        samesite="strict",
        max_age=PREVIEW_COOKIE_MAX_AGE,
    )
    response.headers["X-Preview-Mode"] = "enabled"
    response.headers["X-Environment"] = config.deploy_env or "unknown"
    return response


@router.post("/clear")
async def clear_preview():
    response = RedirectResponse("/", status_code=303)
    response.delete_cookie(PREVIEW_COOKIE, path="/")
    return response
