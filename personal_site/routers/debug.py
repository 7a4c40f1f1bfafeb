"""GET /api/debug, environment and request diagnostics."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from personal_site.services.diagnostics import environment_report, request_report

router = APIRouter(prefix="/api")


@router.get("/debug")
async def debug(request: Request):
    config = request.app.state.config
    return {
        "message": "Diagnostic information",
        "environment": environment_report(config),
        "request": request_report(request, config),
        "cms": {
            "delivery_client": request.app.state.clients.delivery is not None,
            "preview_client": request.app.state.clients.preview is not None,
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "note": "This endpoint is for debugging purposes only",
    }
