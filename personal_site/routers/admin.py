"""Admin page with Contentful setup status and a live connectivity check."""

import json

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from personal_site.services.diagnostics import check_connectivity, environment_report
from personal_site.templating import templates

router = APIRouter()

# Importable into Contentful as the blogPost content type
CONTENT_MODEL = {
    "name": "Blog Post",
    "description": "Blog post content type for the personal blog",
    "displayField": "title",
    "fields": [
        {"id": "title", "name": "Title", "type": "Symbol", "required": True,
         "validations": [{"size": {"max": 200}}]},
        {"id": "slug", "name": "Slug", "type": "Symbol", "required": True,
         "validations": [{"unique": True}, {"regexp": {"pattern": "^[a-z0-9]+(?:-[a-z0-9]+)*$"}}]},
        {"id": "excerpt", "name": "Excerpt", "type": "Text", "required": False,
         "validations": [{"size": {"max": 500}}]},
        {"id": "content", "name": "Content", "type": "RichText", "required": True},
        {"id": "publishedDate", "name": "Published Date", "type": "Date", "required": False},
        {"id": "tags", "name": "Tags", "type": "Symbol", "required": False},
        {"id": "featured", "name": "Featured", "type": "Boolean", "required": False},
    ],
}


@router.get("/admin")
async def admin(request: Request):
    state = request.app.state
    delivery = await run_in_threadpool(check_connectivity, state.clients, False)
    preview = await run_in_threadpool(check_connectivity, state.clients, True)

    return templates.TemplateResponse(request, "admin.html", {
        "active_page": "admin",
        "page_title": "Admin - Contentful Setup",
        "env": environment_report(state.config),
        "checks": [delivery, preview],
        "content_model": json.dumps(CONTENT_MODEL, indent=2),
    })
