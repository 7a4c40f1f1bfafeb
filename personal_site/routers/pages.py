"""Public pages: home, blog detail, about and recommendations."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from personal_site.config import PREVIEW_COOKIE, resolve_preview
from personal_site.recommendations import RECOMMENDATIONS
from personal_site.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()


def _preview(request: Request) -> bool:
    return resolve_preview(request.app.state.config, request.cookies.get(PREVIEW_COOKIE))


def not_found_page(request: Request):
    return templates.TemplateResponse(request, "404.html", {
        "page_title": "Post Not Found",
    }, status_code=404)


@router.get("/")
async def home(request: Request):
    blog = request.app.state.blog
    listing = await run_in_threadpool(blog.load_posts, _preview(request))

    return templates.TemplateResponse(request, "home.html", {
        "active_page": "home",
        "posts": listing.posts,
        "is_contentful": listing.is_contentful,
    })


@router.get("/blog")
async def blog_index():
    return RedirectResponse("/", status_code=307)


@router.get("/blog/{slug}")
async def blog_post(request: Request, slug: str):
    blog = request.app.state.blog
    post = await run_in_threadpool(blog.get_post, slug, _preview(request))
    if post is None:
        return not_found_page(request)

    logger.info("Rendering blog post %s (source=%s, entry=%s)", post.slug, post.source, post.entry_id or "N/A")
    return templates.TemplateResponse(request, "post.html", {
        "active_page": "blog",
        "page_title": post.title,
        "page_description": post.excerpt,
        "post": post,
    })


@router.get("/about")
async def about(request: Request):
    return templates.TemplateResponse(request, "about.html", {
        "active_page": "about",
        "page_title": "About",
    })


@router.get("/recommendations")
async def recommendations(request: Request):
    return templates.TemplateResponse(request, "recommendations.html", {
        "active_page": "recommendations",
        "page_title": "Recommendations",
        "recommendations": RECOMMENDATIONS,
    })
