"""Jinja2 environment shared by the page routers."""

from datetime import date

from fastapi.templating import Jinja2Templates

from personal_site.config import WEB_TEMPLATES_DIR
from personal_site.services.rich_text import render_content

SITE_TITLE = "Matt Cammish"
SITE_DESCRIPTION = "My thoughts on product, tech and an exploration of curiosities"


def format_date(value: date) -> str:
    """January 15, 2024"""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


templates = Jinja2Templates(directory=str(WEB_TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["render_content"] = render_content
templates.env.globals["site_title"] = SITE_TITLE
templates.env.globals["site_description"] = SITE_DESCRIPTION
