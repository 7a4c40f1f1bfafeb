"""Post content → HTML."""

from typing import Any

from markupsafe import Markup
from rich_text_renderer import RichTextRenderer

_renderer = RichTextRenderer()


def is_document(content: Any) -> bool:
    return isinstance(content, dict) and content.get("nodeType") == "document"


def render_content(content: Any) -> Markup:
    """Render a rich-text document, or pass through in-repo HTML markup."""
    if is_document(content):
        return Markup(_renderer.render(content))
    if isinstance(content, str):
        return Markup(content)
    return Markup("")
