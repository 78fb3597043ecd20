"""
HTML Preview Renderer

Renders a document into a self-contained HTML fragment using the Jinja2 template
for its kind.
"""

from typing import Any, Dict

from jinja2 import TemplateError

from docbuilder.contexts.documents.defaults import CV_TEXT, LETTER_TEXT, PROTOCOL_TEXT
from docbuilder.contexts.documents.document import Document, DocumentKind
from docbuilder.contexts.documents.views import (
    build_cv_view,
    build_letter_view,
    build_protocol_view,
)
from docbuilder.contexts.templating.exceptions import TemplateRenderError
from docbuilder.contexts.templating.logger import _log_error, log_render_result
from docbuilder.contexts.templating.registries import TemplateRegistry
from docbuilder.utils.timestamp import Clock, today

_default_registry: TemplateRegistry = None


def get_default_template_registry() -> TemplateRegistry:
    """Shared registry built from environment settings on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def _template_context(document: Document, clock: Clock) -> Dict[str, Any]:
    match document.kind:
        case DocumentKind.CV:
            return {"view": build_cv_view(document, clock), "text": CV_TEXT}
        case DocumentKind.LETTER:
            return {"view": build_letter_view(document, clock), "text": LETTER_TEXT}
        case DocumentKind.PROTOCOL:
            return {"view": build_protocol_view(document), "text": PROTOCOL_TEXT}


def render_html(
    document: Document,
    clock: Clock = today,
    registry: TemplateRegistry = None,
) -> str:
    """
    Render the HTML preview of a document.

    Output is deterministic for a given document and clock. CVs and letters embed
    the date returned by clock() at call time.

    Args:
        document: Document to render
        clock: Date source for the "created" stamp
        registry: Template registry (defaults to the shared one)

    Returns:
        HTML fragment string

    Raises:
        TemplateRenderError: If the template fails to render
    """
    registry = registry or get_default_template_registry()
    type_name = document.kind.value
    template = registry.get_template(type_name)

    try:
        html = template.render(**_template_context(document, clock))
    except TemplateError as e:
        _log_error(f"Failed to render {type_name} preview: {e}")
        raise TemplateRenderError(
            f"Failed to render {type_name} preview",
            type_name=type_name,
            template_path=registry.get_template_path(type_name),
            original_error=e,
        ) from e

    log_render_result(type_name, html, registry.escape_html)
    return html
