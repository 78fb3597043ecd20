"""
Templating Context

Responsibilities:
- Converts **emphasis** markup in free-text fields into styled text runs
- Renders the HTML preview of a document from its Jinja2 template
- Loads and caches HTML templates and the print style sheet

Owns: Text formatting, HTML templates, style sheet configuration
Never: Decides which fields are required or builds print layout nodes
"""

from docbuilder.contexts.templating.exceptions import InvalidStyleSheetError, TemplateRenderError
from docbuilder.contexts.templating.html_renderer import render_html
from docbuilder.contexts.templating.registries import StyleRegistry, TemplateRegistry
from docbuilder.contexts.templating.text_formatter import (
    StyledRun,
    format_text,
    runs_to_html,
    runs_to_plaintext,
)

__all__ = [
    # Text formatting
    "StyledRun",
    "format_text",
    "runs_to_html",
    "runs_to_plaintext",
    # HTML preview
    "render_html",
    # Registries
    "TemplateRegistry",
    "StyleRegistry",
    # Errors
    "TemplateRenderError",
    "InvalidStyleSheetError",
]
