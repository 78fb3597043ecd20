"""
docbuilder - Form-driven document generation

Turns a flat field-value mapping into an HTML preview and a print layout
description for three kinds of documents: CV, formal letter and meeting protocol.

Architecture:
- Documents Context: Document model, validation and the type registry
- Templating Context: Text formatting and HTML preview rendering
- Rendering Context: Print layout trees, export naming and PDF output
"""

from docbuilder.contexts.documents import (
    Document,
    DocumentKind,
    UnknownDocumentTypeError,
    create_document,
    validate,
)
from docbuilder.contexts.rendering import (
    PrintLayout,
    export_file_name,
    prepare_export,
    produce_print_layout,
    render_pdf,
)
from docbuilder.contexts.templating import format_text, render_html

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocumentKind",
    "UnknownDocumentTypeError",
    "create_document",
    "validate",
    "render_html",
    "format_text",
    "PrintLayout",
    "produce_print_layout",
    "prepare_export",
    "export_file_name",
    "render_pdf",
]
