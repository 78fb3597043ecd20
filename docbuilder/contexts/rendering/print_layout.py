"""
Print Layout Producer

Builds the print layout tree of a document and attaches the document-wide default
style and the named styles of its kind.
"""

from docbuilder.contexts.documents.document import Document, DocumentKind
from docbuilder.contexts.documents.views import (
    build_cv_view,
    build_letter_view,
    build_protocol_view,
)
from docbuilder.contexts.rendering.cv_layout import build_cv_layout
from docbuilder.contexts.rendering.layout import PrintLayout, Style
from docbuilder.contexts.rendering.letter_layout import build_letter_layout
from docbuilder.contexts.rendering.logger import log_layout_result
from docbuilder.contexts.rendering.protocol_layout import build_protocol_layout
from docbuilder.contexts.templating.registries import StyleRegistry
from docbuilder.utils.timestamp import Clock, today

_default_registry: StyleRegistry = None


def get_default_style_registry() -> StyleRegistry:
    """Shared style registry built from environment settings on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = StyleRegistry()
    return _default_registry


def produce_print_layout(
    document: Document,
    clock: Clock = today,
    style_registry: StyleRegistry = None,
) -> PrintLayout:
    """
    Produce the print layout description of a document.

    Content matches render_html() for the same document and clock: both are built
    from the same view. Free-text fields keep their **emphasis** as styled runs.

    Args:
        document: Document to lay out
        clock: Date source for the "created" stamp
        style_registry: Style sheet source (defaults to the shared one)

    Returns:
        PrintLayout with default style (font family, base size, alignment) attached
    """
    registry = style_registry or get_default_style_registry()

    match document.kind:
        case DocumentKind.CV:
            content = build_cv_layout(build_cv_view(document, clock))
        case DocumentKind.LETTER:
            content = build_letter_layout(build_letter_view(document, clock))
        case DocumentKind.PROTOCOL:
            content = build_protocol_layout(build_protocol_view(document))

    layout = PrintLayout(
        content=content,
        default_style=Style.from_dict(registry.get_default_style()),
        styles={
            name: Style.from_dict(style)
            for name, style in registry.get_styles(document.kind.value).items()
        },
    )

    log_layout_result(document.kind.value, sum(1 for _ in layout.iter_nodes()))
    return layout
