"""
Rendering Context

Responsibilities:
- Builds print layout trees for each document kind
- Attaches the default style and named styles from the style sheet
- Names export files and serializes layouts
- Writes PDFs from layouts through reportlab

Owns: Layout nodes, export naming, PDF output
Never: Decides document validity or modifies field values
"""

from docbuilder.contexts.rendering.export import (
    ExportBundle,
    export_file_name,
    export_json,
    prepare_export,
    write_layout_json,
)
from docbuilder.contexts.rendering.layout import (
    Canvas,
    Column,
    Columns,
    Line,
    OrderedList,
    PrintLayout,
    Stack,
    Style,
    Text,
    UnorderedList,
)
from docbuilder.contexts.rendering.pdf_renderer import PDFRenderer, render_pdf, write_pdf
from docbuilder.contexts.rendering.print_layout import produce_print_layout

__all__ = [
    # Layout tree
    "PrintLayout",
    "Style",
    "Text",
    "Stack",
    "Column",
    "Columns",
    "Line",
    "Canvas",
    "UnorderedList",
    "OrderedList",
    # Layout production
    "produce_print_layout",
    # Export
    "ExportBundle",
    "export_file_name",
    "prepare_export",
    "export_json",
    "write_layout_json",
    # PDF
    "PDFRenderer",
    "render_pdf",
    "write_pdf",
]
