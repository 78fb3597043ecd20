"""
Export Preparation

Pairs a document's print layout with the file name it should be saved under, and
serializes layouts for external PDF engines.
"""

import json
from dataclasses import dataclass
from pathlib import Path

from docbuilder.contexts.documents.document import Document, DocumentKind
from docbuilder.contexts.rendering.layout import PrintLayout
from docbuilder.contexts.rendering.logger import _log_debug
from docbuilder.contexts.rendering.print_layout import produce_print_layout
from docbuilder.contexts.templating.registries import StyleRegistry
from docbuilder.utils.text_processing import collapse_whitespace
from docbuilder.utils.timestamp import Clock, format_iso_date, today

DEFAULT_FILE_NAME = "document.pdf"

FILE_NAME_PREFIXES = {
    DocumentKind.CV: "Resume",
    DocumentKind.LETTER: "Letter",
    DocumentKind.PROTOCOL: "Protocol",
}


@dataclass(frozen=True)
class ExportBundle:
    """
    Everything a PDF engine needs to write a document.

    Attributes:
        file_name: Suggested file name (whitespace collapsed to underscores)
        layout: Print layout with default style attached
    """

    file_name: str
    layout: PrintLayout


def _with_date(stem: str, iso_date: str) -> str:
    formatted = format_iso_date(iso_date)
    return f"{stem}_{formatted}" if formatted else stem


def export_file_name(document: Document) -> str:
    """
    Build the export file name from document fields.

    CV:       Resume_<firstName>_<lastName>.pdf
    Letter:   Letter_<recipientName>[_<date>].pdf
    Protocol: Protocol_<protocolNumber>[_<date>].pdf

    Dates are shown as DD.MM.YYYY (unparsable dates verbatim). Every whitespace
    run in the result becomes a single underscore.

    Examples:
        Resume_Ann_Lee.pdf
        Letter_Mary_Johnson_15.06.2024.pdf
    """
    prefix = FILE_NAME_PREFIXES.get(document.kind)
    if prefix is None:
        return DEFAULT_FILE_NAME

    match document.kind:
        case DocumentKind.CV:
            stem = f"{prefix}_{document.get('firstName').strip()}_{document.get('lastName').strip()}"
        case DocumentKind.LETTER:
            stem = _with_date(f"{prefix}_{document.get('recipientName').strip()}", document.get("date"))
        case DocumentKind.PROTOCOL:
            stem = _with_date(f"{prefix}_{document.get('protocolNumber').strip()}", document.get("date"))

    return collapse_whitespace(f"{stem}.pdf")


def prepare_export(
    document: Document,
    clock: Clock = today,
    style_registry: StyleRegistry = None,
) -> ExportBundle:
    """
    Produce the layout and file name for exporting a document.

    Does not check validity; callers are expected to run validate() first.
    """
    bundle = ExportBundle(
        file_name=export_file_name(document),
        layout=produce_print_layout(document, clock=clock, style_registry=style_registry),
    )
    _log_debug(f"Prepared export bundle {bundle.file_name}")
    return bundle


def export_json(layout: PrintLayout, indent: int = 2) -> str:
    """Serialize a layout to a JSON document definition."""
    return json.dumps(layout.to_dict(), indent=indent, ensure_ascii=False)


def write_layout_json(bundle: ExportBundle, output_dir: Path) -> Path:
    """
    Write a bundle's layout as JSON next to where its PDF would go.

    Returns:
        Path of the written .json file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / Path(bundle.file_name).with_suffix(".json").name
    output_path.write_text(export_json(bundle.layout), encoding="utf-8")
    _log_debug(f"Wrote layout JSON to {output_path}")
    return output_path
