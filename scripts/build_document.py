#!/usr/bin/env python3
"""
Document Builder CLI

Builds CVs, formal letters and meeting protocols from a file of field values.

Commands:
    validate - Report missing required fields
    preview  - Write the HTML preview fragment
    layout   - Write the print layout as JSON
    export   - Validate, then write the PDF under its generated file name
    demo     - Write the demo field values for a document type

Fields files are YAML or JSON mappings of form field names to values. Every value
is read as a string, exactly as written.

Examples:\n

    build_document.py demo letter -o letter.yaml                 # Dump sample fields

    build_document.py validate letter letter.yaml                # Check required fields

    build_document.py preview cv fields.yaml -o preview.html     # HTML preview

    build_document.py export protocol protocol.yaml -d outs/pdf  # Write the PDF
"""

import os
from pathlib import Path
from typing import Optional

import typer
import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from docbuilder.contexts.documents import (
    Document,
    UnknownDocumentTypeError,
    create_document,
    load_demo_fields,
    missing_fields,
    validate,
)
from docbuilder.contexts.documents.logger import setup_documents_logger
from docbuilder.contexts.rendering import (
    export_json,
    prepare_export,
    produce_print_layout,
    write_pdf,
)
from docbuilder.contexts.rendering.logger import setup_rendering_logger
from docbuilder.contexts.templating import render_html
from docbuilder.utils.logger import session_log_dir

load_dotenv()
LOGS_PATH = Path(os.getenv("DOCBUILDER_LOGS_PATH", "outs/logs"))
OUTPUT_PATH = Path(os.getenv("DOCBUILDER_OUTPUT_PATH", "outs/documents"))


app = typer.Typer(
    help="Build CVs, letters and meeting protocols from field values",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_document(document_type: str, fields_file: Path) -> Document:
    """Read a fields file and create the document, exiting on bad input."""
    if not fields_file.exists():
        typer.secho(f"Error: Fields file not found: {fields_file}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    # BaseLoader keeps every scalar a string
    fields = yaml.load(fields_file.read_text(encoding="utf-8"), Loader=yaml.BaseLoader)
    if not isinstance(fields, dict):
        typer.secho(
            f"Error: Fields file must contain a mapping: {fields_file}\n", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    try:
        return create_document(document_type, fields)
    except UnknownDocumentTypeError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _write_or_echo(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN)


TypeArgument = Annotated[str, typer.Argument(help="Document type: cv, letter or protocol")]
FieldsArgument = Annotated[Path, typer.Argument(help="YAML or JSON file of field values")]


@app.command("validate")
def validate_command(document_type: TypeArgument, fields_file: FieldsArgument):
    """
    Check that all required fields are filled in.

    Examples:\n

        $ build_document.py validate cv fields.yaml
    """
    log_file = setup_documents_logger(session_log_dir("validate", LOGS_PATH))
    document = _load_document(document_type, fields_file)

    if validate(document):
        typer.secho("✓ All required fields present", fg=typer.colors.GREEN, bold=True)
        raise typer.Exit(code=0)

    typer.secho("✗ Missing required fields:", fg=typer.colors.RED, bold=True)
    for name in missing_fields(document):
        typer.echo(f"  - {name}")
    typer.echo(f"  Log: {log_file}")
    raise typer.Exit(code=1)


@app.command("preview")
def preview_command(
    document_type: TypeArgument,
    fields_file: FieldsArgument,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write HTML here instead of stdout"),
    ] = None,
):
    """
    Render the HTML preview fragment of a document.

    Examples:\n

        $ build_document.py preview letter letter.yaml -o preview.html
    """
    setup_documents_logger(session_log_dir("preview", LOGS_PATH))
    document = _load_document(document_type, fields_file)
    _write_or_echo(render_html(document), output)


@app.command("layout")
def layout_command(
    document_type: TypeArgument,
    fields_file: FieldsArgument,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write JSON here instead of stdout"),
    ] = None,
):
    """
    Write the print layout description (pdfmake document definition) as JSON.

    Examples:\n

        $ build_document.py layout protocol protocol.yaml -o layout.json
    """
    setup_rendering_logger(session_log_dir("layout", LOGS_PATH), document_type=document_type)
    document = _load_document(document_type, fields_file)
    _write_or_echo(export_json(produce_print_layout(document)), output)


@app.command("export")
def export_command(
    document_type: TypeArgument,
    fields_file: FieldsArgument,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-d", help="Directory for the PDF (default: DOCBUILDER_OUTPUT_PATH)"),
    ] = None,
):
    """
    Validate a document and write it as PDF.

    Invalid documents are refused with exit code 1.

    Examples:\n

        $ build_document.py export cv fields.yaml

        $ build_document.py export letter letter.yaml -d outs/letters
    """
    log_file = setup_rendering_logger(session_log_dir("export", LOGS_PATH), document_type=document_type)
    document = _load_document(document_type, fields_file)

    typer.secho(f"\nExporting: {document.kind.value}", fg=typer.colors.BLUE, bold=True)

    if not validate(document):
        typer.secho("✗ Missing required fields:", fg=typer.colors.RED, bold=True)
        for name in missing_fields(document):
            typer.echo(f"  - {name}")
        typer.echo(f"  Log: {log_file}")
        raise typer.Exit(code=1)

    bundle = prepare_export(document)
    pdf_path = write_pdf(bundle, output_dir or OUTPUT_PATH)

    typer.secho("✓ Export succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  PDF: {pdf_path}")
    typer.echo(f"  Log: {log_file}")
    typer.echo("")


@app.command("demo")
def demo_command(
    document_type: TypeArgument,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write YAML here instead of stdout"),
    ] = None,
):
    """
    Print the demo field values for a document type.

    Examples:\n

        $ build_document.py demo protocol -o protocol.yaml
    """
    try:
        fields = load_demo_fields(document_type)
    except ValueError:
        typer.secho(f"Error: Unknown document type: {document_type}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _write_or_echo(OmegaConf.to_yaml(OmegaConf.create(fields)), output)


if __name__ == "__main__":
    app()
