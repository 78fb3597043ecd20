"""
Integration tests for the full document flow: fields -> document -> preview and layout.

Every non-empty demo field must show up in both the HTML preview and the print
layout, and both outputs must carry the same content.
"""

import pytest

from docbuilder import create_document, produce_print_layout, render_html, validate
from docbuilder.contexts.rendering import prepare_export
from docbuilder.contexts.documents import load_demo_fields
from docbuilder.contexts.documents.defaults import LETTER_TEXT
from docbuilder.contexts.rendering import OrderedList, Text, UnorderedList
from docbuilder.contexts.rendering.layout import content_plaintext
from docbuilder.contexts.templating import format_text
from docbuilder.utils.text_processing import split_lines
from docbuilder.utils.timestamp import format_iso_date

DOCUMENT_TYPES = ["cv", "letter", "protocol"]


def _expected_fragments(document_type: str, name: str, value: str) -> list:
    """Text a field value must contribute to both outputs."""
    if document_type == "letter" and name == "date":
        # Only the export file name carries it
        return []
    if name == "addStamp":
        return [LETTER_TEXT["stamp"]] if value == "on" else []
    if name == "date":
        return [format_iso_date(value)]
    return [
        run.text.strip()
        for line in split_lines(value)
        for run in format_text(line)
        if run.text.strip()
    ]


def _layout_text(layout) -> str:
    parts = []
    for node in layout.iter_nodes():
        if isinstance(node, Text):
            parts.append(content_plaintext(node.content))
        elif isinstance(node, (OrderedList, UnorderedList)):
            parts.extend(content_plaintext(item) for item in node.items)
    return "\n".join(parts)


@pytest.mark.integration
@pytest.mark.parametrize("document_type", DOCUMENT_TYPES)
def test_demo_document_reflects_every_field(document_type, fixed_clock):
    fields = load_demo_fields(document_type)
    document = create_document(document_type, fields)

    assert validate(document)

    html = render_html(document, clock=fixed_clock)
    layout_text = _layout_text(produce_print_layout(document, clock=fixed_clock))

    for name, value in fields.items():
        for fragment in _expected_fragments(document_type, name, value):
            assert fragment in html, f"{name}: {fragment!r} missing from HTML"
            assert fragment in layout_text, f"{name}: {fragment!r} missing from layout"


@pytest.mark.integration
@pytest.mark.parametrize("document_type", DOCUMENT_TYPES)
def test_empty_document_still_renders(document_type, fixed_clock):
    """Test that invalid documents are rendered with placeholders instead of failing."""
    document = create_document(document_type, {})

    assert not validate(document)
    assert render_html(document, clock=fixed_clock)
    assert produce_print_layout(document, clock=fixed_clock).content


@pytest.mark.integration
def test_preview_and_layout_share_conditional_sections(fixed_clock):
    """Test that a section appears in the preview exactly when it appears in the layout."""
    fields = {"meetingType": "Board", "agenda": "Budget", "decisions": "", "discussion": "Talked"}
    document = create_document("protocol", fields)

    html = render_html(document, clock=fixed_clock)
    layout = produce_print_layout(document, clock=fixed_clock)

    for section in ["agenda", "discussion", "decisions"]:
        assert (f'data-section="{section}"' in html) == bool(layout.find(section))


@pytest.mark.integration
def test_cv_dates_in_both_outputs(cv_fields, fixed_clock):
    document = create_document("cv", cv_fields)

    html = render_html(document, clock=fixed_clock)
    layout = produce_print_layout(document, clock=fixed_clock)

    assert "Created: 15.06.2024" in html
    assert layout.find("created")[0].content == "Created: 15.06.2024"


@pytest.mark.integration
def test_letter_date_field_only_names_the_export(letter_fields, fixed_clock):
    """Test that a letter's date field goes into the file name while both outputs show today."""
    document = create_document("letter", {**letter_fields, "date": "2020-01-01"})

    html = render_html(document, clock=fixed_clock)
    layout = produce_print_layout(document, clock=fixed_clock)

    assert "15.06.2024" in html
    assert "01.01.2020" not in html
    assert layout.find("date")[0].content == "15.06.2024"
    assert prepare_export(document, clock=fixed_clock).file_name == "Letter_Mary_Johnson_01.01.2020.pdf"
