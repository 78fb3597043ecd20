"""Unit tests for export naming and layout serialization."""

import json

import pytest

from docbuilder.contexts.documents import create_document
from docbuilder.contexts.rendering import (
    ExportBundle,
    export_file_name,
    export_json,
    prepare_export,
    write_layout_json,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "tag, fields, expected",
    [
        ("cv", {"firstName": " Ann ", "lastName": "Lee Smith"}, "Resume_Ann_Lee_Smith.pdf"),
        ("letter", {"recipientName": "Mary Johnson"}, "Letter_Mary_Johnson.pdf"),
        (
            "letter",
            {"recipientName": "Mary  Johnson", "date": "2024-06-15"},
            "Letter_Mary_Johnson_15.06.2024.pdf",
        ),
        ("letter", {"recipientName": "Mary", "date": "next week"}, "Letter_Mary_next_week.pdf"),
        ("protocol", {"protocolNumber": "7", "date": "2024-06-15"}, "Protocol_7_15.06.2024.pdf"),
    ],
)
def test_export_file_name(tag, fields, expected):
    assert export_file_name(create_document(tag, fields)) == expected


@pytest.mark.unit
def test_export_file_name_has_no_whitespace():
    document = create_document("cv", {"firstName": "Mary\tAnn", "lastName": "van  der Berg"})
    name = export_file_name(document)

    assert name == "Resume_Mary_Ann_van_der_Berg.pdf"
    assert not any(ch.isspace() for ch in name)


@pytest.mark.unit
def test_prepare_export_bundles_name_and_layout(letter_fields, fixed_clock):
    bundle = prepare_export(create_document("letter", letter_fields), clock=fixed_clock)

    assert isinstance(bundle, ExportBundle)
    assert bundle.file_name == "Letter_Mary_Johnson.pdf"
    assert bundle.layout.default_style.font == "TimesNewRoman"
    assert bundle.layout.find("greeting")


@pytest.mark.unit
def test_prepare_export_does_not_validate(fixed_clock):
    """Test that an invalid document can still be laid out."""
    bundle = prepare_export(create_document("protocol", {}), clock=fixed_clock)
    assert bundle.file_name == "Protocol_.pdf"
    assert bundle.layout.content


@pytest.mark.unit
def test_export_json_round_trips_layout_dict(protocol_fields, fixed_clock):
    layout = prepare_export(create_document("protocol", protocol_fields), clock=fixed_clock).layout
    assert json.loads(export_json(layout)) == layout.to_dict()


@pytest.mark.unit
def test_write_layout_json(tmp_path, cv_fields, fixed_clock):
    bundle = prepare_export(create_document("cv", cv_fields), clock=fixed_clock)
    output_path = write_layout_json(bundle, tmp_path / "out")

    assert output_path == tmp_path / "out" / "Resume_Alexander_Peterson.json"
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["defaultStyle"]["font"] == "TimesNewRoman"
