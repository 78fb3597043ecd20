"""Unit tests for display views shared by the preview and the print layout."""

from datetime import date

import pytest

from docbuilder.contexts.documents import create_document
from docbuilder.contexts.documents.defaults import LETTER_PLACEHOLDERS, NOT_SPECIFIED
from docbuilder.contexts.documents.views import (
    CVView,
    LetterView,
    ProtocolView,
    build_cv_view,
    build_letter_view,
    build_protocol_view,
    build_view,
)


@pytest.mark.unit
def test_cv_full_name_includes_middle_name(fixed_clock):
    document = create_document("cv", {"firstName": "Ann", "middleName": "Marie", "lastName": "Lee"})
    assert build_cv_view(document, fixed_clock).full_name == "Ann Marie Lee"


@pytest.mark.unit
def test_cv_full_name_without_middle_name(fixed_clock):
    document = create_document("cv", {"firstName": " Ann ", "middleName": "  ", "lastName": "Lee"})
    assert build_cv_view(document, fixed_clock).full_name == "Ann Lee"


@pytest.mark.unit
def test_cv_placeholders_for_empty_contacts(fixed_clock):
    """Test that empty optional contact fields show the placeholder."""
    document = create_document("cv", {"firstName": "Ann", "lastName": "Lee", "phone": "555"})
    view = build_cv_view(document, fixed_clock)

    assert [(c.label, c.value) for c in view.contacts] == [
        ("Phone", "555"),
        ("Email", NOT_SPECIFIED),
        ("City", NOT_SPECIFIED),
        ("Date of birth", NOT_SPECIFIED),
    ]
    assert view.position == NOT_SPECIFIED


@pytest.mark.unit
def test_cv_skills_trimmed_and_blank_lines_dropped(fixed_clock):
    document = create_document("cv", {"skills": "  Python \n\n SQL\r\n   \nGit"})
    assert build_cv_view(document, fixed_clock).skills == ["Python", "SQL", "Git"]


@pytest.mark.unit
def test_cv_sections_only_when_filled_in_display_order(fixed_clock):
    """Test that only non-empty sections are kept, in fixed order."""
    document = create_document(
        "cv", {"languages": "English", "objective": "Grow", "experience": "   "}
    )
    sections = build_cv_view(document, fixed_clock).sections

    assert [section.name for section in sections] == ["objective", "languages"]
    assert sections[0].title == "PROFESSIONAL OBJECTIVE"


@pytest.mark.unit
def test_cv_created_date_from_clock():
    document = create_document("cv", {})

    assert build_cv_view(document, lambda: date(2024, 1, 2)).created == "02.01.2024"
    assert build_cv_view(document, lambda: date(2025, 12, 31)).created == "31.12.2025"


@pytest.mark.unit
def test_letter_date_always_from_clock(fixed_clock):
    document = create_document("letter", {"date": "2023-03-01"})
    assert build_letter_view(document, fixed_clock).date == "15.06.2024"


@pytest.mark.unit
def test_letter_date_defaults_to_clock(fixed_clock):
    document = create_document("letter", {})
    assert build_letter_view(document, fixed_clock).date == "15.06.2024"


@pytest.mark.unit
def test_letter_placeholders(fixed_clock):
    view = build_letter_view(create_document("letter", {"recipientName": "Mary"}), fixed_clock)

    assert view.organization_name == LETTER_PLACEHOLDERS["organizationName"]
    assert view.organization_contacts == "Tel.: +1 (___) ___-____, Email: email@organization.com"
    assert view.outgoing_number == "No. ___"
    assert view.greeting_line == "Dear Mary!"
    assert view.closing == "Sincerely,"
    assert view.sender_name == ""


@pytest.mark.unit
@pytest.mark.parametrize("value, expected", [("on", True), ("", False), ("yes", False), (True, True)])
def test_letter_stamp_only_for_checkbox_literal(value, expected, fixed_clock):
    document = create_document("letter", {"addStamp": value})
    assert build_letter_view(document, fixed_clock).stamp is expected


@pytest.mark.unit
def test_letter_attachments_split_into_lines(fixed_clock):
    document = create_document("letter", {"attachments": "Agreement\n\n  Price list  "})
    assert build_letter_view(document, fixed_clock).attachments == ["Agreement", "Price list"]


@pytest.mark.unit
def test_protocol_details():
    document = create_document(
        "protocol", {"protocolNumber": "7", "date": "2024-06-15", "chairman": "Peterson"}
    )
    view = build_protocol_view(document)

    assert [(d.label, d.value) for d in view.details] == [
        ("Protocol No.:", "7"),
        ("Meeting date:", "15.06.2024"),
        ("Meeting time:", NOT_SPECIFIED),
        ("Location:", NOT_SPECIFIED),
    ]
    assert [(o.label, o.value) for o in view.officers] == [
        ("Chairman:", "Peterson"),
        ("Secretary:", NOT_SPECIFIED),
    ]
    assert view.chairman == "Peterson"
    assert view.secretary == ""


@pytest.mark.unit
def test_protocol_empty_date_shows_placeholder():
    view = build_protocol_view(create_document("protocol", {}))
    assert view.details[1].value == NOT_SPECIFIED


@pytest.mark.unit
def test_protocol_lists_trimmed():
    document = create_document(
        "protocol",
        {"participants": "A\n\nB", "agenda": "  First  \n\n\nSecond\n", "decisions": "\n"},
    )
    view = build_protocol_view(document)

    assert view.participants == ["A", "B"]
    assert view.agenda == ["First", "Second"]
    assert view.decisions == []
    assert view.discussion == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "tag, view_type", [("cv", CVView), ("letter", LetterView), ("protocol", ProtocolView)]
)
def test_build_view_dispatches_by_kind(tag, view_type, fixed_clock):
    assert isinstance(build_view(create_document(tag, {}), fixed_clock), view_type)
