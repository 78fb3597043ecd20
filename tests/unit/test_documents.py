"""Unit tests for the document model, validation and the type registry."""

from itertools import product

import pytest

from docbuilder.contexts.documents import (
    Document,
    DocumentKind,
    DocumentRegistry,
    KindFactory,
    UnknownDocumentTypeError,
    create_document,
    load_demo_fields,
    missing_fields,
    validate,
)


@pytest.mark.unit
@pytest.mark.parametrize("tag", ["cv", "letter", "protocol"])
def test_create_document_for_each_tag(tag):
    """Test that every supported tag creates a document of that kind."""
    document = create_document(tag, {"a": "b"})

    assert document.kind == DocumentKind(tag)
    assert document.get("a") == "b"


@pytest.mark.unit
def test_create_document_accepts_kind_member():
    document = create_document(DocumentKind.LETTER, {})
    assert document.kind is DocumentKind.LETTER


@pytest.mark.unit
def test_create_document_unknown_tag():
    """Test that an unknown tag raises the named error."""
    with pytest.raises(UnknownDocumentTypeError) as exc_info:
        create_document("bogus-tag", {})

    assert exc_info.value.type_name == "bogus-tag"
    assert str(exc_info.value).startswith("Unknown document type: bogus-tag")
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.unit
def test_registry_lookup_is_exact():
    """Test that tags are not normalized (case matters)."""
    with pytest.raises(UnknownDocumentTypeError):
        create_document("CV", {})


@pytest.mark.unit
def test_registry_types_and_custom_factories():
    registry = DocumentRegistry({"memo": KindFactory(DocumentKind.LETTER)})

    assert registry.types() == ["memo"]
    assert registry.create_document("memo", {}).kind is DocumentKind.LETTER
    with pytest.raises(UnknownDocumentTypeError):
        registry.create_document("cv", {})


@pytest.mark.unit
def test_default_registry_types():
    assert DocumentRegistry().types() == ["cv", "letter", "protocol"]


@pytest.mark.unit
def test_document_fields_are_frozen_copy():
    """Test that a document neither shares nor exposes a mutable mapping."""
    fields = {"firstName": "Ann"}
    document = create_document("cv", fields)

    fields["firstName"] = "Changed"
    assert document.get("firstName") == "Ann"

    with pytest.raises(TypeError):
        document.fields["firstName"] = "Changed"


@pytest.mark.unit
def test_document_coerces_values():
    """Test that booleans, None and numbers become form strings."""
    document = Document(
        kind="letter",
        fields={"addStamp": True, "other": False, "missing": None, "number": 7},
    )

    assert document.get("addStamp") == "on"
    assert document.get("other") == ""
    assert document.get("missing") == ""
    assert document.get("number") == "7"
    assert document.is_checked("addStamp")
    assert not document.is_checked("other")


@pytest.mark.unit
def test_document_get_missing_field():
    assert Document(kind="cv").get("nothing") == ""


@pytest.mark.unit
def test_document_invalid_kind():
    with pytest.raises(ValueError):
        Document(kind="memo")


@pytest.mark.unit
@pytest.mark.parametrize("first, last, phone", list(product(["Ann", ""], ["Lee", ""], ["555", ""])))
def test_cv_validate_truth_table(first, last, phone):
    """Test that a CV is valid exactly when first name, last name and phone are set."""
    document = create_document("cv", {"firstName": first, "lastName": last, "phone": phone})

    assert validate(document) == bool(first and last and phone)


@pytest.mark.unit
def test_whitespace_only_counts_as_missing():
    document = create_document("cv", {"firstName": "   ", "lastName": "Lee", "phone": "555"})

    assert not validate(document)
    assert missing_fields(document) == ["firstName"]


@pytest.mark.unit
def test_letter_required_fields():
    document = create_document("letter", {"recipientName": "Mary"})

    assert not validate(document)
    assert missing_fields(document) == ["subject", "content"]


@pytest.mark.unit
def test_protocol_required_fields():
    document = create_document(
        "protocol", {"meetingType": "Board", "date": "2024-06-15", "participants": "A\nB"}
    )
    assert validate(document)
    assert missing_fields(create_document("protocol", {})) == ["meetingType", "date", "participants"]


@pytest.mark.unit
def test_demo_fields_are_valid(cv_fields, letter_fields, protocol_fields):
    """Test that every demo data set passes validation."""
    assert validate(create_document("cv", cv_fields))
    assert validate(create_document("letter", letter_fields))
    assert validate(create_document("protocol", protocol_fields))


@pytest.mark.unit
def test_demo_fields_returns_fresh_dict(cv_fields):
    cv_fields["firstName"] = "Changed"
    assert load_demo_fields("cv")["firstName"] == "Alexander"


@pytest.mark.unit
def test_demo_fields_unknown_kind():
    with pytest.raises(ValueError):
        load_demo_fields("memo")
