"""
Document Model

A document is one of three kinds (CV, letter, protocol) carrying the field-value
mapping it was created from. The mapping is frozen at construction; each preview or
export request builds a new document.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from docbuilder.contexts.documents.logger import log_validation_result
from docbuilder.utils.text_processing import is_blank

# Value a checked checkbox submits
CHECKBOX_ON = "on"


class DocumentKind(str, Enum):
    """Supported document types. Values are the type tags used by callers."""

    CV = "cv"
    LETTER = "letter"
    PROTOCOL = "protocol"

    def __str__(self) -> str:
        return self.value


REQUIRED_FIELDS: Dict[DocumentKind, tuple] = {
    DocumentKind.CV: ("firstName", "lastName", "phone"),
    DocumentKind.LETTER: ("recipientName", "subject", "content"),
    DocumentKind.PROTOCOL: ("meetingType", "date", "participants"),
}


def _coerce_value(value: Any) -> str:
    # Booleans come from checkbox-like sources (YAML, JSON); map them to what a form submits
    if value is None or value is False:
        return ""
    if value is True:
        return CHECKBOX_ON
    return value if isinstance(value, str) else str(value)


def _freeze_fields(fields: Mapping[str, Any]) -> Mapping[str, str]:
    return MappingProxyType({str(key): _coerce_value(value) for key, value in fields.items()})


@dataclass(frozen=True)
class Document:
    """
    A single document request.

    Attributes:
        kind: Document type
        fields: Read-only field-value mapping (missing keys read as "")
    """

    kind: DocumentKind
    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "kind", DocumentKind(self.kind))
        object.__setattr__(self, "fields", _freeze_fields(self.fields or {}))

    def get(self, name: str) -> str:
        """Field value, or "" when the field was not submitted."""
        return self.fields.get(name, "")

    def has(self, name: str) -> bool:
        """True if the field holds a non-blank value."""
        return not is_blank(self.fields.get(name))

    def is_checked(self, name: str) -> bool:
        """True if a checkbox field carries the affirmative literal."""
        return self.fields.get(name) == CHECKBOX_ON


def missing_fields(document: Document) -> List[str]:
    """
    List the required fields of a document that are absent or blank.

    Args:
        document: Document to check

    Returns:
        Names of missing required fields, in declaration order
    """
    return [name for name in REQUIRED_FIELDS[document.kind] if not document.has(name)]


def validate(document: Document) -> bool:
    """
    Check that the required fields for the document's kind are present.

    Advisory only: rendering and layout still work on an invalid document.
    Never raises.
    """
    missing = missing_fields(document)
    log_validation_result(document.kind.value, missing)
    return not missing
