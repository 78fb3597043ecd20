"""
Document Views

Resolved, display-ready content for each document kind. A view is computed once
from a document's field snapshot and is the only input of both the HTML preview
and the print layout, so the two outputs always carry the same content.

Views apply the presentation rules shared by both outputs:
- empty optional fields are replaced by placeholders
- multi-line fields are split into trimmed, non-blank lines
- conditional sections are kept only when their field is non-empty
"""

from dataclasses import dataclass, field
from typing import List, Union

from docbuilder.contexts.documents.defaults import (
    CV_SECTIONS,
    CV_TEXT,
    LETTER_PLACEHOLDERS,
    LETTER_TEXT,
    NOT_SPECIFIED,
    PROTOCOL_TEXT,
)
from docbuilder.contexts.documents.document import Document, DocumentKind
from docbuilder.utils.text_processing import split_lines
from docbuilder.utils.timestamp import Clock, format_date, format_iso_date, today


@dataclass(frozen=True)
class LabeledValue:
    """A "Label: value" line (contact details, protocol details)."""

    label: str
    value: str


@dataclass(frozen=True)
class TextSection:
    """
    Optional free-text section of a CV.

    Attributes:
        name: Field the section is built from (e.g. "experience")
        title: Section header
        text: Raw field value, may contain **emphasis** markup
    """

    name: str
    title: str
    text: str


@dataclass(frozen=True)
class CVView:
    full_name: str
    position: str
    contacts: List[LabeledValue] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    sections: List[TextSection] = field(default_factory=list)
    created: str = ""


@dataclass(frozen=True)
class LetterView:
    """
    Resolved content of a formal letter.

    Attributes:
        organization_name: Sender organization (or placeholder)
        organization_address: Sender address (or placeholder)
        organization_contacts: "Tel.: ..., Email: ..." line
        outgoing_number: "No. ..." line
        date: Letter date, from the "date" field or the clock
        recipient_*: Recipient block lines
        subject: Subject line text
        greeting_line: Greeting with recipient name and exclamation mark
        content: Letter body, may contain **emphasis** markup
        closing: Closing phrase
        sender_position: Signature block position line
        sender_name: Signature block name, "" when not given
        attachments: One entry per attachment line
        stamp: Whether the stamp placeholder is requested
    """

    organization_name: str
    organization_address: str
    organization_contacts: str
    outgoing_number: str
    date: str
    recipient_position: str
    recipient_name: str
    recipient_organization: str
    recipient_address: str
    subject: str
    greeting_line: str
    content: str
    closing: str
    sender_position: str
    sender_name: str
    attachments: List[str] = field(default_factory=list)
    stamp: bool = False


@dataclass(frozen=True)
class ProtocolView:
    meeting_type: str
    details: List[LabeledValue] = field(default_factory=list)
    officers: List[LabeledValue] = field(default_factory=list)
    participants: List[str] = field(default_factory=list)
    agenda: List[str] = field(default_factory=list)
    discussion: str = ""
    decisions: List[str] = field(default_factory=list)
    chairman: str = ""
    secretary: str = ""


DocumentView = Union[CVView, LetterView, ProtocolView]


def _or_placeholder(document: Document, name: str, placeholder: str = NOT_SPECIFIED) -> str:
    return document.get(name).strip() if document.has(name) else placeholder


def _letter_field(document: Document, name: str) -> str:
    return _or_placeholder(document, name, LETTER_PLACEHOLDERS[name])


def build_cv_view(document: Document, clock: Clock = today) -> CVView:
    name_parts = [document.get("firstName").strip()]
    if document.has("middleName"):
        name_parts.append(document.get("middleName").strip())
    name_parts.append(document.get("lastName").strip())

    contacts = [
        LabeledValue(CV_TEXT["phone"], _or_placeholder(document, "phone")),
        LabeledValue(CV_TEXT["email"], _or_placeholder(document, "email")),
        LabeledValue(CV_TEXT["city"], _or_placeholder(document, "city")),
        LabeledValue(CV_TEXT["birth_date"], _or_placeholder(document, "birthDate")),
    ]

    sections = [
        TextSection(name=name, title=title, text=document.get(name))
        for name, title in CV_SECTIONS
        if document.has(name)
    ]

    return CVView(
        full_name=" ".join(part for part in name_parts if part),
        position=_or_placeholder(document, "position"),
        contacts=contacts,
        skills=split_lines(document.get("skills")),
        sections=sections,
        created=format_date(clock()),
    )


def build_letter_view(document: Document, clock: Clock = today) -> LetterView:
    recipient_name = document.get("recipientName").strip()
    letter_date = format_date(clock())

    return LetterView(
        organization_name=_letter_field(document, "organizationName"),
        organization_address=_letter_field(document, "organizationAddress"),
        organization_contacts=(
            f"Tel.: {_letter_field(document, 'organizationPhone')}, "
            f"Email: {_letter_field(document, 'organizationEmail')}"
        ),
        outgoing_number=f"{LETTER_TEXT['number_prefix']} {_letter_field(document, 'outgoingNumber')}",
        date=letter_date,
        recipient_position=_letter_field(document, "recipientPosition"),
        recipient_name=recipient_name,
        recipient_organization=_letter_field(document, "recipientOrganization"),
        recipient_address=_letter_field(document, "recipientAddress"),
        subject=document.get("subject").strip(),
        greeting_line=f"{_letter_field(document, 'greeting')} {recipient_name}!",
        content=document.get("content"),
        closing=_letter_field(document, "closing"),
        sender_position=_letter_field(document, "senderPosition"),
        sender_name=document.get("senderName").strip(),
        attachments=split_lines(document.get("attachments")),
        stamp=document.is_checked("addStamp"),
    )


def build_protocol_view(document: Document) -> ProtocolView:
    details = [
        LabeledValue(PROTOCOL_TEXT["number"], _or_placeholder(document, "protocolNumber")),
        LabeledValue(
            PROTOCOL_TEXT["date"], format_iso_date(document.get("date")) or NOT_SPECIFIED
        ),
        LabeledValue(PROTOCOL_TEXT["time"], _or_placeholder(document, "time")),
        LabeledValue(PROTOCOL_TEXT["location"], _or_placeholder(document, "location")),
    ]
    officers = [
        LabeledValue(PROTOCOL_TEXT["chairman"], _or_placeholder(document, "chairman")),
        LabeledValue(PROTOCOL_TEXT["secretary"], _or_placeholder(document, "secretary")),
    ]

    return ProtocolView(
        meeting_type=document.get("meetingType").strip(),
        details=details,
        officers=officers,
        participants=split_lines(document.get("participants")),
        agenda=split_lines(document.get("agenda")),
        discussion=document.get("discussion") if document.has("discussion") else "",
        decisions=split_lines(document.get("decisions")),
        chairman=document.get("chairman").strip(),
        secretary=document.get("secretary").strip(),
    )


def build_view(document: Document, clock: Clock = today) -> DocumentView:
    """
    Build the display view for any document kind.

    Args:
        document: Source document
        clock: Returns the date stamped on CVs and letters; read once per call

    Returns:
        CVView, LetterView or ProtocolView
    """
    match document.kind:
        case DocumentKind.CV:
            return build_cv_view(document, clock)
        case DocumentKind.LETTER:
            return build_letter_view(document, clock)
        case DocumentKind.PROTOCOL:
            return build_protocol_view(document)
