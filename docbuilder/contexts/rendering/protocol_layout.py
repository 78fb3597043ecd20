"""
Protocol Print Layout

Meeting protocol: title and meeting type, two-column details block, participants,
optional agenda / discussion / decisions sections, and signature lines for the
chairman and the secretary.
"""

from typing import List, Tuple

from docbuilder.contexts.documents.defaults import PROTOCOL_TEXT
from docbuilder.contexts.documents.views import LabeledValue, ProtocolView
from docbuilder.contexts.rendering.layout import (
    Canvas,
    Column,
    Columns,
    Line,
    Node,
    OrderedList,
    Stack,
    Style,
    Text,
    margin,
    rule,
    stack,
)
from docbuilder.contexts.templating.text_formatter import StyledRun, format_text

SIGNATURE_LINE_COLOR = "#a0aec0"
SIGNATURE_LINE_LENGTH = 140


def _labeled(item: LabeledValue) -> Text:
    return Text((StyledRun(item.label, emphasized=True), StyledRun(f" {item.value}")))


def _section_header(title: str) -> Tuple[Text, Canvas]:
    return (
        Text(title, style=Style(style="sectionHeader", margin=margin(bottom=5))),
        rule(bottom=10),
    )


def _numbered_section(title: str, items: List[str], tag: str) -> Tuple[Node, ...]:
    if not items:
        return ()
    return (
        *_section_header(title),
        OrderedList(
            items=tuple(tuple(format_text(item)) for item in items),
            style=Style(font_size=10, margin=margin(bottom=20)),
            tag=tag,
        ),
    )


def _discussion(view: ProtocolView) -> Tuple[Node, ...]:
    if not view.discussion:
        return ()
    return (
        *_section_header(PROTOCOL_TEXT["discussion"]),
        Text(
            tuple(format_text(view.discussion)),
            style=Style(font_size=10, alignment="justify", line_height=1.5, margin=margin(bottom=20)),
            tag="discussion",
        ),
    )


def _signature(label: str, name: str, tag: str) -> Stack:
    return stack(
        Text(label, style=Style(font_size=10)),
        Text(tuple(format_text(name))),
        Canvas(
            lines=(
                Line(0, 5, SIGNATURE_LINE_LENGTH, 5, width=1, color=SIGNATURE_LINE_COLOR),
            )
        ),
        tag=tag,
    )


def build_protocol_layout(view: ProtocolView) -> Tuple[Node, ...]:
    """
    Build the layout content for a meeting protocol.

    Args:
        view: Resolved protocol content

    Returns:
        Top-level layout nodes
    """
    details = Columns(
        columns=(
            Column(stack(*(_labeled(item) for item in view.details), tag="details"), width="50%"),
            Column(stack(*(_labeled(item) for item in view.officers), tag="officers"), width="50%"),
        ),
        gap=20,
        style=Style(font_size=10, margin=margin(bottom=20)),
    )

    participants = Stack(
        children=tuple(Text(tuple(format_text(name))) for name in view.participants),
        style=Style(font_size=10, line_height=1.5, margin=margin(bottom=20)),
        tag="participants",
    )

    signatures = Columns(
        columns=(
            Column(_signature(PROTOCOL_TEXT["chairman"], view.chairman, "chairman-signature"), width="50%"),
            Column(_signature(PROTOCOL_TEXT["secretary"], view.secretary, "secretary-signature"), width="50%"),
        ),
        gap=20,
        style=Style(margin=margin(top=40)),
    )

    return (
        Text(PROTOCOL_TEXT["title"], style=Style(style="header", alignment="center", margin=margin(bottom=5))),
        Text(
            view.meeting_type,
            style=Style(style="subheader", alignment="center", margin=margin(bottom=20)),
            tag="meeting-type",
        ),
        details,
        *_section_header(PROTOCOL_TEXT["participants"]),
        participants,
        *_numbered_section(PROTOCOL_TEXT["agenda"], view.agenda, "agenda"),
        *_discussion(view),
        *_numbered_section(PROTOCOL_TEXT["decisions"], view.decisions, "decisions"),
        signatures,
    )
