"""
Letter Print Layout

Formal letter: organization letterhead, reference line, recipient block, subject,
greeting, justified body, closing and signature, then optional attachments and an
optional stamp placeholder box.
"""

from typing import Optional, Tuple

from docbuilder.contexts.documents.defaults import LETTER_TEXT
from docbuilder.contexts.documents.views import LetterView
from docbuilder.contexts.rendering.layout import (
    Column,
    Columns,
    Node,
    Stack,
    Style,
    Text,
    dashed_box,
    margin,
    rule,
    stack,
)
from docbuilder.contexts.templating.text_formatter import StyledRun, format_text

BODY = Style(font_size=10)
SIGNATURE_LINE_COLOR = "#a0aec0"
STAMP_TEXT_COLOR = "#aaaaaa"
STAMP_WIDTH = 120
STAMP_HEIGHT = 60


def _attachments(view: LetterView) -> Optional[Stack]:
    if not view.attachments:
        return None
    return Stack(
        children=(
            Text(LETTER_TEXT["attachments"], style=Style(font_size=10, bold=True)),
            *(
                Text(attachment, style=Style(font_size=10, margin=margin(top=5) if index == 0 else None))
                for index, attachment in enumerate(view.attachments)
            ),
        ),
        style=Style(alignment="left", margin=margin(top=15)),
        tag="attachments",
    )


def _stamp(view: LetterView) -> Optional[Stack]:
    if not view.stamp:
        return None
    return Stack(
        children=(
            dashed_box(STAMP_WIDTH, STAMP_HEIGHT),
            # Pulled up into the box
            Text(
                LETTER_TEXT["stamp"],
                style=Style(
                    font_size=10,
                    color=STAMP_TEXT_COLOR,
                    bold=False,
                    alignment="left",
                    margin=margin(left=20, top=-36),
                ),
            ),
        ),
        style=Style(alignment="left", margin=margin(top=5 if view.attachments else 20)),
        tag="stamp",
    )


def build_letter_layout(view: LetterView) -> Tuple[Node, ...]:
    """
    Build the layout content for a formal letter.

    Args:
        view: Resolved letter content

    Returns:
        Top-level layout nodes
    """
    letterhead = stack(
        Text(view.organization_name, style=Style(style="orgHeader")),
        Text(view.organization_address, style=Style(style="orgDetail")),
        Text(view.organization_contacts, style=Style(style="orgDetail")),
        style=Style(alignment="center", margin=margin(bottom=15)),
        tag="letterhead",
    )

    reference = Columns(
        columns=(
            Column(Text(view.outgoing_number, style=BODY, tag="outgoing-number")),
            Column(Text(view.date, style=Style(font_size=10, alignment="right"), tag="date")),
        ),
        style=Style(margin=margin(bottom=20)),
    )

    recipient = stack(
        Text(view.recipient_position, style=Style(font_size=10, bold=True)),
        Text(view.recipient_name, style=Style(font_size=10, bold=True)),
        Text(view.recipient_organization, style=BODY),
        Text(view.recipient_address, style=Style(font_size=10, margin=margin(top=5))),
        style=Style(margin=margin(bottom=20)),
        tag="recipient",
    )

    signature = Columns(
        columns=(
            Column(
                stack(
                    Text(view.sender_position, style=BODY),
                    Text(
                        view.sender_name,
                        style=Style(decoration="underline", decoration_color=SIGNATURE_LINE_COLOR),
                        tag="sender-name",
                    ),
                ),
                width="auto",
            ),
            Column(Stack(), width="*"),
        ),
        tag="signature",
    )

    return (
        letterhead,
        rule(bottom=20),
        reference,
        recipient,
        Text(
            (StyledRun(LETTER_TEXT["subject"], emphasized=True), StyledRun(f" {view.subject}")),
            style=Style(font_size=10, margin=margin(bottom=15)),
            tag="subject",
        ),
        Text(view.greeting_line, style=Style(font_size=10, margin=margin(bottom=10)), tag="greeting"),
        Text(
            tuple(format_text(view.content)),
            style=Style(font_size=10, alignment="justify", margin=margin(bottom=20)),
            tag="content",
        ),
        Text(view.closing, style=BODY, tag="closing"),
        signature,
        stack(_attachments(view), _stamp(view), style=Style(alignment="left")),
    )
