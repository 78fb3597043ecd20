"""
CV Print Layout

Single-page CV: centered title block, then two columns (contact details and
skills on the narrow left column, free-text sections on the wide right column),
closed by a "created" footer.
"""

from typing import Optional, Tuple

from docbuilder.contexts.documents.defaults import CV_TEXT
from docbuilder.contexts.documents.views import CVView, TextSection
from docbuilder.contexts.rendering.layout import (
    Column,
    Columns,
    Node,
    Stack,
    Style,
    Text,
    UnorderedList,
    margin,
    rule,
    stack,
)
from docbuilder.contexts.templating.text_formatter import format_text

NAME_COLOR = "#2563eb"
FOOTER_COLOR = "#6b7280"
SECTION_RULE_COLOR = "#d1d5db"


def _contact_column(view: CVView) -> Stack:
    contacts = [
        Text(
            f"{contact.label}: {contact.value}",
            style=Style(margin=margin(top=5)) if index == 0 else Style(),
        )
        for index, contact in enumerate(view.contacts)
    ]

    skills: Tuple[Optional[Node], ...] = (None, None)
    if view.skills:
        skills = (
            Text(CV_TEXT["skills_header"], style=Style(style="sectionHeader", margin=margin(top=15))),
            UnorderedList(
                items=tuple(view.skills), style=Style(margin=margin(top=5)), tag="skills"
            ),
        )

    return stack(
        Text(CV_TEXT["contact_header"], style=Style(style="sectionHeader")),
        *contacts,
        *skills,
        tag="contacts",
    )


def _section_nodes(section: TextSection) -> Tuple[Text, Text]:
    header = Text(
        section.title,
        style=Style(
            style="sectionHeader",
            margin=margin(bottom=5),
            decoration="underline",
            decoration_color=SECTION_RULE_COLOR,
        ),
    )
    body = Text(
        tuple(format_text(section.text)),
        style=Style(style="bodyText", margin=margin(bottom=10)),
        tag=section.name,
    )
    return header, body


def build_cv_layout(view: CVView) -> Tuple[Node, ...]:
    """
    Build the layout content for a CV.

    Args:
        view: Resolved CV content

    Returns:
        Top-level layout nodes
    """
    main_column = stack(
        *(node for section in view.sections for node in _section_nodes(section)),
        tag="sections",
    )

    return (
        Text(CV_TEXT["title"], style=Style(style="header", alignment="center")),
        Text(
            view.full_name,
            style=Style(style="subheader", alignment="center", color=NAME_COLOR),
            tag="name",
        ),
        Text(
            view.position,
            style=Style(style="subsubheader", alignment="center", margin=margin(top=5, bottom=15)),
            tag="position",
        ),
        rule(bottom=20),
        Columns(
            columns=(
                Column(_contact_column(view), width="30%"),
                Column(main_column, width="70%"),
            ),
            gap=20,
            style=Style(margin=margin(top=20)),
        ),
        rule(color="#e5e7eb", bottom=10),
        Text(
            f"{CV_TEXT['created']}: {view.created}",
            style=Style(alignment="right", font_size=8, color=FOOTER_COLOR, margin=margin(top=30)),
            tag="created",
        ),
    )
