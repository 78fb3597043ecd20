"""
Text Formatter

Converts the **emphasis** markup used in free-text fields into styled text runs,
the structured text representation consumed by the print layout (and rendered as
<strong> in the HTML preview).
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from markupsafe import Markup, escape

# Non-greedy, does not cross line breaks. No escape for a literal "**".
EMPHASIS_PATTERN = re.compile(r"\*\*(.*?)\*\*")


@dataclass(frozen=True)
class StyledRun:
    """
    A segment of text with its emphasis flag.

    Attributes:
        text: Text segment (may be empty for an empty "****" pair)
        emphasized: Whether the segment was wrapped in ** markers
    """

    text: str
    emphasized: bool = False

    def to_dict(self) -> Dict[str, Union[str, bool]]:
        """Layout-format representation: {"text": ...} plus "bold" when emphasized."""
        if self.emphasized:
            return {"text": self.text, "bold": True}
        return {"text": self.text}


def format_text(text: Optional[str]) -> List[StyledRun]:
    """
    Split text into plain and emphasized runs.

    Text between a matched pair of ** markers becomes an emphasized run; everything
    else becomes plain runs. An unpaired marker is kept literally in the surrounding
    plain run.

    Args:
        text: Field value, possibly containing **emphasis** markup

    Returns:
        Runs in reading order; empty list for None or ""

    Examples:
        >>> format_text("a **b** c")
        [StyledRun(text='a ', emphasized=False), StyledRun(text='b', emphasized=True), StyledRun(text=' c', emphasized=False)]
        >>> format_text("**unterminated")
        [StyledRun(text='**unterminated', emphasized=False)]
    """
    if not text:
        return []

    runs = []
    last_index = 0

    for match in EMPHASIS_PATTERN.finditer(text):
        if match.start() > last_index:
            runs.append(StyledRun(text[last_index : match.start()]))
        runs.append(StyledRun(match.group(1), emphasized=True))
        last_index = match.end()

    if last_index < len(text):
        runs.append(StyledRun(text[last_index:]))

    return runs


def runs_to_plaintext(runs: Iterable[StyledRun]) -> str:
    """Concatenate run texts, dropping emphasis."""
    return "".join(run.text for run in runs)


def runs_to_html(runs: Iterable[StyledRun], escape_html: bool = True) -> Markup:
    """
    Render runs as HTML, emphasized runs wrapped in <strong>.

    Args:
        runs: Styled runs
        escape_html: Escape run text before embedding it in markup

    Returns:
        Markup safe to insert into an autoescaping template
    """
    parts = []
    for run in runs:
        text = str(escape(run.text)) if escape_html else run.text
        parts.append(f"<strong>{text}</strong>" if run.emphasized else text)
    return Markup("".join(parts))
