"""
Print Layout Description

Node vocabulary for the print layout tree handed to the PDF engine. Nodes are
immutable; a layout is only returned once fully built.

Serialization (to_dict) follows the pdfmake document-definition format:
text nodes, stacks, columns, canvas lines and ordered/unordered lists, each with
inline style keys (fontSize, bold, color, alignment, margin, ...).
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from docbuilder.contexts.templating.text_formatter import StyledRun

# Layout-format key for each Style attribute
STYLE_KEYS = {
    "style": "style",
    "font": "font",
    "font_size": "fontSize",
    "bold": "bold",
    "color": "color",
    "alignment": "alignment",
    "margin": "margin",
    "line_height": "lineHeight",
    "decoration": "decoration",
    "decoration_color": "decorationColor",
}
STYLE_ATTRIBUTES = {key: attr for attr, key in STYLE_KEYS.items()}

# Content of a text node or list item: plain string or styled runs
TextContent = Union[str, Tuple[StyledRun, ...]]


@dataclass(frozen=True)
class Style:
    """
    Style attributes of a node. None means "inherit / not set".

    Attributes:
        style: Name of a style from the layout's style sheet
        margin: (left, top, right, bottom) in points
        line_height: Multiplier of the font's default leading
    """

    style: Optional[str] = None
    font: Optional[str] = None
    font_size: Optional[float] = None
    bold: Optional[bool] = None
    color: Optional[str] = None
    alignment: Optional[str] = None
    margin: Optional[Tuple[float, float, float, float]] = None
    line_height: Optional[float] = None
    decoration: Optional[str] = None
    decoration_color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Style":
        """Build a Style from layout-format keys, ignoring unknown keys."""
        values = {STYLE_ATTRIBUTES[key]: value for key, value in data.items() if key in STYLE_ATTRIBUTES}
        if values.get("margin") is not None:
            values["margin"] = tuple(values["margin"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[STYLE_KEYS[f.name]] = list(value) if f.name == "margin" else value
        return result

    def merged(self, override: "Style") -> "Style":
        """New style with every attribute set in override replacing this one's."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(
            {f.name: getattr(override, f.name) for f in fields(override) if getattr(override, f.name) is not None}
        )
        return Style(**values)


def _content_to_dict(content: TextContent) -> Union[str, list]:
    if isinstance(content, str):
        return content
    return [run.to_dict() for run in content]


def content_plaintext(content: TextContent) -> str:
    """Text of a node's content without emphasis."""
    if isinstance(content, str):
        return content
    return "".join(run.text for run in content)


@dataclass(frozen=True)
class Text:
    content: TextContent
    style: Style = field(default_factory=Style)
    tag: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"text": _content_to_dict(self.content), **self.style.to_dict()}


@dataclass(frozen=True)
class Stack:
    """Vertical group of nodes sharing inherited style."""

    children: Tuple["Node", ...] = ()
    style: Style = field(default_factory=Style)
    tag: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"stack": [child.to_dict() for child in self.children], **self.style.to_dict()}


@dataclass(frozen=True)
class Column:
    """
    One column of a Columns node.

    Attributes:
        node: Column content
        width: "30%", "auto", "*" or None (share remaining space)
    """

    node: "Node"
    width: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = self.node.to_dict()
        if self.width is not None:
            result["width"] = self.width
        return result


@dataclass(frozen=True)
class Columns:
    columns: Tuple[Column, ...] = ()
    gap: Optional[float] = None
    style: Style = field(default_factory=Style)
    tag: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"columns": [column.to_dict() for column in self.columns]}
        if self.gap is not None:
            result["columnGap"] = self.gap
        result.update(self.style.to_dict())
        return result


@dataclass(frozen=True)
class Line:
    """Straight line in canvas coordinates (origin top-left, y grows downward)."""

    x1: float
    y1: float
    x2: float
    y2: float
    width: float = 1
    color: str = "#000000"
    dash: Optional[Tuple[float, float]] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "type": "line",
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "lineWidth": self.width,
            "lineColor": self.color,
        }
        if self.dash is not None:
            result["dash"] = {"length": self.dash[0], "space": self.dash[1]}
        return result


@dataclass(frozen=True)
class Canvas:
    """Line decorations: rules, signature lines, placeholder boxes."""

    lines: Tuple[Line, ...] = ()
    style: Style = field(default_factory=Style)
    tag: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"canvas": [line.to_dict() for line in self.lines], **self.style.to_dict()}


@dataclass(frozen=True)
class UnorderedList:
    items: Tuple[TextContent, ...] = ()
    style: Style = field(default_factory=Style)
    tag: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"ul": [_content_to_dict(item) for item in self.items], **self.style.to_dict()}


@dataclass(frozen=True)
class OrderedList:
    """List numbered 1, 2, 3... in item order."""

    items: Tuple[TextContent, ...] = ()
    style: Style = field(default_factory=Style)
    tag: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"ol": [_content_to_dict(item) for item in self.items], **self.style.to_dict()}


Node = Union[Text, Stack, Columns, Canvas, UnorderedList, OrderedList]


@dataclass(frozen=True)
class PrintLayout:
    """
    Root of a print layout tree.

    Attributes:
        content: Top-level nodes in page order
        default_style: Style applied to the whole document
        styles: Named styles nodes may refer to through Style.style
    """

    content: Tuple[Node, ...]
    default_style: Style
    styles: Dict[str, Style] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """pdfmake-compatible document definition."""
        return {
            "content": [node.to_dict() for node in self.content],
            "defaultStyle": self.default_style.to_dict(),
            "styles": {name: style.to_dict() for name, style in self.styles.items()},
        }

    def iter_nodes(self) -> Iterator[Node]:
        """Depth-first walk over every node in the tree."""
        for node in self.content:
            yield from iter_nodes(node)

    def find(self, tag: str) -> List[Node]:
        """All nodes carrying the given tag."""
        return [node for node in self.iter_nodes() if node.tag == tag]


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield a node and all its descendants, depth first."""
    yield node
    if isinstance(node, Stack):
        for child in node.children:
            yield from iter_nodes(child)
    elif isinstance(node, Columns):
        for column in node.columns:
            yield from iter_nodes(column.node)


# Shorthand constructors used by the layout producers


def margin(left: float = 0, top: float = 0, right: float = 0, bottom: float = 0) -> Tuple:
    return (left, top, right, bottom)


def rule(length: float = 520, color: str = "#d1d5db", bottom: float = 20, y: float = 5) -> Canvas:
    """Horizontal rule as a single-line canvas."""
    return Canvas(
        lines=(Line(0, y, length, y, width=1, color=color),),
        style=Style(margin=margin(bottom=bottom)),
    )


def dashed_box(
    width: float, height: float, color: str = "#d1d5db", dash: Tuple[float, float] = (2, 4)
) -> Canvas:
    """Rectangle outline drawn as four dashed lines."""
    corners = [(0, 0), (width, 0), (width, height), (0, height)]
    lines = tuple(
        Line(x1, y1, x2, y2, width=0.5, color=color, dash=dash)
        for (x1, y1), (x2, y2) in zip(corners, corners[1:] + corners[:1])
    )
    return Canvas(lines=lines)


def stack(*children: Optional[Node], style: Style = None, tag: str = None) -> Stack:
    """Stack of the given children, skipping None entries (omitted sections)."""
    return Stack(
        children=tuple(child for child in children if child is not None),
        style=style or Style(),
        tag=tag,
    )
