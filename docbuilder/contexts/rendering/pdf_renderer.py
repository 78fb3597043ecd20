"""PDF output using reportlab.

Renders a ``PrintLayout`` tree into a paginated A4 PDF. The layout is interpreted
the way a pdfmake-style engine would:

- styles cascade: document default -> parent nodes -> named style -> inline style
  (margins do not cascade)
- columns become a single-row table; percentage widths are taken from the
  available width, "auto" / "*" columns share what is left
- canvas lines become vector drawings (y axis flipped to reportlab's)
- top and bottom margins become spacers; a negative top margin inside a stack draws
  the node over the one before it, otherwise negative margins are clamped to zero
"""

from dataclasses import replace
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Sequence

from markupsafe import escape
from reportlab.graphics.shapes import Drawing
from reportlab.graphics.shapes import Line as DrawingLine
from reportlab.lib.colors import HexColor, black
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import (
    Flowable,
    ListFlowable,
    ListItem,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from docbuilder.contexts.rendering.export import ExportBundle
from docbuilder.contexts.rendering.layout import (
    Canvas,
    Columns,
    Node,
    OrderedList,
    PrintLayout,
    Stack,
    Style,
    Text,
    TextContent,
    UnorderedList,
)
from docbuilder.contexts.rendering.logger import _log_debug, log_export_result
from docbuilder.contexts.rendering.print_layout import get_default_style_registry
from docbuilder.contexts.templating.registries import StyleRegistry
from docbuilder.contexts.templating.text_formatter import StyledRun

ALIGNMENTS = {"left": TA_LEFT, "center": TA_CENTER, "right": TA_RIGHT, "justify": TA_JUSTIFY}

DEFAULT_FONT_SIZE = 10
FALLBACK_FONTS = {"normal": "Times-Roman", "bold": "Times-Bold"}
PAGE_MARGIN = 40
# reportlab's default leading is 1.2 x font size
LEADING_FACTOR = 1.2


def _hex(color: str):
    return HexColor(color) if color else black


class _Overlay(Flowable):
    """
    Draws flowables over the bottom of a base flowable.

    The top of the overlay sits ``lift`` points above the base's bottom edge and
    ``left`` points in from its left edge. Only what sticks out below the base adds
    to the height.
    """

    def __init__(self, base: Flowable, overlay: List[Flowable], left: float = 0, lift: float = 0):
        super().__init__()
        self._base = base
        self._overlay = overlay
        self._left = left
        self._lift = lift

    def wrap(self, availWidth, availHeight):
        base_width, self._base_height = self._base.wrap(availWidth, availHeight)
        self._sizes = [flowable.wrap(availWidth - self._left, availHeight) for flowable in self._overlay]
        overlay_height = sum(height for _, height in self._sizes)
        self.width = max([base_width] + [width + self._left for width, _ in self._sizes])
        self.height = self._base_height + max(overlay_height - self._lift, 0)
        return self.width, self.height

    def draw(self):
        base_bottom = self.height - self._base_height
        self._base.drawOn(self.canv, 0, base_bottom)
        top = base_bottom + self._lift
        for flowable, (_, height) in zip(self._overlay, self._sizes):
            top -= height
            flowable.drawOn(self.canv, self._left, top)


class PDFRenderer:
    """Renders print layouts to PDF bytes."""

    def __init__(
        self,
        style_registry: StyleRegistry = None,
        page_size: Sequence[float] = A4,
        page_margin: float = PAGE_MARGIN,
    ):
        self._page_size = page_size
        self._margin = page_margin
        registry = style_registry or get_default_style_registry()
        self._fonts = self._register_fonts(registry.get_fonts())

    # Public API

    def render(self, layout: PrintLayout) -> bytes:
        """Render a layout to PDF bytes."""
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self._page_size,
            leftMargin=self._margin,
            rightMargin=self._margin,
            topMargin=self._margin,
            bottomMargin=self._margin,
        )

        story = []
        for node in layout.content:
            story.extend(self._flowables(node, layout.default_style, layout, doc.width))

        doc.build(story)
        return buffer.getvalue()

    def write(self, bundle: ExportBundle, output_dir: Path) -> Path:
        """Render a bundle and write it under its file name. Returns the PDF path."""
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / bundle.file_name
        pdf_bytes = self.render(bundle.layout)
        output_path.write_bytes(pdf_bytes)
        log_export_result(bundle.file_name, output_path, len(pdf_bytes))
        return output_path

    # Fonts

    @staticmethod
    def _register_fonts(fonts: Dict[str, Dict[str, str]]) -> Dict[str, Dict[str, str]]:
        resolved = {}
        for family, variants in fonts.items():
            resolved[family] = {}
            for variant, font in variants.items():
                if str(font).lower().endswith(".ttf"):
                    font_name = f"{family}-{variant}"
                    pdfmetrics.registerFont(TTFont(font_name, font))
                    _log_debug(f"Registered font {font_name} from {font}")
                    resolved[family][variant] = font_name
                else:
                    resolved[family][variant] = font
        return resolved

    def _font_name(self, style: Style, bold: bool = False) -> str:
        variant = "bold" if bold else "normal"
        family = self._fonts.get(style.font, {})
        return family.get(variant) or FALLBACK_FONTS[variant]

    # Style resolution

    @staticmethod
    def _resolve(node_style: Style, inherited: Style, layout: PrintLayout) -> Style:
        named = layout.styles.get(node_style.style) if node_style.style else None
        effective = inherited.merged(named) if named else inherited
        return effective.merged(node_style)

    def _paragraph_style(self, style: Style) -> ParagraphStyle:
        font_size = style.font_size or DEFAULT_FONT_SIZE
        return ParagraphStyle(
            "node",
            fontName=self._font_name(style, bold=bool(style.bold)),
            fontSize=font_size,
            leading=font_size * LEADING_FACTOR * (style.line_height or 1),
            alignment=ALIGNMENTS.get(style.alignment, TA_LEFT),
            textColor=_hex(style.color),
        )

    def _markup(self, content: TextContent, style: Style) -> str:
        runs = (StyledRun(content),) if isinstance(content, str) else content
        parts = []
        for run in runs:
            text = str(escape(run.text)).replace("\n", "<br/>")
            if run.emphasized:
                text = f'<font name="{self._font_name(style, bold=True)}">{text}</font>'
            parts.append(text)

        markup = "".join(parts)
        if style.decoration == "underline":
            markup = f"<u>{markup}</u>"
        return markup

    # Node conversion

    def _flowables(
        self, node: Node, inherited: Style, layout: PrintLayout, width: float
    ) -> List[Flowable]:
        style = self._resolve(node.style, inherited, layout)
        child_style = replace(style, margin=None, style=None)

        if isinstance(node, Text):
            body = [Paragraph(self._markup(node.content, style), self._paragraph_style(style))]
        elif isinstance(node, Stack):
            body = self._stack(node, child_style, layout, width)
        elif isinstance(node, Columns):
            body = [self._table(node, child_style, layout, width)]
        elif isinstance(node, Canvas):
            body = [self._drawing(node, width)] if node.lines else []
        elif isinstance(node, (OrderedList, UnorderedList)):
            body = [self._list(node, style)] if node.items else []
        else:
            raise TypeError(f"Unsupported layout node: {type(node).__name__}")

        return self._with_margin(body, style.margin)

    def _stack(self, node: Stack, inherited: Style, layout: PrintLayout, width: float) -> List[Flowable]:
        body = []
        for child in node.children:
            flowables = self._flowables(child, inherited, layout, width)
            child_margin = self._resolve(child.style, inherited, layout).margin
            if child_margin and child_margin[1] < 0 and body and flowables:
                body.append(_Overlay(body.pop(), flowables, left=child_margin[0], lift=-child_margin[1]))
            else:
                body.extend(flowables)
        return body

    @staticmethod
    def _with_margin(
body: List[Flowable], margin) -> List[Flowable]:
        if not margin:
            return body
        _, top, _, bottom = margin
        before = [Spacer(1, top)] if top > 0 else []
        after = [Spacer(1, bottom)] if bottom > 0 else []
        return before + body + after

    @staticmethod
    def _column_widths(node: Columns, width: float) -> List[float]:
        gap = node.gap or 0
        available = width - gap * (len(node.columns) - 1)
        widths = []
        for column in node.columns:
            if isinstance(column.width, str) and column.width.endswith("%"):
                widths.append(available * float(column.width[:-1]) / 100)
            elif isinstance(column.width, (int, float)):
                widths.append(float(column.width))
            else:
                widths.append(None)

        flexible = widths.count(None)
        if flexible:
            remaining = max(available - sum(w for w in widths if w is not None), 0)
            widths = [remaining / flexible if w is None else w for w in widths]

        # Gap belongs to every column but the last
        return [w + gap if index < len(widths) - 1 else w for index, w in enumerate(widths)]

    def _table(self, node: Columns, inherited: Style, layout: PrintLayout, width: float) -> Table:
        gap = node.gap or 0
        col_widths = self._column_widths(node, width)
        cells = []
        for index, column in enumerate(node.columns):
            inner_width = col_widths[index] - (gap if index < len(col_widths) - 1 else 0)
            cells.append(self._flowables(column.node, inherited, layout, inner_width) or "")

        commands = [
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 0),
            ("RIGHTPADDING", (0, 0), (-1, -1), 0),
            ("TOPPADDING", (0, 0), (-1, -1), 0),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
        ]
        commands.extend(
            ("RIGHTPADDING", (index, 0), (index, 0), gap) for index in range(len(cells) - 1)
        )

        table = Table([cells], colWidths=col_widths)
        table.setStyle(TableStyle(commands))
        return table

    @staticmethod
    def _drawing(node: Canvas, width: float) -> Drawing:
        max_x = max(max(line.x1, line.x2) for line in node.lines)
        max_y = max(max(line.y1, line.y2) for line in node.lines)
        max_width = max(line.width for line in node.lines)
        # Shrink rules wider than the space they are drawn in
        scale = min(1.0, width / max_x) if max_x > 0 else 1.0
        height = max_y + max_width

        drawing = Drawing(max(max_x * scale, 1), max(height, 1))
        for line in node.lines:
            drawing.add(
                DrawingLine(
                    line.x1 * scale,
                    height - line.y1,
                    line.x2 * scale,
                    height - line.y2,
                    strokeColor=_hex(line.color),
                    strokeWidth=line.width,
                    strokeDashArray=list(line.dash) if line.dash else None,
                )
            )
        return drawing

    def _list(self, node, style: Style) -> ListFlowable:
        paragraph_style = self._paragraph_style(style)
        items = [ListItem(Paragraph(self._markup(item, style), paragraph_style)) for item in node.items]
        return ListFlowable(
            items,
            bulletType="1" if isinstance(node, OrderedList) else "bullet",
            bulletFontName=paragraph_style.fontName,
            bulletFontSize=paragraph_style.fontSize,
        )


def render_pdf(layout: PrintLayout, style_registry: StyleRegistry = None) -> bytes:
    """Render a layout to PDF bytes with a default renderer."""
    return PDFRenderer(style_registry=style_registry).render(layout)


def write_pdf(bundle: ExportBundle, output_dir: Path, style_registry: StyleRegistry = None) -> Path:
    """Write a bundle's PDF under its file name in output_dir."""
    return PDFRenderer(style_registry=style_registry).write(bundle, output_dir)
