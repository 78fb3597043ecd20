"""
Templating Registries

Centralized registries for loading and caching HTML templates and print style sheets.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
)
from omegaconf import OmegaConf

from docbuilder.contexts.templating.exceptions import InvalidStyleSheetError
from docbuilder.contexts.templating.text_formatter import format_text, runs_to_html

load_dotenv()
TEMPLATING_CONTEXT_PATH = Path(__file__).parent
TEMPLATES_PATH = Path(
    os.getenv("DOCBUILDER_TEMPLATES_PATH", TEMPLATING_CONTEXT_PATH / "template")
)
STYLES_PATH = Path(os.getenv("DOCBUILDER_STYLES_PATH", TEMPLATING_CONTEXT_PATH / "styles.yaml"))
ESCAPE_HTML = os.getenv("DOCBUILDER_ESCAPE_HTML", "true").lower() == "true"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for the HTML preview.

    Templates are stored as {templates_path}/{type_name}.html.jinja, one per
    document type. Field values are escaped unless escaping is turned off, and
    the "emphasize" filter renders **emphasis** markup as <strong>.
    """

    def __init__(self, templates_path: Path = None, escape_html: bool = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to
                            DOCBUILDER_TEMPLATES_PATH or the packaged templates
            escape_html: Autoescape field values. Defaults to DOCBUILDER_ESCAPE_HTML
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH
        if escape_html is None:
            escape_html = ESCAPE_HTML

        self.templates_path = Path(templates_path)
        self.escape_html = escape_html
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=escape_html,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["emphasize"] = self._emphasize

    def _emphasize(self, text: str):
        return runs_to_html(format_text(text), escape_html=self.escape_html)

    def get_template(self, type_name: str) -> Template:
        """
        Get a template by document type, loading and caching it if necessary.

        Args:
            type_name: Document type tag (e.g., 'letter')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if type_name in self._cache:
            return self._cache[type_name]

        template_name = f"{type_name}.html.jinja"

        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for type '{type_name}' at {self.templates_path / template_name}"
            ) from e

        self._cache[type_name] = template
        return template

    def get_template_path(self, type_name: str) -> Path:
        """Get the file path for a document type's template."""
        return self.templates_path / f"{type_name}.html.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        """Check if a template is in the cache."""
        return type_name in self._cache


class StyleRegistry:
    """
    Registry for the print style sheet.

    The style sheet is a YAML file (loaded with OmegaConf) holding the default
    document style, the font family map and one block of named styles per
    document type. Everything is returned as plain dicts in layout-format keys.
    """

    def __init__(self, styles_path: Path = None):
        """
        Initialize the style registry.

        Args:
            styles_path: Style sheet YAML. Defaults to DOCBUILDER_STYLES_PATH or
                         the packaged styles.yaml
        """
        if styles_path is None:
            styles_path = STYLES_PATH

        self.styles_path = Path(styles_path)
        self._sheet: Dict[str, Any] = None

    def _load(self) -> Dict[str, Any]:
        if self._sheet is None:
            if not self.styles_path.exists():
                raise FileNotFoundError(f"Style sheet not found at {self.styles_path}")
            sheet = OmegaConf.to_container(OmegaConf.load(self.styles_path), resolve=True)
            if "default" not in sheet:
                raise InvalidStyleSheetError(
                    f"Style sheet {self.styles_path} must contain a 'default' block"
                )
            self._sheet = sheet
        return self._sheet

    def get_default_style(self) -> Dict[str, Any]:
        """Document-wide default style (font family, base size, alignment)."""
        return dict(self._load()["default"])

    def get_styles(self, type_name: str) -> Dict[str, Dict[str, Any]]:
        """
        Named styles for a document type.

        Raises:
            InvalidStyleSheetError: If the sheet has no block for the type
        """
        sheet = self._load()
        if type_name not in sheet:
            raise InvalidStyleSheetError(
                f"Style sheet {self.styles_path} has no styles for type '{type_name}'"
            )
        return {name: dict(style) for name, style in sheet[type_name].items()}

    def get_fonts(self) -> Dict[str, Dict[str, str]]:
        """Font family map: family name -> {normal, bold, italics, bolditalics}."""
        return {name: dict(variants) for name, variants in self._load().get("fonts", {}).items()}

    def clear_cache(self):
        """Drop the loaded style sheet so the next access re-reads the file."""
        self._sheet = None

    def is_cached(self) -> bool:
        return self._sheet is not None
