"""
Documents Context

Responsibilities:
- Defines the document model (kind + frozen field-value mapping)
- Validates required fields per document kind
- Resolves field values into display views shared by preview and print layout
- Dispatches creation requests by type tag through the registry

Owns: Document kinds, required fields, placeholders, the type registry
Never: Produces markup or layout nodes
"""

from docbuilder.contexts.documents.demo_data import load_demo_fields
from docbuilder.contexts.documents.document import (
    CHECKBOX_ON,
    REQUIRED_FIELDS,
    Document,
    DocumentKind,
    missing_fields,
    validate,
)
from docbuilder.contexts.documents.exceptions import UnknownDocumentTypeError
from docbuilder.contexts.documents.factory import (
    DocumentFactory,
    DocumentRegistry,
    KindFactory,
    create_document,
    default_registry,
)
from docbuilder.contexts.documents.views import build_view

__all__ = [
    # Model and validation
    "Document",
    "DocumentKind",
    "CHECKBOX_ON",
    "REQUIRED_FIELDS",
    "missing_fields",
    "validate",
    # Registry
    "DocumentFactory",
    "DocumentRegistry",
    "KindFactory",
    "create_document",
    "default_registry",
    "UnknownDocumentTypeError",
    # Views and demo data
    "build_view",
    "load_demo_fields",
]
