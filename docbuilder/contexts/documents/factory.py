"""
Document Factories and Registry

The registry is the single entry point for creating documents: it maps each type
tag to a factory and dispatches creation requests to it.
"""

from typing import Any, Dict, List, Mapping, Protocol, Union

from docbuilder.contexts.documents.document import Document, DocumentKind
from docbuilder.contexts.documents.exceptions import UnknownDocumentTypeError
from docbuilder.contexts.documents.logger import _log_debug, _log_error


class DocumentFactory(Protocol):
    """Anything that can build a document from a field-value mapping."""

    def create(self, fields: Mapping[str, Any]) -> Document:
        ...


class KindFactory:
    """Factory producing documents of a single kind."""

    def __init__(self, kind: DocumentKind):
        self.kind = DocumentKind(kind)

    def create(self, fields: Mapping[str, Any]) -> Document:
        return Document(kind=self.kind, fields=fields)

    def __repr__(self) -> str:
        return f"KindFactory({self.kind.value!r})"


class DocumentRegistry:
    """
    Fixed mapping from type tag to factory.

    By default holds one KindFactory per DocumentKind. Lookups are by exact tag;
    DocumentKind members are accepted as well since they compare equal to their tag.
    """

    def __init__(self, factories: Dict[str, DocumentFactory] = None):
        """
        Initialize the registry.

        Args:
            factories: Tag-to-factory mapping. Defaults to one factory per
                       DocumentKind, keyed by its tag.
        """
        if factories is None:
            factories = {kind.value: KindFactory(kind) for kind in DocumentKind}

        self._factories: Dict[str, DocumentFactory] = dict(factories)

    def types(self) -> List[str]:
        """Known type tags, in registration order."""
        return list(self._factories)

    def get_factory(self, type_name: Union[str, DocumentKind]) -> DocumentFactory:
        """
        Look up the factory for a type tag.

        Raises:
            UnknownDocumentTypeError: If no factory is registered for the tag
        """
        key = type_name.value if isinstance(type_name, DocumentKind) else type_name

        try:
            return self._factories[key]
        except (KeyError, TypeError):
            _log_error(f"Unknown document type requested: {type_name!r}")
            raise UnknownDocumentTypeError(type_name, self.types()) from None

    def create_document(
        self, type_name: Union[str, DocumentKind], fields: Mapping[str, Any]
    ) -> Document:
        """
        Create a document of the given type.

        Args:
            type_name: Type tag ("cv", "letter" or "protocol")
            fields: Field-value mapping collected from the form

        Returns:
            A new Document owning a frozen copy of the fields

        Raises:
            UnknownDocumentTypeError: If the type tag is not registered
        """
        factory = self.get_factory(type_name)
        document = factory.create(fields)
        _log_debug(f"Created {document.kind.value} document with {len(document.fields)} fields")
        return document


default_registry = DocumentRegistry()


def create_document(type_name: Union[str, DocumentKind], fields: Mapping[str, Any]) -> Document:
    """Create a document through the default registry."""
    return default_registry.create_document(type_name, fields)
