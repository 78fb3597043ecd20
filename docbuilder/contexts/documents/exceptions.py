"""Custom exceptions for the documents context."""


class UnknownDocumentTypeError(ValueError):
    """
    Exception raised when the registry is asked for a type tag it does not know.

    Attributes:
        type_name: The offending type tag
        known_types: Tags the registry does know
    """

    def __init__(self, type_name, known_types=None):
        self.type_name = type_name
        self.known_types = list(known_types or [])

        message = f"Unknown document type: {type_name}"
        if self.known_types:
            message += f" (expected one of: {', '.join(self.known_types)})"

        super().__init__(message)
