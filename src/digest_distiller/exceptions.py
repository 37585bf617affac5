"""Custom exceptions for digest-distiller."""


class DistillerError(Exception):
    """Base exception for all digest-distiller errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DocumentReadError(DistillerError):
    """Raised when a source document cannot be decoded into text."""

    def __init__(self, message: str, path: str | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)


class ExportError(DistillerError):
    """Raised when extracted articles cannot be written to their destination."""

    pass
