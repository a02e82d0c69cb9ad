class IndexStoreError(Exception):
    """Base error for the project."""


class InvalidArgumentError(IndexStoreError, ValueError):
    """Raised for an empty path or term, or a missing frequency mapping."""


class DocumentNotFoundError(IndexStoreError, LookupError):
    """Raised when no document is registered under an identifier."""
