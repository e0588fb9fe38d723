# -*- coding: utf-8 -*-
"""
qcatalog Exceptions Module
Custom exception classes for structured error handling across the package.

Lookups never raise; only loading and registry state changes do.
"""


class CatalogError(Exception):
    """
    Base exception class for all qcatalog errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Load Exceptions
# =============================================================================

class LoadError(CatalogError):
    """Base exception for catalog loading errors."""
    pass


class MalformedCatalogError(LoadError):
    """Raised when a catalog document cannot be parsed or is structurally invalid."""

    def __init__(self, message: str, line: int = None, column: int = None):
        super().__init__(message, details={'line': line, 'column': column})
        self.line = line
        self.column = column

    def __str__(self):
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class MissingLocaleIdError(LoadError):
    """Raised when a catalog document does not declare its locale."""
    pass


class CatalogFileError(LoadError):
    """Raised when a catalog file cannot be read or written."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


# =============================================================================
# Registry Exceptions
# =============================================================================

class RegistryError(CatalogError):
    """Base exception for catalog registry errors."""
    pass


class UnknownLocaleError(RegistryError):
    """Raised when a locale is requested that has no registered catalog."""

    def __init__(self, locale_id: str):
        super().__init__(f"No catalog registered for locale '{locale_id}'",
                         details={'locale_id': locale_id})
        self.locale_id = locale_id


# =============================================================================
# Export Exceptions
# =============================================================================

class ExportError(CatalogError):
    """Raised when a store holds text that a .ts document cannot carry."""

    def __init__(self, message: str, context: str = None, source_text: str = None):
        super().__init__(message, details={'context': context, 'source': source_text})
        self.context = context
        self.source_text = source_text


__all__ = [
    'CatalogError',
    'LoadError', 'MalformedCatalogError', 'MissingLocaleIdError', 'CatalogFileError',
    'RegistryError', 'UnknownLocaleError',
    'ExportError',
]
