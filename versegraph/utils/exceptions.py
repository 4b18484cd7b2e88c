"""
Custom exception hierarchy for VerseGraph.

Provides structured error types for better error handling and debugging.
All exceptions inherit from VerseGraphError for easy catching.
"""


class VerseGraphError(Exception):
    """
    Base exception for all VerseGraph errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize VerseGraph error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class StoreError(VerseGraphError):
    """
    Base exception for store operations.
    Used for errors related to data storage operations.
    """

    pass


class CrossReferenceStoreError(StoreError):
    """
    Cross-reference store operation errors.
    Raised when the connection catalogue cannot be read or written.
    """

    pass


class GraphIntegrityError(VerseGraphError):
    """
    Graph integrity errors.
    Raised when a connection references a node missing from the graph.
    """

    pass


class NotFoundError(VerseGraphError):
    """
    Resource not found errors.
    Raised when a requested node, connection or conversation doesn't exist.
    """

    pass


class ConfigurationError(VerseGraphError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class ArchiveError(VerseGraphError):
    """Base exception for conversation archive operations."""

    pass


class ArchiveExportError(ArchiveError):
    """
    Export errors.
    Raised when conversations cannot be serialized or written to disk.
    """

    pass


class ArchiveImportError(ArchiveError):
    """
    Import errors.
    Raised when an import file is unreadable or not a conversation export.
    """

    pass
