"""Utility modules for VerseGraph."""

from versegraph.utils.exceptions import (
    ArchiveError,
    ArchiveExportError,
    ArchiveImportError,
    ConfigurationError,
    CrossReferenceStoreError,
    GraphIntegrityError,
    NotFoundError,
    StoreError,
    VerseGraphError,
)
from versegraph.utils.id_generator import (
    generate_connection_id,
    generate_conversation_id,
    generate_message_id,
)
from versegraph.utils.logger import get_logger, setup_logging, setup_logging_from_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
    # ID Generators
    "generate_connection_id",
    "generate_conversation_id",
    "generate_message_id",
    # Exceptions
    "VerseGraphError",
    "StoreError",
    "CrossReferenceStoreError",
    "GraphIntegrityError",
    "NotFoundError",
    "ConfigurationError",
    "ArchiveError",
    "ArchiveExportError",
    "ArchiveImportError",
]
