"""
Cross-reference store implementations for VerseGraph.

Available backends:
- InMemoryCrossReferenceStore: Built-in catalogue held in memory
- SQLiteCrossReferenceStore: File-backed catalogue using aiosqlite
"""

from versegraph.core.crossref_store.base import CrossReferenceStore
from versegraph.core.crossref_store.catalogue import BUILTIN_CROSS_REFERENCES
from versegraph.core.crossref_store.memory_store import InMemoryCrossReferenceStore
from versegraph.core.crossref_store.sqlite_store import SQLiteCrossReferenceStore

__all__ = [
    "BUILTIN_CROSS_REFERENCES",
    "CrossReferenceStore",
    "InMemoryCrossReferenceStore",
    "SQLiteCrossReferenceStore",
]
