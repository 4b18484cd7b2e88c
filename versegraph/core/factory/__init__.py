"""
Factory modules for creating VerseGraph components.
"""

from versegraph.core.factory.store_factory import CrossReferenceStoreFactory

__all__ = [
    "CrossReferenceStoreFactory",
]
