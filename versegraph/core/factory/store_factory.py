"""
Factory for creating cross-reference store backends.
"""

from versegraph.config import CrossReferenceConfig
from versegraph.core.crossref_store.base import CrossReferenceStore
from versegraph.core.crossref_store.memory_store import InMemoryCrossReferenceStore
from versegraph.core.crossref_store.sqlite_store import SQLiteCrossReferenceStore
from versegraph.utils.exceptions import ConfigurationError


class CrossReferenceStoreFactory:
    """Factory for creating cross-reference stores from configuration."""

    @staticmethod
    def create(config: CrossReferenceConfig) -> CrossReferenceStore:
        """
        Create cross-reference store from configuration.

        Args:
            config: Cross-reference configuration

        Returns:
            Cross-reference store instance

        Raises:
            ConfigurationError: If backend is not supported
        """
        if config.backend == "memory":
            return InMemoryCrossReferenceStore(seed_catalogue=config.seed_catalogue)
        elif config.backend == "sqlite":
            return SQLiteCrossReferenceStore(
                db_path=config.db_path,
                seed_catalogue=config.seed_catalogue,
            )
        else:
            raise ConfigurationError(
                f"Unsupported cross-reference backend: {config.backend}",
                context={"backend": config.backend},
            )
