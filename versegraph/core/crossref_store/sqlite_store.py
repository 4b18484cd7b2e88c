"""
SQLite cross-reference store implementation using aiosqlite.
"""

from datetime import datetime
from pathlib import Path

import aiosqlite

from versegraph.core.crossref_store.base import CrossReferenceStore
from versegraph.core.crossref_store.catalogue import BUILTIN_CROSS_REFERENCES
from versegraph.models.graph import ConnectionStrength, ConnectionType, VerseConnection
from versegraph.utils.exceptions import CrossReferenceStoreError
from versegraph.utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = (
    "id, source_reference, target_reference, connection_type, strength, "
    "explanation, ai_generated, created_at"
)


class SQLiteCrossReferenceStore(CrossReferenceStore):
    """
    SQLite-backed cross-reference catalogue.

    Features:
    - Local, file-based storage
    - Indexed lookups by source, target and type
    - Idempotent seeding of the built-in catalogue
    """

    def __init__(self, db_path: str = "data/versegraph.db", seed_catalogue: bool = True):
        """
        Initialize SQLite cross-reference store.

        Args:
            db_path: Path to SQLite database file
            seed_catalogue: Insert the built-in catalogue on initialize
        """
        self.db_path = db_path
        self.seed_catalogue = seed_catalogue
        self.connection: aiosqlite.Connection | None = None

        # Ensure directory exists
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async def connect(self) -> aiosqlite.Connection:
        """Establish connection to SQLite."""
        if self.connection is None:
            try:
                self.connection = await aiosqlite.connect(self.db_path)
                await self.connection.execute("PRAGMA journal_mode = WAL")
                await self.connection.commit()
            except aiosqlite.Error as e:
                raise CrossReferenceStoreError(
                    f"Failed to open cross-reference database: {e}",
                    context={"db_path": self.db_path},
                ) from e
        return self.connection

    async def initialize(self) -> None:
        """Create schema and seed the catalogue."""
        db = await self.connect()

        try:
            await db.execute(
                """
                CREATE TABLE IF NOT EXISTS connections (
                    id TEXT PRIMARY KEY,
                    source_reference TEXT NOT NULL,
                    target_reference TEXT NOT NULL,
                    connection_type TEXT NOT NULL,
                    strength TEXT NOT NULL DEFAULT 'moderate',
                    explanation TEXT DEFAULT '',
                    ai_generated INTEGER DEFAULT 0,
                    created_at TEXT NOT NULL
                )
            """
            )
            await db.execute(
                "CREATE INDEX IF NOT EXISTS idx_connections_source ON connections(source_reference)"
            )
            await db.execute(
                "CREATE INDEX IF NOT EXISTS idx_connections_target ON connections(target_reference)"
            )
            await db.execute(
                "CREATE INDEX IF NOT EXISTS idx_connections_type ON connections(connection_type)"
            )
            await db.commit()

            if self.seed_catalogue:
                await db.executemany(
                    f"INSERT OR IGNORE INTO connections ({_COLUMNS}) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                    [self._to_row(c) for c in BUILTIN_CROSS_REFERENCES],
                )
                await db.commit()
        except aiosqlite.Error as e:
            raise CrossReferenceStoreError(
                f"Failed to initialize cross-reference schema: {e}",
                context={"db_path": self.db_path},
            ) from e

        logger.info(f"SQLite cross-reference store initialized at {self.db_path}")

    # ═══════════════════════════════════════════════════════════
    # CONNECTION OPERATIONS
    # ═══════════════════════════════════════════════════════════

    async def add_connection(self, connection: VerseConnection) -> str:
        db = await self.connect()
        try:
            await db.execute(
                f"INSERT OR REPLACE INTO connections ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                self._to_row(connection),
            )
            await db.commit()
        except aiosqlite.Error as e:
            raise CrossReferenceStoreError(
                f"Failed to add connection: {e}", context={"connection_id": connection.id}
            ) from e
        return connection.id

    async def get_cross_references(self, reference: str) -> list[VerseConnection]:
        return await self._select(
            "WHERE source_reference = ? OR target_reference = ? ORDER BY rowid",
            (reference, reference),
        )

    async def get_connections_by_type(
        self, connection_type: ConnectionType
    ) -> list[VerseConnection]:
        return await self._select(
            "WHERE connection_type = ? ORDER BY rowid", (connection_type.value,)
        )

    # ═══════════════════════════════════════════════════════════
    # UTILITY METHODS
    # ═══════════════════════════════════════════════════════════

    async def count_connections(self, connection_type: ConnectionType | None = None) -> int:
        db = await self.connect()

        query = "SELECT COUNT(*) FROM connections"
        params: list[str] = []
        if connection_type is not None:
            query += " WHERE connection_type = ?"
            params.append(connection_type.value)

        try:
            cursor = await db.execute(query, params)
            row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise CrossReferenceStoreError(f"Failed to count connections: {e}") from e
        return row[0] if row else 0

    async def close(self) -> None:
        """Close the connection."""
        if self.connection is not None:
            await self.connection.close()
            self.connection = None

    # ═══════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════

    async def _select(self, clause: str, params: tuple) -> list[VerseConnection]:
        db = await self.connect()
        try:
            cursor = await db.execute(f"SELECT {_COLUMNS} FROM connections {clause}", params)
            rows = await cursor.fetchall()
            return [self._row_to_connection(row) for row in rows]
        except aiosqlite.Error as e:
            raise CrossReferenceStoreError(f"Cross-reference query failed: {e}") from e
        except ValueError as e:
            # Unknown connection type or strength, or a malformed timestamp
            raise CrossReferenceStoreError(f"Corrupt cross-reference row: {e}") from e

    @staticmethod
    def _to_row(connection: VerseConnection) -> tuple:
        return (
            connection.id,
            connection.source_reference,
            connection.target_reference,
            connection.connection_type.value,
            connection.strength.value,
            connection.explanation,
            int(connection.ai_generated),
            connection.created_at.isoformat(),
        )

    @staticmethod
    def _row_to_connection(row: tuple) -> VerseConnection:
        """Convert database row to VerseConnection."""
        return VerseConnection(
            id=row[0],
            source_reference=row[1],
            target_reference=row[2],
            connection_type=ConnectionType(row[3]),
            strength=ConnectionStrength(row[4]),
            explanation=row[5] or "",
            ai_generated=bool(row[6]),
            created_at=datetime.fromisoformat(row[7]),
        )
