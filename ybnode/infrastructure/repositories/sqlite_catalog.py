"""
SQLite Catalog

Architectural Intent:
- Persistent storage backend using SQLite (stdlib, zero external deps)
- Stores universes, access keys, releases and on-prem node instances
- Implements every read-only catalog port the composer depends on
- Uses WAL mode for concurrent read/write support

Design Decisions:
- Single database file at configurable path (default: ybnode.db)
- Auto-creates tables on first use
- Thread-safe via sqlite3's check_same_thread=False
- List and mapping columns stored as JSON text
"""

from __future__ import annotations
import sqlite3
import json
import logging
from typing import Optional
from uuid import UUID
from ybnode.domain.entities.universe import Universe
from ybnode.domain.entities.access_key import AccessKey, KeyInfo
from ybnode.domain.entities.node_instance import NodeInstance

logger = logging.getLogger(__name__)


class SQLiteCatalog:
    """Persistent catalog using SQLite."""

    def __init__(self, db_path: str = "ybnode.db"):
        self._db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    def connect(self) -> None:
        """Open database connection and create tables."""
        self._conn = sqlite3.connect(
            self._db_path,
            check_same_thread=False,
        )
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.row_factory = sqlite3.Row
        self._create_tables()
        logger.info("SQLite catalog connected: %s", self._db_path)

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def _create_tables(self) -> None:
        """Create tables if they don't exist."""
        assert self._conn is not None
        self._conn.executescript("""
            CREATE TABLE IF NOT EXISTS universes (
                uuid TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                access_key_code TEXT,
                master_hosts TEXT NOT NULL DEFAULT '[]',
                master_rpc_port INTEGER NOT NULL
            );

            CREATE TABLE IF NOT EXISTS access_keys (
                provider_uuid TEXT NOT NULL,
                key_code TEXT NOT NULL,
                public_key TEXT,
                private_key TEXT,
                vault_file TEXT,
                vault_password_file TEXT,
                PRIMARY KEY (provider_uuid, key_code)
            );

            CREATE TABLE IF NOT EXISTS releases (
                version TEXT PRIMARY KEY,
                package_path TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS node_instances (
                node_name TEXT PRIMARY KEY,
                details TEXT NOT NULL DEFAULT '{}'
            );
        """)

    # -- Universes -----------------------------------------------------------

    def save_universe(self, universe: Universe) -> None:
        assert self._conn is not None
        self._conn.execute(
            """INSERT OR REPLACE INTO universes
               (uuid, name, access_key_code, master_hosts, master_rpc_port)
               VALUES (?, ?, ?, ?, ?)""",
            (str(universe.uuid), universe.name, universe.access_key_code,
             json.dumps(list(universe.master_hosts)), universe.master_rpc_port),
        )
        self._conn.commit()

    def get_universe(self, universe_uuid: UUID) -> Optional[Universe]:
        assert self._conn is not None
        row = self._conn.execute(
            "SELECT * FROM universes WHERE uuid = ?", (str(universe_uuid),)
        ).fetchone()
        if row is None:
            return None
        return Universe(
            uuid=UUID(row["uuid"]),
            name=row["name"],
            access_key_code=row["access_key_code"],
            master_hosts=tuple(json.loads(row["master_hosts"])),
            master_rpc_port=row["master_rpc_port"],
        )

    # -- Access Keys ---------------------------------------------------------

    def save_access_key(self, access_key: AccessKey) -> None:
        assert self._conn is not None
        info = access_key.key_info
        self._conn.execute(
            """INSERT OR REPLACE INTO access_keys
               (provider_uuid, key_code, public_key, private_key, vault_file, vault_password_file)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (str(access_key.provider_uuid), access_key.key_code, info.public_key,
             info.private_key, info.vault_file, info.vault_password_file),
        )
        self._conn.commit()

    def get_access_key(self, provider_uuid: UUID, key_code: str) -> Optional[AccessKey]:
        assert self._conn is not None
        row = self._conn.execute(
            "SELECT * FROM access_keys WHERE provider_uuid = ? AND key_code = ?",
            (str(provider_uuid), key_code),
        ).fetchone()
        if row is None:
            return None
        return AccessKey(
            key_code=row["key_code"],
            provider_uuid=UUID(row["provider_uuid"]),
            key_info=KeyInfo(
                public_key=row["public_key"],
                private_key=row["private_key"],
                vault_file=row["vault_file"],
                vault_password_file=row["vault_password_file"],
            ),
        )

    # -- Releases ------------------------------------------------------------

    def save_release(self, version: str, package_path: str) -> None:
        assert self._conn is not None
        self._conn.execute(
            "INSERT OR REPLACE INTO releases (version, package_path) VALUES (?, ?)",
            (version, package_path),
        )
        self._conn.commit()

    def get_release_by_version(self, version: str) -> Optional[str]:
        assert self._conn is not None
        row = self._conn.execute(
            "SELECT package_path FROM releases WHERE version = ?", (version,)
        ).fetchone()
        return row[0] if row else None

    # -- Node Instances ------------------------------------------------------

    def save_node_instance(self, node: NodeInstance) -> None:
        assert self._conn is not None
        self._conn.execute(
            "INSERT OR REPLACE INTO node_instances (node_name, details) VALUES (?, ?)",
            (node.node_name, json.dumps(node.details)),
        )
        self._conn.commit()

    def get_node_by_name(self, node_name: str) -> Optional[NodeInstance]:
        assert self._conn is not None
        row = self._conn.execute(
            "SELECT * FROM node_instances WHERE node_name = ?", (node_name,)
        ).fetchone()
        if row is None:
            return None
        return NodeInstance(node_name=row["node_name"], details=json.loads(row["details"]))
