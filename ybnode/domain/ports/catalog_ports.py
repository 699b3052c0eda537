"""
Catalog Ports

Architectural Intent:
- Read-only lookups the composer performs against persisted state
- Universe records, access keys, the release catalog and on-prem inventory
- Implemented by SQLite and in-memory catalog adapters

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- Lookups return None for absent records; the composer decides which absences are errors
"""

from typing import Protocol, Optional, runtime_checkable
from uuid import UUID
from ybnode.domain.entities.universe import Universe
from ybnode.domain.entities.access_key import AccessKey
from ybnode.domain.entities.node_instance import NodeInstance


@runtime_checkable
class UniverseRepositoryPort(Protocol):
    def get_universe(self, universe_uuid: UUID) -> Optional[Universe]: ...


@runtime_checkable
class AccessKeyRepositoryPort(Protocol):
    def get_access_key(
        self, provider_uuid: UUID, key_code: str
    ) -> Optional[AccessKey]: ...


@runtime_checkable
class ReleaseCatalogPort(Protocol):
    def get_release_by_version(self, version: str) -> Optional[str]:
        """Return the package path for a software version."""
        ...


@runtime_checkable
class NodeInventoryPort(Protocol):
    def get_node_by_name(self, node_name: str) -> Optional[NodeInstance]: ...
