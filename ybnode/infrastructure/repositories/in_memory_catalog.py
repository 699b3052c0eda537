"""
In-Memory Catalog

Architectural Intent:
- Dict-backed implementation of the catalog ports
- Used for dry runs and tests; mirrors the SQLiteCatalog save/get surface
"""

from typing import Optional
from uuid import UUID
from ybnode.domain.entities.universe import Universe
from ybnode.domain.entities.access_key import AccessKey
from ybnode.domain.entities.node_instance import NodeInstance


class InMemoryCatalog:
    def __init__(self) -> None:
        self._universes: dict[UUID, Universe] = {}
        self._access_keys: dict[tuple[UUID, str], AccessKey] = {}
        self._releases: dict[str, str] = {}
        self._nodes: dict[str, NodeInstance] = {}

    def save_universe(self, universe: Universe) -> None:
        self._universes[universe.uuid] = universe

    def get_universe(self, universe_uuid: UUID) -> Optional[Universe]:
        return self._universes.get(universe_uuid)

    def save_access_key(self, access_key: AccessKey) -> None:
        self._access_keys[(access_key.provider_uuid, access_key.key_code)] = access_key

    def get_access_key(self, provider_uuid: UUID, key_code: str) -> Optional[AccessKey]:
        return self._access_keys.get((provider_uuid, key_code))

    def save_release(self, version: str, package_path: str) -> None:
        self._releases[version] = package_path

    def get_release_by_version(self, version: str) -> Optional[str]:
        return self._releases.get(version)

    def save_node_instance(self, node: NodeInstance) -> None:
        self._nodes[node.node_name] = node

    def get_node_by_name(self, node_name: str) -> Optional[NodeInstance]:
        return self._nodes.get(node_name)
