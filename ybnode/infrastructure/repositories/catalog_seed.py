"""
Catalog Seeding

Loads universes, access keys, releases and on-prem nodes from a JSON document
into any catalog exposing the save_* methods (SQLiteCatalog, InMemoryCatalog).

Expected shape:
    {
        "universes": [{"uuid": ..., "name": ..., "access_key_code": ...,
                       "master_hosts": [...], "master_rpc_port": 7100}],
        "access_keys": [{"key_code": ..., "provider_uuid": ...,
                         "key_info": {"private_key": ..., "vault_file": ...}}],
        "releases": {"2.0.1.0": "/opt/yugabyte/releases/yugabyte-2.0.1.0.tar.gz"},
        "node_instances": [{"node_name": ..., "details": {...}}]
    }
"""

import logging
from typing import Any, Mapping
from uuid import UUID
from ybnode.domain.entities.universe import Universe, DEFAULT_MASTER_RPC_PORT
from ybnode.domain.entities.access_key import AccessKey, KeyInfo
from ybnode.domain.entities.node_instance import NodeInstance

logger = logging.getLogger(__name__)


def seed_catalog(catalog, data: Mapping[str, Any]) -> dict[str, int]:
    """Save every record in data. Returns the number of records per kind."""
    counts = {"universes": 0, "access_keys": 0, "releases": 0, "node_instances": 0}

    for item in data.get("universes", []):
        catalog.save_universe(Universe(
            uuid=UUID(str(item["uuid"])),
            name=item["name"],
            access_key_code=item.get("access_key_code"),
            master_hosts=tuple(item.get("master_hosts", ())),
            master_rpc_port=int(item.get("master_rpc_port", DEFAULT_MASTER_RPC_PORT)),
        ))
        counts["universes"] += 1

    for item in data.get("access_keys", []):
        catalog.save_access_key(AccessKey(
            key_code=item["key_code"],
            provider_uuid=UUID(str(item["provider_uuid"])),
            key_info=KeyInfo(**item.get("key_info", {})),
        ))
        counts["access_keys"] += 1

    for version, package_path in data.get("releases", {}).items():
        catalog.save_release(version, package_path)
        counts["releases"] += 1

    for item in data.get("node_instances", []):
        catalog.save_node_instance(
            NodeInstance(node_name=item["node_name"], details=dict(item.get("details", {})))
        )
        counts["node_instances"] += 1

    logger.info("Seeded catalog: %s", counts)
    return counts
