"""
Access Arguments

Architectural Intent:
- Derives credential and security group flags from the universe's access key
- Provision commands additionally name the key pair and security group
"""

import logging
from ybnode.domain.entities.node_task_params import NodeTaskParams, ProvisionParams
from ybnode.domain.exceptions import MissingReferenceError, NotFoundError
from ybnode.domain.ports.catalog_ports import (
    UniverseRepositoryPort,
    AccessKeyRepositoryPort,
)
from ybnode.domain.services.universe_lookup import require_universe

logger = logging.getLogger(__name__)


def security_group_name(region_code: str) -> str:
    return f"yb-{region_code}-sg"


class AccessArgsBuilder:
    def __init__(
        self,
        universes: UniverseRepositoryPort,
        access_keys: AccessKeyRepositoryPort,
    ):
        self.universes = universes
        self.access_keys = access_keys

    def build(self, params: NodeTaskParams) -> list[str]:
        universe = require_universe(self.universes, params)

        key_code = universe.access_key_code
        if key_code is None:
            logger.debug("Universe %s has no access key, skipping credentials", universe.name)
            return []

        access_key = self.access_keys.get_access_key(params.region.provider_uuid, key_code)
        if access_key is None:
            raise NotFoundError(
                f"Access key {key_code} not found for provider {params.region.provider_uuid}"
            )

        key_info = access_key.key_info
        args: list[str] = []
        if key_info.vault_file is not None:
            if key_info.vault_password_file is None:
                raise MissingReferenceError(
                    f"Access key {key_code} has a vault file but no vault password file"
                )
            args += [
                "--vars_file", key_info.vault_file,
                "--vault_password_file", key_info.vault_password_file,
            ]
        if key_info.private_key is not None:
            args += ["--private_key_file", key_info.private_key]
            # Provision only.
            if isinstance(params, ProvisionParams):
                args += [
                    "--key_pair_name", key_code,
                    "--security_group", security_group_name(params.region.code),
                ]
        return args
