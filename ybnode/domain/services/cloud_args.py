"""
Cloud Arguments

Architectural Intent:
- Derives provider, zone, network and on-prem metadata flags from placement
- Independent of which lifecycle command is being composed

Design Decisions:
- The docker network name is injected, not read from global configuration
- An unset network is an error; there is no default network
"""

import logging
from typing import Optional
from ybnode.domain.entities.node_task_params import NodeTaskParams
from ybnode.domain.exceptions import MissingConfigurationError, NotFoundError
from ybnode.domain.ports.catalog_ports import NodeInventoryPort
from ybnode.domain.value_objects.command_types import CloudType

logger = logging.getLogger(__name__)

DOCKER_NETWORK_SETTING = "docker.network"


class CloudArgsBuilder:
    def __init__(
        self,
        node_inventory: NodeInventoryPort,
        docker_network: Optional[str] = None,
    ):
        self.node_inventory = node_inventory
        self.docker_network = docker_network

    def build(self, params: NodeTaskParams) -> list[str]:
        args = ["--zone", params.zone.code]

        if params.cloud == CloudType.DOCKER:
            if not self.docker_network:
                raise MissingConfigurationError(DOCKER_NETWORK_SETTING)
            args += ["--network", self.docker_network]

        if params.cloud == CloudType.ONPREM:
            node = self.node_inventory.get_node_by_name(params.node_name)
            if node is None:
                raise NotFoundError(f"No on-prem node instance named {params.node_name}")
            logger.debug("Using on-prem metadata for %s", params.node_name)
            args += ["--node_metadata", node.details_json]

        return args
