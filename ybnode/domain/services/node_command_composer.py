"""
Node Command Composer

Architectural Intent:
- Turns (command type, parameter bundle) into a NodeCommand for the provisioning executable
- Validates that the bundle variant matches the command type before anything else
- Pure: performs read-only catalog lookups, never executes or mutates anything

Argument order per command type:
- provision: instance flags (non on-prem) + access args + device args
- configure: configure sub-command + access args + device args
- list: --as_json
- destroy: device args
- control: process, command + access args
The node name is always the last argument. Cloud args are built separately.
"""

import logging
from typing import Callable, Optional
from ybnode.domain.entities.node_task_params import (
    NodeTaskParams,
    ProvisionParams,
    ConfigureParams,
    ControlParams,
    ListParams,
    DestroyParams,
)
from ybnode.domain.exceptions import MissingReferenceError, TypeMismatchError
from ybnode.domain.ports.catalog_ports import (
    UniverseRepositoryPort,
    AccessKeyRepositoryPort,
    ReleaseCatalogPort,
    NodeInventoryPort,
)
from ybnode.domain.services.access_args import AccessArgsBuilder
from ybnode.domain.services.cloud_args import CloudArgsBuilder
from ybnode.domain.services.configure_args import ConfigureArgsBuilder
from ybnode.domain.services.device_args import device_args
from ybnode.domain.value_objects.command_types import NodeCommandType, CloudType
from ybnode.domain.value_objects.device_info import DeviceInfo
from ybnode.domain.value_objects.node_command import NodeCommand

logger = logging.getLogger(__name__)


class NodeCommandComposer:
    def __init__(
        self,
        universes: UniverseRepositoryPort,
        access_keys: AccessKeyRepositoryPort,
        releases: ReleaseCatalogPort,
        node_inventory: NodeInventoryPort,
        docker_network: Optional[str] = None,
    ):
        self.access_args = AccessArgsBuilder(universes, access_keys)
        self.cloud_args = CloudArgsBuilder(node_inventory, docker_network)
        self.configure_args = ConfigureArgsBuilder(universes, releases)
        self._dispatch: dict[
            NodeCommandType,
            tuple[type[NodeTaskParams], Callable[[NodeTaskParams], list[str]]],
        ] = {
            NodeCommandType.PROVISION: (ProvisionParams, self._provision_args),
            NodeCommandType.CONFIGURE: (ConfigureParams, self._configure_args),
            NodeCommandType.LIST: (ListParams, self._list_args),
            NodeCommandType.DESTROY: (DestroyParams, self._destroy_args),
            NodeCommandType.CONTROL: (ControlParams, self._control_args),
        }

    def compose(self, command_type: NodeCommandType, params: NodeTaskParams) -> NodeCommand:
        expected, build_args = self._dispatch[command_type]
        if not isinstance(params, expected):
            raise TypeMismatchError(
                command_type.verb, expected.__name__, type(params).__name__
            )

        args = build_args(params)
        args.append(params.node_name)
        cloud_args = self.cloud_args.build(params)

        command = NodeCommand(
            command_type=command_type,
            provider_code=params.cloud.value,
            region=params.region,
            cloud_args=tuple(cloud_args),
            args=tuple(args),
        )
        logger.debug(
            "Composed %s command for %s: %s", command.verb, params.node_name, command.args
        )
        return command

    def _provision_args(self, params: ProvisionParams) -> list[str]:
        args: list[str] = []
        if params.cloud != CloudType.ONPREM:
            args += [
                "--instance_type", _required(params.instance_type, "instance type", params),
                "--cloud_subnet", _required(params.subnet_id, "subnet id", params),
                "--machine_image", _required(params.region.yb_image, "machine image", params),
                "--assign_public_ip",
            ]
        args += self.access_args.build(params)
        return args + self._device_args(params.device_info)

    def _configure_args(self, params: ConfigureParams) -> list[str]:
        args = self.configure_args.build(params)
        args += self.access_args.build(params)
        return args + self._device_args(params.device_info)

    def _list_args(self, params: ListParams) -> list[str]:
        return ["--as_json"]

    def _destroy_args(self, params: DestroyParams) -> list[str]:
        return self._device_args(params.device_info)

    def _control_args(self, params: ControlParams) -> list[str]:
        return [params.process, params.command] + self.access_args.build(params)

    @staticmethod
    def _device_args(device_info: Optional[DeviceInfo]) -> list[str]:
        if device_info is None:
            return []
        return device_args(device_info)


def _required(value: Optional[str], what: str, params: NodeTaskParams) -> str:
    if not value:
        raise MissingReferenceError(f"Missing {what} for node {params.node_name}")
    return value
