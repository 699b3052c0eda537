"""
Node Task Parameters

Architectural Intent:
- One parameter bundle per node command type (tagged union)
- Each variant declares the command type it belongs to via COMMAND_TYPE
- Bundles are built fresh per orchestration step and consumed once

Design Decisions:
- kw_only dataclasses so the shared fields can live on the base class
- Frozen; the composer only reads them
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional
from uuid import UUID
from ybnode.domain.value_objects.command_types import (
    NodeCommandType,
    CloudType,
    ConfigureKind,
)
from ybnode.domain.value_objects.placement import Region, AvailabilityZone
from ybnode.domain.value_objects.device_info import DeviceInfo

TASK_SUB_TYPE_PROPERTY = "taskSubType"
PROCESS_TYPE_PROPERTY = "processType"


@dataclass(frozen=True, kw_only=True)
class NodeTaskParams:
    COMMAND_TYPE: ClassVar[Optional[NodeCommandType]] = None

    node_name: str
    cloud: CloudType
    region: Region
    zone: AvailabilityZone
    universe_uuid: Optional[UUID] = None

    def __post_init__(self) -> None:
        if not self.node_name:
            raise ValueError("node_name cannot be empty")


@dataclass(frozen=True, kw_only=True)
class ProvisionParams(NodeTaskParams):
    COMMAND_TYPE: ClassVar[Optional[NodeCommandType]] = NodeCommandType.PROVISION

    instance_type: Optional[str] = None
    subnet_id: Optional[str] = None
    device_info: Optional[DeviceInfo] = None


@dataclass(frozen=True, kw_only=True)
class ConfigureParams(NodeTaskParams):
    COMMAND_TYPE: ClassVar[Optional[NodeCommandType]] = NodeCommandType.CONFIGURE

    type: ConfigureKind
    yb_software_version: Optional[str] = None
    is_master_in_shell_mode: bool = False
    properties: dict[str, str] = field(default_factory=dict)
    gflags: Optional[dict[str, str]] = None
    device_info: Optional[DeviceInfo] = None

    def get_property(self, name: str) -> Optional[str]:
        return self.properties.get(name)


@dataclass(frozen=True, kw_only=True)
class ControlParams(NodeTaskParams):
    COMMAND_TYPE: ClassVar[Optional[NodeCommandType]] = NodeCommandType.CONTROL

    process: str
    command: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.process:
            raise ValueError("process cannot be empty")
        if not self.command:
            raise ValueError("command cannot be empty")


@dataclass(frozen=True, kw_only=True)
class ListParams(NodeTaskParams):
    COMMAND_TYPE: ClassVar[Optional[NodeCommandType]] = NodeCommandType.LIST


@dataclass(frozen=True, kw_only=True)
class DestroyParams(NodeTaskParams):
    COMMAND_TYPE: ClassVar[Optional[NodeCommandType]] = NodeCommandType.DESTROY

    device_info: Optional[DeviceInfo] = None


PARAMS_BY_COMMAND_TYPE: dict[NodeCommandType, type[NodeTaskParams]] = {
    cls.COMMAND_TYPE: cls
    for cls in (ProvisionParams, ConfigureParams, ControlParams, ListParams, DestroyParams)
}
