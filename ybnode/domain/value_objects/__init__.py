"""
Domain Value Objects Package

Architectural Intent:
- Immutable, self-validating values shared by the composer and its adapters
"""

from ybnode.domain.value_objects.command_types import (
    NodeCommandType,
    CloudType,
    ConfigureKind,
    SoftwareTaskSubType,
    ServerType,
)
from ybnode.domain.value_objects.placement import Region, AvailabilityZone
from ybnode.domain.value_objects.device_info import DeviceInfo
from ybnode.domain.value_objects.node_command import NodeCommand, ShellResponse

__all__ = [
    "NodeCommandType",
    "CloudType",
    "ConfigureKind",
    "SoftwareTaskSubType",
    "ServerType",
    "Region",
    "AvailabilityZone",
    "DeviceInfo",
    "NodeCommand",
    "ShellResponse",
]
