"""
Domain Services Package

Architectural Intent:
- Stateless builders that compose node command arguments
- Each builder owns one concern: cloud placement, access, devices, configure variants
"""

from ybnode.domain.services.device_args import device_args
from ybnode.domain.services.cloud_args import CloudArgsBuilder
from ybnode.domain.services.access_args import AccessArgsBuilder
from ybnode.domain.services.configure_args import ConfigureArgsBuilder
from ybnode.domain.services.node_command_composer import NodeCommandComposer

__all__ = [
    "device_args",
    "CloudArgsBuilder",
    "AccessArgsBuilder",
    "ConfigureArgsBuilder",
    "NodeCommandComposer",
]
