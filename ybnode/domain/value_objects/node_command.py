"""
Node Command Value Object

Architectural Intent:
- Immutable result of composing a node lifecycle command
- Carries everything the executor needs: region, verb, cloud args, command args
- Renders the final argv for the provisioning executable; running it is an adapter concern
"""

from dataclasses import dataclass
from typing import Optional
from ybnode.domain.value_objects.command_types import NodeCommandType
from ybnode.domain.value_objects.placement import Region

COMMAND_CATEGORY = "instance"


@dataclass(frozen=True)
class NodeCommand:
    command_type: NodeCommandType
    provider_code: str
    region: Region
    cloud_args: tuple[str, ...]
    args: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.args:
            raise ValueError("Node command must at least carry the node name")

    @property
    def verb(self) -> str:
        return self.command_type.verb

    @property
    def node_name(self) -> str:
        return self.args[-1]

    def to_argv(self, script: str) -> list[str]:
        """
        Full argument vector, e.g.
        bin/ybcloud.sh aws --region us-west-1 --zone us-west-1a instance provision ... n1
        """
        return [
            script,
            self.provider_code,
            "--region",
            self.region.code,
            *self.cloud_args,
            COMMAND_CATEGORY,
            self.verb,
            *self.args,
        ]


@dataclass(frozen=True)
class ShellResponse:
    """Exit status and captured output of an executed node command."""
    code: int
    message: str = ""
    command: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.code == 0
