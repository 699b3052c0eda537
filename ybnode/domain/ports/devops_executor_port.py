"""
Devops Executor Port

Architectural Intent:
- Port interface for running a composed node command
- Locating the executable, working directory and process handling live in adapters
- Implemented by FabricDevopsExecutor (local or via a control host)
"""

from abc import ABC, abstractmethod
from ybnode.domain.value_objects.node_command import NodeCommand, ShellResponse


class DevopsExecutorPort(ABC):
    """
    Port interface for executing node commands with the provisioning executable.
    """

    @abstractmethod
    async def run(self, command: NodeCommand) -> ShellResponse:
        """
        Runs the command and returns its exit status and captured output.
        Failures to launch are reported as a response with code -1.
        """
        pass
