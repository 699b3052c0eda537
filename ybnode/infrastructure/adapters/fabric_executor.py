"""
Fabric Devops Executor

Architectural Intent:
- Infrastructure adapter implementing DevopsExecutorPort via Fabric
- Runs the provisioning executable from the devops home directory
- Locally by default, or over SSH on a control host when one is configured

Security:
- Every argument is quoted via shlex before it reaches a shell
- SSH connections use connect_timeout, allow_agent, look_for_keys
"""

import asyncio
import logging
import shlex
from typing import Optional
from fabric import Connection
from ybnode.domain.ports.devops_executor_port import DevopsExecutorPort
from ybnode.domain.value_objects.node_command import NodeCommand, ShellResponse
from ybnode.infrastructure.config import DevopsConfig
from ybnode.infrastructure.logging import node_context

logger = logging.getLogger(__name__)


class FabricDevopsExecutor(DevopsExecutorPort):
    """Adapter implementing DevopsExecutorPort via Fabric/Invoke."""

    def __init__(self, config: Optional[DevopsConfig] = None):
        self.config = config or DevopsConfig()

    def _get_connection(self) -> Connection:
        host = self.config.control_host or "localhost"
        return Connection(
            host=host,
            connect_timeout=30,
            connect_kwargs={
                "allow_agent": True,
                "look_for_keys": True,
            },
        )

    def render(self, command: NodeCommand) -> str:
        return shlex.join(command.to_argv(self.config.script))

    async def run(self, command: NodeCommand) -> ShellResponse:
        shell_command = self.render(command)

        def _run() -> ShellResponse:
            conn = self._get_connection()
            runner = conn.run if self.config.control_host else conn.local
            context = node_context(command.node_name, command.verb)
            logger.info(
                "Executing in %s: %s", self.config.home, shell_command, extra=context
            )
            try:
                with conn.cd(self.config.home):
                    result = runner(
                        shell_command,
                        hide=True,
                        warn=True,
                        timeout=self.config.command_timeout,
                    )
            except Exception as e:
                logger.error(
                    "Execution of %s failed: %s", command.verb, e,
                    extra=node_context(command.node_name, command.verb, exit_code=-1),
                )
                return ShellResponse(code=-1, message=str(e), command=shell_command)

            output = result.stdout if result.ok else (result.stderr or result.stdout)
            return ShellResponse(
                code=result.exited, message=output.strip(), command=shell_command
            )

        return await asyncio.get_running_loop().run_in_executor(None, _run)
