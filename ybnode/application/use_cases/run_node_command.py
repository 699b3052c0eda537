"""
Run Node Command Use Case

Architectural Intent:
- Composes a node command and hands it to the devops executor
- Publishes composed/succeeded/failed events for every attempt
- Records duration and exit code metrics when an exporter is wired in

Error Handling:
- Composition errors are terminal: a failed event is published and the error re-raised
- Non-zero exit codes are returned to the caller, not raised; retries belong to the workflow
"""

import logging
import time
from typing import Optional
from ybnode.domain.entities.node_task_params import NodeTaskParams
from ybnode.domain.events.node_command_events import (
    NodeCommandComposedEvent,
    NodeCommandSucceededEvent,
    NodeCommandFailedEvent,
)
from ybnode.domain.exceptions import NodeCommandError
from ybnode.domain.ports.devops_executor_port import DevopsExecutorPort
from ybnode.domain.ports.event_bus_port import EventBusPort
from ybnode.domain.services.node_command_composer import NodeCommandComposer
from ybnode.domain.value_objects.command_types import NodeCommandType
from ybnode.domain.value_objects.node_command import ShellResponse
from ybnode.infrastructure.logging import node_context
from ybnode.infrastructure.telemetry.otel_exporter import OTELExporter

logger = logging.getLogger(__name__)


class RunNodeCommand:
    def __init__(
        self,
        composer: NodeCommandComposer,
        executor: DevopsExecutorPort,
        event_bus: EventBusPort,
        exporter: Optional[OTELExporter] = None,
    ):
        self.composer = composer
        self.executor = executor
        self.event_bus = event_bus
        self.exporter = exporter

    async def execute(
        self, command_type: NodeCommandType, params: NodeTaskParams
    ) -> ShellResponse:
        try:
            command = self.composer.compose(command_type, params)
        except NodeCommandError as e:
            logger.error(
                "Failed to compose %s command for %s: %s",
                command_type.verb, params.node_name, e,
                extra=node_context(params.node_name, command_type.verb),
            )
            await self.event_bus.publish([
                NodeCommandFailedEvent(
                    aggregate_id=params.node_name,
                    verb=command_type.verb,
                    error_message=str(e),
                )
            ])
            raise

        await self.event_bus.publish([
            NodeCommandComposedEvent(
                aggregate_id=params.node_name, verb=command.verb, args=command.args
            )
        ])

        logger.info(
            "Running %s on node %s", command.verb, params.node_name,
            extra=node_context(params.node_name, command.verb),
        )
        started = time.monotonic()
        response = await self.executor.run(command)
        duration = time.monotonic() - started

        if self.exporter is not None:
            self.exporter.record_node_command(
                params.node_name, command.verb, response.code, duration
            )

        if response.ok:
            logger.info(
                "%s on node %s finished in %.1fs", command.verb, params.node_name, duration,
                extra=node_context(
                    params.node_name, command.verb, exit_code=0, duration_seconds=duration
                ),
            )
            event = NodeCommandSucceededEvent(
                aggregate_id=params.node_name,
                verb=command.verb,
                duration_seconds=duration,
            )
        else:
            logger.error(
                "%s on node %s exited with %d: %s",
                command.verb, params.node_name, response.code, response.message,
                extra=node_context(
                    params.node_name, command.verb,
                    exit_code=response.code, duration_seconds=duration,
                ),
            )
            event = NodeCommandFailedEvent(
                aggregate_id=params.node_name,
                verb=command.verb,
                error_message=response.message,
                exit_code=response.code,
            )
        await self.event_bus.publish([event])
        return response
