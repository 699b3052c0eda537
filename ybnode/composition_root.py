"""
Composition Root

Architectural Intent:
- Dependency injection composition root for ybnode
- Single place where the catalog, composer, executor and use case are wired together

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Settings the composer needs (docker network) are passed in explicitly
- Callers own the catalog connection and close it via container.close()
"""

from dataclasses import dataclass
from typing import Optional
from ybnode.application.use_cases.run_node_command import RunNodeCommand
from ybnode.domain.services.node_command_composer import NodeCommandComposer
from ybnode.infrastructure.adapters.fabric_executor import FabricDevopsExecutor
from ybnode.infrastructure.config import YbNodeConfig, load_config
from ybnode.infrastructure.event_bus import EventBus
from ybnode.infrastructure.repositories.sqlite_catalog import SQLiteCatalog
from ybnode.infrastructure.telemetry.otel_exporter import OTELExporter, create_exporter


@dataclass
class YbNodeContainer:
    """DI container holding all wired dependencies."""

    config: YbNodeConfig
    catalog: SQLiteCatalog
    composer: NodeCommandComposer
    executor: FabricDevopsExecutor
    event_bus: EventBus
    exporter: OTELExporter
    run_node_command: RunNodeCommand

    def close(self) -> None:
        self.catalog.close()


def create_container(config: Optional[YbNodeConfig] = None) -> YbNodeContainer:
    """Create and wire all dependencies."""
    config = config or load_config()

    catalog = SQLiteCatalog(config.catalog.db_path)
    catalog.connect()

    composer = NodeCommandComposer(
        universes=catalog,
        access_keys=catalog,
        releases=catalog,
        node_inventory=catalog,
        docker_network=config.docker_network,
    )
    executor = FabricDevopsExecutor(config.devops)
    event_bus = EventBus()
    exporter = create_exporter(
        endpoint=config.telemetry.endpoint, insecure=config.telemetry.insecure
    )
    run_node_command = RunNodeCommand(composer, executor, event_bus, exporter)

    return YbNodeContainer(
        config=config,
        catalog=catalog,
        composer=composer,
        executor=executor,
        event_bus=event_bus,
        exporter=exporter,
        run_node_command=run_node_command,
    )
