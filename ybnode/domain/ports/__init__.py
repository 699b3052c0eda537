"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the composer needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from ybnode.domain.ports.catalog_ports import (
    UniverseRepositoryPort,
    AccessKeyRepositoryPort,
    ReleaseCatalogPort,
    NodeInventoryPort,
)
from ybnode.domain.ports.devops_executor_port import DevopsExecutorPort
from ybnode.domain.ports.event_bus_port import EventBusPort

__all__ = [
    "UniverseRepositoryPort",
    "AccessKeyRepositoryPort",
    "ReleaseCatalogPort",
    "NodeInventoryPort",
    "DevopsExecutorPort",
    "EventBusPort",
]
