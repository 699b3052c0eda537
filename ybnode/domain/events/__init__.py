"""
Domain Events Package

Architectural Intent:
- Contains node command events and their base class
- Events are the primary mechanism for reporting command outcomes
"""

from ybnode.domain.events.event_base import DomainEvent
from ybnode.domain.events.node_command_events import (
    NodeCommandComposedEvent,
    NodeCommandSucceededEvent,
    NodeCommandFailedEvent,
)

__all__ = [
    "DomainEvent",
    "NodeCommandComposedEvent",
    "NodeCommandSucceededEvent",
    "NodeCommandFailedEvent",
]
