"""
Event Bus Infrastructure

Architectural Intent:
- In-memory event bus implementation for publishing node command events
- Supports async subscription handlers
- Can be extended to use a message queue
"""

import logging
from typing import Callable, Awaitable
from ybnode.domain.events.event_base import DomainEvent

logger = logging.getLogger(__name__)


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[DomainEvent], Awaitable[None]]]] = {}

    async def publish(self, events: list[DomainEvent]) -> None:
        for event in events:
            handlers = self._handlers.get(type(event), [])
            logger.debug(
                "Publishing %s for %s to %d handlers",
                type(event).__name__, event.aggregate_id, len(handlers),
            )
            for handler in handlers:
                await handler(event)

    def subscribe(
        self, event_type: type, handler: Callable[[DomainEvent], Awaitable[None]]
    ) -> None:
        self._handlers.setdefault(event_type, []).append(handler)
