"""
Node Command Events

Published by RunNodeCommand; aggregate_id is the node name.
"""

from dataclasses import dataclass
from typing import Any, Optional
from ybnode.domain.events.event_base import DomainEvent


@dataclass(frozen=True)
class NodeCommandComposedEvent(DomainEvent):
    verb: str = ""
    args: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(verb=self.verb, args=list(self.args))
        return data


@dataclass(frozen=True)
class NodeCommandSucceededEvent(DomainEvent):
    verb: str = ""
    duration_seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(verb=self.verb, duration_seconds=self.duration_seconds)
        return data


@dataclass(frozen=True)
class NodeCommandFailedEvent(DomainEvent):
    verb: str = ""
    error_message: str = ""
    exit_code: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            verb=self.verb,
            error_message=self.error_message,
            exit_code=self.exit_code,
        )
        return data
