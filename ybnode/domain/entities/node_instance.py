import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class NodeInstance:
    """
    Pre-registered on-prem machine, keyed by the node name it was assigned.
    """
    node_name: str
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.node_name:
            raise ValueError("Node name cannot be empty")

    @property
    def details_json(self) -> str:
        return json.dumps(self.details, separators=(",", ":"))
