"""
Node Command DTOs

Architectural Intent:
- Data Transfer Objects for the node command use case boundary
- Input validation at the application boundary
- Decouples the JSON representation used by the CLI from the domain bundles
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping
from uuid import UUID
from ybnode.domain.entities.node_task_params import (
    NodeTaskParams,
    PARAMS_BY_COMMAND_TYPE,
)
from ybnode.domain.value_objects.command_types import (
    NodeCommandType,
    CloudType,
    ConfigureKind,
)
from ybnode.domain.value_objects.device_info import DeviceInfo
from ybnode.domain.value_objects.placement import Region, AvailabilityZone


def _parse_uuid(value: Any, name: str) -> UUID:
    try:
        return value if isinstance(value, UUID) else UUID(str(value))
    except ValueError:
        raise ValueError(f"{name} is not a valid UUID: {value!r}") from None


def _require_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{name} must be a JSON object")
    return value


def _parse_region(data: Mapping[str, Any]) -> Region:
    data = _require_mapping(data, "region")
    return Region(
        uuid=_parse_uuid(data.get("uuid"), "region.uuid"),
        code=data.get("code", ""),
        provider_uuid=_parse_uuid(data.get("provider_uuid"), "region.provider_uuid"),
        yb_image=data.get("yb_image"),
    )


def _parse_zone(data: Mapping[str, Any]) -> AvailabilityZone:
    data = _require_mapping(data, "zone")
    return AvailabilityZone(
        uuid=_parse_uuid(data.get("uuid"), "zone.uuid"),
        code=data.get("code", ""),
    )


def params_from_dict(command_type: NodeCommandType, data: Mapping[str, Any]) -> NodeTaskParams:
    """Build the parameter bundle for command_type from a JSON-compatible mapping."""
    params_cls = PARAMS_BY_COMMAND_TYPE[command_type]
    known = {f.name for f in dataclasses.fields(params_cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(
            f"Unknown {command_type.verb} parameters: {', '.join(sorted(unknown))}"
        )

    for f in dataclasses.fields(params_cls):
        no_default = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        if no_default and f.name not in data:
            raise ValueError(f"{f.name} is required for {command_type.verb}")

    kwargs: dict[str, Any] = dict(data)
    kwargs["cloud"] = CloudType(data["cloud"])
    kwargs["region"] = _parse_region(data["region"])
    kwargs["zone"] = _parse_zone(data["zone"])
    if data.get("universe_uuid") is not None:
        kwargs["universe_uuid"] = _parse_uuid(data["universe_uuid"], "universe_uuid")
    if data.get("device_info") is not None:
        device_info = _require_mapping(data["device_info"], "device_info")
        kwargs["device_info"] = DeviceInfo(**device_info)
    if "type" in data:
        kwargs["type"] = ConfigureKind(data["type"])
    if "properties" in data:
        kwargs["properties"] = dict(data["properties"])
    if data.get("gflags") is not None:
        kwargs["gflags"] = {str(k): str(v) for k, v in data["gflags"].items()}
    return params_cls(**kwargs)


@dataclass(frozen=True)
class NodeCommandRequest:
    command: str
    params: Mapping[str, Any]

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("command cannot be empty")
        valid = [t.verb for t in NodeCommandType]
        if self.command not in valid:
            raise ValueError(
                f"Unknown command {self.command!r}, expected one of {', '.join(valid)}"
            )
        if not isinstance(self.params, Mapping):
            raise ValueError("params must be a JSON object")
        if not self.params.get("node_name"):
            raise ValueError("node_name cannot be empty")

    @property
    def command_type(self) -> NodeCommandType:
        return NodeCommandType(self.command)

    def to_params(self) -> NodeTaskParams:
        return params_from_dict(self.command_type, self.params)
