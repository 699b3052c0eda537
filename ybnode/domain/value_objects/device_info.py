from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeviceInfo:
    """
    Value Object describing the storage layout requested for a node.
    Every field is optional; num_volumes takes precedence over mount_points.
    """
    num_volumes: Optional[int] = None
    mount_points: Optional[str] = None
    volume_size: Optional[int] = None
    disk_iops: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("num_volumes", "volume_size", "disk_iops"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} cannot be negative, got {value}")

