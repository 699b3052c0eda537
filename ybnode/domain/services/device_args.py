"""
Device Arguments

Architectural Intent:
- Translates a DeviceInfo layout into storage volume flags
- Shared by provision, configure and destroy commands
"""

from ybnode.domain.value_objects.device_info import DeviceInfo


def device_args(device_info: DeviceInfo) -> list[str]:
    args: list[str] = []
    # num_volumes wins over mount_points; the other is dropped when both are set.
    if device_info.num_volumes is not None:
        args += ["--num_volumes", str(device_info.num_volumes)]
    elif device_info.mount_points is not None:
        args += ["--mount_points", device_info.mount_points]
    if device_info.volume_size is not None:
        args += ["--volume_size", str(device_info.volume_size)]
    if device_info.disk_iops is not None:
        args += ["--disk_iops", str(device_info.disk_iops)]
    return args
