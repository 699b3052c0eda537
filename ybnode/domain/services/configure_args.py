"""
Configure Arguments

Architectural Intent:
- Builds the configure sub-command: master addresses plus one of three variants
- EVERYTHING pushes software and config, SOFTWARE downloads or installs a package,
  GFLAGS replaces the flags of a single server role
- One builder method per ConfigureKind, selected through a dispatch table
"""

import json
import logging
from typing import Callable
from ybnode.domain.entities.node_task_params import (
    ConfigureParams,
    TASK_SUB_TYPE_PROPERTY,
    PROCESS_TYPE_PROPERTY,
)
from ybnode.domain.exceptions import (
    EmptyInputError,
    InvalidPropertyError,
    NotFoundError,
    ReleaseNotFoundError,
)
from ybnode.domain.ports.catalog_ports import UniverseRepositoryPort, ReleaseCatalogPort
from ybnode.domain.services.universe_lookup import require_universe
from ybnode.domain.value_objects.command_types import (
    ConfigureKind,
    SoftwareTaskSubType,
    ServerType,
)

logger = logging.getLogger(__name__)

SOFTWARE_TAGS = {
    SoftwareTaskSubType.DOWNLOAD: "download-software",
    SoftwareTaskSubType.INSTALL: "install-software",
}

GFLAGS_TAGS = {
    ServerType.MASTER: "master-gflags",
    ServerType.TSERVER: "tserver-gflags",
}


class ConfigureArgsBuilder:
    def __init__(
        self,
        universes: UniverseRepositoryPort,
        releases: ReleaseCatalogPort,
    ):
        self.universes = universes
        self.releases = releases
        self._variants: dict[ConfigureKind, Callable[[ConfigureParams], list[str]]] = {
            ConfigureKind.EVERYTHING: self._everything_args,
            ConfigureKind.SOFTWARE: self._software_args,
            ConfigureKind.GFLAGS: self._gflags_args,
        }

    def build(self, params: ConfigureParams) -> list[str]:
        universe = require_universe(self.universes, params)
        master_addresses = universe.get_master_addresses()
        if not master_addresses:
            raise NotFoundError(f"Universe {universe.name} has no master nodes")

        args = ["--master_addresses_for_tserver", master_addresses]
        if not params.is_master_in_shell_mode:
            args += ["--master_addresses_for_master", master_addresses]

        return args + self._variants[params.type](params)

    def _package_args(self, params: ConfigureParams) -> list[str]:
        package = None
        if params.yb_software_version:
            package = self.releases.get_release_by_version(params.yb_software_version)
        if package is None:
            raise ReleaseNotFoundError(params.yb_software_version)
        return ["--package", package]

    def _everything_args(self, params: ConfigureParams) -> list[str]:
        return self._package_args(params)

    def _software_args(self, params: ConfigureParams) -> list[str]:
        args = self._package_args(params)
        value = params.get_property(TASK_SUB_TYPE_PROPERTY)
        sub_type = _lookup_enum(SoftwareTaskSubType, TASK_SUB_TYPE_PROPERTY, value)
        return args + ["--tags", SOFTWARE_TAGS[sub_type]]

    def _gflags_args(self, params: ConfigureParams) -> list[str]:
        if not params.gflags:
            raise EmptyInputError("Empty GFlags data provided")

        value = params.get_property(PROCESS_TYPE_PROPERTY)
        server_type = _lookup_enum(ServerType, PROCESS_TYPE_PROPERTY, value)
        logger.debug(
            "Replacing %d %s gflags on %s",
            len(params.gflags), server_type.value, params.node_name,
        )
        return [
            "--tags", GFLAGS_TAGS[server_type],
            "--replace_gflags",
            "--gflags", json.dumps(params.gflags, separators=(",", ":")),
        ]


def _lookup_enum(enum_cls, property_name, value):
    if value is None:
        raise InvalidPropertyError(property_name, value)
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidPropertyError(property_name, value) from None
