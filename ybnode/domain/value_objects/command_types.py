"""
Command Type Enumerations

Architectural Intent:
- Closed sets of tags the composer branches on
- Enum values are the literal strings the provisioning executable expects
"""

from enum import Enum


class NodeCommandType(Enum):
    PROVISION = "provision"
    CONFIGURE = "configure"
    CONTROL = "control"
    LIST = "list"
    DESTROY = "destroy"

    @property
    def verb(self) -> str:
        return self.value


class CloudType(Enum):
    AWS = "aws"
    GCP = "gcp"
    AZU = "azu"
    DOCKER = "docker"
    ONPREM = "onprem"


class ConfigureKind(Enum):
    """What a configure command pushes to the node."""
    EVERYTHING = "Everything"
    SOFTWARE = "Software"
    GFLAGS = "GFlags"


class SoftwareTaskSubType(Enum):
    DOWNLOAD = "Download"
    INSTALL = "Install"


class ServerType(Enum):
    MASTER = "MASTER"
    TSERVER = "TSERVER"
