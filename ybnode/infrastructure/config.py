"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from JSON files
- Provides typed access to all ybnode settings
- Falls back to defaults when the config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- docker.network has no default; an empty value means "not configured"
"""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import json
import logging
import os

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DevopsConfig:
    """Where and how the provisioning executable is run."""
    home: str = "."
    script: str = "bin/ybcloud.sh"
    control_host: str = ""
    command_timeout: int = 3600


@dataclass(frozen=True)
class DockerConfig:
    network: str = ""


@dataclass(frozen=True)
class CatalogConfig:
    db_path: str = "ybnode.db"


@dataclass(frozen=True)
class TelemetryConfig:
    """OpenTelemetry configuration."""
    endpoint: str = ""
    insecure: bool = False


@dataclass(frozen=True)
class YbNodeConfig:
    """Root configuration for ybnode."""
    devops: DevopsConfig = field(default_factory=DevopsConfig)
    docker: DockerConfig = field(default_factory=DockerConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    log_level: str = "WARNING"

    @property
    def docker_network(self) -> Optional[str]:
        return self.docker.network or None


def _env_override(data: dict, prefix: str = "YBNODE") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern YBNODE_SECTION_KEY.
    For example: YBNODE_DOCKER_NETWORK=yugabyte-net, YBNODE_DEVOPS_HOME=/opt/yugabyte/devops
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        parts = key[len(prefix) + 1:].lower().split("_", 1)
        if len(parts) == 2 and parts[0] in _SECTIONS:
            section, field_name = parts
            data.setdefault(section, {})
            data[section][field_name] = value
        else:
            data[key[len(prefix) + 1:].lower()] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    # Convert string numbers to int/bool
    for f in dataclasses.fields(cls):
        if f.name in filtered and isinstance(filtered[f.name], str):
            if f.type == "int":
                filtered[f.name] = int(filtered[f.name])
            elif f.type == "bool":
                filtered[f.name] = filtered[f.name].lower() in ("true", "1", "yes")

    return cls(**filtered)


_SECTIONS = {
    "devops": DevopsConfig,
    "docker": DockerConfig,
    "catalog": CatalogConfig,
    "telemetry": TelemetryConfig,
}


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "YBNODE",
) -> YbNodeConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (YBNODE_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to ybnode.json in CWD.
        env_prefix: Environment variable prefix. Defaults to YBNODE.
    """
    config_path = Path(path) if path else Path("ybnode.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    sections = {
        name: _build_sub_config(cls, data.get(name, {}))
        for name, cls in _SECTIONS.items()
    }
    return YbNodeConfig(**sections, log_level=data.get("log_level", "WARNING"))
