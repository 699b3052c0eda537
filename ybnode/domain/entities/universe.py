"""
Universe Entity

Architectural Intent:
- Read-only snapshot of a deployed cluster as the composer needs it
- Loaded by a repository adapter; never mutated by the domain
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

DEFAULT_MASTER_RPC_PORT = 7100


@dataclass(frozen=True)
class Universe:
    uuid: UUID
    name: str
    access_key_code: Optional[str] = None
    master_hosts: tuple[str, ...] = ()
    master_rpc_port: int = DEFAULT_MASTER_RPC_PORT

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Universe name cannot be empty")
        if not (1 <= self.master_rpc_port <= 65535):
            raise ValueError(
                f"Master RPC port must be 1-65535, got {self.master_rpc_port}"
            )

    def get_master_addresses(self) -> str:
        """Comma separated host:port list of the universe's masters."""
        return ",".join(f"{host}:{self.master_rpc_port}" for host in self.master_hosts)
