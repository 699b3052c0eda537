from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class KeyInfo:
    """File locations backing an access key. Any subset may be present."""
    public_key: Optional[str] = None
    private_key: Optional[str] = None
    vault_file: Optional[str] = None
    vault_password_file: Optional[str] = None


@dataclass(frozen=True)
class AccessKey:
    """
    Entity representing credentials registered for a provider under a key code.
    """
    key_code: str
    provider_uuid: UUID
    key_info: KeyInfo = field(default_factory=KeyInfo)

    def __post_init__(self) -> None:
        if not self.key_code:
            raise ValueError("Access key code cannot be empty")
