"""Server-side key material for field protection.

The master key and the fingerprint pepper are loaded once at process start
and handed to the engine as an immutable :class:`KeyMaterial`.
"""

import hashlib
import re
import secrets
from dataclasses import dataclass, field

from agent_vault.lib.protection.errors import ConfigurationError

KEY_SIZE = 32  # AES-256
MIN_PEPPER_LENGTH = 16

_HEX = re.compile(r"(?:[0-9a-f]{2})+")


@dataclass(frozen=True)
class KeyMaterial:
    """Immutable master key and fingerprint pepper."""

    master_key: bytes = field(repr=False)
    pepper: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.master_key) != KEY_SIZE:
            msg = f"Master key must be {KEY_SIZE} bytes, got {len(self.master_key)}"
            raise ConfigurationError(msg)
        if len(self.pepper) < MIN_PEPPER_LENGTH:
            msg = f"Hash pepper must be at least {MIN_PEPPER_LENGTH} bytes"
            raise ConfigurationError(msg)
        if self.pepper == self.master_key:
            msg = "Hash pepper must differ from the encryption key"
            raise ConfigurationError(msg)

    @classmethod
    def from_hex(cls, master_key_hex: str | None, pepper: str | None) -> "KeyMaterial":
        """Build key material from a hex-encoded master key and a pepper string.

        Args:
            master_key_hex: 64 hex characters encoding a 256-bit key.
            pepper: Secret pepper for search fingerprints.

        Returns:
            The validated KeyMaterial.

        Raises:
            ConfigurationError: If either value is absent or malformed.
        """
        if not master_key_hex:
            msg = "Encryption key is not configured"
            raise ConfigurationError(msg)
        if not pepper:
            msg = "Hash pepper is not configured"
            raise ConfigurationError(msg)

        normalized = master_key_hex.strip().lower()
        if not _HEX.fullmatch(normalized):
            msg = "Encryption key must be hex encoded"
            raise ConfigurationError(msg)

        return cls(master_key=bytes.fromhex(normalized), pepper=pepper.encode("utf-8"))

    @property
    def key_id(self) -> str:
        """Short non-secret identifier of the master key, for logs."""
        return hashlib.sha256(b"agent-vault-key-id:" + self.master_key).hexdigest()[:8]


def generate_master_key_hex() -> str:
    """Generate a fresh random 256-bit master key, hex encoded."""
    return secrets.token_hex(KEY_SIZE)


def generate_pepper() -> str:
    """Generate a fresh random fingerprint pepper."""
    return secrets.token_urlsafe(32)
