"""Deterministic search fingerprints for encrypted identifier columns.

A fingerprint is an HMAC-SHA256 of the normalized plaintext, keyed by the
server-side pepper. It is stored next to the encrypted value so that equality
lookups (sign-in by email or phone) never require decrypting rows.
"""

import hashlib
import hmac

from agent_vault.core.sensitivity import FieldKind


def is_email_like(value: str) -> bool:
    """Return True if the value looks like an email address."""
    return "@" in value


def normalize(value: str, kind: FieldKind | None = None) -> str:
    """Normalize a value before fingerprinting.

    Everything is trimmed. Email values are additionally case-folded. When no
    kind is given, values containing ``@`` are treated as email.

    Args:
        value: The plaintext value.
        kind: Optional field kind the value belongs to.

    Returns:
        The normalized value.
    """
    trimmed = value.strip()
    if kind == FieldKind.EMAIL or (kind is None and is_email_like(trimmed)):
        return trimmed.casefold()
    return trimmed


def keyed_digest(pepper: bytes, normalized: str) -> str:
    """Compute the hex HMAC-SHA256 of an already-normalized value."""
    return hmac.new(pepper, normalized.encode("utf-8"), hashlib.sha256).hexdigest()
