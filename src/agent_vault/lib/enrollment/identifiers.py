"""Agent field IDs and one-time access codes."""

import secrets
import string
from datetime import UTC, datetime

AGENT_ID_PREFIX = "JCGNIMCAC"
AGENT_ID_LENGTH = 15
_AGENT_ID_ALPHABET = string.ascii_uppercase + string.digits

# No 0/O or 1/I, to survive being read aloud or retyped
ACCESS_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ACCESS_CODE_MIN_LENGTH = 8
ACCESS_CODE_MAX_LENGTH = 12


def generate_agent_id(now: datetime | None = None) -> str:
    """Generate an agent field ID such as ``JCGNIMCAC25K7Q2``.

    The ID is the fixed prefix, the two-digit enrollment year, and random
    uppercase alphanumerics up to a total of 15 characters.

    Args:
        now: Enrollment time; defaults to the current UTC time.

    Returns:
        The agent field ID.
    """
    year = (now or datetime.now(UTC)).strftime("%y")
    prefix = f"{AGENT_ID_PREFIX}{year}"
    suffix = "".join(secrets.choice(_AGENT_ID_ALPHABET) for _ in range(AGENT_ID_LENGTH - len(prefix)))
    return f"{prefix}{suffix}"


def generate_access_code(length: int | None = None) -> str:
    """Generate a random access code from an unambiguous alphabet.

    Args:
        length: Code length between 8 and 12; random in that range if omitted.

    Returns:
        The access code.

    Raises:
        ValueError: If the requested length is out of range.
    """
    if length is None:
        length = ACCESS_CODE_MIN_LENGTH + secrets.randbelow(ACCESS_CODE_MAX_LENGTH - ACCESS_CODE_MIN_LENGTH + 1)
    if not ACCESS_CODE_MIN_LENGTH <= length <= ACCESS_CODE_MAX_LENGTH:
        msg = f"Access code length must be between {ACCESS_CODE_MIN_LENGTH} and {ACCESS_CODE_MAX_LENGTH}"
        raise ValueError(msg)
    return "".join(secrets.choice(ACCESS_CODE_ALPHABET) for _ in range(length))
