"""Agent PIN policy.

PINs are stored only as ``system-code`` digests and checked with
:meth:`FieldProtectionEngine.verify`; they are never decrypted.
"""

import re

from loguru import logger

from agent_vault.core.sensitivity import ProtectionTier
from agent_vault.lib.protection.engine import FieldProtectionEngine

PIN_MIN_LENGTH = 6
PIN_MAX_LENGTH = 24
_PIN_PATTERN = re.compile(rf"[0-9]{{{PIN_MIN_LENGTH},{PIN_MAX_LENGTH}}}")


class InvalidPinError(ValueError):
    """PIN does not satisfy the PIN policy."""


class PinNotSetError(LookupError):
    """No PIN has been set for the account."""


def validate_pin(pin: str) -> str:
    """Validate a PIN against the policy.

    Args:
        pin: The submitted PIN.

    Returns:
        The PIN unchanged.

    Raises:
        InvalidPinError: If the PIN is not 6 to 24 digits.
    """
    if not _PIN_PATTERN.fullmatch(pin):
        msg = f"PIN must be {PIN_MIN_LENGTH} to {PIN_MAX_LENGTH} digits"
        raise InvalidPinError(msg)
    return pin


def set_pin(engine: FieldProtectionEngine, pin: str) -> str:
    """Validate and hash a new PIN for storage."""
    return engine.protect(validate_pin(pin), ProtectionTier.SYSTEM_CODE)


def verify_pin(engine: FieldProtectionEngine, pin: str, stored: str | None) -> bool:
    """Check a submitted PIN against the stored digest.

    Raises:
        PinNotSetError: If the account has no PIN.
    """
    if not stored:
        msg = "No PIN set for this account"
        raise PinNotSetError(msg)
    matched = engine.verify(pin, stored, ProtectionTier.SYSTEM_CODE)
    if not matched:
        logger.info("PIN verification failed")
    return matched
