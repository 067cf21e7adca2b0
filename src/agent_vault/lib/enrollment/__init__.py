"""Enrollment helpers — agent IDs, access codes and PIN policy.

Public API:
    - generate_agent_id: New agent field ID
    - generate_access_code: One-time access code
    - validate_pin / set_pin / verify_pin: PIN policy over the system-code tier
    - InvalidPinError / PinNotSetError: PIN errors
"""

from agent_vault.lib.enrollment.identifiers import generate_access_code, generate_agent_id
from agent_vault.lib.enrollment.pin import InvalidPinError, PinNotSetError, set_pin, validate_pin, verify_pin

__all__ = [
    "InvalidPinError",
    "PinNotSetError",
    "generate_access_code",
    "generate_agent_id",
    "set_pin",
    "validate_pin",
    "verify_pin",
]
