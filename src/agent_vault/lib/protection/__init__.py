"""Field protection library — tiered encryption, hashing and search fingerprints.

Public API:
    - FieldProtectionEngine: protect, unprotect, verify and fingerprint fields
    - KeyMaterial: Immutable master key and pepper
    - generate_master_key_hex / generate_pepper: Fresh secret generation
    - FieldPolicy / field_policies: Tier declarations read from schemas
    - protect_record / reveal_record: Whole-record protection
    - lookup_fingerprints: Fingerprints for sign-in identifier lookup
    - ProtectionError and subclasses: Error taxonomy
"""

from agent_vault.lib.protection.engine import FieldProtectionEngine
from agent_vault.lib.protection.errors import (
    ConfigurationError,
    IntegrityError,
    MalformedInputError,
    ProtectionError,
    UnsupportedFieldKindError,
    UnsupportedOperationError,
    UnsupportedTierError,
)
from agent_vault.lib.protection.keys import KeyMaterial, generate_master_key_hex, generate_pepper
from agent_vault.lib.protection.record import (
    FieldPolicy,
    field_policies,
    lookup_fingerprints,
    protect_record,
    reveal_record,
)

__all__ = [
    "ConfigurationError",
    "FieldPolicy",
    "FieldProtectionEngine",
    "IntegrityError",
    "KeyMaterial",
    "MalformedInputError",
    "ProtectionError",
    "UnsupportedFieldKindError",
    "UnsupportedOperationError",
    "UnsupportedTierError",
    "field_policies",
    "generate_master_key_hex",
    "generate_pepper",
    "lookup_fingerprints",
    "protect_record",
    "reveal_record",
]
