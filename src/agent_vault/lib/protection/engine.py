"""Field protection engine.

Applies the tier-specific transform to a sensitive field on write, reverses
it on read, verifies submitted credentials, and derives search fingerprints.
The engine holds only immutable key material and a bcrypt context, so a single
instance can be shared across request handlers.
"""

from loguru import logger
from passlib.exc import PasswordValueError

from agent_vault.core.security import DEFAULT_ROUNDS, hash_code, make_code_context, verify_code
from agent_vault.core.sensitivity import FieldKind, ProtectionTier, tier_for_kind
from agent_vault.lib.protection import ciphers
from agent_vault.lib.protection.errors import (
    ConfigurationError,
    MalformedInputError,
    ProtectionError,
    UnsupportedFieldKindError,
    UnsupportedOperationError,
    UnsupportedTierError,
)
from agent_vault.lib.protection.fingerprint import keyed_digest, normalize
from agent_vault.lib.protection.keys import KeyMaterial


def _coerce_tier(tier: ProtectionTier | str) -> ProtectionTier:
    try:
        return ProtectionTier(tier)
    except ValueError as e:
        msg = f"Unsupported protection tier: {tier!r}"
        raise UnsupportedTierError(msg) from e


def _coerce_kind(kind: FieldKind | str) -> FieldKind:
    try:
        return FieldKind(kind)
    except ValueError as e:
        msg = f"Unsupported field kind: {kind!r}"
        raise UnsupportedFieldKindError(msg) from e


class FieldProtectionEngine:
    """Tiered encryption, hashing and fingerprinting of agent PII fields.

    Args:
        keys: Master key and pepper, loaded once at process start.
        system_code_rounds: bcrypt work factor for the ``system-code`` tier.
    """

    def __init__(self, keys: KeyMaterial, system_code_rounds: int = DEFAULT_ROUNDS) -> None:
        if not isinstance(keys, KeyMaterial):
            msg = "FieldProtectionEngine requires KeyMaterial"
            raise ConfigurationError(msg)
        try:
            self._code_context = make_code_context(system_code_rounds)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self._keys = keys
        self.system_code_rounds = system_code_rounds

    @property
    def key_id(self) -> str:
        """Non-secret identifier of the master key in use."""
        return self._keys.key_id

    def protect(self, plaintext: str, tier: ProtectionTier | str) -> str:
        """Protect a plaintext value for persistence.

        Empty input returns an empty string without applying any transform.

        Args:
            plaintext: The value to protect.
            tier: The field's declared protection tier.

        Returns:
            The opaque protected value.

        Raises:
            UnsupportedTierError: If the tier is not recognized.
            MalformedInputError: If a ``system-code`` value contains NUL bytes
                or exceeds the bcrypt secret size limit.
        """
        resolved = _coerce_tier(tier)
        if plaintext == "":
            return ""

        logger.debug(f"Protecting value under tier '{resolved}' (key {self.key_id})")
        if resolved is ProtectionTier.HIGHEST:
            return ciphers.encrypt_gcm(self._keys.master_key, plaintext)
        if resolved in (ProtectionTier.STRONG, ProtectionTier.BASIC):
            return ciphers.encrypt_cbc(self._keys.master_key, plaintext)
        try:
            return hash_code(self._code_context, plaintext)
        except PasswordValueError as e:
            msg = f"Value cannot be stored under tier '{resolved}': {e}"
            raise MalformedInputError(msg) from e

    def unprotect(self, protected: str, tier: ProtectionTier | str) -> str:
        """Recover the plaintext of a value protected under a reversible tier.

        Args:
            protected: The stored protected value.
            tier: The tier the value was protected under.

        Returns:
            The plaintext, or an empty string for empty input.

        Raises:
            UnsupportedTierError: If the tier is not recognized.
            UnsupportedOperationError: If the tier is ``system-code``.
            MalformedInputError: If the value does not match the tier's format.
            IntegrityError: If a ``highest`` tier value fails authentication.
        """
        resolved = _coerce_tier(tier)
        if not resolved.reversible:
            msg = f"Values under tier '{resolved}' are one-way hashes and cannot be unprotected"
            raise UnsupportedOperationError(msg)
        if protected == "":
            return ""

        if resolved is ProtectionTier.HIGHEST:
            return ciphers.decrypt_gcm(self._keys.master_key, protected)
        return ciphers.decrypt_cbc(self._keys.master_key, protected)

    def verify(self, plaintext: str, stored: str, tier: ProtectionTier | str) -> bool:
        """Check a submitted plaintext against a stored protected value.

        ``system-code`` values are checked against the bcrypt digest. Reversible
        tiers are decrypted and compared by exact equality; a decryption
        failure counts as a mismatch rather than an error.

        Raises:
            UnsupportedTierError: If the tier is not recognized.
        """
        resolved = _coerce_tier(tier)
        if not plaintext or not stored:
            return False

        if resolved is ProtectionTier.SYSTEM_CODE:
            return verify_code(self._code_context, plaintext, stored)

        try:
            return self.unprotect(stored, resolved) == plaintext
        except ProtectionError as e:
            logger.warning(f"Verification under tier '{resolved}' failed to decrypt: {type(e).__name__}")
            return False

    def fingerprint(self, plaintext: str, kind: FieldKind | str | None = None) -> str:
        """Derive the deterministic search fingerprint of a value.

        The same normalization is applied whether the fingerprint is computed
        when the field is written or when it is queried.

        Args:
            plaintext: The value to fingerprint.
            kind: Optional field kind; email values are case-folded.

        Returns:
            Hex HMAC-SHA256 of the normalized value, or an empty string for
            empty input.

        Raises:
            UnsupportedFieldKindError: If the kind is not recognized.
            UnsupportedOperationError: If the kind is stored under the
                ``highest`` tier.
        """
        resolved_kind = _coerce_kind(kind) if kind is not None else None
        if resolved_kind is not None and tier_for_kind(resolved_kind) is ProtectionTier.HIGHEST:
            msg = f"Fields of kind '{resolved_kind}' must not be fingerprinted"
            raise UnsupportedOperationError(msg)

        normalized = normalize(plaintext, resolved_kind)
        if normalized == "":
            return ""
        return keyed_digest(self._keys.pepper, normalized)
